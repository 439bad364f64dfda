"""
Программа: «ImgDrop» – веб-приложение для загрузки и раздачи изображений.
Модуль: routes/api.py – API-маршруты.

Назначение модуля:
- Приём изображения из формы, проверка типа и размера, сохранение на диск.
- Выдача сохранённых файлов из папки загрузок с защитой от выхода за её пределы.
- Проверка состояния сервиса (health-check) для мониторинга и Docker.
"""

import time
from datetime import datetime, timezone

from flask import current_app, jsonify, make_response, request
from flask_babel import gettext as _
from werkzeug.exceptions import RequestEntityTooLarge

from config import Config
from utils.storage import InvalidFilenameError, UploadStorage, extension_from_filename

# Приблизительное время запуска процесса для поля uptime
_STARTED_AT = time.monotonic()


def _api_error(message: str, status: int = 400, **extra):
    return jsonify({"success": False, "error": message, **extra}), status


def _storage() -> UploadStorage:
    return current_app.extensions["upload_storage"]


def _too_large_error():
    max_mb = current_app.config["MAX_UPLOAD_SIZE"] // (1024 * 1024)
    return _api_error(_("File too large. Maximum size is %(size)sMB", size=max_mb), 400)


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def register_routes(app):
    @app.get("/api/health")
    def health():
        """Проверяет, что папка загрузок существует и доступна на запись."""
        try:
            storage = _storage()
            exists = storage.root_exists()
            writable = exists and storage.root_writable()

            status = {
                "status": "healthy",
                "timestamp": _utc_timestamp(),
                "uptime": time.monotonic() - _STARTED_AT,
                "environment": app.config["APP_ENV"],
                "checks": {
                    "uploadsDirectory": {
                        "exists": exists,
                        "writable": writable,
                    },
                },
            }

            if not (exists and writable):
                current_app.logger.warning("Папка загрузок недоступна: %s", storage.root)
                status["status"] = "unhealthy"
                status["message"] = "Uploads directory is not accessible or writable"
                return jsonify(status), 503

            return jsonify(status), 200

        except Exception as exc:
            current_app.logger.exception("Ошибка health-check")
            return (
                jsonify(
                    {
                        "status": "unhealthy",
                        "timestamp": _utc_timestamp(),
                        "error": str(exc) or "Unknown error",
                    }
                ),
                503,
            )

    @app.route("/api/upload-image", methods=["POST"])
    def upload_image():
        """Обработчик загрузки изображения."""
        try:
            file = request.files.get("image")
        except RequestEntityTooLarge:
            return _too_large_error()

        # Пустое имя приходит, когда в форме не выбран файл
        if file is None or file.filename == "":
            return _api_error(_("No image uploaded"), 400)

        if not Config.allowed_mime_type(file.mimetype):
            return _api_error(_("Invalid file type. Allowed types: JPEG, PNG, GIF, WebP"), 400)

        content = file.read()

        if len(content) > app.config["MAX_UPLOAD_SIZE"]:
            return _too_large_error()

        extension = extension_from_filename(file.filename, app.config["DEFAULT_EXTENSION"])

        try:
            file_name = _storage().save_new(content, extension)
        except Exception as exc:
            current_app.logger.exception("Ошибка сохранения изображения")
            return _api_error(_("Failed to upload image"), 500, details=str(exc) or "Unknown error")

        current_app.logger.info("Сохранено изображение %s (%d байт)", file_name, len(content))

        return jsonify(
            {
                "success": True,
                "imagePath": f"{app.config['UPLOADS_URL_PREFIX']}/{file_name}",
                "fileName": file_name,
                "size": len(content),
                "type": file.mimetype,
            }
        )

    # path-конвертер нужен, чтобы попытки обхода каталога доходили до проверки
    @app.get("/api/uploads/<path:filename>")
    def serve_upload(filename):
        """Отдаёт сохранённое изображение с долгим кешированием."""
        storage = _storage()
        try:
            if not storage.exists(filename):
                return _api_error(_("Image not found"), 404)
        except InvalidFilenameError:
            return _api_error(_("Invalid filename"), 400)

        try:
            content = storage.read(filename)
        except Exception:
            current_app.logger.exception("Ошибка выдачи изображения %s", filename)
            return _api_error(_("Failed to serve image"), 500)

        response = make_response(content)
        response.headers["Content-Type"] = Config.content_type_for(filename)
        response.headers["Content-Length"] = str(len(content))
        response.headers["Cache-Control"] = app.config["UPLOAD_CACHE_CONTROL"]
        return response
