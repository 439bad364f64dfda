"""
Программа: «ImgDrop» – веб-приложение для загрузки и раздачи изображений.
Модуль: config.py – конфигурация приложения.

Назначение модуля:
- Определение базовых параметров приложения Flask (окружение, уровень логирования, CORS).
- Настройка параметров загрузки файлов (папка, максимальный размер, допустимые MIME-типы).
- Таблица соответствия расширений и Content-Type для выдачи сохранённых файлов.
"""

import os


def _get_env_bool(name: str, default: bool = False) -> bool:
    """Преобразует переменную окружения в bool."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_env_int(name: str, default: int) -> int:
    """Преобразует переменную окружения в int."""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str] | None = None) -> list[str]:
    """Преобразует переменную окружения вида 'a,b,c' в список."""
    value = os.environ.get(name)
    if value is None:
        return list(default or [])
    return [item.strip() for item in value.split(",") if item.strip()]


def _app_env() -> str:
    """Метка окружения, которую показывает health-check."""
    return os.environ.get("APP_ENV", "").strip().lower() or "development"


class Config:
    """Базовая конфигурация приложения."""

    APP_ENV = _app_env()
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"

    CORS_ENABLED = _get_env_bool("CORS_ENABLED", default=False)
    CORS_ORIGINS = _get_env_list(
        "CORS_ORIGINS",
        default=[
            "http://127.0.0.1:5000",
            "http://localhost:5000",
        ],
    )

    UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER", "uploads")
    MAX_UPLOAD_SIZE = _get_env_int("MAX_UPLOAD_SIZE_MB", 10) * 1024 * 1024
    # Запас на заголовки multipart; сам размер файла проверяет обработчик
    MAX_CONTENT_LENGTH = MAX_UPLOAD_SIZE + 1024 * 1024
    ALLOWED_MIME_TYPES = (
        "image/jpeg",
        "image/jpg",
        "image/png",
        "image/gif",
        "image/webp",
    )
    DEFAULT_EXTENSION = "jpg"
    CONTENT_TYPES = {
        "jpg": "image/jpeg",
        "jpeg": "image/jpeg",
        "png": "image/png",
        "gif": "image/gif",
        "webp": "image/webp",
        "svg": "image/svg+xml",
    }
    FALLBACK_CONTENT_TYPE = "application/octet-stream"
    UPLOAD_CACHE_CONTROL = "public, max-age=31536000, immutable"
    UPLOADS_URL_PREFIX = "/api/uploads"

    SUPPORTED_LANGUAGES = ("en", "ru")
    DEFAULT_LANGUAGE = os.environ.get("DEFAULT_LANGUAGE", "en").strip().lower() or "en"
    LANG_COOKIE_NAME = os.environ.get("LANG_COOKIE_NAME", "site_lang").strip() or "site_lang"
    LANG_COOKIE_MAX_AGE = _get_env_int("LANG_COOKIE_MAX_AGE", 31536000)

    @staticmethod
    def allowed_mime_type(mime_type: str | None) -> bool:
        """Проверяет заявленный клиентом MIME-тип по белому списку."""
        return bool(mime_type) and mime_type.lower() in Config.ALLOWED_MIME_TYPES

    @staticmethod
    def content_type_for(filename: str) -> str:
        """Подбирает Content-Type по расширению имени файла."""
        if "." not in filename:
            return Config.FALLBACK_CONTENT_TYPE
        extension = filename.rsplit(".", 1)[1].lower()
        return Config.CONTENT_TYPES.get(extension, Config.FALLBACK_CONTENT_TYPE)
