"""
Программа: «ImgDrop» – веб-приложение для загрузки и раздачи изображений.
Модуль: routes/pages.py – маршруты пользовательских страниц.
"""

from flask import abort, current_app, redirect, render_template, request, url_for

from utils.i18n import is_supported_language, resolve_request_language, translate


def _resolve_lang() -> str:
    app = current_app
    return resolve_request_language(
        request=request,
        url_lang=None,
        supported_languages=app.config["SUPPORTED_LANGUAGES"],
        cookie_name=app.config["LANG_COOKIE_NAME"],
        default_language=app.config["DEFAULT_LANGUAGE"],
    )


def register_routes(app):
    @app.get("/")
    def language_root():
        return redirect(url_for("index", lang=_resolve_lang()), code=302)

    @app.get("/<lang>/")
    def index(lang):
        """Страница с формой загрузки изображения."""
        if not is_supported_language(lang, app.config["SUPPORTED_LANGUAGES"]):
            abort(404)

        locale = lang.strip().lower()

        def t(key: str) -> str:
            return translate(key, locale)

        return render_template(
            "index.html",
            t=t,
            lang=locale,
            max_upload_mb=app.config["MAX_UPLOAD_SIZE"] // (1024 * 1024),
            accepted_types=",".join(app.config["ALLOWED_MIME_TYPES"]),
        )
