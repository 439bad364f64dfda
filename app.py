"""
Название: «ImgDrop»
Язык: Python (Flask)
Краткое описание: веб-приложение для загрузки изображений на сервер и их последующей выдачи по ссылке
"""

import logging
import os

from flask import Flask, abort, g, request

from config import Config
from extensions import cors, babel
from routes.pages import register_routes as register_page_routes
from routes.api import register_routes as register_api_routes
from utils.i18n import is_supported_language, resolve_request_language
from utils.storage import UploadStorage


def create_app(config_overrides: dict | None = None) -> Flask:
    """Фабрика приложения, собирающая все модули воедино."""
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    app.logger.setLevel(getattr(logging, app.config["LOG_LEVEL"], logging.INFO))

    def select_locale() -> str:
        return getattr(g, "lang", app.config["DEFAULT_LANGUAGE"])

    babel.init_app(app, locale_selector=select_locale)

    if app.config["CORS_ENABLED"]:
        cors.init_app(
            app,
            resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        )

    storage = UploadStorage(app.config["UPLOAD_FOLDER"])
    app.extensions["upload_storage"] = storage

    # Папка создаётся при старте; обработчик загрузки создаёт её повторно при необходимости
    try:
        storage.ensure_root()
    except OSError:
        app.logger.exception("Не удалось создать папку загрузок %s", storage.root)

    # Регистрация роутов по модулям
    register_page_routes(app)
    register_api_routes(app)

    @app.before_request
    def resolve_request_language_middleware():
        supported_languages: tuple[str, ...] = app.config["SUPPORTED_LANGUAGES"]
        url_lang = (request.view_args or {}).get("lang")

        if url_lang is not None and not is_supported_language(url_lang, supported_languages):
            abort(404)

        g.lang = resolve_request_language(
            request=request,
            url_lang=url_lang,
            supported_languages=supported_languages,
            cookie_name=app.config["LANG_COOKIE_NAME"],
            default_language=app.config["DEFAULT_LANGUAGE"],
        )

    @app.after_request
    def persist_lang_cookie(response):
        supported_languages: tuple[str, ...] = app.config["SUPPORTED_LANGUAGES"]
        request_lang = (request.view_args or {}).get("lang")

        if request_lang and is_supported_language(request_lang, supported_languages):
            cookie_name = app.config["LANG_COOKIE_NAME"]
            request_lang = request_lang.strip().lower()
            if request.cookies.get(cookie_name) != request_lang:
                response.set_cookie(
                    cookie_name,
                    request_lang,
                    max_age=app.config["LANG_COOKIE_MAX_AGE"],
                    httponly=False,
                    samesite="Lax",
                    path="/",
                )

        return response

    @app.after_request
    def apply_security_headers(response):
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        response.headers.setdefault("Permissions-Policy", "camera=(), microphone=(), geolocation=()")
        return response

    return app


if __name__ == "__main__":
    app = create_app()
    is_production = os.environ.get("APP_ENV", "").lower() == "production"
    app.run(debug=not is_production)
