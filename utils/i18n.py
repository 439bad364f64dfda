"""
Модуль: `utils/i18n.py`.
Назначение: Выбор языка интерфейса и перевод строк по ключу с явно переданной локалью.
"""

from __future__ import annotations

from flask import Request

DEFAULT_LANGUAGE = "en"

TRANSLATIONS: dict[str, dict] = {
    "en": {
        "imageUpload": {
            "title": "Image Upload",
            "subtitle": "Upload an image and get a shareable link",
            "form": {
                "title": "Upload your image",
                "selectImage": "Select an image",
                "uploadButton": "Upload Image",
                "uploadingButton": "Uploading...",
                "uploadAnother": "Upload another image",
            },
            "preview": {
                "title": "Preview",
            },
            "success": {
                "message": "Image uploaded successfully!",
                "viewFullImage": "View full image",
            },
            "error": {
                "title": "Upload failed",
                "generic": "Failed to upload image",
                "network": "Network error. Please check your connection and try again.",
            },
        },
    },
    "ru": {
        "imageUpload": {
            "title": "Загрузка изображений",
            "subtitle": "Загрузите изображение и получите ссылку на него",
            "form": {
                "title": "Загрузите изображение",
                "selectImage": "Выберите изображение",
                "uploadButton": "Загрузить",
                "uploadingButton": "Загрузка...",
                "uploadAnother": "Загрузить другое изображение",
            },
            "preview": {
                "title": "Предпросмотр",
            },
            "success": {
                "message": "Изображение успешно загружено!",
                "viewFullImage": "Открыть изображение",
            },
            "error": {
                "title": "Ошибка загрузки",
                "generic": "Не удалось загрузить изображение",
                "network": "Ошибка сети. Проверьте подключение и повторите попытку.",
            },
        },
    },
}


def translate(key: str, locale: str | None = None) -> str:
    """Возвращает строку по ключу вида `a.b.c`; при отсутствии перевода – сам ключ."""
    catalog = TRANSLATIONS.get((locale or "").strip().lower()) or TRANSLATIONS[DEFAULT_LANGUAGE]

    value: object = catalog
    for part in key.split("."):
        if isinstance(value, dict) and part in value:
            value = value[part]
        else:
            return key

    return value if isinstance(value, str) else key


def is_supported_language(lang: str | None, supported_languages: tuple[str, ...]) -> bool:
    if not lang:
        return False
    return lang.strip().lower() in supported_languages


def _normalize_language(lang: str | None, supported_languages: tuple[str, ...], default_language: str) -> str:
    if not lang:
        return default_language
    normalized = lang.strip().lower()
    if normalized in supported_languages:
        return normalized
    return default_language


def resolve_request_language(
    request: Request,
    url_lang: str | None,
    supported_languages: tuple[str, ...],
    cookie_name: str,
    default_language: str,
) -> str:
    """Язык запроса: сегмент URL, затем cookie, затем Accept-Language."""
    default = _normalize_language(default_language, supported_languages, supported_languages[0])

    if is_supported_language(url_lang, supported_languages):
        return url_lang.strip().lower()

    cookie_lang = request.cookies.get(cookie_name)
    if is_supported_language(cookie_lang, supported_languages):
        return cookie_lang.strip().lower()

    preferred = request.accept_languages.best_match(supported_languages)
    if preferred:
        return preferred

    return default
