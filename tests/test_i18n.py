"""
Tests for translation lookup and request language resolution
"""

import pytest
from flask import Flask

from utils.i18n import is_supported_language, resolve_request_language, translate

SUPPORTED = ("en", "ru")


class TestTranslate:
    """Dotted-key lookup with an explicit locale"""

    def test_nested_key(self):
        assert translate("imageUpload.form.uploadButton", "en") == "Upload Image"

    def test_other_locale(self):
        assert translate("imageUpload.preview.title", "ru") == "Предпросмотр"

    def test_unknown_locale_falls_back_to_default(self):
        assert translate("imageUpload.title", "de") == translate("imageUpload.title", "en")

    @pytest.mark.parametrize("key", ["missing.key", "imageUpload.form", "imageUpload.title.extra"])
    def test_unknown_key_returns_key(self, key):
        assert translate(key, "en") == key

    def test_locales_share_keys(self):
        keys = [
            "imageUpload.error.generic",
            "imageUpload.error.network",
            "imageUpload.success.viewFullImage",
            "imageUpload.form.uploadAnother",
        ]
        for key in keys:
            assert translate(key, "ru") != key
            assert translate(key, "en") != key


class TestResolveRequestLanguage:
    """URL segment, then cookie, then Accept-Language"""

    @pytest.fixture
    def flask_app(self):
        return Flask(__name__)

    def _resolve(self, flask_app, url_lang=None, **request_kwargs):
        with flask_app.test_request_context("/", **request_kwargs):
            from flask import request

            return resolve_request_language(
                request=request,
                url_lang=url_lang,
                supported_languages=SUPPORTED,
                cookie_name="site_lang",
                default_language="en",
            )

    def test_url_language_wins(self, flask_app):
        assert self._resolve(flask_app, url_lang="RU", headers={"Cookie": "site_lang=en"}) == "ru"

    def test_cookie(self, flask_app):
        assert self._resolve(flask_app, headers={"Cookie": "site_lang=ru"}) == "ru"

    def test_accept_language(self, flask_app):
        assert self._resolve(flask_app, headers={"Accept-Language": "ru-RU,ru;q=0.9"}) == "ru"

    def test_default(self, flask_app):
        assert self._resolve(flask_app, url_lang="de") == "en"

    def test_is_supported_language(self):
        assert is_supported_language(" En ", SUPPORTED)
        assert not is_supported_language(None, SUPPORTED)
        assert not is_supported_language("fr", SUPPORTED)
