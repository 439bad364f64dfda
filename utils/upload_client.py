"""
Программа: «ImgDrop» – веб-приложение для загрузки и раздачи изображений.
Модуль: utils/upload_client.py – клиентское состояние формы загрузки.

Назначение модуля:
- Хранение выбранного файла и его предпросмотра в виде data URL.
- Отправка файла в API загрузки и фиксация результата (ссылка или ошибка).
- Сброс состояния для новой загрузки.
"""

from __future__ import annotations

import base64
import logging
import mimetypes
from dataclasses import dataclass

import requests

from utils.i18n import DEFAULT_LANGUAGE, translate

logger = logging.getLogger(__name__)

UPLOAD_ENDPOINT = "/api/upload-image"


@dataclass
class SelectedImage:
    filename: str
    content: bytes
    content_type: str


def build_data_url(content: bytes, content_type: str) -> str:
    """Кодирует байты файла в data URL для предпросмотра."""
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{content_type};base64,{encoded}"


class ImageUploadState:
    """Состояние формы загрузки: выбранный файл, предпросмотр, результат."""

    def __init__(
        self,
        base_url: str,
        locale: str = DEFAULT_LANGUAGE,
        session: requests.Session | None = None,
        timeout: float | None = 30.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.locale = locale
        self.session = session or requests.Session()
        self.timeout = timeout
        self.image_file: SelectedImage | None = None
        self.image_preview: str | None = None
        self.uploaded_image_url: str | None = None
        self.is_uploading = False
        self.error_message: str | None = None

    def select_image(self, filename: str, content: bytes, content_type: str | None = None) -> None:
        if content_type is None:
            content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"

        self.image_file = SelectedImage(filename=filename, content=content, content_type=content_type)
        self.error_message = None
        self.image_preview = build_data_url(content, content_type)

    def upload(self) -> None:
        """Отправляет выбранный файл; без выбранного файла ничего не делает."""
        if self.image_file is None:
            return

        self.is_uploading = True
        self.error_message = None

        image = self.image_file
        try:
            response = self.session.post(
                f"{self.base_url}{UPLOAD_ENDPOINT}",
                files={"image": (image.filename, image.content, image.content_type)},
                timeout=self.timeout,
            )
            data = response.json()
            # Прокси может вернуть JSON, который не является объектом
            if not isinstance(data, dict):
                data = {}

            if response.ok and data.get("success"):
                self.uploaded_image_url = data.get("imagePath")
            else:
                self.error_message = data.get("error") or translate("imageUpload.error.generic", self.locale)
        except (requests.RequestException, ValueError):
            logger.exception("Upload error")
            self.error_message = translate("imageUpload.error.network", self.locale)
        finally:
            self.is_uploading = False

    def reset(self) -> None:
        self.image_file = None
        self.image_preview = None
        self.uploaded_image_url = None
        self.error_message = None
        self.is_uploading = False
