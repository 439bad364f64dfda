"""
Общие фикстуры pytest для ImgDrop.

- Приложение с папкой загрузок во временном каталоге
- Тестовый клиент Flask
- Минимальные байты PNG для загрузки
"""

import pytest

from app import create_app

# Сигнатура PNG плюс IHDR-заголовок; содержимое не декодируется сервером
PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n"
    b"\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06\x00\x00\x00\x1f\x15\xc4\x89"
)


@pytest.fixture
def uploads_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def app(uploads_dir):
    app = create_app({"TESTING": True, "UPLOAD_FOLDER": str(uploads_dir)})
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def png_bytes():
    return PNG_BYTES
