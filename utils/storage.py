"""
Программа: «ImgDrop» – веб-приложение для загрузки и раздачи изображений.
Модуль: utils/storage.py – работа с папкой загрузок.

Назначение модуля:
- Создание папки загрузок и проверка её доступности на запись.
- Безопасное сопоставление имени файла с путём внутри папки загрузок.
- Запись новых изображений под сгенерированным именем и чтение сохранённых.
"""

from __future__ import annotations

import os
import re
import time
from typing import Callable

_EXTENSION_PATTERN = re.compile(r"^[a-z0-9]+$")


class InvalidFilenameError(ValueError):
    """Имя файла пустое или указывает за пределы папки загрузок."""


def is_safe_filename(filename: str | None) -> bool:
    """Быстрая проверка имени без обращения к файловой системе."""
    if not filename:
        return False
    return not any(part in filename for part in ("..", "/", "\\", "\x00"))


def extension_from_filename(filename: str | None, default: str = "jpg") -> str:
    """Возвращает расширение исходного файла в нижнем регистре или `default`."""
    if not filename or "." not in filename:
        return default
    extension = filename.rsplit(".", 1)[1].strip().lower()
    if not _EXTENSION_PATTERN.match(extension):
        return default
    return extension


class UploadStorage:
    """Плоская папка с загруженными изображениями."""

    def __init__(self, root: str, clock: Callable[[], float] = time.time):
        self.root = os.path.abspath(root)
        self._clock = clock

    def ensure_root(self) -> None:
        os.makedirs(self.root, exist_ok=True)

    def root_exists(self) -> bool:
        return os.path.isdir(self.root)

    def root_writable(self) -> bool:
        return os.access(self.root, os.W_OK)

    def resolve(self, filename: str) -> str:
        """Канонический путь файла; запрещает выход за пределы папки загрузок."""
        if not is_safe_filename(filename):
            raise InvalidFilenameError(filename)

        root = os.path.realpath(self.root)
        candidate = os.path.realpath(os.path.join(root, filename))
        if os.path.dirname(candidate) != root:
            raise InvalidFilenameError(filename)
        return candidate

    def exists(self, filename: str) -> bool:
        return os.path.isfile(self.resolve(filename))

    def read(self, filename: str) -> bytes:
        with open(self.resolve(filename), "rb") as fh:
            return fh.read()

    def save_new(self, content: bytes, extension: str) -> str:
        """Сохраняет байты под именем `image-<мс>.<ext>` и возвращает это имя.

        Файл создаётся в эксклюзивном режиме: при совпадении имени метка
        времени сдвигается на миллисекунду, существующий файл не перезаписывается.
        """
        self.ensure_root()
        stamp = int(self._clock() * 1000)
        while True:
            name = f"image-{stamp}.{extension}"
            path = os.path.join(self.root, name)
            try:
                fh = open(path, "xb")
            except FileExistsError:
                stamp += 1
                continue

            try:
                with fh:
                    fh.write(content)
            except OSError:
                # Не оставляем обрезанный файл
                if os.path.exists(path):
                    os.remove(path)
                raise
            return name
