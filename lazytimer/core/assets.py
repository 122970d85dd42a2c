from __future__ import annotations

"""Загрузка пользовательских изображений фона с кэшированием в памяти."""

import logging
from pathlib import Path

from PyQt6.QtGui import QPixmap


logger = logging.getLogger(__name__)

_PIXMAP_CACHE: dict[str, QPixmap | None] = {}


def load_image(path: str) -> QPixmap | None:
    """Загружает `QPixmap` с кэшем; возвращает `None`, если путь пуст или файл невалиден."""
    if not path:
        return None
    if path in _PIXMAP_CACHE:
        return _PIXMAP_CACHE[path]

    file_path = Path(path).expanduser()
    if not file_path.is_file():
        logger.warning("Background image not found: %s", file_path)
        _PIXMAP_CACHE[path] = None
        return None

    pixmap = QPixmap(str(file_path))
    if pixmap.isNull():
        logger.warning("Background image could not be decoded: %s", file_path)
        _PIXMAP_CACHE[path] = None
        return None

    _PIXMAP_CACHE[path] = pixmap
    return pixmap


def forget_image(path: str) -> None:
    """Убирает путь из кэша, чтобы следующий вызов перечитал файл."""
    _PIXMAP_CACHE.pop(path, None)
