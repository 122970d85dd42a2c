from __future__ import annotations

"""Фон из пользовательского изображения; при ошибке загрузки рисуется затемнение."""

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QColor, QPainter

from lazytimer.backgrounds.base import BaseBackground
from lazytimer.core.assets import load_image


PLACEHOLDER = QColor(0, 0, 0, 77)


class ImageBackground(BaseBackground):
    def __init__(self, path: str) -> None:
        self._pixmap = load_image(path)

    def render(self, painter: QPainter, rect: QRectF) -> None:
        if self._pixmap is None:
            painter.fillRect(rect, PLACEHOLDER)
            return

        # Aspect fill: scale to cover, crop the overflow.
        scaled = self._pixmap.scaled(
            rect.size().toSize(),
            Qt.AspectRatioMode.KeepAspectRatioByExpanding,
            Qt.TransformationMode.SmoothTransformation,
        )
        source = QRectF(
            (scaled.width() - rect.width()) / 2,
            (scaled.height() - rect.height()) / 2,
            rect.width(),
            rect.height(),
        )
        painter.drawPixmap(rect, scaled, source)
