from __future__ import annotations

from PyQt6.QtCore import QRectF
from PyQt6.QtGui import QPainter

from lazytimer.backgrounds.base import BaseBackground


class TransparentBackground(BaseBackground):
    """Leaves the surface see-through."""

    def render(self, painter: QPainter, rect: QRectF) -> None:
        return
