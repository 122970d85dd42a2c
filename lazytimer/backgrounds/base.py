from __future__ import annotations

from abc import ABC, abstractmethod

from PyQt6.QtCore import QRectF
from PyQt6.QtGui import QColor, QPainter

from lazytimer.core.gradients import RGBA


def to_qcolor(rgba: RGBA) -> QColor:
    red, green, blue, alpha = rgba
    return QColor(red, green, blue, alpha)


class BaseBackground(ABC):
    @abstractmethod
    def render(self, painter: QPainter, rect: QRectF) -> None:
        """Fill `rect` with the background."""
