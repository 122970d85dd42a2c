from __future__ import annotations

from math import cos, radians, sin

from PyQt6.QtCore import QPointF, QRectF
from PyQt6.QtGui import QBrush, QLinearGradient, QPainter

from lazytimer.backgrounds.base import BaseBackground, to_qcolor
from lazytimer.core.gradients import RGBA


class LinearBackground(BaseBackground):
    def __init__(self, colors: tuple[RGBA, ...], angle: float) -> None:
        self._colors = colors
        self._angle = angle

    def render(self, painter: QPainter, rect: QRectF) -> None:
        if not self._colors:
            return
        if len(self._colors) == 1:
            painter.fillRect(rect, to_qcolor(self._colors[0]))
            return

        theta = radians(self._angle)
        dx, dy = cos(theta) * 0.5, sin(theta) * 0.5
        start = QPointF(rect.left() + rect.width() * (0.5 - dx), rect.top() + rect.height() * (0.5 - dy))
        end = QPointF(rect.left() + rect.width() * (0.5 + dx), rect.top() + rect.height() * (0.5 + dy))
        if start == end:
            start, end = rect.topLeft(), rect.bottomRight()

        gradient = QLinearGradient(start, end)
        last = len(self._colors) - 1
        for index, rgba in enumerate(self._colors):
            gradient.setColorAt(index / last, to_qcolor(rgba))
        painter.fillRect(rect, QBrush(gradient))
