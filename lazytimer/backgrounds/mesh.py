from __future__ import annotations

"""Сетчатый градиент 3x3: цвета узлов интерполируются сглаженным масштабированием."""

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QImage, QPainter

from lazytimer.backgrounds.base import BaseBackground, to_qcolor
from lazytimer.core.gradients import MESH_SIZE, RGBA


class MeshBackground(BaseBackground):
    def __init__(self, colors: tuple[RGBA, ...]) -> None:
        self._grid = QImage(MESH_SIZE, MESH_SIZE, QImage.Format.Format_ARGB32)
        for index, rgba in enumerate(colors[: MESH_SIZE * MESH_SIZE]):
            row, column = divmod(index, MESH_SIZE)
            self._grid.setPixelColor(column, row, to_qcolor(rgba))
        self._cache_key: tuple[int, int] | None = None
        self._cached: QImage | None = None

    def render(self, painter: QPainter, rect: QRectF) -> None:
        size = rect.size().toSize()
        if size.isEmpty():
            return
        key = (size.width(), size.height())
        if self._cached is None or self._cache_key != key:
            # Pixel centres sit on the grid nodes, so scale past the edges and crop.
            cell_w = size.width() / (MESH_SIZE - 1)
            cell_h = size.height() / (MESH_SIZE - 1)
            expanded = self._grid.scaled(
                int(cell_w * MESH_SIZE),
                int(cell_h * MESH_SIZE),
                Qt.AspectRatioMode.IgnoreAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
            self._cached = expanded.copy(int(cell_w / 2), int(cell_h / 2), size.width(), size.height())
            self._cache_key = key
        painter.drawImage(rect, self._cached)
