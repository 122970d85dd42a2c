from __future__ import annotations

from lazytimer.backgrounds.base import BaseBackground
from lazytimer.backgrounds.image import ImageBackground
from lazytimer.backgrounds.linear import LinearBackground
from lazytimer.backgrounds.mesh import MeshBackground
from lazytimer.backgrounds.plain import TransparentBackground
from lazytimer.core import gradients


def renderer_for(background: gradients.Background) -> BaseBackground:
    if isinstance(background, gradients.ImageBackground):
        return ImageBackground(background.path)
    if isinstance(background, gradients.MeshBackground):
        return MeshBackground(background.colors)
    if isinstance(background, gradients.LinearBackground):
        return LinearBackground(background.colors, background.angle)
    return TransparentBackground()


__all__ = ["BaseBackground", "renderer_for"]
