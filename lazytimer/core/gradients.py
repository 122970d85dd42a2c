from __future__ import annotations

"""Пресеты фонов и их разбор в варианты для отрисовки."""

from dataclasses import dataclass
from typing import Union


RGBA = tuple[int, int, int, int]

TRANSPARENT: RGBA = (0, 0, 0, 0)
DEFAULT_PRESET_INDEX = 10
MESH_SIZE = 3

KIND_NONE = "none"
KIND_IMAGE = "image"
KIND_MESH = "mesh"
KIND_LINEAR = "linear"


def parse_hex(value: str) -> RGBA:
    """Parses `#rgb`, `#rrggbb` or `#aarrggbb`; anything else is opaque black."""
    digits = "".join(ch for ch in value if ch.isalnum())
    try:
        number = int(digits, 16)
    except ValueError:
        return (0, 0, 0, 255)
    if len(digits) == 3:
        return ((number >> 8) * 17, (number >> 4 & 0xF) * 17, (number & 0xF) * 17, 255)
    if len(digits) == 6:
        return (number >> 16, number >> 8 & 0xFF, number & 0xFF, 255)
    if len(digits) == 8:
        return (number >> 16 & 0xFF, number >> 8 & 0xFF, number & 0xFF, number >> 24)
    return (0, 0, 0, 255)


@dataclass(frozen=True)
class GradientPreset:
    name: str
    colors: tuple[RGBA, ...]
    angle: float
    kind: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GradientPreset):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)


@dataclass(frozen=True)
class NoBackground:
    pass


@dataclass(frozen=True)
class ImageBackground:
    path: str


@dataclass(frozen=True)
class MeshBackground:
    colors: tuple[RGBA, ...]


@dataclass(frozen=True)
class LinearBackground:
    colors: tuple[RGBA, ...]
    angle: float


Background = Union[NoBackground, ImageBackground, MeshBackground, LinearBackground]


def _mesh(name: str, *hex_colors: str) -> GradientPreset:
    return GradientPreset(name=name, colors=tuple(parse_hex(c) for c in hex_colors), angle=0.0, kind=KIND_MESH)


GRADIENT_PRESETS: tuple[GradientPreset, ...] = (
    GradientPreset(name="None (Transparent)", colors=(TRANSPARENT,), angle=0.0, kind=KIND_NONE),
    GradientPreset(name="Custom Image", colors=(TRANSPARENT,), angle=0.0, kind=KIND_IMAGE),
    _mesh(
        "Love, Harmony & Peace",
        "#ffff00", "#e6a64a", "#c54b8c",
        "#e6a64a", "#c54b8c", "#d47a6e",
        "#c54b8c", "#d47a6e", "#c54b8c",
    ),
    _mesh(
        "Harmony & Creative",
        "#f5deb3", "#faef5a", "#ffff00",
        "#faef5a", "#e6a64a", "#c54b8c",
        "#ffff00", "#c54b8c", "#c54b8c",
    ),
    _mesh(
        "Focus & Achievements",
        "#00ffff", "#00bfff", "#007fff",
        "#00bfff", "#7654a7", "#eb284f",
        "#007fff", "#eb284f", "#eb284f",
    ),
    _mesh(
        "Focus, Achievements & Creative",
        "#f5deb3", "#7aefe1", "#00ffff",
        "#7aefe1", "#007fff", "#7654a7",
        "#00ffff", "#007fff", "#eb284f",
    ),
    _mesh(
        "Freedom & Deep Thinking",
        "#ccccff", "#d08cc6", "#c54b8c",
        "#d08cc6", "#d8396e", "#eb284f",
        "#c54b8c", "#eb284f", "#eb284f",
    ),
    _mesh(
        "Freedom, Thinking & Creative",
        "#f5deb3", "#e0d5d9", "#ccccff",
        "#e0d5d9", "#c54b8c", "#d8396e",
        "#ccccff", "#c54b8c", "#eb284f",
    ),
    _mesh(
        "Degrade Negative Thoughts",
        "#b22222", "#c17791", "#ccccff",
        "#c17791", "#c54b8c", "#e2a647",
        "#ccccff", "#c54b8c", "#ffff00",
    ),
    _mesh(
        "Cosmic Dream",
        "#1a1a2e", "#16213e", "#0f3460",
        "#533483", "#e94560", "#0f3460",
        "#1a1a2e", "#533483", "#16213e",
    ),
    _mesh(
        "Ocean Depth",
        "#0077b6", "#00b4d8", "#023e8a",
        "#0096c7", "#48cae4", "#0077b6",
        "#023e8a", "#00b4d8", "#90e0ef",
    ),
    _mesh(
        "Sunset Glow",
        "#ff6b6b", "#ffd93d", "#ff8c42",
        "#ff6b6b", "#ffd93d", "#ff8c42",
        "#c44569", "#f8b500", "#ff6348",
    ),
    _mesh(
        "Blossom",
        "#ff9a9e", "#fecfef", "#fad0c4",
        "#fbc2eb", "#a18cd1", "#fad0c4",
        "#ff9a9e", "#fecfef", "#fbc2eb",
    ),
    _mesh(
        "Northern Lights",
        "#0f0c29", "#302b63", "#24243e",
        "#00d9ff", "#00ff87", "#302b63",
        "#0f0c29", "#24243e", "#00d9ff",
    ),
    _mesh(
        "Ember",
        "#f12711", "#f5af19", "#c33764",
        "#f12711", "#ff6b35", "#f5af19",
        "#c33764", "#f12711", "#f5af19",
    ),
)


def resolve_gradient(index: int) -> GradientPreset:
    if 0 <= index < len(GRADIENT_PRESETS):
        return GRADIENT_PRESETS[index]
    return GRADIENT_PRESETS[DEFAULT_PRESET_INDEX]


def background_for(preset: GradientPreset, custom_image_path: str = "") -> Background:
    if preset.kind == KIND_NONE:
        return NoBackground()
    if preset.kind == KIND_IMAGE:
        return ImageBackground(path=custom_image_path)
    if preset.kind == KIND_MESH and len(preset.colors) >= MESH_SIZE * MESH_SIZE:
        return MeshBackground(colors=preset.colors[: MESH_SIZE * MESH_SIZE])
    return LinearBackground(colors=preset.colors, angle=preset.angle)
