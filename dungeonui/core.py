"""Geometry, colours and per-frame input shared by the interface widgets."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import NamedTuple

import pygame


class Color(NamedTuple):
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def with_alpha(self, factor: float) -> Color:
        """Return the colour with its alpha set to ``factor`` of full opacity."""
        factor = min(max(factor, 0.0), 1.0)
        return self._replace(a=int(255.0 * factor))


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
BLANK = Color(0, 0, 0, 0)
LIGHTGRAY = Color(200, 200, 200)
GRAY = Color(130, 130, 130)
DARKGRAY = Color(80, 80, 80)
GREEN = Color(0, 228, 48)
DARKGREEN = Color(0, 117, 44)
RED = Color(230, 41, 55)
MAROON = Color(190, 33, 55)
PINK = Color(255, 109, 194)
BLUE = Color(0, 121, 241)
DARKBLUE = Color(0, 82, 172)
PURPLE = Color(200, 122, 255)
YELLOW = Color(253, 249, 0)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in screen coordinates."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside; left and top edges are inclusive."""
        return (
            self.x <= x < self.x + self.width
            and self.y <= y < self.y + self.height
        )

    def lerp(self, other: Rect, t: float) -> Rect:
        """Interpolate every field linearly towards ``other``."""
        return Rect(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
            self.width + (other.width - self.width) * t,
            self.height + (other.height - self.height) * t,
        )


@dataclass
class Position:
    """A cell position on the map grid."""

    x: int = 0
    y: int = 0


@dataclass
class InputState:
    """What the player did during one frame."""

    mouse: tuple[float, float] = (0.0, 0.0)
    mouse_pressed: bool = False
    keys_pressed: frozenset[str] = frozenset()
    chars: str = ""
    frame_time: float = 0.0
    time: float = 0.0


def ease_out_cubic(t: float) -> float:
    """Cubic ease-out curve mapping 0..1 onto 0..1."""
    return 1.0 - (1.0 - t) ** 3


def _pixel_radius(rect: Rect, roundness: float) -> int:
    if roundness <= 0:
        return 0
    return max(0, int(min(rect.width, rect.height) * min(roundness, 1.0) / 2))


def _draw_rect(surface, rect: Rect, color: Color, width: float = 0, roundness: float = 0.0) -> None:
    w, h = int(round(rect.width)), int(round(rect.height))
    if w <= 0 or h <= 0:
        return
    line = 0 if width <= 0 else max(1, int(width))
    layer = pygame.Surface((w, h), pygame.SRCALPHA)
    pygame.draw.rect(
        layer,
        tuple(color),
        layer.get_rect(),
        width=line,
        border_radius=_pixel_radius(rect, roundness),
    )
    surface.blit(layer, (int(round(rect.x)), int(round(rect.y))))


def _blit_texture(surface, texture, rect: Rect, tint: Color = WHITE) -> None:
    w, h = int(round(rect.width)), int(round(rect.height))
    if w <= 0 or h <= 0:
        return
    scaled = pygame.transform.scale(texture, (w, h))
    if tint != WHITE:
        scaled = scaled.copy()
        scaled.fill(tuple(tint), special_flags=pygame.BLEND_RGBA_MULT)
    surface.blit(scaled, (int(round(rect.x)), int(round(rect.y))))


@functools.lru_cache(maxsize=None)
def _default_font(size: int):
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _measure_text(font, text: str) -> tuple[int, int]:
    return font.size(text)


def _draw_text(surface, font, text: str, pos: tuple[float, float], color: Color) -> None:
    if not text:
        return
    image = font.render(text, True, tuple(color[:3]))
    if color.a < 255:
        image.set_alpha(color.a)
    surface.blit(image, (int(round(pos[0])), int(round(pos[1]))))