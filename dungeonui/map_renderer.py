"""Draws the visible part of a grid map, its entities and a minimap.

The map is expected to offer ``width``, ``height``, ``cell(position)``
returning a one-character string (``'#'`` wall, ``'.'`` floor), and lists
``treasures`` and ``monsters`` whose items carry a ``position``; monsters
also carry an ``is_boss`` flag.
"""

from __future__ import annotations

from typing import Iterator, Optional

from .camera import Camera
from .core import BLANK, Color, Position, Rect, _blit_texture, _draw_rect

BACKGROUND_COLOR = Color(20, 20, 35, 255)
TEXT_COLOR = Color(220, 220, 255, 255)
BORDER_COLOR = Color(80, 80, 120, 255)
GLOW_COLOR = Color(100, 100, 180, 150)

WALL_COLOR = Color(70, 70, 95, 255)
FLOOR_COLOR = Color(45, 45, 60, 255)
HERO_COLOR = Color(50, 150, 220, 255)
MONSTER_COLOR = Color(180, 80, 80, 255)
BOSS_COLOR = Color(200, 50, 50, 255)
TREASURE_COLOR = Color(220, 180, 50, 255)

MINIMAP_BACKGROUND = Color(30, 30, 50, 200)
MINIMAP_FRAME = Color(100, 100, 150, 200)
MINIMAP_WALL = Color(100, 100, 130, 255)
MINIMAP_FLOOR = Color(50, 50, 70, 255)
MINIMAP_VIEW = Color(220, 220, 255, 200)


class MapRenderer:
    """Renders a map through a camera that follows the hero."""

    MINIMAP_SIZE = 150.0
    MINIMAP_BORDER = 2.0
    MINIMAP_MARGIN = 20.0

    def __init__(self, screen_width: int, screen_height: int, textures: Optional[dict] = None) -> None:
        self.map = None
        self.hero_position: Optional[Position] = None
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.cell_size = 40.0
        self.camera = Camera()
        self.background_color = BACKGROUND_COLOR
        self.text_color = TEXT_COLOR
        # Optional images keyed by "floor", "wall", "hero", "monster", "boss", "treasure".
        self.textures: dict = dict(textures or {})

    def initialize(self, game_map, hero_position: Optional[Position]) -> None:
        self.map = game_map
        self.hero_position = hero_position
        if hero_position is not None:
            self.camera.center_on(hero_position.x, hero_position.y)

    def update(self, delta_time: float) -> None:
        if self.hero_position is None or self.map is None:
            return
        self.camera.follow(
            self.hero_position.x, self.hero_position.y,
            self.map.width, self.map.height, self.cell_size,
        )

    def set_cell_size(self, size: float) -> None:
        self.cell_size = size

    def set_visible_range(self, cells_x: int, cells_y: int) -> None:
        self.camera.visible_cells_x = cells_x
        self.camera.visible_cells_y = cells_y
        if self.hero_position is not None:
            self.camera.center_on(self.hero_position.x, self.hero_position.y)

    def visible_cells(self) -> Iterator[tuple[int, int, str]]:
        """Yield ``(x, y, cell)`` for every map cell in the camera's view."""
        if self.map is None:
            return
        width, height = self.map.width, self.map.height
        start_x, start_y = int(self.camera.x), int(self.camera.y)
        end_x = min(start_x + self.camera.visible_cells_x + 1, width)
        end_y = min(start_y + self.camera.visible_cells_y + 1, height)
        for y in range(max(start_y, 0), end_y):
            for x in range(max(start_x, 0), end_x):
                yield x, y, self.map.cell(Position(x, y))

    def minimap_cell_size(self) -> float:
        if self.map is None or self.map.width <= 0 or self.map.height <= 0:
            return 0.0
        inner = self.MINIMAP_SIZE - 2 * self.MINIMAP_BORDER
        return min(inner / self.map.width, inner / self.map.height)

    def _cell_rect(self, x: int, y: int) -> Rect:
        sx, sy = self.camera.cell_screen_position(x, y, self.cell_size, self.screen_width)
        return Rect(sx, sy, self.cell_size, self.cell_size)

    def _draw_tile(self, surface, key: str, rect: Rect, fallback: Color) -> None:
        texture = self.textures.get(key)
        if texture is not None:
            _blit_texture(surface, texture, rect)
        else:
            _draw_rect(surface, rect, fallback)

    def draw(self, surface) -> None:
        if self.map is None:
            return
        self.screen_width, self.screen_height = surface.get_size()

        area = self.camera.visible_area(self.cell_size, self.screen_width)
        _draw_rect(surface, area, self.background_color)
        _draw_rect(surface, area, BORDER_COLOR, width=3)
        inner = Rect(area.x + 3, area.y + 3, area.width - 6, area.height - 6)
        _draw_rect(surface, inner, GLOW_COLOR, width=1)

        for x, y, cell in self.visible_cells():
            if cell == "#":
                self._draw_tile(surface, "wall", self._cell_rect(x, y), WALL_COLOR)
            elif cell == ".":
                self._draw_tile(surface, "floor", self._cell_rect(x, y), FLOOR_COLOR)

        self._draw_entities(surface)
        self._draw_minimap(surface)

    def _draw_entities(self, surface) -> None:
        if self.hero_position is None:
            return
        for treasure in self.map.treasures:
            pos = treasure.position
            if self.camera.is_cell_visible(pos.x, pos.y):
                self._draw_tile(surface, "treasure", self._cell_rect(pos.x, pos.y), TREASURE_COLOR)

        for monster in self.map.monsters:
            pos = monster.position
            if self.camera.is_cell_visible(pos.x, pos.y):
                key, color = ("boss", BOSS_COLOR) if monster.is_boss else ("monster", MONSTER_COLOR)
                self._draw_tile(surface, key, self._cell_rect(pos.x, pos.y), color)

        hero = self.hero_position
        if self.camera.is_cell_visible(hero.x, hero.y):
            self._draw_tile(surface, "hero", self._cell_rect(hero.x, hero.y), HERO_COLOR)

    def _draw_minimap(self, surface) -> None:
        size = self.MINIMAP_SIZE
        border = self.MINIMAP_BORDER
        left = self.screen_width - size - self.MINIMAP_MARGIN
        top = self.screen_height - size - self.MINIMAP_MARGIN
        cell = self.minimap_cell_size()

        _draw_rect(surface, Rect(left, top, size, size), MINIMAP_BACKGROUND)
        _draw_rect(surface, Rect(left, top, size, size), MINIMAP_FRAME, width=border)

        def mini_rect(x: float, y: float) -> Rect:
            return Rect(left + border + x * cell, top + border + y * cell, cell, cell)

        for y in range(self.map.height):
            for x in range(self.map.width):
                kind = self.map.cell(Position(x, y))
                color = {"#": MINIMAP_WALL, ".": MINIMAP_FLOOR}.get(kind, BLANK)
                if color != BLANK:
                    _draw_rect(surface, mini_rect(x, y), color)

        for treasure in self.map.treasures:
            _draw_rect(surface, mini_rect(treasure.position.x, treasure.position.y), TREASURE_COLOR)

        for monster in self.map.monsters:
            color = BOSS_COLOR if monster.is_boss else MONSTER_COLOR
            _draw_rect(surface, mini_rect(monster.position.x, monster.position.y), color)

        if self.hero_position is not None:
            _draw_rect(surface, mini_rect(self.hero_position.x, self.hero_position.y), HERO_COLOR)

        view = Rect(
            left + border + int(self.camera.x) * cell,
            top + border + int(self.camera.y) * cell,
            self.camera.visible_cells_x * cell,
            self.camera.visible_cells_y * cell,
        )
        _draw_rect(surface, view, MINIMAP_VIEW, width=1)