"""A smoothed camera over a grid map."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from .core import Rect

MAP_AREA_TOP = 150.0


@dataclass
class Camera:
    """A window of visible cells that follows a target across the map."""

    visible_cells_x: int = 15
    visible_cells_y: int = 13
    x: float = 0.0
    y: float = 0.0
    offset_x: float = 0.0
    offset_y: float = 0.0

    SMOOTHING: ClassVar[float] = 0.15

    def center_on(self, x: int, y: int) -> None:
        """Jump straight to a view centred on the given cell."""
        self.x = float(x - self.visible_cells_x // 2)
        self.y = float(y - self.visible_cells_y // 2)

    def follow(self, target_x: int, target_y: int, map_width: int, map_height: int, cell_size: float) -> None:
        """Ease towards the target, staying within the map."""
        goal_x = target_x - self.visible_cells_x / 2.0
        goal_y = target_y - self.visible_cells_y / 2.0

        self.x += (goal_x - self.x) * self.SMOOTHING
        self.y += (goal_y - self.y) * self.SMOOTHING

        self.x = max(0.0, min(self.x, float(map_width - self.visible_cells_x)))
        self.y = max(0.0, min(self.y, float(map_height - self.visible_cells_y)))

        self.offset_x = (self.x - math.floor(self.x)) * cell_size
        self.offset_y = (self.y - math.floor(self.y)) * cell_size

    def is_cell_visible(self, x: int, y: int) -> bool:
        left = int(self.x)
        top = int(self.y)
        return left <= x < left + self.visible_cells_x and top <= y < top + self.visible_cells_y

    def cell_screen_position(self, x: int, y: int, cell_size: float, screen_width: float) -> tuple[float, float]:
        """Top-left screen corner of a map cell."""
        area = self.visible_area(cell_size, screen_width)
        screen_x = (x - self.x) * cell_size + self.offset_x
        screen_y = (y - self.y) * cell_size + self.offset_y
        return area.x + screen_x, area.y + screen_y

    def visible_area(self, cell_size: float, screen_width: float) -> Rect:
        """The screen rectangle the map view occupies."""
        width = self.visible_cells_x * cell_size
        return Rect(
            (screen_width - width) / 2.0,
            MAP_AREA_TOP,
            width,
            self.visible_cells_y * cell_size,
        )