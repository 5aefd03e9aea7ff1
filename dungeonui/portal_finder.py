"""Finding a wall cell next to the hero where a level-exit portal can open.

The map offers ``width``, ``height``, ``cell(position)`` returning a
one-character string (``'#'`` is a wall) and ``is_passable(x, y)``.
"""

from __future__ import annotations

import math
from typing import Optional

from .core import Position

WALL = "#"
MIN_SEARCH_RADIUS = 2
MAX_SEARCH_RADIUS = 10


def is_wall(game_map, position: Position) -> bool:
    if game_map is None:
        return False
    return game_map.cell(position) == WALL


def is_valid_portal_position(game_map, position: Position) -> bool:
    """A wall cell inside the map."""
    if game_map is None:
        return False
    if not (0 <= position.x < game_map.width and 0 <= position.y < game_map.height):
        return False
    return is_wall(game_map, position)


def is_position_reachable(game_map, start: Position, end: Position) -> bool:
    """Whether a straight grid line from ``start`` reaches ``end`` over passable cells.

    Every cell on the line except ``end`` itself must be passable,
    ``start`` included.
    """
    dx = abs(end.x - start.x)
    dy = abs(end.y - start.y)
    step_x = 1 if start.x < end.x else -1
    step_y = 1 if start.y < end.y else -1
    x, y = start.x, start.y
    err = dx - dy

    while (x, y) != (end.x, end.y):
        if not game_map.is_passable(x, y):
            return False
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += step_x
        if e2 < dx:
            err += dx
            y += step_y
    return True


def adjacent_wall_positions(game_map, position: Position) -> list[Position]:
    """Wall cells among the eight neighbours, column by column from the left."""
    return [
        candidate
        for dx in (-1, 0, 1)
        for dy in (-1, 0, 1)
        if (dx, dy) != (0, 0)
        for candidate in (Position(position.x + dx, position.y + dy),)
        if is_valid_portal_position(game_map, candidate)
    ]


def closest_reachable_wall(game_map, position: Position) -> Optional[Position]:
    """Search square rings of growing radius for the nearest reachable wall."""
    if game_map is None:
        return None
    for radius in range(MIN_SEARCH_RADIUS, MAX_SEARCH_RADIUS + 1):
        best: Optional[Position] = None
        best_distance = math.inf
        for dx in range(-radius, radius + 1):
            for dy in range(-radius, radius + 1):
                if abs(dx) != radius and abs(dy) != radius:
                    continue
                candidate = Position(position.x + dx, position.y + dy)
                if not is_valid_portal_position(game_map, candidate):
                    continue
                if not is_position_reachable(game_map, position, candidate):
                    continue
                distance = math.hypot(dx, dy)
                if distance < best_distance:
                    best_distance = distance
                    best = candidate
        if best is not None:
            return best
    return None


def find_nearest_wall_position(game_map, position: Position) -> Optional[Position]:
    """An adjacent wall if there is one, else the closest reachable one."""
    if game_map is None:
        return None
    adjacent = adjacent_wall_positions(game_map, position)
    if adjacent:
        return adjacent[0]
    return closest_reachable_wall(game_map, position)