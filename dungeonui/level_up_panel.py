"""A panel for spreading level-up points across strength, mana and health."""

from __future__ import annotations

import string
from enum import Enum
from typing import Callable, Optional

import pygame

from .button import Button
from .core import (
    GRAY,
    WHITE,
    Color,
    InputState,
    Rect,
    _default_font,
    _draw_rect,
    _draw_text,
    _measure_text,
)

DEFAULT_MAX_POINTS = 30
REQUIRED_POINTS = 30
MAX_INPUT_DIGITS = 2

_ARROW_SIZE = 25.0
_ARROW_SPACING = 5.0


class Stat(Enum):
    """A hero attribute that level-up points can be spent on."""

    STRENGTH = "Strength"
    MANA = "Mana"
    HEALTH = "Health"


_ROW_OFFSETS = {Stat.STRENGTH: 60.0, Stat.MANA: 110.0, Stat.HEALTH: 160.0}


class LevelUpPanel:
    """Lets the player allocate a fixed number of points and confirm them."""

    def __init__(self, bounds: Rect = Rect(100, 100, 450, 300), font=None) -> None:
        self.bounds = bounds
        self.font = font
        self.max_points = DEFAULT_MAX_POINTS
        self.points: dict[Stat, int] = {stat: 0 for stat in Stat}
        self.input_texts: dict[Stat, str] = {stat: "0" for stat in Stat}
        self.total_points_allocated = 0
        self.active_input: Optional[Stat] = None
        self.panel_color = Color(40, 40, 40, 240)
        self.border_color = WHITE
        self.text_color = WHITE
        self.input_background_color = Color(60, 60, 60, 255)
        self.input_active_color = Color(80, 80, 120, 255)
        self.visible = False
        self.on_confirm: Optional[Callable[[int, int, int], None]] = None
        self.on_cancel: Optional[Callable[[], None]] = None
        self.hero = None
        self._time = 0.0
        self._layout()

    @property
    def strength_points(self) -> int:
        return self.points[Stat.STRENGTH]

    @property
    def mana_points(self) -> int:
        return self.points[Stat.MANA]

    @property
    def health_points(self) -> int:
        return self.points[Stat.HEALTH]

    def _layout(self) -> None:
        x, y = self.bounds.x, self.bounds.y
        self.input_bounds: dict[Stat, Rect] = {
            stat: Rect(x + 150, y + offset, 80, 30) for stat, offset in _ROW_OFFSETS.items()
        }
        self.up_buttons: dict[Stat, Button] = {}
        self.down_buttons: dict[Stat, Button] = {}
        for stat, field in self.input_bounds.items():
            up_x = field.x + field.width + _ARROW_SPACING
            self.up_buttons[stat] = Button(
                Rect(up_x, field.y, _ARROW_SIZE, _ARROW_SIZE), "+",
                lambda stat=stat: self.increment(stat),
            )
            self.down_buttons[stat] = Button(
                Rect(up_x + _ARROW_SIZE + 2, field.y, _ARROW_SIZE, _ARROW_SIZE), "-",
                lambda stat=stat: self.decrement(stat),
            )
        self.confirm_button = Button(Rect(x + 50, y + 240, 100, 40), "Confirm", self.confirm)
        # The cancel button is offset from the confirm button's absolute position.
        cancel_x = x + self.confirm_button.bounds.x + 75
        self.cancel_button = Button(Rect(cancel_x, y + 240, 100, 40), "Cancel", self.cancel)

    def _buttons(self) -> list[Button]:
        buttons = [self.confirm_button, self.cancel_button]
        for stat in Stat:
            buttons += [self.up_buttons[stat], self.down_buttons[stat]]
        return buttons

    def show(self) -> None:
        self.visible = True
        self.reset()

    def hide(self) -> None:
        self.visible = False
        self.active_input = None

    def show_for_hero(self, hero) -> None:
        self.hero = hero
        self.show()

    def set_max_points(self, max_points: int) -> None:
        self.max_points = max(1, max_points)
        self._validate()

    def set_bounds(self, bounds: Rect) -> None:
        self.bounds = bounds
        self._layout()

    def increment(self, stat: Stat) -> None:
        if self.total_points_allocated < self.max_points:
            self.points[stat] += 1
            self.input_texts[stat] = str(self.points[stat])
            self._validate()

    def decrement(self, stat: Stat) -> None:
        if self.points[stat] > 0:
            self.points[stat] -= 1
            self.input_texts[stat] = str(self.points[stat])
            self._validate()

    def type_text(self, stat: Stat, text: str) -> None:
        """Append typed digits to a field, replacing a lone zero."""
        current = self.input_texts[stat]
        for char in text:
            if char in string.digits and len(current) < MAX_INPUT_DIGITS:
                current = char if current == "0" else current + char
        self._commit(stat, current)

    def backspace(self, stat: Stat) -> None:
        self._commit(stat, self.input_texts[stat][:-1] or "0")

    def _commit(self, stat: Stat, text: str) -> None:
        try:
            value = int(text)
        except ValueError:
            value, text = 0, "0"
        self.input_texts[stat] = text
        self.points[stat] = value
        self._validate()

    def _validate(self) -> None:
        self.total_points_allocated = sum(self.points.values())
        if self.total_points_allocated <= self.max_points:
            return
        budget = self.max_points
        for stat in Stat:
            self.points[stat] = min(self.points[stat], budget)
            budget -= self.points[stat]
            self.input_texts[stat] = str(self.points[stat])
        self.total_points_allocated = sum(self.points.values())

    def confirm(self) -> None:
        """Apply the allocation to the hero, notify the listener and close."""
        if self.hero is not None:
            self.hero.level_up(self.strength_points, self.mana_points, self.health_points)
        if self.on_confirm:
            self.on_confirm(self.strength_points, self.mana_points, self.health_points)
        self.hide()

    def cancel(self) -> None:
        if self.on_cancel:
            self.on_cancel()
        self.reset()

    def reset(self) -> None:
        self.points = {stat: 0 for stat in Stat}
        self.input_texts = {stat: "0" for stat in Stat}
        self.total_points_allocated = 0
        self.active_input = None

    def remaining_points(self) -> int:
        return self.max_points - self.total_points_allocated

    def update(self, inputs: InputState) -> None:
        """Handle one frame of clicks and typing."""
        if not self.visible:
            return
        self._time = inputs.time

        self.confirm_button.active = self.total_points_allocated == REQUIRED_POINTS
        for button in self._buttons():
            button.update(inputs)

        if inputs.mouse_pressed:
            self.active_input = next(
                (stat for stat, rect in self.input_bounds.items() if rect.contains(*inputs.mouse)),
                None,
            )

        if self.active_input is not None:
            stat = self.active_input
            if inputs.chars:
                self.type_text(stat, inputs.chars)
            if "backspace" in inputs.keys_pressed:
                self.backspace(stat)
            if "enter" in inputs.keys_pressed:
                self.active_input = None

        self._validate()

    def _font(self, size: int):
        return self.font or _default_font(size)

    def draw(self, surface) -> None:
        if not self.visible:
            return

        width, height = surface.get_size()
        _draw_rect(surface, Rect(0, 0, width, height), Color(0, 0, 0, 100))
        _draw_rect(surface, self.bounds, self.panel_color, roundness=0.1)
        _draw_rect(surface, self.bounds, self.border_color, width=2, roundness=0.1)

        title_font = self._font(24)
        title = "Level Up!"
        title_w, _ = _measure_text(title_font, title)
        _draw_text(
            surface, title_font, title,
            (self.bounds.x + (self.bounds.width - title_w) / 2, self.bounds.y + 15),
            self.text_color,
        )

        label_font = self._font(18)
        for stat, offset in _ROW_OFFSETS.items():
            _draw_text(
                surface, label_font, f"{stat.value}:",
                (self.bounds.x + 20, self.bounds.y + offset + 5), self.text_color,
            )
            self._draw_input_field(surface, stat)

        _draw_text(
            surface, self._font(16), f"Points remaining: {self.remaining_points()}",
            (self.bounds.x + 20, self.bounds.y + 205), self.text_color,
        )

        for button in self._buttons():
            button.draw(surface)

    def _draw_input_field(self, surface, stat: Stat) -> None:
        bounds = self.input_bounds[stat]
        active = self.active_input is stat
        _draw_rect(surface, bounds, self.input_active_color if active else self.input_background_color)
        _draw_rect(surface, bounds, WHITE if active else GRAY, width=1)

        font = self._font(16)
        text = self.input_texts[stat]
        text_w, text_h = _measure_text(font, text)
        text_x = bounds.x + (bounds.width - text_w) / 2
        text_y = bounds.y + (bounds.height - text_h) / 2
        _draw_text(surface, font, text, (text_x, text_y), WHITE)

        if active and int(self._time * 2) % 2:
            cursor_x = int(text_x + text_w + 2)
            pygame.draw.line(
                surface, tuple(WHITE[:3]),
                (cursor_x, int(bounds.y + 5)),
                (cursor_x, int(bounds.y + bounds.height - 5)),
            )