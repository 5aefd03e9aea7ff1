"""A bar that animates towards a target value, optionally pulsing."""

from __future__ import annotations

import math
from typing import Callable

from .core import (
    DARKGRAY,
    GREEN,
    LIGHTGRAY,
    WHITE,
    Color,
    Rect,
    _blit_texture,
    _default_font,
    _draw_rect,
    _draw_text,
    _measure_text,
)


def _ratio_text(current: float, maximum: float) -> str:
    return f"{int(current)}/{int(maximum)}"


class ProgressBar:
    """A value bar whose displayed fill eases towards the target value."""

    def __init__(self, bounds: Rect, max_value: float) -> None:
        self.bounds = bounds
        self.displayed_value = max_value
        self.target_value = max_value
        self.max_value = max_value if max_value > 0.0 else 50.0
        self.transition_speed = 2.0
        self.background_color: Color = LIGHTGRAY
        self.foreground_color: Color = GREEN
        self.border_color: Color = DARKGRAY
        self.border_thickness = 1.0
        self.rounding = 0.0
        self.background_texture = None
        self.show_text = False
        self.text_prefix = ""
        self.text_suffix = ""
        self.font = None
        self.font_size = 16
        self.text_color: Color = WHITE
        self.text_formatter: Callable[[float, float], str] = _ratio_text
        self.pulsating = False
        self.pulse_intensity = 0.2
        self.pulse_speed = 1.0
        self.pulse_time = 0.0

    @property
    def value(self) -> float:
        return self.target_value

    def update(self, new_value: float, delta_time: float) -> None:
        """Set a new target and move the displayed value towards it."""
        self.set_value(new_value)

        speed = self.max_value * self.transition_speed
        if abs(self.displayed_value - self.target_value) > 0.01:
            if self.displayed_value < self.target_value:
                self.displayed_value = min(self.target_value, self.displayed_value + speed * delta_time)
            else:
                self.displayed_value = max(self.target_value, self.displayed_value - speed * delta_time)
        else:
            self.displayed_value = self.target_value

        if self.pulsating:
            self.pulse_time += delta_time * self.pulse_speed
            if self.pulse_time > 2.0 * math.pi:
                self.pulse_time -= 2.0 * math.pi

    def set_value(self, new_value: float) -> None:
        self.target_value = min(max(new_value, 0.0), self.max_value)

    def set_max_value(self, new_max_value: float) -> None:
        """Change the maximum, scaling current values proportionally."""
        if new_max_value <= 0.0:
            return
        ratio = new_max_value / self.max_value
        self.target_value *= ratio
        self.displayed_value *= ratio
        self.max_value = new_max_value

    def percentage(self) -> float:
        return self.target_value / self.max_value * 100.0 if self.max_value > 0.0 else 0.0

    def set_transition_speed(self, speed: float) -> None:
        self.transition_speed = max(speed, 0.0)

    def set_rounding(self, rounding: float) -> None:
        self.rounding = min(max(rounding, 0.0), 1.0)

    def set_border_thickness(self, thickness: float) -> None:
        self.border_thickness = max(thickness, 0.0)

    def enable_pulsating_effect(self, enable: bool, intensity: float, speed: float) -> None:
        self.pulsating = enable
        self.pulse_intensity = min(max(intensity, 0.0), 1.0)
        self.pulse_speed = 0.1 if speed <= 0.0 else speed
        self.pulse_time = 0.0

    def fill_ratio(self) -> float:
        return self.displayed_value / self.max_value if self.max_value > 0.0 else 0.0

    def pulse_color(self) -> Color:
        """The foreground colour brightened by the current pulse phase."""
        color = self.foreground_color
        if not (self.pulsating and self.fill_ratio() > 0.0):
            return color
        pulse = 1.0 + self.pulse_intensity * math.sin(self.pulse_time)
        return Color(
            min(255, int(color.r * pulse)),
            min(255, int(color.g * pulse)),
            min(255, int(color.b * pulse)),
            color.a,
        )

    def formatted_text(self) -> str:
        return self.text_prefix + self.text_formatter(self.target_value, self.max_value) + self.text_suffix

    def draw(self, surface) -> None:
        bounds = self.bounds
        _draw_rect(surface, bounds, self.background_color, roundness=0.5)

        if self.background_texture is not None:
            _blit_texture(surface, self.background_texture, bounds)
        else:
            _draw_rect(surface, bounds, self.background_color, roundness=self.rounding)

        fill = Rect(bounds.x, bounds.y, bounds.width * self.fill_ratio(), bounds.height)
        if fill.width > 0:
            roundness = self.rounding
            if roundness > 0.0 and fill.width < bounds.height * roundness * 2:
                roundness = fill.width / (bounds.height * 2)
            _draw_rect(surface, fill, self.pulse_color(), roundness=roundness)

        if self.border_thickness > 0.0:
            _draw_rect(
                surface, bounds, self.border_color,
                width=self.border_thickness, roundness=self.rounding,
            )

        if self.show_text:
            text = self.formatted_text()
            font = self.font or _default_font(self.font_size)
            text_w, text_h = _measure_text(font, text)
            pos = (bounds.x + (bounds.width - text_w) * 0.5, bounds.y + (bounds.height - text_h) * 0.5)
            _draw_text(surface, font, text, pos, self.text_color)
            _draw_text(surface, font, text, (pos[0] - 1.5, pos[1] + 1.5), self.text_color._replace(a=100))