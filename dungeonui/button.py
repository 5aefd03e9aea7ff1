"""A clickable rectangular button with optional hover animation."""

from __future__ import annotations

from typing import Callable, Optional

from .core import (
    BLACK,
    DARKGRAY,
    GRAY,
    LIGHTGRAY,
    WHITE,
    Color,
    InputState,
    Rect,
    _blit_texture,
    _default_font,
    _draw_rect,
    _draw_text,
    _measure_text,
)

LABEL_FONT_SIZE = 20


class Button:
    """A button that runs its action when clicked while hovered."""

    def __init__(
        self,
        bounds: Rect = Rect(0, 0, 100, 50),
        label: str = "",
        action: Optional[Callable[[], None]] = None,
        *,
        texture=None,
    ) -> None:
        self.bounds = bounds
        self.label = label
        self.action = action
        self.texture = texture
        self.font = None
        self.active = True
        self.animation_progress = 0.0
        if texture is None:
            self.normal_color, self.hover_color, self.pressed_color = DARKGRAY, GRAY, LIGHTGRAY
        else:
            self.normal_color, self.hover_color, self.pressed_color = WHITE, WHITE, GRAY
        self.text_color = WHITE
        self.border_color = WHITE
        self.border_thickness = 0
        self.corner_radius = 0.0
        self.use_hover_animation = False
        self.hover_scale = 1.1
        self.animation_speed = 5.0
        self._hovered = False
        self._pressed = False

    @property
    def is_hovered(self) -> bool:
        return self._hovered and self.active

    @property
    def is_pressed(self) -> bool:
        return self._pressed and self.active

    def set_colors(self, normal: Color, hover: Color, pressed: Color, text: Color) -> None:
        self.normal_color = normal
        self.hover_color = hover
        self.pressed_color = pressed
        self.text_color = text

    def set_border(self, color: Color, thickness: int) -> None:
        self.border_color = color
        self.border_thickness = thickness

    def enable_hover_animation(self, enable: bool, scale: float, speed: float) -> None:
        self.use_hover_animation = enable
        self.hover_scale = scale
        self.animation_speed = speed

    def update(self, inputs: InputState) -> None:
        """Track hover state, advance the animation and fire on click."""
        if not self.active:
            return

        self._hovered = self.bounds.contains(*inputs.mouse)

        if self.use_hover_animation:
            step = inputs.frame_time * self.animation_speed
            if self._hovered:
                self.animation_progress = min(1.0, self.animation_progress + step)
            else:
                self.animation_progress = max(0.0, self.animation_progress - step)

        self._pressed = False
        if self._hovered and inputs.mouse_pressed:
            self._pressed = True
            if self.action:
                self.action()

    def draw_bounds(self) -> Rect:
        """The rectangle the button occupies on screen, scaled by the hover animation."""
        if not (self.use_hover_animation and self.animation_progress > 0.0):
            return self.bounds
        factor = 1.0 + (self.hover_scale - 1.0) * self.animation_progress
        center_x = self.bounds.x + self.bounds.width / 2
        center_y = self.bounds.y + self.bounds.height / 2
        width = self.bounds.width * factor
        height = self.bounds.height * factor
        return Rect(center_x - width / 2, center_y - height / 2, width, height)

    def current_color(self) -> Color:
        if self._pressed:
            return self.pressed_color
        if self._hovered:
            return self.hover_color
        return self.normal_color

    def draw(self, surface) -> None:
        if not self.active:
            return

        rect = self.draw_bounds()
        color = self.current_color()

        if self.texture is not None:
            _blit_texture(surface, self.texture, rect, color)
        else:
            _draw_rect(surface, rect, color, roundness=self.corner_radius)

        if self.border_thickness > 0:
            if self.corner_radius > 0:
                _draw_rect(
                    surface, rect, self.border_color,
                    width=self.border_thickness, roundness=self.corner_radius,
                )
            else:
                for i in range(self.border_thickness):
                    inset = Rect(rect.x + i / 2, rect.y + i / 2, rect.width - i, rect.height - i)
                    _draw_rect(surface, inset, self.border_color, width=1)

        if self.label:
            font = self.font or _default_font(LABEL_FONT_SIZE)
            text_w, text_h = _measure_text(font, self.label)
            pos = (rect.x + (rect.width - text_w) / 2, rect.y + (rect.height - text_h) / 2)
            _draw_text(surface, font, self.label, (pos[0] + 1, pos[1] + 1), BLACK)
            _draw_text(surface, font, self.label, pos, self.text_color)

        if self._hovered and not self.use_hover_animation:
            _draw_rect(surface, rect, Color(255, 255, 255, 100), width=2)