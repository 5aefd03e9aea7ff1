"""The title screen with its main, options and credits pages."""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional

import pygame

from .button import Button
from .core import (
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

TITLE = "Dungeons & Dragons"
VERSION = "Version 1.0.0"

BUTTON_WIDTH = 300.0
BUTTON_HEIGHT = 50.0
BUTTON_SPACING = 20.0
CONTENT_WIDTH = 600.0
CONTENT_HEIGHT = 400.0
MAIN_BUTTON_COUNT = 5

TITLE_FONT_SIZE = 50
TITLE_TEXTURE_SCALE = 0.5
CREDITS_FONT_SIZE = 24
CREDITS_TITLE_FONT_SIZE = 30
CREDITS_LINE_SPACING = 30.0

CREDITS = (
    "Game Design:",
    "John Doe",
    "",
    "Programming:",
    "Jane Smith",
    "",
    "Art & Graphics:",
    "Bob Johnson",
    "",
    "Special Thanks:",
    "The Open Source Community",
)


class MenuState(Enum):
    """Which page of the menu is showing."""

    MAIN = auto()
    OPTIONS = auto()
    CREDITS = auto()


def _draw_vertical_gradient(surface, rect: Rect, top: Color, bottom: Color) -> None:
    width, height = int(rect.width), int(rect.height)
    if width <= 0 or height <= 0:
        return
    layer = pygame.Surface((width, height), pygame.SRCALPHA)
    span = max(height - 1, 1)
    for row in range(height):
        t = row / span
        color = tuple(int(a + (b - a) * t) for a, b in zip(top, bottom))
        pygame.draw.line(layer, color, (0, row), (width - 1, row))
    surface.blit(layer, (int(rect.x), int(rect.y)))


class MainMenu:
    """Menu whose buttons record the player's choice for the caller to read."""

    def __init__(
        self,
        screen_width: int,
        screen_height: int,
        *,
        font=None,
        background_texture=None,
        title_texture=None,
    ) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.font = font
        self.background_texture = background_texture
        self.title_texture = title_texture
        self.state = MenuState.MAIN
        self.quit_selected = False
        self.start_game_selected = False
        self.load_game_selected = False

        self.frame_color = Color(40, 40, 70, 230)
        self.text_color = Color(220, 220, 250, 255)
        self.dark_purple = Color(30, 20, 50, 255)
        self.mystic_blue = Color(60, 80, 120, 255)
        self.deep_red = Color(150, 30, 50, 255)
        self.stone_gray = Color(80, 80, 90, 200)
        self.gold_accent = Color(220, 190, 100, 255)

        self._create_buttons()

    def _select_start(self) -> None:
        self.start_game_selected = True

    def _select_load(self) -> None:
        self.load_game_selected = True

    def _select_quit(self) -> None:
        self.quit_selected = True

    def _go_to(self, state: MenuState) -> None:
        self.state = state

    def _create_buttons(self) -> None:
        total = MAIN_BUTTON_COUNT
        self.start_button = Button(self.button_bounds(0, total), "Start Game", self._select_start)
        self.load_button = Button(self.button_bounds(1, total), "Load Game", self._select_load)
        self.options_button = Button(
            self.button_bounds(2, total), "Options", lambda: self._go_to(MenuState.OPTIONS)
        )
        self.credits_button = Button(
            self.button_bounds(3, total), "Credits", lambda: self._go_to(MenuState.CREDITS)
        )
        self.quit_button = Button(self.button_bounds(4, total), "Quit Game", self._select_quit)
        self.back_button = Button(
            Rect(self.screen_width / 2.0 - 100, self.screen_height - 100.0, 200, 50),
            "Back",
            lambda: self._go_to(MenuState.MAIN),
        )

        for button in (*self._main_buttons(), self.back_button):
            button.set_colors(
                Color(60, 60, 85, 255), Color(75, 75, 110, 255), Color(90, 90, 130, 255), self.text_color
            )
            button.set_border(Color(110, 110, 170, 255), 2)
            button.enable_hover_animation(True, 1.05, 10.0)
            button.corner_radius = 0.3
            button.font = self.font

    def _main_buttons(self) -> tuple[Button, ...]:
        return (
            self.start_button,
            self.load_button,
            self.options_button,
            self.credits_button,
            self.quit_button,
        )

    def _content_area(self) -> Rect:
        return Rect(
            self.screen_width / 2.0 - CONTENT_WIDTH / 2,
            self.screen_height / 2.0 - CONTENT_HEIGHT / 2,
            CONTENT_WIDTH,
            CONTENT_HEIGHT,
        )

    def initialize(self) -> None:
        self.reset_selections()
        self.state = MenuState.MAIN

    def reset_selections(self) -> None:
        self.quit_selected = False
        self.start_game_selected = False
        self.load_game_selected = False

    def button_bounds(self, index: int, total: int) -> Rect:
        """Bounds of the ``index``-th of ``total`` buttons stacked in the content area."""
        area = self._content_area()
        total_height = BUTTON_HEIGHT * total + BUTTON_SPACING * (total - 1)
        start_y = area.y + (area.height - total_height) / 2.0
        return Rect(
            area.x + (area.width - BUTTON_WIDTH) / 2.0,
            start_y + (BUTTON_HEIGHT + BUTTON_SPACING) * index,
            BUTTON_WIDTH,
            BUTTON_HEIGHT,
        )

    def resize(self, screen_width: int, screen_height: int) -> None:
        """Lay the buttons out again when the screen size changes."""
        if (screen_width, screen_height) == (self.screen_width, self.screen_height):
            return
        self.screen_width = screen_width
        self.screen_height = screen_height
        self._create_buttons()

    def update(self, delta_time: float, inputs: InputState) -> None:
        if self.state is MenuState.MAIN:
            for button in self._main_buttons():
                button.update(inputs)
        elif self.state is MenuState.OPTIONS:
            # The options page runs the back button through two updates per frame.
            self.back_button.update(inputs)
            self.back_button.update(inputs)
        else:
            self.back_button.update(inputs)

    def _font(self, size: int):
        return self.font or _default_font(size)

    def draw(self, surface) -> None:
        self.resize(*surface.get_size())
        self._draw_background(surface)
        self._draw_frame(surface)
        self._draw_title(surface)

        if self.state is MenuState.MAIN:
            self._draw_main(surface)
        elif self.state is MenuState.OPTIONS:
            self.back_button.draw(surface)
        else:
            self._draw_credits(surface)

    def _draw_background(self, surface) -> None:
        screen = Rect(0, 0, self.screen_width, self.screen_height)
        if self.background_texture is not None:
            _blit_texture(surface, self.background_texture, screen)
        else:
            _draw_vertical_gradient(surface, screen, self.dark_purple, self.mystic_blue.with_alpha(0.6))

    def _draw_frame(self, surface) -> None:
        w, h = self.screen_width, self.screen_height
        _draw_rect(surface, Rect(0, 0, w, h - 2), self.stone_gray, width=2)
        _draw_rect(surface, Rect(0, 1, w, h - 1), self.mystic_blue.with_alpha(0.6), width=3)
        _draw_rect(surface, Rect(0, 2, w, h), self.mystic_blue.with_alpha(0.3), width=4)

        _draw_rect(surface, Rect(0, 0, w, 120), self.frame_color.with_alpha(0.9))
        _draw_rect(surface, Rect(0, 120, w, 1), self.stone_gray)
        _draw_rect(surface, Rect(0, 118, w, 2), self.mystic_blue.with_alpha(0.6))
        _draw_rect(surface, Rect(0, 119, w, 3), self.mystic_blue.with_alpha(0.3))

        content = self._content_area()
        _draw_rect(surface, content, self.dark_purple.with_alpha(0.8))
        _draw_rect(surface, content, self.stone_gray, width=1)
        for inset, alpha in ((1, 0.6), (2, 0.3)):
            inner = Rect(content.x + inset, content.y + inset, content.width - 2 * inset, content.height - 2 * inset)
            _draw_rect(surface, inner, self.mystic_blue.with_alpha(alpha), width=1)

    def _draw_title(self, surface) -> None:
        if self.title_texture is not None:
            width, height = self.title_texture.get_size()
            scaled_w = width * TITLE_TEXTURE_SCALE
            scaled_h = height * TITLE_TEXTURE_SCALE
            _blit_texture(
                surface, self.title_texture,
                Rect(self.screen_width / 2.0 - scaled_w / 2.0, 30, scaled_w, scaled_h),
            )
            return
        font = self._font(TITLE_FONT_SIZE)
        title_w, _ = _measure_text(font, TITLE)
        x = self.screen_width / 2.0 - title_w / 2.0
        _draw_text(surface, font, TITLE, (x, 35), self.gold_accent)
        _draw_text(surface, font, TITLE, (x - 2, 37), self.gold_accent._replace(a=100))

    def _draw_main(self, surface) -> None:
        for button in self._main_buttons():
            button.draw(surface)
        font = self._font(16)
        width, height = _measure_text(font, VERSION)
        _draw_text(
            surface, font, VERSION,
            (self.screen_width - width - 10, self.screen_height - height - 10),
            self.text_color.with_alpha(0.7),
        )

    def _draw_credits(self, surface) -> None:
        start_x = self.screen_width / 2.0 - 250
        start_y = self.screen_height / 2.0 - 150

        title_font = self._font(CREDITS_TITLE_FONT_SIZE)
        title_w, _ = _measure_text(title_font, "CREDITS")
        _draw_text(
            surface, title_font, "CREDITS",
            (self.screen_width / 2.0 - title_w / 2.0, start_y - CREDITS_LINE_SPACING),
            self.gold_accent,
        )
        _draw_rect(surface, Rect(start_x, start_y, 500, 2), self.mystic_blue.with_alpha(0.6))

        for i, line in enumerate(CREDITS):
            heading = i % 3 == 0
            color = self.gold_accent if heading else self.text_color
            font = self._font(CREDITS_FONT_SIZE if heading else CREDITS_FONT_SIZE - 4)
            indent = 0 if heading else 20
            _draw_text(
                surface, font, line,
                (start_x + indent, start_y + CREDITS_LINE_SPACING * (i + 1)),
                color,
            )

        self.back_button.draw(surface)


__all__ = ["MainMenu", "MenuState", "WHITE"]