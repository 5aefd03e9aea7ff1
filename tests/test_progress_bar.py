import math

import pygame
import pytest

from dungeonui.core import GREEN, Color, Rect
from dungeonui.progress_bar import ProgressBar


def make_bar(maximum=100.0):
    return ProgressBar(Rect(10, 10, 200, 20), maximum)


def test_starts_full():
    bar = make_bar()
    assert bar.value == bar.max_value
    assert bar.percentage() == 100.0


def test_non_positive_max_defaults_to_fifty():
    assert ProgressBar(Rect(0, 0, 10, 10), 0.0).max_value == 50.0


def test_set_value_clamps():
    bar = make_bar()
    bar.set_value(-5)
    assert bar.value == 0.0
    bar.set_value(1000)
    assert bar.value == bar.max_value


def test_update_moves_towards_target_without_overshoot():
    bar = make_bar()
    bar.update(50, 0.01)
    assert 50 < bar.displayed_value < 100
    bar.update(50, 10.0)
    assert bar.displayed_value == 50
    bar.update(80, 10.0)
    assert bar.displayed_value == 80


def test_update_snaps_when_close():
    bar = make_bar()
    bar.update(99.995, 0.0)
    assert bar.displayed_value == bar.value


def test_zero_speed_holds_displayed_value():
    bar = make_bar()
    bar.set_transition_speed(-1)
    assert bar.transition_speed == 0.0
    bar.update(40, 1.0)
    assert bar.displayed_value == 100


def test_set_max_value_keeps_percentage():
    bar = make_bar()
    bar.set_value(25)
    before = bar.percentage()
    bar.set_max_value(400)
    assert bar.max_value == 400
    assert bar.percentage() == pytest.approx(before)


def test_set_max_value_ignores_non_positive():
    bar = make_bar()
    bar.set_max_value(0)
    bar.set_max_value(-3)
    assert bar.max_value == 100.0


def test_setters_clamp():
    bar = make_bar()
    bar.set_rounding(3)
    assert bar.rounding == 1.0
    bar.set_rounding(-1)
    assert bar.rounding == 0.0
    bar.set_border_thickness(-2)
    assert bar.border_thickness == 0.0


def test_enable_pulsating_clamps_and_resets():
    bar = make_bar()
    bar.pulse_time = 1.0
    bar.enable_pulsating_effect(True, 5.0, 0.0)
    assert bar.pulse_intensity == 1.0
    assert bar.pulse_speed == 0.1
    assert bar.pulse_time == 0.0


def test_pulse_time_wraps():
    bar = make_bar()
    bar.enable_pulsating_effect(True, 0.2, 1.0)
    for _ in range(50):
        bar.update(100, 0.5)
        assert 0.0 <= bar.pulse_time <= 2.0 * math.pi


def test_pulse_color_without_effect_is_foreground():
    bar = make_bar()
    assert bar.pulse_color() == bar.foreground_color


def test_pulse_color_brightens_and_caps():
    bar = make_bar()
    bar.foreground_color = Color(100, 200, 250)
    bar.enable_pulsating_effect(True, 0.5, 1.0)
    bar.pulse_time = math.pi / 2
    color = bar.pulse_color()
    assert color.r > 100
    assert color.g > 200
    assert color.b == 255


def test_fill_ratio_tracks_displayed_value():
    bar = make_bar()
    bar.update(30, 10.0)
    assert bar.fill_ratio() == pytest.approx(bar.displayed_value / bar.max_value)


def test_formatted_text_default_and_custom():
    bar = make_bar()
    bar.set_value(30)
    bar.text_prefix = "HP: "
    assert bar.formatted_text() == "HP: 30/100"
    bar.text_formatter = lambda cur, mx: f"{int(cur / mx * 100)}%"
    bar.text_prefix = "XP: "
    bar.text_suffix = "!"
    assert bar.formatted_text() == "XP: 30%!"


def test_draw_full_bar_uses_foreground():
    surface = pygame.Surface((300, 60))
    bar = make_bar()
    bar.set_border_thickness(0)
    bar.draw(surface)
    assert tuple(surface.get_at((110, 20)))[:3] == tuple(GREEN)[:3]