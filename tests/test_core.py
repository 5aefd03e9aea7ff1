import pytest

from dungeonui.core import Color, InputState, Position, Rect, ease_out_cubic


def test_contains_includes_left_and_top_edges():
    rect = Rect(10, 20, 30, 40)
    assert rect.contains(10, 20)
    assert rect.contains(39.9, 59.9)


def test_contains_excludes_right_and_bottom_edges():
    rect = Rect(10, 20, 30, 40)
    assert not rect.contains(40, 30)
    assert not rect.contains(20, 60)
    assert not rect.contains(9.9, 30)


def test_lerp_endpoints():
    start = Rect(0, 100, 50, 60)
    end = Rect(20, 10, 80, 90)
    assert start.lerp(end, 0.0) == start
    assert start.lerp(end, 1.0) == end


def test_lerp_midpoint_lies_between():
    start = Rect(0, 100, 50, 60)
    end = Rect(20, 10, 80, 90)
    mid = start.lerp(end, 0.5)
    assert start.x < mid.x < end.x
    assert end.y < mid.y < start.y
    assert mid.width == pytest.approx((start.width + end.width) / 2)


def test_with_alpha_clamps():
    color = Color(100, 200, 255)
    assert color.with_alpha(2.0).a == 255
    assert color.with_alpha(-1.0).a == 0
    assert color.with_alpha(1.0)[:3] == (100, 200, 255)


def test_with_alpha_half():
    assert Color(1, 2, 3).with_alpha(0.5).a == 127


def test_color_defaults_to_opaque():
    assert tuple(Color(1, 2, 3)) == (1, 2, 3, 255)


def test_ease_out_cubic_endpoints_and_monotonic():
    assert ease_out_cubic(0.0) == 0.0
    assert ease_out_cubic(1.0) == 1.0
    samples = [ease_out_cubic(i / 10) for i in range(11)]
    assert samples == sorted(samples)
    assert ease_out_cubic(0.5) > 0.5


def test_position_is_mutable():
    pos = Position(3, 4)
    pos.x += 1
    assert (pos.x, pos.y) == (4, 4)


def test_input_state_defaults():
    inputs = InputState()
    assert inputs.mouse == (0.0, 0.0)
    assert not inputs.mouse_pressed
    assert "enter" not in inputs.keys_pressed