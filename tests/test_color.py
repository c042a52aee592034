import io
import math

import pytest

from pathtracer.color import Color, color_to_bytes, linear_to_gamma, write_color


def test_linear_to_gamma_is_square_root():
    assert linear_to_gamma(0.25) == pytest.approx(0.5)


def test_linear_to_gamma_non_positive_is_zero():
    assert linear_to_gamma(0) == 0
    assert linear_to_gamma(-2.0) == 0


def test_black_and_white_bytes():
    assert color_to_bytes(Color(0, 0, 0)) == (0, 0, 0)
    assert color_to_bytes(Color(1, 1, 1)) == (255, 255, 255)


def test_bytes_are_clamped():
    assert color_to_bytes(Color(50, -3, 2)) == color_to_bytes(Color(1, 0, 1))


def test_nan_components_become_zero():
    assert color_to_bytes(Color(math.nan, 1, math.nan)) == color_to_bytes(Color(0, 1, 0))


def test_bytes_are_monotonic():
    values = [color_to_bytes(Color(x / 20, 0, 0))[0] for x in range(21)]
    assert values == sorted(values)


def test_write_color_format():
    out = io.StringIO()
    write_color(out, Color(1, 0, 1))
    r, g, b = color_to_bytes(Color(1, 0, 1))
    assert out.getvalue() == f"{r} {g} {b}\n"
    assert out.getvalue().endswith("\n")