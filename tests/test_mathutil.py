import math
import random

import pytest

from pathtracer.mathutil import PI, degrees_to_radians, random_double, random_int


def test_degrees_to_radians_half_turn():
    assert degrees_to_radians(180) == pytest.approx(math.pi)


def test_degrees_to_radians_is_linear():
    assert degrees_to_radians(90) * 2 == pytest.approx(degrees_to_radians(180))
    assert degrees_to_radians(0) == 0


def test_pi_constant_agrees_with_conversion():
    assert degrees_to_radians(180) == pytest.approx(PI)
    assert degrees_to_radians(360) == pytest.approx(2 * math.pi)


def test_random_double_default_range():
    values = [random_double() for _ in range(1000)]
    assert all(0.0 <= v < 1.0 for v in values)


def test_random_double_custom_range():
    values = [random_double(-3.0, 2.0) for _ in range(1000)]
    assert all(-3.0 <= v < 2.0 for v in values)


def test_random_double_is_reproducible_with_seed():
    random.seed(1234)
    first = [random_double(5, 7) for _ in range(10)]
    random.seed(1234)
    second = [random_double(5, 7) for _ in range(10)]
    assert first == second


def test_random_int_is_inclusive():
    values = {random_int(2, 4) for _ in range(2000)}
    assert values == {2, 3, 4}


def test_random_int_single_value():
    assert all(random_int(7, 7) == 7 for _ in range(50))