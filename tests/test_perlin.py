import math
import random

import pytest

from pathtracer.perlin import Perlin
from pathtracer.vec3 import Vec3


@pytest.fixture
def perlin():
    random.seed(1234)
    return Perlin()


def test_same_seed_same_noise():
    random.seed(42)
    a = Perlin()
    random.seed(42)
    b = Perlin()
    p = Vec3(1.3, -2.7, 0.4)
    assert a.noise(p) == b.noise(p)


def test_permutations_are_permutations(perlin):
    for perm in (perlin.perm_x, perlin.perm_y, perlin.perm_z):
        assert sorted(perm) == list(range(256))


def test_gradients_are_unit(perlin):
    for g in perlin.randvec:
        assert g.length() == pytest.approx(1.0)


def test_noise_zero_at_lattice_points(perlin):
    for p in (Vec3(0, 0, 0), Vec3(3, -5, 7), Vec3(-1, 2, 100)):
        assert perlin.noise(p) == pytest.approx(0.0, abs=1e-12)


def test_noise_periodic(perlin):
    p = Vec3(0.25, 0.5, 0.75)
    assert perlin.noise(p) == pytest.approx(perlin.noise(Vec3(256.25, 0.5, 0.75)))
    assert perlin.noise(p) == pytest.approx(perlin.noise(Vec3(0.25, 256.5, -255.25)))


def test_noise_bounded(perlin):
    rng = random.Random(9)
    for _ in range(200):
        p = Vec3(rng.uniform(-50, 50), rng.uniform(-50, 50), rng.uniform(-50, 50))
        assert abs(perlin.noise(p)) <= math.sqrt(3)


def test_turb(perlin):
    p = Vec3(0.3, 0.6, 0.9)
    assert perlin.turb(p, 0) == 0.0
    assert perlin.turb(p, 1) == pytest.approx(abs(perlin.noise(p)))
    assert perlin.turb(p, 7) >= 0.0