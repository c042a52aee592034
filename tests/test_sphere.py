import pytest

from pathtracer.aabb import Aabb
from pathtracer.interval import Interval
from pathtracer.ray import Ray
from pathtracer.sphere import Cube, Sphere, get_sphere_uv
from pathtracer.vec3 import Vec3, unit_vector

MAT = object()
RANGE = Interval(0.001, 1000)


@pytest.mark.parametrize(
    "p, expected",
    [
        (Vec3(1, 0, 0), (0.50, 0.50)),
        (Vec3(-1, 0, 0), (0.00, 0.50)),
        (Vec3(0, 1, 0), (0.50, 1.00)),
        (Vec3(0, -1, 0), (0.50, 0.00)),
        (Vec3(0, 0, 1), (0.25, 0.50)),
        (Vec3(0, 0, -1), (0.75, 0.50)),
    ],
)
def test_get_sphere_uv(p, expected):
    u, v = get_sphere_uv(p)
    assert u == pytest.approx(expected[0])
    assert v == pytest.approx(expected[1])


def test_sphere_hit_from_outside():
    center = Vec3(1, 2, -3)
    sphere = Sphere(center, 2, MAT)
    r = Ray(Vec3(1, 2, 10), Vec3(0, 0, -1))
    rec = sphere.hit(r, RANGE)
    assert rec.front_face is True
    assert rec.mat is MAT
    assert (rec.p - center).length() == pytest.approx(2)
    assert all(a == pytest.approx(b) for a, b in zip(rec.p, r.at(rec.t)))
    assert all(a == pytest.approx(b) for a, b in zip(rec.normal, unit_vector(rec.p - center)))
    assert (rec.u, rec.v) == pytest.approx(get_sphere_uv(rec.normal))


def test_sphere_hit_nearest_root():
    sphere = Sphere(Vec3(0, 0, 0), 1, MAT)
    rec = sphere.hit(Ray(Vec3(0, 0, 5), Vec3(0, 0, -1)), RANGE)
    assert rec.t == pytest.approx(4)


def test_sphere_hit_from_inside():
    sphere = Sphere(Vec3(0, 0, 0), 3, MAT)
    rec = sphere.hit(Ray(Vec3(0, 0, 0), Vec3(1, 0, 0)), RANGE)
    assert rec.front_face is False
    assert rec.t == pytest.approx(3)
    assert rec.normal.x == pytest.approx(-1)


def test_sphere_miss():
    sphere = Sphere(Vec3(0, 0, 0), 1, MAT)
    assert sphere.hit(Ray(Vec3(0, 0, 5), Vec3(0, 1, 0)), RANGE) is None


def test_sphere_outside_interval():
    sphere = Sphere(Vec3(0, 0, 0), 1, MAT)
    assert sphere.hit(Ray(Vec3(0, 0, 5), Vec3(0, 0, -1)), Interval(0.001, 3)) is None


def test_sphere_bounding_box():
    center = Vec3(1, 2, 3)
    sphere = Sphere(center, 0.5, MAT)
    rvec = Vec3(0.5, 0.5, 0.5)
    assert sphere.bounding_box() == Aabb.from_points(center - rvec, center + rvec)


def test_moving_sphere_follows_time():
    start, end = Vec3(0, 0, 0), Vec3(10, 0, 0)
    sphere = Sphere(start, 1, MAT, center2=end)
    late = sphere.hit(Ray(Vec3(10, 0, 5), Vec3(0, 0, -1), 1.0), RANGE)
    early = sphere.hit(Ray(Vec3(10, 0, 5), Vec3(0, 0, -1), 0.0), RANGE)
    assert early is None
    assert (late.p - end).length() == pytest.approx(1)


def test_moving_sphere_bounding_box_covers_path():
    start, end = Vec3(0, 0, 0), Vec3(10, 0, 0)
    rvec = Vec3(1, 1, 1)
    box = Sphere(start, 1, MAT, center2=end).bounding_box()
    expected = Aabb.surrounding(
        Aabb.from_points(start - rvec, start + rvec), Aabb.from_points(end - rvec, end + rvec)
    )
    assert box == expected


def test_cube_hit_front_face():
    cube = Cube(Vec3(0, 0, 0), 1, MAT)
    r = Ray(Vec3(0.2, 0.3, 5), Vec3(0, 0, -1))
    rec = cube.hit(r, RANGE)
    assert rec.p.z == pytest.approx(1)
    assert rec.normal == Vec3(0, 0, 1)
    assert rec.front_face is True
    assert rec.mat is MAT


def test_cube_hit_side_face():
    cube = Cube(Vec3(0, 0, 0), 1, MAT)
    rec = cube.hit(Ray(Vec3(5, 0.1, -0.2), Vec3(-1, 0, 0)), RANGE)
    assert rec.p.x == pytest.approx(1)
    assert rec.normal == Vec3(1, 0, 0)


def test_cube_hit_negative_side():
    cube = Cube(Vec3(0, 0, 0), 1, MAT)
    rec = cube.hit(Ray(Vec3(0.1, -5, 0.2), Vec3(0, 1, 0)), RANGE)
    assert rec.p.y == pytest.approx(-1)
    assert rec.normal == Vec3(0, -1, 0)


def test_cube_miss():
    cube = Cube(Vec3(0, 0, 0), 1, MAT)
    assert cube.hit(Ray(Vec3(3, 3, 5), Vec3(0, 0, -1)), RANGE) is None


def test_cube_bounding_box():
    cube = Cube(Vec3(1, 1, 1), 0.5, MAT)
    assert cube.bounding_box() == Aabb.from_points(Vec3(0.5, 0.5, 0.5), Vec3(1.5, 1.5, 1.5))