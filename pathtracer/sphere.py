"""Spheres, possibly moving, and axis-aligned cubes."""

import math

from .aabb import Aabb
from .hittable import HitRecord, Hittable
from .mathutil import PI
from .ray import Ray
from .vec3 import Vec3, dot


def _reciprocal(t):
    if t == 0:
        return math.copysign(math.inf, t)
    return 1.0 / t


def get_sphere_uv(p):
    """Return the (u, v) texture coordinates of a point on the unit sphere."""
    theta = math.acos(-p.y)
    phi = math.atan2(-p.z, p.x) + PI
    return phi / (2 * PI), theta / PI


class Sphere(Hittable):
    """A sphere; given ``center2`` it moves linearly from ``center`` at time 0 to it at time 1."""

    def __init__(self, center, radius, material, center2=None):
        end = center if center2 is None else center2
        self.center = Ray(center, end - center)
        self.radius = max(0.0, radius)
        self.mat = material
        rvec = Vec3(radius, radius, radius)
        box1 = Aabb.from_points(self.center.at(0) - rvec, self.center.at(0) + rvec)
        if center2 is None:
            self._bbox = box1
        else:
            box2 = Aabb.from_points(self.center.at(1) - rvec, self.center.at(1) + rvec)
            self._bbox = Aabb.surrounding(box1, box2)

    def hit(self, r, ray_t):
        current_center = self.center.at(r.time)
        oc = current_center - r.origin
        a = r.direction.length_squared()
        h = dot(r.direction, oc)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = h * h - a * c
        if discriminant < 0:
            return None
        sqrtd = math.sqrt(discriminant)

        root = (h - sqrtd) / a
        if not ray_t.surrounds(root):
            root = (h + sqrtd) / a
            if not ray_t.surrounds(root):
                return None

        rec = HitRecord(t=root, p=r.at(root), mat=self.mat)
        outward_normal = (rec.p - current_center) / self.radius
        rec.set_face_normal(r, outward_normal)
        rec.u, rec.v = get_sphere_uv(outward_normal)
        return rec

    def bounding_box(self):
        return self._bbox


class Cube(Hittable):
    """An axis-aligned cube with half side ``radius`` around ``center``."""

    def __init__(self, center, radius, material):
        self.center = center
        self.side_length = 2.0 * max(0.0, radius)
        self.mat = material
        half = self.side_length / 2.0
        self.box_min = Vec3(center.x - half, center.y - half, center.z - half)
        self.box_max = Vec3(center.x + half, center.y + half, center.z + half)

    def hit(self, r, ray_t):
        t_min, t_max = ray_t.min, ray_t.max
        for lo, hi, orig, direction in zip(self.box_min, self.box_max, r.origin, r.direction):
            inv_d = _reciprocal(direction)
            t0 = (lo - orig) * inv_d
            t1 = (hi - orig) * inv_d
            if inv_d < 0.0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return None

        p = r.at(t_min)
        dx = min(abs(p.x - self.box_min.x), abs(p.x - self.box_max.x))
        dy = min(abs(p.y - self.box_min.y), abs(p.y - self.box_max.y))
        dz = min(abs(p.z - self.box_min.z), abs(p.z - self.box_max.z))

        if dx <= dy and dx <= dz:
            outward_normal = Vec3(-1 if p.x < self.center.x else 1, 0, 0)
        elif dy <= dz:
            outward_normal = Vec3(0, -1 if p.y < self.center.y else 1, 0)
        else:
            outward_normal = Vec3(0, 0, -1 if p.z < self.center.z else 1)

        rec = HitRecord(t=t_min, p=p, mat=self.mat)
        rec.set_face_normal(r, outward_normal)
        return rec

    def bounding_box(self):
        return Aabb.from_points(self.box_min, self.box_max)