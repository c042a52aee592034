"""Hit records, the hittable interface and instance transforms."""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from itertools import product
from typing import Any

from .aabb import Aabb
from .mathutil import degrees_to_radians
from .ray import Ray
from .vec3 import Point3, Vec3, dot


@dataclass
class HitRecord:
    """Everything known about one ray-object intersection."""

    p: Point3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    mat: Any = None
    t: float = 0.0
    u: float = 0.0
    v: float = 0.0
    front_face: bool = False

    def set_face_normal(self, r, outward_normal):
        """Orient the normal against the ray; ``outward_normal`` must be unit length."""
        self.front_face = dot(r.direction, outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """Anything a ray can hit."""

    @abstractmethod
    def hit(self, r, ray_t):
        """Return a HitRecord for the nearest hit within ``ray_t``, or None."""

    @abstractmethod
    def bounding_box(self):
        """Return the Aabb enclosing the object."""

    def pdf_value(self, origin, direction):
        return 0.0

    def random(self, origin):
        return Vec3(1, 0, 0)


class Translate(Hittable):
    """An object displaced by a fixed offset."""

    def __init__(self, obj, offset):
        self.obj = obj
        self.offset = offset
        self._bbox = obj.bounding_box() + offset

    def hit(self, r, ray_t):
        offset_r = Ray(r.origin - self.offset, r.direction, r.time)
        rec = self.obj.hit(offset_r, ray_t)
        if rec is None:
            return None
        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self):
        return self._bbox


class RotateY(Hittable):
    """An object rotated about the y axis by an angle in degrees."""

    def __init__(self, obj, angle):
        self.obj = obj
        radians = degrees_to_radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)

        bbox = obj.bounding_box()
        corners = [
            (self.cos_theta * x + self.sin_theta * z, y, -self.sin_theta * x + self.cos_theta * z)
            for x, y, z in product(
                (bbox.x.min, bbox.x.max), (bbox.y.min, bbox.y.max), (bbox.z.min, bbox.z.max)
            )
        ]
        axes = list(zip(*corners))
        low = Vec3(*(min(values) for values in axes))
        high = Vec3(*(max(values) for values in axes))
        self._bbox = Aabb.from_points(low, high)

    def _to_object(self, v):
        return Vec3(
            self.cos_theta * v.x - self.sin_theta * v.z,
            v.y,
            self.sin_theta * v.x + self.cos_theta * v.z,
        )

    def _to_world(self, v):
        return Vec3(
            self.cos_theta * v.x + self.sin_theta * v.z,
            v.y,
            -self.sin_theta * v.x + self.cos_theta * v.z,
        )

    def hit(self, r, ray_t):
        rotated_r = Ray(self._to_object(r.origin), self._to_object(r.direction), r.time)
        rec = self.obj.hit(rotated_r, ray_t)
        if rec is None:
            return None
        rec.p = self._to_world(rec.p)
        rec.normal = self._to_world(rec.normal)
        return rec

    def bounding_box(self):
        return self._bbox