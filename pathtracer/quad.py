"""Planar parallelograms and boxes built from them."""

from .aabb import Aabb
from .bvh import BvhNode
from .hittable import HitRecord, Hittable
from .interval import Interval
from .vec3 import Vec3, cross, dot, unit_vector

_UNIT_INTERVAL = Interval(0, 1)


class Quad(Hittable):
    """A parallelogram with corner ``q`` and edge vectors ``u`` and ``v``."""

    def __init__(self, q, u, v, material):
        self.q = q
        self.u = u
        self.v = v
        self.mat = material
        n = cross(u, v)
        self.normal = unit_vector(n)
        self.d = dot(self.normal, q)
        self.w = n / dot(n, n)
        self._bbox = self._compute_bounding_box()

    def _compute_bounding_box(self):
        diagonal1 = Aabb.from_points(self.q, self.q + self.u + self.v)
        diagonal2 = Aabb.from_points(self.q + self.u, self.q + self.v)
        return Aabb.surrounding(diagonal1, diagonal2)

    def bounding_box(self):
        return self._bbox

    def hit(self, r, ray_t):
        denom = dot(self.normal, r.direction)
        # No hit if the ray is parallel to the plane.
        if abs(denom) < 1e-8:
            return None

        t = (self.d - dot(self.normal, r.origin)) / denom
        if not ray_t.contains(t):
            return None

        intersection = r.at(t)
        planar_hitpt_vector = intersection - self.q
        alpha = dot(self.w, cross(planar_hitpt_vector, self.v))
        beta = dot(self.w, cross(self.u, planar_hitpt_vector))

        uv = self.is_interior(alpha, beta)
        if uv is None:
            return None

        rec = HitRecord(t=t, p=intersection, mat=self.mat, u=uv[0], v=uv[1])
        rec.set_face_normal(r, self.normal)
        return rec

    def is_interior(self, a, b):
        """Return the (u, v) texture coordinates for plane coordinates inside the shape, else None."""
        if not _UNIT_INTERVAL.contains(a) or not _UNIT_INTERVAL.contains(b):
            return None
        return a, b


def box(a, b, material):
    """Return the six-sided box that has opposite vertices ``a`` and ``b``."""
    low = Vec3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))
    high = Vec3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

    dx = Vec3(high.x - low.x, 0, 0)
    dy = Vec3(0, high.y - low.y, 0)
    dz = Vec3(0, 0, high.z - low.z)

    sides = [
        Quad(Vec3(low.x, low.y, high.z), dx, dy, material),  # front
        Quad(Vec3(high.x, low.y, high.z), -dz, dy, material),  # right
        Quad(Vec3(high.x, low.y, low.z), -dx, dy, material),  # back
        Quad(Vec3(low.x, low.y, low.z), dz, dy, material),  # left
        Quad(Vec3(low.x, high.y, high.z), dx, -dz, material),  # top
        Quad(Vec3(low.x, low.y, low.z), dx, dz, material),  # bottom
    ]
    return BvhNode(sides)