"""Orthonormal bases."""

from .vec3 import Vec3, cross, unit_vector


class Onb:
    """An orthonormal basis whose ``w`` axis points along a given vector."""

    __slots__ = ("u", "v", "w")

    def __init__(self, n):
        self.w = unit_vector(n)
        a = Vec3(0, 1, 0) if abs(self.w.x) > 0.9 else Vec3(1, 0, 0)
        self.v = unit_vector(cross(self.w, a))
        self.u = cross(self.w, self.v)

    def transform(self, v):
        """Transform from basis coordinates to local space."""
        return v[0] * self.u + v[1] * self.v + v[2] * self.w