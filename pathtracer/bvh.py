"""Bounding volume hierarchies."""

from .aabb import Aabb
from .hittable import Hittable
from .interval import Interval


class BvhNode(Hittable):
    """A binary tree of hittables split along the longest axis of their bounds."""

    def __init__(self, objects):
        objects = list(objects)
        if not objects:
            raise ValueError("a bounding volume hierarchy needs at least one object")

        bbox = Aabb.empty()
        for obj in objects:
            bbox = Aabb.surrounding(bbox, obj.bounding_box())
        self._bbox = bbox

        axis = bbox.longest_axis()

        if len(objects) == 1:
            self.left = self.right = objects[0]
        elif len(objects) == 2:
            self.left, self.right = objects
        else:
            objects.sort(key=lambda obj: obj.bounding_box().axis_interval(axis).min)
            mid = len(objects) // 2
            self.left = BvhNode(objects[:mid])
            self.right = BvhNode(objects[mid:])

    def hit(self, r, ray_t):
        if not self._bbox.hit(r, ray_t):
            return None
        left_rec = self.left.hit(r, ray_t)
        upper = left_rec.t if left_rec is not None else ray_t.max
        right_rec = self.right.hit(r, Interval(ray_t.min, upper))
        return right_rec if right_rec is not None else left_rec

    def bounding_box(self):
        return self._bbox