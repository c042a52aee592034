"""A positionable thin-lens camera that renders a scene to plain PPM.

Materials are duck-typed: ``emitted(u, v, p)`` returns a Color and
``scatter(r_in, rec)`` returns ``(attenuation, scattered_ray)`` or None.
"""

import math
import sys
from dataclasses import dataclass, field

from .color import Color, write_color
from .interval import Interval
from .mathutil import degrees_to_radians, random_double
from .ray import Ray
from .vec3 import Point3, Vec3, cross, random_in_unit_disk, unit_vector


@dataclass
class Camera:
    aspect_ratio: float = 1.0  # ratio of image width over height
    image_width: int = 100  # rendered image width in pixels
    samples_per_pixel: int = 10  # random samples for each pixel
    max_depth: int = 10  # maximum number of ray bounces
    background: Color = field(default_factory=Color)

    vfov: float = 90  # vertical field of view in degrees
    lookfrom: Point3 = field(default_factory=lambda: Point3(0, 0, 0))
    lookat: Point3 = field(default_factory=lambda: Point3(0, 0, -1))
    vup: Vec3 = field(default_factory=lambda: Vec3(0, 1, 0))

    defocus_angle: float = 0  # variation angle of rays through each pixel
    focus_dist: float = 10  # distance from lookfrom to the plane of perfect focus

    def render(self, world, out=None):
        """Render ``world`` as a plain PPM image to the text stream ``out`` (stdout by default)."""
        out = sys.stdout if out is None else out
        self._initialize()

        out.write(f"P3\n{self.image_width} {self.image_height}\n255\n")
        for j in range(self.image_height):
            print(f"\rScanlines remaining: {self.image_height - j} ", end="", file=sys.stderr, flush=True)
            for i in range(self.image_width):
                pixel_color = Color(0, 0, 0)
                for _ in range(self.samples_per_pixel):
                    pixel_color = pixel_color + self._ray_color(self._get_ray(i, j), world)
                write_color(out, self.pixel_samples_scale * pixel_color)
        print("\rDone.                 ", file=sys.stderr)

    def _initialize(self):
        self.image_height = max(1, int(self.image_width / self.aspect_ratio))
        self.pixel_samples_scale = 1.0 / self.samples_per_pixel
        self.center = self.lookfrom

        theta = degrees_to_radians(self.vfov)
        h = math.tan(theta / 2)
        viewport_height = 2 * h * self.focus_dist
        viewport_width = viewport_height * (float(self.image_width) / self.image_height)

        self.w = unit_vector(self.lookfrom - self.lookat)
        self.u = unit_vector(cross(self.vup, self.w))
        self.v = cross(self.w, self.u)

        viewport_u = viewport_width * self.u
        viewport_v = viewport_height * -self.v

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = self.center - self.focus_dist * self.w - viewport_u / 2 - viewport_v / 2
        self.pixel00_loc = viewport_upper_left + 0.5 * (self.pixel_delta_u + self.pixel_delta_v)

        defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

    def _get_ray(self, i, j):
        """Return a ray from the defocus disk through a random point around pixel (i, j)."""
        offset_x = random_double() - 0.5
        offset_y = random_double() - 0.5
        pixel_sample = (
            self.pixel00_loc
            + (i + offset_x) * self.pixel_delta_u
            + (j + offset_y) * self.pixel_delta_v
        )
        ray_origin = self.center if self.defocus_angle <= 0 else self._defocus_disk_sample()
        return Ray(ray_origin, pixel_sample - ray_origin, random_double())

    def _defocus_disk_sample(self):
        p = random_in_unit_disk()
        return self.center + p[0] * self.defocus_disk_u + p[1] * self.defocus_disk_v

    def _ray_color(self, r, world):
        result = Color(0, 0, 0)
        throughput = Color(1, 1, 1)
        for _ in range(self.max_depth):
            rec = world.hit(r, Interval(0.001, math.inf))
            if rec is None:
                return result + throughput * self.background
            result = result + throughput * rec.mat.emitted(rec.u, rec.v, rec.p)
            scattered = rec.mat.scatter(r, rec)
            if scattered is None:
                return result
            attenuation, r = scattered
            throughput = throughput * attenuation
        return result