# pathtracer

A compact Monte Carlo path tracer in plain Python. It provides the geometry,
acceleration structures, textures and sampling densities of a physically based
renderer, and a camera that writes the result as a plain-text PPM (P3) image.

## What is inside

| Module                  | Contents                                                             |
|-------------------------|----------------------------------------------------------------------|
| `pathtracer.mathutil`   | `PI`, `INFINITY`, `degrees_to_radians`, `random_double`, `random_int` |
| `pathtracer.vec3`       | `Vec3` (alias `Point3`), `dot`, `cross`, `unit_vector`, `reflect`, `refract`, `random_unit_vector`, `random_in_unit_disk`, `random_on_hemisphere` |
| `pathtracer.interval`   | `Interval` with `size`, `contains`, `surrounds`, `clamp`, `expand`, `enclosing`, `empty`, `universe` |
| `pathtracer.ray`        | `Ray` with an origin, a direction and a time, and `at(t)`            |
| `pathtracer.color`      | `Color`, `linear_to_gamma`, `color_to_bytes`, `write_color`          |
| `pathtracer.onb`        | `Onb`, an orthonormal basis whose `w` axis follows a given vector    |
| `pathtracer.aabb`       | `Aabb` axis-aligned bounding boxes and the slab intersection test    |
| `pathtracer.hittable`   | `HitRecord`, the `Hittable` base class, `Translate` and `RotateY`    |
| `pathtracer.sphere`     | `Sphere` (stationary or moving), the axis-aligned `Cube`, `get_sphere_uv` |
| `pathtracer.quad`       | `Quad` parallelograms and `box()` for six-sided boxes                |
| `pathtracer.bvh`        | `BvhNode`, a bounding volume hierarchy over one or more objects      |
| `pathtracer.perlin`     | `Perlin` gradient noise (`noise`) and turbulence (`turb`)            |
| `pathtracer.pdf`        | `Pdf`, `SpherePdf`, `HittablePdf`, `MixturePdf`                      |
| `pathtracer.image`      | `RtwImage`, image loading as linear 8-bit RGB                        |
| `pathtracer.texture`    | `Texture`, `SolidColor`, `CheckerTexture`, `ImageTexture`, `NoiseTexture` |
| `pathtracer.camera`     | `Camera`, which renders a world to a PPM stream                      |

## Geometry queries

Every shape answers `hit(ray, interval)`: it returns a `HitRecord` (with `p`,
`normal`, `mat`, `t`, `u`, `v` and `front_face`) for the nearest intersection
inside the interval, or `None` when the ray misses.

```python
import math

from pathtracer.interval import Interval
from pathtracer.ray import Ray
from pathtracer.sphere import Sphere
from pathtracer.vec3 import Vec3

ball = Sphere(Vec3(0, 0, -1), 0.5, None)
ray = Ray(Vec3(0, 0, 0), Vec3(0, 0, -1))

record = ball.hit(ray, Interval(0.001, math.inf))
if record is not None:
    print(record.t, record.p, record.normal, record.front_face)
```

`Sphere(center, radius, material, center2=None)` moves linearly from `center`
at time 0 to `center2` at time 1 when `center2` is given. Every shape reports
its `bounding_box()`. To put several objects in one scene, wrap them in a
`BvhNode(objects)`; it needs at least one object and raises `ValueError`
otherwise. `box(a, b, material)` returns the six `Quad` sides of a box as a
`BvhNode`. `Translate(obj, offset)` and `RotateY(obj, angle_in_degrees)` place
an object in the scene.

## Textures and images

`CheckerTexture(scale, even, odd)` accepts textures or plain colors for its
two cells. `NoiseTexture(scale)` gives a marble pattern from Perlin
turbulence. `ImageTexture(filename)` looks the file up through `RtwImage`:
first in the directory named by the `RTW_IMAGES` environment variable, then
the name as given, then `images/` in the current directory and its parents up
to six levels. Loaded pixels are converted from gamma 2.2 to linear values. If
no file is found an error line is printed on standard error and the texture
shows solid cyan.

## Rendering

`Camera` is a dataclass with the settings `aspect_ratio`, `image_width`,
`samples_per_pixel`, `max_depth`, `background`, `vfov`, `lookfrom`, `lookat`,
`vup`, `defocus_angle` and `focus_dist`. `render(world, out=None)` writes a P3
image to the text stream `out` (standard output by default) and reports
progress on standard error.

The package ships no material classes. The camera expects each object's
material to provide `emitted(u, v, p)`, returning a `Color`, and
`scatter(r_in, rec)`, returning `(attenuation, scattered_ray)` or `None` when
the ray is absorbed. A minimal diffuse material:

```python
from pathtracer.camera import Camera
from pathtracer.bvh import BvhNode
from pathtracer.color import Color
from pathtracer.ray import Ray
from pathtracer.sphere import Sphere
from pathtracer.vec3 import Vec3, random_unit_vector


class Diffuse:
    def __init__(self, albedo):
        self.albedo = albedo

    def emitted(self, u, v, p):
        return Color(0, 0, 0)

    def scatter(self, r_in, rec):
        direction = rec.normal + random_unit_vector()
        return self.albedo, Ray(rec.p, direction, r_in.time)


world = BvhNode([
    Sphere(Vec3(0, -100.5, -1), 100, Diffuse(Color(0.8, 0.8, 0.0))),
    Sphere(Vec3(0, 0, -1), 0.5, Diffuse(Color(0.1, 0.2, 0.5))),
])

camera = Camera(image_width=100, samples_per_pixel=10, background=Color(0.7, 0.8, 1.0))
with open("image.ppm", "w") as out:
    camera.render(world, out)
```

Rendering is pure Python and therefore slow; keep images small and sample
counts low while experimenting.

## What it does not do

- There is no command-line program and no ready-made scenes; scenes are built
  in Python code as above.
- There are no material classes (diffuse, metal, glass, lights) and no
  participating media; materials are supplied by the caller.
- Output is plain PPM text only.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.