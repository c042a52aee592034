"""A small Monte Carlo path tracer: geometry, bounding volumes, textures and a PPM camera."""

__version__ = "0.1.0"