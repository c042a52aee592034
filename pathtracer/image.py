"""Loading image files as linear 8-bit RGB pixel data."""

import os
import sys

from PIL import Image

_GAMMA = 2.2
_MAGENTA = (255, 0, 255)
_SEARCH_LEVELS = 6


def _float_to_byte(value):
    if value <= 0.0:
        return 0
    if 1.0 <= value:
        return 255
    return int(256.0 * value)


# Maps each stored (gamma-encoded) byte to its linear 8-bit value.
_LINEARIZE = bytes(_float_to_byte((b / 255.0) ** _GAMMA) for b in range(256))


def _candidate_paths(filename):
    imagedir = os.environ.get("RTW_IMAGES")
    if imagedir:
        yield f"{imagedir}/{filename}"
    yield filename
    for level in range(_SEARCH_LEVELS + 1):
        yield os.path.join(*([os.pardir] * level + ["images", filename]))


def _clamp(x, low, high):
    """Clamp ``x`` to the half-open range [low, high)."""
    if x < low:
        return low
    if x < high:
        return x
    return high - 1


class RtwImage:
    """Linear RGB image data searched for in a few likely directories.

    If ``RTW_IMAGES`` is set, that directory is tried first; then the name as
    given, then ``images/`` in the current directory and up to six parents.
    An image that cannot be found has width and height 0.
    """

    def __init__(self, filename=None):
        self._data = None
        self._width = 0
        self._height = 0
        if filename is None:
            return
        if any(self.load(path) for path in _candidate_paths(filename)):
            return
        print(f"ERROR: Could not load image file '{filename}'.", file=sys.stderr)

    def load(self, filename):
        """Load ``filename``; return True on success, False if it cannot be read."""
        try:
            with Image.open(filename) as im:
                rgb = im.convert("RGB")
                raw = rgb.tobytes()
                width, height = rgb.size
        except (OSError, ValueError):
            return False
        self._data = raw.translate(_LINEARIZE)
        self._width = width
        self._height = height
        return True

    @property
    def width(self):
        return 0 if self._data is None else self._width

    @property
    def height(self):
        return 0 if self._data is None else self._height

    def pixel_data(self, x, y):
        """Return the (r, g, b) bytes at x, y, clamped to the image; magenta if empty."""
        if self._data is None:
            return _MAGENTA
        x = _clamp(x, 0, self._width)
        y = _clamp(y, 0, self._height)
        offset = (y * self._width + x) * 3
        return tuple(self._data[offset:offset + 3])