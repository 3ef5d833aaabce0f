"""Marker color classification.

The reference page is painted programmatically in one exact color, so the
match is exact: no tolerance band. Anything that blends the border edge
(scaling, sub-pixel positioning, color management) shrinks the detected
region instead of failing, so screenshots must be taken at 1:1 scale.
"""

from __future__ import annotations

import numpy as np

from pixelcheck.detection.buffer import PixelBuffer

# Opaque pure red, RGBA
MARKER_RGBA = (255, 0, 0, 255)

_MARKER = np.array(MARKER_RGBA, dtype=np.uint8)


def is_marker_pixel(r: int, g: int, b: int, a: int) -> bool:
    """True if the pixel is exactly the marker color."""
    return r == 255 and g == 0 and b == 0 and a == 255


def marker_mask(buffer: PixelBuffer) -> np.ndarray:
    """Boolean (h, w) mask of marker pixels, same predicate as is_marker_pixel."""
    return np.all(buffer.as_array() == _MARKER, axis=2)
