"""pixelcheck -- verify popup geometry from screenshots alone.

A reference page is painted in an exact marker color; the popup under test
covers part of it. detect_nested_rectangles() recovers both rectangles
from the raw pixels so tests can assert position, size, and containment.
"""

from pixelcheck.detection import (
    DegenerateMarkerRegion,
    DetectionError,
    NestedRectangles,
    NoInnerRegion,
    NoMarkerRegion,
    PixelBuffer,
    RectangleBounds,
    detect_nested_rectangles,
    detect_nested_rectangles_in_file,
    height,
    is_valid,
    load_pixel_buffer,
    width,
)
from pixelcheck.verify import ExpectedLayout, NestingAssertionError, assert_nested

__version__ = "0.1.0"

__all__ = [
    "DegenerateMarkerRegion",
    "DetectionError",
    "ExpectedLayout",
    "NestedRectangles",
    "NestingAssertionError",
    "NoInnerRegion",
    "NoMarkerRegion",
    "PixelBuffer",
    "RectangleBounds",
    "assert_nested",
    "detect_nested_rectangles",
    "detect_nested_rectangles_in_file",
    "height",
    "is_valid",
    "load_pixel_buffer",
    "width",
]
