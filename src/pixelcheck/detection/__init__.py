"""Screenshot geometry detection: a marker rectangle and the region inside it.

Everything here is synchronous, pure, and holds no state between calls.
"""

from pixelcheck.detection.bounds import RectangleBounds, SearchArea, height, is_valid, width
from pixelcheck.detection.buffer import PixelBuffer, load_pixel_buffer
from pixelcheck.detection.color import MARKER_RGBA, is_marker_pixel, marker_mask
from pixelcheck.detection.errors import (
    DegenerateMarkerRegion,
    DetectionError,
    ImageDecodeError,
    NoInnerRegion,
    NoMarkerRegion,
)
from pixelcheck.detection.flood import find_candidate_regions
from pixelcheck.detection.nested import (
    NestedRectangles,
    detect_nested_rectangles,
    detect_nested_rectangles_in_file,
)
from pixelcheck.detection.outer import compute_interior_area, find_marker_bounds, locate_outer_bounds
from pixelcheck.detection.select import select_largest
from pixelcheck.detection.stats import ScreenshotStats, calculate_screenshot_stats, format_stats

__all__ = [
    "MARKER_RGBA",
    "DegenerateMarkerRegion",
    "DetectionError",
    "ImageDecodeError",
    "NestedRectangles",
    "NoInnerRegion",
    "NoMarkerRegion",
    "PixelBuffer",
    "RectangleBounds",
    "ScreenshotStats",
    "SearchArea",
    "calculate_screenshot_stats",
    "compute_interior_area",
    "detect_nested_rectangles",
    "detect_nested_rectangles_in_file",
    "find_candidate_regions",
    "find_marker_bounds",
    "format_stats",
    "height",
    "is_marker_pixel",
    "is_valid",
    "load_pixel_buffer",
    "locate_outer_bounds",
    "marker_mask",
    "select_largest",
    "width",
]
