"""Nested-rectangle detection facade.

Pipeline, strictly one direction:
    buffer -> outer bounds -> search area -> candidate regions -> inner bounds

Any stage failure propagates unchanged; there is no partial result.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from pixelcheck.detection.bounds import RectangleBounds, height, is_valid, width
from pixelcheck.detection.buffer import PixelBuffer, load_pixel_buffer
from pixelcheck.detection.color import marker_mask
from pixelcheck.detection.flood import find_candidate_regions
from pixelcheck.detection.outer import compute_interior_area, locate_outer_bounds
from pixelcheck.detection.select import select_largest

__all__ = [
    "NestedRectangles",
    "detect_nested_rectangles",
    "detect_nested_rectangles_in_file",
    "height",
    "is_valid",
    "width",
]


@dataclass(frozen=True)
class NestedRectangles:
    """The marker (outer) rectangle and the largest region inside it."""

    outer: RectangleBounds
    inner: RectangleBounds

    def as_dict(self) -> dict:
        return {"outer": self.outer.as_dict(), "inner": self.inner.as_dict()}


def detect_nested_rectangles(buffer: PixelBuffer) -> NestedRectangles:
    """Find the marker rectangle and the largest non-marker region inside it.

    Raises:
        NoMarkerRegion: No marker pixel in the buffer.
        DegenerateMarkerRegion: Marker region has no interior.
        NoInnerRegion: Marker region has no non-marker pixel inside.
    """
    # One classification pass shared by the locator and the flood fill
    mask = marker_mask(buffer)
    outer = locate_outer_bounds(buffer, mask)
    area = compute_interior_area(outer)
    candidates = find_candidate_regions(buffer, area, mask)
    logger.debug(f"Interior search found {len(candidates)} candidate region(s)")
    inner = select_largest(candidates)
    logger.info(
        f"Nested rectangles: outer {width(outer)}x{height(outer)} "
        f"at ({outer.min_x},{outer.min_y}), inner {width(inner)}x{height(inner)} "
        f"at ({inner.min_x},{inner.min_y})"
    )
    return NestedRectangles(outer=outer, inner=inner)


def detect_nested_rectangles_in_file(path: str | Path) -> NestedRectangles:
    """Decode a screenshot file and run detect_nested_rectangles on it."""
    return detect_nested_rectangles(load_pixel_buffer(path))
