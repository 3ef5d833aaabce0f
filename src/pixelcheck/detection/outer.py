"""Outer marker region locator and interior search-area calculator."""

from __future__ import annotations

import numpy as np
from loguru import logger

from pixelcheck.detection.bounds import RectangleBounds, SearchArea
from pixelcheck.detection.buffer import PixelBuffer
from pixelcheck.detection.color import marker_mask
from pixelcheck.detection.errors import DegenerateMarkerRegion, NoMarkerRegion

# Span (max - min) below which no pixel lies strictly inside the border
_MIN_SPAN = 2


def find_marker_bounds(buffer: PixelBuffer, mask: np.ndarray | None = None) -> RectangleBounds:
    """Bounding box and count of every marker pixel. Empty bounds if none.

    mask, if given, is a precomputed marker_mask(buffer).
    """
    bounds = RectangleBounds.empty()
    if buffer.width == 0 or buffer.height == 0:
        return bounds
    if mask is None:
        mask = marker_mask(buffer)
    ys, xs = np.nonzero(mask)
    if xs.size == 0:
        return bounds
    bounds.min_x = int(xs.min())
    bounds.max_x = int(xs.max())
    bounds.min_y = int(ys.min())
    bounds.max_y = int(ys.max())
    bounds.pixel_count = int(xs.size)
    return bounds


def _check_span(bounds: RectangleBounds) -> None:
    if bounds.max_x - bounds.min_x < _MIN_SPAN or bounds.max_y - bounds.min_y < _MIN_SPAN:
        raise DegenerateMarkerRegion(bounds)


def locate_outer_bounds(buffer: PixelBuffer, mask: np.ndarray | None = None) -> RectangleBounds:
    """Locate the marker rectangle drawn around the page under test.

    Raises:
        NoMarkerRegion: No marker pixel anywhere in the buffer.
        DegenerateMarkerRegion: The marker region is narrower or shorter
            than 3 pixels, so it has no interior.
    """
    bounds = find_marker_bounds(buffer, mask)
    if not bounds.is_valid:
        raise NoMarkerRegion()
    _check_span(bounds)
    logger.debug(
        f"Marker region ({bounds.min_x},{bounds.min_y})-({bounds.max_x},{bounds.max_y}), "
        f"{bounds.pixel_count} px"
    )
    return bounds


def compute_interior_area(outer: RectangleBounds) -> SearchArea:
    """Inset the outer bounds by one pixel on every side.

    Raises:
        NoMarkerRegion: The bounds are empty (no marker pixel contributed).
        DegenerateMarkerRegion: The bounds have no interior.
    """
    if not outer.is_valid:
        raise NoMarkerRegion()
    _check_span(outer)
    return SearchArea(
        min_x=int(outer.min_x) + 1,
        max_x=int(outer.max_x) - 1,
        min_y=int(outer.min_y) + 1,
        max_y=int(outer.max_y) - 1,
    )
