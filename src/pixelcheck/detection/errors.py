"""Detection failures.

Every failure is terminal for the call that raised it. The facade never
catches, retries, or wraps these; callers treat any of them as a hard test
failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pixelcheck.detection.bounds import RectangleBounds


class DetectionError(Exception):
    """Base class for all detection failures.

    Attributes:
        stage: Which stage failed ("decode", "outer", "inner").
    """

    stage = "detect"

    def __init__(self, message: str):
        super().__init__(f"[{self.stage}] {message}")


class ImageDecodeError(DetectionError):
    """The image codec could not turn a file into an RGBA buffer."""

    stage = "decode"


class NoMarkerRegion(DetectionError):
    """No pixel in the buffer matched the marker color."""

    stage = "outer"

    def __init__(self, message: str = "no marker-colored pixels found in screenshot"):
        super().__init__(message)


class DegenerateMarkerRegion(DetectionError):
    """Marker pixels exist but span too little area to contain an interior."""

    stage = "outer"

    def __init__(self, bounds: RectangleBounds):
        self.bounds = bounds
        super().__init__(
            "marker region too small to contain an interior: "
            f"({bounds.min_x},{bounds.min_y})-({bounds.max_x},{bounds.max_y})"
        )


class NoInnerRegion(DetectionError):
    """The marker region holds no non-marker pixel."""

    stage = "inner"

    def __init__(self, message: str = "no non-marker region found inside the marker region"):
        super().__init__(message)
