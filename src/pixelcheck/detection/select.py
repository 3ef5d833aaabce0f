"""Pick the popup interior out of the flood-fill candidates."""

from __future__ import annotations

from pixelcheck.detection.bounds import RectangleBounds
from pixelcheck.detection.errors import NoInnerRegion


def select_largest(candidates: list[RectangleBounds]) -> RectangleBounds:
    """Return the candidate with the most pixels.

    Ties go to the earliest candidate, i.e. the one whose first pixel comes
    first in row-major scan order. The input list is not reordered.

    Raises NoInnerRegion if there are no candidates.
    """
    if not candidates:
        raise NoInnerRegion()
    best = candidates[0]
    for candidate in candidates[1:]:
        if candidate.pixel_count > best.pixel_count:
            best = candidate
    return best
