"""Connected-component flood fill over the interior search area.

Each unvisited non-marker pixel seeds a breadth-first traversal over its
4-neighbours (never diagonals). A traversal stays inside the search area
and stops at marker pixels and pixels already claimed by an earlier
traversal, so every pixel in the area is visited at most once in total.

The visited marker is a flat byte grid indexed by y * width + x, allocated
per call. The worklist is an explicit deque, so region size never touches
the interpreter's recursion limit.
"""

from __future__ import annotations

from collections import deque

import numpy as np

from pixelcheck.detection.bounds import RectangleBounds, SearchArea
from pixelcheck.detection.buffer import PixelBuffer
from pixelcheck.detection.color import marker_mask


def _clip(area: SearchArea, buffer: PixelBuffer) -> SearchArea:
    return SearchArea(
        min_x=max(area.min_x, 0),
        max_x=min(area.max_x, buffer.width - 1),
        min_y=max(area.min_y, 0),
        max_y=min(area.max_y, buffer.height - 1),
    )


def _fill_region(
    start: int,
    width: int,
    area: SearchArea,
    is_marker: bytes,
    visited: bytearray,
) -> RectangleBounds:
    """BFS from an already-visited start index; returns the region's bounds."""
    bounds = RectangleBounds.empty()
    queue = deque([start])

    while queue:
        current = queue.popleft()
        cy, cx = divmod(current, width)
        bounds.expand(cx, cy)

        for nx, ny in ((cx - 1, cy), (cx + 1, cy), (cx, cy - 1), (cx, cy + 1)):
            if nx < area.min_x or nx > area.max_x or ny < area.min_y or ny > area.max_y:
                continue
            neighbor = ny * width + nx
            if visited[neighbor] or is_marker[neighbor]:
                continue
            visited[neighbor] = 1
            queue.append(neighbor)

    return bounds


def find_candidate_regions(
    buffer: PixelBuffer, area: SearchArea, mask: np.ndarray | None = None,
) -> list[RectangleBounds]:
    """Bounding boxes of every 4-connected non-marker region inside area.

    Regions are returned in the order their first pixel is met by a
    row-major scan (top-to-bottom, left-to-right). mask, if given, is a
    precomputed marker_mask(buffer).
    """
    area = _clip(area, buffer)
    if area.min_x > area.max_x or area.min_y > area.max_y:
        return []

    width = buffer.width
    if mask is None:
        mask = marker_mask(buffer)
    is_marker = mask.tobytes()
    visited = bytearray(width * buffer.height)
    candidates: list[RectangleBounds] = []

    for y in range(area.min_y, area.max_y + 1):
        row = y * width
        for x in range(area.min_x, area.max_x + 1):
            index = row + x
            if visited[index] or is_marker[index]:
                continue
            visited[index] = 1
            bounds = _fill_region(index, width, area, is_marker, visited)
            if bounds.is_valid:
                candidates.append(bounds)

    return candidates
