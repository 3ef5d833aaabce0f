"""Tests for the 4-connected interior flood fill."""

import cv2
import numpy as np
import pytest

from pixelcheck.detection import SearchArea, find_candidate_regions, marker_mask
from tests.lib.screenshots import BLACK, MARKER, WHITE, blank, fill_rect, outline_rect, to_buffer

pytestmark = pytest.mark.unit


def _boxes(candidates):
    return [(c.min_x, c.min_y, c.max_x, c.max_y, c.pixel_count) for c in candidates]


class TestFindCandidateRegions:

    def test_single_interior_pixel(self):
        img = blank(3, 3, MARKER)
        img[1, 1] = WHITE
        candidates = find_candidate_regions(to_buffer(img), SearchArea(1, 1, 1, 1))
        assert _boxes(candidates) == [(1, 1, 1, 1, 1)]

    def test_all_marker_interior_has_no_candidates(self):
        img = blank(6, 6, MARKER)
        assert find_candidate_regions(to_buffer(img), SearchArea(1, 4, 1, 4)) == []

    def test_divider_splits_two_regions(self):
        """A 1px marker column yields two candidates, in scan order."""
        img = blank(12, 7, MARKER)
        fill_rect(img, 1, 1, 4, 5, WHITE)    # left: 4x5 = 20
        fill_rect(img, 6, 1, 10, 5, BLACK)   # right: 5x5 = 25
        candidates = find_candidate_regions(to_buffer(img), SearchArea(1, 10, 1, 5))
        assert _boxes(candidates) == [(1, 1, 4, 5, 20), (6, 1, 10, 5, 25)]

    def test_diagonal_contact_does_not_join(self):
        img = blank(6, 6, MARKER)
        img[1, 1] = WHITE
        img[2, 2] = WHITE
        img[3, 3] = WHITE
        candidates = find_candidate_regions(to_buffer(img), SearchArea(1, 4, 1, 4))
        assert _boxes(candidates) == [(1, 1, 1, 1, 1), (2, 2, 2, 2, 1), (3, 3, 3, 3, 1)]

    def test_color_does_not_split_regions(self):
        """Any non-marker color is fill; only the marker blocks."""
        img = blank(8, 5, MARKER)
        fill_rect(img, 1, 1, 3, 3, WHITE)
        fill_rect(img, 4, 1, 6, 3, BLACK)
        candidates = find_candidate_regions(to_buffer(img), SearchArea(1, 6, 1, 3))
        assert _boxes(candidates) == [(1, 1, 6, 3, 18)]

    def test_fill_does_not_leave_search_area(self):
        """Non-marker pixels outside the area are never reached."""
        img = blank(10, 10, WHITE)
        outline_rect(img, 2, 2, 7, 7, MARKER)
        # Gap in the border: the interior connects to the outside
        img[2, 4] = WHITE
        candidates = find_candidate_regions(to_buffer(img), SearchArea(3, 6, 3, 6))
        assert _boxes(candidates) == [(3, 3, 6, 6, 16)]

    def test_concave_region_bounds_and_count(self):
        """U-shaped region: count is the pixel total, not the box area."""
        img = blank(7, 7, MARKER)
        fill_rect(img, 1, 1, 1, 5, WHITE)
        fill_rect(img, 5, 1, 5, 5, WHITE)
        fill_rect(img, 1, 5, 5, 5, WHITE)
        candidates = find_candidate_regions(to_buffer(img), SearchArea(1, 5, 1, 5))
        assert _boxes(candidates) == [(1, 1, 5, 5, 13)]

    def test_region_seeded_late_in_scan(self):
        """A region whose topmost row starts right of another region's."""
        img = blank(9, 6, MARKER)
        fill_rect(img, 6, 1, 7, 1, WHITE)
        fill_rect(img, 1, 2, 7, 4, WHITE)
        fill_rect(img, 5, 1, 5, 3, MARKER)
        candidates = find_candidate_regions(to_buffer(img), SearchArea(1, 7, 1, 4))
        assert len(candidates) == 1
        c = candidates[0]
        assert (c.min_x, c.min_y, c.max_x, c.max_y) == (1, 1, 7, 4)
        assert c.pixel_count == 2 + 21 - 2

    def test_area_larger_than_buffer_is_clipped(self):
        img = blank(4, 4, WHITE)
        candidates = find_candidate_regions(to_buffer(img), SearchArea(-5, 10, -5, 10))
        assert _boxes(candidates) == [(0, 0, 3, 3, 16)]

    def test_large_region_needs_no_recursion(self):
        img = blank(402, 402, MARKER)
        fill_rect(img, 1, 1, 400, 400, WHITE)
        candidates = find_candidate_regions(to_buffer(img), SearchArea(1, 400, 1, 400))
        assert _boxes(candidates) == [(1, 1, 400, 400, 160000)]

    def test_matches_opencv_components(self):
        """Candidate count and sizes agree with cv2.connectedComponentsWithStats."""
        rng = np.random.default_rng(42)
        img = blank(40, 30, MARKER)
        noise = rng.random((28, 38)) < 0.45
        img[1:29, 1:39][noise] = WHITE
        buf = to_buffer(img)

        candidates = find_candidate_regions(buf, SearchArea(1, 38, 1, 28))

        interior = (~marker_mask(buf)).astype(np.uint8)
        interior[0, :] = interior[-1, :] = 0
        interior[:, 0] = interior[:, -1] = 0
        n, _, stats, _ = cv2.connectedComponentsWithStats(interior, connectivity=4)
        expected_sizes = sorted(int(a) for a in stats[1:n, cv2.CC_STAT_AREA])

        assert sorted(c.pixel_count for c in candidates) == expected_sizes
        assert sum(expected_sizes) == int(interior.sum())
