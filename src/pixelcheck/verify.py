"""Containment checks over detected nested rectangles.

Two levels:
  - Generic nesting: the inner region is non-degenerate and lies strictly
    inside the outer region on every side. Holds for any layout.
  - Expected layout: exact pixel positions for a known window placement.
    The browser header height varies by platform, so it is measured as
    outer.min_y - page_top and every vertical page check accounts for it.

Usage:
    result = detect_nested_rectangles(buffer)
    assert_nested(result, settings.expected_layout())
"""

from __future__ import annotations

from dataclasses import dataclass

from pixelcheck.detection.bounds import RectangleBounds, height, width
from pixelcheck.detection.nested import NestedRectangles


class NestingAssertionError(AssertionError):
    """Detected rectangles do not satisfy the requested checks."""

    def __init__(self, result: NestedRectangles, violations: list[str]):
        self.result = result
        self.violations = violations
        lines = [describe(result)] + [f"  - {v}" for v in violations]
        super().__init__("\n".join(lines))


@dataclass(frozen=True)
class ExpectedLayout:
    """Where the page and the popup window were placed on screen."""

    page_left: int
    page_top: int
    page_width: int
    page_height: int
    popup_left: int
    popup_top: int
    popup_width: int
    popup_height: int
    screen_height: int | None = None

    @property
    def page_bottom(self) -> int:
        """Last visible page row; a window taller than the screen is clipped."""
        bottom = self.page_top + self.page_height
        if self.screen_height is not None:
            bottom = min(bottom, self.screen_height)
        return bottom - 1

    def header_offset(self, outer: RectangleBounds) -> int:
        """Height of the browser chrome above the page content."""
        return int(outer.min_y) - self.page_top


def describe(result: NestedRectangles) -> str:
    outer, inner = result.outer, result.inner
    return (
        f"[rectangles] red=({outer.min_x},{outer.min_y})-({outer.max_x},{outer.max_y}) "
        f"{width(outer)}x{height(outer)}, "
        f"inner=({inner.min_x},{inner.min_y})-({inner.max_x},{inner.max_y}) "
        f"{width(inner)}x{height(inner)}"
    )


def nesting_violations(result: NestedRectangles) -> list[str]:
    """Generic containment checks; empty list means strictly nested."""
    outer, inner = result.outer, result.inner
    violations: list[str] = []

    if width(inner) <= 0 or height(inner) <= 0:
        violations.append(f"inner region is empty ({width(inner)}x{height(inner)})")
        return violations

    if not inner.min_x > outer.min_x:
        violations.append(f"inner left {inner.min_x} not right of outer left {outer.min_x}")
    if not inner.min_y > outer.min_y:
        violations.append(f"inner top {inner.min_y} not below outer top {outer.min_y}")
    if not inner.max_x < outer.max_x:
        violations.append(f"inner right {inner.max_x} not left of outer right {outer.max_x}")
    if not inner.max_y < outer.max_y:
        violations.append(f"inner bottom {inner.max_y} not above outer bottom {outer.max_y}")
    if not width(inner) < width(outer):
        violations.append(f"inner width {width(inner)} not smaller than outer {width(outer)}")
    if not height(inner) < height(outer):
        violations.append(f"inner height {height(inner)} not smaller than outer {height(outer)}")
    return violations


def is_strictly_nested(outer: RectangleBounds, inner: RectangleBounds) -> bool:
    return not nesting_violations(NestedRectangles(outer=outer, inner=inner))


def _expect(violations: list[str], label: str, actual, expected) -> None:
    if actual != expected:
        violations.append(f"{label}: expected {expected}, got {actual}")


def layout_violations(result: NestedRectangles, expected: ExpectedLayout) -> list[str]:
    """Exact-position checks against a known window placement."""
    outer, inner = result.outer, result.inner
    header = expected.header_offset(outer)
    violations: list[str] = []

    _expect(violations, "page left", outer.min_x, expected.page_left)
    _expect(violations, "page right", outer.max_x, expected.page_left + expected.page_width - 1)
    _expect(violations, "page bottom", outer.max_y, expected.page_bottom)
    _expect(violations, "page width", width(outer), expected.page_width)
    _expect(
        violations,
        f"page height (header {header}px)",
        height(outer),
        expected.page_bottom - expected.page_top - header + 1,
    )

    _expect(violations, "popup left", inner.min_x, expected.popup_left)
    _expect(violations, "popup top", inner.min_y, expected.popup_top)
    _expect(violations, "popup right", inner.max_x, expected.popup_left + expected.popup_width - 1)
    _expect(violations, "popup bottom", inner.max_y, expected.popup_top + expected.popup_height - 1)
    _expect(violations, "popup width", width(inner), expected.popup_width)
    _expect(violations, "popup height", height(inner), expected.popup_height)
    return violations


def assert_nested(result: NestedRectangles, expected: ExpectedLayout | None = None) -> None:
    """Fail with every violated check listed, generic checks first."""
    violations = nesting_violations(result)
    if expected is not None:
        violations.extend(layout_violations(result, expected))
    if violations:
        raise NestingAssertionError(result, violations)
