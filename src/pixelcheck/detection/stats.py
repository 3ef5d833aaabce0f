"""Per-screenshot pixel statistics, logged before geometry is asserted."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from pixelcheck.detection.buffer import PixelBuffer
from pixelcheck.detection.color import marker_mask


@dataclass(frozen=True)
class ScreenshotStats:
    width: int
    height: int
    pixel_count: int
    marker_pixel_count: int

    @property
    def marker_ratio(self) -> float:
        if self.pixel_count == 0:
            return 0.0
        return self.marker_pixel_count / self.pixel_count


def calculate_screenshot_stats(buffer: PixelBuffer) -> ScreenshotStats:
    return ScreenshotStats(
        width=buffer.width,
        height=buffer.height,
        pixel_count=buffer.width * buffer.height,
        marker_pixel_count=int(np.count_nonzero(marker_mask(buffer))),
    )


def format_stats(name: str, stats: ScreenshotStats) -> str:
    return (
        f"{name}: {stats.width}x{stats.height}, pixels={stats.pixel_count}, "
        f"redPixels={stats.marker_pixel_count}"
    )
