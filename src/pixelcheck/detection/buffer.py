"""PixelBuffer -- a decoded RGBA screenshot, plus the codec that makes one.

The detection engine only ever reads a PixelBuffer. Decoding (PNG, JPEG,
anything OpenCV understands) happens here at the edge, once, before any
detection stage runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import cv2
import numpy as np

from pixelcheck.detection.errors import ImageDecodeError

BYTES_PER_PIXEL = 4


@dataclass(frozen=True)
class PixelBuffer:
    """Row-major RGBA pixels, 4 bytes per pixel.

    Attributes:
        width: Pixels per row.
        height: Number of rows.
        data: width * height * 4 bytes, R G B A order.
    """

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"negative buffer size {self.width}x{self.height}")
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))
        expected = self.width * self.height * BYTES_PER_PIXEL
        if len(self.data) != expected:
            raise ValueError(
                f"RGBA data length {len(self.data)} does not match "
                f"{self.width}x{self.height} (expected {expected})"
            )

    @classmethod
    def from_array(cls, arr: np.ndarray) -> PixelBuffer:
        """Build a buffer from an (h, w, 4) uint8 array in RGBA order."""
        if arr.ndim != 3 or arr.shape[2] != BYTES_PER_PIXEL:
            raise ValueError(f"expected an (h, w, 4) RGBA array, got shape {arr.shape}")
        h, w = arr.shape[:2]
        return cls(width=w, height=h, data=np.ascontiguousarray(arr, dtype=np.uint8).tobytes())

    def as_array(self) -> np.ndarray:
        """Read-only (h, w, 4) view over the pixel bytes."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(
            self.height, self.width, BYTES_PER_PIXEL
        )

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        offset = (y * self.width + x) * BYTES_PER_PIXEL
        r, g, b, a = self.data[offset:offset + BYTES_PER_PIXEL]
        return (r, g, b, a)


def _to_rgba(img: np.ndarray) -> np.ndarray:
    """Convert an OpenCV-decoded image (GRAY, BGR or BGRA) to RGBA."""
    if img.dtype == np.uint16:
        # 16-bit PNGs: keep the high byte so exact 8-bit colors survive
        img = (img >> 8).astype(np.uint8)
    elif img.dtype != np.uint8:
        raise ImageDecodeError(f"unsupported pixel depth {img.dtype}")
    if img.ndim == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2RGBA)
    channels = img.shape[2]
    if channels == 3:
        return cv2.cvtColor(img, cv2.COLOR_BGR2RGBA)
    if channels == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
    raise ImageDecodeError(f"unsupported channel count {channels}")


def load_pixel_buffer(path: str | Path) -> PixelBuffer:
    """Decode an image file into an RGBA PixelBuffer.

    Images without an alpha channel decode as fully opaque.

    Raises:
        FileNotFoundError: If the path does not exist.
        ImageDecodeError: If OpenCV cannot decode the file, or decodes it
            to a pixel depth other than 8 or 16 bits.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"screenshot not found: {path}")
    img = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
    if img is None:
        raise ImageDecodeError(f"cannot decode image: {path}")
    return PixelBuffer.from_array(_to_rgba(img))
