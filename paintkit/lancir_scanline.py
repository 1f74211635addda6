"""Per-scanline resizing positions, padding and filtering for the LANCIR resizer."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from paintkit.lancir_filters import ResizeFilters


@dataclass(frozen=True)
class ResizePosition:
    """Filter and source offset used to produce one destination pixel.

    ``offset`` is the index of the first tap's pixel within the padded source
    scanline (index 0 is the leftmost padding pixel).
    """

    filter: np.ndarray
    offset: int


class ResizeScanline:
    """Resizing positions for one image axis, plus the padding they require.

    ``pad_left``, ``pad_right`` and ``positions`` become available after
    :meth:`update` has been called.
    """

    def __init__(self) -> None:
        self.pad_left = 0
        self.pad_right = 0
        self.positions: list[ResizePosition] = []
        self.src_len = 0
        self.dst_len = 0
        self.offset = 0.0

    def reset(self) -> None:
        """Force the next :meth:`update` to recalculate all positions."""
        self.src_len = 0

    def update(
        self, src_len: int, dst_len: int, offset: float, filters: ResizeFilters
    ) -> bool:
        """Recalculate padding and positions; return False if nothing changed."""
        if src_len == self.src_len and dst_len == self.dst_len and offset == self.offset:
            return False
        if src_len <= 0:
            raise ValueError(f"source length must be positive, got {src_len}")
        if dst_len <= 0:
            raise ValueError(f"destination length must be positive, got {dst_len}")
        if filters.kernel_len <= 0:
            raise RuntimeError("filter bank has not been updated yet")

        fl2m1 = filters.fl2 - 1
        self.pad_left = max(0, fl2m1 - math.floor(offset))

        k = filters.k
        last = dst_len - 1
        end_offset = offset + k * last
        end_index = math.floor(end_offset)
        self.pad_right = max(0, end_index + filters.fl2 + 1 - src_len)

        self.src_len = 0
        base = self.pad_left - fl2m1
        positions: list[ResizePosition] = []
        for i in range(last):
            ox = offset + k * i
            ix = math.floor(ox)
            positions.append(ResizePosition(filters.get_filter(ox - ix), base + ix))
        positions.append(
            ResizePosition(filters.get_filter(end_offset - end_index), base + end_index)
        )

        self.positions = positions
        self.src_len = src_len
        self.dst_len = dst_len
        self.offset = offset
        return True


def _as_pixels(data) -> tuple[np.ndarray, bool]:
    arr = np.asarray(data, dtype=np.float32)
    if arr.ndim == 1:
        return arr.reshape(-1, 1), True
    if arr.ndim != 2:
        raise ValueError(f"expected a 1-D or 2-D pixel array, got {arr.ndim} dimensions")
    return arr, False


def copy_scanline_vertical(column, count: int, repl_left: int, repl_right: int) -> np.ndarray:
    """Build a vertical scanline from source pixels, replicating its edges.

    The first ``count`` pixels of ``column`` are copied. The first pixel of
    ``column`` is repeated ``repl_left`` times before them, and the last copied
    pixel (the last pixel of ``column`` when nothing is copied) is repeated
    ``repl_right`` times after them. Pixels are rows; channels are columns.
    """
    if count < 0 or repl_left < 0 or repl_right < 0:
        raise ValueError("counts must not be negative")
    pixels, flat = _as_pixels(column)
    if count > len(pixels):
        raise ValueError(f"cannot copy {count} pixels from a column of {len(pixels)}")
    if len(pixels) == 0 and repl_left + repl_right > 0:
        raise ValueError("cannot replicate pixels of an empty column")

    parts = []
    if repl_left:
        parts.append(np.repeat(pixels[:1], repl_left, axis=0))
    parts.append(pixels[:count])
    if repl_right:
        edge = pixels[count - 1] if count > 0 else pixels[-1]
        parts.append(np.repeat(edge[np.newaxis, :], repl_right, axis=0))

    result = np.concatenate(parts, axis=0).astype(np.float32, copy=False)
    return result.ravel() if flat else result


def pad_scanline_horizontal(line: np.ndarray, scanline: ResizeScanline, length: int) -> np.ndarray:
    """Fill the padding of ``line`` in place by replicating its edge pixels.

    ``line`` holds ``scanline.pad_left + length + scanline.pad_right`` pixels,
    of which the middle ``length`` are real data. Returns ``line``.
    """
    if length <= 0:
        raise ValueError(f"scanline length must be positive, got {length}")
    expected = scanline.pad_left + length + scanline.pad_right
    if len(line) != expected:
        raise ValueError(f"line holds {len(line)} pixels, expected {expected}")

    pl = scanline.pad_left
    if pl:
        line[:pl] = line[pl]
    if scanline.pad_right:
        line[pl + length:] = line[pl + length - 1]
    return line


def resize_scanline(source, positions, kernel_len: int) -> np.ndarray:
    """Apply each position's filter to the padded ``source`` scanline.

    Returns one output pixel per position, with the channel layout of ``source``.
    """
    if kernel_len <= 0:
        raise ValueError(f"kernel length must be positive, got {kernel_len}")
    pixels, flat = _as_pixels(source)
    out = np.empty((len(positions), pixels.shape[1]), dtype=np.float32)
    for row, pos in enumerate(positions):
        start = pos.offset
        if start < 0 or start + kernel_len > len(pixels):
            raise ValueError(
                f"filter window {start}..{start + kernel_len} lies outside "
                f"a scanline of {len(pixels)} pixels"
            )
        taps = np.asarray(pos.filter[:kernel_len], dtype=np.float32)
        out[row] = taps @ pixels[start:start + kernel_len]
    return out.ravel() if flat else out