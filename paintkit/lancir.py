"""LANCIR Lanczos image resizer for 1-4 channel images held in numpy arrays."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from paintkit.lancir_filters import ResizeFilters
from paintkit.lancir_scanline import ResizeScanline

__all__ = ["LancirParams", "LancirResizer", "resize_image", "round_clamp"]


@dataclass
class LancirParams:
    """Optional resizing parameters.

    ``kx``/``ky`` are resizing steps (one output pixel covers ``k`` input
    pixels); 0 picks the step from the image sizes. A negative step is used
    as its absolute value and bypasses the centring adjustment of
    ``ox``/``oy``. ``ox``/``oy`` are start offsets within the source image;
    ``la`` is the Lanczos window parameter (at least 2). ``out_dtype`` selects
    the output element type; by default it matches the input.
    """

    kx: float = 0.0
    ky: float = 0.0
    ox: float = 0.0
    oy: float = 0.0
    la: float = 3.0
    out_dtype: Optional[object] = None


def round_clamp(value: float, clamp: int) -> int:
    """Round ``value`` half up and clamp it to ``0..clamp``."""
    if value < 0.5:
        return 0
    rounded = int(value + 0.5)
    return clamp if rounded > clamp else rounded


def _check_dtype(dtype: np.dtype, role: str) -> np.dtype:
    dtype = np.dtype(dtype)
    if dtype.kind == "f" and dtype.itemsize in (4, 8):
        return dtype
    if dtype.kind == "u" and dtype.itemsize in (1, 2, 4):
        return dtype
    raise ValueError(f"unsupported {role} element type: {dtype}")


def _value_range(dtype: np.dtype) -> int:
    """Peak integer value for an element type (uint32 is treated as uint16)."""
    return 255 if dtype.itemsize == 1 else 65535


def _weight_matrix(scanline: ResizeScanline, kernel_len: int, padded_len: int) -> np.ndarray:
    weights = np.zeros((len(scanline.positions), padded_len), dtype=np.float32)
    for row, pos in enumerate(scanline.positions):
        start = pos.offset
        if start < 0 or start + kernel_len > padded_len:
            raise RuntimeError("resizing position lies outside the padded scanline")
        weights[row, start:start + kernel_len] += pos.filter[:kernel_len]
    return weights


def _to_output(values: np.ndarray, in_dtype: np.dtype, out_dtype: np.dtype) -> np.ndarray:
    is_out_float = out_dtype.kind == "f"
    clamp = _value_range(out_dtype)
    in_scale = 1.0 if in_dtype.kind == "f" else float(_value_range(in_dtype))
    out_mul = np.float32((1.0 if is_out_float else float(clamp)) / in_scale)
    unity = out_mul == np.float32(1.0)

    scaled = values if unity else values * out_mul
    if is_out_float:
        return scaled.astype(out_dtype)

    rounded = np.minimum(np.floor(scaled + np.float32(0.5)), np.float32(clamp))
    return np.where(scaled < np.float32(0.5), np.float32(0.0), rounded).astype(out_dtype)


class LancirResizer:
    """Lanczos resizer that keeps its filter banks and positions between calls.

    Reusing one object for images of the same geometry avoids recomputing
    filters. An object is not safe to share between threads.
    """

    def __init__(self) -> None:
        self._rfv = ResizeFilters()
        self._rfh0 = ResizeFilters()
        self._rsv = ResizeScanline()
        self._rsh = ResizeScanline()
        self._rsh_filters: Optional[ResizeFilters] = None

    def resize(self, src, new_width: int, new_height: int, params: Optional[LancirParams] = None) -> np.ndarray:
        """Resize ``src`` (shape ``(H, W)`` or ``(H, W, C)``, C in 1..4).

        Integer output is rounded and clamped; floating-point output is not.
        Values are rescaled when input and output element types differ.
        """
        params = params if params is not None else LancirParams()
        arr = np.asarray(src)
        if arr.ndim not in (2, 3):
            raise ValueError(f"expected a 2-D or 3-D image array, got {arr.ndim} dimensions")
        if new_width <= 0 or new_height <= 0:
            raise ValueError(f"new size must be positive, got {new_width}x{new_height}")
        if params.la < 2.0:
            raise ValueError(f"Lanczos parameter must be at least 2.0, got {params.la}")

        channels = 1 if arr.ndim == 2 else arr.shape[2]
        if not 1 <= channels <= 4:
            raise ValueError(f"images must have 1 to 4 channels, got {channels}")

        in_dtype = _check_dtype(arr.dtype, "input")
        out_dtype = _check_dtype(
            params.out_dtype if params.out_dtype is not None else arr.dtype, "output"
        )
        out_shape = (new_height, new_width) + ((channels,) if arr.ndim == 3 else ())

        src_height, src_width = arr.shape[:2]
        if src_width == 0 or src_height == 0:
            return np.zeros(out_shape, dtype=out_dtype)

        ox = params.ox
        oy = params.oy
        if params.kx >= 0.0:
            kx = src_width / new_width if params.kx == 0.0 else params.kx
            ox += (kx - 1.0) * 0.5
        else:
            kx = -params.kx
        if params.ky >= 0.0:
            ky = src_height / new_height if params.ky == 0.0 else params.ky
            oy += (ky - 1.0) * 0.5
        else:
            ky = -params.ky

        if self._rfv.update(params.la, ky, channels):
            self._rsv.reset()
            self._rsh.reset()

        if kx == ky:
            rfh = self._rfv
        else:
            rfh = self._rfh0
            if self._rfh0.update(params.la, kx, channels):
                self._rsh.reset()
        if rfh is not self._rsh_filters:
            self._rsh.reset()
            self._rsh_filters = rfh

        rsv, rsh = self._rsv, self._rsh
        rsv.update(src_height, new_height, oy, self._rfv)
        rsh.update(src_width, new_width, ox, rfh)

        data = arr.reshape(src_height, src_width, channels).astype(np.float32)

        padded_v = np.pad(data, ((rsv.pad_left, rsv.pad_right), (0, 0), (0, 0)), mode="edge")
        weights_v = _weight_matrix(rsv, self._rfv.kernel_len, padded_v.shape[0])
        columns = np.tensordot(weights_v, padded_v, axes=(1, 0)).astype(np.float32, copy=False)

        padded_h = np.pad(columns, ((0, 0), (rsh.pad_left, rsh.pad_right), (0, 0)), mode="edge")
        weights_h = _weight_matrix(rsh, rfh.kernel_len, padded_h.shape[1])
        result = np.einsum("xw,hwc->hxc", weights_h, padded_h).astype(np.float32, copy=False)

        return _to_output(result, in_dtype, out_dtype).reshape(out_shape)


def resize_image(src, new_width: int, new_height: int, params: Optional[LancirParams] = None) -> np.ndarray:
    """Resize ``src`` with a fresh :class:`LancirResizer`."""
    return LancirResizer().resize(src, new_width, new_height, params)