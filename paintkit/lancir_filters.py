"""Fractional-delay Lanczos filter bank used by the LANCIR resizer."""

from __future__ import annotations

import math

import numpy as np

_ZERO_EPS = 2.3e-13


class SineGenerator:
    """Sine-wave oscillator that produces sin(ph), sin(ph + si), ... without calling sin per sample."""

    __slots__ = ("_value1", "_value2", "_increment")

    def __init__(self, si: float, ph: float) -> None:
        self._value1 = math.sin(ph)
        self._value2 = math.sin(ph - si)
        self._increment = 2.0 * math.cos(si)

    def generate(self) -> float:
        """Return the current sine value and advance the oscillator by one step."""
        result = self._value1
        self._value1 = self._increment * result - self._value2
        self._value2 = result
        return result


class ResizeFilters:
    """Lazily built bank of normalised Lanczos filters for fractional offsets."""

    frac_count = 1000  # Enough for Lanczos implicit 8-bit precision.

    def __init__(self) -> None:
        self.kernel_len = 0
        self.fl2 = 0
        self.len2 = 0.0
        self.freq = 0.0
        self.freq_a = 0.0
        self.la = 0.0
        self.k = 0.0
        self.el_count = 0
        self._filters: dict[int, np.ndarray] = {}
        self._ready = False

    def update(self, la: float, k: float, el_count: int) -> bool:
        """Rebuild the bank for new parameters.

        Returns True if anything changed, meaning dependent positions must be
        recalculated; False if the parameters are the same as before.
        """
        if self._ready and la == self.la and k == self.k and el_count == self.el_count:
            return False
        if la <= 0.0:
            raise ValueError(f"Lanczos parameter must be positive, got {la}")
        if k <= 0.0:
            raise ValueError(f"resizing step must be positive, got {k}")

        norm_freq = 1.0 if k <= 1.0 else 1.0 / k
        self.freq = math.pi * norm_freq
        self.freq_a = self.freq / la
        self.len2 = la / norm_freq
        self.fl2 = int(math.ceil(self.len2))
        self.kernel_len = self.fl2 + self.fl2

        self._filters = {}
        self.la = la
        self.k = k
        self.el_count = el_count
        self._ready = True
        return True

    def get_filter(self, x: float) -> np.ndarray:
        """Return the filter for fractional offset ``x`` in [0, 1]; results are cached."""
        if not self._ready:
            raise RuntimeError("filter bank has not been updated yet")
        if not 0.0 <= x <= 1.0:
            raise ValueError(f"fractional offset must lie in [0, 1], got {x}")

        frac = int(x * self.frac_count + 0.5)
        flt = self._filters.get(frac)
        if flt is None:
            flt = self.make_filter_norm(1.0 - frac / self.frac_count)
            flt.setflags(write=False)
            self._filters[frac] = flt
        return flt

    def make_filter_norm(self, frac_delay: float) -> np.ndarray:
        """Build a DC-normalised filter (taps sum to 1) for a delay in [0, 1]."""
        if not self._ready:
            raise RuntimeError("filter bank has not been updated yet")

        fl2 = self.fl2
        freq = self.freq
        freq_a = self.freq_a
        f = SineGenerator(freq, freq * (frac_delay - fl2))
        fw = SineGenerator(freq_a, freq_a * (frac_delay - fl2))

        taps: list[float] = []
        total = 0.0

        def tap(ut: float) -> float:
            nonlocal total
            value = float(np.float32(f.generate() * fw.generate() / (ut * ut)))
            total += value
            return value

        t = -fl2
        if t + frac_delay < -self.len2:
            f.generate()
            fw.generate()
            taps.append(0.0)
            t += 1

        is_zero_x = abs(frac_delay - 1.0) < _ZERO_EPS
        mt = -1 if is_zero_x else 0
        is_zero_x = is_zero_x or abs(frac_delay) < _ZERO_EPS

        while t < mt:
            taps.append(tap(t + frac_delay))
            t += 1

        if is_zero_x:
            value = float(np.float32(freq * freq_a))
            total += value
            taps.append(value)
            f.generate()
            fw.generate()
        else:
            taps.append(tap(frac_delay))

        mt = fl2 - 2
        while t < mt:
            t += 1
            taps.append(tap(t + frac_delay))

        ut = t + 1 + frac_delay
        taps.append(0.0 if ut > self.len2 else tap(ut))

        scale = 1.0 / total
        return (np.asarray(taps, dtype=np.float64) * scale).astype(np.float32)