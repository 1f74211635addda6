import math

import numpy as np
import pytest

from paintkit.lancir_filters import ResizeFilters, SineGenerator


@pytest.fixture
def bank():
    filters = ResizeFilters()
    filters.update(3.0, 1.0, 3)
    return filters


@pytest.mark.parametrize("si,ph", [(0.1, 0.0), (math.pi / 7, 1.3), (0.5, -2.0)])
def test_sine_generator_follows_sine(si, ph):
    gen = SineGenerator(si, ph)
    for n in range(50):
        assert gen.generate() == pytest.approx(math.sin(ph + n * si), abs=1e-9)


def test_update_reports_changes():
    filters = ResizeFilters()
    assert filters.update(3.0, 1.0, 4) is True
    assert filters.update(3.0, 1.0, 4) is False
    assert filters.update(3.0, 2.0, 4) is True
    assert filters.update(3.0, 2.0, 1) is True
    assert filters.update(3.0, 2.0, 1) is False


def test_kernel_length_default_and_downsampling():
    filters = ResizeFilters()
    filters.update(3.0, 1.0, 1)
    assert filters.kernel_len == 6
    filters.update(3.0, 2.0, 1)
    assert filters.kernel_len == 12


def test_kernel_length_even_and_at_least_four():
    filters = ResizeFilters()
    for la, k in [(2.0, 0.5), (2.5, 1.0), (3.0, 1.7), (4.0, 3.0)]:
        filters.update(la, k, 1)
        assert filters.kernel_len % 2 == 0
        assert filters.kernel_len >= 4


@pytest.mark.parametrize("x", [0.0, 0.1, 0.25, 0.5, 0.73, 1.0])
def test_filters_are_normalised(bank, x):
    flt = bank.get_filter(x)
    assert len(flt) == bank.kernel_len
    assert flt.dtype == np.float32
    assert float(flt.astype(np.float64).sum()) == pytest.approx(1.0, abs=1e-5)


@pytest.mark.parametrize("la,k", [(3.0, 1.3), (2.5, 2.0)])
def test_normalised_for_downsampling(la, k):
    filters = ResizeFilters()
    filters.update(la, k, 2)
    for x in (0.0, 0.3, 0.5, 1.0):
        flt = filters.get_filter(x)
        assert len(flt) == filters.kernel_len
        assert float(flt.astype(np.float64).sum()) == pytest.approx(1.0, abs=1e-5)


def test_integer_offset_gives_impulse(bank):
    flt = bank.get_filter(1.0)
    centre = bank.kernel_len // 2
    assert flt[centre] == pytest.approx(1.0, abs=1e-5)
    others = np.delete(flt, centre)
    assert np.all(np.abs(others) < 1e-5)


def test_half_offset_is_symmetric(bank):
    flt = bank.get_filter(0.5)
    assert np.allclose(flt, flt[::-1], atol=1e-6)


@pytest.mark.parametrize("x", [0.1, 0.2, 0.35])
def test_mirrored_offsets_reverse_filter(bank, x):
    a = bank.get_filter(x)
    b = bank.get_filter(1.0 - x)
    assert np.allclose(a, b[::-1], atol=1e-5)


def test_filters_are_cached_and_reset_on_update(bank):
    first = bank.get_filter(0.4)
    assert bank.get_filter(0.4) is first
    assert bank.get_filter(0.4001) is first
    bank.update(3.0, 1.5, 3)
    second = bank.get_filter(0.4)
    assert second is not first
    assert len(second) == bank.kernel_len


def test_make_filter_norm_matches_get_filter(bank):
    direct = bank.make_filter_norm(0.5)
    assert np.array_equal(direct, bank.get_filter(0.5))


def test_get_filter_before_update_raises():
    with pytest.raises(RuntimeError):
        ResizeFilters().get_filter(0.5)


@pytest.mark.parametrize("x", [-0.1, 1.5])
def test_get_filter_out_of_range_raises(bank, x):
    with pytest.raises(ValueError):
        bank.get_filter(x)


@pytest.mark.parametrize("la,k", [(0.0, 1.0), (3.0, 0.0), (-1.0, 1.0)])
def test_update_rejects_invalid_parameters(la, k):
    with pytest.raises(ValueError):
        ResizeFilters().update(la, k, 1)