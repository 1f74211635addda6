import numpy as np
import pytest

from paintkit.lancir import LancirParams, LancirResizer, resize_image, round_clamp


@pytest.fixture
def rgb_image():
    return np.random.default_rng(0).integers(0, 256, size=(5, 7, 3), dtype=np.uint8)


@pytest.fixture
def float_image():
    return np.random.default_rng(1).random((8, 6)).astype(np.float32)


def test_round_clamp_below_half_is_zero():
    assert round_clamp(0.49, 255) == 0
    assert round_clamp(-3.0, 255) == 0


def test_round_clamp_saturates():
    assert round_clamp(1000.0, 255) == 255
    assert round_clamp(70000.0, 65535) == 65535


def test_round_clamp_rounds_half_up():
    assert round_clamp(2.5, 255) == 3


def test_identity_resize_uint8(rgb_image):
    out = resize_image(rgb_image, 7, 5)
    assert out.dtype == np.uint8
    np.testing.assert_array_equal(out, rgb_image)


def test_identity_resize_float(float_image):
    out = resize_image(float_image, 6, 8)
    assert out.dtype == np.float32
    np.testing.assert_allclose(out, float_image, atol=1e-5)


@pytest.mark.parametrize("size", [(5, 7), (20, 25), (3, 3)])
def test_constant_image_stays_constant(size):
    img = np.full((10, 12, 3), 100, dtype=np.uint8)
    out = resize_image(img, *size)
    assert out.shape == (size[1], size[0], 3)
    assert np.all(out == 100)


def test_two_dimensional_input_keeps_layout(float_image):
    out = resize_image(float_image, 4, 3)
    assert out.shape == (3, 4)
    assert out.dtype == np.float32


def test_empty_source_gives_zeros():
    src = np.zeros((0, 4, 3), dtype=np.uint8)
    out = resize_image(src, 3, 2)
    assert out.shape == (2, 3, 3)
    assert not out.any()


def test_offset_shifts_image_left(float_image):
    params = LancirParams(kx=1.0, ox=1.0)
    out = resize_image(float_image, 6, 8, params)
    np.testing.assert_allclose(out[:, :-1], float_image[:, 1:], atol=1e-5)
    np.testing.assert_allclose(out[:, -1], float_image[:, -1], atol=1e-5)


def test_negative_step_bypasses_centering(float_image):
    params = LancirParams(kx=-1.0, ky=-1.0)
    out = resize_image(float_image, 6, 8, params)
    np.testing.assert_allclose(out, float_image, atol=1e-5)


def test_centered_downscale_is_mirror_symmetric(float_image):
    direct = resize_image(np.flipud(float_image), 6, 4)
    mirrored = np.flipud(resize_image(float_image, 6, 4))
    np.testing.assert_allclose(direct, mirrored, atol=1e-4)


def test_resizer_reuse_gives_same_result(rgb_image, float_image):
    resizer = LancirResizer()
    first = resizer.resize(rgb_image, 4, 9)
    resizer.resize(float_image, 3, 3)
    resizer.resize(rgb_image, 4, 9, LancirParams(kx=0.5))
    again = resizer.resize(rgb_image, 4, 9)
    np.testing.assert_array_equal(first, again)
    np.testing.assert_array_equal(first, resize_image(rgb_image, 4, 9))


def test_uint8_to_float_output_is_normalised(rgb_image):
    out = resize_image(rgb_image, 7, 5, LancirParams(out_dtype=np.float32))
    assert out.dtype == np.float32
    np.testing.assert_allclose(out, rgb_image.astype(np.float32) / 255, atol=1e-6)


def test_uint8_to_uint16_output_is_rescaled(rgb_image):
    out = resize_image(rgb_image, 7, 5, LancirParams(out_dtype=np.uint16))
    assert out.dtype == np.uint16
    np.testing.assert_array_equal(out, rgb_image.astype(np.uint16) * 257)


def test_integer_output_stays_in_range():
    img = np.zeros((6, 6), dtype=np.float32)
    img[:, 3:] = 1.0
    out = resize_image(img, 17, 6, LancirParams(out_dtype=np.uint8))
    assert out.min() == 0
    assert out.max() == 255


@pytest.mark.parametrize(
    "src, width, height, params",
    [
        (np.zeros((4, 4), dtype=np.uint8), 0, 4, None),
        (np.zeros((4, 4), dtype=np.uint8), 4, -1, None),
        (np.zeros((4, 4), dtype=np.uint8), 4, 4, LancirParams(la=1.5)),
        (np.zeros((4, 4, 5), dtype=np.uint8), 4, 4, None),
        (np.zeros((4, 4), dtype=np.int8), 4, 4, None),
        (np.zeros(4, dtype=np.uint8), 4, 4, None),
        (np.zeros((4, 4), dtype=np.uint8), 4, 4, LancirParams(out_dtype=np.int16)),
    ],
)
def test_invalid_arguments_raise(src, width, height, params):
    with pytest.raises(ValueError):
        resize_image(src, width, height, params)