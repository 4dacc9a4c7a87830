"""Tests for downscaling and pixel sampling."""

import numpy as np
import pytest

from palette_extractor.preprocess import (
    downscale_rgba,
    downscale_size,
    sample_visible_pixels,
)

from conftest import make_rgba


def test_downscale_size_small_image_unchanged():
    """Images within the limit keep their size."""
    assert downscale_size(150, 200, 200) == (150, 200)


def test_downscale_size_landscape():
    """Longer side becomes max_dimension, aspect ratio kept."""
    assert downscale_size(800, 400, 200) == (200, 100)


def test_downscale_size_portrait_truncates():
    """Scaled sizes are truncated to integers."""
    # 333 * (200 / 1000) = 66.6
    assert downscale_size(333, 1000, 200) == (66, 200)


def test_downscale_size_never_zero():
    """Very thin images keep at least one pixel."""
    assert downscale_size(1000, 2, 200) == (200, 1)


def test_downscale_size_invalid_max():
    with pytest.raises(ValueError):
        downscale_size(10, 10, 0)


def test_downscale_rgba_resizes_large_image():
    """Large RGBA image is resized, channels preserved."""
    img = make_rgba(400, 600, (10, 20, 30))
    small = downscale_rgba(img, 200)

    assert small.shape == (133, 200, 4)
    assert small.dtype == np.uint8
    assert (small[:, :, :3] == (10, 20, 30)).all()


def test_downscale_rgba_returns_same_array_when_small():
    img = make_rgba(50, 60, (1, 2, 3))
    assert downscale_rgba(img, 200) is img


def test_downscale_rgba_rejects_rgb():
    """Three-channel input is rejected."""
    with pytest.raises(ValueError):
        downscale_rgba(np.zeros((10, 10, 3), dtype=np.uint8), 200)


def test_sample_visible_pixels_filters_alpha():
    """Pixels below the alpha threshold are dropped."""
    img = make_rgba(2, 2, (5, 6, 7))
    img[0, 0, 3] = 127
    img[0, 1, 3] = 128
    img[1, 0, 3] = 0

    samples = sample_visible_pixels(img, 128)

    assert samples.shape == (2, 3)
    assert samples.dtype == np.uint8
    assert (samples == (5, 6, 7)).all()


def test_sample_visible_pixels_row_major_order():
    """Samples follow row-major pixel order."""
    img = make_rgba(2, 2, (0, 0, 0))
    img[0, 1, :3] = (1, 1, 1)
    img[1, 0, :3] = (2, 2, 2)
    img[1, 1, :3] = (3, 3, 3)

    samples = sample_visible_pixels(img)

    assert samples[:, 0].tolist() == [0, 1, 2, 3]


def test_sample_visible_pixels_transparent_image(transparent_image):
    """Fully transparent image yields no samples."""
    samples = sample_visible_pixels(transparent_image)
    assert samples.shape == (0, 3)


def test_downscale_rgba_transparent_pixels_do_not_bleed():
    """Hidden RGB under alpha 0 does not darken the visible neighbours."""
    img = make_rgba(400, 400, (255, 0, 0))
    img[:, 1::2] = (0, 0, 0, 0)

    small = downscale_rgba(img, 200)

    assert small.shape == (200, 200, 4)
    assert (small[:, :, :3] == (255, 0, 0)).all()
    assert (small[:, :, 3] == 128).all()


def test_downscale_rgba_fully_transparent_stays_transparent(transparent_image):
    small = downscale_rgba(np.tile(transparent_image, (20, 20, 1)), 100)
    assert (small[:, :, 3] == 0).all()
