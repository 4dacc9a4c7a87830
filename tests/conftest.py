"""Shared fixtures for palette extraction tests."""

import sys

import numpy as np
import pytest
from loguru import logger


def make_rgba(height, width, rgb, alpha=255):
    """Solid-color RGBA image."""
    img = np.zeros((height, width, 4), dtype=np.uint8)
    img[:, :, :3] = rgb
    img[:, :, 3] = alpha
    return img


@pytest.fixture
def solid_image():
    """20x10 opaque image of a single color."""
    return make_rgba(10, 20, (30, 120, 200))


@pytest.fixture
def transparent_image():
    """Fully transparent image."""
    return make_rgba(16, 16, (255, 0, 0), alpha=0)


@pytest.fixture
def two_color_image():
    """Red and blue pixels in a 3:1 ratio (rows 0-5 red, 6-7 blue)."""
    img = make_rgba(8, 10, (200, 10, 10))
    img[6:, :, :3] = (10, 10, 200)
    return img


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture(autouse=True)
def reset_logging():
    """Put loguru back on stderr after tests that swap its sinks."""
    yield
    logger.remove()
    logger.add(sys.stderr)
