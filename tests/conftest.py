# png_secret test configuration
# Shared fixtures building rasters and image files

import numpy as np
import pytest
from PIL import Image


@pytest.fixture
def white_raster():
    """A 4x4 RGBA buffer with every sample set to 0xFF (64 samples)."""
    return np.full((4, 4, 4), 0xFF, dtype=np.uint8)


@pytest.fixture
def gradient_raster():
    """A 16x16 RGBA buffer with varied sample values."""
    values = np.arange(16 * 16 * 4, dtype=np.uint32) * 37 % 256
    return values.astype(np.uint8).reshape(16, 16, 4)


@pytest.fixture
def cover_png(tmp_path, gradient_raster):
    """Write the gradient raster to a PNG file."""
    path = tmp_path / "cover.png"
    Image.fromarray(gradient_raster).save(path, format="PNG")
    return path


@pytest.fixture
def rgb_jpeg(tmp_path):
    """A small RGB JPEG, to check mode conversion on load."""
    img_array = np.zeros((8, 8, 3), dtype=np.uint8)
    img_array[:, :, 0] = 200
    path = tmp_path / "cover.jpg"
    Image.fromarray(img_array).save(path, format="JPEG")
    return path
