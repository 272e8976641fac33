import numpy as np
import pytest
from PIL import Image


@pytest.fixture
def red_blue_png(tmp_path):
    """2x1 PNG: red at (0,0), blue at (1,0)."""
    path = tmp_path / "red_blue.png"
    pixels = np.array([[[255, 0, 0], [0, 0, 255]]], dtype=np.uint8)
    Image.fromarray(pixels).save(path)
    return path


@pytest.fixture
def noise_png(tmp_path):
    path = tmp_path / "noise.png"
    rng = np.random.default_rng(7)
    pixels = rng.integers(0, 256, size=(11, 13, 3), dtype=np.uint8)
    Image.fromarray(pixels).save(path)
    return path
