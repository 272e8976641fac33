import os

import numpy as np
from PIL import Image

RAW_EXTENSIONS = ("dng", "cr2", "nef", "arw", "raw")

# Pillow modes that hold more than 8 bits per sample
WIDE_MODES = ("I;16", "I;16L", "I;16B", "I;16N", "I")


def load_image(source) -> tuple[np.ndarray, dict]:
    """Load an image and return pixel data as numpy array + description.

    ``source`` may be a path or an open binary file. The array has shape
    (height, width, channels); ``bit_depth`` in the description is 8 or 16.
    """

    name = getattr(source, "name", source)
    ext = ""
    if isinstance(name, (str, os.PathLike)):
        ext = os.path.splitext(os.fspath(name))[1].lstrip(".").lower()

    if ext in RAW_EXTENSIONS:
        # RAW formats - requires rawpy
        import rawpy

        with rawpy.imread(source) as raw:
            rgb = raw.postprocess(output_bps=16)
        return rgb, {
            "width": rgb.shape[1],
            "height": rgb.shape[0],
            "channels": 3,
            "bit_depth": 16,
        }

    # Standard formats (PNG, JPEG, etc.)
    img = Image.open(source)
    img.load()

    if img.mode in WIDE_MODES:
        # 16-bit grayscale, spread over three channels
        gray = np.clip(np.asarray(img), 0, 0xFFFF).astype(np.uint16)
        return np.stack((gray, gray, gray), axis=-1), {
            "width": img.size[0],
            "height": img.size[1],
            "channels": 3,
            "bit_depth": 16,
        }

    # Convert to RGB or RGBA
    if img.mode == "RGBA":
        channels = 4
    else:
        img = img.convert("RGB")
        channels = 3

    return np.array(img), {
        "width": img.size[0],
        "height": img.size[1],
        "channels": channels,
        "bit_depth": 8,
    }
