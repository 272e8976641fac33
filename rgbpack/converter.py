import contextlib
import os
import stat
import tempfile

import numpy as np

from .encoder import PackedEncoder
from .formats import get_format
from .utils import load_image


class ConversionError(Exception):
    """A conversion stage failed; the message names the stage."""


def convert(in_path, out_path, fmt: str) -> int:
    """
    Convert the image at in_path into a packed-pixel file at out_path.

    :param in_path: Source image, any format load_image understands.
    :param out_path: Destination file, created or replaced.
    :param fmt: 'rgb332' or 'rgb565'.
    :return: Number of bytes written.
    """
    try:
        get_format(fmt)
    except ValueError as err:
        raise ConversionError(str(err)) from err

    try:
        image_file = open(in_path, "rb")
    except OSError as err:
        raise ConversionError(f"error opening image file: {err}") from err

    with image_file:
        try:
            pixel_data, desc = load_image(image_file)
        except Exception as err:
            raise ConversionError(f"error decoding image: {err}") from err

    # Wider decodes keep only their top 8 bits per channel
    shift = desc["bit_depth"] - 8
    if shift > 0:
        pixel_data = pixel_data >> shift
    pixel_data = pixel_data.astype(np.uint8)

    encoded = PackedEncoder.encode(
        pixel_data.tobytes(),
        {
            "width": desc["width"],
            "height": desc["height"],
            "channels": desc["channels"],
            "format": fmt,
        },
    )

    _write_replace(out_path, encoded)
    return len(encoded)


def _write_replace(out_path, data: bytes):
    # out_path only ever holds a complete file: write beside it, then rename.
    # Symlinks are followed so the link itself stays in place.
    out_path = os.path.realpath(out_path)
    try:
        mode = stat.S_IMODE(os.stat(out_path).st_mode)
    except OSError:
        umask = os.umask(0)
        os.umask(umask)
        mode = 0o666 & ~umask

    directory = os.path.dirname(out_path)
    try:
        fd, tmp_path = tempfile.mkstemp(prefix=".rgbpack-", dir=directory)
    except OSError as err:
        raise ConversionError(f"error creating output file: {err}") from err

    replaced = False
    try:
        with os.fdopen(fd, "wb") as output_file:
            output_file.write(data)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, out_path)
        replaced = True
    except OSError as err:
        raise ConversionError(f"error writing to output file: {err}") from err
    finally:
        if not replaced:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(tmp_path)
