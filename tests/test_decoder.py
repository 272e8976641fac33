import numpy as np
import pytest

from rgbpack import PackedDecoder, PackedEncoder

MASKS = {
    "rgb332": np.array([0xE0, 0xE0, 0xC0], dtype=np.uint8),
    "rgb565": np.array([0xF8, 0xFC, 0xF8], dtype=np.uint8),
}


@pytest.mark.parametrize("fmt", ["rgb332", "rgb565"])
def test_round_trip_only_loses_low_bits(fmt):
    """Decoding gives back the input with its quantized bits cleared, nothing more."""
    rng = np.random.default_rng(1234)
    pixels = rng.integers(0, 256, size=(6, 9, 3), dtype=np.uint8)
    encoded = PackedEncoder.encode(
        pixels.tobytes(), {"width": 9, "height": 6, "channels": 3, "format": fmt}
    )

    decoded = PackedDecoder.decode(encoded, fmt)
    assert decoded["width"] == 9
    assert decoded["height"] == 6
    assert decoded["format"] == fmt

    restored = np.frombuffer(decoded["data"], dtype=np.uint8).reshape(6, 9, 3)
    assert np.array_equal(restored, pixels & MASKS[fmt]), "Decoded data mismatch!"


def test_decode_rgba_output():
    encoded = b"\x01\x00\x01\x00" + bytes([0xE0])
    decoded = PackedDecoder.decode(encoded, "rgb332", output_channels=4)
    assert decoded["channels"] == 4
    assert decoded["data"] == bytes([0xE0, 0x00, 0x00, 0xFF])


def test_decode_with_offset():
    packed = b"\x01\x00\x01\x00\xf8\x00"
    blob = b"junk" + packed + b"tail"
    decoded = PackedDecoder.decode(blob, "rgb565", byte_offset=4, byte_length=6)
    assert decoded["data"] == bytes([0xF8, 0x00, 0x00])


def test_decode_errors():
    with pytest.raises(ValueError, match="header"):
        PackedDecoder.decode(b"\x01\x00", "rgb332")
    with pytest.raises(ValueError, match="Incomplete"):
        PackedDecoder.decode(b"\x02\x00\x01\x00\xf8\x00", "rgb565")
    with pytest.raises(ValueError, match="format"):
        PackedDecoder.decode(b"\x00\x00\x00\x00", "rgb888")
    with pytest.raises(ValueError, match="channels"):
        PackedDecoder.decode(b"\x00\x00\x00\x00", "rgb332", output_channels=2)
