import struct

# Header: width(2), height(2), both little-endian
HEADER_SIZE = 4


def rgb332(r, g, b, buf: bytearray):
    """Pack one pixel as RRRGGGBB and append the single byte to buf."""
    r = r >> 5
    g = g >> 5
    b = b >> 6
    buf.append((r << 5) | (g << 2) | b)


def rgb565(r, g, b, buf: bytearray):
    """Pack one pixel as RRRRRGGGGGGBBBBB and append it big-endian to buf."""
    r = r >> 3
    g = g >> 2
    b = b >> 3
    value = (r << 11) | (g << 5) | b
    buf.append((value >> 8) & 0xFF)
    buf.append(value & 0xFF)


FORMATS = {
    "rgb332": rgb332,
    "rgb565": rgb565,
}

BYTES_PER_PIXEL = {
    "rgb332": 1,
    "rgb565": 2,
}


def get_format(name: str):
    """Return the pixel packer registered under name."""
    try:
        return FORMATS[name]
    except KeyError:
        raise ValueError(
            f"{name} is not a valid converter(should be rgb332 or rgb565)"
        ) from None


def pack_header(width: int, height: int) -> bytes:
    # Dimensions above 65535 wrap around, same as masking each byte
    return struct.pack("<HH", width & 0xFFFF, height & 0xFFFF)


def unpack_header(data) -> tuple[int, int]:
    if len(data) < HEADER_SIZE:
        raise ValueError("header: need 4 bytes for width and height")
    return struct.unpack("<HH", bytes(data[:HEADER_SIZE]))
