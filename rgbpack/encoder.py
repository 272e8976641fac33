from .formats import FORMATS, pack_header


class PackedEncoder:
    @staticmethod
    def encode(color_data, description: dict) -> bytes:
        """
        Encode raw pixels into a packed-pixel file.

        :param color_data: Bytes-like object (bytes, bytearray, list of ints) with 8-bit channels, row-major.
        :param description: Dictionary containing 'width', 'height', 'channels', 'format'.
        :return: bytes object with the 4-byte header followed by the pixel stream.
        """
        width = description.get("width")
        height = description.get("height")
        channels = description.get("channels")
        fmt = description.get("format")

        # --- Validation ---
        if fmt not in FORMATS:
            raise ValueError(
                f"encode: Invalid description.format {fmt!r}, must be rgb332 or rgb565"
            )

        if width is None or width < 0:
            raise ValueError("encode: Invalid description.width")

        if height is None or height < 0:
            raise ValueError("encode: Invalid description.height")

        if channels not in (3, 4):
            raise ValueError("encode: Invalid description.channels, must be 3 or 4")

        pixel_length = width * height * channels
        if len(color_data) != pixel_length:
            raise ValueError("encode: The length of colorData is incorrect")

        pack = FORMATS[fmt]

        result = bytearray(pack_header(width, height))

        # --- Pixel Loop ---
        # color_data is already row-major, so walking it in steps of
        # `channels` visits y ascending, then x ascending.
        for i in range(0, pixel_length, channels):
            # Alpha, when present, is skipped
            pack(color_data[i], color_data[i + 1], color_data[i + 2], result)

        return bytes(result)
