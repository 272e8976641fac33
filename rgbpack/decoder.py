from .formats import BYTES_PER_PIXEL, HEADER_SIZE, unpack_header


class PackedDecoder:
    """
    Expand a packed-pixel file back into 8-bit RGB(A) pixel data.

    The packed file carries no format tag, so the caller must say which
    packing was used.
    """

    @staticmethod
    def decode(
        file_data: bytes,
        fmt: str,
        byte_offset: int = 0,
        byte_length: int = None,
        output_channels: int = 3,
    ) -> dict:
        """
        Decode a packed-pixel file given as a bytes/bytearray object.

        Every channel comes back with its discarded low bits set to zero, so a
        decoded pixel equals the quantized source pixel exactly.

        :param file_data: Bytes containing the packed file.
        :param fmt: 'rgb332' or 'rgb565'.
        :param byte_offset: Offset to the start of the packed file in file_data.
        :param byte_length: Length of the packed file in bytes.
        :param output_channels: 3 for RGB output, 4 to add an opaque alpha channel.
        :return: Dictionary containing width, height, format, channels, and data (bytes).
        """
        if byte_length is None:
            byte_length = len(file_data) - byte_offset

        data = file_data[byte_offset : byte_offset + byte_length]

        # --- Validation ---
        if fmt not in BYTES_PER_PIXEL:
            raise ValueError(
                f"decode: Invalid format {fmt!r}, must be rgb332 or rgb565"
            )

        if len(data) < HEADER_SIZE:
            raise ValueError("decode: File too short for header")

        if output_channels not in (3, 4):
            raise ValueError("decode: The number of channels for the output is invalid")

        width, height = unpack_header(data)

        step = BYTES_PER_PIXEL[fmt]
        total_pixels = width * height
        if len(data) - HEADER_SIZE < total_pixels * step:
            raise ValueError("decode: Incomplete image")

        result = bytearray(total_pixels * output_channels)

        read_pos = HEADER_SIZE
        write_pos = 0

        # --- Decoding Loop ---
        for _ in range(total_pixels):
            if step == 1:
                # RRRGGGBB
                px = data[read_pos]
                r = (px >> 5) << 5
                g = ((px >> 2) & 0x07) << 5
                b = (px & 0x03) << 6
            else:
                # RRRRRGGG GGGBBBBB, high byte first
                px = (data[read_pos] << 8) | data[read_pos + 1]
                r = (px >> 11) << 3
                g = ((px >> 5) & 0x3F) << 2
                b = (px & 0x1F) << 3
            read_pos += step

            result[write_pos] = r
            result[write_pos + 1] = g
            result[write_pos + 2] = b
            if output_channels == 4:
                result[write_pos + 3] = 255
            write_pos += output_channels

        return {
            "width": width,
            "height": height,
            "format": fmt,
            "channels": output_channels,
            "data": bytes(result),
        }
