from .converter import ConversionError, convert
from .decoder import PackedDecoder
from .encoder import PackedEncoder
from .formats import BYTES_PER_PIXEL, FORMATS, get_format, rgb332, rgb565
from .utils import load_image

__all__ = [
    "PackedEncoder",
    "PackedDecoder",
    "ConversionError",
    "convert",
    "FORMATS",
    "BYTES_PER_PIXEL",
    "get_format",
    "rgb332",
    "rgb565",
    "load_image",
]
