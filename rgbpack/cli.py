import sys

from .converter import ConversionError, convert
from .formats import FORMATS


def main(argv=None):
    if argv is None:
        argv = sys.argv

    if len(argv) < 4:
        print(f"usage: {argv[0]} <rgb332 or rgb565> <:inputFileName> <:outputFilename>")
        return

    fmt, in_path, out_path = argv[1], argv[2], argv[3]
    if fmt not in FORMATS:
        print(f"error: {fmt} is not a valid converter(should be rgb332 or rgb565)")
        return

    try:
        written = convert(in_path, out_path, fmt)
    except ConversionError as e:
        print(f"error: {e}")
        return

    print(f"Converted {in_path} to {out_path} ({written} bytes)")
