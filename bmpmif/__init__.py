from .bitmap import Pixel, RawImage, decode_bitmap, read_bitmap
from .conversion import ConversionJob, ConversionSettings, output_filename
from .errors import (
    ConversionError,
    InvalidHeader,
    IoError,
    MifFormatError,
    TruncatedData,
    UnknownTarget,
    UnsupportedDepth,
)

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "ConversionJob",
    "ConversionSettings",
    "decode_bitmap",
    "InvalidHeader",
    "IoError",
    "MifFormatError",
    "output_filename",
    "Pixel",
    "RawImage",
    "read_bitmap",
    "TruncatedData",
    "UnknownTarget",
    "UnsupportedDepth",
]
