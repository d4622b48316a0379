from .decoder import HEADER_SIZE, MAX_DIMENSION, decode_bitmap, read_bitmap, row_stride
from .types import Pixel, RawImage

__all__ = [
    "decode_bitmap",
    "HEADER_SIZE",
    "MAX_DIMENSION",
    "Pixel",
    "RawImage",
    "read_bitmap",
    "row_stride",
]
