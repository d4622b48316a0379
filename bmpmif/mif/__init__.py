from .encoding import (
    cell_address,
    check_depth,
    encode_cells,
    ordered_records,
    pack_color,
    quantize_channel,
    SUPPORTED_DEPTHS,
    unpack_color,
)
from .reader import parse_mif, read_mif
from .types import MifDocument, MifRecord
from .writer import dump_mif, mif_lines, render_mif, write_mif

__all__ = [
    "cell_address",
    "check_depth",
    "dump_mif",
    "encode_cells",
    "mif_lines",
    "MifDocument",
    "MifRecord",
    "ordered_records",
    "pack_color",
    "parse_mif",
    "quantize_channel",
    "read_mif",
    "render_mif",
    "SUPPORTED_DEPTHS",
    "unpack_color",
    "write_mif",
]
