from __future__ import annotations

import os
from typing import Iterable, Iterator, TextIO, Union

from ..errors import IoError
from .encoding import check_depth
from .types import MifRecord

PathLike = Union[str, os.PathLike]


def header_lines(depth: int, word_count: int) -> Iterator[str]:
    yield f"WIDTH={3 * check_depth(depth)};"
    yield f"DEPTH={word_count};"
    yield ""
    yield "ADDRESS_RADIX=UNS;"
    yield "DATA_RADIX=HEX;"
    yield ""
    yield "CONTENT BEGIN"


def record_line(record: MifRecord) -> str:
    return f"{record.address} : {record.value:X};"


def mif_lines(records: Iterable[MifRecord], depth: int, word_count: int) -> Iterator[str]:
    """Yield every line of a MIF document, without line terminators."""
    yield from header_lines(depth, word_count)
    for record in records:
        yield record_line(record)
    yield "END;"


def render_mif(records: Iterable[MifRecord], depth: int, word_count: int) -> str:
    return "".join(line + "\n" for line in mif_lines(records, depth, word_count))


def dump_mif(records: Iterable[MifRecord], depth: int, word_count: int, handle: TextIO) -> None:
    for line in mif_lines(records, depth, word_count):
        handle.write(line + "\n")


def write_mif(path: PathLike, records: Iterable[MifRecord], depth: int, word_count: int) -> None:
    """Write a MIF file; the handle is closed on every path."""
    check_depth(depth)
    try:
        with open(path, "w", encoding="ascii", newline="\n") as handle:
            dump_mif(records, depth, word_count, handle)
    except OSError as exc:
        raise IoError(f"Cannot write MIF {os.fspath(path)}: {exc}") from exc
