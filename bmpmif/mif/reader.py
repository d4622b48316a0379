from __future__ import annotations

import os
from typing import Dict, Optional, Set, Tuple, Union

from ..errors import IoError, MifFormatError
from .types import MifDocument

PathLike = Union[str, os.PathLike]

ADDRESS_RADIXES = {"UNS", "DEC"}
DATA_RADIXES = {"HEX"}


def parse_mif(text: str) -> MifDocument:
    """Parse the subset of MIF this package writes.

    Only single-address records (``addr : value;``) with an unsigned decimal
    address and a hexadecimal value are understood; ``--`` comments are
    ignored.
    """
    settings: Dict[str, str] = {}
    words: Dict[int, int] = {}
    in_content = False
    finished = False
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("--", 1)[0].strip()
        if not line:
            continue
        upper = line.upper()
        if not in_content:
            if upper.startswith("CONTENT BEGIN"):
                in_content = True
                continue
            key, sep, value = line.rstrip(";").partition("=")
            if not sep:
                raise MifFormatError(f"Line {number}: expected KEY=VALUE, got {raw!r}")
            settings[key.strip().upper()] = value.strip().upper()
            continue
        if upper.startswith("END;"):
            finished = True
            break
        address, value = _parse_record(line, number)
        words[address] = value
    if not in_content or not finished:
        raise MifFormatError("MIF content must be wrapped in CONTENT BEGIN ... END;")
    _check_radix(settings.get("ADDRESS_RADIX"), ADDRESS_RADIXES, "ADDRESS_RADIX")
    _check_radix(settings.get("DATA_RADIX"), DATA_RADIXES, "DATA_RADIX")
    document = MifDocument(
        word_width=_parse_int(settings, "WIDTH"),
        depth=_parse_int(settings, "DEPTH"),
        words=words,
    )
    for address in words:
        if address >= document.depth:
            raise MifFormatError(f"Address {address} outside DEPTH={document.depth}")
    return document


def read_mif(path: PathLike) -> MifDocument:
    try:
        with open(path, "r", encoding="ascii") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise IoError(f"Cannot read MIF {os.fspath(path)}: {exc}") from exc
    return parse_mif(text)


def _parse_record(line: str, number: int) -> Tuple[int, int]:
    addr_part, sep, val_part = line.partition(":")
    if not sep or not line.endswith(";"):
        raise MifFormatError(f"Line {number}: malformed record {line!r}")
    try:
        address = int(addr_part.strip(), 10)
        value = int(val_part.strip().rstrip(";").strip(), 16)
    except ValueError as exc:
        raise MifFormatError(f"Line {number}: malformed record {line!r}") from exc
    return address, value


def _parse_int(settings: Dict[str, str], key: str) -> int:
    raw = settings.get(key)
    if raw is None:
        raise MifFormatError(f"Missing {key}")
    try:
        value = int(raw, 10)
    except ValueError as exc:
        raise MifFormatError(f"{key} must be a decimal integer, got {raw!r}") from exc
    if value <= 0:
        raise MifFormatError(f"{key} must be positive, got {value}")
    return value


def _check_radix(value: Optional[str], allowed: Set[str], key: str) -> None:
    if value is not None and value not in allowed:
        raise MifFormatError(f"Unsupported {key}={value}")
