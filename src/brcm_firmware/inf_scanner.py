# src/brcm_firmware/inf_scanner.py

from __future__ import annotations

import codecs
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Union

from .device_config import (
    BLOCK_END_RE,
    BLOCK_START_RE,
    COPY_LIST_RE,
    DECLARATION_RE,
    DESCRIPTION_RE,
    FIRMWARE_LINE_RE,
)
from .errors import InfNotFoundError
from .utils import parse_hex_id


@dataclass(frozen=True)
class Declaration:
    string_key: str
    device_key: str
    vendor_id: int
    product_id: int
    comment: str


@dataclass(frozen=True)
class FirmwareLine:
    filename: str


@dataclass(frozen=True)
class CopyListHeader:
    device_key: str


@dataclass(frozen=True)
class DescriptionLine:
    string_key: str
    text: str


@dataclass(frozen=True)
class BlockStart:
    pass


@dataclass(frozen=True)
class BlockEnd:
    pass


@dataclass(frozen=True)
class Unrecognized:
    text: str


InfLine = Union[
    Declaration,
    FirmwareLine,
    CopyListHeader,
    DescriptionLine,
    BlockStart,
    BlockEnd,
    Unrecognized,
]


def _detect_encoding(path: Path) -> str:
    with path.open("rb") as fh:
        head = fh.read(4)
    if head.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        return "utf-16"
    if head.startswith(codecs.BOM_UTF8):
        return "utf-8-sig"
    # Vendor INFs without a BOM are ANSI text
    return "cp1252"


def _read_lines(path: Path, encoding: str) -> Iterator[str]:
    with path.open("r", encoding=encoding, errors="replace", newline="") as fh:
        yield from fh


def iter_inf_lines(path: Union[str, Path]) -> Iterator[str]:
    """
    Return a lazy iterator over the INF file's lines, terminators included.

    Raises InfNotFoundError at call time, not on first iteration.
    """
    inf_path = Path(path)
    if not inf_path.is_file():
        raise InfNotFoundError(inf_path)
    return _read_lines(inf_path, _detect_encoding(inf_path))


def classify_line(line: str) -> InfLine:
    if BLOCK_START_RE.match(line):
        return BlockStart()
    if BLOCK_END_RE.match(line):
        return BlockEnd()

    match = DECLARATION_RE.match(line)
    if match:
        return Declaration(
            string_key=match.group("string_key"),
            device_key=match.group("device_key"),
            vendor_id=parse_hex_id(match.group("vid")),
            product_id=parse_hex_id(match.group("pid")),
            comment=match.group("comment"),
        )

    match = COPY_LIST_RE.match(line)
    if match:
        return CopyListHeader(device_key=match.group("device_key"))

    match = FIRMWARE_LINE_RE.match(line)
    if match:
        return FirmwareLine(filename=match.group("filename"))

    match = DESCRIPTION_RE.match(line)
    if match:
        return DescriptionLine(string_key=match.group("string_key"), text=match.group("text"))

    return Unrecognized(text=line)
