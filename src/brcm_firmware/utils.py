# src/brcm_firmware/utils.py

from __future__ import annotations

import string
from pathlib import Path
from typing import Iterable, List, Optional

from .device_config import COMPRESSED_FIRMWARE_SUFFIX, FIRMWARE_VERSION_BIAS
from .errors import FirmwareVersionError


def device_folder_name(vendor_id: int, product_id: int) -> str:
    return f"{vendor_id:04x}_{product_id:04x}"


def parse_hex_id(text: str) -> int:
    value = int(text.strip().lower().removeprefix("0x"), 16)
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"USB id out of range: {text}")
    return value


def firmware_version_from_filename(filename: str) -> int:
    """
    Derive the BrcmPatchRAM firmware version from a vendor firmware name.

    The last four characters of the stem carry the build number, e.g.
    ``BCM20702A1_001.002.014.1443.1572.hex`` -> 1572 + 4096 = 5668.
    """
    digits = Path(filename).stem[-4:]
    if len(digits) == 4 and digits.isdigit():
        return int(digits) + FIRMWARE_VERSION_BIAS
    if len(digits) == 4 and all(ch in string.hexdigits for ch in digits):
        return int(digits, 16) + FIRMWARE_VERSION_BIAS
    raise FirmwareVersionError(f"No version digits in firmware name: {filename}")


def compressed_firmware_name(stem: str, version: int) -> str:
    return f"{stem}_v{version}{COMPRESSED_FIRMWARE_SUFFIX}"


def version_suffix(name: str) -> str:
    # "..._v5668.zhx" -> "5668.zhx"; ordering key for picking the newest file
    return name[-8:]


def version_from_compressed_name(name: str) -> Optional[int]:
    stem = Path(name).stem
    _, sep, tail = stem.rpartition("_v")
    if not sep or not tail.isdigit():
        return None
    return int(tail)


def newest_first(paths: Iterable[Path]) -> List[Path]:
    ordered = sorted(paths, key=lambda p: p.name)
    return sorted(ordered, key=lambda p: version_suffix(p.name), reverse=True)
