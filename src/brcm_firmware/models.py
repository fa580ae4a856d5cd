# src/brcm_firmware/models.py

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .utils import device_folder_name


@dataclass
class Device:
    string_key: str
    device_key: str
    vendor_id: int
    product_id: int
    comment: str = ""
    # Filled in later in the scan, once the copy-list and string sections are seen
    firmware: Optional[str] = None
    firmware_version: Optional[int] = None
    description: Optional[str] = None

    @property
    def identity(self) -> tuple:
        return (self.vendor_id, self.product_id)

    @property
    def folder_name(self) -> str:
        return device_folder_name(self.vendor_id, self.product_id)

    @property
    def firmware_stem(self) -> Optional[str]:
        if self.firmware is None:
            return None
        return Path(self.firmware).stem

    @property
    def firmware_key(self) -> Optional[str]:
        if self.firmware is None or self.firmware_version is None:
            return None
        return f"{self.firmware_stem}_v{self.firmware_version}"

    @property
    def display_name(self) -> str:
        return self.description if self.description is not None else self.comment

    def matches_firmware(self, filename: str) -> bool:
        return self.firmware is not None and self.firmware.casefold() == filename.casefold()


@dataclass
class PackagedFirmware:
    device: Device
    source: Path
    output: Path
    raw_size: int
    compressed: bytes
    link: Optional[Path] = None

    @property
    def compressed_size(self) -> int:
        return len(self.compressed)
