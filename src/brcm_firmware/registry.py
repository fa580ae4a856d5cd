# src/brcm_firmware/registry.py

from __future__ import annotations

import enum
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .device_config import is_known_bad_firmware
from .errors import FirmwareVersionError
from .inf_scanner import (
    BlockEnd,
    BlockStart,
    CopyListHeader,
    Declaration,
    DescriptionLine,
    FirmwareLine,
    InfLine,
    classify_line,
    iter_inf_lines,
)
from .models import Device
from .utils import firmware_version_from_filename


class BlockState(enum.Enum):
    OUTSIDE = "outside"
    INSIDE = "inside"


class DeviceRegistryBuilder:
    """
    Single-pass state machine turning classified INF lines into devices.

    Declarations are only taken from inside the Windows 10 driver block.
    Copy-list and string sections are matched anywhere, but only against
    devices registered before the line is seen.
    """

    def __init__(self):
        self.state = BlockState.OUTSIDE
        self.devices: List[Device] = []
        # Device waiting for the first firmware line of its copy-list section
        self.pending: Optional[Device] = None
        self.excluded: List[Device] = []

    def feed(self, line: InfLine) -> None:
        if isinstance(line, BlockStart):
            self.state = BlockState.INSIDE
        elif isinstance(line, BlockEnd):
            self.state = BlockState.OUTSIDE
        elif isinstance(line, Declaration):
            self._on_declaration(line)
        elif isinstance(line, CopyListHeader):
            self.pending = self.find_by_device_key(line.device_key)
        elif isinstance(line, FirmwareLine):
            self._on_firmware(line)
        elif isinstance(line, DescriptionLine):
            for device in self.find_by_string_key(line.string_key):
                device.description = line.text

    def feed_text(self, text: str) -> None:
        self.feed(classify_line(text))

    def find_by_device_key(self, device_key: str) -> Optional[Device]:
        key = device_key.casefold()
        for device in reversed(self.devices):
            if device.device_key.casefold() == key:
                return device
        return None

    def find_by_string_key(self, string_key: str) -> List[Device]:
        key = string_key.casefold()
        return [d for d in self.devices if d.string_key.casefold() == key]

    def _on_declaration(self, line: Declaration) -> None:
        if self.state is not BlockState.INSIDE:
            return
        self.devices.append(
            Device(
                string_key=line.string_key,
                device_key=line.device_key,
                vendor_id=line.vendor_id,
                product_id=line.product_id,
                comment=line.comment,
            )
        )

    def _on_firmware(self, line: FirmwareLine) -> None:
        device = self.pending
        if device is None:
            return
        self.pending = None
        if is_known_bad_firmware(line.filename):
            device.firmware = line.filename
            self.devices = [d for d in self.devices if d is not device]
            self.excluded.append(device)
            return
        try:
            version = firmware_version_from_filename(line.filename)
        except FirmwareVersionError:
            # Left unresolved; the manifest reports it as missing firmware
            return
        device.firmware = line.filename
        device.firmware_version = version


def build_registry(lines: Iterable[str]) -> List[Device]:
    builder = DeviceRegistryBuilder()
    for text in lines:
        builder.feed_text(text)
    return builder.devices


def parse_inf(inf_path: Union[str, Path]) -> List[Device]:
    """Parse a Broadcom INF into devices, in declaration order."""
    return build_registry(iter_inf_lines(inf_path))
