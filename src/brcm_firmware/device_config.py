"""Constants describing the Broadcom INF layout and the BrcmPatchRAM outputs.

The INF patterns below cover the revisions of the Broadcom Bluetooth driver
package seen so far: older INFs pin the Windows 10 section to ``NTamd64``,
newer ones ship one section per architecture, and device lines either use the
``BlueRAMUSBxxxx`` install section or the bare ``RAMUSBxxxx`` token.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Dict, Tuple

DEFAULT_INF_NAME = os.getenv("BRCM_FIRMWARE_INF", "").strip() or "bcbtums.inf"

# Firmware numbering restarted between generations; the kext expects the
# later generation to sort above every build of the earlier one.
FIRMWARE_VERSION_BIAS = 4096

# BCM4350C5 patch RAM hangs some chipsets during upload.
KNOWN_BAD_FIRMWARE_PREFIXES: Tuple[str, ...] = ("BCM4350C5",)

FIRMWARE_PREFIX = "BCM"
RAW_FIRMWARE_SUFFIX = ".hex"
COMPRESSED_FIRMWARE_SUFFIX = ".zhx"
COMPRESSION_LEVEL = 9

MANIFEST_NAME = "firmwares.plist"
INDEX_NAME = "firmwares.md"

BLOCK_START_RE = re.compile(r"^\[Broadcom\.NT\w*\.10\.0\]", re.IGNORECASE)
BLOCK_END_RE = re.compile(r"^\[Broadcom\.NT\w*\.6\.3\]", re.IGNORECASE)

# %BRCM20702.DeviceDesc%=BlueRAMUSB21E8,   USB\VID_0A5C&PID_21E8   ; 20702A1 dongles
DECLARATION_RE = re.compile(
    r"^%(?P<string_key>[\w.]*)%\s*=\s*(?:Blue)?(?P<device_key>RAMUSB[0-9A-Fa-f]{4})\s*,"
    r"\s*USB\\VID_(?P<vid>[0-9A-Fa-f]{4})&PID_(?P<pid>[0-9A-Fa-f]{4})"
    r"\s*;[ \t]*(?P<comment>.*?)\s*$"
)
COPY_LIST_RE = re.compile(
    r"^\[(?P<device_key>RAMUSB[0-9A-F]{4})\.CopyList\]", re.IGNORECASE
)
FIRMWARE_LINE_RE = re.compile(r"^(?P<filename>BCM[^\s,;]*\.hex)", re.IGNORECASE)
DESCRIPTION_RE = re.compile(
    r'^(?P<string_key>\w*\.DeviceDesc)\s*=\s*"(?P<text>.*)"', re.IGNORECASE
)

MANIFEST_BUNDLE_IDENTIFIER = "com.no-one.$(PRODUCT_NAME:rfc1034identifier)"
MANIFEST_IO_CLASS = "BrcmPatchRAM"
MANIFEST_PROVIDER_CLASS = "IOUSBDevice"

INJECTOR_BUNDLE_VERSION = "2.1.0"
INJECTOR_PROBE_SCORE = 2000
FIRMWARE_STORE_CLASS = "BrcmFirmwareStore"
FIRMWARE_STORE_IDENTIFIER = "com.no-one.BrcmFirmwareStore"
FIRMWARE_STORE_PROVIDER_CLASS = "disabled_IOResources"


@dataclass(frozen=True)
class InjectorVariant:
    name: str
    bundle_prefix: str
    bundle_identifier: str
    io_class: str
    provider_class: str


INJECTOR_VARIANTS: Dict[str, InjectorVariant] = {
    "legacy": InjectorVariant(
        name="legacy",
        bundle_prefix="BrcmFirmwareInjector",
        bundle_identifier="com.no-one.BrcmPatchRAM",
        io_class="BrcmPatchRAM",
        provider_class="IOUSBDevice",
    ),
    "host": InjectorVariant(
        name="host",
        bundle_prefix="BrcmFirmwareInjector2",
        bundle_identifier="com.no-one.BrcmPatchRAM2",
        io_class="BrcmPatchRAM2",
        provider_class="IOUSBHostDevice",
    ),
}

INJECTOR_CHOICES: Dict[str, Tuple[str, ...]] = {
    "both": ("legacy", "host"),
    "legacy": ("legacy",),
    "host": ("host",),
    "none": (),
}


def is_known_bad_firmware(filename: str) -> bool:
    upper = filename.upper()
    return any(upper.startswith(prefix.upper()) for prefix in KNOWN_BAD_FIRMWARE_PREFIXES)


def resolve_injector_variants(choice: str) -> Tuple[InjectorVariant, ...]:
    try:
        names = INJECTOR_CHOICES[choice]
    except KeyError as exc:
        raise ValueError(f"Unknown injector selection: {choice}") from exc
    return tuple(INJECTOR_VARIANTS[name] for name in names)
