# src/brcm_firmware/emitters/manifest.py

from pathlib import Path
from typing import Any, Dict, List, Sequence

from ..console import info, warn
from ..device_config import (
    MANIFEST_BUNDLE_IDENTIFIER,
    MANIFEST_IO_CLASS,
    MANIFEST_NAME,
    MANIFEST_PROVIDER_CLASS,
)
from ..models import Device
from .base import AbstractEmitter, write_plist


def manifest_entry(device: Device) -> Dict[str, Any]:
    return {
        "CFBundleIdentifier": MANIFEST_BUNDLE_IDENTIFIER,
        "DisplayName": device.display_name,
        "FirmwareKey": device.firmware_key,
        "IOClass": MANIFEST_IO_CLASS,
        "IOMatchCategory": MANIFEST_IO_CLASS,
        "IOProviderClass": MANIFEST_PROVIDER_CLASS,
        "idProduct": device.product_id,
        "idVendor": device.vendor_id,
    }


def build_manifest(devices: Sequence[Device]) -> Dict[str, Dict[str, Any]]:
    """
    Build the firmwares.plist dictionary, keyed by ``<vid>_<pid>``.

    Devices whose copy-list section never named a firmware are left out with
    a warning. When the INF declares one VID/PID more than once the first
    declaration wins.
    """
    manifest: Dict[str, Dict[str, Any]] = {}
    for device in sorted(devices, key=lambda d: d.identity):
        if device.firmware is None:
            warn(
                f"No firmware resolved for {device.folder_name} "
                f"({device.comment}); not added to {MANIFEST_NAME}."
            )
            continue
        key = device.folder_name
        if key in manifest:
            warn(f"Duplicate device {key} ({device.comment}); keeping the first entry.")
            continue
        manifest[key] = manifest_entry(device)
    return manifest


class ManifestEmitter(AbstractEmitter):
    def __init__(self, devices: Sequence[Device], output_dir, quiet: bool = False):
        self.devices = list(devices)
        self.output_dir = Path(output_dir)
        self.quiet = quiet

    @property
    def path(self) -> Path:
        return self.output_dir / MANIFEST_NAME

    def emit(self) -> List[Path]:
        manifest = build_manifest(self.devices)
        write_plist(self.path, manifest, sort_keys=False)
        info(f"Wrote {MANIFEST_NAME} ({len(manifest)} devices)", self.quiet)
        return [self.path]
