# src/brcm_firmware/emitters/index.py

from pathlib import Path
from typing import List, Sequence

from ..console import info
from ..device_config import COMPRESSED_FIRMWARE_SUFFIX, INDEX_NAME
from ..models import Device
from ..utils import newest_first, version_from_compressed_name
from .base import AbstractEmitter


def device_heading(device: Device) -> str:
    heading = f"* [{device.vendor_id:04x}:{device.product_id:04x}] {device.comment}"
    if device.description:
        heading += f" ({device.description})"
    return heading


def firmware_line(path: Path) -> str:
    version = version_from_compressed_name(path.name)
    label = f"v{version}" if version is not None else "unversioned"
    return f"  * {label}: {path.name}"


def render_index(devices: Sequence[Device], output_dir: Path) -> str:
    lines = []
    seen = set()
    for device in sorted(devices, key=lambda d: d.identity):
        folder = output_dir / device.folder_name
        if device.identity in seen or not folder.is_dir():
            continue
        seen.add(device.identity)
        lines.append(device_heading(device))
        for path in newest_first(folder.glob(f"*{COMPRESSED_FIRMWARE_SUFFIX}")):
            lines.append(firmware_line(path))
    return "\n".join(lines) + "\n" if lines else ""


class IndexEmitter(AbstractEmitter):
    def __init__(self, devices: Sequence[Device], output_dir, quiet: bool = False):
        self.devices = list(devices)
        self.output_dir = Path(output_dir)
        self.quiet = quiet

    @property
    def path(self) -> Path:
        return self.output_dir / INDEX_NAME

    def emit(self) -> List[Path]:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.path.write_text(render_index(self.devices, self.output_dir), encoding="utf-8")
        info(f"Wrote {INDEX_NAME}", self.quiet)
        return [self.path]
