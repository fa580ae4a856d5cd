# src/brcm_firmware/packager.py

from __future__ import annotations

import contextlib
import os
import shutil
import zlib
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .console import info, warn
from .device_config import (
    COMPRESSED_FIRMWARE_SUFFIX,
    COMPRESSION_LEVEL,
    RAW_FIRMWARE_SUFFIX,
)
from .models import Device, PackagedFirmware
from .utils import compressed_firmware_name, newest_first


def compress_firmware(data: bytes) -> bytes:
    # zlib stream (78 DA header); BrcmFirmwareStore sniffs that magic before inflating
    return zlib.compress(data, COMPRESSION_LEVEL)


def remove_stale_links(output_dir: Path) -> None:
    for path in output_dir.glob(f"*{COMPRESSED_FIRMWARE_SUFFIX}"):
        with contextlib.suppress(FileNotFoundError):
            path.unlink()


class FirmwarePackager:
    """
    Compress the vendor .hex files referenced by the INF into per-device
    folders named ``<vid>_<pid>`` and keep a top-level link to the newest
    firmware of each folder.
    """

    def __init__(
        self,
        devices: Sequence[Device],
        input_dir: Union[str, Path],
        output_dir: Union[str, Path],
        quiet: bool = False,
    ):
        self.devices = list(devices)
        self.input_dir = Path(input_dir)
        self.output_dir = Path(output_dir)
        self.quiet = quiet

    def run(self) -> List[PackagedFirmware]:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        remove_stale_links(self.output_dir)

        packaged: List[PackagedFirmware] = []
        for source in sorted(self.input_dir.glob(f"*{RAW_FIRMWARE_SUFFIX}")):
            matches = self.find_devices(source.name)
            if not matches:
                warn(
                    f"Firmware file {source.name} is not matched against devices "
                    "in INF file... skipping."
                )
                continue
            raw = source.read_bytes()
            compressed = compress_firmware(raw)
            for device in matches:
                packaged.append(self.package(device, source, raw, compressed))
        return packaged

    def find_devices(self, filename: str) -> List[Device]:
        return [d for d in self.devices if d.matches_firmware(filename)]

    def package(
        self, device: Device, source: Path, raw: bytes, compressed: bytes
    ) -> PackagedFirmware:
        output_name = compressed_firmware_name(source.stem, device.firmware_version)
        device_path = self.output_dir / device.folder_name
        device_path.mkdir(parents=True, exist_ok=True)
        output = device_path / output_name
        output.write_bytes(compressed)

        info(
            f"Compressed firmware {output_name} ({len(raw)} --> {len(compressed)})",
            self.quiet,
        )

        link = self.update_latest_link(device_path)
        return PackagedFirmware(
            device=device,
            source=source,
            output=output,
            raw_size=len(raw),
            compressed=compressed,
            link=link,
        )

    def update_latest_link(self, device_path: Path) -> Optional[Path]:
        candidates = newest_first(device_path.glob(f"*{COMPRESSED_FIRMWARE_SUFFIX}"))
        if not candidates:
            return None
        latest = candidates[0]
        link = self.output_dir / latest.name
        target = f"./{device_path.name}/{latest.name}"

        if link.is_symlink() or link.exists():
            if _link_points_into(link, device_path):
                link.unlink()
            else:
                warn(f"Firmware symlink {link.name} already created for another device.")
                return None

        self._drop_superseded_links(device_path, keep=latest.name)
        try:
            os.symlink(target, link)
        except (OSError, NotImplementedError):
            # No symlink privilege (Windows without developer mode)
            shutil.copyfile(latest, link)
        return link

    def _drop_superseded_links(self, device_path: Path, keep: str) -> None:
        for path in self.output_dir.glob(f"*{COMPRESSED_FIRMWARE_SUFFIX}"):
            if path.name != keep and path.is_symlink() and _link_points_into(path, device_path):
                path.unlink()


def _link_points_into(link: Path, device_path: Path) -> bool:
    if link.is_symlink():
        target = Path(os.readlink(link))
        return target.parent.name == device_path.name
    # Copied fallback: same bytes as a file in the folder
    candidate = device_path / link.name
    return candidate.is_file() and candidate.read_bytes() == link.read_bytes()


def package_firmwares(
    devices: Sequence[Device],
    input_dir: Union[str, Path],
    output_dir: Union[str, Path],
    quiet: bool = False,
) -> List[PackagedFirmware]:
    return FirmwarePackager(devices, input_dir, output_dir, quiet=quiet).run()
