# src/brcm_firmware/emitters/injector.py

from pathlib import Path
from typing import Any, Dict, List, Sequence

from ..console import info
from ..device_config import (
    FIRMWARE_STORE_CLASS,
    FIRMWARE_STORE_IDENTIFIER,
    FIRMWARE_STORE_PROVIDER_CLASS,
    INJECTOR_BUNDLE_VERSION,
    INJECTOR_PROBE_SCORE,
    INJECTOR_VARIANTS,
    InjectorVariant,
)
from ..models import Device, PackagedFirmware
from .base import AbstractEmitter, write_plist


def injector_firmware_key(device: Device) -> str:
    return f"{device.vendor_id:04x}_{device.product_id:04x}_v{device.firmware_version:4d}"


def injector_bundle_name(variant: InjectorVariant, device: Device) -> str:
    return f"{variant.bundle_prefix}_{device.folder_name}.kext"


def build_injector_plist(
    variant: InjectorVariant, device: Device, compressed: bytes
) -> Dict[str, Any]:
    vid_pid = f"{device.vendor_id:04x}.{device.product_id:04x}"
    firmware_key = injector_firmware_key(device)

    device_personality = {
        "CFBundleIdentifier": variant.bundle_identifier,
        "DisplayName": device.display_name,
        "FirmwareKey": firmware_key,
        "IOClass": variant.io_class,
        "IOMatchCategory": variant.io_class,
        "IOProbeScore": INJECTOR_PROBE_SCORE,
        "IOProviderClass": variant.provider_class,
        "idProduct": device.product_id,
        "idVendor": device.vendor_id,
    }
    firmware_store = {
        "CFBundleIdentifier": FIRMWARE_STORE_IDENTIFIER,
        "Firmwares": {firmware_key: compressed},
        "IOClass": FIRMWARE_STORE_CLASS,
        "IOMatchCategory": FIRMWARE_STORE_CLASS,
        "IOProbeScore": INJECTOR_PROBE_SCORE,
        "IOProviderClass": FIRMWARE_STORE_PROVIDER_CLASS,
    }
    return {
        "CFBundleIdentifier": f"com.no-one.BrcmInjector.{vid_pid}",
        "CFBundleInfoDictionaryVersion": "6.0",
        "CFBundleName": f"BrcmInjector.{vid_pid}",
        "CFBundlePackageType": "KEXT",
        "CFBundleShortVersionString": INJECTOR_BUNDLE_VERSION,
        "CFBundleSignature": "????",
        "CFBundleVersion": INJECTOR_BUNDLE_VERSION,
        "IOKitPersonalities": {
            device.folder_name: device_personality,
            FIRMWARE_STORE_CLASS: firmware_store,
        },
    }


class InjectorEmitter(AbstractEmitter):
    """Write BrcmFirmwareInjector kexts next to each packaged firmware."""

    def __init__(
        self,
        packaged: Sequence[PackagedFirmware],
        variants: Sequence[InjectorVariant] = tuple(INJECTOR_VARIANTS.values()),
        quiet: bool = False,
    ):
        self.packaged = list(packaged)
        self.variants = list(variants)
        self.quiet = quiet

    def emit(self) -> List[Path]:
        written = []
        for item in self.packaged:
            for variant in self.variants:
                written.append(self.emit_one(variant, item))
        return written

    def emit_one(self, variant: InjectorVariant, item: PackagedFirmware) -> Path:
        device = item.device
        bundle = item.output.parent / injector_bundle_name(variant, device)
        plist = build_injector_plist(variant, device, item.compressed)
        path = write_plist(bundle / "Contents" / "Info.plist", plist)
        info(f"Wrote injector {bundle.name}", self.quiet)
        return path
