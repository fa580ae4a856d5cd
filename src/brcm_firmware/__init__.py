# src/brcm_firmware/__init__.py
from importlib import import_module
from typing import Any

from .models import Device, PackagedFirmware
from .packager import package_firmwares
from .registry import parse_inf
from .services import FirmwarePipeline


def __getattr__(name: str) -> Any:
    if name == "display":
        return import_module(".display", __name__)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
    "Device",
    "PackagedFirmware",
    "FirmwarePipeline",
    "display",
    "package_firmwares",
    "parse_inf",
]
