# src/brcm_firmware/errors.py


class FirmwareToolError(Exception):
    """Base class for errors raised by brcm_firmware."""


class InfNotFoundError(FirmwareToolError, FileNotFoundError):
    def __init__(self, path):
        super().__init__(f"INF file not found: {path}")
        self.path = path


class FirmwareVersionError(FirmwareToolError, ValueError):
    pass
