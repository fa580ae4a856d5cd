# src/brcm_firmware/help_text.py

from ._version import get_version as get_local_version
from .device_config import DEFAULT_INF_NAME, INDEX_NAME, MANIFEST_NAME


def print_help():
    """
    Prints the help text (Man page style) with dynamic versioning.
    """
    tool_ver = get_local_version()

    header = "BRCM-FIRMWARE(1)                User Commands                BRCM-FIRMWARE(1)"
    footer = f"\nVERSION\n       v{tool_ver}"

    help_text = rf"""{header}

NAME
       brcm-firmware - package Broadcom Bluetooth firmware for BrcmPatchRAM

SYNOPSIS
       brcm-firmware [-h] [--version] [--inf NAME] [--injectors MODE]
                     [--no-index] [--print-manifest] [--quiet]
                     INPUT_FOLDER OUTPUT_FOLDER

DESCRIPTION
       Reads the Windows 10 device block of the Broadcom driver INF found in
       INPUT_FOLDER, matches the .hex firmware files next to it against the
       declared USB devices and writes, for each device, a compressed
       <stem>_v<version>.zhx file into OUTPUT_FOLDER/<vid>_<pid>/.

       A link to the newest firmware of every device is kept at the top of
       OUTPUT_FOLDER, together with {MANIFEST_NAME} (IOKit personalities for
       BrcmPatchRAM) and {INDEX_NAME} (a readable list of packaged firmware).

OPTIONS
       -h, --help
              Show this help message and exit.

       --version
              Print the tool version and exit.

       --inf NAME
              INF file name inside INPUT_FOLDER (default: {DEFAULT_INF_NAME},
              or $BRCM_FIRMWARE_INF when set).

       --injectors MODE
              Injector kexts to write per device: both (default), legacy
              (BrcmFirmwareInjector, IOUSBDevice), host
              (BrcmFirmwareInjector2, IOUSBHostDevice) or none.

       --no-index
              Do not write {INDEX_NAME}.

       --print-manifest
              Print {MANIFEST_NAME} after writing it.

       --quiet
              Only print warnings and errors.

ENVIRONMENT
       BRCM_FIRMWARE_INF
              Default INF file name.

       BRCM_FIRMWARE_ERROR_LOG
              Path of the log file receiving tracebacks of unexpected errors.

EXIT STATUS
       0 on success, 1 when the INF file is missing or an unexpected error
       occurs, 2 on usage errors.
{footer}
"""
    print(help_text)
