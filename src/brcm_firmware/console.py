# src/brcm_firmware/console.py

import sys


def info(message: str, quiet: bool = False) -> None:
    if quiet:
        return
    print(message)


def warn(message: str) -> None:
    print(f"Warning: {message}", file=sys.stderr)
