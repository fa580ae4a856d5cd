# src/brcm_firmware/emitters/base.py

import plistlib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List


class AbstractEmitter(ABC):
    @abstractmethod
    def emit(self) -> List[Path]:
        """Write the emitter's artefacts and return the paths written."""
        pass


def write_plist(path: Path, value: Any, sort_keys: bool = True) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as fh:
        plistlib.dump(value, fh, fmt=plistlib.FMT_XML, sort_keys=sort_keys)
    return path
