"""Runtime version resolver for brcm_firmware."""

from __future__ import annotations

import importlib.metadata
import os
import re
from pathlib import Path
from typing import Iterable, Optional

__all__ = ["get_version"]

PACKAGE_NAME = "brcm-firmware-tool"
_SETUP_VERSION_RE = re.compile(r"""^\s*version\s*=\s*['"]([^'"]+)['"]""", re.MULTILINE)


def _candidate_roots() -> Iterable[Path]:
    """Yield the source checkout roots a setup.py could live in."""
    module_path = Path(__file__).resolve()
    seen: set[Path] = set()
    for loc in (*module_path.parents, Path.cwd()):
        if loc in seen:
            continue
        seen.add(loc)
        yield loc


def _read_version_from_setup_py() -> Optional[str]:
    for root in _candidate_roots():
        candidate = root / "setup.py"
        if not candidate.is_file():
            continue
        try:
            text = candidate.read_text(encoding="utf-8", errors="ignore")
        except OSError:
            continue
        match = _SETUP_VERSION_RE.search(text)
        if match:
            return match.group(1).strip()
    return None


def get_version(dist_name: str = PACKAGE_NAME) -> str:
    """Return the installed distribution version for display."""
    env_override = os.getenv("BRCM_FIRMWARE_VERSION", "").strip()
    if env_override:
        return env_override
    try:
        return importlib.metadata.version(dist_name)
    except importlib.metadata.PackageNotFoundError:
        pass
    return _read_version_from_setup_py() or "Unknown"
