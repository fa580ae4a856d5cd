# src/brcm_firmware/display.py

import sys
from pathlib import Path
from typing import Optional, TextIO

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import XmlLexer


def render_plist(text: str, colour: bool) -> str:
    if not colour:
        return text
    return highlight(text, XmlLexer(), TerminalFormatter())


def print_plist(path: Path, stream: Optional[TextIO] = None) -> None:
    stream = stream or sys.stdout
    text = Path(path).read_text(encoding="utf-8")
    isatty = getattr(stream, "isatty", None)
    colour = bool(callable(isatty) and isatty())
    stream.write(render_plist(text, colour))
