"""
System clipboard access.
"""

from __future__ import annotations

from typing import Protocol

import pyperclip

from .core import ClipboardError


class Clipboard(Protocol):
    def write(self, text: str) -> None: ...


class SystemClipboard:
    """Clipboard backed by :mod:`pyperclip`. Failures raise ClipboardError."""

    def write(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Could not copy to clipboard: {e}")
