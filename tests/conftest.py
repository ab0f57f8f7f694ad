"""
Shared pytest setup: make ``src`` importable and provide small project trees.
"""

import os
import sys
from pathlib import Path

import pytest

_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


class FakeClipboard:
    """Records every write instead of touching the system clipboard."""

    def __init__(self, fail: bool = False):
        self.writes = []
        self.fail = fail

    def write(self, text: str) -> None:
        from clipfiles.core import ClipboardError

        if self.fail:
            raise ClipboardError("no clipboard available")
        self.writes.append(text)


@pytest.fixture
def fake_clipboard():
    return FakeClipboard()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """
    tmp/
      a/x.go, a/y.go
      b/z.go
      notes.txt
    """
    (tmp_path / "a").mkdir()
    (tmp_path / "b").mkdir()
    (tmp_path / "a" / "x.go").write_text("package a\n", encoding="utf-8")
    (tmp_path / "a" / "y.go").write_text("package a", encoding="utf-8")
    (tmp_path / "b" / "z.go").write_text("package b\n\nfunc Z() {}\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("hello\n", encoding="utf-8")
    return tmp_path
