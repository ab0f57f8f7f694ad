"""
Core logic for clipfiles package.
"""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Set

import pathspec  # type: ignore
from colorama import Fore, Style

from .tree import TreeNode, build_tree, render_tree

# Exceptions
class ClipfilesError(Exception): ...
class InvalidRootError(ClipfilesError): ...
class ConfigFileError(ClipfilesError): ...
class ClipboardError(ClipfilesError): ...

# Summary thresholds (characters)
SMALL_LIMIT = 20_000   # fits any chat model
MEDIUM_LIMIT = 50_000  # fits the larger-context ones


class SizeTier(enum.Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


TIER_COLORS = {
    SizeTier.SMALL: Fore.GREEN,
    SizeTier.MEDIUM: Fore.YELLOW,
    SizeTier.LARGE: Fore.RED,
}


def classify_size(char_count: int) -> SizeTier:
    if char_count <= SMALL_LIMIT:
        return SizeTier.SMALL
    if char_count <= MEDIUM_LIMIT:
        return SizeTier.MEDIUM
    return SizeTier.LARGE


def log(msg: str, color: str = "") -> None:
    """Print a ``[clipfiles]`` progress line."""
    if color:
        print(color + f"[clipfiles] {msg}" + Style.RESET_ALL)
    else:
        print(f"[clipfiles] {msg}")


# Ignore-file utilities
def load_gitignore(root: Path) -> "pathspec.PathSpec":
    gitignore_path = root / ".gitignore"
    if not gitignore_path.is_file():
        return pathspec.PathSpec.from_lines("gitwildmatch", [])
    with gitignore_path.open("r", encoding="utf-8") as fh:
        return pathspec.PathSpec.from_lines("gitwildmatch", fh)


def read_pattern_file(config_path: Path) -> List[str]:
    if not config_path.exists():
        raise ConfigFileError(f"Config file '{config_path}' does not exist")
    if not config_path.is_file():
        raise ConfigFileError(f"'{config_path}' is not a file")
    try:
        with config_path.open("r", encoding="utf-8") as fh:
            return [
                ln.strip()
                for ln in fh
                if ln.strip() and not ln.lstrip().startswith("#")
            ]
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileError(f"Could not read config file '{config_path}': {e}")


def build_ignore_spec(patterns: Optional[Iterable[str]]) -> Optional["pathspec.PathSpec"]:
    cleaned = [p.strip() for p in patterns or () if p.strip()]
    if not cleaned:
        return None
    return pathspec.PathSpec.from_lines("gitwildmatch", cleaned)


# File-scanning helpers
def normalize_extensions(extensions: Optional[Iterable[str]]) -> Set[str]:
    """``[".PY", "go"]`` -> ``{"py", "go"}``."""
    return {e.lower().lstrip(".") for e in extensions or () if e.strip(".")}


def file_extension(name: str) -> str:
    idx = name.rfind(".")
    return name[idx + 1:].lower() if idx >= 0 else ""


def _walk(directory: Path) -> Iterator[Path]:
    # Unreadable directories and entries are skipped, never fatal.
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError:
        return
    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            continue
        if is_dir:
            yield from _walk(Path(entry.path))
        else:
            yield Path(entry.path)


def scan_files(root: Path, extensions: Optional[Iterable[str]] = None) -> List[Path]:
    try:
        root = root.resolve()
    except (OSError, RuntimeError) as e:
        raise InvalidRootError(f"Could not resolve root path '{root}': {e}")
    if not root.exists():
        raise InvalidRootError(f"Root directory '{root}' does not exist")
    if not root.is_dir():
        raise InvalidRootError(f"Root path '{root}' is not a directory")

    wanted = normalize_extensions(extensions)
    return [
        p for p in _walk(root)
        if not wanted or file_extension(p.name) in wanted
    ]


def _relative_posix(p: Path, root: Path) -> str:
    try:
        return p.relative_to(root).as_posix()
    except ValueError:
        return p.as_posix()


def filter_files(
    paths: List[Path],
    root: Path,
    extra_spec: Optional["pathspec.PathSpec"] = None,
    use_gitignore: bool = False,
) -> List[Path]:
    specs = [extra_spec] if extra_spec else []
    if use_gitignore:
        specs.append(load_gitignore(root))
    if not specs:
        return list(paths)
    kept: List[Path] = []
    for p in paths:
        rel = _relative_posix(p, root)
        if any(spec.match_file(rel) for spec in specs):
            continue
        kept.append(p)
    return kept


# Assembly
@dataclass(frozen=True)
class Assembly:
    tree: TreeNode
    tree_text: str
    buffer: str
    file_count: int
    line_count: int
    char_count: int

    @property
    def tier(self) -> SizeTier:
        return classify_size(self.char_count)


def file_header(rel: str) -> str:
    return f"====./{rel}====\n"


def assemble(paths: List[Path], root: Path, verbose: bool = False) -> Assembly:
    """
    Build the clipboard payload: the rendered tree, a blank line, then one
    ``====./<path>====`` block per readable file in input order.
    """
    read: List[Path] = []
    blocks: List[str] = []
    line_count = 0
    char_count = 0

    for p in paths:
        rel = _relative_posix(p, root)
        try:
            data = p.read_bytes()
        except OSError as e:
            if verbose:
                log(f"! Could not read {rel}: {e}", Fore.YELLOW)
            continue

        text = data.decode("utf-8", errors="replace")
        if text and not text.endswith("\n"):
            text += "\n"
        blocks.append(file_header(rel) + text)
        read.append(p)
        line_count += data.count(b"\n")
        char_count += len(data)

    tree = build_tree(root, read)
    tree_text = render_tree(tree)
    buffer = tree_text + "\n" + "".join(blocks)

    if verbose:
        log(
            f"Done. {len(read)} files assembled, {len(paths) - len(read)} skipped.",
            Fore.GREEN,
        )
    return Assembly(
        tree=tree,
        tree_text=tree_text,
        buffer=buffer,
        file_count=len(read),
        line_count=line_count,
        char_count=char_count,
    )
