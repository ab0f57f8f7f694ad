"""
CLI entrypoint for clipfiles package.
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from colorama import Style, init as colorama_init

from . import __version__
from .clipboard import Clipboard, SystemClipboard
from .core import (
    TIER_COLORS,
    Assembly,
    ClipboardError,
    ConfigFileError,
    InvalidRootError,
    assemble,
    build_ignore_spec,
    filter_files,
    log,
    read_pattern_file,
    scan_files,
)
from .sections import SECTION_SIZE, SectionFeed
from .tree import iter_tree_lines


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="clipfiles",
        description="Copy the directory tree and file contents to the clipboard.",
    )
    p.add_argument(
        "extensions",
        nargs="*",
        metavar="EXT",
        help="Only include files with these extensions (e.g. go .py)",
    )
    p.add_argument(
        "--chatgpt",
        action="store_true",
        help="Split the output into sections and copy them one at a time",
    )
    p.add_argument("--root", type=Path, default=Path("."), help="Directory to scan")
    p.add_argument(
        "--exclude",
        action="append",
        metavar="PATTERN",
        help="Gitignore-style pattern to skip (repeatable)",
    )
    p.add_argument(
        "--config",
        type=Path,
        help="Path to a file with extra ignore patterns (one per line)",
    )
    p.add_argument(
        "--gitignore",
        action="store_true",
        help="Also skip files matched by the root .gitignore",
    )
    p.add_argument(
        "--section-size",
        type=int,
        default=SECTION_SIZE,
        help=f"Maximum characters per section in --chatgpt mode (default {SECTION_SIZE})",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = _build_parser()
    ns, unknown = parser.parse_known_args(argv)
    # unknown --flags are tolerated
    ns.ignored = [a for a in unknown if a.startswith("--")]
    ns.extensions = list(ns.extensions or []) + [a for a in unknown if not a.startswith("-")]
    if ns.section_size <= 0:
        parser.error("--section-size must be positive")
    return ns


def _print_summary(result: Assembly) -> None:
    color = TIER_COLORS[result.tier]
    print(
        f"{color}Total lines {result.line_count} "
        f"Total Characters {result.char_count}{Style.RESET_ALL}"
    )


def _copy_all(result: Assembly, clipboard: Clipboard) -> None:
    clipboard.write(result.buffer)
    print(f"Copied Dir Tree and {result.file_count} files to clipboard")
    _print_summary(result)


def _copy_sections(result: Assembly, clipboard: Clipboard, section_size: int) -> None:
    feed = SectionFeed(result.buffer, section_size)
    total = len(feed)
    print(
        f"Entering ChatGPT mode: splitting output into {total} sections "
        f"(~{section_size} chars each)"
    )
    clipboard.write(feed[0])
    print(
        f"Copied section 1 of {total} to clipboard. "
        "Paste into ChatGPT, then press [Enter] for next section."
    )
    for i in range(1, total):
        input(f"[Section {i + 1}/{total}] Press [Enter] to copy next section to clipboard...")
        clipboard.write(feed[i])
        print(f"Section {i + 1} copied to clipboard!")
    print(
        f"All sections copied! (Total files: {result.file_count}, "
        f"Total lines: {result.line_count}, Total Characters: {result.char_count})"
    )


def run(ns: argparse.Namespace, clipboard: Clipboard) -> None:
    root = ns.root.resolve()
    if ns.verbose and ns.ignored:
        log(f"Ignoring unknown options: {' '.join(ns.ignored)}")

    patterns = list(ns.exclude or [])
    if ns.config:
        patterns.extend(read_pattern_file(ns.config.resolve()))
        if ns.verbose:
            log(f"Loaded extra patterns from {ns.config}")
    extra_spec = build_ignore_spec(patterns)

    if ns.verbose:
        log(f"Scanning {root} …")
    all_files = scan_files(root, ns.extensions)
    kept_files = filter_files(all_files, root, extra_spec, use_gitignore=ns.gitignore)
    if ns.verbose:
        log(f"{len(all_files)} files matched, {len(kept_files)} kept after filtering.")

    result = assemble(kept_files, root, verbose=ns.verbose)
    for line in iter_tree_lines(result.tree):
        print(line)

    if ns.chatgpt:
        _copy_sections(result, clipboard, ns.section_size)
    else:
        _copy_all(result, clipboard)


def main(argv: Optional[List[str]] = None) -> None:
    colorama_init()
    try:
        ns = _parse_args(argv)
        run(ns, SystemClipboard())
    except (InvalidRootError, ConfigFileError, ClipboardError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except (KeyboardInterrupt, EOFError):
        print("\nCancelled.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
