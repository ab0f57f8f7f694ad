"""
Directory tree for the files picked up by a scan.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import Dict, Iterable, Iterator, Tuple

ROOT_NAME = "."

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE_PAD = "│   "
PAD = "    "


@dataclass
class TreeNode:
    name: str
    is_file: bool = False
    children: Dict[str, "TreeNode"] = field(default_factory=dict)

    @property
    def is_root(self) -> bool:
        return self.name == ROOT_NAME

    def count_files(self) -> int:
        """Number of file leaves at or below this node."""
        own = 1 if self.is_file else 0
        return own + sum(child.count_files() for child in self.children.values())


def _segments(path: Path, base: Path) -> Tuple[str, ...]:
    try:
        rel = PurePath(path).relative_to(base)
    except ValueError:
        # not under base: keep it as a relative path
        rel = PurePath(path)
        if rel.anchor:
            return rel.parts[1:]
    return rel.parts


def build_tree(base: Path, paths: Iterable[Path]) -> TreeNode:
    """
    Turn a flat list of file paths into a nested name hierarchy.

    Directories shared by several files are created once. The last segment
    of each path is a file node; the order of *paths* never affects
    rendering since children are sorted at traversal time.
    """
    root = TreeNode(ROOT_NAME)
    for p in paths:
        parts = _segments(Path(p), Path(base))
        node = root
        for idx, part in enumerate(parts):
            child = node.children.get(part)
            if child is None:
                child = TreeNode(part, is_file=idx == len(parts) - 1)
                node.children[part] = child
            node = child
    return root


def iter_tree_lines(root: TreeNode) -> Iterator[str]:
    """Yield one ``prefix + connector + name`` line per node, depth first."""

    def _walk(node: TreeNode, prefix: str, last: bool) -> Iterator[str]:
        if not node.is_root:
            yield f"{prefix}{LAST_BRANCH if last else BRANCH}{node.name}"
            child_prefix = prefix + (PAD if last else PIPE_PAD)
        else:
            child_prefix = ""
        names = sorted(node.children)
        for idx, name in enumerate(names):
            yield from _walk(node.children[name], child_prefix, idx == len(names) - 1)

    yield from _walk(root, "", True)


def render_tree(root: TreeNode) -> str:
    return "".join(f"{line}\n" for line in iter_tree_lines(root))
