"""Builds the nested project tree and the per-extension language census."""

from __future__ import annotations

import re
from typing import Dict, Iterable, Tuple

from ..models import DirectoryNode, FileNode, FileRecord

_SEPARATORS = re.compile(r"[/\\]")


def split_path(path: str) -> list[str]:
    """Split a relative path on both POSIX and Windows separators."""
    return _SEPARATORS.split(path)


def insert_path(
    tree: DirectoryNode,
    census: Dict[str, int],
    path: str,
    extension: str,
) -> None:
    """Insert ``path`` into ``tree`` and count ``extension`` in ``census``.

    A name already present at a level is never replaced, whichever node type
    holds it. When an intermediate segment is held by a file node the walk
    stops there and the remaining segments are dropped. The census is
    incremented regardless.
    """
    census[extension] = census.get(extension, 0) + 1

    segments = split_path(path)
    current: object = tree
    for segment in segments[:-1]:
        if not isinstance(current, DirectoryNode):
            return
        if segment not in current.children:
            current.children[segment] = DirectoryNode()
        current = current.children[segment]

    if not isinstance(current, DirectoryNode):
        return
    leaf = segments[-1]
    if leaf not in current.children:
        current.children[leaf] = FileNode(extension=extension)


def build_project_tree(records: Iterable[FileRecord]) -> Tuple[DirectoryNode, Dict[str, int]]:
    """Fold every record into a fresh tree and census."""
    tree = DirectoryNode()
    census: Dict[str, int] = {}
    for record in records:
        insert_path(tree, census, record.relative_path, record.extension)
    return tree, census


def tree_to_dict(node: DirectoryNode | FileNode) -> Dict[str, object]:
    """Return a JSON-friendly rendering of a tree node."""
    if isinstance(node, FileNode):
        return {"type": "file", "extension": node.extension}
    return {
        "type": "directory",
        "children": {name: tree_to_dict(child) for name, child in node.children.items()},
    }


__all__ = ["build_project_tree", "insert_path", "split_path", "tree_to_dict"]
