"""Project model builders: tree, census, manifest and overall analysis."""

from __future__ import annotations

from .manifest import ManifestInfo, load_manifest, merge_dependencies
from .project import analyze_project
from .structure import build_project_tree, insert_path

__all__ = [
    "ManifestInfo",
    "analyze_project",
    "build_project_tree",
    "insert_path",
    "load_manifest",
    "merge_dependencies",
]
