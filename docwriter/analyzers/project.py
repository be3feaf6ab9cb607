"""Project-level analysis assembled from scanned file records."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from ..logging import get_logger
from ..models import FileRecord, ProjectAnalysis
from .manifest import load_manifest
from .structure import build_project_tree

_README_NAMES = {"readme.md", "readme"}

_LOGGER = get_logger("analyzers.project")


def find_readme(records: Sequence[FileRecord]) -> Optional[str]:
    """Return the content of a top-level README.md / README, if any."""
    for record in records:
        if record.relative_path.lower() in _README_NAMES:
            return record.content
    return None


def analyze_project(records: Sequence[FileRecord], project_path: str | Path) -> ProjectAnalysis:
    """Build the structural and dependency profile of a project."""
    _LOGGER.info("Analyzing project structure...")
    tree, census = build_project_tree(records)
    manifest = load_manifest(records)

    analysis = ProjectAnalysis(
        project_name=Path(project_path).name or "project",
        project_path=str(project_path),
        file_count=len(records),
        languages=census,
        structure=tree,
        dependencies=dict(manifest.dependencies) if manifest else {},
        package_info=manifest.raw if manifest else None,
        readme=find_readme(records),
    )
    _LOGGER.debug(
        "Census: %s",
        ", ".join(f"{ext or '(none)'}={count}" for ext, count in census.items()),
    )
    return analysis


__all__ = ["analyze_project", "find_readme"]
