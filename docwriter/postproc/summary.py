"""Summary page listing project statistics and generated documents."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, List

from ..models import ProjectAnalysis


def format_census(languages: dict[str, int]) -> str:
    return ", ".join(f"{ext} ({count})" for ext, count in languages.items())


def build_summary(
    analysis: ProjectAnalysis,
    documents: Iterable[str],
    *,
    generated_at: datetime | None = None,
) -> str:
    timestamp = (generated_at or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")
    lines: List[str] = [
        f"# {analysis.project_name} Documentation Summary",
        "",
        f"Generated on: {timestamp}",
        "",
        "## Project Statistics",
        f"- Total Files: {analysis.file_count}",
        f"- Languages: {format_census(analysis.languages)}",
        f"- Dependencies: {len(analysis.dependencies)}",
        "",
        "## Documentation Files",
    ]
    lines.extend(f"- [{name}]({name})" for name in documents)
    return "\n".join(lines) + "\n"


__all__ = ["build_summary", "format_census"]
