"""Tests for the documentation summary page."""

from __future__ import annotations

from datetime import datetime

from docwriter.models import DirectoryNode, ProjectAnalysis
from docwriter.postproc.summary import build_summary


def test_summary_lists_statistics_and_documents() -> None:
    analysis = ProjectAnalysis(
        project_name="shop",
        project_path="/work/shop",
        file_count=3,
        languages={"js": 2, "md": 1},
        structure=DirectoryNode(),
        dependencies={"express": "4", "jest": "29"},
    )

    summary = build_summary(
        analysis,
        ["README.md", "usage.md"],
        generated_at=datetime(2024, 5, 1, 9, 30, 0),
    )

    assert summary.splitlines() == [
        "# shop Documentation Summary",
        "",
        "Generated on: 2024-05-01 09:30:00",
        "",
        "## Project Statistics",
        "- Total Files: 3",
        "- Languages: js (2), md (1)",
        "- Dependencies: 2",
        "",
        "## Documentation Files",
        "- [README.md](README.md)",
        "- [usage.md](usage.md)",
    ]
