from __future__ import annotations

import textwrap
from pathlib import Path
from typing import List, Mapping

import pytest

from docwriter.models import FileRecord
from docwriter.scanner import ProjectScanner, file_extension


class ProjectBuilder:
    """Writes files into a throwaway project and rescans it."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.root.mkdir()
        self._scanner = ProjectScanner()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the project."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")

    def scan(self) -> List[FileRecord]:
        return self._scanner.scan(self.root)


@pytest.fixture
def project_builder(tmp_path: Path) -> ProjectBuilder:
    """Provide a reusable project builder rooted at the pytest tmp_path."""
    return ProjectBuilder(tmp_path)


def make_record(path: str, content: str = "") -> FileRecord:
    return FileRecord(relative_path=path, content=content, extension=file_extension(path))


@pytest.fixture
def record():
    """Factory for in-memory file records."""
    return make_record
