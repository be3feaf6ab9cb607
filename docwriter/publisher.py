"""Writes generated documentation into the output directory."""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path
from typing import Dict, List

from .logging import get_logger
from .models import ProjectAnalysis
from .postproc.summary import build_summary

README_FILENAME = "README.md"
API_DOCS_FILENAME = "api-documentation.md"
SUMMARY_FILENAME = "_SUMMARY.md"
_RESERVED_FILENAMES = {API_DOCS_FILENAME.lower(), SUMMARY_FILENAME.lower()}


def section_filename(title: str) -> str:
    """Map a section title to a Markdown file name (``Quick Start`` -> ``quick-start.md``)."""
    slug = re.sub(r"\s+", "-", title.lower())
    slug = re.sub(r"[^\w-]", "", slug)
    return f"{slug}.md"


class DocumentationWriter:
    """Persists documentation files beneath ``output_dir``."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)
        self.logger = get_logger("publisher")

    def ensure_output_dir(self) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        return self.output_dir

    def write_documentation(self, documentation: str, sections: Dict[str, str]) -> List[Path]:
        """Write the full narrative plus one file per section."""
        self.ensure_output_dir()
        written = [self._write(README_FILENAME, documentation)]
        for title, content in sections.items():
            filename = section_filename(title)
            if filename.lower() == README_FILENAME.lower():
                continue
            if filename.lower() in _RESERVED_FILENAMES:
                self.logger.debug(
                    "Section %r maps to reserved file %s and may be overwritten", title, filename
                )
            written.append(self._write(filename, content))
        return written

    def write_api_docs(self, report: str) -> Path:
        self.ensure_output_dir()
        path = self._write(API_DOCS_FILENAME, report)
        self.logger.info("API documentation saved to %s", path)
        return path

    def write_summary(
        self,
        analysis: ProjectAnalysis,
        *,
        generated_at: datetime | None = None,
    ) -> Path:
        """Write ``_SUMMARY.md`` listing the Markdown files already present."""
        self.ensure_output_dir()
        documents = sorted(
            path.name for path in self.output_dir.glob("*.md") if path.name != SUMMARY_FILENAME
        )
        summary = build_summary(analysis, documents, generated_at=generated_at)
        return self._write(SUMMARY_FILENAME, summary)

    def _write(self, filename: str, content: str) -> Path:
        path = self.output_dir / filename
        path.write_text(content, encoding="utf-8")
        self.logger.debug("Wrote %s", path)
        return path


__all__ = [
    "API_DOCS_FILENAME",
    "DocumentationWriter",
    "README_FILENAME",
    "SUMMARY_FILENAME",
    "section_filename",
]
