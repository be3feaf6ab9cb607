"""Project scanning: turns a directory into in-memory file records."""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from .config import DEFAULT_EXCLUDES, DEFAULT_EXTENSIONS
from .logging import get_logger
from .models import FileRecord

_LOGGER = get_logger("scanner")


def file_extension(relative_path: str) -> str:
    """Return the text after the last dot of the file name, case preserved."""
    name = relative_path.replace("\\", "/").rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1]


class ProjectScanner:
    """Walks a project directory and reads every matching file."""

    def __init__(
        self,
        extensions: Sequence[str] | None = None,
        *,
        max_workers: int | None = None,
    ) -> None:
        self.extensions = {ext.lstrip(".") for ext in (extensions or DEFAULT_EXTENSIONS)}
        self.max_workers = max_workers

    def scan(self, root: str | Path, exclude: Sequence[str] | None = None) -> List[FileRecord]:
        """Return file records sorted by relative path.

        Directories whose name appears in ``exclude`` are pruned. Files that
        cannot be read as UTF-8 text are skipped with a warning.
        """
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Project path not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Project path is not a directory: {root}")

        excluded = set(DEFAULT_EXCLUDES if exclude is None else exclude)
        _LOGGER.debug("Scanning %s (excluding %s)", root_path, ", ".join(sorted(excluded)))

        paths = sorted(self._iter_files(root_path, excluded), key=lambda p: p.as_posix())
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            # map() yields in submission order, keeping output deterministic.
            loaded = list(executor.map(lambda path: self._read(root_path, path), paths))

        records = [record for record in loaded if record is not None]
        _LOGGER.info("Found %d files to analyze", len(records))
        return records

    def _iter_files(self, root: Path, excluded: set[str]) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = [name for name in dirnames if name not in excluded]
            current = Path(dirpath)
            for filename in filenames:
                if file_extension(filename) in self.extensions:
                    yield current / filename

    @staticmethod
    def _read(root: Path, path: Path) -> Optional[FileRecord]:
        relative = path.relative_to(root).as_posix()
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            _LOGGER.warning("Failed to read file %s: %s", relative, exc)
            return None
        return FileRecord(
            relative_path=relative,
            content=content,
            extension=file_extension(relative),
        )


__all__ = ["ProjectScanner", "file_extension"]
