"""package.json discovery and dependency merging."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional

from ..logging import get_logger
from ..models import FileRecord

MANIFEST_FILENAME = "package.json"

_LOGGER = get_logger("analyzers.manifest")


@dataclass
class ManifestInfo:
    """Parsed manifest plus its merged dependency map."""

    raw: Dict[str, Any]
    dependencies: Dict[str, str] = field(default_factory=dict)


def find_manifest(records: Iterable[FileRecord]) -> Optional[FileRecord]:
    """Return the record whose path is ``package.json`` (any case), if present."""
    for record in records:
        if record.relative_path.lower() == MANIFEST_FILENAME:
            return record
    return None


def merge_dependencies(
    dependencies: Mapping[str, Any] | None,
    dev_dependencies: Mapping[str, Any] | None,
) -> Dict[str, str]:
    """Merge runtime and dev dependencies; dev entries win on a shared name."""
    merged: Dict[str, str] = {}
    for source in (dependencies, dev_dependencies):
        if not isinstance(source, Mapping):
            continue
        for name, version in source.items():
            merged[str(name)] = str(version)
    return merged


def parse_manifest(record: FileRecord) -> Optional[ManifestInfo]:
    """Parse a manifest record; malformed JSON logs a warning and yields None."""
    try:
        data = json.loads(record.content)
    except json.JSONDecodeError as exc:
        _LOGGER.warning("Failed to parse %s: %s", record.relative_path, exc)
        return None
    if not isinstance(data, dict):
        _LOGGER.warning("Ignoring %s: top-level value is not an object", record.relative_path)
        return None

    dependencies = merge_dependencies(data.get("dependencies"), data.get("devDependencies"))
    _LOGGER.debug("Manifest declares %d dependencies", len(dependencies))
    return ManifestInfo(raw=data, dependencies=dependencies)


def load_manifest(records: Iterable[FileRecord]) -> Optional[ManifestInfo]:
    """Locate and parse the project manifest; None when absent or unusable."""
    record = find_manifest(records)
    if record is None:
        return None
    return parse_manifest(record)


__all__ = [
    "MANIFEST_FILENAME",
    "ManifestInfo",
    "find_manifest",
    "load_manifest",
    "merge_dependencies",
    "parse_manifest",
]
