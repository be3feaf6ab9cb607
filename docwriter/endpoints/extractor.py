"""Express-style route extraction from candidate source files."""

from __future__ import annotations

import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Sequence

from ..logging import get_logger
from ..models import Endpoint, FileRecord
from .comments import find_trailing_comment, parse_comment_block

CANDIDATE_MARKERS: tuple[str, ...] = ("routes", "controller", "api")

_DECLARATION = re.compile(
    r"\brouter\.(?P<verb>get|post|put|delete|patch)\s*\(\s*(?P<quote>['\"`])(?P<path>[^'\"`]+)(?P=quote)"
)

_LOGGER = get_logger("endpoints.extractor")

EndpointMap = Dict[str, Endpoint]


@dataclass(frozen=True)
class DeclarationMatch:
    """A ``router.<verb>('<path>'`` occurrence within a file."""

    offset: int
    method: str
    path: str


def is_candidate(record: FileRecord) -> bool:
    """Return True when the path suggests the file declares routes."""
    return any(marker in record.relative_path for marker in CANDIDATE_MARKERS)


def select_candidates(records: Iterable[FileRecord]) -> List[FileRecord]:
    return [record for record in records if is_candidate(record)]


def iter_declarations(text: str) -> Iterator[DeclarationMatch]:
    """Yield route declarations from left to right."""
    for match in _DECLARATION.finditer(text):
        yield DeclarationMatch(
            offset=match.start(),
            method=match.group("verb").upper(),
            path=match.group("path"),
        )


def extract_file_endpoints(record: FileRecord) -> List[Endpoint]:
    """Return endpoints declared in one file, in declaration order."""
    endpoints: List[Endpoint] = []
    content = record.content
    for declaration in iter_declarations(content):
        block = find_trailing_comment(content[: declaration.offset])
        doc = parse_comment_block(block)
        endpoints.append(
            Endpoint(
                method=declaration.method,
                path=declaration.path,
                description=doc.description,
                parameters=list(doc.parameters),
                returns=doc.returns,
            )
        )
    if endpoints:
        _LOGGER.debug("Found %d route declarations in %s", len(endpoints), record.relative_path)
    return endpoints


def merge_endpoints(target: EndpointMap, endpoints: Iterable[Endpoint]) -> EndpointMap:
    """Upsert endpoints by ``"METHOD path"``.

    A repeated key keeps its original position while its value is replaced
    by the newest endpoint.
    """
    for endpoint in endpoints:
        target[endpoint.key] = endpoint
    return target


def extract_endpoints(
    records: Sequence[FileRecord],
    *,
    max_workers: int | None = None,
) -> EndpointMap:
    """Build the ordered endpoint map from every candidate file.

    Files may be parsed concurrently when ``max_workers`` is greater than one;
    results are merged strictly in the order ``records`` were supplied.
    """
    candidates = select_candidates(records)
    if max_workers is not None and max_workers > 1 and len(candidates) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            per_file = list(executor.map(extract_file_endpoints, candidates))
    else:
        per_file = [extract_file_endpoints(record) for record in candidates]

    endpoints: EndpointMap = {}
    for found in per_file:
        merge_endpoints(endpoints, found)
    _LOGGER.debug(
        "Extracted %d endpoints from %d candidate files", len(endpoints), len(candidates)
    )
    return endpoints


__all__ = [
    "CANDIDATE_MARKERS",
    "DeclarationMatch",
    "EndpointMap",
    "extract_endpoints",
    "extract_file_endpoints",
    "is_candidate",
    "iter_declarations",
    "merge_endpoints",
    "select_candidates",
]
