"""Endpoint extraction and API reference rendering."""

from __future__ import annotations

from .comments import CommentDoc, find_trailing_comment, parse_comment_block
from .extractor import EndpointMap, extract_endpoints, select_candidates
from .report import group_endpoints, render_endpoint_report

__all__ = [
    "CommentDoc",
    "EndpointMap",
    "extract_endpoints",
    "find_trailing_comment",
    "group_endpoints",
    "parse_comment_block",
    "render_endpoint_report",
    "select_candidates",
]
