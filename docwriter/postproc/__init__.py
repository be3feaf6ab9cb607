"""Post-processing of generated documentation."""

from .sections import join_sections, split_sections
from .summary import build_summary

__all__ = ["build_summary", "join_sections", "split_sections"]
