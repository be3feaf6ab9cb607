"""Prompt assembly for narrative documentation."""

from .builder import PromptBuilder

__all__ = ["PromptBuilder"]
