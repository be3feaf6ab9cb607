"""Narrative generation service client."""

from .runner import GenerationError, NarrativeGenerator

__all__ = ["GenerationError", "NarrativeGenerator"]
