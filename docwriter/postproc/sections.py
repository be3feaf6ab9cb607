"""Splitting generated Markdown into top-level sections."""

from __future__ import annotations

from typing import Dict, List

DEFAULT_SECTION = "README"
HEADING_MARKER = "# "
LINE_SEPARATOR = "\n"


def _unique_title(title: str, taken: Dict[str, str]) -> str:
    if title not in taken:
        return title
    counter = 2
    while f"{title} ({counter})" in taken:
        counter += 1
    return f"{title} ({counter})"


def split_sections(text: str) -> Dict[str, str]:
    """Split ``text`` at level-one headings.

    Each section holds its heading line and every line up to the next heading.
    Lines before the first heading go under ``README``. Joining the values
    with a newline gives back ``text`` unchanged; a repeated title gets a
    ``" (n)"`` suffix.
    """
    sections: Dict[str, str] = {}
    title = DEFAULT_SECTION
    buffer: List[str] = []

    def flush() -> None:
        if buffer:
            sections[_unique_title(title, sections)] = LINE_SEPARATOR.join(buffer)

    for line in text.split(LINE_SEPARATOR):
        if line.startswith(HEADING_MARKER):
            flush()
            title = line[len(HEADING_MARKER) :].strip()
            buffer = [line]
        else:
            buffer.append(line)
    flush()
    return sections


def join_sections(sections: Dict[str, str]) -> str:
    """Inverse of :func:`split_sections`."""
    return LINE_SEPARATOR.join(sections.values())


__all__ = ["DEFAULT_SECTION", "join_sections", "split_sections"]
