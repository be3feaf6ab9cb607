"""Parsing of ``/** ... */`` documentation comments attached to routes."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from ..models import ParameterDescriptor, ReturnDescriptor

DEFAULT_DESCRIPTION = "No description available"
DEFAULT_RETURNS = ReturnDescriptor(type="void", description="No return value")

COMMENT_OPEN = "/**"
COMMENT_CLOSE = "*/"

# A tag is an "@word" that opens the text or a line; a mid-line "@" is plain text.
_TAG = re.compile(r"(?:\A|(?<=\n))[ \t]*@(?P<tag>[A-Za-z]+)\b")
_LINE_DECORATION = re.compile(r"^\s*\*?")
_PARAM_BODY = re.compile(r"^\{(?P<type>[^}]+)\}\s+(?P<name>\S+)\s+-\s+(?P<description>.+)$")
_RETURNS_BODY = re.compile(r"^\{(?P<type>[^}]+)\}\s+(?P<description>.+)$")


@dataclass(frozen=True)
class TagMatch:
    """One ``@tag`` occurrence with the text that follows it."""

    offset: int
    tag: str
    body: str


@dataclass
class CommentDoc:
    """Fields extracted from a documentation comment."""

    description: str = DEFAULT_DESCRIPTION
    parameters: List[ParameterDescriptor] = field(default_factory=list)
    returns: ReturnDescriptor = DEFAULT_RETURNS


def find_trailing_comment(text: str) -> str:
    """Return the doc comment that ``text`` ends with, ignoring trailing whitespace.

    The block runs from the last ``/**`` before the closing ``*/``; it must
    have a non-empty body that does not itself contain ``*/``. Anything else
    yields an empty string.
    """
    trimmed = text.rstrip()
    if not trimmed.endswith(COMMENT_CLOSE):
        return ""
    close_at = len(trimmed) - len(COMMENT_CLOSE)
    start = trimmed.rfind(COMMENT_OPEN, 0, close_at)
    if start == -1:
        return ""
    body = trimmed[start + len(COMMENT_OPEN) : close_at]
    if not body or COMMENT_CLOSE in body:
        return ""
    return trimmed[start:]


def _strip_decoration(block: str) -> str:
    text = block.strip()
    if text.startswith(COMMENT_OPEN):
        text = text[len(COMMENT_OPEN) :]
    if text.endswith(COMMENT_CLOSE):
        text = text[: -len(COMMENT_CLOSE)]
    return "\n".join(_LINE_DECORATION.sub("", line, count=1) for line in text.splitlines())


def _collapse(text: str) -> str:
    return " ".join(line.strip() for line in text.splitlines() if line.strip())


def iter_tags(block: str) -> Iterator[TagMatch]:
    """Yield every tag in ``block`` in source order."""
    text = _strip_decoration(block)
    matches = list(_TAG.finditer(text))
    for index, match in enumerate(matches):
        end = matches[index + 1].start() if index + 1 < len(matches) else len(text)
        yield TagMatch(
            offset=match.start(),
            tag=match.group("tag"),
            body=_collapse(text[match.end() : end]),
        )


def _parse_param(body: str) -> Optional[ParameterDescriptor]:
    match = _PARAM_BODY.match(body)
    if not match:
        return None
    return ParameterDescriptor(
        type=match.group("type").strip(),
        name=match.group("name").strip(),
        description=match.group("description").strip(),
    )


def _parse_returns(body: str) -> Optional[ReturnDescriptor]:
    match = _RETURNS_BODY.match(body)
    if not match:
        return None
    return ReturnDescriptor(
        type=match.group("type").strip(),
        description=match.group("description").strip(),
    )


def parse_comment_block(block: str) -> CommentDoc:
    """Extract description, parameters and return value from a comment block.

    An empty block, or one without the relevant tags, produces the defaults.
    Only the first ``@description`` and ``@returns`` count; every well-formed
    ``@param`` is kept in order.
    """
    doc = CommentDoc()
    if not block:
        return doc

    description: Optional[str] = None
    returns: Optional[ReturnDescriptor] = None
    for tag in iter_tags(block):
        if tag.tag == "description" and description is None:
            description = tag.body or None
        elif tag.tag == "param":
            param = _parse_param(tag.body)
            if param is not None:
                doc.parameters.append(param)
        elif tag.tag == "returns" and returns is None:
            returns = _parse_returns(tag.body)

    if description:
        doc.description = description
    if returns is not None:
        doc.returns = returns
    return doc


__all__ = [
    "CommentDoc",
    "DEFAULT_DESCRIPTION",
    "DEFAULT_RETURNS",
    "TagMatch",
    "find_trailing_comment",
    "iter_tags",
    "parse_comment_block",
]
