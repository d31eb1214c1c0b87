"""
Tag types for Markdown Tag Finder

This module defines the tag kinds, spans and tags produced by scanning a
single line of Markdown text.
"""

from enum import Enum
from typing import Any, Dict, NamedTuple


class TagKind(Enum):
    """Kinds of tags recognized by the tag finder."""

    HEADER = "header"
    MARKED_LIST_ITEM = "marked_list_item"
    BOLD = "bold"
    ITALIC = "italic"
    ESCAPED_SYMBOL = "escaped_symbol"
    NONE = "none"


def getConflictingKind(kind: TagKind) -> TagKind:
    """
    Get the conflicting counterpart of an emphasis kind.

    Args:
        kind: Either TagKind.BOLD or TagKind.ITALIC

    Returns:
        TagKind.ITALIC for TagKind.BOLD and vice versa

    Raises:
        ValueError: If kind is not an emphasis kind
    """
    match kind:
        case TagKind.BOLD:
            return TagKind.ITALIC
        case TagKind.ITALIC:
            return TagKind.BOLD
        case _:
            raise ValueError(f"{kind} has no conflicting kind")


class Span(NamedTuple):
    """Inclusive zero-based character offsets into the scanned line."""

    start: int
    end: int

    @classmethod
    def create(cls, start: int, end: int) -> "Span":
        """Create a span, validating offsets."""
        if start < 0 or end < 0:
            raise ValueError(f"Span offsets must be non-negative, got ({start}, {end})")
        if start > end:
            raise ValueError(f"Span start {start} is after end {end}")
        return cls(start, end)

    @property
    def length(self) -> int:
        return self.end - self.start + 1


class Tag(NamedTuple):
    """A span of the line together with its tag kind."""

    span: Span
    kind: TagKind

    @property
    def start(self) -> int:
        return self.span.start

    @property
    def end(self) -> int:
        return self.span.end

    def toDict(self) -> Dict[str, Any]:
        """Convert tag to dictionary representation."""
        return {
            "start": self.span.start,
            "end": self.span.end,
            "kind": self.kind.value,
        }

    def __repr__(self) -> str:
        return f"Tag({self.kind.name}, {self.span.start}, {self.span.end})"


def makeTag(start: int, end: int, kind: TagKind) -> Tag:
    """Shortcut for building a tag with a validated span."""
    return Tag(Span.create(start, end), kind)
