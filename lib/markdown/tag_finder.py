"""
Tag Finder for Markdown Tag Finder

This module scans a single line of Markdown text and locates headers,
marked list items, bold/italic emphasis and escaped symbols.

Emphasis uses underscores only: `_italic_` and `__bold__`. Openers are
matched to closers with a stack, then every candidate pair goes through
a set of validity rules (digit adjacency, whitespace adjacency and
bold/italic interleaving). Bold tags formed while an italic marker is
still open are held back until the end of the line, unless a confirmed
italic tag discards them first.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional, Tuple

from .interface import TagFinderInterface
from .tags import Tag, TagKind, getConflictingKind, makeTag

logger = logging.getLogger(__name__)

HEADER_PREFIX = "# "
MARKED_LIST_ITEM_PREFIX = "* "
ESCAPE_CHAR = "\\"
EMPHASIS_CHAR = "_"
ESCAPABLE_CHARS = frozenset([ESCAPE_CHAR, EMPHASIS_CHAR])


def classifyUnderscore(line: str, i: int) -> Tuple[TagKind, int]:
    """
    Classify the underscore run starting at position i.

    Args:
        line: Line being scanned
        i: Position of an underscore in the line

    Returns:
        Tuple of (kind, skip) where skip is the number of extra characters
        the scan has to advance past i:
        - (TagKind.NONE, runLength - 1) for three or more underscores
        - (TagKind.BOLD, 1) for exactly two underscores
        - (TagKind.ITALIC, 0) for a single underscore
    """
    if i + 1 < len(line) and line[i + 1] == EMPHASIS_CHAR:
        if i + 2 < len(line) and line[i + 2] == EMPHASIS_CHAR:
            end = i
            while end < len(line) and line[end] == EMPHASIS_CHAR:
                end += 1
            return TagKind.NONE, end - i - 1

        return TagKind.BOLD, 1

    return TagKind.ITALIC, 0


@dataclass
class _ScanState:
    """Mutable state of a single findTags() call."""

    line: str
    # Markers waiting for a closer, as (kind, offset), top of stack is last
    openers: List[Tuple[TagKind, int]] = field(default_factory=list)
    poppedKinds: Deque[TagKind] = field(default_factory=deque)
    uncertainTags: List[Tag] = field(default_factory=list)
    foundTags: List[Tag] = field(default_factory=list)

    def hasOpener(self, kind: TagKind) -> bool:
        return any(openerKind == kind for openerKind, _ in self.openers)


class MarkdownTagFinder(TagFinderInterface):
    """
    Single pass tag finder for one line of Markdown.

    All mutable state lives in a per-call _ScanState, so a single
    instance may be reused and shared freely.

    Example:
        >>> finder = MarkdownTagFinder()
        >>> finder.findTags("a_b_c")
        [Tag(ITALIC, 1, 3)]
    """

    def findTags(self, line: str) -> List[Tag]:
        if line is None:
            raise ValueError("line must not be None")
        if not isinstance(line, str):
            raise TypeError(f"line must be str, got {type(line).__name__}")

        state = _ScanState(line)
        if line.startswith(HEADER_PREFIX):
            state.foundTags.append(makeTag(0, len(line) - 1, TagKind.HEADER))
        elif line.startswith(MARKED_LIST_ITEM_PREFIX):
            state.foundTags.append(makeTag(0, len(line) - 1, TagKind.MARKED_LIST_ITEM))

        i = 0
        while i < len(line):
            char = line[i]
            if char == ESCAPE_CHAR:
                if i + 1 < len(line) and line[i + 1] in ESCAPABLE_CHARS:
                    state.foundTags.append(makeTag(i, i, TagKind.ESCAPED_SYMBOL))
                    i += 1
            elif char == EMPHASIS_CHAR:
                kind, skip = classifyUnderscore(line, i)
                i += skip
                if kind != TagKind.NONE:
                    self._handleMarker(state, kind, i)
            i += 1

        state.foundTags.extend(state.uncertainTags)
        logger.debug(
            f"Found {len(state.foundTags)} tags in line of length {len(line)} "
            f"({len(state.uncertainTags)} uncertain)"
        )
        return state.foundTags

    def _handleMarker(self, state: _ScanState, kind: TagKind, i: int) -> None:
        """Treat the marker ending at position i as an opener or a closer."""
        line = state.line
        openerIndex = self._popOpener(state, kind)
        if openerIndex is None:
            if i < len(line) - 1 and not line[i + 1].isspace():
                state.openers.append((kind, i))
            return

        tag = makeTag(openerIndex, i, kind)
        if self._canBeAdded(state, tag):
            if kind == TagKind.ITALIC:
                state.uncertainTags.clear()
            state.foundTags.append(tag)
        elif state.poppedKinds and state.poppedKinds[0] == kind:
            # Failed closer becomes a new opener
            state.poppedKinds.popleft()
            state.openers.append((kind, i))

    def _popOpener(self, state: _ScanState, kind: TagKind) -> Optional[int]:
        """
        Pop openers until none of the given kind is left on the stack.

        Every popped kind is queued in state.poppedKinds.

        Returns:
            Offset of the last popped opener of the given kind, or None if
            there was no such opener.
        """
        openerIndex = None
        while state.hasOpener(kind):
            poppedKind, openerIndex = state.openers.pop()
            state.poppedKinds.append(poppedKind)

        return openerIndex

    def _canBeAdded(self, state: _ScanState, tag: Tag) -> bool:
        """Check validity rules for a matched pair of markers."""
        line = state.line
        start, end = tag.span
        shift = 1 if tag.kind == TagKind.ITALIC else 2
        conflictingKind = getConflictingKind(tag.kind)
        beforeCloser = line[end - shift]
        hasCharAfter = end < len(line) - 1

        if beforeCloser.isdecimal() and hasCharAfter and not line[end + 1].isspace():
            logger.debug(f"Rejected {tag}: closer follows a digit")
            return False
        if beforeCloser.isspace():
            logger.debug(f"Rejected {tag}: closer follows whitespace")
            return False
        if state.poppedKinds and state.poppedKinds.popleft() == conflictingKind:
            logger.debug(f"Rejected {tag}: interleaved with {conflictingKind.name}")
            return False

        if start - shift > 0 and line[start + 1].isdecimal() and not line[start - shift].isspace():
            logger.debug(f"Rejected {tag}: opener inside a number")
            return False

        if hasCharAfter and not line[end + 1].isspace() and any(c.isspace() for c in line[start + 1 : end]):
            logger.debug(f"Rejected {tag}: spans several words")
            return False

        if tag.kind == TagKind.BOLD and state.hasOpener(conflictingKind):
            state.uncertainTags.append(tag)
            return False

        return True


def findDocumentTags(text: str, finder: Optional[TagFinderInterface] = None) -> List[List[Tag]]:
    """
    Find tags in every line of a document.

    Args:
        text: Document text, split with str.splitlines()
        finder: Tag finder to use, MarkdownTagFinder by default

    Returns:
        List with one list of tags per line, offsets are relative to that line
    """
    if text is None:
        raise ValueError("text must not be None")
    if finder is None:
        finder = MarkdownTagFinder()

    return [finder.findTags(line) for line in text.splitlines()]
