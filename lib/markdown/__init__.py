"""
Markdown Tag Finder v1.0

Locates Markdown formatting markers within a single line of text and
returns them as tagged spans for a downstream renderer.

This module provides:
- Line prefix detection (headers and marked list items)
- Bold (__text__) and italic (_text_) emphasis matching
- Escaped symbol detection (\\\\ and \\_)

Usage:
    from lib.markdown import MarkdownTagFinder, TagKind

    finder = MarkdownTagFinder()
    tags = finder.findTags("# Hello __world__")

    # Whole document, one list of tags per line
    tagsPerLine = findDocumentTags("first _line_\\nsecond __line__")
"""

from .interface import TagFinderInterface
from .tag_finder import MarkdownTagFinder, classifyUnderscore, findDocumentTags
from .tags import Span, Tag, TagKind, getConflictingKind, makeTag

__version__ = "1.0.0"
__all__ = [
    "TagFinderInterface",
    "MarkdownTagFinder",
    "classifyUnderscore",
    "findDocumentTags",
    "Span",
    "Tag",
    "TagKind",
    "getConflictingKind",
    "makeTag",
]
