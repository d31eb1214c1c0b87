#!/usr/bin/env python3
"""
Test cases for tag kinds, spans and tags.
"""

import os
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))
from lib.markdown import Span, Tag, TagKind, getConflictingKind, makeTag  # noqa: E402


class TestConflictingKind(unittest.TestCase):
    """Test bold/italic counterpart lookup."""

    def testBoldAndItalic(self):
        self.assertEqual(getConflictingKind(TagKind.BOLD), TagKind.ITALIC)
        self.assertEqual(getConflictingKind(TagKind.ITALIC), TagKind.BOLD)

    def testNonEmphasisKinds(self):
        for kind in (TagKind.HEADER, TagKind.MARKED_LIST_ITEM, TagKind.ESCAPED_SYMBOL, TagKind.NONE):
            with self.subTest(kind=kind):
                with self.assertRaises(ValueError):
                    getConflictingKind(kind)


class TestSpan(unittest.TestCase):
    """Test span validation."""

    def testCreate(self):
        span = Span.create(2, 5)
        self.assertEqual((span.start, span.end), (2, 5))
        self.assertEqual(span.length, 4)

    def testSingleCharacter(self):
        self.assertEqual(Span.create(3, 3).length, 1)

    def testStartAfterEnd(self):
        with self.assertRaises(ValueError):
            Span.create(5, 2)

    def testNegativeOffset(self):
        with self.assertRaises(ValueError):
            Span.create(-1, 2)


class TestTag(unittest.TestCase):
    """Test tag helpers."""

    def testMakeTag(self):
        tag = makeTag(1, 3, TagKind.ITALIC)
        self.assertEqual(tag, Tag(Span(1, 3), TagKind.ITALIC))
        self.assertEqual((tag.start, tag.end), (1, 3))

    def testImmutable(self):
        tag = makeTag(1, 3, TagKind.ITALIC)
        with self.assertRaises(AttributeError):
            tag.kind = TagKind.BOLD

    def testToDict(self):
        self.assertEqual(
            makeTag(2, 5, TagKind.BOLD).toDict(),
            {"start": 2, "end": 5, "kind": "bold"},
        )

    def testRepr(self):
        self.assertEqual(repr(makeTag(0, 0, TagKind.ESCAPED_SYMBOL)), "Tag(ESCAPED_SYMBOL, 0, 0)")


if __name__ == "__main__":
    unittest.main()
