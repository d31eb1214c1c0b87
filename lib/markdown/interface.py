"""Tag finder interface for Markdown Tag Finder."""

from abc import ABC, abstractmethod
from typing import List

from .tags import Tag


class TagFinderInterface(ABC):
    """
    Abstract base class for tag finder implementations.

    A tag finder scans one line of text at a time and returns the
    formatting tags found in it. Implementations must not keep state
    between calls.
    """

    @abstractmethod
    def findTags(self, line: str) -> List[Tag]:
        """
        Find formatting tags in a single line.

        Args:
            line: Line of text without embedded newlines

        Returns:
            List of tags with offsets relative to the given line

        Raises:
            ValueError: If line is None
        """
        pass
