# backtrack_regex/engine.py

import logging
from typing import List, Optional

from .parser import RegexParser
from .matcher import BacktrackMatcher
from .ast import StartAnchorNode

logger = logging.getLogger(__name__)


class RegexEngine:
    def __init__(self, pattern: str, ignore_case=False):
        self.pattern = pattern.lower() if ignore_case else pattern
        self.ignore_case = ignore_case

        self.ast = RegexParser().parse(self.pattern)
        self.anchored = isinstance(self.ast, StartAnchorNode)
        logger.debug("compiled %r (anchored=%s)", self.pattern, self.anchored)

    def _prepare(self, text: str) -> str:
        return text.lower() if self.ignore_case else text

    def matches(self, text: str) -> bool:
        """True if the pattern occurs in text, honouring its anchors."""
        return BacktrackMatcher.at(self.ast, self._prepare(text), 0) is not None

    def match_prefix(self, text: str, start: int = 0) -> Optional[int]:
        """
        Length consumed by the pattern body when matched exactly at `start`,
        or None. The start anchor is not checked here.
        """
        end = BacktrackMatcher.at(self.ast.inner, self._prepare(text), start)
        if end is None:
            return None
        return end - start

    def find_all(self, text: str) -> List[List[int]]:
        """
        Non-overlapping, non-empty [start, end] spans, left to right.
        With ignore_case the spans index the lowercased text.
        """
        t = self._prepare(text)
        spans = []
        i = 0
        while i < len(t):
            end = BacktrackMatcher.at(self.ast.inner, t, i)
            if end is not None and end > i:
                spans.append([i, end])
                i = end     # non-overlapping
            else:
                i += 1
            if self.anchored:
                break
        return spans


def find(haystack: str, pattern: str) -> bool:
    """Parse `pattern` (syntax errors propagate) and search `haystack`."""
    return RegexEngine(pattern).matches(haystack)
