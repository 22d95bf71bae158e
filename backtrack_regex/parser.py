# backtrack_regex/parser.py

import logging
from typing import Tuple

from .ast import (
    RegexNode, EmptyNode, DigitNode, AlnumNode, SpaceNode, DotNode,
    CharNode, CharSetNode, NegatedCharSetNode, ConcatNode, UnionNode,
    PlusNode, OptionalNode, StarNode, EndNode, StartAnchorNode, SearchNode
)

logger = logging.getLogger(__name__)


class RegexSyntaxException(ValueError):
    def __init__(self, message, index, fragment=""):
        super().__init__(f"{message} at index {index}")
        self.message = message
        self.index = index
        self.fragment = fragment


ESCAPES = {
    'd': DigitNode,
    'w': AlnumNode,
    't': SpaceNode,
}

QUANTIFIERS = {
    '+': PlusNode,
    '?': OptionalNode,
    '*': StarNode,
}


class RegexParser:
    """
    Recursive-descent parser working directly on the pattern string.

    Every call works on a half-open range [start, end) of the pattern so
    that alternation branches are parsed in isolation, exactly like a
    sub-pattern would be.
    """

    def __init__(self):
        self.pattern = ""

    # ========= PUBLIC ==============
    def parse(self, pattern: str) -> RegexNode:
        if pattern is None:
            raise ValueError("pattern == None")

        self.pattern = pattern
        if pattern.startswith('^'):
            return StartAnchorNode(self.parse_regex(1, len(pattern)))
        return SearchNode(self.parse_regex(0, len(pattern)))

    # ========= Grammar ==========
    # regex := ε | unit ( '+' | '?' | '*' )? regex
    def parse_regex(self, start: int, end: int) -> RegexNode:
        units = []
        pos = start
        while pos < end:
            unit, pos = self.parse_unit(pos, end)
            quantifier = None
            if pos < end and self.pattern[pos] in QUANTIFIERS:
                quantifier = QUANTIFIERS[self.pattern[pos]]
                pos += 1
            units.append((unit, quantifier))

        # each node owns everything to its right, so build from the end
        node = EmptyNode()
        for unit, quantifier in reversed(units):
            if quantifier is None:
                node = ConcatNode(unit, node)
            else:
                node = quantifier(unit, node)
        return node

    # unit := '.' | '$' | escape | set | union | CHAR
    def parse_unit(self, pos: int, end: int) -> Tuple[RegexNode, int]:
        c = self.pattern[pos]

        if c == '.':
            return DotNode(), pos + 1
        if c == '$':
            if pos + 1 == end:
                return EndNode(), pos + 1
            raise self.error("end anchor not at end of pattern", pos, end)
        if c == '\\':
            return self.parse_escape(pos, end)
        if c == '[':
            return self.parse_set(pos, end)
        if c == '(':
            return self.parse_union(pos, end)

        return CharNode(c), pos + 1

    # escape := '\' CHAR
    def parse_escape(self, pos: int, end: int) -> Tuple[RegexNode, int]:
        if pos + 1 >= end:
            raise self.error("dangling escape", pos, end)

        c = self.pattern[pos + 1]
        node_cls = ESCAPES.get(c)
        if node_cls is None:
            # unknown escapes stand for the character itself
            return CharNode(c), pos + 2
        return node_cls(), pos + 2

    # set := '[' '^'? CHAR* ']'
    def parse_set(self, pos: int, end: int) -> Tuple[RegexNode, int]:
        body = pos + 1
        negate = body < end and self.pattern[body] == '^'
        if negate:
            body += 1

        close = self.pattern.find(']', body, end)
        if close < 0:
            raise self.error("unterminated character set", pos, end)

        chars = frozenset(self.pattern[body:close])
        if negate:
            return NegatedCharSetNode(chars), close + 1
        return CharSetNode(chars), close + 1

    # union := '(' regex '|' regex ')'
    def parse_union(self, pos: int, end: int) -> Tuple[RegexNode, int]:
        bar = self.pattern.find('|', pos + 1, end)
        if bar < 0:
            raise self.error("malformed alternation", pos, end)

        close = self.pattern.find(')', bar + 1, end)
        if close < 0:
            raise self.error("malformed alternation", pos, end)

        left = self.parse_regex(pos + 1, bar)
        right = self.parse_regex(bar + 1, close)
        return UnionNode(left, right), close + 1

    # ========= Helpers ==========

    def error(self, msg, index, end=None):
        fragment = self.pattern[index:end]
        logger.debug("syntax error in %r: %s at index %d", self.pattern, msg, index)
        return RegexSyntaxException(msg, index, fragment)


def parse(pattern: str) -> RegexNode:
    return RegexParser().parse(pattern)
