# backtrack_regex/matcher.py

from typing import Callable, List, Optional

from .ast import (
    RegexNode, EmptyNode, DigitNode, AlnumNode, SpaceNode, DotNode,
    CharNode, CharSetNode, NegatedCharSetNode, ConcatNode, UnionNode,
    PlusNode, OptionalNode, StarNode, RepeatNode, EndNode,
    StartAnchorNode, SearchNode
)


class UnsupportedFeatureError(NotImplementedError):
    """The pattern is valid but uses a construct the matcher does not run."""

    def __init__(self, node: RegexNode):
        super().__init__(f"unsupported pattern construct: {node!r}")
        self.node = node


def is_ascii_digit(c: str) -> bool:
    return '0' <= c <= '9'


# =========================================================
# BacktrackMatcher — interpret the AST against a string
# =========================================================

class BacktrackMatcher:
    """
    `at` returns the index just past what the node consumed, starting at
    index `i` of `s`, or None on failure. `exact` is the same thing
    expressed on the remainder string.

    Repetition nodes carry their own continuation (`follow`), so
    backtracking only happens where a node explicitly falls back. Tail
    positions (the right side of a concatenation, the continuation of a
    repetition) are followed in a loop rather than by recursion, so the
    stack does not grow with the length of the text or of a chain.
    """

    @staticmethod
    def exact(n: RegexNode, s: str) -> Optional[str]:
        end = BacktrackMatcher.at(n, s, 0)
        if end is None:
            return None
        return s[end:]

    @staticmethod
    def at(n: RegexNode, s: str, i: int) -> Optional[int]:
        while True:
            if isinstance(n, EmptyNode):
                return i
            if isinstance(n, DigitNode):
                return BacktrackMatcher.match_char(is_ascii_digit, s, i)
            if isinstance(n, AlnumNode):
                return BacktrackMatcher.match_char(str.isalnum, s, i)
            if isinstance(n, SpaceNode):
                return BacktrackMatcher.match_char(str.isspace, s, i)
            if isinstance(n, DotNode):
                return BacktrackMatcher.match_char(lambda c: True, s, i)
            if isinstance(n, CharNode):
                return BacktrackMatcher.match_char(lambda c: c == n.ch, s, i)
            if isinstance(n, CharSetNode):
                return BacktrackMatcher.match_char(lambda c: c in n.chars, s, i)
            if isinstance(n, NegatedCharSetNode):
                return BacktrackMatcher.match_char(lambda c: c not in n.chars, s, i)
            if isinstance(n, EndNode):
                return i if i == len(s) else None

            if isinstance(n, ConcatNode):
                i = BacktrackMatcher.at(n.left, s, i)
                if i is None:
                    return None
                n = n.right
                continue

            if isinstance(n, UnionNode):
                end = BacktrackMatcher.at(n.left, s, i)
                if end is not None:
                    return end
                n = n.right
                continue

            if isinstance(n, PlusNode):
                steps = BacktrackMatcher.repetitions(n.child, s, i)
                if not steps:
                    return None
                # longest run first, giving back one repetition at a time
                for nxt in reversed(steps[1:]):
                    end = BacktrackMatcher.at(n.follow, s, nxt)
                    if end is not None:
                        return end
                n, i = n.follow, steps[0]
                continue

            if isinstance(n, OptionalNode):
                nxt = BacktrackMatcher.at(n.child, s, i)
                if nxt is not None:
                    end = BacktrackMatcher.at(n.follow, s, nxt)
                    if end is not None:
                        return end
                n = n.follow
                continue

            if isinstance(n, StarNode):
                steps = BacktrackMatcher.repetitions(n.child, s, i)
                if steps:
                    i = steps[-1]
                n = n.follow
                continue

            if isinstance(n, StartAnchorNode):
                n = n.inner
                continue

            if isinstance(n, SearchNode):
                return BacktrackMatcher.match_somewhere(n, s, i)

            if isinstance(n, RepeatNode):
                raise UnsupportedFeatureError(n)

            raise TypeError(f"Unknown AST node type: {type(n)}")

    # ========== helpers ==========

    @staticmethod
    def match_char(condition: Callable[[str], bool], s: str, i: int) -> Optional[int]:
        if i < len(s) and condition(s[i]):
            return i + 1
        return None

    @staticmethod
    def repetitions(child: RegexNode, s: str, i: int) -> List[int]:
        """
        Indices reached after each successive match of `child`. Stops at
        the first failure or at a repetition that consumed nothing.
        """
        steps = []
        while True:
            nxt = BacktrackMatcher.at(child, s, i)
            if nxt is None:
                break
            steps.append(nxt)
            if nxt == i:
                break
            i = nxt
        return steps

    @staticmethod
    def match_somewhere(n: SearchNode, s: str, i: int) -> Optional[int]:
        for start in range(i, len(s) + 1):
            end = BacktrackMatcher.at(n.inner, s, start)
            if end is not None:
                return end
        return None


def match(node: RegexNode, text: str) -> Optional[str]:
    return BacktrackMatcher.exact(node, text)
