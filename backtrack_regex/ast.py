# backtrack_regex/ast.py

from dataclasses import dataclass
from typing import FrozenSet


@dataclass(frozen=True, repr=False)
class RegexNode:
    """Base interface for every pattern node."""
    pass


# =========================================================
# Single-character classes
# =========================================================

@dataclass(frozen=True, repr=False)
class EmptyNode(RegexNode):
    """Matches everywhere, consumes nothing."""
    def __repr__(self):
        return "ε"


@dataclass(frozen=True, repr=False)
class DigitNode(RegexNode):
    r"""\d : one ASCII digit."""
    def __repr__(self):
        return r"\d"


@dataclass(frozen=True, repr=False)
class AlnumNode(RegexNode):
    r"""\w : one alphanumeric character."""
    def __repr__(self):
        return r"\w"


@dataclass(frozen=True, repr=False)
class SpaceNode(RegexNode):
    r"""\t : one whitespace character."""
    def __repr__(self):
        return r"\t"


@dataclass(frozen=True, repr=False)
class DotNode(RegexNode):
    """Wildcard '.' matches any character."""
    def __repr__(self):
        return "."


@dataclass(frozen=True, repr=False)
class CharNode(RegexNode):
    """Single literal character."""
    ch: str

    def __repr__(self):
        return f"'{self.ch}'"


@dataclass(frozen=True, repr=False)
class CharSetNode(RegexNode):
    """[abc] : one character out of the set."""
    chars: FrozenSet[str]

    def __repr__(self):
        return f"[{''.join(sorted(self.chars))}]"


@dataclass(frozen=True, repr=False)
class NegatedCharSetNode(RegexNode):
    """[^abc] : one character not in the set."""
    chars: FrozenSet[str]

    def __repr__(self):
        return f"[^{''.join(sorted(self.chars))}]"


# =========================================================
# Composites
# =========================================================

@dataclass(frozen=True, repr=False)
class ConcatNode(RegexNode):
    """Concatenation: left · right"""
    left: RegexNode
    right: RegexNode

    def __repr__(self):
        return f"({self.left}·{self.right})"


@dataclass(frozen=True, repr=False)
class UnionNode(RegexNode):
    """Union (OR): left | right, left preferred"""
    left: RegexNode
    right: RegexNode

    def __repr__(self):
        return f"({self.left}|{self.right})"


# =========================================================
# Repetitions
#
# `follow` is everything in the pattern after the quantifier.
# =========================================================

@dataclass(frozen=True, repr=False)
class PlusNode(RegexNode):
    """(child)+ then follow"""
    child: RegexNode
    follow: RegexNode

    def __repr__(self):
        return f"({self.child})+ → {self.follow}"


@dataclass(frozen=True, repr=False)
class OptionalNode(RegexNode):
    """(child)? then follow"""
    child: RegexNode
    follow: RegexNode

    def __repr__(self):
        return f"({self.child})? → {self.follow}"


@dataclass(frozen=True, repr=False)
class StarNode(RegexNode):
    """Kleene star: (child)* then follow"""
    child: RegexNode
    follow: RegexNode

    def __repr__(self):
        return f"({self.child})* → {self.follow}"


@dataclass(frozen=True, repr=False)
class RepeatNode(RegexNode):
    """(child){min,max} then follow. The parser never builds one."""
    min: int
    max: int
    child: RegexNode
    follow: RegexNode

    def __repr__(self):
        return f"({self.child}){{{self.min},{self.max}}} → {self.follow}"


# =========================================================
# Anchors
# =========================================================

@dataclass(frozen=True, repr=False)
class EndNode(RegexNode):
    """'$' matches only at end of input."""
    def __repr__(self):
        return "$"


@dataclass(frozen=True, repr=False)
class StartAnchorNode(RegexNode):
    """'^' : inner must match at the current position."""
    inner: RegexNode

    def __repr__(self):
        return f"^{self.inner}"


@dataclass(frozen=True, repr=False)
class SearchNode(RegexNode):
    """Unanchored: inner may match starting at any position."""
    inner: RegexNode

    def __repr__(self):
        return f"…{self.inner}"
