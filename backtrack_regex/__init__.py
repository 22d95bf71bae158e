from .ast import (
    RegexNode, EmptyNode, DigitNode, AlnumNode, SpaceNode, DotNode,
    CharNode, CharSetNode, NegatedCharSetNode, ConcatNode, UnionNode,
    PlusNode, OptionalNode, StarNode, RepeatNode, EndNode,
    StartAnchorNode, SearchNode
)
from .parser import RegexParser, RegexSyntaxException, parse
from .matcher import BacktrackMatcher, UnsupportedFeatureError, match
from .engine import RegexEngine, find

__all__ = [
    "find", "parse", "match",
    "RegexEngine", "RegexParser", "BacktrackMatcher",
    "RegexSyntaxException", "UnsupportedFeatureError",
    "RegexNode", "EmptyNode", "DigitNode", "AlnumNode", "SpaceNode", "DotNode",
    "CharNode", "CharSetNode", "NegatedCharSetNode", "ConcatNode", "UnionNode",
    "PlusNode", "OptionalNode", "StarNode", "RepeatNode", "EndNode",
    "StartAnchorNode", "SearchNode",
]
