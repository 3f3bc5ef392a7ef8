"""Matching strategies for classifying a pair of methods.

Public API:
    - create_matching / make_matcher: Build a matching for a strategy name
    - MatcherKind: Available strategies (line, token, tree pre/post-order)
    - LineMatching, TokenMatching, TreeLeafMatching: The strategies
    - MethodMatching: Common capability (classify, render)
"""

from clone_classifier.analysis.matching.base import MethodMatching, RenderedUnit
from clone_classifier.analysis.matching.factory import (
    Matcher,
    MatcherKind,
    create_matching,
    make_matcher,
)
from clone_classifier.analysis.matching.line_matching import (
    LineMatching,
    filter_brace_lines,
    filter_brace_matches,
)
from clone_classifier.analysis.matching.token_matching import TokenMatching, TreeLeafMatching

__all__ = [
    "MethodMatching",
    "RenderedUnit",
    "Matcher",
    "MatcherKind",
    "create_matching",
    "make_matcher",
    "LineMatching",
    "TokenMatching",
    "TreeLeafMatching",
    "filter_brace_lines",
    "filter_brace_matches",
]
