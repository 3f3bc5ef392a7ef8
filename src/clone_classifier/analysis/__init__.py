"""Analysis modules for clone type classification.

This package provides the matching and classification engine:
- Clone types and the strongest/weakest lattice
- Comparison units (lines, tokens, syntax-tree leaves)
- Sequence alignment (LCS and naive all-pairs)
- Gap filling and size/density classification policy
- Matching strategies and their evaluation
"""

from clone_classifier.analysis.alignment import (
    ElementMatch,
    compute_lcs,
    compute_naive_match,
    get_algorithm,
)
from clone_classifier.analysis.classification import (
    classify_method,
    classify_pair,
    fill_gaps,
    merge_matches,
)
from clone_classifier.analysis.clone_type import CloneType, strongest, weakest
from clone_classifier.analysis.exceptions import MatchingFailure
from clone_classifier.analysis.matching import MatcherKind, create_matching, make_matcher
from clone_classifier.analysis.predicates import compare_lines, compare_tokens
from clone_classifier.analysis.units import Line, Method, Token, TokenCategory, TreeNode

__all__ = [
    "CloneType",
    "strongest",
    "weakest",
    "Token",
    "TokenCategory",
    "Line",
    "TreeNode",
    "Method",
    "compare_tokens",
    "compare_lines",
    "ElementMatch",
    "compute_lcs",
    "compute_naive_match",
    "get_algorithm",
    "merge_matches",
    "fill_gaps",
    "classify_method",
    "classify_pair",
    "MatchingFailure",
    "MatcherKind",
    "create_matching",
    "make_matcher",
]
