"""Equality predicates between comparison units.

A predicate returns the clone type two units are equivalent under, or None
if they do not correspond at all. Predicates are pure functions of their two
arguments so that the alignment algorithms may call them in any order.
"""

from typing import Iterable

from clone_classifier.analysis.clone_type import CloneType, weakest
from clone_classifier.analysis.units import Line, Token

# Storage modifiers that do not change what a line does
DEFAULT_IGNORED_TOKENS: tuple[str, ...] = ("final",)


def compare_tokens(a: Token, b: Token, ignore_case: bool = False) -> CloneType | None:
    """Compare two tokens.

    Args:
        a: First token
        b: Second token
        ignore_case: Compare contents case-insensitively

    Returns:
        TYPE_1 if the contents are equal, TYPE_2 if both are identifiers or
        both are literals, None otherwise.
    """
    if a.contents == b.contents or (ignore_case and a.contents.lower() == b.contents.lower()):
        return CloneType.TYPE_1
    if a.category.is_parameterized_match(b.category):
        return CloneType.TYPE_2
    return None


def compare_lines(
    a: Line,
    b: Line,
    ignored_tokens: Iterable[str] = DEFAULT_IGNORED_TOKENS,
    ignore_case: bool = False,
) -> CloneType | None:
    """Compare two lines token by token.

    Ignored tokens are removed from both lines first. Lines with a different
    number of remaining tokens do not match. Otherwise the line is as strong
    as its weakest token pair, and a single non-matching pair voids the
    whole line. Two lines without tokens match as TYPE_1.
    """
    ignored = set(ignored_tokens)
    tokens_a = [t for t in a.tokens if t.contents not in ignored]
    tokens_b = [t for t in b.tokens if t.contents not in ignored]

    if len(tokens_a) != len(tokens_b):
        return None

    current: CloneType | None = CloneType.TYPE_1
    for token_a, token_b in zip(tokens_a, tokens_b):
        current = weakest(current, compare_tokens(token_a, token_b, ignore_case))
        if current is None:
            return None

    return current
