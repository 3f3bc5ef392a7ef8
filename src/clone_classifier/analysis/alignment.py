"""Sequence alignment algorithms for matching comparison units.

Both algorithms share one contract::

    algorithm(seq_1, seq_2, equals) -> list[ElementMatch]

where ``equals(a, b)`` returns an object describing how ``a`` and ``b``
correspond (for clone matching: a CloneType) or None if they do not.

- compute_lcs: longest common subsequence, one-to-one and order preserving
- compute_naive_match: every corresponding pair, many-to-many (baseline)
"""

from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeVar

import numpy as np

U = TypeVar("U")
T = TypeVar("T")

EqualityPredicate = Callable[[U, U], T | None]


@dataclass(frozen=True)
class ElementMatch(Generic[T]):
    """Correspondence between element index_1 of the first sequence and index_2 of the second.

    Attributes:
        index_1: Index into the first sequence
        index_2: Index into the second sequence
        eq_type: What the predicate returned for the two elements
    """

    index_1: int
    index_2: int
    eq_type: T


AlignmentAlgorithm = Callable[
    [Sequence[U], Sequence[U], EqualityPredicate], list[ElementMatch[T]]
]

# Backtracking directions stored in the LCS table
_NONE = 0
_MATCH = 1
_TOP = 2
_LEFT = 3


def compute_naive_match(
    seq_1: Sequence[U], seq_2: Sequence[U], equals: EqualityPredicate
) -> list[ElementMatch[T]]:
    """Match every element of seq_1 with every corresponding element of seq_2.

    Quadratic in time and in the number of results. The matches form a
    many-to-many mapping without any ordering constraint.
    """
    matches = []
    for i, a in enumerate(seq_1):
        for j, b in enumerate(seq_2):
            eq = equals(a, b)
            if eq is not None:
                matches.append(ElementMatch(i, j, eq))
    return matches


def compute_lcs(
    seq_1: Sequence[U], seq_2: Sequence[U], equals: EqualityPredicate
) -> list[ElementMatch[T]]:
    """Compute a longest common subsequence of two sequences.

    Cell (i, j) of the table describes the best chain of matches ending at or
    before (i, j). A corresponding pair extends the chain of (i-1, j-1) by one
    match; otherwise the cell takes the longer chain of (i-1, j) and
    (i, j-1), preferring (i-1, j) on ties. The result is read back from the
    bottom-right cell by following the stored directions.

    Args:
        seq_1: First sequence
        seq_2: Second sequence
        equals: Predicate returning match information or None

    Returns:
        Matches in left-to-right order, strictly increasing in both indices.
        Empty if either sequence is empty or nothing corresponds.
    """
    n, m = len(seq_1), len(seq_2)
    if n == 0 or m == 0:
        return []

    lengths = np.zeros((n, m), dtype=np.int64)
    directions = np.full((n, m), _NONE, dtype=np.int8)
    eq_types = np.empty((n, m), dtype=object)

    for i in range(n):
        for j in range(m):
            eq = equals(seq_1[i], seq_2[j])

            if eq is not None:
                diagonal = lengths[i - 1, j - 1] if i > 0 and j > 0 else 0
                lengths[i, j] = diagonal + 1
                directions[i, j] = _MATCH
                eq_types[i, j] = eq
                continue

            top = lengths[i - 1, j] if i > 0 else 0
            left = lengths[i, j - 1] if j > 0 else 0

            if top == 0 and left == 0:
                continue
            if top >= left:
                lengths[i, j] = top
                directions[i, j] = _TOP
            else:
                lengths[i, j] = left
                directions[i, j] = _LEFT

    matches: list[ElementMatch[T]] = []
    i, j = n - 1, m - 1
    while i >= 0 and j >= 0:
        direction = directions[i, j]
        if direction == _MATCH:
            matches.append(ElementMatch(i, j, eq_types[i, j]))
            i, j = i - 1, j - 1
        elif direction == _TOP:
            i -= 1
        elif direction == _LEFT:
            j -= 1
        else:
            break

    matches.reverse()
    return matches


ALGORITHMS: dict[str, AlignmentAlgorithm] = {
    "lcs": compute_lcs,
    "naive": compute_naive_match,
}


def get_algorithm(name: str) -> AlignmentAlgorithm:
    """Look up an alignment algorithm by name ("lcs" or "naive").

    Raises:
        ValueError: If the name is unknown.
    """
    try:
        return ALGORITHMS[name]
    except KeyError as e:
        raise ValueError(
            f"Unknown alignment algorithm: '{name}'. Choose from: {', '.join(ALGORITHMS)}"
        ) from e
