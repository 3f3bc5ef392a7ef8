"""Clone types and the strength lattice used to merge classification signals.

Clone types are ordered by strictness: Type-1 > Type-2 > Type-3 > FP.
``None`` stands for an unmatched comparison unit and is treated differently
by the two reductions:

- ``strongest`` ignores ``None`` and keeps the tighter of the two values.
- ``weakest`` is absorbed by ``None`` and otherwise keeps the looser value.
"""

from enum import Enum


class CloneType(Enum):
    """Clone type of a matched comparison unit, a method, or a clone pair."""

    TYPE_1 = "T1"
    TYPE_2 = "T2"
    TYPE_3 = "T3"
    FP = "FP"

    @property
    def rank(self) -> int:
        """Strictness rank, higher is stricter (FP=0 ... TYPE_1=3)."""
        return _RANKS[self]

    @classmethod
    def from_label(cls, label: str) -> "CloneType":
        """Parse a dataset label ("T1", "T2", "T3" or "FP").

        Raises:
            ValueError: If the label is not a known clone type.
        """
        try:
            return cls(label)
        except ValueError as e:
            raise ValueError(f"Invalid clone type: '{label}'") from e


_RANKS = {
    CloneType.FP: 0,
    CloneType.TYPE_3: 1,
    CloneType.TYPE_2: 2,
    CloneType.TYPE_1: 3,
}


def strongest(a: CloneType | None, b: CloneType | None) -> CloneType | None:
    """Return the stricter of two clone types, ignoring unmatched (None) inputs.

    Example: strongest(TYPE_1, TYPE_3) == TYPE_1, strongest(None, TYPE_2) == TYPE_2.
    """
    if a is None:
        return b
    if b is None:
        return a
    return a if a.rank >= b.rank else b


def weakest(a: CloneType | None, b: CloneType | None) -> CloneType | None:
    """Return the looser of two clone types; None if either input is None.

    Example: weakest(TYPE_3, TYPE_2) == TYPE_3, weakest(TYPE_1, None) is None.
    """
    if a is None or b is None:
        return None
    return a if a.rank <= b.rank else b
