"""Turning per-unit matches into clone verdicts.

Each comparison unit of a method gets a slot holding the clone type it was
matched with, or None if it was not matched. The pipeline is:

1. merge_matches: collect alignment matches into one slot array per method
2. fill_gaps: unmatched slots enclosed by matched ones become TYPE_3
3. classify_method: reduce a slot array to one verdict using size/density
4. classify_pair: the pair is as strong as its weaker method
"""

from typing import Sequence

from clone_classifier.analysis.alignment import ElementMatch
from clone_classifier.analysis.clone_type import CloneType, strongest, weakest

UnitClassification = list[CloneType | None]

_STRONG_TYPES = (CloneType.TYPE_1, CloneType.TYPE_2)


def merge_matches(
    matches: Sequence[ElementMatch[CloneType]], size_1: int, size_2: int
) -> tuple[UnitClassification, UnitClassification]:
    """Build the slot arrays of both methods from alignment matches.

    A unit matched more than once keeps the strongest clone type it was
    matched with.
    """
    slots_1: UnitClassification = [None] * size_1
    slots_2: UnitClassification = [None] * size_2

    for match in matches:
        slots_1[match.index_1] = strongest(slots_1[match.index_1], match.eq_type)
        slots_2[match.index_2] = strongest(slots_2[match.index_2], match.eq_type)

    return slots_1, slots_2


def _matched_bounds(slots: Sequence[CloneType | None]) -> tuple[int, int] | None:
    """Index of the first and last matched slot, or None if nothing is matched."""
    matched = [i for i, slot in enumerate(slots) if slot is not None]
    if not matched:
        return None
    return matched[0], matched[-1]


def fill_gaps(slots: Sequence[CloneType | None]) -> UnitClassification:
    """Mark unmatched slots enclosed by matched slots as TYPE_3.

    An unmatched region between matched regions is the gap of a Type-3
    clone. Leading and trailing unmatched slots are not part of the clone
    segment and stay None.

    Returns:
        A new slot array. Idempotent.
    """
    filled = list(slots)
    bounds = _matched_bounds(filled)
    if bounds is None:
        return filled

    first, last = bounds
    for i in range(first, last + 1):
        if filled[i] is None:
            filled[i] = CloneType.TYPE_3
    return filled


def segment_stats(slots: Sequence[CloneType | None]) -> tuple[int, int]:
    """Return (segment size, number of TYPE_1/TYPE_2 slots) of a slot array."""
    segment_size = sum(1 for slot in slots if slot is not None)
    strong_count = sum(1 for slot in slots if slot in _STRONG_TYPES)
    return segment_size, strong_count


def classify_method(
    slots: Sequence[CloneType | None], min_size: int = 0, min_density: float = 0.0
) -> CloneType:
    """Classify one method from its gap-filled slot array.

    The verdict is the weakest clone type in the clone segment (the slots
    between the unmatched prefix and suffix), or FP when:

    - nothing is matched,
    - the segment has fewer than min_size units,
    - the share of TYPE_1/TYPE_2 units in the segment is below min_density.

    The density of an empty segment is undefined; that case is FP already
    and the density check is skipped. Zero disables either threshold.

    Args:
        slots: Slot array without enclosed gaps (see fill_gaps)
        min_size: Minimum clone segment size
        min_density: Minimum fraction of TYPE_1/TYPE_2 units in the segment

    Returns:
        The method verdict, never None.
    """
    verdict: CloneType | None = None
    seen_any = False
    for slot in slots:
        if slot is None:
            continue
        verdict = slot if not seen_any else weakest(verdict, slot)
        seen_any = True

    if verdict is None:
        return CloneType.FP

    segment_size, strong_count = segment_stats(slots)

    if segment_size < min_size:
        return CloneType.FP

    if strong_count / segment_size < min_density:
        return CloneType.FP

    return verdict


def classify_pair(
    slots_1: Sequence[CloneType | None],
    slots_2: Sequence[CloneType | None],
    min_size: int = 0,
    min_density: float = 0.0,
) -> CloneType:
    """Classify a clone pair as the weaker of its two method verdicts."""
    verdict_1 = classify_method(slots_1, min_size, min_density)
    verdict_2 = classify_method(slots_2, min_size, min_density)
    return weakest(verdict_1, verdict_2)
