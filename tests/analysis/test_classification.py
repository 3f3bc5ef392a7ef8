"""Tests for gap filling and the size/density classification policy."""

from itertools import product

from clone_classifier.analysis.alignment import ElementMatch
from clone_classifier.analysis.classification import (
    classify_method,
    classify_pair,
    fill_gaps,
    merge_matches,
    segment_stats,
)
from clone_classifier.analysis.clone_type import CloneType

T1, T2, T3, FP = CloneType.TYPE_1, CloneType.TYPE_2, CloneType.TYPE_3, CloneType.FP


class TestMergeMatches:
    """Test building slot arrays from alignment matches."""

    def test_unmatched_slots_are_none(self):
        slots_1, slots_2 = merge_matches([ElementMatch(1, 0, T1)], 3, 2)
        assert slots_1 == [None, T1, None]
        assert slots_2 == [T1, None]

    def test_keeps_strongest_per_unit(self):
        """Test a unit matched twice keeps the stricter clone type."""
        matches = [ElementMatch(0, 0, T2), ElementMatch(0, 1, T1), ElementMatch(1, 1, T3)]
        slots_1, slots_2 = merge_matches(matches, 2, 2)
        assert slots_1 == [T1, T3]
        assert slots_2 == [T2, T1]


class TestFillGaps:
    """Test filling enclosed gaps with Type-3."""

    def test_fills_enclosed_gap(self):
        assert fill_gaps([None, T1, None, T1, None]) == [None, T1, T3, T1, None]

    def test_keeps_prefix_and_suffix(self):
        assert fill_gaps([None, None, T2, None]) == [None, None, T2, None]

    def test_all_none_unchanged(self):
        assert fill_gaps([None, None, None]) == [None, None, None]

    def test_empty(self):
        assert fill_gaps([]) == []

    def test_does_not_modify_input(self):
        slots = [T1, None, T2]
        fill_gaps(slots)
        assert slots == [T1, None, T2]

    def test_no_gap_remains_and_idempotent(self):
        """Test on every array of length 5 over {T1, T2, None}."""
        for slots in product([T1, T2, None], repeat=5):
            filled = fill_gaps(slots)
            matched = [i for i, s in enumerate(filled) if s is not None]
            if matched:
                assert all(s is not None for s in filled[matched[0] : matched[-1] + 1])
                assert filled[: matched[0]] == list(slots[: matched[0]])
                assert filled[matched[-1] + 1 :] == list(slots[matched[-1] + 1 :])
            assert fill_gaps(filled) == filled


class TestClassifyMethod:
    """Test reducing a slot array to one verdict."""

    def test_all_none_is_false_positive(self):
        assert classify_method([None, None]) is FP

    def test_empty_is_false_positive(self):
        assert classify_method([]) is FP

    def test_all_type1(self):
        assert classify_method([T1] * 5) is T1

    def test_weakest_wins(self):
        assert classify_method([None, T1, T2, T1, None]) is T2
        assert classify_method([T1, T3, T2]) is T3

    def test_segment_smaller_than_min_size(self):
        """Test a strong but short segment is a false positive."""
        slots = [None, None, T1, T1, None, None]
        assert classify_method(slots, min_size=5) is FP
        assert classify_method(slots, min_size=2) is T1

    def test_density_below_minimum(self):
        """Test Type-3 gaps lower the density of a segment."""
        slots = [T1, T3, T3, T1]
        assert classify_method(slots, min_density=0.6) is FP
        assert classify_method(slots, min_density=0.5) is T3

    def test_zero_thresholds_disable_checks(self):
        assert classify_method([T3], min_size=0, min_density=0.0) is T3

    def test_monotonic_in_thresholds(self):
        """Test lowering thresholds never turns a clone into a false positive."""
        sizes = [0, 1, 2, 3, 4, 5]
        densities = [0.0, 0.25, 0.5, 0.75, 1.0]
        for slots in product([T1, T2, T3], repeat=4):
            slots = fill_gaps([None, *slots, None])
            for size, density in product(sizes, densities):
                if classify_method(slots, size, density) is FP:
                    continue
                for lower_size in sizes[: sizes.index(size) + 1]:
                    for lower_density in densities[: densities.index(density) + 1]:
                        assert classify_method(slots, lower_size, lower_density) is not FP


class TestSegmentStats:
    def test_counts(self):
        assert segment_stats([None, T1, T3, T2, None]) == (3, 2)


class TestClassifyPair:
    """Test the pair verdict."""

    def test_weaker_method_decides(self):
        assert classify_pair([T1, T1], [T1, T2]) is T2

    def test_false_positive_method(self):
        assert classify_pair([T1, T1], [None, None]) is FP
