"""Common behaviour of the matching strategies.

A matching aligns the comparison units of two methods at construction time
and keeps one slot array per method. Strategies only decide what the units
are, how two units compare, and how a unit is displayed.
"""

from abc import ABC, abstractmethod
import logging
from typing import Any, Iterator, Sequence

from clone_classifier.analysis.alignment import AlignmentAlgorithm, compute_lcs
from clone_classifier.analysis.classification import (
    UnitClassification,
    classify_pair,
    fill_gaps,
    merge_matches,
)
from clone_classifier.analysis.clone_type import CloneType
from clone_classifier.analysis.exceptions import (
    MatchingFailure,
    TraversalError,
    UnitExtractionError,
)
from clone_classifier.analysis.units import Method

logger = logging.getLogger(__name__)

RenderedUnit = tuple[str, CloneType | None]


class MethodMatching(ABC):
    """Matching between the comparison units of two methods.

    Attributes:
        units_1: Comparison units of the first method
        units_2: Comparison units of the second method
        slots_1: Gap-filled clone type per unit of the first method
        slots_2: Gap-filled clone type per unit of the second method
        min_size: Minimum clone segment size (0 disables)
        min_density: Minimum Type-1/Type-2 share of the segment (0 disables)
    """

    def __init__(
        self,
        method_1: Method,
        method_2: Method,
        algorithm: AlignmentAlgorithm = compute_lcs,
        min_size: int = 0,
        min_density: float = 0.0,
    ) -> None:
        """Align both methods and classify every comparison unit.

        Raises:
            MatchingFailure: If the comparison units of either method cannot
                be extracted.
        """
        self.min_size = min_size
        self.min_density = min_density

        self.units_1 = self._units_of(method_1)
        self.units_2 = self._units_of(method_2)

        matches = algorithm(self.units_1, self.units_2, self.compare_units)
        logger.debug(
            f"{type(self).__name__}: {len(matches)} matches between "
            f"{len(self.units_1)} and {len(self.units_2)} units"
        )

        slots_1, slots_2 = merge_matches(matches, len(self.units_1), len(self.units_2))
        slots_1 = self.postprocess(self.units_1, slots_1)
        slots_2 = self.postprocess(self.units_2, slots_2)

        self.slots_1 = fill_gaps(slots_1)
        self.slots_2 = fill_gaps(slots_2)

    def _units_of(self, method: Method) -> list[Any]:
        try:
            return self.extract_units(method)
        except (UnitExtractionError, TraversalError) as e:
            raise MatchingFailure(f"Cannot extract units of method '{method}': {e}") from e

    @abstractmethod
    def extract_units(self, method: Method) -> list[Any]:
        """Return the comparison units of a method."""

    @abstractmethod
    def compare_units(self, a: Any, b: Any) -> CloneType | None:
        """Equality predicate handed to the alignment algorithm."""

    @abstractmethod
    def describe_unit(self, unit: Any) -> str:
        """Display text of a comparison unit."""

    def postprocess(self, units: Sequence[Any], slots: UnitClassification) -> UnitClassification:
        """Adjust a slot array after alignment and before gap filling."""
        return slots

    def classify(self) -> CloneType:
        """Classify the pair: the weaker of both method verdicts."""
        return classify_pair(self.slots_1, self.slots_2, self.min_size, self.min_density)

    def render(self, which: int) -> Iterator[RenderedUnit]:
        """Yield (text, clone type or None) for every unit of one method, in order.

        Each call returns a fresh iterator.

        Args:
            which: 1 for the first method, 2 for the second

        Raises:
            ValueError: If which is neither 1 nor 2.
        """
        if which == 1:
            units, slots = self.units_1, self.slots_1
        elif which == 2:
            units, slots = self.units_2, self.slots_2
        else:
            raise ValueError(f"Method selector must be 1 or 2, got {which}")

        return ((self.describe_unit(unit), slot) for unit, slot in zip(units, slots))
