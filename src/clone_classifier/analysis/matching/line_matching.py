"""Line-based matching: the comparison units are whole source lines."""

from typing import Iterable, Sequence

from clone_classifier.analysis.alignment import AlignmentAlgorithm, compute_lcs
from clone_classifier.analysis.classification import UnitClassification
from clone_classifier.analysis.clone_type import CloneType
from clone_classifier.analysis.matching.base import MethodMatching
from clone_classifier.analysis.predicates import DEFAULT_IGNORED_TOKENS, compare_lines
from clone_classifier.analysis.units import Line, Method

CLOSING_BRACE = "}"


def filter_brace_lines(lines: Iterable[Line]) -> list[Line]:
    """Drop lines that consist of a single opening or closing brace."""
    return [line for line in lines if not line.is_brace()]


def filter_brace_matches(lines: Sequence[Line], slots: UnitClassification) -> UnitClassification:
    """Unmatch closing-brace lines that are not attached to a matched statement.

    A forward scan marks every matched "}" line that does not follow a
    matched non-brace line within the same matched run. A backward scan then
    keeps marked braces that precede a matched statement within the same run.
    The remaining marked braces become unmatched, so that braces alone never
    make up a clone segment.

    Returns:
        A new slot array.
    """
    result = list(slots)
    marked = [False] * len(lines)

    in_segment = False
    for i, line in enumerate(lines):
        if result[i] is None:
            in_segment = False
            continue
        if line.content != CLOSING_BRACE:
            in_segment = True
            continue
        if not in_segment:
            marked[i] = True

    in_segment = False
    for i in range(len(lines) - 1, -1, -1):
        if result[i] is None:
            in_segment = False
            continue
        if lines[i].content != CLOSING_BRACE:
            in_segment = True
            continue
        if not in_segment and marked[i]:
            result[i] = None

    return result


class LineMatching(MethodMatching):
    """Matching between two methods based on their lines.

    Two lines match if they have the same number of tokens (after removing
    ignored tokens) and every token pair matches; see compare_lines.
    """

    def __init__(
        self,
        method_1: Method,
        method_2: Method,
        algorithm: AlignmentAlgorithm = compute_lcs,
        min_size: int = 0,
        min_density: float = 0.0,
        braces_preprocessing: bool = False,
        braces_postprocessing: bool = True,
        ignored_tokens: Iterable[str] = DEFAULT_IGNORED_TOKENS,
        ignore_case: bool = False,
    ) -> None:
        """Initialize line matching.

        Args:
            method_1: The first method
            method_2: The second method
            algorithm: Alignment algorithm used to match the lines
            min_size: Minimum clone segment size in lines (0 disables)
            min_density: Minimum Type-1/Type-2 share of the segment (0 disables)
            braces_preprocessing: Remove brace-only lines before alignment
            braces_postprocessing: Unmatch stray closing braces after alignment
            ignored_tokens: Tokens removed before comparing two lines
            ignore_case: Compare token text case-insensitively

        Raises:
            MatchingFailure: If the lines of either method are unavailable.
        """
        self.braces_preprocessing = braces_preprocessing
        self.braces_postprocessing = braces_postprocessing
        self.ignored_tokens = frozenset(ignored_tokens)
        self.ignore_case = ignore_case
        super().__init__(method_1, method_2, algorithm, min_size, min_density)

    def extract_units(self, method: Method) -> list[Line]:
        lines = method.get_lines()
        if self.braces_preprocessing:
            return filter_brace_lines(lines)
        return lines

    def compare_units(self, a: Line, b: Line) -> CloneType | None:
        return compare_lines(a, b, self.ignored_tokens, self.ignore_case)

    def describe_unit(self, unit: Line) -> str:
        return unit.content

    def postprocess(self, units: Sequence[Line], slots: UnitClassification) -> UnitClassification:
        if self.braces_postprocessing:
            return filter_brace_matches(units, slots)
        return slots
