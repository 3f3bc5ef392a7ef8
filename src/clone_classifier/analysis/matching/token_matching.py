"""Token-based matching: the comparison units are single tokens."""

from clone_classifier.analysis.alignment import AlignmentAlgorithm, compute_lcs
from clone_classifier.analysis.clone_type import CloneType
from clone_classifier.analysis.matching.base import MethodMatching
from clone_classifier.analysis.predicates import compare_tokens
from clone_classifier.analysis.units import Method, Token


class TokenMatching(MethodMatching):
    """Matching between the flat token streams of two methods."""

    def __init__(
        self,
        method_1: Method,
        method_2: Method,
        algorithm: AlignmentAlgorithm = compute_lcs,
        min_size: int = 0,
        min_density: float = 0.0,
        ignore_case: bool = False,
    ) -> None:
        self.ignore_case = ignore_case
        super().__init__(method_1, method_2, algorithm, min_size, min_density)

    def extract_units(self, method: Method) -> list[Token]:
        return method.get_tokens()

    def compare_units(self, a: Token, b: Token) -> CloneType | None:
        return compare_tokens(a, b, self.ignore_case)

    def describe_unit(self, unit: Token) -> str:
        return unit.describe()


class TreeLeafMatching(TokenMatching):
    """Matching between the syntax-tree leaves of two methods.

    Leaves are collected in pre-order or post-order and then compared like
    tokens. A failed tree traversal is reported as MatchingFailure.
    """

    def __init__(
        self,
        method_1: Method,
        method_2: Method,
        algorithm: AlignmentAlgorithm = compute_lcs,
        min_size: int = 0,
        min_density: float = 0.0,
        preorder: bool = True,
        ignore_case: bool = False,
    ) -> None:
        self.preorder = preorder
        super().__init__(method_1, method_2, algorithm, min_size, min_density, ignore_case)

    def extract_units(self, method: Method) -> list[Token]:
        return method.get_leaf_traversal(self.preorder)
