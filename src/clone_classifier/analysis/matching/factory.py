"""Selection of a matching strategy by name."""

from enum import Enum
from typing import Callable

from clone_classifier.analysis.alignment import AlignmentAlgorithm, get_algorithm
from clone_classifier.analysis.matching.base import MethodMatching
from clone_classifier.analysis.matching.line_matching import LineMatching
from clone_classifier.analysis.matching.token_matching import TokenMatching, TreeLeafMatching
from clone_classifier.analysis.units import Method
from clone_classifier.core.config import MatchingConfig

Matcher = Callable[[Method, Method], MethodMatching]


class MatcherKind(Enum):
    """Available comparison-unit strategies."""

    LINE = "line"
    TOKEN = "token"
    TREE_PREORDER = "tree_preorder"
    TREE_POSTORDER = "tree_postorder"


def create_matching(
    kind: MatcherKind | str,
    method_1: Method,
    method_2: Method,
    config: MatchingConfig | None = None,
    algorithm: AlignmentAlgorithm | None = None,
) -> MethodMatching:
    """Match two methods with the strategy named by kind.

    Args:
        kind: Strategy to use
        method_1: The first method
        method_2: The second method
        config: Thresholds, algorithm and strategy flags (defaults if None)
        algorithm: Alignment algorithm to use instead of looking up
            config.algorithm

    Returns:
        The matching of both methods.

    Raises:
        ValueError: If kind or the configured algorithm is unknown.
        MatchingFailure: If the comparison units cannot be extracted.
    """
    kind = MatcherKind(kind)
    config = config or MatchingConfig()
    if algorithm is None:
        algorithm = get_algorithm(config.algorithm)

    if kind is MatcherKind.LINE:
        return LineMatching(
            method_1,
            method_2,
            algorithm,
            config.min_size,
            config.min_density,
            braces_preprocessing=config.braces_preprocessing,
            braces_postprocessing=config.braces_postprocessing,
            ignored_tokens=config.ignored_tokens,
            ignore_case=config.ignore_case,
        )
    if kind is MatcherKind.TOKEN:
        return TokenMatching(
            method_1,
            method_2,
            algorithm,
            config.min_size,
            config.min_density,
            ignore_case=config.ignore_case,
        )
    return TreeLeafMatching(
        method_1,
        method_2,
        algorithm,
        config.min_size,
        config.min_density,
        preorder=kind is MatcherKind.TREE_PREORDER,
        ignore_case=config.ignore_case,
    )


def make_matcher(config: MatchingConfig) -> Matcher:
    """Bind a configuration into a function that matches two methods.

    The strategy and the alignment algorithm are resolved once, so an
    unknown name fails here rather than on the first pair.

    Raises:
        ValueError: If the configured strategy or algorithm is unknown.
    """
    kind = MatcherKind(config.matcher)
    algorithm = get_algorithm(config.algorithm)

    def matcher(method_1: Method, method_2: Method) -> MethodMatching:
        return create_matching(kind, method_1, method_2, config, algorithm)

    return matcher
