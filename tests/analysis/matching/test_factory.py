"""Tests for matching strategy selection."""

import pytest

from clone_classifier.analysis.alignment import compute_naive_match, get_algorithm
from clone_classifier.analysis.clone_type import CloneType
from clone_classifier.analysis.matching import (
    LineMatching,
    MatcherKind,
    TokenMatching,
    TreeLeafMatching,
    create_matching,
    make_matcher,
)
from clone_classifier.analysis.matching import factory
from clone_classifier.analysis.units import Method, TokenCategory, TreeNode
from clone_classifier.core.config import MatchingConfig


@pytest.fixture
def tree_methods():
    """Create two methods with syntax trees differing in one identifier."""

    def tree(name):
        return TreeNode(
            "BlockStmt",
            children=(TreeNode(name, TokenCategory.IDENTIFIER), TreeNode(";")),
        )

    return Method("m1", tree=tree("x")), Method("m2", tree=tree("y"))


class TestCreateMatching:
    """Test building a matching by strategy name."""

    @pytest.mark.parametrize(
        "kind, expected",
        [
            ("line", LineMatching),
            ("token", TokenMatching),
            (MatcherKind.LINE, LineMatching),
            (MatcherKind.TOKEN, TokenMatching),
        ],
    )
    def test_line_and_token_strategies(self, make_method, kind, expected):
        m1 = make_method("m1", ["int x = 1;"])
        m2 = make_method("m2", ["int y = 1;"])
        matching = create_matching(kind, m1, m2)
        assert type(matching) is expected
        assert matching.classify() is CloneType.TYPE_2

    @pytest.mark.parametrize("kind, preorder", [("tree_preorder", True), ("tree_postorder", False)])
    def test_tree_strategies(self, tree_methods, kind, preorder):
        matching = create_matching(kind, *tree_methods)
        assert isinstance(matching, TreeLeafMatching)
        assert matching.preorder is preorder
        assert matching.classify() is CloneType.TYPE_2

    def test_unknown_kind(self, make_method):
        with pytest.raises(ValueError):
            create_matching("ast", make_method("m1", ["a;"]), make_method("m2", ["a;"]))

    def test_config_is_applied(self, make_method):
        """Test thresholds and line options come from the configuration."""
        config = MatchingConfig(
            min_size=3, braces_preprocessing=True, braces_postprocessing=False, ignored_tokens=[]
        )
        m1 = make_method("m1", ["{", "a = 1;", "}"])
        m2 = make_method("m2", ["{", "a = 1;", "}"])
        matching = create_matching("line", m1, m2, config)

        assert matching.min_size == 3
        assert matching.braces_preprocessing
        assert not matching.braces_postprocessing
        assert matching.ignored_tokens == frozenset()
        assert matching.classify() is CloneType.FP

    def test_naive_algorithm_from_config(self, make_method):
        config = MatchingConfig(matcher="token", algorithm="naive")
        m1 = make_method("m1", ["a b"])
        m2 = make_method("m2", ["b a"])
        matching = create_matching("token", m1, m2, config)
        assert matching.slots_1 == [CloneType.TYPE_1, CloneType.TYPE_1]


class TestMakeMatcher:
    """Test binding a configuration into a matcher function."""

    def test_matcher_uses_configured_strategy(self, make_method):
        matcher = make_matcher(MatchingConfig(matcher="token"))
        matching = matcher(make_method("m1", ["a;"]), make_method("m2", ["a;"]))
        assert isinstance(matching, TokenMatching)
        assert matching.classify() is CloneType.TYPE_1

    def test_matcher_is_reusable(self, make_method):
        matcher = make_matcher(MatchingConfig())
        first = matcher(make_method("m1", ["a;"]), make_method("m2", ["a;"]))
        second = matcher(make_method("m3", ["a;"]), make_method("m4", ["b + c;"]))
        assert first.classify() is CloneType.TYPE_1
        assert second.classify() is CloneType.FP

    def test_algorithm_resolved_once(self, make_method, monkeypatch):
        """Test the algorithm is looked up when the matcher is built, not per pair."""
        lookups = []

        def counting_get_algorithm(name):
            lookups.append(name)
            return get_algorithm(name)

        monkeypatch.setattr(factory, "get_algorithm", counting_get_algorithm)
        matcher = make_matcher(MatchingConfig(algorithm="naive"))
        for _ in range(3):
            matcher(make_method("m1", ["a;"]), make_method("m2", ["a;"]))

        assert lookups == ["naive"]

    def test_unknown_algorithm_fails_on_build(self):
        config = MatchingConfig.model_construct(matcher="line", algorithm="dtw")
        with pytest.raises(ValueError, match="Unknown alignment algorithm"):
            make_matcher(config)

    def test_explicit_algorithm_overrides_config(self, make_method):
        m1 = make_method("m1", ["a b"])
        m2 = make_method("m2", ["b a"])
        matching = create_matching("token", m1, m2, MatchingConfig(), compute_naive_match)
        assert matching.slots_1 == [CloneType.TYPE_1, CloneType.TYPE_1]
