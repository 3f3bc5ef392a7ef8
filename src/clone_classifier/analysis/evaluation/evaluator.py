"""Evaluation of a matcher against a dataset of manually classified clone pairs."""

from dataclasses import dataclass, field
import logging
from typing import Sequence

import pandas as pd
from tqdm import tqdm

from clone_classifier.analysis.clone_type import CloneType
from clone_classifier.analysis.dataset import ClonePair
from clone_classifier.analysis.evaluation.confusion_matrix import MultiClassConfusionMatrix
from clone_classifier.analysis.exceptions import MatchingFailure
from clone_classifier.analysis.matching import Matcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PairPrediction:
    """A clone pair together with the clone type the matcher assigned to it."""

    pair: ClonePair
    predicted: CloneType

    @property
    def is_correct(self) -> bool:
        return self.pair.truth is self.predicted

    def to_dict(self) -> dict:
        """Convert to dictionary for CSV export."""
        return {
            "pair_id": self.pair.pair_id,
            "method_1": self.pair.method_1.name,
            "method_2": self.pair.method_2.name,
            "truth": self.pair.truth.value,
            "predicted": self.predicted.value,
        }


@dataclass
class EvaluationResult:
    """Result of evaluating a matcher on a dataset.

    Attributes:
        confusion_matrix: Truth vs. prediction counts of all classified pairs
        correct_pairs: Pairs whose prediction equals the manual classification
        misclassified_pairs: Pairs whose prediction differs from it
        errored_pairs: Number of pairs that raised MatchingFailure
    """

    confusion_matrix: MultiClassConfusionMatrix
    correct_pairs: list[PairPrediction] = field(default_factory=list)
    misclassified_pairs: list[PairPrediction] = field(default_factory=list)
    errored_pairs: int = 0

    @property
    def classified_pairs(self) -> int:
        return len(self.correct_pairs) + len(self.misclassified_pairs)

    def misclassified_dataframe(self) -> pd.DataFrame:
        """Misclassified pairs as a DataFrame (one row per pair)."""
        columns = ["pair_id", "method_1", "method_2", "truth", "predicted"]
        return pd.DataFrame([p.to_dict() for p in self.misclassified_pairs], columns=columns)


def evaluate_pairs(
    pairs: Sequence[ClonePair],
    matcher: Matcher,
    limit: int | None = None,
    show_progress: bool = False,
) -> EvaluationResult:
    """Classify clone pairs and compare the verdicts with their manual classification.

    Pairs that cannot be matched are logged, counted as errored and skipped;
    they are never given a default verdict.

    Args:
        pairs: Clone pairs to evaluate
        matcher: Function producing a matching for two methods
        limit: Evaluate only the first N pairs (all if None)
        show_progress: Show a tqdm progress bar

    Returns:
        EvaluationResult with the confusion matrix and per-pair outcomes
    """
    selected = pairs if limit is None else pairs[:limit]
    correct: list[PairPrediction] = []
    misclassified: list[PairPrediction] = []
    errored = 0
    y_true: list[CloneType] = []
    y_pred: list[CloneType] = []

    for idx, pair in enumerate(tqdm(selected, desc="Classifying pairs", disable=not show_progress)):
        try:
            predicted = matcher(pair.method_1, pair.method_2).classify()
        except MatchingFailure as e:
            errored += 1
            logger.warning(
                f"Error when matching pair {idx} ({pair.pair_id}): "
                f"{pair.method_1} vs {pair.method_2}: {e.__cause__ or e}"
            )
            continue

        y_true.append(pair.truth)
        y_pred.append(predicted)
        prediction = PairPrediction(pair, predicted)
        if prediction.is_correct:
            correct.append(prediction)
        else:
            misclassified.append(prediction)

        logger.debug(f"Pair {pair.pair_id}: truth={pair.truth.value} predicted={predicted.value}")

    return EvaluationResult(
        confusion_matrix=MultiClassConfusionMatrix.from_predictions(y_true, y_pred),
        correct_pairs=correct,
        misclassified_pairs=misclassified,
        errored_pairs=errored,
    )
