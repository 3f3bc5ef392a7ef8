"""Evaluation of clone type classifiers."""

from clone_classifier.analysis.evaluation.confusion_matrix import (
    BinaryConfusionMatrix,
    MultiClassConfusionMatrix,
)
from clone_classifier.analysis.evaluation.evaluator import (
    EvaluationResult,
    PairPrediction,
    evaluate_pairs,
)

__all__ = [
    "BinaryConfusionMatrix",
    "MultiClassConfusionMatrix",
    "EvaluationResult",
    "PairPrediction",
    "evaluate_pairs",
]
