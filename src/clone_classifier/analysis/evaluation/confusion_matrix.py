"""Confusion matrices for evaluating clone type classifiers."""

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np
import pandas as pd
from sklearn.metrics import confusion_matrix

from clone_classifier.analysis.clone_type import CloneType


def _ratio(numerator: float, denominator: float) -> float:
    """numerator / denominator, NaN when the denominator is zero."""
    if denominator == 0:
        return float("nan")
    return numerator / denominator


@dataclass(frozen=True)
class BinaryConfusionMatrix:
    """One-vs-rest confusion counts for a single clone type.

    Metrics are NaN when undefined: precision without positive predictions,
    recall without positive ground truth, F1 when precision + recall is zero
    or either is undefined. Callers must check for NaN before comparing.

    Attributes:
        tp: Pairs of the class predicted as the class
        fp: Pairs of another class predicted as the class
        fn: Pairs of the class predicted as another class
        tn: Pairs of another class predicted as another class
    """

    tp: int
    fp: int
    fn: int
    tn: int

    @property
    def precision(self) -> float:
        return _ratio(self.tp, self.tp + self.fp)

    @property
    def recall(self) -> float:
        return _ratio(self.tp, self.tp + self.fn)

    @property
    def accuracy(self) -> float:
        return _ratio(self.tp + self.tn, self.tp + self.tn + self.fp + self.fn)

    @property
    def f1(self) -> float:
        precision = self.precision
        recall = self.recall
        return _ratio(2 * precision * recall, precision + recall)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON/CSV export."""
        return {
            "TP": self.tp,
            "FP": self.fp,
            "FN": self.fn,
            "TN": self.tn,
            "precision": round(self.precision, 4),
            "recall": round(self.recall, 4),
            "accuracy": round(self.accuracy, 4),
            "f1": round(self.f1, 4),
        }


class MultiClassConfusionMatrix:
    """Confusion matrix over clone types. Rows are ground truth, columns are predictions."""

    def __init__(self, classes: Sequence[CloneType] | None = None) -> None:
        """Initialize an empty matrix.

        Args:
            classes: Classes with a row and column (default: all clone types)
        """
        self.classes: list[CloneType] = list(classes) if classes is not None else list(CloneType)
        self.matrix = np.zeros((len(self.classes), len(self.classes)), dtype=np.int64)

    @classmethod
    def from_predictions(
        cls,
        truth: Iterable[CloneType],
        predicted: Iterable[CloneType],
        classes: Sequence[CloneType] | None = None,
    ) -> "MultiClassConfusionMatrix":
        """Build a matrix from parallel sequences of ground truth and predictions."""
        result = cls(classes)
        labels = [c.value for c in result.classes]
        y_true = [c.value for c in truth]
        y_pred = [c.value for c in predicted]
        if y_true:
            result.matrix = confusion_matrix(y_true, y_pred, labels=labels).astype(np.int64)
        return result

    @property
    def total(self) -> int:
        return int(self.matrix.sum())

    def binary_matrix(self, cls: CloneType) -> BinaryConfusionMatrix:
        """Project the matrix to one-vs-rest counts for the given class."""
        k = self.classes.index(cls)
        tp = int(self.matrix[k, k])
        fn = int(self.matrix[k, :].sum()) - tp
        fp = int(self.matrix[:, k].sum()) - tp
        tn = self.total - tp - fn - fp
        return BinaryConfusionMatrix(tp=tp, fp=fp, fn=fn, tn=tn)

    def to_dataframe(self) -> pd.DataFrame:
        """Labelled copy of the matrix (index: truth, columns: predicted)."""
        labels = [c.value for c in self.classes]
        return pd.DataFrame(
            self.matrix.copy(),
            index=pd.Index(labels, name="truth"),
            columns=pd.Index(labels, name="predicted"),
        )

    def metrics_dataframe(self) -> pd.DataFrame:
        """Per-class TP/FP/FN/TN and metrics, one row per class."""
        rows = []
        for cls in self.classes:
            row = {"class": cls.value}
            row.update(self.binary_matrix(cls).to_dict())
            rows.append(row)
        return pd.DataFrame(rows)
