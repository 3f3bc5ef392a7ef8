"""Presentation layer for matchings and evaluation results.

This module is the display side of the matching engine: it pulls the
rendered units of a matching and colours them by clone type, and prints
evaluation results as Rich tables.
"""

from itertools import zip_longest
import math

from rich.console import Console
from rich.table import Table
from rich.text import Text

from clone_classifier.analysis.clone_type import CloneType
from clone_classifier.analysis.evaluation import EvaluationResult, MultiClassConfusionMatrix
from clone_classifier.analysis.matching import MethodMatching

# Type-1 is green, Type-2 is yellow, Type-3 is pink, unmatched is neutral
CLONE_TYPE_STYLES: dict[CloneType | None, str] = {
    CloneType.TYPE_1: "green",
    CloneType.TYPE_2: "yellow",
    CloneType.TYPE_3: "magenta",
    CloneType.FP: "",
    None: "",
}


def style_for(clone_type: CloneType | None) -> str:
    return CLONE_TYPE_STYLES.get(clone_type, "")


def _styled(text: str, clone_type: CloneType | None) -> Text:
    return Text(text, style=style_for(clone_type))


def display_matching(
    matching: MethodMatching,
    console: Console,
    title_1: str = "Method 1",
    title_2: str = "Method 2",
) -> None:
    """Print both methods side by side, each unit coloured by how it was matched."""
    table = Table(title=f"Matched units ({type(matching).__name__})", show_lines=False)
    table.add_column(title_1, overflow="fold")
    table.add_column(title_2, overflow="fold")

    for left, right in zip_longest(matching.render(1), matching.render(2)):
        table.add_row(
            _styled(*left) if left else Text(""),
            _styled(*right) if right else Text(""),
        )

    console.print(table)

    legend = Text()
    legend.append("Type-1", style=style_for(CloneType.TYPE_1))
    legend.append("  ")
    legend.append("Type-2", style=style_for(CloneType.TYPE_2))
    legend.append("  ")
    legend.append("Type-3", style=style_for(CloneType.TYPE_3))
    legend.append("  unmatched")
    console.print(legend)


def _format_metric(value: float) -> str:
    return "n/a" if math.isnan(value) else f"{value:.4f}"


def display_confusion_matrix(matrix: MultiClassConfusionMatrix, console: Console) -> None:
    """Print the confusion matrix (rows: truth, columns: predicted)."""
    table = Table(title="Confusion Matrix (rows: truth, columns: predicted)")
    df = matrix.to_dataframe()
    table.add_column("Truth", style="cyan")
    for label in df.columns:
        table.add_column(label, justify="right")

    for label, row in df.iterrows():
        table.add_row(label, *(str(int(count)) for count in row))

    console.print(table)


def display_class_metrics(matrix: MultiClassConfusionMatrix, console: Console) -> None:
    """Print one-vs-rest metrics for every clone type."""
    table = Table(title="Per-Class Metrics")
    table.add_column("Class", style="cyan")
    for name in ("TP", "FP", "FN", "TN"):
        table.add_column(name, justify="right")
    for name in ("Precision", "Recall", "Accuracy", "F1"):
        table.add_column(name, style="green", justify="right")

    for cls in matrix.classes:
        binary = matrix.binary_matrix(cls)
        table.add_row(
            cls.value,
            str(binary.tp),
            str(binary.fp),
            str(binary.fn),
            str(binary.tn),
            _format_metric(binary.precision),
            _format_metric(binary.recall),
            _format_metric(binary.accuracy),
            _format_metric(binary.f1),
        )

    console.print(table)


def display_evaluation(result: EvaluationResult, console: Console) -> None:
    """Print the summary, confusion matrix and per-class metrics of an evaluation."""
    summary = Table(title="Evaluation Summary")
    summary.add_column("Metric", style="cyan")
    summary.add_column("Value", style="green", justify="right")

    summary.add_row("Classified pairs", str(result.classified_pairs))
    summary.add_row("Correct", str(len(result.correct_pairs)))
    summary.add_row("Misclassified", str(len(result.misclassified_pairs)))
    summary.add_row("Errored", str(result.errored_pairs))
    if result.classified_pairs > 0:
        overall = len(result.correct_pairs) / result.classified_pairs * 100
        summary.add_row("Overall accuracy", f"{overall:.1f}%")

    console.print(summary)
    display_confusion_matrix(result.confusion_matrix, console)
    display_class_metrics(result.confusion_matrix, console)
