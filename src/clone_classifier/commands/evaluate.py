"""Evaluate a matcher on a dataset of manually classified clone pairs."""

from pathlib import Path

import click
from rich.console import Console

from clone_classifier.analysis.dataset import load_dataset
from clone_classifier.analysis.evaluation import evaluate_pairs
from clone_classifier.analysis.match_presenter import display_evaluation
from clone_classifier.analysis.matching import make_matcher
from clone_classifier.commands.options import matching_options, resolve_matching_config
from clone_classifier.core.config import load_config
from clone_classifier.error.cmd import handle_command_errors

console = Console()


def print_success(message: str, output_path: Path) -> None:
    """Print success message with output path."""
    console.print(f"[green]✓[/green] {message}: {output_path}", highlight=False)


@click.command()
@click.argument("dataset", type=click.Path(path_type=Path, exists=True, dir_okay=False))
@click.option(
    "--limit",
    "-n",
    type=click.IntRange(min=0),
    default=None,
    help="Evaluate only the first N pairs (default: all)",
)
@click.option("--progress", is_flag=True, help="Show a progress bar")
@click.option(
    "--misclassified-csv",
    type=click.Path(path_type=Path, file_okay=True, dir_okay=False),
    default=None,
    help="Write misclassified pairs to this CSV file",
)
@click.option(
    "--metrics-csv",
    type=click.Path(path_type=Path, file_okay=True, dir_okay=False),
    default=None,
    help="Write per-class metrics to this CSV file",
)
@click.option(
    "--matrix-csv",
    type=click.Path(path_type=Path, file_okay=True, dir_okay=False),
    default=None,
    help="Write the confusion matrix (rows: truth, columns: predicted) to this CSV file",
)
@matching_options
@handle_command_errors
def evaluate(
    dataset: Path,
    limit: int | None,
    progress: bool,
    misclassified_csv: Path | None,
    metrics_csv: Path | None,
    matrix_csv: Path | None,
    config_path: Path | None,
    matcher: str | None,
    algorithm: str | None,
    min_size: int | None,
    min_density: float | None,
):
    """Evaluate clone type classification against manual labels."""
    config = load_config(config_path)
    matching_config = resolve_matching_config(config, matcher, algorithm, min_size, min_density)
    evaluation_config = config.evaluation

    pairs = load_dataset(dataset)
    console.print(
        f"[bold blue]Evaluating[/bold blue] {matching_config.matcher} matcher "
        f"({matching_config.algorithm}) on {len(pairs)} pairs",
        highlight=False,
    )

    result = evaluate_pairs(
        pairs,
        make_matcher(matching_config),
        limit=limit if limit is not None else evaluation_config.limit,
        show_progress=progress or evaluation_config.show_progress,
    )

    display_evaluation(result, console)

    if misclassified_csv is not None:
        misclassified_csv.parent.mkdir(parents=True, exist_ok=True)
        result.misclassified_dataframe().to_csv(misclassified_csv, index=False)
        print_success("Misclassified pairs saved", misclassified_csv)

    if metrics_csv is not None:
        metrics_csv.parent.mkdir(parents=True, exist_ok=True)
        result.confusion_matrix.metrics_dataframe().to_csv(metrics_csv, index=False)
        print_success("Per-class metrics saved", metrics_csv)

    if matrix_csv is not None:
        matrix_csv.parent.mkdir(parents=True, exist_ok=True)
        result.confusion_matrix.to_dataframe().to_csv(matrix_csv)
        print_success("Confusion matrix saved", matrix_csv)
