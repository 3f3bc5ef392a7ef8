"""Classify a single clone pair of a dataset."""

from pathlib import Path

import click
from rich.console import Console

from clone_classifier.analysis.dataset import load_dataset
from clone_classifier.analysis.match_presenter import display_matching
from clone_classifier.analysis.matching import make_matcher
from clone_classifier.commands.options import matching_options, resolve_matching_config
from clone_classifier.core.config import load_config
from clone_classifier.error.cmd import handle_command_errors

console = Console()


@click.command()
@click.argument("dataset", type=click.Path(path_type=Path, exists=True, dir_okay=False))
@click.option(
    "--pair-index",
    "-i",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Index of the clone pair in the dataset",
)
@click.option("--show-units", is_flag=True, help="Show both methods with matched units coloured")
@matching_options
@handle_command_errors
def classify(
    dataset: Path,
    pair_index: int,
    show_units: bool,
    config_path: Path | None,
    matcher: str | None,
    algorithm: str | None,
    min_size: int | None,
    min_density: float | None,
):
    """Classify one clone pair as Type-1, Type-2, Type-3 or FP."""
    config = resolve_matching_config(
        load_config(config_path), matcher, algorithm, min_size, min_density
    )
    pairs = load_dataset(dataset)

    if pair_index >= len(pairs):
        raise ValueError(f"Pair index {pair_index} out of range (dataset has {len(pairs)} pairs)")

    pair = pairs[pair_index]
    matching = make_matcher(config)(pair.method_1, pair.method_2)
    predicted = matching.classify()

    console.print(f"[bold]Pair:[/bold] {pair.pair_id}", highlight=False)
    console.print(f"  Method 1: {pair.method_1}", highlight=False)
    console.print(f"  Method 2: {pair.method_2}", highlight=False)
    console.print(
        f"  Matcher: {config.matcher} ({config.algorithm}), "
        f"min_size={config.min_size}, min_density={config.min_density}",
        highlight=False,
    )

    if predicted is pair.truth:
        status = "[green]✓ correct[/green]"
    else:
        status = "[red]✗ misclassified[/red]"
    console.print(
        f"  Predicted: [bold]{predicted.value}[/bold]  Truth: {pair.truth.value}  {status}",
        highlight=False,
    )

    if show_units:
        display_matching(matching, console, str(pair.method_1), str(pair.method_2))
