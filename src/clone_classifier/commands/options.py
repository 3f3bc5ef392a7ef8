"""Click options shared by the matching commands."""

from pathlib import Path
from typing import Callable

import click

from clone_classifier.analysis.alignment import ALGORITHMS
from clone_classifier.analysis.matching import MatcherKind
from clone_classifier.core.config import Config, MatchingConfig

MATCHER_CHOICES = [kind.value for kind in MatcherKind]
ALGORITHM_CHOICES = list(ALGORITHMS)


def matching_options(func: Callable) -> Callable:
    """Add --config, --matcher, --algorithm, --min-size and --min-density."""
    options = [
        click.option(
            "--config",
            "config_path",
            type=click.Path(path_type=Path, exists=True, dir_okay=False),
            default=None,
            help="JSON configuration file (default: search standard locations)",
        ),
        click.option(
            "--matcher",
            "-m",
            type=click.Choice(MATCHER_CHOICES),
            default=None,
            help="Comparison unit strategy (default: line)",
        ),
        click.option(
            "--algorithm",
            "-a",
            type=click.Choice(ALGORITHM_CHOICES),
            default=None,
            help="Sequence alignment algorithm (default: lcs)",
        ),
        click.option(
            "--min-size",
            type=click.IntRange(min=0),
            default=None,
            help="Minimum clone segment size, 0 disables (default: 0)",
        ),
        click.option(
            "--min-density",
            type=click.FloatRange(0.0, 1.0),
            default=None,
            help="Minimum Type-1/Type-2 share of the segment, 0 disables (default: 0.0)",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def resolve_matching_config(
    config: Config,
    matcher: str | None,
    algorithm: str | None,
    min_size: int | None,
    min_density: float | None,
) -> MatchingConfig:
    """Apply command-line overrides to the matching section of a loaded configuration."""
    return config.matching.with_overrides(
        matcher=matcher,
        algorithm=algorithm,
        min_size=min_size,
        min_density=min_density,
    )
