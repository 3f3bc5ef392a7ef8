"""Configuration management for clone-classifier."""

from pathlib import Path
from typing import Literal
import json

from pydantic import BaseModel, Field

MatcherName = Literal["line", "token", "tree_preorder", "tree_postorder"]
AlgorithmName = Literal["lcs", "naive"]


class MatchingConfig(BaseModel):
    """Configuration for matching and classifying a pair of methods."""

    matcher: MatcherName = Field(default="line", description="Comparison unit strategy")
    algorithm: AlgorithmName = Field(default="lcs", description="Sequence alignment algorithm")
    min_size: int = Field(default=0, ge=0, description="Minimum clone segment size (0 disables)")
    min_density: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="Minimum fraction of Type-1/Type-2 units in the segment (0 disables)",
    )
    braces_preprocessing: bool = Field(
        default=False, description="Drop brace-only lines before alignment"
    )
    braces_postprocessing: bool = Field(
        default=True, description="Unmatch closing braces outside matched statements"
    )
    ignore_case: bool = Field(default=False, description="Compare token text case-insensitively")
    ignored_tokens: list[str] = Field(
        default_factory=lambda: ["final"],
        description="Tokens removed before comparing two lines",
    )

    def with_overrides(self, **overrides) -> "MatchingConfig":
        """Return a validated copy with every non-None override applied."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        return MatchingConfig(**{**self.model_dump(), **updates})


class EvaluationConfig(BaseModel):
    """Configuration for dataset evaluation runs."""

    limit: int | None = Field(default=None, ge=0, description="Evaluate only the first N pairs")
    show_progress: bool = Field(default=False, description="Show a progress bar")
    output_dir: Path = Field(default=Path("./output"), description="Default output directory")


class Config(BaseModel):
    """Main configuration for clone-classifier."""

    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    evaluation: EvaluationConfig = Field(default_factory=EvaluationConfig)

    @classmethod
    def load_from_file(cls, config_path: Path) -> "Config":
        """Load configuration from a JSON file."""
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            data = json.load(f)

        return cls(**data)

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a JSON file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            json.dump(self.model_dump(), f, indent=2, default=str)

    @classmethod
    def get_default(cls) -> "Config":
        """Get default configuration."""
        return cls()


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file or return default.

    Args:
        config_path: Path to configuration file. If None, the default
            locations are searched before falling back to defaults.

    Returns:
        Config object
    """
    if config_path is None:
        default_locations = [
            Path.home() / ".config" / "clone-classifier" / "config.json",
            Path.cwd() / "clone-classifier.json",
        ]

        for location in default_locations:
            if location.exists():
                return Config.load_from_file(location)

        return Config.get_default()

    return Config.load_from_file(config_path)
