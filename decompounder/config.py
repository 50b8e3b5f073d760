"""Configuration management for the decompounding engine."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator


class ConfigurationError(ValueError):
    """Raised when the engine is constructed with invalid settings."""


DEFAULT_CONNECTORS = ["", "s", "es", "e", "n", "en"]

# (suffix, replacement) rewrites tried in order on trailing fragments
DEFAULT_SUFFIX_RULES = [
    ("en", ""),
    ("et", "en"),
    ("es", ""),
    ("n", ""),
    ("s", ""),
]


class DictionaryConfig(BaseModel):
    """Configuration for the morpheme dictionary."""

    path: Optional[Path] = None
    words: list[str] = Field(default_factory=list)
    ignore_case: bool = False

    @field_validator("path", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v


class DecompoundConfig(BaseModel):
    """Configuration for segmentation and output."""

    min_subword_length: int = Field(default=2, ge=1)
    connectors: list[str] = Field(default_factory=lambda: list(DEFAULT_CONNECTORS))
    suffix_rules: list[tuple[str, str]] = Field(
        default_factory=lambda: list(DEFAULT_SUFFIX_RULES)
    )
    subwords_only: bool = Field(
        default=False, description="Drop the original token when it decomposes"
    )


class KeywordConfig(BaseModel):
    """Configuration for tokens protected from decompounding."""

    words: list[str] = Field(default_factory=list)
    path: Optional[Path] = None
    respect_keywords: bool = False

    @field_validator("path", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v


class AnalyzerProfile(BaseModel):
    """Named override of the filter flags."""

    respect_keywords: Optional[bool] = None
    subwords_only: Optional[bool] = None


class OutputConfig(BaseModel):
    """Configuration for output options."""

    output_path: Path = Path("data/decompounded/tokens.csv")
    encoding: str = "utf-8"


class Config(BaseModel):
    """Main configuration for the decompounding pipeline."""

    input_file: Optional[Path] = None
    dictionary: DictionaryConfig = Field(default_factory=DictionaryConfig)
    decompound: DecompoundConfig = Field(default_factory=DecompoundConfig)
    keywords: KeywordConfig = Field(default_factory=KeywordConfig)
    analyzers: dict[str, AnalyzerProfile] = Field(default_factory=dict)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("input_file", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v

    def resolve_analyzer(self, name: Optional[str]) -> "Config":
        """Return a copy with the named analyzer profile applied.

        Raises:
            ConfigurationError: If the profile does not exist
        """
        if name is None:
            return self
        if name not in self.analyzers:
            raise ConfigurationError(
                f"Unknown analyzer '{name}'. Available: {sorted(self.analyzers)}"
            )
        profile = self.analyzers[name]
        resolved = self.model_copy(deep=True)
        if profile.respect_keywords is not None:
            resolved.keywords.respect_keywords = profile.respect_keywords
        if profile.subwords_only is not None:
            resolved.decompound.subwords_only = profile.subwords_only
        return resolved

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file.

        Relative paths (input file, dictionary, keywords and output) are
        resolved against the directory holding the YAML file.

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigurationError: If the file is not valid YAML or not a mapping
        """
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Expected a mapping at the top of {path}")
        config = cls(**data)
        base_dir = path.parent
        config.input_file = _resolve_against(base_dir, config.input_file)
        config.dictionary.path = _resolve_against(base_dir, config.dictionary.path)
        config.keywords.path = _resolve_against(base_dir, config.keywords.path)
        config.output.output_path = _resolve_against(base_dir, config.output.output_path)
        return config

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file.

        Paths are written as absolute paths so the file loads back to the
        same locations wherever it is saved.
        """
        saved = self.model_copy(deep=True)
        saved.input_file = _absolute(saved.input_file)
        saved.dictionary.path = _absolute(saved.dictionary.path)
        saved.keywords.path = _absolute(saved.keywords.path)
        saved.output.output_path = _absolute(saved.output.output_path)
        data = saved.model_dump(mode="json")
        # Tuples come back as lists, which yaml.safe_load reads back fine
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True)


def _resolve_against(base_dir: Path, path: Optional[Path]) -> Optional[Path]:
    if path is None or path.is_absolute():
        return path
    return base_dir / path


def _absolute(path: Optional[Path]) -> Optional[Path]:
    return None if path is None else path.resolve()
