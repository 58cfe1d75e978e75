"""Configuration management for the STR realigner."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict

import yaml

from .exceptions import ConfigurationError


@dataclass(frozen=True)
class ScoringConfig:
    """Smith-Waterman scoring scheme and read classification threshold."""

    match_score: int = 3
    mismatch_score: int = -1
    gap_score: int = -3
    match_perc_threshold: float = 0.9

    def __post_init__(self):
        """Validate scoring parameters after initialization."""
        if self.match_score <= 0:
            raise ConfigurationError(
                f"Invalid match_score: {self.match_score}", parameter="match_score"
            )
        if self.mismatch_score > 0:
            raise ConfigurationError(
                f"Invalid mismatch_score: {self.mismatch_score}", parameter="mismatch_score"
            )
        if self.gap_score > 0:
            raise ConfigurationError(
                f"Invalid gap_score: {self.gap_score}", parameter="gap_score"
            )
        if not 0 < self.match_perc_threshold <= 1:
            raise ConfigurationError(
                f"Invalid match_perc_threshold: {self.match_perc_threshold}",
                parameter="match_perc_threshold",
            )

    def perfect_score(self, read_length: int) -> int:
        """Score of a read matching its hypothesis base for base."""
        return read_length * self.match_score

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict) -> "ScoringConfig":
        """Create from dictionary."""
        try:
            return cls(**data)
        except TypeError as e:
            raise ConfigurationError(f"Invalid scoring parameters: {e}")

    @classmethod
    def from_yaml(cls, yaml_file: Path) -> "ScoringConfig":
        """Load scoring parameters from YAML file."""
        data = _load_yaml(yaml_file)
        return cls.from_dict(data.get('scoring', data))


@dataclass
class PipelineConfig:
    """Pipeline configuration settings."""

    loci_file: Path
    reads_file: Path
    output_dir: Path = Path("output")
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    threads: int = 1
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.loci_file = Path(self.loci_file)
        self.reads_file = Path(self.reads_file)
        self.output_dir = Path(self.output_dir)

        if isinstance(self.scoring, dict):
            self.scoring = ScoringConfig.from_dict(self.scoring)

        if not self.loci_file.exists():
            raise ConfigurationError(f"Loci file not found: {self.loci_file}")

        if not self.reads_file.exists():
            raise ConfigurationError(f"Reads file not found: {self.reads_file}")

        if self.threads <= 0:
            raise ConfigurationError(f"Invalid threads: {self.threads}")

    @classmethod
    def from_yaml(cls, yaml_file: Path) -> "PipelineConfig":
        """Load configuration from YAML file."""
        data = _load_yaml(yaml_file)

        try:
            return cls(**data)
        except TypeError as e:
            raise ConfigurationError(f"Invalid config parameters: {e}", config_file=str(yaml_file))

    @classmethod
    def from_args(cls, args: dict) -> "PipelineConfig":
        """Create configuration from command-line arguments."""
        # Map command-line argument names to config field names
        arg_mapping = {
            'loci': 'loci_file',
            'reads': 'reads_file',
            'output': 'output_dir',
            'threads': 'threads',
            'log_level': 'log_level',
        }
        scoring_mapping = {
            'match_score': 'match_score',
            'mismatch_score': 'mismatch_score',
            'gap_score': 'gap_score',
            'match_perc_threshold': 'match_perc_threshold',
        }

        config_args = {}
        for arg_name, config_name in arg_mapping.items():
            if arg_name in args and args[arg_name] is not None:
                config_args[config_name] = args[arg_name]

        # Command-line scoring values override the YAML scoring file
        scoring_args = {}
        if args.get('config') is not None:
            scoring_args = ScoringConfig.from_yaml(args['config']).to_dict()
        for arg_name, config_name in scoring_mapping.items():
            if arg_name in args and args[arg_name] is not None:
                scoring_args[config_name] = args[arg_name]
        config_args['scoring'] = ScoringConfig.from_dict(scoring_args)

        return cls(**config_args)


def _load_yaml(yaml_file: Path) -> Dict:
    """Read a YAML mapping from disk."""
    yaml_file = Path(yaml_file)
    if not yaml_file.exists():
        raise ConfigurationError(f"Config file not found: {yaml_file}")

    try:
        with open(yaml_file, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML config: {e}", config_file=str(yaml_file))

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError("Config must be a mapping", config_file=str(yaml_file))
    return data
