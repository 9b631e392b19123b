# Black/white list: configuration
# Override the preset catalog and log level via config.yaml.

import logging
import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from .errors import ConfigError

CONFIG_PATH = Path(__file__).parent / "config.yaml"

DEFAULT_LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


@dataclass
class Config:
    """Runtime configuration for a list session."""

    # Preset catalog (None = bundled presets.yaml)
    presets_path: Optional[str] = None

    # Logging
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT

    def validate(self):
        """Check value types after loading from YAML."""
        if self.presets_path is not None and not isinstance(self.presets_path, str):
            raise ConfigError(f"presets_path must be a string, got {self.presets_path!r}")
        if not isinstance(self.log_level, str) or not isinstance(
            logging.getLevelName(self.log_level.upper()), int
        ):
            raise ConfigError(f"Unknown log_level: {self.log_level!r}")
        if not isinstance(self.log_format, str):
            raise ConfigError(f"log_format must be a string, got {self.log_format!r}")

    def resolve_paths(self):
        """Expand ~ in the preset catalog path."""
        if self.presets_path:
            self.presets_path = str(Path(self.presets_path).expanduser())

    @classmethod
    def load(cls, path: Optional[str] = None) -> "Config":
        """Load config from YAML file, falling back to defaults."""
        cfg_path = Path(path) if path else CONFIG_PATH
        known = {f.name for f in fields(cls)}
        if cfg_path.exists():
            try:
                with open(cfg_path, "r") as f:
                    data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError):
                data = {}
            if not isinstance(data, dict):
                data = {}
            cfg = cls(**{k: v for k, v in data.items() if k in known})
        else:
            cfg = cls()
        cfg.validate()
        cfg.resolve_paths()
        return cfg


def configure_logging(config: Config) -> None:
    """Send log records to stdout at the configured level."""
    logging.basicConfig(
        level=config.log_level.upper(),
        format=config.log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
