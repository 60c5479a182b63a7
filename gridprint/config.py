"""
Configuration — Centralized output settings

Config hierarchy (highest to lowest priority):
  1. Environment variables (GRIDPRINT_OUTPUT, GRIDPRINT_COLOR, ...)
  2. Project config (.gridprint/config.yaml)
  3. User config (~/.gridprint/config.yaml)
  4. Defaults

Command-line flags override the loaded configuration (see cli.py).
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

import yaml

from .errors import ConfigError
from .output import VALID_FORMATS
from .presentation.colors import COLOR_MODES, resolve_color
from .presentation.formatters import DEFAULT_MAX_ITEMS, FormatContext


logger = logging.getLogger(__name__)

# Environment overrides: variable -> setting in the "output" section
ENV_OVERRIDES = {
    "GRIDPRINT_OUTPUT": "format",
    "GRIDPRINT_COLOR": "color",
    "GRIDPRINT_COMPACT": "compact",
    "GRIDPRINT_MAX_ITEMS": "max_items",
}

TRUE_VALUES = ("true", "1", "yes", "on")


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUE_VALUES


def _to_int(value: Any, setting: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"Invalid {setting} '{value}'. Must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid {setting} '{value}'. Must be an integer") from e


@dataclass
class OutputConfig:
    """Output preferences."""
    format: str = "table"             # "table" | "json"
    color: str = "auto"               # "auto" | "always" | "never"
    compact: bool = False             # single-line JSON
    max_items: int = DEFAULT_MAX_ITEMS  # truncation threshold inside cells

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        if self.format not in VALID_FORMATS:
            return f"Unknown format '{self.format}'. Valid: {', '.join(VALID_FORMATS)}"
        if self.color not in COLOR_MODES:
            return f"Unknown color mode '{self.color}'. Valid: {', '.join(COLOR_MODES)}"
        if self.max_items < 1:
            return f"Invalid max_items '{self.max_items}'. Must be at least 1"
        return None

    def format_context(self, stream: Optional[TextIO] = None) -> FormatContext:
        """Build the FormatContext for output written to stream."""
        return FormatContext(
            color=resolve_color(self.color, stream),
            max_items=self.max_items,
        )


@dataclass
class Config:
    """Application configuration."""
    output: OutputConfig = field(default_factory=OutputConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "output": {
                "format": self.output.format,
                "color": self.output.color,
                "compact": self.output.compact,
                "max_items": self.output.max_items,
            }
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """
        Create from dictionary.

        Raises:
            ConfigError: If max_items is not an integer
        """
        output_data = data.get("output") or {}

        return cls(
            output=OutputConfig(
                format=str(output_data.get("format", "table")),
                color=str(output_data.get("color", "auto")),
                compact=_to_bool(output_data.get("compact", False)),
                max_items=_to_int(output_data.get("max_items", DEFAULT_MAX_ITEMS), "max_items"),
            )
        )


class ConfigManager:
    """
    Manages configuration loading and persistence.

    Hierarchy:
      1. Environment variables
      2. Project config (.gridprint/config.yaml)
      3. User config (~/.gridprint/config.yaml)
      4. Defaults
    """

    USER_CONFIG_DIR = Path.home() / ".gridprint"
    PROJECT_CONFIG_DIR = ".gridprint"
    CONFIG_FILE = "config.yaml"

    def __init__(self, project_dir: Optional[Path] = None, user_dir: Optional[Path] = None):
        self.project_dir = Path(project_dir) if project_dir else Path.cwd()
        self.user_dir = Path(user_dir) if user_dir else self.USER_CONFIG_DIR
        self._config: Optional[Config] = None

    @property
    def project_config_path(self) -> Path:
        return self.project_dir / self.PROJECT_CONFIG_DIR / self.CONFIG_FILE

    @property
    def user_config_path(self) -> Path:
        return self.user_dir / self.CONFIG_FILE

    def load(self) -> Config:
        """
        Load configuration from all sources.

        Raises:
            ConfigError: If the merged configuration is invalid
        """
        if self._config is not None:
            return self._config

        # Start with defaults
        config_data: Dict[str, Any] = {}

        # Layer 1: User config, Layer 2: Project config (higher priority)
        for path in (self.user_config_path, self.project_config_path):
            file_data = self._read(path)
            if file_data:
                config_data = self._merge(config_data, file_data)

        # Layer 3: Environment overrides
        overrides = {
            setting: os.environ[env_var]
            for env_var, setting in ENV_OVERRIDES.items()
            if os.environ.get(env_var)
        }
        if overrides:
            config_data = self._merge(config_data, {"output": overrides})

        config = Config.from_dict(config_data)
        error = config.output.validate()
        if error:
            raise ConfigError(error)

        self._config = config
        return self._config

    def _read(self, path: Path) -> Dict[str, Any]:
        """Read one YAML config file; malformed files are skipped."""
        if not path.exists():
            return {}
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Ignoring unreadable config %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring config %s: expected a mapping", path)
            return {}
        output = data.get("output")
        if output is not None and not isinstance(output, dict):
            logger.warning("Ignoring config %s: output section must be a mapping", path)
            return {}
        return data

    def save_project(self, config: Config):
        """Save configuration to project config file."""
        self._save(self.project_config_path, config)

    def save_user(self, config: Config):
        """Save configuration to user config file."""
        self._save(self.user_config_path, config)

    def _save(self, path: Path, config: Config):
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False)
        self._config = config

    def set(self, key: str, value: str, scope: str = "project") -> Optional[str]:
        """
        Set a configuration value.

        Args:
            key: Dot-separated key (e.g., "output.format")
            value: Value to set
            scope: "project" or "user"

        Returns:
            Error message or None if successful
        """
        parts = key.split(".")
        if len(parts) != 2:
            return f"Invalid key format: {key}. Use 'section.setting' (e.g., 'output.format')"

        section, setting = parts
        if section != "output":
            return f"Unknown section: {section}. Valid: output"

        try:
            config = self.load()
        except ConfigError as e:
            return str(e)

        if setting == "format":
            config.output.format = value
        elif setting == "color":
            config.output.color = value
        elif setting == "compact":
            config.output.compact = _to_bool(value)
        elif setting == "max_items":
            try:
                config.output.max_items = _to_int(value, "max_items")
            except ConfigError as e:
                return str(e)
        else:
            return f"Unknown output setting: {setting}. Valid: format, color, compact, max_items"

        error = config.output.validate()
        if error:
            # Drop the rejected value from the cached config
            self._config = None
            return error

        if scope == "project":
            self.save_project(config)
        else:
            self.save_user(config)

        return None

    def get(self, key: str) -> Optional[str]:
        """Get a configuration value."""
        config = self.load()

        parts = key.split(".")
        if len(parts) != 2 or parts[0] != "output":
            return None

        setting = parts[1]
        if setting == "format":
            return config.output.format
        elif setting == "color":
            return config.output.color
        elif setting == "compact":
            return str(config.output.compact).lower()
        elif setting == "max_items":
            return str(config.output.max_items)

        return None

    def _merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dicts, override wins."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value
        return result

    def display(self) -> str:
        """Format config for display."""
        config = self.load()

        lines = [
            "Configuration:",
            "",
            "Output:",
            f"  Format: {config.output.format}",
            f"  Color: {config.output.color}",
            f"  Compact: {str(config.output.compact).lower()}",
            f"  Max items: {config.output.max_items}",
            "",
            "Config files:",
            f"  User: {self.user_config_path}",
            f"  Project: {self.project_config_path}",
        ]

        return "\n".join(lines)


# Convenience function
def get_config(project_dir: Optional[Path] = None) -> Config:
    """Load configuration for a project."""
    return ConfigManager(project_dir).load()
