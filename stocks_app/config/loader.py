"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    DefaultConfig,
    FetchParams,
    OutputParams,
    ReportParams,
    SignalParams,
    get_default_config,
)

CONFIG_FILENAME = "stocks.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_file: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_file: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_file is None:
            config_file = Path(__file__).parent.parent.parent / "config" / CONFIG_FILENAME

        return cls(
            config_file=Path(config_file),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from the YAML configuration file."""
        if not self.config_file.exists():
            return {}

        try:
            with open(self.config_file) as f:
                file_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in {self.config_file}: {e}",
                config_source=str(self.config_file)
            ) from e

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"Top level of {self.config_file} must be a mapping",
                config_source=str(self.config_file)
            )

        return file_config

    def merge_config(self, cli_overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Command line overrides (highest priority)
        2. YAML file overrides
        3. Global defaults (lowest priority)
        """
        # Start with global defaults
        config = self._dataclass_to_dict(self.defaults)

        # Apply file overrides
        config = self._deep_merge(config, self.load_file_config())

        # Apply command line overrides
        if cli_overrides:
            config = self._deep_merge(config, cli_overrides)

        return config

    def build_config(self, merged: dict[str, Any]) -> DefaultConfig:
        """Build a typed configuration from a merged (and validated) dict."""
        try:
            report = dict(merged.get("report", {}))
            if "symbols" in report:
                report["symbols"] = tuple(report["symbols"])

            return DefaultConfig(
                fetch=FetchParams(**merged.get("fetch", {})),
                signals=SignalParams(**merged.get("signals", {})),
                output=OutputParams(**merged.get("output", {})),
                report=ReportParams(**report),
            )
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"Malformed configuration: {e}",
                config_source=str(self.config_file)
            ) from e

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
