"""Configuration loader with defaults < file < call-time precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    CompaniesParams,
    DatasetParams,
    DefaultConfig,
    HierarchyParams,
    SelectionParams,
    SourceParams,
    get_default_config,
)
from .validation import ConfigValidator

_SECTION_TYPES = {
    "stocks": DatasetParams,
    "crypto": DatasetParams,
    "companies": CompaniesParams,
    "selection": SelectionParams,
    "sources": SourceParams,
    "hierarchy": HierarchyParams,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_overrides(self) -> dict[str, Any]:
        """
        Load overrides from datasets.yaml, empty if the file is absent.

        Raises:
            ConfigurationError: If the file is not valid YAML or not a mapping
        """
        overrides_file = self.config_dir / "datasets.yaml"

        if not overrides_file.exists():
            return {}

        try:
            with open(overrides_file) as f:
                overrides = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {overrides_file}: {e}") from e

        if overrides is None:
            return {}
        if not isinstance(overrides, dict):
            raise ConfigurationError(
                f"{overrides_file} must contain a mapping of sections, got {type(overrides).__name__}"
            )

        return overrides

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Call-time overrides (highest priority)
        2. datasets.yaml in the config directory
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)
        config = self._deep_merge(config, self.load_file_overrides())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load_config(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """
        Merge, validate and rebuild the typed configuration.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        merged = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            details = "; ".join(f"{err.field}: {err.message} (got: {err.value!r})" for err in errors)
            raise ConfigurationError(f"Invalid configuration: {details}", errors=errors)

        return DefaultConfig(**{
            section: param_type(**merged[section])
            for section, param_type in _SECTION_TYPES.items()
        })

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
