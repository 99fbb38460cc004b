"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from ..data.parsers import PARSERS
from .defaults import (
    CompaniesParams,
    DatasetParams,
    HierarchyParams,
    SelectionParams,
    SourceParams,
)

_KNOWN_FIELDS = {
    "stocks": {f.name for f in fields(DatasetParams)},
    "crypto": {f.name for f in fields(DatasetParams)},
    "companies": {f.name for f in fields(CompaniesParams)},
    "selection": {f.name for f in fields(SelectionParams)},
    "sources": {f.name for f in fields(SourceParams)},
    "hierarchy": {f.name for f in fields(HierarchyParams)},
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_selection_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate selection bounds."""
        errors = []

        for name in ("pos_n", "neg_n", "liquidity_n"):
            if name in params:
                value = params[name]
                # bool is an int subclass
                if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-negative integer",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_dataset_params(params: dict[str, Any], prefix: str = "") -> list[ValidationError]:
        """Validate a dataset column mapping."""
        errors = []

        for name in ("identifier_field", "value_field", "magnitude_field"):
            if name in params and not _is_non_empty_str(params[name]):
                errors.append(ValidationError(
                    field=f"{prefix}{name}",
                    message="Must be a non-empty string",
                    value=params[name]
                ))

        for name in ("value_parser", "magnitude_parser"):
            if name in params and params[name] not in PARSERS:
                errors.append(ValidationError(
                    field=f"{prefix}{name}",
                    message=f"Must be one of {sorted(PARSERS)}",
                    value=params[name]
                ))

        if "label_field" in params:
            value = params["label_field"]
            if value is not None and not _is_non_empty_str(value):
                errors.append(ValidationError(
                    field=f"{prefix}label_field",
                    message="Must be a non-empty string or null",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_source_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate data source settings."""
        errors = []

        if "delimiter" in params:
            value = params["delimiter"]
            if not isinstance(value, str) or len(value) != 1:
                errors.append(ValidationError(
                    field="delimiter",
                    message="Must be a single character",
                    value=value
                ))

        for name in ("stocks_path", "crypto_path"):
            if name in params and not _is_non_empty_str(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a non-empty path",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_hierarchy_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate hierarchy shaping parameters."""
        errors = []

        for name in ("root_name", "unknown_sector"):
            if name in params and not _is_non_empty_str(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a non-empty string",
                    value=params[name]
                ))

        if "group_stocks_by_sector" in params:
            value = params["group_stocks_by_sector"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="group_stocks_by_sector",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete merged configuration."""
        errors = []

        for section, value in config.items():
            if section not in _KNOWN_FIELDS:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=value
                ))
                continue
            if not isinstance(value, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=value
                ))
                continue
            for key in value:
                if key not in _KNOWN_FIELDS[section]:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown configuration field",
                        value=value[key]
                    ))

        def section(name: str) -> dict[str, Any]:
            value = config.get(name, {})
            return value if isinstance(value, dict) else {}

        errors.extend(ConfigValidator.validate_dataset_params(section("stocks"), prefix="stocks."))
        errors.extend(ConfigValidator.validate_dataset_params(section("crypto"), prefix="crypto."))
        errors.extend(ConfigValidator.validate_selection_params(section("selection")))
        errors.extend(ConfigValidator.validate_source_params(section("sources")))
        errors.extend(ConfigValidator.validate_hierarchy_params(section("hierarchy")))

        return errors
