"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

SUPPORTED_FORMATS = ("csv", "json")
SUPPORTED_INTERVALS = ("1d", "5d", "1wk", "1mo")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_fetch_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate quote fetching parameters."""
        errors = []

        # Validate interval
        if "interval" in params:
            value = params["interval"]
            if value not in SUPPORTED_INTERVALS:
                errors.append(ValidationError(
                    field="interval",
                    message=f"Must be one of {', '.join(SUPPORTED_INTERVALS)}",
                    value=value
                ))

        # Validate price_column
        if "price_column" in params:
            value = params["price_column"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="price_column",
                    message="Must be a non-empty string",
                    value=value
                ))

        # Validate max_workers
        if "max_workers" in params:
            value = params["max_workers"]
            if not _is_int(value) or value <= 0:
                errors.append(ValidationError(
                    field="max_workers",
                    message="Must be a positive integer",
                    value=value
                ))

        # Validate timeout_seconds
        if "timeout_seconds" in params:
            value = params["timeout_seconds"]
            if not isinstance(value, (int, float)) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="timeout_seconds",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_signal_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate signal parameters."""
        errors = []

        # Windows of one element are rejected by the SMA itself
        if "sma_window" in params:
            value = params["sma_window"]
            if not _is_int(value) or value <= 1:
                errors.append(ValidationError(
                    field="sma_window",
                    message="Must be an integer greater than 1",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_output_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate output parameters."""
        errors = []

        if "format" in params:
            value = params["format"]
            if value not in SUPPORTED_FORMATS:
                errors.append(ValidationError(
                    field="format",
                    message=f"Must be one of {', '.join(SUPPORTED_FORMATS)}",
                    value=value
                ))

        if "include_header" in params:
            value = params["include_header"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="include_header",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_report_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate report scope parameters."""
        errors = []

        if "symbols" in params:
            value = params["symbols"]
            if (not isinstance(value, (list, tuple)) or not value
                    or not all(isinstance(s, str) and s.strip() for s in value)):
                errors.append(ValidationError(
                    field="symbols",
                    message="Must be a non-empty list of ticker symbols",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        section_validators = {
            "fetch": ConfigValidator.validate_fetch_params,
            "signals": ConfigValidator.validate_signal_params,
            "output": ConfigValidator.validate_output_params,
            "report": ConfigValidator.validate_report_params,
        }

        for section, validator in section_validators.items():
            if section not in config:
                continue

            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue

            errors.extend(validator(params))

        return errors
