"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_report_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate report parameters."""
        errors = []

        if "top_prizes_per_show" in params:
            value = params["top_prizes_per_show"]
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                errors.append(ValidationError(
                    field="top_prizes_per_show",
                    message="Must be a positive integer",
                    value=value
                ))

        if "no_data_label" in params:
            value = params["no_data_label"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="no_data_label",
                    message="Must be a non-empty string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in _LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(_LOG_LEVELS)}",
                    value=value
                ))

        for flag in ("format_json", "include_timestamp"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=flag,
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return errors

    @staticmethod
    def validate_gateway_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate gateway parameters."""
        errors = []

        if "data_file" in params:
            value = params["data_file"]
            if value is not None and not isinstance(value, str):
                errors.append(ValidationError(
                    field="data_file",
                    message="Must be a file path string or null",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "reports" in config:
            errors.extend(ConfigValidator.validate_report_params(config["reports"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        if "gateway" in config:
            errors.extend(ConfigValidator.validate_gateway_params(config["gateway"]))

        return errors
