"""Configuration validation utilities."""

import re
from dataclasses import dataclass, fields
from typing import Any

from .defaults import ClassifierParams, ReportParams, SpanParams

SUPPORTED_FORMATS = ("yaml", "json")

_SECTIONS = {
    "classifier": ClassifierParams,
    "span": SpanParams,
    "report": ReportParams,
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_classifier_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate classifier parameters."""
        errors = []

        for name in ("price_pattern", "sell_pattern", "buy_pattern"):
            if name not in params:
                continue
            value = params[name]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field=f"classifier.{name}",
                    message="Must be a non-empty regular expression string",
                    value=value
                ))
                continue
            try:
                re.compile(value)
            except re.error as e:
                errors.append(ValidationError(
                    field=f"classifier.{name}",
                    message=f"Invalid regular expression: {e}",
                    value=value
                ))

        if "thousands_multiplier" in params:
            value = params["thousands_multiplier"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="classifier.thousands_multiplier",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_span_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate span parameters."""
        errors = []

        if "days_per_month" in params:
            value = params["days_per_month"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="span.days_per_month",
                    message="Must be a positive number",
                    value=value
                ))

        for name in ("display_month_days",):
            if name in params:
                value = params[name]
                if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                    errors.append(ValidationError(
                        field=f"span.{name}",
                        message="Must be a positive integer",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_report_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate report parameters."""
        errors = []

        if "format" in params and params["format"] not in SUPPORTED_FORMATS:
            errors.append(ValidationError(
                field="report.format",
                message=f"Must be one of {', '.join(SUPPORTED_FORMATS)}",
                value=params["format"]
            ))

        for name in ("percent_decimals", "rate_decimals", "span_decimals"):
            if name in params:
                value = params[name]
                if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                    errors.append(ValidationError(
                        field=f"report.{name}",
                        message="Must be a non-negative integer",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate a complete merged configuration."""
        errors = []

        for section, value in config.items():
            if section not in _SECTIONS:
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

            known = {f.name for f in fields(_SECTIONS[section])}
            for key in value:
                if key not in known:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown configuration key",
                        value=value[key]
                    ))

        if isinstance(config.get("classifier"), dict):
            errors.extend(ConfigValidator.validate_classifier_params(config["classifier"]))
        if isinstance(config.get("span"), dict):
            errors.extend(ConfigValidator.validate_span_params(config["span"]))
        if isinstance(config.get("report"), dict):
            errors.extend(ConfigValidator.validate_report_params(config["report"]))

        return errors
