"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import LoggingParams, TimingParams, TransitionParams

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

SECTIONS = {
    "timing": TimingParams,
    "transitions": TransitionParams,
    "logging": LoggingParams,
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_timing_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate tick loop timing parameters."""
        errors = []

        if "tick_interval_seconds" in params:
            value = params["tick_interval_seconds"]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                errors.append(ValidationError(
                    field="timing.tick_interval_seconds",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_transition_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate transition guard moduli."""
        errors = []

        for name in ("walking_to_jumping_modulus", "jumping_to_walking_modulus"):
            if name not in params:
                continue
            value = params[name]
            # bool is an int subclass but never a meaningful modulus
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                errors.append(ValidationError(
                    field=f"transitions.{name}",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="logging.format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate a complete merged configuration."""
        errors = []

        for section, value in config.items():
            if section not in SECTIONS:
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

            known = {f.name for f in fields(SECTIONS[section])}
            for key in value:
                if key not in known:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown configuration field",
                        value=value[key]
                    ))

        if isinstance(config.get("timing"), dict):
            errors.extend(ConfigValidator.validate_timing_params(config["timing"]))
        if isinstance(config.get("transitions"), dict):
            errors.extend(ConfigValidator.validate_transition_params(config["transitions"]))
        if isinstance(config.get("logging"), dict):
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
