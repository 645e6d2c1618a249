"""
Pydantic-based configuration for Validator Kit.

A configuration file (TOML or JSON) describes a chain of validators by
registry name, with their options and message overrides. The models below
check the file's shape; ConfigurationManager turns it into a ValidatorChain.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import toml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..utils.error_handler import ConfigurationError, InvalidArgumentError
from ..validators.chain import ValidatorChain
from ..validators.registry import ValidatorRegistry, default_registry

logger = logging.getLogger(__name__)

MESSAGE_LENGTH_ENV = "VALIDATOR_KIT_MESSAGE_LENGTH"
VALUE_OBSCURED_ENV = "VALIDATOR_KIT_VALUE_OBSCURED"


class ValidatorSpec(BaseModel):
    """One validator in a configured chain."""

    name: str = Field(
        min_length=1,
        description="Registered validator name",
        json_schema_extra={
            "error_msg": "Validator name must be a registered name such as "
            "'string_length', 'explode' or 'barcode'."
        },
    )
    options: Dict[str, Any] = Field(
        default_factory=dict,
        description="Constructor options for the validator",
    )
    messages: Dict[str, str] = Field(
        default_factory=dict,
        description="Message template overrides keyed by error kind",
        json_schema_extra={
            "error_msg": "Messages must map error kinds to template strings."
        },
    )
    break_chain_on_failure: bool = Field(
        default=False,
        description="Skip the remaining validators when this one fails",
    )

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v):
        """Registry names are case-insensitive."""
        return v.strip().lower()


class ValidatorKitConfig(BaseModel):
    """Top-level configuration model."""

    message_length: int = Field(
        default=-1,
        ge=-1,
        description="Maximum rendered message length, -1 for unlimited",
        json_schema_extra={
            "error_msg": "Message length must be -1 (unlimited) or a "
            "non-negative number of characters."
        },
    )
    value_obscured: bool = Field(
        default=False,
        description="Render %value% as asterisks in every message",
    )
    validators: List[ValidatorSpec] = Field(
        default_factory=list,
        description="Validators to chain, in order",
    )

    @field_validator("message_length")
    @classmethod
    def validate_message_length(cls, v):
        """Warn about limits too short to hold a useful message."""
        if 0 <= v < 10:
            import warnings

            warnings.warn(
                f"Message length {v} leaves almost no room for the message; "
                "rendered messages will be reduced to '...'.",
                UserWarning,
            )
        return v


class ConfigurationManager:
    """Loads configuration from a file or mapping and builds validator chains."""

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        config_data: Optional[Dict[str, Any]] = None,
        registry: Optional[ValidatorRegistry] = None,
    ):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to configuration file (TOML or JSON)
            config_data: Configuration mapping used when no path is given
            registry: Validator registry (defaults to the shared registry)
        """
        self._registry = registry or default_registry
        self._config: Optional[ValidatorKitConfig] = None
        self._load_configuration(config_path, config_data)

    def _load_configuration(
        self,
        config_path: Optional[Union[str, Path]],
        config_data: Optional[Dict[str, Any]],
    ) -> None:
        """Load configuration from file or mapping and validate it."""
        if config_path is not None:
            data = self._load_config_file(Path(config_path))
        else:
            data = dict(config_data or {})

        self._load_overrides_from_env(data)

        try:
            self._config = ValidatorKitConfig(**data)
        except ValidationError as e:
            raise ConfigurationError(format_config_error(e)) from e

        unknown = [
            spec.name for spec in self._config.validators if spec.name not in self._registry
        ]
        if unknown:
            raise ConfigurationError(
                f"Unknown validator name(s): {', '.join(unknown)}. "
                f"Known: {', '.join(self._registry.names())}"
            )

        logger.info(
            f"Loaded configuration with {len(self._config.validators)} validator(s)"
        )

    def _load_config_file(self, config_path: Path) -> Dict[str, Any]:
        """Load configuration from TOML or JSON file."""
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        suffix = config_path.suffix.lower()
        if suffix not in (".toml", ".json"):
            raise ConfigurationError(
                f"Unsupported configuration file format: {config_path.suffix}"
            )

        try:
            if suffix == ".toml":
                return toml.load(config_path)
            with open(config_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (toml.TomlDecodeError, json.JSONDecodeError, OSError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {config_path}: {e}"
            ) from e

    def _load_overrides_from_env(self, config_data: Dict[str, Any]) -> None:
        """Apply environment overrides for the global message settings."""
        message_length = os.getenv(MESSAGE_LENGTH_ENV)
        if message_length:
            config_data["message_length"] = message_length

        value_obscured = os.getenv(VALUE_OBSCURED_ENV)
        if value_obscured:
            config_data["value_obscured"] = value_obscured.strip().lower() in (
                "1",
                "true",
                "yes",
                "on",
            )

    @property
    def config(self) -> ValidatorKitConfig:
        """Get the current configuration."""
        if not self._config:
            raise ConfigurationError("Configuration not loaded")
        return self._config

    def build_chain(self) -> ValidatorChain:
        """
        Build a ValidatorChain from the configured validators.

        Raises:
            ConfigurationError: If a validator rejects its options or messages
        """
        chain = ValidatorChain()
        for spec in self.config.validators:
            try:
                validator = self._registry.create_from_spec(
                    {
                        "name": spec.name,
                        "options": self._apply_global_options(spec.options),
                        "messages": spec.messages,
                    }
                )
            except InvalidArgumentError as e:
                raise ConfigurationError(
                    f"Validator '{spec.name}' rejected its configuration: {e}"
                ) from e

            chain.attach(validator, spec.break_chain_on_failure)

        return chain

    def _apply_global_options(self, options: Dict[str, Any]) -> Dict[str, Any]:
        """
        Copy options with the global message settings filled in.

        Nested delegate specs under "validator" get the same defaults, since
        their messages are the ones an Explode reports.
        """
        options = dict(options)
        if self.config.message_length != -1:
            options.setdefault("message_length", self.config.message_length)
        if self.config.value_obscured:
            options.setdefault("value_obscured", True)

        nested = options.get("validator")
        if isinstance(nested, dict):
            nested = dict(nested)
            nested["options"] = self._apply_global_options(nested.get("options") or {})
            options["validator"] = nested
        return options

    def create_sample_config(self, output_path: Path, format: str = "toml") -> None:
        """Create a sample configuration file."""
        sample_config = {
            "message_length": -1,
            "value_obscured": False,
            "validators": [
                {
                    "name": "string_length",
                    "break_chain_on_failure": True,
                    "options": {"min": 4, "max": 8},
                    "messages": {
                        "string_length_too_long": "'%value%' is %length% characters, "
                        "at most %max% allowed",
                    },
                },
                {
                    "name": "explode",
                    "options": {
                        "value_delimiter": ",",
                        "validator": {"name": "barcode", "options": {"adapter": "ean13"}},
                    },
                },
            ],
        }

        if format.lower() == "toml":
            with open(output_path, "w", encoding="utf-8") as f:
                toml.dump(sample_config, f)
        elif format.lower() == "json":
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(sample_config, f, indent=2)
        else:
            raise ValueError(f"Unsupported format: {format}")


class ConfigurationErrorFormatter:
    """Formats Pydantic validation errors into user-friendly messages."""

    @staticmethod
    def format_validation_error(error: ValidationError) -> str:
        """
        Convert Pydantic ValidationError into a user-friendly error message.

        Args:
            error: Pydantic ValidationError instance

        Returns:
            Formatted error message
        """
        error_messages = []

        for error_detail in error.errors():
            location = ConfigurationErrorFormatter._format_error_location(
                error_detail["loc"]
            )
            custom_msg = ConfigurationErrorFormatter._get_custom_error_message(
                error_detail["loc"]
            )
            input_value = error_detail.get("input", "N/A")

            if custom_msg:
                error_messages.append(f"- {location}: {custom_msg}")
            else:
                error_messages.append(
                    f"- {location}: {error_detail['msg']} (got {input_value!r})"
                )

        return "Configuration Validation Failed:\n" + "\n".join(error_messages)

    @staticmethod
    def _format_error_location(location: tuple) -> str:
        """Format the error location path."""
        if not location:
            return "Configuration"

        path_parts = []
        for part in location:
            if isinstance(part, str):
                path_parts.append(part)
            else:
                path_parts.append(f"[{part}]")

        return ".".join(path_parts).replace(".[", "[")

    @staticmethod
    def _get_custom_error_message(location: tuple) -> Optional[str]:
        """Look up the error_msg hint declared on the failing field."""
        model: Any = ValidatorKitConfig
        field_info = None
        for part in location:
            if isinstance(part, int):
                continue
            fields = getattr(model, "model_fields", None)
            if not fields or part not in fields:
                return None
            field_info = fields[part]
            model = ValidatorSpec if part == "validators" else None

        if field_info is None or not isinstance(field_info.json_schema_extra, dict):
            return None
        return field_info.json_schema_extra.get("error_msg")


def format_config_error(error: Exception) -> str:
    """Format any configuration error into a readable message."""
    if isinstance(error, ValidationError):
        return ConfigurationErrorFormatter.format_validation_error(error)
    return f"Configuration Error: {error}"
