"""
Exception Hierarchy

All custom exceptions for the validator kit are defined here. Validation
failures are never raised; these exceptions signal caller mistakes such as
unknown message keys, unknown variables, or a missing delegate validator.
"""

from typing import Any, Optional


# ============================================================================
# Unified Exception Hierarchy for Validator Kit
# ============================================================================
# Import these exceptions from validator_kit.utils.error_handler
# ============================================================================


class ValidatorKitError(Exception):
    """Base exception for all validator kit errors."""

    pass


# ============================================================================
# Argument Errors
# ============================================================================


class InvalidArgumentError(ValidatorKitError, ValueError):
    """An argument passed to a validator is not acceptable."""

    pass


class UnknownMessageKeyError(InvalidArgumentError):
    """A message template was addressed by a key the validator does not declare."""

    def __init__(self, key: Any, validator_name: Optional[str] = None):
        self.key = key
        self.validator_name = validator_name
        message = f"No message template exists for key '{key}'"
        if validator_name:
            message += f" on {validator_name}"
        super().__init__(message)


class UnknownPropertyError(InvalidArgumentError):
    """A message variable or option was read by an unknown name."""

    def __init__(self, name: Any):
        self.name = name
        super().__init__(f"No property exists by the name '{name}'")


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(ValidatorKitError, RuntimeError):
    """Validator or configuration file is not usable as configured."""

    pass
