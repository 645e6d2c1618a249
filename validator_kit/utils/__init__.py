"""
Utility modules for the validator kit.

This package contains the exception hierarchy and logging setup.
"""

from .error_handler import (
    ConfigurationError,
    InvalidArgumentError,
    UnknownMessageKeyError,
    UnknownPropertyError,
    ValidatorKitError,
)
from .logging_setup import setup_logging

__all__ = [
    "ValidatorKitError",
    "InvalidArgumentError",
    "UnknownMessageKeyError",
    "UnknownPropertyError",
    "ConfigurationError",
    "setup_logging",
]
