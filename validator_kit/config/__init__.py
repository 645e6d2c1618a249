"""
Configuration package: pydantic models and the file loader that builds
validator chains.
"""

from .pydantic_config import (
    ConfigurationErrorFormatter,
    ConfigurationManager,
    ValidatorKitConfig,
    ValidatorSpec,
    format_config_error,
)

__all__ = [
    "ConfigurationManager",
    "ConfigurationErrorFormatter",
    "ValidatorKitConfig",
    "ValidatorSpec",
    "format_config_error",
]
