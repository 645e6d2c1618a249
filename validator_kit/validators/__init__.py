"""
Validators Package

All validators share the AbstractValidator contract: is_valid() returns a
boolean and failures are reported as rendered, overridable messages.
"""

# Base classes
from .base import AbstractValidator

# Message handling
from .messages import (
    MessageTemplateStore,
    VariableResolver,
    render_message,
    stringify_value,
)

# Rule validators
from .barcode import Barcode
from .string_length import StringLength

# Composite validators
from .chain import ChainLink, ValidatorChain
from .explode import ElementFailure, Explode

# Registry
from .registry import ValidatorRegistry, default_registry

__all__ = [
    # Base classes
    "AbstractValidator",
    # Message handling
    "MessageTemplateStore",
    "VariableResolver",
    "render_message",
    "stringify_value",
    # Rule validators
    "Barcode",
    "StringLength",
    # Composite validators
    "ValidatorChain",
    "ChainLink",
    "Explode",
    "ElementFailure",
    # Registry
    "ValidatorRegistry",
    "default_registry",
]
