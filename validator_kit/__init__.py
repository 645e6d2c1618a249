"""
Validator Kit

Independent input validators sharing one contract: is_valid() returns a
boolean, and failures are reported as messages rendered from overridable
templates with %name% variable substitution.
"""

__version__ = "1.0.0"

from .utils.error_handler import (
    ConfigurationError,
    InvalidArgumentError,
    UnknownMessageKeyError,
    UnknownPropertyError,
    ValidatorKitError,
)
from .validators import (
    AbstractValidator,
    Barcode,
    ElementFailure,
    Explode,
    StringLength,
    ValidatorChain,
    ValidatorRegistry,
    default_registry,
)

__all__ = [
    "__version__",
    "AbstractValidator",
    "Barcode",
    "ElementFailure",
    "Explode",
    "StringLength",
    "ValidatorChain",
    "ValidatorRegistry",
    "default_registry",
    "ValidatorKitError",
    "InvalidArgumentError",
    "UnknownMessageKeyError",
    "UnknownPropertyError",
    "ConfigurationError",
]
