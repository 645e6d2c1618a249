"""
Validator Registry

Central registry mapping short names to validator classes, so validators
can be built from plain option mappings (configuration files, Explode
delegate specs).
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Type

from ..utils.error_handler import ConfigurationError, InvalidArgumentError
from .barcode import Barcode
from .base import AbstractValidator
from .explode import Explode
from .string_length import StringLength


class ValidatorRegistry:
    """
    Registry of validator classes by name.

    Names are case-insensitive. Building a validator passes the options
    mapping to the class constructor as keyword arguments.
    """

    def __init__(self, validators: Optional[Mapping[str, Type[AbstractValidator]]] = None):
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._validators: Dict[str, Type[AbstractValidator]] = {}
        for name, validator_class in (validators or {}).items():
            self.register(name, validator_class)

    @staticmethod
    def _normalize(name: str) -> str:
        return name.strip().lower()

    def register(self, name: str, validator_class: Type[AbstractValidator]) -> None:
        """
        Register a validator class under a name

        Args:
            name: Short name, e.g. "string_length"
            validator_class: AbstractValidator subclass
        """
        if not isinstance(validator_class, type) or not issubclass(
            validator_class, AbstractValidator
        ):
            raise InvalidArgumentError(
                f"Only AbstractValidator subclasses can be registered, got {validator_class!r}"
            )
        key = self._normalize(name)
        if key in self._validators:
            self._logger.warning(f"Validator {key} already registered, replacing")
        self._validators[key] = validator_class
        self._logger.debug(f"Registered validator class: {key}")

    def unregister(self, name: str) -> bool:
        return self._validators.pop(self._normalize(name), None) is not None

    def names(self) -> List[str]:
        return sorted(self._validators)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._normalize(name) in self._validators

    def get(self, name: str) -> Type[AbstractValidator]:
        """
        Get a validator class by name

        Raises:
            ConfigurationError: If no validator is registered under the name
        """
        try:
            return self._validators[self._normalize(name)]
        except KeyError:
            raise ConfigurationError(
                f"No validator registered under '{name}'; known: {', '.join(self.names())}"
            ) from None

    def create(self, name: str, options: Optional[Mapping[str, Any]] = None) -> AbstractValidator:
        """
        Build a validator by name

        Args:
            name: Registered validator name
            options: Constructor keyword options

        Raises:
            ConfigurationError: If the name is unknown or the options are rejected
        """
        validator_class = self.get(name)
        try:
            return validator_class(**dict(options or {}))
        except TypeError as e:
            raise ConfigurationError(f"Invalid options for validator '{name}': {e}") from e

    def create_from_spec(self, spec: Mapping[str, Any]) -> AbstractValidator:
        """
        Build a validator from a spec mapping

        The spec has a required "name" and optional "options" and
        "messages" entries. A nested spec under the "validator" option
        (an Explode delegate) is built from this registry as well.
        """
        if "name" not in spec:
            raise ConfigurationError(f"Validator spec has no 'name': {dict(spec)!r}")
        options = dict(spec.get("options") or {})
        if isinstance(options.get("validator"), Mapping):
            options["validator"] = self.create_from_spec(options["validator"])
        if spec.get("messages"):
            options["messages"] = dict(spec["messages"])
        return self.create(spec["name"], options)


default_registry = ValidatorRegistry(
    {
        "string_length": StringLength,
        "explode": Explode,
        "barcode": Barcode,
    }
)
