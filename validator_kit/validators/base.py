"""
Base Validator Class

This module provides the foundation for all validators in the kit: message
template handling, message variables, options, and the record of messages
produced by the most recent validation call.
"""

import logging
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from ..utils.error_handler import InvalidArgumentError, UnknownPropertyError
from .messages import (
    VALUE_VARIABLE,
    MessageTemplateStore,
    VariableResolver,
    render_message,
)

_UNSET = object()


class AbstractValidator(ABC):
    """
    Abstract base class for all validators.

    Subclasses declare their error kinds and default templates in
    ``message_templates`` (declaration order matters: the first kind is the
    default key) and map public message variable names onto option keys in
    ``message_variables``. Both are read-only class-level tables; each
    instance gets its own mutable copy of the templates.

    Values computed while validating (such as a measured length) live in
    ``_state``, not ``_options``. Message variables read ``_state`` first,
    so callers can see that state but never set it through options.
    """

    # Options every validator accepts in addition to its own ``_options`` keys
    base_option_names = (
        "messages",
        "message_templates",
        "message_length",
        "value_obscured",
    )

    message_templates: Mapping[str, str] = MappingProxyType({})
    message_variables: Mapping[str, str] = MappingProxyType({})
    default_message_length: int = -1

    def __init__(
        self,
        messages: Optional[Mapping[str, str]] = None,
        message_length: Optional[int] = None,
        value_obscured: bool = False,
    ):
        """
        Initialize validator

        Args:
            messages: Template overrides keyed by error kind
            message_length: Maximum rendered message length (-1 = unlimited)
            value_obscured: Render %value% as asterisks
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.value: Any = None
        self._options: Dict[str, Any] = {}
        self._state: Dict[str, Any] = {}
        self._messages: Dict[str, str] = {}
        self._message_length = self.default_message_length
        self._value_obscured = False

        self._templates = MessageTemplateStore(
            self.message_templates, owner=self.__class__.__name__
        )
        self._variables = VariableResolver(
            {
                name: self._option_accessor(option_key)
                for name, option_key in self.message_variables.items()
            },
            value_accessor=lambda: self.value,
        )

        if messages:
            self.set_messages(messages)
        if message_length is not None:
            self.set_message_length(message_length)
        self.set_value_obscured(value_obscured)

    def _option_accessor(self, option_key: str):
        def accessor():
            if option_key in self._state:
                return self._state[option_key]
            return self._options.get(option_key)

        return accessor

    @abstractmethod
    def is_valid(self, value: Any) -> bool:
        """
        Validate a value

        Args:
            value: Value to validate

        Returns:
            True if the value is valid; otherwise False with messages recorded
        """
        pass

    def __call__(self, value: Any) -> bool:
        return self.is_valid(value)

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def get_messages(self) -> Dict[str, str]:
        """Rendered messages from the latest call, in the order raised"""
        return dict(self._messages)

    def set_message(self, text: str, key: Optional[str] = None) -> "AbstractValidator":
        """Override the template for one error kind (default: first declared)"""
        self._templates.set_message(text, key)
        return self

    def set_messages(self, messages: Mapping[str, str]) -> "AbstractValidator":
        """Override several templates; nothing is changed if any key is unknown"""
        self._templates.set_messages(messages)
        return self

    def get_message_templates(self) -> Dict[str, str]:
        return self._templates.get_message_templates()

    def get_message_variables(self) -> List[str]:
        return self._variables.names()

    def get(self, name: str) -> Any:
        """
        Read a message variable by its public name.

        ``value`` is always available and holds the last validated input.

        Raises:
            UnknownPropertyError: If no variable exists by that name
        """
        return self._variables.resolve(name)

    def get_message_length(self) -> int:
        return self._message_length

    def set_message_length(self, length: int) -> "AbstractValidator":
        if not isinstance(length, int) or isinstance(length, bool) or length < -1:
            raise InvalidArgumentError(
                f"Message length must be an integer >= -1, got {length!r}"
            )
        self._message_length = length
        return self

    def is_value_obscured(self) -> bool:
        return self._value_obscured

    def set_value_obscured(self, flag: bool) -> "AbstractValidator":
        self._value_obscured = bool(flag)
        return self

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------

    def get_options(self) -> Dict[str, Any]:
        """
        All options, validator-specific ones first.

        ``message_templates`` holds the current templates and
        ``message_variables`` maps each variable name to the option it reads.
        """
        options = dict(self._options)
        options["message_templates"] = self.get_message_templates()
        options["message_variables"] = dict(self.message_variables)
        options["message_length"] = self._message_length
        options["value_obscured"] = self._value_obscured
        return options

    def get_option(self, name: str) -> Any:
        options = self.get_options()
        if name not in options:
            raise UnknownPropertyError(name)
        return options[name]

    def set_options(self, options: Mapping[str, Any]) -> "AbstractValidator":
        """
        Apply several options.

        Only declared options are accepted: the validator's own option keys
        and ``base_option_names``. Each is routed through its ``set_<key>``
        method when the validator has one, so option values get the same
        checks as direct setter calls. ``messages`` and ``message_templates``
        both update templates.

        Raises:
            InvalidArgumentError: If an option name is unknown or read-only
        """
        for name, option_value in options.items():
            if name not in self._options and name not in self.base_option_names:
                raise InvalidArgumentError(
                    f"{self.__class__.__name__} has no option named '{name}'"
                )
            if name in ("messages", "message_templates"):
                self.set_messages(option_value)
                continue
            setter = getattr(self, f"set_{name}", None)
            if callable(setter):
                setter(option_value)
            else:
                self._options[name] = option_value
        return self

    # ------------------------------------------------------------------
    # Helpers for subclasses
    # ------------------------------------------------------------------

    def _set_value(self, value: Any) -> None:
        """Record the value under validation and drop previous messages"""
        self.value = value
        self._messages = {}

    def _create_message(self, key: Optional[str], value: Any = _UNSET) -> str:
        template = self._templates.get(key)
        variables: Any = self._variables
        if value is not _UNSET:
            variables = self._variables.as_dict()
            variables[VALUE_VARIABLE] = value
        return render_message(
            template,
            variables,
            obscure_value=self._value_obscured,
            max_length=self._message_length,
        )

    def _error(self, key: Optional[str] = None, value: Any = _UNSET) -> None:
        """
        Record a failure of the given kind.

        Args:
            key: Error kind; defaults to the first declared kind
            value: Value to render as %value% instead of the recorded one
        """
        if key is None:
            key = self._templates.default_key
        message = self._create_message(key, value)
        self._messages[key] = message
        self.logger.debug(f"{self.__class__.__name__} raised {key}: {message}")

    def __repr__(self) -> str:
        options = ", ".join(f"{name}={value!r}" for name, value in self._options.items())
        return f"{self.__class__.__name__}({options})"
