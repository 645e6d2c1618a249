"""
Explode Validator

Splits a delimited string (or takes a list as-is) and validates every
element with a delegate validator, keeping per-element failure reports.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Union

from ..utils.error_handler import ConfigurationError, InvalidArgumentError
from .base import AbstractValidator

if TYPE_CHECKING:
    from .registry import ValidatorRegistry


@dataclass
class ElementFailure:
    """Messages from the delegate for one failing element"""

    index: int
    value: Any
    messages: Dict[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"[{self.index}] {self.value!r}: {'; '.join(self.messages.values())}"


class Explode(AbstractValidator):
    """Validator that applies a delegate validator to each element of a list"""

    INVALID = "explode_invalid"

    message_templates = MappingProxyType(
        {
            INVALID: "Invalid type given. String expected",
        }
    )

    def __init__(
        self,
        validator: Optional[Union[AbstractValidator, Mapping[str, Any]]] = None,
        value_delimiter: Optional[str] = ",",
        break_on_first_failure: bool = False,
        registry: Optional["ValidatorRegistry"] = None,
        **kwargs: Any,
    ):
        """
        Initialize explode validator

        Args:
            validator: Delegate validator, or a spec such as
                {"name": "string_length", "options": {"min": 3}}
            value_delimiter: Delimiter to split strings on; None treats a
                string as a single element
            break_on_first_failure: Stop at the first failing element
            registry: Registry that delegate specs are built from (defaults
                to the shared registry)
            **kwargs: Base validator options (messages, message_length, ...)
        """
        super().__init__(**kwargs)
        self._registry = registry
        self._options.update(
            {"validator": None, "value_delimiter": ",", "break_on_first_failure": False}
        )
        self._failures: List[ElementFailure] = []
        if validator is not None:
            self.set_validator(validator)
        self.set_value_delimiter(value_delimiter)
        self.set_break_on_first_failure(break_on_first_failure)

    def get_value_delimiter(self) -> Optional[str]:
        return self._options["value_delimiter"]

    def set_value_delimiter(self, delimiter: Optional[str]) -> "Explode":
        """Set the delimiter strings are split on; None disables splitting"""
        if delimiter is not None and (not isinstance(delimiter, str) or not delimiter):
            raise InvalidArgumentError(
                f"Value delimiter must be a non-empty string or None, got {delimiter!r}"
            )
        self._options["value_delimiter"] = delimiter
        return self

    def get_validator(self) -> Optional[AbstractValidator]:
        return self._options["validator"]

    def set_validator(
        self, validator: Union[AbstractValidator, Mapping[str, Any]]
    ) -> "Explode":
        """Set the delegate validator, building it from a spec mapping if needed"""
        if isinstance(validator, Mapping):
            registry = self._registry
            if registry is None:
                from .registry import default_registry

                registry = default_registry
            validator = registry.create_from_spec(validator)
        elif not callable(getattr(validator, "is_valid", None)):
            raise InvalidArgumentError(
                f"Delegate must be a validator or a validator spec, got "
                f"{type(validator).__name__}"
            )
        self._options["validator"] = validator
        return self

    def is_break_on_first_failure(self) -> bool:
        return self._options["break_on_first_failure"]

    def set_break_on_first_failure(self, flag: bool) -> "Explode":
        self._options["break_on_first_failure"] = bool(flag)
        return self

    def _split(self, value: Any) -> List[Any]:
        if isinstance(value, (list, tuple)):
            return list(value)
        delimiter = self.get_value_delimiter()
        if delimiter is None:
            return [value]
        return value.split(delimiter)

    def is_valid(self, value: Any) -> bool:
        """
        Returns true if every checked element is valid

        Raises:
            ConfigurationError: If no delegate validator is set
        """
        self._set_value(value)
        self._failures = []

        if not isinstance(value, (str, list, tuple)):
            self._error(self.INVALID)
            return False

        values = self._split(value)

        validator = self.get_validator()
        if validator is None:
            raise ConfigurationError(
                f"{self.__class__.__name__} expects a validator to be set; none given"
            )

        for index, element in enumerate(values):
            if validator.is_valid(element):
                continue
            self._failures.append(
                ElementFailure(index=index, value=element, messages=validator.get_messages())
            )
            if self.is_break_on_first_failure():
                break

        if self._failures:
            self.logger.debug(
                f"{len(self._failures)} of {len(values)} elements failed validation"
            )

        return not self._failures

    def get_failures(self) -> List[ElementFailure]:
        """Per-element failure reports from the latest call, in element order"""
        return list(self._failures)

    def get_element_messages(self) -> List[Dict[str, str]]:
        """Delegate message mappings for each failing element, in order"""
        return [dict(failure.messages) for failure in self._failures]

    def get_messages(self) -> Dict[str, str]:
        """
        Messages from the latest call.

        Element failures are merged in element order; the first message
        recorded for a kind is kept.
        """
        merged = dict(self._messages)
        for failure in self._failures:
            for key, message in failure.messages.items():
                merged.setdefault(key, message)
        return merged
