"""
String Length Validator

Checks that a string's length lies between configured bounds.
"""

import codecs
from types import MappingProxyType
from typing import Any, Optional

from ..utils.error_handler import InvalidArgumentError
from .base import AbstractValidator


class StringLength(AbstractValidator):
    """Validator for string length bounds"""

    TOO_SHORT = "string_length_too_short"
    TOO_LONG = "string_length_too_long"
    INVALID = "string_length_invalid"

    message_templates = MappingProxyType(
        {
            TOO_SHORT: "The input is less than %min% characters long",
            TOO_LONG: "The input is more than %max% characters long",
            INVALID: "Invalid type given. String expected",
        }
    )

    message_variables = MappingProxyType(
        {
            "min": "min",
            "max": "max",
            "length": "length",
        }
    )

    def __init__(
        self,
        min: int = 0,
        max: Optional[int] = None,
        encoding: str = "utf-8",
        **kwargs: Any,
    ):
        """
        Initialize string length validator

        Args:
            min: Minimum length (inclusive)
            max: Maximum length (inclusive); None means unbounded
            encoding: Codec used to decode bytes input
            **kwargs: Base validator options (messages, message_length, ...)
        """
        super().__init__(**kwargs)
        self._options.update({"min": 0, "max": None, "encoding": "utf-8"})
        self._state["length"] = 0
        # max goes first so a min above it is reported against the given max
        self.set_max(max)
        self.set_min(min)
        self.set_encoding(encoding)

    @property
    def min(self) -> int:
        return self._options["min"]

    @property
    def max(self) -> Optional[int]:
        return self._options["max"]

    @property
    def encoding(self) -> str:
        return self._options["encoding"]

    @property
    def length(self) -> int:
        """Length of the last validated value"""
        return self._state["length"]

    def set_min(self, min: int) -> "StringLength":
        """
        Set the minimum length

        Raises:
            InvalidArgumentError: If min is negative or above the current max
        """
        if not isinstance(min, int) or isinstance(min, bool) or min < 0:
            raise InvalidArgumentError(
                f"The minimum must be a non-negative integer, got {min!r}"
            )
        if self.max is not None and min > self.max:
            raise InvalidArgumentError(
                "The minimum must be less than or equal to the maximum length, "
                f"but {min} > {self.max}"
            )
        self._options["min"] = min
        return self

    def set_max(self, max: Optional[int]) -> "StringLength":
        """
        Set the maximum length; None removes the upper bound

        Raises:
            InvalidArgumentError: If max is negative or below the current min
        """
        if max is None:
            self._options["max"] = None
            return self
        if not isinstance(max, int) or isinstance(max, bool) or max < 0:
            raise InvalidArgumentError(
                f"The maximum must be a non-negative integer or None, got {max!r}"
            )
        if max < self.min:
            raise InvalidArgumentError(
                "The maximum must be greater than or equal to the minimum length, "
                f"but {max} < {self.min}"
            )
        self._options["max"] = max
        return self

    def set_encoding(self, encoding: str) -> "StringLength":
        try:
            codecs.lookup(encoding)
        except (LookupError, TypeError):
            raise InvalidArgumentError(f"Unknown encoding: {encoding!r}") from None
        self._options["encoding"] = encoding
        return self

    def is_valid(self, value: Any) -> bool:
        """Validate that value is a string within the length bounds"""
        self._set_value(value)
        self._state["length"] = 0

        if isinstance(value, (bytes, bytearray)):
            try:
                text = bytes(value).decode(self.encoding)
            except UnicodeDecodeError:
                self._error(self.INVALID)
                return False
        elif isinstance(value, str):
            text = value
        else:
            self._error(self.INVALID)
            return False

        self._state["length"] = len(text)

        if self.length < self.min:
            self._error(self.TOO_SHORT)
        if self.max is not None and self.length > self.max:
            self._error(self.TOO_LONG)

        return not self._messages
