"""
Barcode Validator

Validates a barcode string against a format adapter: length first, then
allowed characters, then the checksum when the adapter uses one.
"""

from types import MappingProxyType
from typing import Any, Optional, Union

from ...utils.error_handler import InvalidArgumentError
from ..base import AbstractValidator
from .adapters import ADAPTERS
from .base import ANY_LENGTH, AdapterInterface, LengthSpec


def describe_length(length: LengthSpec) -> str:
    """Human-readable form of an adapter length spec"""
    if isinstance(length, (list, tuple)):
        return "/".join(str(item) for item in length)
    if length == ANY_LENGTH:
        return "any"
    return str(length)


class Barcode(AbstractValidator):
    """Validator for barcodes in a configurable format"""

    FAILED = "barcode_failed"
    INVALID_CHARS = "barcode_invalid_chars"
    INVALID_LENGTH = "barcode_invalid_length"
    INVALID = "barcode_invalid"

    message_templates = MappingProxyType(
        {
            FAILED: "The input failed checksum validation",
            INVALID_CHARS: "The input contains invalid characters",
            INVALID_LENGTH: "The input should have a length of %length% characters",
            INVALID: "Invalid type given. String expected",
        }
    )

    message_variables = MappingProxyType({"length": "length"})

    def __init__(
        self,
        adapter: Union[str, AdapterInterface] = "ean13",
        use_checksum: Optional[bool] = None,
        **kwargs: Any,
    ):
        """
        Initialize barcode validator

        Args:
            adapter: Adapter instance or format name such as "ean13"
            use_checksum: Override the adapter's checksum setting
            **kwargs: Base validator options (messages, message_length, ...)
        """
        super().__init__(**kwargs)
        self._options.update({"adapter": None, "use_checksum": False})
        self._state["length"] = None
        self.set_adapter(adapter)
        if use_checksum is not None:
            self.set_use_checksum(use_checksum)

    def get_adapter(self) -> AdapterInterface:
        return self._options["adapter"]

    def set_adapter(self, adapter: Union[str, AdapterInterface]) -> "Barcode":
        """
        Set the barcode format

        Raises:
            InvalidArgumentError: If the name is unknown or the object is not an adapter
        """
        if isinstance(adapter, str):
            try:
                adapter = ADAPTERS[adapter.lower()]()
            except KeyError:
                raise InvalidArgumentError(
                    f"Barcode adapter '{adapter}' does not exist; "
                    f"known adapters: {', '.join(sorted(ADAPTERS))}"
                ) from None
        elif not isinstance(adapter, AdapterInterface):
            raise InvalidArgumentError(
                f"Adapter must be a name or an AdapterInterface, got "
                f"{type(adapter).__name__}"
            )
        self._options["adapter"] = adapter
        self._options["use_checksum"] = adapter.use_checksum()
        self._state["length"] = describe_length(adapter.get_length())
        return self

    def is_checksum_used(self) -> bool:
        return self.get_adapter().use_checksum()

    def set_use_checksum(self, flag: bool) -> "Barcode":
        self._options["use_checksum"] = self.get_adapter().use_checksum(flag)
        return self

    def is_valid(self, value: Any) -> bool:
        """Validate a barcode string"""
        self._set_value(value)

        if not isinstance(value, str):
            self._error(self.INVALID)
            return False

        adapter = self.get_adapter()

        if not adapter.has_valid_length(value):
            self._error(self.INVALID_LENGTH)
            return False

        if not adapter.has_valid_characters(value):
            self._error(self.INVALID_CHARS)
            return False

        if adapter.use_checksum() and not adapter.has_valid_checksum(value):
            self._error(self.FAILED)
            return False

        return True
