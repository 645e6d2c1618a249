"""
Message Templates and Variables

This module holds the pieces every validator uses to report failures:
a per-instance store of message templates keyed by error kind, a resolver
that maps message variable names onto the validator's current state, and
the renderer that substitutes ``%name%`` tokens into a template.
"""

import re
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Union

from ..utils.error_handler import (
    InvalidArgumentError,
    UnknownMessageKeyError,
    UnknownPropertyError,
)

VALUE_VARIABLE = "value"

TOKEN_PATTERN = re.compile(r"%([A-Za-z_][A-Za-z0-9_]*)%")

TRUNCATION_SUFFIX = "..."


class MessageTemplateStore:
    """Mutable error kind -> template mapping with a fixed key set"""

    def __init__(self, defaults: Mapping[str, str], owner: Optional[str] = None):
        """
        Initialize template store

        Args:
            defaults: Default templates in declaration order
            owner: Name of the owning validator (used in error messages)
        """
        self._templates: Dict[str, str] = dict(defaults)
        self._owner = owner

    @property
    def default_key(self) -> Optional[str]:
        """First declared error kind, used when no key is given"""
        return next(iter(self._templates), None)

    def keys(self) -> List[str]:
        return list(self._templates)

    def __contains__(self, key: object) -> bool:
        return key in self._templates

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def _resolve_key(self, key: Optional[str]) -> str:
        if key is None:
            key = self.default_key
        if key is None or key not in self._templates:
            raise UnknownMessageKeyError(key, self._owner)
        return key

    def get(self, key: Optional[str] = None) -> str:
        """Get the current template for an error kind"""
        return self._templates[self._resolve_key(key)]

    def set_message(self, text: str, key: Optional[str] = None) -> None:
        """
        Store a template for an error kind

        Args:
            text: New template text, may contain %name% tokens
            key: Error kind; defaults to the first declared kind

        Raises:
            UnknownMessageKeyError: If the key is not declared
            InvalidArgumentError: If text is not a string
        """
        resolved = self._resolve_key(key)
        if not isinstance(text, str):
            raise InvalidArgumentError(
                f"Message template must be a string, got {type(text).__name__}"
            )
        self._templates[resolved] = text

    def set_messages(self, messages: Mapping[str, str]) -> None:
        """
        Store several templates at once.

        Every key and text is checked before anything is written, so an
        invalid mapping leaves the store untouched. A None key stands for
        the default key.
        """
        resolved = []
        for key, text in messages.items():
            resolved_key = self._resolve_key(key)
            if not isinstance(text, str):
                raise InvalidArgumentError(
                    f"Message template for '{resolved_key}' must be a string, "
                    f"got {type(text).__name__}"
                )
            resolved.append((resolved_key, text))
        for key, text in resolved:
            self._templates[key] = text

    def get_message_templates(self) -> Dict[str, str]:
        """Get a copy of the current key -> template mapping"""
        return dict(self._templates)


class VariableResolver:
    """Resolves message variable names to current validator values"""

    def __init__(
        self,
        accessors: Mapping[str, Callable[[], Any]],
        value_accessor: Callable[[], Any],
    ):
        """
        Initialize variable resolver

        Args:
            accessors: Declared variable name -> zero-argument accessor
            value_accessor: Accessor for the special ``value`` variable
        """
        self._accessors: Dict[str, Callable[[], Any]] = dict(accessors)
        self._value_accessor = value_accessor

    def names(self) -> List[str]:
        """Declared variable names in declaration order (``value`` excluded)"""
        return list(self._accessors)

    def __contains__(self, name: object) -> bool:
        return name == VALUE_VARIABLE or name in self._accessors

    def resolve(self, name: str) -> Any:
        """
        Get the current value of a variable

        Raises:
            UnknownPropertyError: If the name is not a known variable
        """
        if name == VALUE_VARIABLE:
            return self._value_accessor()
        try:
            accessor = self._accessors[name]
        except (KeyError, TypeError):
            raise UnknownPropertyError(name) from None
        return accessor()

    def as_dict(self) -> Dict[str, Any]:
        """Snapshot of every declared variable plus ``value``"""
        snapshot = {name: accessor() for name, accessor in self._accessors.items()}
        snapshot[VALUE_VARIABLE] = self._value_accessor()
        return snapshot


def stringify_value(value: Any) -> str:
    """Convert a variable value into its message form"""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, Mapping):
        return ", ".join(
            f"{stringify_value(key)}: {stringify_value(item)}"
            for key, item in value.items()
        )
    if isinstance(value, (list, tuple, set, frozenset)):
        return ", ".join(stringify_value(item) for item in value)
    return str(value)


def truncate_message(message: str, max_length: int) -> str:
    """Cut a message to max_length characters, marking the cut with '...'"""
    if max_length < 0 or len(message) <= max_length:
        return message
    keep = max(max_length - len(TRUNCATION_SUFFIX), 0)
    return message[:keep] + TRUNCATION_SUFFIX


def render_message(
    template: str,
    variables: Union[VariableResolver, Mapping[str, Any]],
    obscure_value: bool = False,
    max_length: int = -1,
) -> str:
    """
    Substitute %name% tokens in a message template.

    Known names are replaced by the stringified current value; unknown
    tokens are left as-is, delimiters included. Substituted text is not
    scanned again.

    Args:
        template: Template text
        variables: Resolver or plain mapping of variable values
        obscure_value: Render %value% as asterisks of the same length
        max_length: Truncate the rendered message to this length (-1 = off)

    Returns:
        Rendered message
    """

    def substitute(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name not in variables:
            return match.group(0)
        if isinstance(variables, VariableResolver):
            text = stringify_value(variables.resolve(name))
        else:
            text = stringify_value(variables[name])
        if obscure_value and name == VALUE_VARIABLE:
            text = "*" * len(text)
        return text

    return truncate_message(TOKEN_PATTERN.sub(substitute, template), max_length)
