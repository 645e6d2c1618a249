"""
Validator Chain

Applies several validators to the same value in sequence.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List

from ..utils.error_handler import InvalidArgumentError
from .base import AbstractValidator


@dataclass
class ChainLink:
    """A validator attached to a chain"""

    validator: AbstractValidator
    break_chain_on_failure: bool = False


class ValidatorChain:
    """Validator that applies multiple validators in sequence"""

    def __init__(self):
        self._links: List[ChainLink] = []
        self._messages: Dict[str, str] = {}
        self.value: Any = None
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def _link(self, validator: AbstractValidator, break_chain_on_failure: bool) -> ChainLink:
        if not callable(getattr(validator, "is_valid", None)):
            raise InvalidArgumentError(
                f"Chain members must be validators, got {type(validator).__name__}"
            )
        return ChainLink(validator, bool(break_chain_on_failure))

    def attach(
        self, validator: AbstractValidator, break_chain_on_failure: bool = False
    ) -> "ValidatorChain":
        """
        Add a validator to the end of the chain

        Args:
            validator: Validator to add
            break_chain_on_failure: Skip the remaining validators when this one fails
        """
        self._links.append(self._link(validator, break_chain_on_failure))
        return self

    def prepend(
        self, validator: AbstractValidator, break_chain_on_failure: bool = False
    ) -> "ValidatorChain":
        """Add a validator to the start of the chain"""
        self._links.insert(0, self._link(validator, break_chain_on_failure))
        return self

    def get_validators(self) -> List[ChainLink]:
        return list(self._links)

    def __len__(self) -> int:
        return len(self._links)

    def __iter__(self) -> Iterator[AbstractValidator]:
        return (link.validator for link in self._links)

    def is_valid(self, value: Any) -> bool:
        """Apply all validators in sequence"""
        self.value = value
        self._messages = {}
        result = True

        for link in self._links:
            if link.validator.is_valid(value):
                continue
            result = False
            self._messages.update(link.validator.get_messages())

            # Stop on error if requested
            if link.break_chain_on_failure:
                self.logger.debug(
                    f"Chain stopped at {link.validator.__class__.__name__}"
                )
                break

        return result

    def __call__(self, value: Any) -> bool:
        return self.is_valid(value)

    def get_messages(self) -> Dict[str, str]:
        return dict(self._messages)
