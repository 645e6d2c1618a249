"""
Unit tests for ValidatorChain.
"""

import pytest

from validator_kit.utils.error_handler import InvalidArgumentError
from validator_kit.validators import Barcode, StringLength, ValidatorChain


@pytest.fixture
def chain():
    return (
        ValidatorChain()
        .attach(StringLength(min=4))
        .attach(Barcode("code39"))
    )


class TestValidatorChain:
    """Tests for ValidatorChain."""

    def test_empty_chain_is_valid(self):
        assert ValidatorChain().is_valid("anything") is True

    def test_all_pass(self, chain):
        assert chain.is_valid("ABCD") is True
        assert chain.get_messages() == {}

    def test_messages_merged_in_order(self, chain):
        """Test that every failing validator contributes its messages."""
        assert chain.is_valid("ab") is False

        assert list(chain.get_messages()) == [
            StringLength.TOO_SHORT,
            Barcode.INVALID_CHARS,
        ]

    def test_break_chain_on_failure(self):
        """Test that a breaking validator stops the chain."""
        chain = ValidatorChain()
        chain.attach(StringLength(min=4), break_chain_on_failure=True)
        chain.attach(Barcode("code39"))

        assert chain.is_valid("ab") is False
        assert list(chain.get_messages()) == [StringLength.TOO_SHORT]

    def test_break_only_applies_on_failure(self):
        chain = ValidatorChain()
        chain.attach(StringLength(min=1), break_chain_on_failure=True)
        chain.attach(Barcode("code39"))

        assert chain.is_valid("ab") is False
        assert list(chain.get_messages()) == [Barcode.INVALID_CHARS]

    def test_prepend(self, chain):
        first = StringLength(max=1)
        chain.prepend(first)

        assert next(iter(chain)) is first
        assert len(chain) == 3

    def test_get_validators(self, chain):
        links = chain.get_validators()

        assert [type(link.validator) for link in links] == [StringLength, Barcode]
        assert all(link.break_chain_on_failure is False for link in links)

    def test_attach_rejects_non_validators(self):
        with pytest.raises(InvalidArgumentError):
            ValidatorChain().attach("not a validator")

    def test_callable(self, chain):
        assert chain("ABCD") is True
        assert chain.value == "ABCD"

    def test_messages_reset(self, chain):
        chain.is_valid("ab")
        chain.is_valid("ABCD")

        assert chain.get_messages() == {}
