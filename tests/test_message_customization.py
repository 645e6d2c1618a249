"""
Unit tests for message customization.

Uses a StringLength(4, 8) validator to exercise template overrides,
variable substitution, and variable access shared by all validators.
"""

import pytest

from validator_kit.utils.error_handler import (
    InvalidArgumentError,
    UnknownMessageKeyError,
    UnknownPropertyError,
)
from validator_kit.validators import StringLength


def first_message(validator):
    return next(iter(validator.get_messages().values()))


class TestSetMessage:
    """Tests for overriding message templates."""

    def test_set_message(self, length_validator):
        """Test that an overridden template is returned for its kind."""
        assert length_validator.is_valid("abcdefghij") is False
        assert first_message(length_validator) == "The input is more than 8 characters long"

        length_validator.set_message("Your value is too long", StringLength.TOO_LONG)

        assert length_validator.is_valid("abcdefghij") is False
        assert first_message(length_validator) == "Your value is too long"

    def test_set_message_explicit_too_short(self, length_validator):
        """Test overriding the too-short template by key."""
        length_validator.set_message("Your value is too short", StringLength.TOO_SHORT)

        assert length_validator.is_valid("abc") is False
        assert first_message(length_validator) == "Your value is too short"
        assert list(length_validator.get_messages()) == [StringLength.TOO_SHORT]

    def test_set_message_default_key(self, length_validator):
        """Test that omitting the key targets the first declared kind."""
        length_validator.set_message("Your value is too short")

        assert length_validator.get_message_templates()[StringLength.TOO_SHORT] == (
            "Your value is too short"
        )
        assert length_validator.is_valid("abc") is False
        assert first_message(length_validator) == "Your value is too short"

    def test_set_message_returns_validator(self, length_validator):
        """Test that setters can be chained."""
        assert length_validator.set_message("x", StringLength.TOO_LONG) is length_validator
        assert length_validator.set_messages({}) is length_validator

    def test_set_message_invalid_key(self, length_validator):
        """Test that an unknown key raises and leaves templates alone."""
        before = length_validator.get_message_templates()

        with pytest.raises(InvalidArgumentError) as exc_info:
            length_validator.set_message("Your value is too long", "invalidKey")

        assert str(exc_info.value).startswith("No message template exists for key")
        assert isinstance(exc_info.value, UnknownMessageKeyError)
        assert length_validator.get_message_templates() == before

    def test_set_messages(self, length_validator):
        """Test setting more than one template at a time."""
        length_validator.set_messages(
            {
                StringLength.TOO_LONG: "Your value is too long",
                StringLength.TOO_SHORT: "Your value is too short",
            }
        )

        assert length_validator.is_valid("abcdefghij") is False
        assert first_message(length_validator) == "Your value is too long"

        assert length_validator.is_valid("abc") is False
        assert first_message(length_validator) == "Your value is too short"

    def test_set_messages_with_unknown_key_changes_nothing(self, length_validator):
        """Test that a mapping with a bad key is rejected as a whole."""
        before = length_validator.get_message_templates()

        with pytest.raises(UnknownMessageKeyError):
            length_validator.set_messages(
                {StringLength.TOO_LONG: "changed", "bogus": "nope"}
            )

        assert length_validator.get_message_templates() == before

    def test_messages_option_in_constructor(self):
        """Test overriding templates through the constructor."""
        validator = StringLength(4, 8, messages={StringLength.TOO_LONG: "Nope"})

        assert validator.is_valid("abcdefghij") is False
        assert validator.get_messages() == {StringLength.TOO_LONG: "Nope"}


class TestMessageVariables:
    """Tests for %name% substitution."""

    def test_value_param(self, length_validator):
        """Test that %value% is replaced with the validated input."""
        length_validator.set_message(
            "Your value '%value%' is too long", StringLength.TOO_LONG
        )

        assert length_validator.is_valid("abcdefghij") is False
        assert first_message(length_validator) == "Your value 'abcdefghij' is too long"

    def test_length_param(self, length_validator):
        """Test that %length% is replaced with the input length."""
        length_validator.set_message(
            "The length of your value is '%length%'", StringLength.TOO_LONG
        )

        assert length_validator.is_valid("abcdefghij") is False
        assert first_message(length_validator) == "The length of your value is '10'"

    def test_validator_specific_param(self, length_validator):
        """Test that %max% is replaced with the configured maximum."""
        length_validator.set_message(
            "Your value is too long, it should be no longer than %max%",
            StringLength.TOO_LONG,
        )

        assert length_validator.is_valid("abcdefghij") is False
        assert first_message(length_validator) == (
            "Your value is too long, it should be no longer than 8"
        )

    def test_unknown_param_left_verbatim(self, length_validator):
        """Test that unknown tokens stay in the message unchanged."""
        length_validator.set_message(
            "Your value is too long, and btw, %shazam%!", StringLength.TOO_LONG
        )

        assert length_validator.is_valid("abcdefghij") is False
        assert first_message(length_validator) == (
            "Your value is too long, and btw, %shazam%!"
        )

    def test_get_message_variables(self, length_validator):
        """Test that declared variables can all be used in a message."""
        variables = length_validator.get_message_variables()

        assert variables == ["min", "max", "length"]

        message = "variables: %notvar% " + "".join(f"%{name}% " for name in variables)
        length_validator.set_message(message, StringLength.TOO_SHORT)

        assert length_validator.is_valid("abc") is False
        assert first_message(length_validator) == "variables: %notvar% 4 8 3 "

    def test_message_variables_independent_of_history(self, length_validator):
        """Test that the variable list does not change after validating."""
        length_validator.is_valid("abc")
        length_validator.is_valid(42)

        assert length_validator.get_message_variables() == ["min", "max", "length"]

    def test_message_templates_match_options(self, length_validator):
        """Test that the message_templates option equals the current templates."""
        length_validator.set_message("Your value is too long", StringLength.TOO_LONG)

        assert length_validator.get_option("message_templates") == (
            length_validator.get_message_templates()
        )
        assert list(length_validator.get_message_templates()) == list(
            StringLength.message_templates
        )
        assert length_validator.get_options()["message_templates"][
            StringLength.TOO_LONG
        ] == "Your value is too long"

    def test_message_variables_match_options(self, length_validator):
        """Test that the message_variables option names the message variables."""
        assert list(length_validator.get_option("message_variables")) == (
            length_validator.get_message_variables()
        )


class TestGetProperty:
    """Tests for reading message variables by name."""

    def test_get_property(self, length_validator):
        """Test access to substitutable values by their public name."""
        length_validator.set_message("Your value is too long", StringLength.TOO_LONG)

        assert length_validator.is_valid("abcdefghij") is False
        assert first_message(length_validator) == "Your value is too long"

        assert length_validator.get("value") == "abcdefghij"
        assert length_validator.get("max") == 8
        assert length_validator.get("min") == 4
        assert length_validator.get("length") == 10

    def test_get_property_unknown(self, length_validator):
        """Test that unknown names raise and name the property."""
        assert length_validator.is_valid("abcdefghij") is False

        with pytest.raises(InvalidArgumentError) as exc_info:
            length_validator.get("unknownProperty")

        assert isinstance(exc_info.value, UnknownPropertyError)
        assert "No property exists by the name " in str(exc_info.value)
        assert "unknownProperty" in str(exc_info.value)


class TestMessageOptions:
    """Tests for message length limits and obscured values."""

    def test_message_length_truncates(self):
        """Test that long messages are cut and marked with '...'."""
        validator = StringLength(4, 8, message_length=20)

        assert validator.is_valid("abcdefghij") is False
        message = first_message(validator)
        assert message == "The input is more..."
        assert len(message) == 20

    def test_message_length_unlimited_by_default(self, length_validator):
        """Test that messages are not truncated by default."""
        assert length_validator.get_message_length() == -1

    def test_message_length_rejects_bad_values(self, length_validator):
        """Test that message length must be -1 or more."""
        with pytest.raises(InvalidArgumentError):
            length_validator.set_message_length(-5)

    def test_value_obscured(self, length_validator):
        """Test that an obscured value renders as asterisks."""
        length_validator.set_value_obscured(True)
        length_validator.set_message("'%value%' is too long", StringLength.TOO_LONG)

        assert length_validator.is_valid("abcdefghij") is False
        assert first_message(length_validator) == "'**********' is too long"
        assert length_validator.get("value") == "abcdefghij"


class TestOptions:
    """Tests for the options API."""

    def test_get_option(self, length_validator):
        """Test reading options by name."""
        assert length_validator.get_option("min") == 4
        assert length_validator.get_option("max") == 8
        assert length_validator.get_option("value_obscured") is False

    def test_get_option_unknown(self, length_validator):
        """Test that unknown option names raise."""
        with pytest.raises(UnknownPropertyError):
            length_validator.get_option("nope")

    def test_set_options_routes_through_setters(self, length_validator):
        """Test that set_options applies setter checks."""
        length_validator.set_options({"max": 20, "min": 10})

        assert length_validator.min == 10
        assert length_validator.max == 20

        with pytest.raises(InvalidArgumentError):
            length_validator.set_options({"min": 30})

    def test_set_options_messages(self, length_validator):
        """Test that the messages option overrides templates."""
        length_validator.set_options({"messages": {StringLength.TOO_SHORT: "short"}})

        assert length_validator.is_valid("a") is False
        assert length_validator.get_messages() == {StringLength.TOO_SHORT: "short"}

    def test_set_options_unknown(self, length_validator):
        """Test that unknown option names raise."""
        with pytest.raises(InvalidArgumentError):
            length_validator.set_options({"colour": "blue"})

    @pytest.mark.parametrize(
        "name,option_value", [("message", "hijacked"), ("options", {"min": 6})]
    )
    def test_set_options_rejects_non_option_setters(
        self, length_validator, name, option_value
    ):
        """Test that setter methods which are not options cannot be reached."""
        templates = length_validator.get_message_templates()

        with pytest.raises(InvalidArgumentError):
            length_validator.set_options({name: option_value})

        assert length_validator.get_message_templates() == templates
        assert length_validator.min == 4

    def test_set_options_message_templates(self, length_validator):
        """Test that message_templates is accepted like messages."""
        length_validator.set_options({"message_templates": {StringLength.TOO_LONG: "long"}})

        assert length_validator.is_valid("abcdefghij") is False
        assert length_validator.get_messages() == {StringLength.TOO_LONG: "long"}

    def test_set_options_message_variables_read_only(self, length_validator):
        """Test that message variables cannot be replaced through options."""
        with pytest.raises(InvalidArgumentError):
            length_validator.set_options({"message_variables": {"min": "max"}})

    def test_length_is_not_an_option(self, length_validator):
        """Test that per-call length is readable but not settable."""
        assert length_validator.is_valid("abcdef") is True

        with pytest.raises(InvalidArgumentError):
            length_validator.set_options({"length": 99})

        assert length_validator.get("length") == 6
        assert "length" not in length_validator.get_options()
        with pytest.raises(UnknownPropertyError):
            length_validator.get_option("length")
        assert repr(length_validator) == "StringLength(min=4, max=8, encoding='utf-8')"

    def test_callable(self, length_validator):
        """Test that validators can be called directly."""
        assert length_validator("abcdef") is True
        assert length_validator("ab") is False
