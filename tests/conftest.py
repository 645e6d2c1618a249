"""
Pytest configuration and shared fixtures for validator kit tests.
"""

import pytest

from validator_kit.config.pydantic_config import MESSAGE_LENGTH_ENV, VALUE_OBSCURED_ENV
from validator_kit.validators import Explode, StringLength


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch):
    """Keep environment overrides from leaking into configuration tests."""
    monkeypatch.delenv(MESSAGE_LENGTH_ENV, raising=False)
    monkeypatch.delenv(VALUE_OBSCURED_ENV, raising=False)


@pytest.fixture
def length_validator():
    """StringLength validator bounded to 4..8 characters."""
    return StringLength(4, 8)


@pytest.fixture
def explode_validator():
    """Comma-splitting Explode validator delegating to StringLength(min=3)."""
    return Explode(validator=StringLength(min=3), value_delimiter=",")


@pytest.fixture
def sample_config_data():
    """Configuration mapping with a two-validator chain."""
    return {
        "validators": [
            {
                "name": "string_length",
                "options": {"min": 4, "max": 8},
                "break_chain_on_failure": True,
            },
            {
                "name": "barcode",
                "options": {"adapter": "code39"},
            },
        ]
    }
