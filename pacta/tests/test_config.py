"""
Tests for settings and kind classification
"""

import datetime

import pytest
from pydantic import ValidationError
from pacta.core.config import UNDEFINED, Settings, kind_of


def test_defaults():
    settings = Settings.from_env({})
    assert settings.repr_limit == 80
    assert settings.allow_keywords is False
    assert settings.anonymous_suffix == "->anonym"


def test_environment_overrides():
    settings = Settings.from_env({
        "PACTA_REPR_LIMIT": "120",
        "PACTA_ALLOW_KEYWORDS": "true",
        "PACTA_ANONYMOUS_SUFFIX": "/inner",
        "UNRELATED": "x",
    })
    assert settings.repr_limit == 120
    assert settings.allow_keywords is True
    assert settings.anonymous_suffix == "/inner"


def test_invalid_repr_limit():
    with pytest.raises(ValidationError):
        Settings.from_env({"PACTA_REPR_LIMIT": "2"})


def test_undefined_is_a_falsy_singleton():
    assert type(UNDEFINED)() is UNDEFINED
    assert not UNDEFINED
    assert repr(UNDEFINED) == "UNDEFINED"


def test_kind_of():
    """Test kind classification of common values"""
    cases = [
        (UNDEFINED, "undefined"),
        (None, "null"),
        (True, "boolean"),
        (1, "number"),
        (1.5, "number"),
        ("s", "string"),
        (len, "function"),
        (lambda: 1, "function"),
        (dict, "object"),
        ({}, "object"),
        ([], "object"),
        (datetime.date.today(), "object"),
    ]

    for value, expected in cases:
        assert kind_of(value) == expected, f"Failed for {value!r}"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
