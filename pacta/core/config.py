"""
Kind classification and runtime settings
"""

import datetime
import numbers
import os
import re
from typing import Mapping, Optional

from pydantic import BaseModel, Field

# Value kinds
ARRAY_TYPES = (list, tuple)
DATE_TYPE = datetime.date
REGEX_TYPE = re.Pattern

ENV_PREFIX = "PACTA_"


class _Undefined:
    """Marker for a slot that holds no value at all (distinct from None)"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


def kind_of(value) -> str:
    """
    Classify a value the way primitive-kind contracts see it.

    Returns one of "undefined", "null", "boolean", "number", "string",
    "function" or "object". Classes are objects, not functions.
    """
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    # bool is a Number subclass, so it goes first
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, numbers.Number):
        return "number"
    if isinstance(value, str):
        return "string"
    if callable(value) and not isinstance(value, type):
        return "function"
    return "object"


class Settings(BaseModel):
    """Runtime knobs, overridable through PACTA_* environment variables"""

    repr_limit: int = Field(default=80, ge=8)
    allow_keywords: bool = False
    anonymous_suffix: str = "->anonym"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            Settings with every PACTA_<FIELD> variable applied
        """
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            key = ENV_PREFIX + name.upper()
            if key in environ:
                values[name] = environ[key]
        return cls(**values)


settings = Settings.from_env()
