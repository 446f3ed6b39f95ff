"""
Outcome of evaluating a contract against a value
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Matched:
    """The value satisfied the contract"""
    contract: Any


@dataclass(frozen=True)
class Mismatched:
    """The value failed the contract; keeps the value for diagnostics"""
    description: str
    value: Any


Result = Union[Matched, Mismatched]


def is_match(result: Result) -> bool:
    return isinstance(result, Matched)


def is_mismatch(result: Result) -> bool:
    return isinstance(result, Mismatched)
