"""
Contract values: a predicate bundled with a human readable description
"""

from typing import Any, Callable, Tuple

from .config import kind_of
from .result import Matched, Mismatched, Result


class Contract:
    """
    Immutable predicate plus description.

    The description is derived from the contract's structure and is only
    used for reporting, never for deciding a match.
    """

    __slots__ = ("_test", "_description")

    def __init__(self, test: Callable[[Any], bool], description: str):
        object.__setattr__(self, "_test", test)
        object.__setattr__(self, "_description", description)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def test(self) -> Callable[[Any], bool]:
        return self._test

    @property
    def description(self) -> str:
        return self._description

    def run(self, value: Any) -> Result:
        """
        Evaluate the contract.

        Args:
            value: Value to classify

        Returns:
            Matched(self) or Mismatched(description, value); never raises
            for a mismatch
        """
        if self._test(value):
            return Matched(self)
        return Mismatched(self._description, value)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._description!r}>"


class FunctionSignature(Contract):
    """
    Contract for a callable: positional parameter contracts and a return
    contract, which may itself be a FunctionSignature.

    Build these with proc() rather than directly. Evaluated as a plain
    contract, a signature only checks that the value is a function.
    """

    __slots__ = ("_params", "_input", "_ret")

    def __init__(self, params: Tuple[Contract, ...], input: Contract, ret: Contract):
        object.__setattr__(self, "_params", tuple(params))
        object.__setattr__(self, "_input", input)
        object.__setattr__(self, "_ret", ret)
        super().__init__(_is_function, f"{input.description} -> {ret.description}")

    @property
    def params(self) -> Tuple[Contract, ...]:
        return self._params

    @property
    def input(self) -> Contract:
        return self._input

    @property
    def ret(self) -> Contract:
        return self._ret


def _is_function(value) -> bool:
    return kind_of(value) == "function"


# Matches every value; default element type for arrays
any_ = Contract(lambda value: True, "any")
