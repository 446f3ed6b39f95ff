"""
Combinators building new contracts out of existing ones.

Every combinator is pure: it reads the contracts it is given and returns a
fresh Contract without touching its inputs.
"""

import collections.abc
from typing import Iterable, Mapping, Optional, Sequence

from .core.config import ARRAY_TYPES, UNDEFINED, kind_of
from .core.contract import Contract, FunctionSignature, any_
from .core.result import is_match, is_mismatch
from .errors import ConfigurationError


def _checked(contracts: Iterable) -> tuple:
    contracts = tuple(contracts)
    for c in contracts:
        if not isinstance(c, Contract):
            raise ConfigurationError(f"expected a contract, got {c!r}")
    return contracts


def _join(contracts: Sequence[Contract], word: str) -> str:
    return "(" + word.join(c.description for c in contracts) + ")"


def and_(*contracts: Contract) -> Contract:
    """Conjunction: every contract must match. Stops at the first mismatch."""
    contracts = _checked(contracts)

    def test(value) -> bool:
        for c in contracts:
            if is_mismatch(c.run(value)):
                return False
        return True

    return Contract(test, _join(contracts, ") & ("))


def or_(*contracts: Contract) -> Contract:
    """Disjunction: one matching contract is enough. Empty or_() never matches."""
    contracts = _checked(contracts)

    def test(value) -> bool:
        for c in contracts:
            if is_match(c.run(value)):
                return True
        return False

    return Contract(test, _join(contracts, ") | ("))


def not_(contract: Contract) -> Contract:
    """Complement of a contract"""
    (contract,) = _checked([contract])

    def test(value) -> bool:
        return is_mismatch(contract.run(value))

    return Contract(test, f"not({contract.description})")


def maybe(contract: Contract) -> Contract:
    """Accept None, otherwise defer to the given contract"""
    (contract,) = _checked([contract])

    def test(value) -> bool:
        return value is None or is_match(contract.run(value))

    return Contract(test, f"maybe({contract.description})")


def array(contract: Optional[Contract] = None) -> Contract:
    """
    Homogeneous list/tuple contract.

    Args:
        contract: Element contract. When omitted or any_, only the
            container type is checked.

    Returns:
        Contract described as "[<element description>]"
    """
    element = any_ if contract is None else _checked([contract])[0]

    if element is any_:
        def test(value) -> bool:
            return isinstance(value, ARRAY_TYPES)
    else:
        def test(value) -> bool:
            if not isinstance(value, ARRAY_TYPES):
                return False
            for item in value:
                if is_mismatch(element.run(item)):
                    return False
            return True

    return Contract(test, f"[{element.description}]")


def product(contracts: Iterable[Contract]) -> Contract:
    """
    Fixed-length positional contract that never collapses.

    Unlike seq(), a single contract still yields a one-element product, so
    argument lists of arity one keep their length check.
    """
    contracts = _checked(contracts)

    def test(value) -> bool:
        if not isinstance(value, ARRAY_TYPES) or len(value) != len(contracts):
            return False
        for c, item in zip(contracts, value):
            if is_mismatch(c.run(item)):
                return False
        return True

    return Contract(test, _join(contracts, ") x ("))


def seq(*contracts) -> Contract:
    """
    Product contract over a positional list.

    seq(string, number) matches ["a", 1]. A single list of contracts is
    accepted in place of varargs. A one-contract sequence is that contract.
    """
    if len(contracts) == 1 and isinstance(contracts[0], ARRAY_TYPES):
        contracts = tuple(contracts[0])
    return _collapse(contracts)


def _collapse(contracts) -> Contract:
    contracts = _checked(contracts)
    if len(contracts) == 1:
        return contracts[0]
    return product(contracts)


def _own_fields(value):
    # (name, value) pairs a record inspects, or None if value is no record
    if isinstance(value, collections.abc.Mapping):
        return value.items()
    if kind_of(value) != "object" or isinstance(value, ARRAY_TYPES):
        return None
    try:
        return vars(value).items()
    except TypeError:
        return None


def describe_record(shape: Mapping[str, Contract]) -> str:
    """Render a field -> contract mapping as "{a: ...,\\n b: ...\\n}" """
    if not shape:
        return "{}"
    fields = ",\n ".join(f"{name}: {c.description}" for name, c in shape.items())
    return "{" + fields + "\n}"


def record(shape: Mapping[str, Contract]) -> Contract:
    """
    Structural contract for mappings and attribute objects.

    Checks are driven by the fields present on the value: each one must
    have a contract in the shape and match it. Fields of the shape that the
    value does not carry are not required.

    Args:
        shape: Field name to contract; its order drives the description

    Returns:
        Record contract
    """
    shape = dict(shape)
    _checked(shape.values())

    def test(value) -> bool:
        fields = _own_fields(value)
        if fields is None:
            return False
        for name, field_value in fields:
            field_contract = shape.get(name)
            if field_contract is None or field_value is UNDEFINED:
                return False
            if is_mismatch(field_contract.run(field_value)):
                return False
        return True

    return Contract(test, describe_record(shape))


def proc(*types: Contract) -> FunctionSignature:
    """
    Describe a function signature. The last argument is the return contract.

    proc(number, number, number) is a two-argument function returning a
    number; proc(number, proc(number, number)) is its curried form.

    Raises:
        ConfigurationError: If no return contract is given
    """
    if not types:
        raise ConfigurationError("proc() needs at least a return contract")
    *params, ret = _checked(types)
    return FunctionSignature(tuple(params), _collapse(params), ret)
