"""
Tests for contract combinators
"""

from dataclasses import dataclass

import pytest
from pacta import (
    UNDEFINED, Contract, FunctionSignature, ConfigurationError, Matched, Mismatched,
    any_, string, number, bool_, and_, or_, not_, maybe, array, seq, product, record, proc,
    is_match,
)


def matches(contract, value):
    return is_match(contract.run(value))


def test_run_returns_result_values():
    """Test run() returns Matched / Mismatched instead of raising"""
    assert number.run(5) == Matched(number)
    assert number.run("5") == Mismatched("type number", "5")


def test_contracts_are_immutable():
    with pytest.raises(AttributeError):
        number.description = "something else"


def test_and():
    c = and_(number, not_(bool_))
    assert c.description == "(type number) & (not(type boolean))"
    assert matches(c, 3)
    assert not matches(c, "3")


def test_and_short_circuits():
    """Test that and_ stops at the first mismatch"""
    calls = []
    spy = Contract(lambda v: calls.append(v) or True, "spy")
    assert not matches(and_(string, spy), 1)
    assert calls == []


def test_empty_and_matches():
    assert matches(and_(), object())


def test_or():
    c = or_(string, number)
    assert c.description == "(type string) | (type number)"
    assert matches(c, "x")
    assert matches(c, 1)
    assert not matches(c, True)


def test_or_short_circuits():
    calls = []
    spy = Contract(lambda v: calls.append(v) or True, "spy")
    assert matches(or_(number, spy), 1)
    assert calls == []


def test_empty_or_never_matches():
    assert not matches(or_(), 1)
    assert not matches(or_(), None)


def test_not():
    c = not_(string)
    assert c.description == "not(type string)"
    assert matches(c, 1)
    assert not matches(c, "a")


def test_maybe():
    c = maybe(number)
    assert c.description == "maybe(type number)"
    assert matches(c, None)
    assert matches(c, 1)
    assert not matches(c, "1")
    assert not matches(c, UNDEFINED)


def test_array():
    c = array(number)
    assert c.description == "[type number]"
    assert matches(c, [1, 2, 3])
    assert matches(c, (1, 2))
    assert matches(c, [])
    assert not matches(c, [1, "2"])
    assert not matches(c, "123")


def test_untyped_array():
    """Test array() only checks for a list or tuple"""
    assert array().description == "[any]"
    assert matches(array(), [None, "x", 1])
    assert not matches(array(), {"a": 1})


def test_seq():
    c = seq(string, number)
    assert c.description == "(type string) x (type number)"
    assert matches(c, ["a", 1])
    assert matches(c, ("a", 1))
    assert not matches(c, ["a"])
    assert not matches(c, ["a", 1, 2])
    assert not matches(c, [1, "a"])
    assert not matches(c, "a1")


def test_seq_accepts_a_list_of_contracts():
    assert seq([string, number]).description == seq(string, number).description


def test_single_seq_collapses():
    assert seq(number) is number
    assert seq([number]) is number


def test_product_keeps_arity_for_one_contract():
    c = product([number])
    assert c.description == "(type number)"
    assert matches(c, [1])
    assert not matches(c, 1)
    assert not matches(c, [1, 2])


def test_combinators_reject_non_contracts():
    with pytest.raises(ConfigurationError, match="expected a contract"):
        and_(number, int)


def test_record_description():
    c = record({"name": string, "age": number})
    assert c.description == "{name: type string,\n age: type number\n}"
    assert record({}).description == "{}"


def test_record_checks_fields_present_on_value():
    c = record({"name": string, "age": number})
    assert matches(c, {"name": "ada", "age": 36})
    assert not matches(c, {"name": "ada", "age": "36"})


def test_record_does_not_require_shape_fields():
    """Test record checks are driven by the fields of the value"""
    c = record({"name": string, "age": number})
    assert matches(c, {"name": "ada"})
    assert matches(c, {})


def test_record_rejects_unknown_and_undefined_fields():
    c = record({"name": string})
    assert not matches(c, {"name": "ada", "extra": 1})
    assert not matches(c, {"name": UNDEFINED})


def test_record_on_attribute_objects():
    @dataclass
    class Person:
        name: str
        age: int

    c = record({"name": string, "age": number})
    assert matches(c, Person("ada", 36))
    assert not matches(c, Person("ada", "36"))


def test_record_rejects_non_objects():
    c = record({"name": string})
    for value in ["name", 1, None, ["name"], lambda: 1]:
        assert not matches(c, value)


def test_record_copies_shape():
    shape = {"a": number}
    c = record(shape)
    shape["b"] = string
    assert not matches(c, {"b": "x"})


def test_proc():
    sig = proc(number, number, number)
    assert isinstance(sig, FunctionSignature)
    assert sig.params == (number, number)
    assert sig.ret is number
    assert sig.description == "(type number) x (type number) -> type number"


def test_curried_proc_description():
    sig = proc(number, proc(number, number))
    assert sig.input is number
    assert isinstance(sig.ret, FunctionSignature)
    assert sig.description == "type number -> type number -> type number"


def test_proc_without_arguments():
    sig = proc(string)
    assert sig.params == ()
    assert sig.description == "() -> type string"


def test_empty_proc_raises():
    with pytest.raises(ConfigurationError):
        proc()


def test_signature_as_contract_checks_callability():
    sig = proc(number, number)
    assert matches(sig, lambda x: x)
    assert not matches(sig, 5)
    assert matches(array(sig), [abs, round])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
