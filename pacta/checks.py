"""
Convenience entry points over Contract.run()
"""

from typing import Callable, Sequence

from .combinators import describe_record, product
from .core.contract import Contract
from .core.result import is_match, is_mismatch
from .errors import ContractViolation


def test(*contracts: Contract) -> Callable[[Sequence], bool]:
    """
    Build a boolean predicate over an argument list.

    The returned function takes a list whose items are checked positionally
    against the given contracts; the lengths must agree.

    Example:
        test(number)([5])                      -> True
        test(seq(string, number))([["a"]])     -> False
    """
    checker = product(contracts)

    def check(args: Sequence) -> bool:
        return is_match(checker.run(args))

    return check


def contract(*contracts: Contract) -> Callable[[Sequence], bool]:
    """
    Like test(), but the predicate raises instead of returning False.

    Raises:
        ContractViolation: From the returned predicate, on a mismatch
    """
    checker = product(contracts)

    def check(args: Sequence) -> bool:
        result = checker.run(args)
        if is_mismatch(result):
            raise ContractViolation(result.description, result.value)
        return True

    return check


signature_to_string = describe_record
