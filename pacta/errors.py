"""
Errors raised at call boundaries and at attachment time.

Evaluating a contract never raises; run() and test() return mismatches as
values. These exceptions are only produced where there is no caller left to
hand a result to: the throwing contract() helper, wrapped calls, and
add_signature().
"""

import reprlib
from typing import Any

from .core.config import settings


def short_repr(value: Any) -> str:
    """repr() truncated to settings.repr_limit"""
    limiter = reprlib.Repr()
    limiter.maxstring = settings.repr_limit
    limiter.maxother = settings.repr_limit
    return limiter.repr(value)


class ContractError(Exception):
    """Base class for every pacta error"""


class ContractViolation(ContractError, ValueError):
    """A value failed the contract passed to contract()"""

    def __init__(self, description: str, value: Any):
        self.description = description
        self.value = value
        super().__init__(f"contract mismatch: {description}\nbut got: {short_repr(value)}")


class InputTypeError(ContractError, TypeError):
    """Arguments of a wrapped call failed the signature's input contract"""

    def __init__(self, member: str, expected: str, value: Any):
        self.member = member
        self.expected = expected
        self.value = value
        super().__init__(f"input type mismatch in {member}: {expected}\n"
                         f"but called with: {short_repr(value)}")


class OutputTypeError(ContractError, TypeError):
    """Return value of a wrapped call failed the signature's return contract"""

    def __init__(self, member: str, expected: str, value: Any, reason: str = "but returned"):
        self.member = member
        self.expected = expected
        self.value = value
        super().__init__(f"output type mismatch in {member}: {expected}\n"
                         f"{reason}: {short_repr(value)}")


class SignatureTypeError(ContractError, TypeError):
    """A non-method member failed its contract when the signature was attached"""

    def __init__(self, member: str, expected: str, value: Any):
        self.member = member
        self.expected = expected
        self.value = value
        super().__init__(f"signature type mismatch for {member}: {expected}\n"
                         f"but found: {short_repr(value)}")


class ConfigurationError(ContractError, ValueError):
    """A signature or contract was built or attached incorrectly"""
