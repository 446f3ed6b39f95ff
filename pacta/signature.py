"""
Attaching signatures to existing objects.

Usage:
    calc = {"add": lambda a, b: a + b, "precision": 2}
    add_signature({"add": proc(number, number, number),
                   "precision": number}, calc)

    calc["add"](2, 3)      # 5
    calc["add"](2, "3")    # InputTypeError

Or as a decorator:
    @signed(proc(number, proc(number, number)))
    def adder(a):
        return lambda b: a + b
"""

import logging
import collections.abc
from typing import Any, Callable, Mapping

from .aop import Interceptor, around, intercept
from .atoms import inst, object_
from .combinators import and_, product
from .core.config import settings
from .core.contract import Contract, FunctionSignature
from .core.result import is_mismatch
from .errors import ConfigurationError, InputTypeError, OutputTypeError, SignatureTypeError

logger = logging.getLogger(__name__)

_ARGUMENTS = product([and_(object_, inst(collections.abc.Mapping)), object_])


class SignatureCheck:
    """
    Advice enforcing a FunctionSignature around each call.

    Arguments are checked before the wrapped body runs and the result after
    it returns. When the return contract is itself a signature, the returned
    callable is wrapped in turn, so deeper layers are checked only once they
    are actually called.
    """

    def __init__(self, signature: FunctionSignature, member: str):
        self.signature = signature
        self.member = member
        self._arguments = product(signature.params)

    def __call__(self, proceed: Callable, args: tuple, kwargs: dict) -> Any:
        expected = self.signature.input.description
        if kwargs and not settings.allow_keywords:
            logger.debug("keyword arguments rejected in %s", self.member)
            raise InputTypeError(self.member, expected, kwargs)
        if is_mismatch(self._arguments.run(args)):
            logger.debug("input type mismatch in %s", self.member)
            raise InputTypeError(self.member, expected, args)

        result = proceed(*args, **kwargs)

        ret = self.signature.ret
        if isinstance(ret, FunctionSignature):
            if not callable(result):
                logger.debug("output of %s is not callable", self.member)
                raise OutputTypeError(self.member, ret.description, result,
                                      reason="but returned value is no function")
            if is_signed(result):
                return result
            return intercept(result, SignatureCheck(ret, self.member + settings.anonymous_suffix))

        if is_mismatch(ret.run(result)):
            logger.debug("output type mismatch in %s", self.member)
            raise OutputTypeError(self.member, ret.description, result)
        return result

    def __repr__(self) -> str:
        return f"<SignatureCheck {self.member}: {self.signature.description}>"


def is_signed(func: Any) -> bool:
    """True if func already carries signature checks"""
    return isinstance(func, Interceptor) and isinstance(func.advice, SignatureCheck)


def _signed_with(func: Any, signature: FunctionSignature) -> bool:
    return is_signed(func) and func.advice.signature is signature


def _has_member(target: Any, name: str) -> bool:
    if isinstance(target, collections.abc.Mapping):
        return name in target
    return hasattr(target, name)


def _member(target: Any, name: str) -> Any:
    if isinstance(target, collections.abc.Mapping):
        return target[name]
    return getattr(target, name)


def add_signature(signatures: Mapping[str, Contract], target: Any) -> Any:
    """
    Install runtime checks on the members of target named in signatures.

    Callable members paired with a proc() signature are wrapped so every
    later call is checked. Every other member is checked once, right away,
    against its contract. Nothing is wrapped unless every entry passes, so
    a failing call leaves target untouched.

    Target must be object-kind. Instances of classes defining __call__ are
    functions, not objects, and are rejected like any other function.

    Args:
        signatures: Member name to Contract or FunctionSignature
        target: Mapping, class, module or instance holding the members

    Returns:
        target, with its members replaced in place

    Raises:
        ConfigurationError: If the arguments are not objects, an entry is not
            a contract, or a name has no member on target
        SignatureTypeError: If a non-method member fails its contract
    """
    if is_mismatch(_ARGUMENTS.run((signatures, target))):
        raise ConfigurationError(f"add_signature expects {_ARGUMENTS.description}")

    to_wrap = []
    for name, entry in signatures.items():
        if not isinstance(entry, Contract):
            raise ConfigurationError(f"signature entry {name} is not a contract: {entry!r}")
        if not _has_member(target, name):
            raise ConfigurationError(f"signature symbol {name} not found in object")

        member = _member(target, name)
        if callable(member) and isinstance(entry, FunctionSignature):
            if _signed_with(member, entry):
                logger.debug("%s already checked against %s", name, entry.description)
            else:
                to_wrap.append((name, entry))
            continue

        logger.debug("checking %s against %s", name, entry.description)
        if is_mismatch(entry.run(member)):
            raise SignatureTypeError(name, entry.description, member)

    for name, entry in to_wrap:
        around(target, name, SignatureCheck(entry, name))
        logger.debug("checking calls of %s against %s", name, entry.description)

    return target


def signed(signature: FunctionSignature) -> Callable[[Callable], Interceptor]:
    """
    Decorator form of add_signature for a single function or method.

    Args:
        signature: Result of proc(...)
    """
    if not isinstance(signature, FunctionSignature):
        raise ConfigurationError(f"signed() needs a proc() signature, got {signature!r}")

    def decorator(func: Callable) -> Interceptor:
        name = getattr(func, "__name__", repr(func))
        return intercept(func, SignatureCheck(signature, name))
    return decorator
