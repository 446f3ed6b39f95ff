"""
Around-advice for callables and named members.

Usage:
    def logged(proceed, args, kwargs):
        print("calling with", args)
        return proceed(*args, **kwargs)

    around(some_module, "some_function", logged)

The advice receives the original callable, the positional arguments as a
tuple and the keyword arguments as a dict, and returns the call's result.
The original callable object is never modified; only the member slot on the
target is replaced.
"""

import functools
import inspect
import types
import collections.abc
from typing import Any, Callable

Advice = Callable[[Callable, tuple, dict], Any]


class Interceptor:
    """Callable wrapper routing every call through an advice"""

    def __init__(self, proceed: Callable, advice: Advice):
        functools.update_wrapper(self, proceed)
        # After update_wrapper: it copies proceed.__dict__ onto self
        self.proceed = proceed
        self.advice = advice

    def __call__(self, *args, **kwargs):
        return self.advice(self.proceed, args, kwargs)

    def __get__(self, instance, owner=None):
        # Stored on a class: bind the instance into proceed so the advice
        # only sees the explicit arguments
        binder = getattr(type(self.proceed), "__get__", None)
        if binder is None:
            return self
        if instance is None:
            if owner is None:
                return self
            return UnboundInterceptor(self.proceed, self.advice, owner)
        return Interceptor(binder(self.proceed, instance, owner), self.advice)

    def __repr__(self) -> str:
        return f"<Interceptor of {self.proceed!r}>"


class UnboundInterceptor(Interceptor):
    """
    A method wrapper read from its class, as in Account.deposit(acc, 2).

    The first positional argument is bound as the instance; the advice
    sees the remaining arguments only.
    """

    def __init__(self, proceed: Callable, advice: Advice, owner: type):
        super().__init__(proceed, advice)
        self.owner = owner

    def __call__(self, instance, *args, **kwargs):
        bound = type(self.proceed).__get__(self.proceed, instance, self.owner)
        return self.advice(bound, args, kwargs)


class ClassInterceptor(Interceptor):
    """Stored on a class in place of a classmethod; binds the owner class"""

    def __get__(self, instance, owner=None):
        if owner is None:
            owner = type(instance)
        if isinstance(self.proceed, ClassInterceptor):
            bound = self.proceed.__get__(instance, owner)
        else:
            bound = types.MethodType(self.proceed, owner)
        return Interceptor(bound, self.advice)


def intercept(func: Callable, advice: Advice) -> Interceptor:
    """Wrap a free-standing callable"""
    return Interceptor(func, advice)


def _around_class_member(target: type, name: str, advice: Advice) -> Interceptor:
    raw = inspect.getattr_static(target, name)
    if isinstance(raw, staticmethod):
        wrapper = Interceptor(raw.__func__, advice)
        setattr(target, name, staticmethod(wrapper))
        return wrapper
    if isinstance(raw, classmethod):
        wrapper = ClassInterceptor(raw.__func__, advice)
    elif isinstance(raw, ClassInterceptor):
        wrapper = ClassInterceptor(raw, advice)
    elif isinstance(raw, (types.FunctionType, Interceptor)):
        wrapper = Interceptor(raw, advice)
    else:
        wrapper = Interceptor(getattr(target, name), advice)
    setattr(target, name, wrapper)
    return wrapper


def around(target: Any, name: str, advice: Advice) -> Interceptor:
    """
    Replace target's member `name` with an Interceptor around it.

    Args:
        target: Mapping, class, module or instance holding the member
        name: Member name (mapping key or attribute)
        advice: Called as advice(original, args, kwargs) on every call

    Returns:
        The installed Interceptor

    On a class, methods stay methods: instance methods bind self (also
    when called through the class), class methods bind the class they are
    looked up on, and static methods stay static.
    """
    if isinstance(target, collections.abc.Mapping):
        wrapper = Interceptor(target[name], advice)
        target[name] = wrapper
        return wrapper

    if isinstance(target, type):
        return _around_class_member(target, name, advice)

    wrapper = Interceptor(getattr(target, name), advice)
    setattr(target, name, wrapper)
    return wrapper
