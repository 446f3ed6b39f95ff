"""
Leaf contracts for primitive kinds and class membership
"""

from .combinators import and_, array, not_
from .core.config import DATE_TYPE, REGEX_TYPE, kind_of
from .core.contract import Contract, any_


def _kind(kind: str) -> Contract:
    # None never passes a kind check, "undefined" included
    def test(value) -> bool:
        return value is not None and kind_of(value) == kind

    return Contract(test, "type " + kind)


def inst(cls: type) -> Contract:
    """Contract matching instances of cls (subclasses included)"""
    def test(value) -> bool:
        return isinstance(value, cls)

    return Contract(test, "instance of " + cls.__name__)


string = _kind("string")
number = _kind("number")
bool_ = _kind("boolean")
fun = _kind("function")
undef = _kind("undefined")

date = inst(DATE_TYPE)
regex = inst(REGEX_TYPE)

# Plain structural objects: no arrays, no dates
object_ = and_(_kind("object"), not_(array(any_)), not_(date))

__all__ = [
    "any_", "string", "number", "bool_", "fun", "undef",
    "date", "regex", "object_", "inst",
]
