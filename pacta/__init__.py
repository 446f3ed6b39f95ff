"""
Pacta: composable runtime contracts for Python values and functions
"""

from .core.config import UNDEFINED, Settings, settings
from .core.contract import Contract, FunctionSignature, any_
from .core.result import Matched, Mismatched, is_match, is_mismatch
from .atoms import string, number, bool_, fun, undef, date, regex, object_, inst
from .combinators import and_, or_, not_, maybe, array, seq, product, record, proc
from .checks import test, contract, signature_to_string
from .signature import add_signature, signed, is_signed
from .errors import (
    ContractError,
    ContractViolation,
    InputTypeError,
    OutputTypeError,
    SignatureTypeError,
    ConfigurationError,
)

__version__ = "0.1.0"
__all__ = [
    "Contract", "FunctionSignature", "Matched", "Mismatched",
    "is_match", "is_mismatch", "UNDEFINED", "Settings", "settings",
    "any_", "string", "number", "bool_", "fun", "undef", "date", "regex",
    "object_", "inst",
    "and_", "or_", "not_", "maybe", "array", "seq", "product", "record", "proc",
    "test", "contract", "signature_to_string",
    "add_signature", "signed", "is_signed",
    "ContractError", "ContractViolation", "InputTypeError", "OutputTypeError",
    "SignatureTypeError", "ConfigurationError",
]
