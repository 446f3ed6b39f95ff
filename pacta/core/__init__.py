"""
Contract values, evaluation results and runtime settings
"""

from .config import UNDEFINED, Settings, kind_of, settings
from .contract import Contract, FunctionSignature, any_
from .result import Matched, Mismatched, Result, is_match, is_mismatch

__all__ = [
    "UNDEFINED", "Settings", "kind_of", "settings",
    "Contract", "FunctionSignature", "any_",
    "Matched", "Mismatched", "Result", "is_match", "is_mismatch",
]
