"""Substitution-based interpreter."""

from funcore.eval.errors import (
    ApplyNonFn,
    ArityMismatch,
    BadPrimopArgs,
    EvalError,
    FreeVariable,
    IfNonTrueFalse,
)
from funcore.eval.machine import Evaluator, is_value

__all__ = [
    "Evaluator",
    "is_value",
    "EvalError",
    "FreeVariable",
    "BadPrimopArgs",
    "IfNonTrueFalse",
    "ArityMismatch",
    "ApplyNonFn",
]
