"""Error types for the type checker and the unifier.

The two hierarchies are kept apart: a ``TypeCheckError`` comes out of
``TypeChecker.infer`` and a ``UnificationError`` out of ``unify``.
"""

from __future__ import annotations

from funcore.core.types import Type
from funcore.core.utypes import UType, UVar


class TypeCheckError(Exception):
    """Base class for type errors."""

    def __init__(self, message: str):
        super().__init__(message)


class UndefinedVariable(TypeCheckError):
    """Variable not found in typing context."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Undefined variable: {name}")


class ApplyNonArrow(TypeCheckError):
    """Function position of an application does not have a function type."""

    def __init__(self, actual: Type):
        self.actual = actual
        super().__init__(f"Cannot apply a term of non-function type {actual}")


class ArityMismatch(TypeCheckError):
    """Wrong number of arguments or operands."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} argument(s), but got {actual}")


class TypeMismatch(TypeCheckError):
    """Expected type does not match actual type."""

    def __init__(self, expected: Type, actual: Type):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected type {expected}, but got {actual}")


class UnificationError(Exception):
    """Base class for unification failures."""

    def __init__(self, message: str):
        super().__init__(message)


class UnifyMismatch(UnificationError):
    """Types cannot be made equal."""

    def __init__(self, t1: UType, t2: UType):
        self.t1 = t1
        self.t2 = t2
        super().__init__(f"Cannot unify {t1} with {t2}")


class OccursCheckError(UnificationError):
    """Occurs check failed - infinite type detected."""

    def __init__(self, var: UVar, t: UType):
        self.var = var
        self.t = t
        super().__init__(f"Occurs check failed: {var} occurs in {t}")
