"""Core language: AST, types, substitution, type checker and unifier."""

from funcore.core.ast import (
    App,
    BoolLit,
    Fn,
    If,
    IntLit,
    Let,
    PrimOp,
    Primop,
    Rec,
    Term,
    Var,
)
from funcore.core.checker import PRIMOP_SIGNATURES, TypeChecker
from funcore.core.context import Context
from funcore.core.errors import (
    ApplyNonArrow,
    ArityMismatch,
    OccursCheckError,
    TypeCheckError,
    TypeMismatch,
    UndefinedVariable,
    UnificationError,
    UnifyMismatch,
)
from funcore.core.fresh import NameSupply
from funcore.core.subst import Substitution, free_vars, substitute, substitute_all
from funcore.core.types import BoolType, IntType, Type, TypeArrow
from funcore.core.unify import occurs_in, resolve, unify, unify_var
from funcore.core.utypes import UArrow, UBool, UInt, UType, UVar

__all__ = [
    # AST
    "Term",
    "IntLit",
    "BoolLit",
    "If",
    "PrimOp",
    "Primop",
    "Fn",
    "Rec",
    "Let",
    "App",
    "Var",
    # Types
    "Type",
    "TypeArrow",
    "IntType",
    "BoolType",
    # Unification types
    "UType",
    "UArrow",
    "UInt",
    "UBool",
    "UVar",
    # Context
    "Context",
    # Substitution
    "NameSupply",
    "Substitution",
    "free_vars",
    "substitute",
    "substitute_all",
    # Unification
    "unify",
    "unify_var",
    "occurs_in",
    "resolve",
    # Errors
    "TypeCheckError",
    "UndefinedVariable",
    "ApplyNonArrow",
    "ArityMismatch",
    "TypeMismatch",
    "UnificationError",
    "UnifyMismatch",
    "OccursCheckError",
    # Type Checker
    "PRIMOP_SIGNATURES",
    "TypeChecker",
]
