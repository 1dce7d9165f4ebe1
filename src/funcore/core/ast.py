"""Expression representation for the core language.

Variables are referenced by name. Scoping is resolved by substitution, so
no binder carries an index or environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from funcore.core.types import Type


class Primop(Enum):
    """Primitive operations with a fixed arity and signature."""

    EQUALS = "=="
    LESS_THAN = "<"
    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    NEGATE = "~"

    def __str__(self) -> str:
        return self.value


class Term:
    """Base class for terms."""

    pass


@dataclass(frozen=True)
class IntLit(Term):
    """Integer literal: 42"""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BoolLit(Term):
    """Boolean literal: true / false"""

    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class If(Term):
    """Conditional: if cond then t else f."""

    cond: Term
    then_branch: Term
    else_branch: Term

    def __str__(self) -> str:
        return f"(if {self.cond} then {self.then_branch} else {self.else_branch})"


@dataclass(frozen=True)
class PrimOp(Term):
    """Primitive operation applied to its operands.

    Example: PrimOp(Primop.PLUS, [Var("x"), IntLit(1)])  =>  (x + 1)
    """

    op: Primop
    args: tuple[Term, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    def __str__(self) -> str:
        match self.args:
            case [only]:
                return f"({self.op}{only})"
            case [left, right]:
                return f"({left} {self.op} {right})"
            case _:
                args_str = ", ".join(str(arg) for arg in self.args)
                return f"{self.op.name.lower()}({args_str})"


@dataclass(frozen=True)
class Fn(Term):
    """Function literal: fn (x₁:τ₁, ..., xₙ:τₙ) => body

    Parameter names must be pairwise distinct.
    """

    params: tuple[tuple[str, Type], ...]
    body: Term

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple((name, ty) for name, ty in self.params))
        names = [name for name, _ in self.params]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate parameter names in function literal: {names}")

    @property
    def param_names(self) -> list[str]:
        return [name for name, _ in self.params]

    def __str__(self) -> str:
        params_str = ", ".join(f"{name}:{ty}" for name, ty in self.params)
        return f"(fn ({params_str}) => {self.body})"


@dataclass(frozen=True)
class Rec(Term):
    """Recursive binding: rec f:τ. body

    Inside body, f refers to the whole construct.
    """

    name: str
    type: Type
    body: Term

    def __str__(self) -> str:
        return f"(rec {self.name}:{self.type}. {self.body})"


@dataclass(frozen=True)
class Let(Term):
    """Let binding: let name = value in body."""

    name: str
    value: Term
    body: Term

    def __str__(self) -> str:
        return f"(let {self.name} = {self.value} in {self.body})"


@dataclass(frozen=True)
class App(Term):
    """Function application: f(a₁, ..., aₙ)."""

    func: Term
    args: tuple[Term, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    def __str__(self) -> str:
        args_str = ", ".join(str(arg) for arg in self.args)
        return f"{self.func}({args_str})"


@dataclass(frozen=True)
class Var(Term):
    """Variable reference by name."""

    name: str

    def __str__(self) -> str:
        return self.name


TermRepr = Union[IntLit, BoolLit, If, PrimOp, Fn, Rec, Let, App, Var]
