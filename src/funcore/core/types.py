"""Type representations for the checked language."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


class Type:
    """Base class for types.

    Types are compared structurally; there is no subtyping.
    """

    pass


@dataclass(frozen=True)
class TypeArrow(Type):
    """Function type: (τ₁, ..., τₙ) -> τ.

    The parameter list may be empty, which types a nullary function.
    """

    params: tuple[Type, ...]
    ret: Type

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))

    def __str__(self) -> str:
        match self.params:
            case [TypeArrow() as only]:
                params_str = f"({only})"
            case [only]:
                params_str = str(only)
            case _:
                params_str = "(" + ", ".join(str(p) for p in self.params) + ")"
        return f"{params_str} -> {self.ret}"


@dataclass(frozen=True)
class IntType(Type):
    """Integer type."""

    def __str__(self) -> str:
        return "Int"


@dataclass(frozen=True)
class BoolType(Type):
    """Boolean type."""

    def __str__(self) -> str:
        return "Bool"


TypeRepr = Union[TypeArrow, IntType, BoolType]
