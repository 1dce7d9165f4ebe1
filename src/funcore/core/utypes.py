"""Unification types: curried types with mutable type variables.

This is a separate representation from ``funcore.core.types``; only the
unifier works on it.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Optional, Union


class UType:
    """Base class for unification types."""

    pass


@dataclass(frozen=True)
class UArrow(UType):
    """Function type: σ → τ (single parameter, curried)."""

    arg: UType
    ret: UType

    def __str__(self) -> str:
        match self.arg:
            case UArrow():
                arg_str = f"({self.arg})"
            case _:
                arg_str = str(self.arg)
        return f"{arg_str} -> {self.ret}"


@dataclass(frozen=True)
class UInt(UType):
    """Integer type."""

    def __str__(self) -> str:
        return "Int"


@dataclass(frozen=True)
class UBool(UType):
    """Boolean type."""

    def __str__(self) -> str:
        return "Bool"


_var_ids = itertools.count(0)


@dataclass(eq=False)
class UVar(UType):
    """Type variable: a mutable cell, unbound or bound to a type.

    Cells are compared by identity. The same cell may appear in many types,
    and binding it is visible through all of them.
    """

    binding: Optional[UType] = None
    id: int = field(default_factory=lambda: next(_var_ids))

    @property
    def is_bound(self) -> bool:
        return self.binding is not None

    def bind(self, t: UType) -> None:
        self.binding = t

    def __str__(self) -> str:
        if self.binding is not None:
            return str(self.binding)
        return f"'t{self.id}"

    def __repr__(self) -> str:
        return f"UVar(id={self.id}, binding={self.binding!r})"


UTypeRepr = Union[UArrow, UInt, UBool, UVar]
