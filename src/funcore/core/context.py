"""Typing contexts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from funcore.core.types import Type


@dataclass(frozen=True)
class Context:
    """Typing context Γ: an ordered association from names to types.

    - bindings: (name, type) pairs, index 0 = most recent

    Contexts are never mutated; every extension returns a new context.
    """

    bindings: tuple[tuple[str, Type], ...] = ()

    @staticmethod
    def empty() -> Context:
        """Create an empty context."""
        return Context()

    def lookup(self, name: str) -> Type:
        """Look up the most recently bound type for a name.

        Args:
            name: Variable name

        Returns:
            The type of the variable

        Raises:
            KeyError: If the name is not bound in this context
        """
        for bound, ty in self.bindings:
            if bound == name:
                return ty
        raise KeyError(name)

    def extend(self, name: str, ty: Type) -> Context:
        """Extend context with a binding that shadows earlier ones."""
        return Context(((name, ty),) + self.bindings)

    def extend_many(self, bindings: Iterable[tuple[str, Type]]) -> Context:
        """Extend context with several bindings, added left to right."""
        ctx = self
        for name, ty in bindings:
            ctx = ctx.extend(name, ty)
        return ctx

    def __contains__(self, name: object) -> bool:
        return any(bound == name for bound, _ in self.bindings)

    def __len__(self) -> int:
        return len(self.bindings)

    def __str__(self) -> str:
        terms = ", ".join(f"{name}:{ty}" for name, ty in self.bindings)
        return f"Context([{terms}])"
