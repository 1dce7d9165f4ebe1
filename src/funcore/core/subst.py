"""Free-variable analysis and capture-avoiding substitution on terms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from loguru import logger

from funcore.core.ast import App, BoolLit, Fn, If, IntLit, Let, PrimOp, Rec, Term, Var
from funcore.core.fresh import fresh
from funcore.core.types import Type


def free_vars(term: Term) -> set[str]:
    """Return the set of names occurring free in a term.

    Args:
        term: Term to analyze

    Returns:
        Names referenced by the term and not bound by an enclosing binder
        inside it
    """
    match term:
        case IntLit() | BoolLit():
            return set()
        case Var(name):
            return {name}
        case If(cond, then_branch, else_branch):
            return free_vars(cond) | free_vars(then_branch) | free_vars(else_branch)
        case PrimOp(_, args):
            return _free_vars_all(args)
        case App(func, args):
            return free_vars(func) | _free_vars_all(args)
        case Fn(params, body):
            return free_vars(body) - {name for name, _ in params}
        case Rec(name, _, body):
            return free_vars(body) - {name}
        case Let(name, value, body):
            return free_vars(value) | (free_vars(body) - {name})
        case _:
            raise TypeError(f"Unknown term: {term}")


def _free_vars_all(terms: Iterable[Term]) -> set[str]:
    result: set[str] = set()
    for term in terms:
        result |= free_vars(term)
    return result


@dataclass(frozen=True)
class Substitution:
    """A single substitution [replacement/target]."""

    replacement: Term
    target: str

    def apply(self, term: Term) -> Term:
        """Apply this substitution to a term."""
        return substitute(self, term)

    def __str__(self) -> str:
        return f"[{self.replacement}/{self.target}]"


def substitute(s: Substitution, term: Term) -> Term:
    """Replace every free occurrence of ``s.target`` in ``term``.

    Binders in ``term`` whose names occur free in ``s.replacement`` are
    renamed to fresh names before the substitution descends into their scope,
    so no free variable of the replacement is captured.

    Args:
        s: The substitution to perform
        term: Term to substitute into

    Returns:
        The substituted term; ``term`` itself is never modified
    """
    match term:
        case Var(name):
            return s.replacement if name == s.target else term

        case IntLit() | BoolLit():
            return term

        case If(cond, then_branch, else_branch):
            return If(substitute(s, cond), substitute(s, then_branch), substitute(s, else_branch))

        case PrimOp(op, args):
            return PrimOp(op, [substitute(s, arg) for arg in args])

        case App(func, args):
            return App(substitute(s, func), [substitute(s, arg) for arg in args])

        case Let(name, value, body):
            new_value = substitute(s, value)
            if name == s.target:
                # target is shadowed in body
                return Let(name, new_value, body)
            name, body = _avoid_capture(name, body, free_vars(s.replacement))
            return Let(name, new_value, substitute(s, body))

        case Rec(name, ty, body):
            if name == s.target:
                return term
            name, body = _avoid_capture(name, body, free_vars(s.replacement))
            return Rec(name, ty, substitute(s, body))

        case Fn(params, body):
            if any(name == s.target for name, _ in params):
                return term
            replacement_fvs = free_vars(s.replacement)
            taken = {name for name, _ in params}
            new_params: list[tuple[str, Type]] = []
            for name, ty in params:
                name, body = _avoid_capture(name, body, replacement_fvs, taken)
                taken.add(name)
                new_params.append((name, ty))
            return Fn(new_params, substitute(s, body))

        case _:
            raise TypeError(f"Unknown term: {term}")


def _avoid_capture(
    name: str, body: Term, dangerous: set[str], taken: frozenset[str] | set[str] = frozenset()
) -> tuple[str, Term]:
    """Rename binder ``name`` throughout ``body`` if it would capture.

    The new name is neither free in ``body`` nor in ``dangerous``, and differs
    from every name in ``taken`` (sibling parameters of the same binder).
    """
    if name not in dangerous:
        return name, body
    avoid = dangerous | free_vars(body) | taken
    new_name = fresh(name)
    while new_name in avoid:
        new_name = fresh(name)
    logger.debug("subst.rename binder={} fresh={}", name, new_name)
    return new_name, substitute(Substitution(Var(new_name), name), body)


def substitute_all(substs: Iterable[Substitution], term: Term) -> Term:
    """Apply substitutions left to right, each to the previous result."""
    for s in substs:
        term = substitute(s, term)
    return term
