"""Substitution-based evaluator for the core language.

There is no runtime environment: every binder is eliminated by substituting
the value it binds into its body before the body is evaluated.
"""

from typing import Callable

from funcore.core.ast import App, BoolLit, Fn, If, IntLit, Let, PrimOp, Primop, Rec, Term, Var
from funcore.core.subst import Substitution, substitute, substitute_all
from funcore.eval.errors import ApplyNonFn, ArityMismatch, BadPrimopArgs, FreeVariable, IfNonTrueFalse


def is_value(term: Term) -> bool:
    """Values are integer literals, boolean literals and function literals."""
    return isinstance(term, (IntLit, BoolLit, Fn))


class Evaluator:
    """Call-by-value, big-step evaluator."""

    def __init__(self) -> None:
        self.primitive_impls: dict[Primop, Callable[[list[Term]], Term]] = {
            Primop.EQUALS: self._int_eq,
            Primop.LESS_THAN: self._int_lt,
            Primop.PLUS: self._int_plus,
            Primop.MINUS: self._int_minus,
            Primop.TIMES: self._int_times,
            Primop.NEGATE: self._int_negate,
        }

    def _int_eq(self, args: list[Term]) -> Term:
        """Integer equality."""
        match args:
            case [IntLit(x), IntLit(y)]:
                return BoolLit(x == y)
        raise BadPrimopArgs(Primop.EQUALS, args)

    def _int_lt(self, args: list[Term]) -> Term:
        """Integer less than."""
        match args:
            case [IntLit(x), IntLit(y)]:
                return BoolLit(x < y)
        raise BadPrimopArgs(Primop.LESS_THAN, args)

    def _int_plus(self, args: list[Term]) -> Term:
        """Integer addition."""
        match args:
            case [IntLit(x), IntLit(y)]:
                return IntLit(x + y)
        raise BadPrimopArgs(Primop.PLUS, args)

    def _int_minus(self, args: list[Term]) -> Term:
        """Integer subtraction."""
        match args:
            case [IntLit(x), IntLit(y)]:
                return IntLit(x - y)
        raise BadPrimopArgs(Primop.MINUS, args)

    def _int_times(self, args: list[Term]) -> Term:
        """Integer multiplication."""
        match args:
            case [IntLit(x), IntLit(y)]:
                return IntLit(x * y)
        raise BadPrimopArgs(Primop.TIMES, args)

    def _int_negate(self, args: list[Term]) -> Term:
        """Integer negation."""
        match args:
            case [IntLit(x)]:
                return IntLit(-x)
        raise BadPrimopArgs(Primop.NEGATE, args)

    def evaluate(self, term: Term) -> Term:
        """Reduce a closed term to a value.

        Args:
            term: Term to evaluate

        Returns:
            An IntLit, BoolLit or Fn

        Raises:
            FreeVariable: If evaluation reaches a variable
            BadPrimopArgs: If a primitive gets operands of the wrong shape
            IfNonTrueFalse: If a condition is not a boolean
            ApplyNonFn: If a non-function is applied
            ArityMismatch: If a function gets the wrong number of arguments
        """
        match term:
            case IntLit() | BoolLit() | Fn():
                return term

            case Var(name):
                raise FreeVariable(name)

            case PrimOp(op, args):
                values = [self.evaluate(arg) for arg in args]
                return self.primitive_impls[op](values)

            case If(cond, then_branch, else_branch):
                match self.evaluate(cond):
                    case BoolLit(True):
                        return self.evaluate(then_branch)
                    case BoolLit(False):
                        return self.evaluate(else_branch)
                    case other:
                        raise IfNonTrueFalse(other)

            case Let(name, value, body):
                bound = self.evaluate(value)
                return self.evaluate(substitute(Substitution(bound, name), body))

            case Rec(name, _, body):
                # Each unfolding substitutes the whole unevaluated binding
                return self.evaluate(substitute(Substitution(term, name), body))

            case App(func, args):
                func_value = self.evaluate(func)
                if not isinstance(func_value, Fn):
                    raise ApplyNonFn(func_value)
                arg_values = [self.evaluate(arg) for arg in args]
                if len(arg_values) != len(func_value.params):
                    raise ArityMismatch(len(func_value.params), len(arg_values))
                substs = [
                    Substitution(value, name)
                    for (name, _), value in zip(func_value.params, arg_values)
                ]
                return self.evaluate(substitute_all(substs, func_value.body))

            case _:
                raise TypeError(f"Unknown term: {term}")
