"""Runtime errors raised by the evaluator."""

from __future__ import annotations

from funcore.core.ast import Primop, Term


class EvalError(Exception):
    """Base class for runtime errors."""

    def __init__(self, message: str):
        super().__init__(message)


class FreeVariable(EvalError):
    """A variable was reached during evaluation.

    Binders are substituted away before their bodies run, so this only
    happens for open terms.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Free variable during evaluation: {name}")


class BadPrimopArgs(EvalError):
    """Primitive operation applied to values of the wrong shape or count."""

    def __init__(self, op: Primop, args: list[Term]):
        self.op = op
        self.args = args
        args_str = ", ".join(str(arg) for arg in args)
        super().__init__(f"Bad arguments to primitive {op.name}: [{args_str}]")


class IfNonTrueFalse(EvalError):
    """Condition of a conditional did not evaluate to a boolean."""

    def __init__(self, value: Term):
        self.value = value
        super().__init__(f"Condition evaluated to non-boolean {value}")


class ArityMismatch(EvalError):
    """Function applied to the wrong number of arguments."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Function expects {expected} argument(s), but got {actual}")


class ApplyNonFn(EvalError):
    """Function position of an application evaluated to a non-function."""

    def __init__(self, value: Term):
        self.value = value
        super().__init__(f"Cannot apply non-function value {value}")
