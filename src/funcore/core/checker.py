"""Syntax-directed type checker for the explicitly annotated core language."""

from typing import Sequence

from funcore.core.ast import App, BoolLit, Fn, If, IntLit, Let, PrimOp, Primop, Rec, Term, Var
from funcore.core.context import Context
from funcore.core.errors import ApplyNonArrow, ArityMismatch, TypeMismatch, UndefinedVariable
from funcore.core.types import BoolType, IntType, Type, TypeArrow

INT = IntType()
BOOL = BoolType()

# Fixed domain and range of every primitive operation.
PRIMOP_SIGNATURES: dict[Primop, TypeArrow] = {
    Primop.EQUALS: TypeArrow([INT, INT], BOOL),
    Primop.LESS_THAN: TypeArrow([INT, INT], BOOL),
    Primop.PLUS: TypeArrow([INT, INT], INT),
    Primop.MINUS: TypeArrow([INT, INT], INT),
    Primop.TIMES: TypeArrow([INT, INT], INT),
    Primop.NEGATE: TypeArrow([INT], INT),
}


class TypeChecker:
    """Type checker for terms with fully annotated binders.

    Exactly one rule applies per term shape. Nothing is unified or
    generalized; types are compared by structural equality.
    """

    def __init__(self, primitive_signatures: dict[Primop, TypeArrow] | None = None):
        """Initialize with primitive operation signatures.

        Args:
            primitive_signatures: Maps each primitive operation to its type.
                Defaults to ``PRIMOP_SIGNATURES``.
        """
        self.primitive_signatures = (
            primitive_signatures if primitive_signatures is not None else PRIMOP_SIGNATURES
        )

    def infer(self, ctx: Context, term: Term) -> Type:
        """Synthesize the type of a term.

        Args:
            ctx: Typing context
            term: Term to infer type for

        Returns:
            The inferred type

        Raises:
            UndefinedVariable: If a variable is not in context
            ApplyNonArrow: If a non-function is applied
            ArityMismatch: If an argument or operand count is wrong
            TypeMismatch: If types don't match
        """
        match term:
            case Var(name):
                try:
                    return ctx.lookup(name)
                except KeyError as e:
                    raise UndefinedVariable(name) from e

            case IntLit(_):
                return INT

            case BoolLit(_):
                return BOOL

            case PrimOp(op, args):
                signature = self.primitive_signatures[op]
                arg_types = [self.infer(ctx, arg) for arg in args]
                self._check_args(signature.params, arg_types)
                return signature.ret

            case If(cond, then_branch, else_branch):
                cond_type = self.infer(ctx, cond)
                if cond_type != BOOL:
                    raise TypeMismatch(BOOL, cond_type)
                then_type = self.infer(ctx, then_branch)
                else_type = self.infer(ctx, else_branch)
                if then_type != else_type:
                    raise TypeMismatch(then_type, else_type)
                return then_type

            case Let(name, value, body):
                value_type = self.infer(ctx, value)
                return self.infer(ctx.extend(name, value_type), body)

            case Rec(name, declared, body):
                body_type = self.infer(ctx.extend(name, declared), body)
                if body_type != declared:
                    raise TypeMismatch(declared, body_type)
                return declared

            case Fn(params, body):
                body_type = self.infer(ctx.extend_many(params), body)
                return TypeArrow([ty for _, ty in params], body_type)

            case App(func, args):
                func_type = self.infer(ctx, func)
                match func_type:
                    case TypeArrow(param_types, ret_type):
                        arg_types = [self.infer(ctx, arg) for arg in args]
                        self._check_args(param_types, arg_types)
                        return ret_type
                    case _:
                        raise ApplyNonArrow(func_type)

            case _:
                raise TypeError(f"Unknown term: {term}")

    def _check_args(self, expected: Sequence[Type], actual: Sequence[Type]) -> None:
        """Compare argument types against declared parameter types in order."""
        if len(expected) != len(actual):
            raise ArityMismatch(len(expected), len(actual))
        for param_type, arg_type in zip(expected, actual):
            if param_type != arg_type:
                raise TypeMismatch(param_type, arg_type)
