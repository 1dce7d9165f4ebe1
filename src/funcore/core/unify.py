"""Destructive unification over types with mutable type variables."""

from loguru import logger

from funcore.core.errors import OccursCheckError, UnifyMismatch
from funcore.core.utypes import UArrow, UBool, UInt, UType, UVar


def occurs_in(var: UVar, t: UType) -> bool:
    """Check if a type variable occurs in a type, following bindings.

    Args:
        var: The type variable cell
        t: Type to check

    Returns:
        True if var occurs in t
    """
    match t:
        case UVar():
            if t is var:
                return True
            return t.is_bound and occurs_in(var, t.binding)
        case UArrow(arg, ret):
            return occurs_in(var, arg) or occurs_in(var, ret)
        case UInt() | UBool():
            return False
        case _:
            raise TypeError(f"Unknown type: {t}")


def resolve(t: UType) -> UType:
    """Return t with every bound variable replaced by its binding.

    Unbound variables are kept as the same cells.
    """
    match t:
        case UVar():
            if not t.is_bound:
                return t
            return resolve(t.binding)
        case UArrow(arg, ret):
            return UArrow(resolve(arg), resolve(ret))
        case _:
            return t


def unify(t1: UType, t2: UType) -> None:
    """Make two types equal by binding unbound type variables in place.

    Bindings made before a failure is detected are kept; there is no
    rollback.

    Args:
        t1: First type
        t2: Second type

    Raises:
        UnifyMismatch: If the types have incompatible shapes. For two function
            types the error cites t1 and t2 themselves, not the nested parts
            that failed.
        OccursCheckError: If a variable would be bound to a type containing it
    """
    match t1, t2:
        case UInt(), UInt():
            return

        case UBool(), UBool():
            return

        case UArrow(arg1, ret1), UArrow(arg2, ret2):
            try:
                unify(arg1, arg2)
                unify(ret1, ret2)
            except UnifyMismatch as e:
                raise UnifyMismatch(t1, t2) from e

        case UVar(), _:
            unify_var(t1, t2)

        case _, UVar():
            unify_var(t2, t1)

        case _:
            raise UnifyMismatch(t1, t2)


def unify_var(var: UVar, t: UType) -> None:
    """Unify a type variable with a type.

    Raises:
        UnificationError: As for :func:`unify`
    """
    if var.is_bound:
        unify(var.binding, t)
        return

    match t:
        case UVar() if not t.is_bound:
            if t is var:
                return
            _bind(var, t)
        case UVar():
            unify_var(var, t.binding)
        case _:
            if occurs_in(var, t):
                raise OccursCheckError(var, t)
            _bind(var, t)


def _bind(var: UVar, t: UType) -> None:
    logger.debug("unify.bind var={} type={}", f"'t{var.id}", t)
    var.bind(t)
