"""Named sample programs used by the command line driver."""

from __future__ import annotations

from dataclasses import dataclass

from funcore.core.ast import App, BoolLit, Fn, If, IntLit, Let, PrimOp, Primop, Rec, Term, Var
from funcore.core.types import BoolType, IntType, TypeArrow

INT = IntType()
BOOL = BoolType()


@dataclass(frozen=True)
class Sample:
    """A closed program with a short description."""

    name: str
    description: str
    term: Term


def factorial(n: int) -> Term:
    """rec f:Int -> Int. fn (x:Int) => if x == 0 then 1 else x * f(x - 1), applied to n."""
    body = Fn(
        [("x", INT)],
        If(
            PrimOp(Primop.EQUALS, [Var("x"), IntLit(0)]),
            IntLit(1),
            PrimOp(
                Primop.TIMES,
                [Var("x"), App(Var("f"), [PrimOp(Primop.MINUS, [Var("x"), IntLit(1)])])],
            ),
        ),
    )
    return App(Rec("f", TypeArrow([INT], INT), body), [IntLit(n)])


def _let_arith() -> Term:
    return Let("x", IntLit(1), PrimOp(Primop.PLUS, [Var("x"), IntLit(5)]))


def _shadowing() -> Term:
    return Let(
        "x",
        IntLit(1),
        Let("x", PrimOp(Primop.PLUS, [Var("x"), IntLit(10)]), PrimOp(Primop.TIMES, [Var("x"), IntLit(2)])),
    )


def _curried() -> Term:
    const = Fn([("y", INT)], Fn([("z", INT)], Var("y")))
    return App(App(const, [IntLit(7)]), [IntLit(0)])


def _higher_order() -> Term:
    twice = Fn(
        [("g", TypeArrow([INT], INT)), ("v", INT)],
        App(Var("g"), [App(Var("g"), [Var("v")])]),
    )
    negate = Fn([("n", INT)], PrimOp(Primop.NEGATE, [Var("n")]))
    return App(twice, [negate, IntLit(21)])


def _sum_to() -> Term:
    body = Fn(
        [("n", INT), ("acc", INT)],
        If(
            PrimOp(Primop.LESS_THAN, [Var("n"), IntLit(1)]),
            Var("acc"),
            App(
                Var("loop"),
                [PrimOp(Primop.MINUS, [Var("n"), IntLit(1)]), PrimOp(Primop.PLUS, [Var("acc"), Var("n")])],
            ),
        ),
    )
    return App(Rec("loop", TypeArrow([INT, INT], INT), body), [IntLit(100), IntLit(0)])


def _nullary() -> Term:
    thunk = Fn([], If(BoolLit(True), IntLit(42), IntLit(0)))
    return App(thunk, [])


def _ill_typed() -> Term:
    add = Fn([("x", INT), ("y", INT)], PrimOp(Primop.PLUS, [Var("x"), Var("y")]))
    return App(add, [IntLit(3)])


SAMPLES: dict[str, Sample] = {
    sample.name: sample
    for sample in [
        Sample("let-arith", "let x = 1 in x + 5", _let_arith()),
        Sample("factorial", "factorial of 5 through a recursive binding", factorial(5)),
        Sample("shadowing", "an inner let shadows an outer one", _shadowing()),
        Sample("curried", "a curried function returning its first argument", _curried()),
        Sample("higher-order", "a function applied twice through a parameter", _higher_order()),
        Sample("sum-to", "tail-recursive sum of 1..100 with two parameters", _sum_to()),
        Sample("nullary", "a function of zero parameters", _nullary()),
        Sample("ill-typed", "a two-parameter function applied to one argument", _ill_typed()),
    ]
}


def get_sample(name: str) -> Sample:
    """Look up a sample by name.

    Raises:
        KeyError: If no sample has this name
    """
    return SAMPLES[name]
