"""Tests for types and term construction."""

import pytest

from funcore.core.ast import App, Fn, IntLit, Let, PrimOp, Primop, Rec, Var
from funcore.core.types import BoolType, IntType, TypeArrow

INT = IntType()
BOOL = BoolType()


class TestTypeEquality:
    """Types compare structurally."""

    def test_base(self):
        assert IntType() == IntType()
        assert IntType() != BoolType()

    def test_arrow(self):
        assert TypeArrow([INT, BOOL], INT) == TypeArrow([INT, BOOL], INT)
        assert TypeArrow([INT, BOOL], INT) != TypeArrow([BOOL, INT], INT)
        assert TypeArrow([], INT) != TypeArrow([INT], INT)


class TestHashing:
    """Frozen types and terms can be used as set members and dict keys."""

    def test_types_hashable(self):
        types = {TypeArrow([INT], INT), TypeArrow((INT,), INT), TypeArrow([], BOOL)}
        assert len(types) == 2

    def test_terms_hashable(self):
        fn = Fn([("x", INT)], PrimOp(Primop.PLUS, [Var("x"), IntLit(1)]))
        table = {App(fn, [IntLit(2)]): "call"}
        assert table[App(fn, (IntLit(2),))] == "call"

    def test_sequences_stored_as_tuples(self):
        fn = Fn([("x", INT)], App(Var("f"), [Var("x")]))
        assert isinstance(fn.params, tuple)
        assert isinstance(fn.body.args, tuple)
        assert isinstance(TypeArrow([INT], INT).params, tuple)


class TestTypeStr:
    """Tests for type rendering."""

    def test_single_param(self):
        assert str(TypeArrow([INT], BOOL)) == "Int -> Bool"

    def test_many_params(self):
        assert str(TypeArrow([INT, BOOL], INT)) == "(Int, Bool) -> Int"

    def test_nullary(self):
        assert str(TypeArrow([], INT)) == "() -> Int"

    def test_arrow_param_parenthesized(self):
        assert str(TypeArrow([TypeArrow([INT], INT)], INT)) == "(Int -> Int) -> Int"

    def test_arrow_result(self):
        assert str(TypeArrow([INT], TypeArrow([INT], INT))) == "Int -> Int -> Int"


class TestTerms:
    """Tests for term construction and rendering."""

    def test_duplicate_params_rejected(self):
        with pytest.raises(ValueError):
            Fn([("x", INT), ("x", BOOL)], Var("x"))

    def test_param_names(self):
        assert Fn([("x", INT), ("y", BOOL)], Var("x")).param_names == ["x", "y"]

    def test_str(self):
        term = Let("x", IntLit(1), PrimOp(Primop.PLUS, [Var("x"), IntLit(5)]))
        assert str(term) == "(let x = 1 in (x + 5))"

    def test_str_fn_and_rec(self):
        term = App(Rec("f", TypeArrow([INT], INT), Fn([("n", INT)], App(Var("f"), [Var("n")]))), [IntLit(2)])
        assert str(term) == "(rec f:Int -> Int. (fn (n:Int) => f(n)))(2)"

    def test_str_negate(self):
        assert str(PrimOp(Primop.NEGATE, [IntLit(3)])) == "(~3)"
