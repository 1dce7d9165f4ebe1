"""Tests for free-variable analysis and capture-avoiding substitution."""

from funcore.core.ast import App, BoolLit, Fn, If, IntLit, Let, PrimOp, Primop, Rec, Var
from funcore.core.subst import Substitution, free_vars, substitute, substitute_all
from funcore.core.types import BoolType, IntType, TypeArrow

INT = IntType()
BOOL = BoolType()


def plus(a, b):
    return PrimOp(Primop.PLUS, [a, b])


class TestFreeVars:
    """Tests for free_vars."""

    def test_literals(self):
        """Literals have no free variables."""
        assert free_vars(IntLit(3)) == set()
        assert free_vars(BoolLit(False)) == set()

    def test_var(self):
        """A variable is free in itself."""
        assert free_vars(Var("x")) == {"x"}

    def test_union_of_children(self):
        """Non-binding forms collect the free variables of all children."""
        term = If(Var("c"), plus(Var("x"), Var("y")), App(Var("f"), [Var("x")]))
        assert free_vars(term) == {"c", "x", "y", "f"}

    def test_fn_removes_params(self):
        """fn (x:Int, y:Int) => x + z has only z free."""
        term = Fn([("x", INT), ("y", INT)], plus(Var("x"), Var("z")))
        assert free_vars(term) == {"z"}

    def test_rec_removes_name(self):
        """The recursive name is bound in its own body."""
        term = Rec("f", TypeArrow([INT], INT), Fn([("n", INT)], App(Var("f"), [Var("m")])))
        assert free_vars(term) == {"m"}

    def test_let_bound_expression_is_outside_scope(self):
        """let x = x in x + y: the first x is free, the body's x is not."""
        term = Let("x", Var("x"), plus(Var("x"), Var("y")))
        assert free_vars(term) == {"x", "y"}

    def test_let_body_binding(self):
        """let x = 1 in x has no free variables."""
        assert free_vars(Let("x", IntLit(1), Var("x"))) == set()


class TestSubstituteBasic:
    """Substitution into non-binding forms."""

    def test_var_hit(self):
        """[e/x]x = e"""
        assert substitute(Substitution(IntLit(1), "x"), Var("x")) == IntLit(1)

    def test_var_miss(self):
        """[e/x]y = y"""
        assert substitute(Substitution(IntLit(1), "x"), Var("y")) == Var("y")

    def test_literal_unchanged(self):
        """Literals are left as they are."""
        assert substitute(Substitution(IntLit(1), "x"), BoolLit(True)) == BoolLit(True)

    def test_structure_preserved(self):
        """Every occurrence under if, primop and application is replaced."""
        term = If(Var("x"), App(Var("f"), [Var("x"), Var("y")]), PrimOp(Primop.NEGATE, [Var("x")]))
        result = substitute(Substitution(BoolLit(True), "x"), term)
        expected = If(
            BoolLit(True),
            App(Var("f"), [BoolLit(True), Var("y")]),
            PrimOp(Primop.NEGATE, [BoolLit(True)]),
        )
        assert result == expected

    def test_apply_method(self):
        """Substitution.apply delegates to substitute."""
        s = Substitution(IntLit(2), "x")
        assert s.apply(plus(Var("x"), Var("x"))) == plus(IntLit(2), IntLit(2))


class TestShadowing:
    """A binder for the target name stops substitution."""

    def test_let_shadows_body(self):
        """[1/x](let x = x in x) = let x = 1 in x"""
        term = Let("x", Var("x"), Var("x"))
        result = substitute(Substitution(IntLit(1), "x"), term)
        assert result == Let("x", IntLit(1), Var("x"))

    def test_rec_shadows(self):
        """[1/f](rec f:τ. f) is unchanged."""
        term = Rec("f", TypeArrow([INT], INT), Fn([("n", INT)], App(Var("f"), [Var("n")])))
        assert substitute(Substitution(IntLit(1), "f"), term) is term

    def test_fn_param_shadows(self):
        """[1/y](fn (x:Int, y:Int) => y) is unchanged."""
        term = Fn([("x", INT), ("y", INT)], Var("y"))
        assert substitute(Substitution(IntLit(1), "y"), term) is term


class TestCaptureAvoidance:
    """Binders that would capture a free variable of the replacement are renamed."""

    def test_fn_param_renamed(self):
        """[z/x](fn (z:Int) => x) = fn (z_0:Int) => z"""
        result = substitute(Substitution(Var("z"), "x"), Fn([("z", INT)], Var("x")))
        assert result == Fn([("z_0", INT)], Var("z"))

    def test_fn_body_references_follow_rename(self):
        """[y/x](fn (y:Int) => x + y) = fn (y_0:Int) => y + y_0"""
        term = Fn([("y", INT)], plus(Var("x"), Var("y")))
        result = substitute(Substitution(Var("y"), "x"), term)
        assert result == Fn([("y_0", INT)], plus(Var("y"), Var("y_0")))

    def test_fn_only_dangerous_params_renamed(self):
        """Parameters not free in the replacement keep their names, order and types."""
        term = Fn([("a", INT), ("c", INT), ("b", BOOL)], Var("x"))
        result = substitute(Substitution(plus(Var("a"), Var("b")), "x"), term)
        assert result == Fn([("a_0", INT), ("c", INT), ("b_1", BOOL)], plus(Var("a"), Var("b")))

    def test_let_renamed(self):
        """[y/x](let y = 0 in x + y) = let y_0 = 0 in y + y_0"""
        term = Let("y", IntLit(0), plus(Var("x"), Var("y")))
        result = substitute(Substitution(Var("y"), "x"), term)
        assert result == Let("y_0", IntLit(0), plus(Var("y"), Var("y_0")))

    def test_let_bound_expression_substituted_before_rename(self):
        """The bound expression is outside the binder's scope and is never renamed."""
        term = Let("y", Var("x"), Var("y"))
        result = substitute(Substitution(Var("y"), "x"), term)
        assert result == Let("y_0", Var("y"), Var("y_0"))

    def test_rec_renamed(self):
        """[f/x](rec f:τ. fn (n:Int) => f(x)) renames the recursive name."""
        ty = TypeArrow([INT], INT)
        term = Rec("f", ty, Fn([("n", INT)], App(Var("f"), [Var("x")])))
        result = substitute(Substitution(Var("f"), "x"), term)
        assert result == Rec("f_0", ty, Fn([("n", INT)], App(Var("f_0"), [Var("f")])))

    def test_replacement_free_vars_stay_free(self):
        """Nothing free in the replacement ends up bound after substitution."""
        replacement = plus(Var("a"), Var("b"))
        term = Let("a", IntLit(1), Fn([("b", INT)], Rec("c", INT, plus(Var("x"), Var("c")))))
        result = substitute(Substitution(replacement, "x"), term)
        assert {"a", "b"} <= free_vars(result)
        assert "x" not in free_vars(result)

    def test_fresh_name_skips_free_names_of_body(self):
        """A generated name already free in the body is passed over."""
        term = Fn([("z", INT)], plus(Var("x"), Var("z_0")))
        result = substitute(Substitution(Var("z"), "x"), term)
        assert result == Fn([("z_1", INT)], plus(Var("z"), Var("z_0")))
        assert free_vars(result) == {"z", "z_0"}

    def test_fresh_name_skips_sibling_params(self):
        """A renamed parameter never collides with another parameter."""
        term = Fn([("z", INT), ("z_0", BOOL)], Var("x"))
        result = substitute(Substitution(Var("z"), "x"), term)
        assert result == Fn([("z_1", INT), ("z_0", BOOL)], Var("z"))

    def test_let_fresh_name_skips_free_names_of_body(self):
        """[y/x](let y = 0 in x + y_0) keeps y_0 free."""
        term = Let("y", IntLit(0), plus(Var("x"), Var("y_0")))
        result = substitute(Substitution(Var("y"), "x"), term)
        assert result == Let("y_1", IntLit(0), plus(Var("y"), Var("y_0")))

    def test_no_rename_without_danger(self):
        """Closed replacements never trigger renaming."""
        term = Fn([("z", INT)], plus(Var("x"), Var("z")))
        result = substitute(Substitution(IntLit(4), "x"), term)
        assert result == Fn([("z", INT)], plus(IntLit(4), Var("z")))


class TestSubstituteAll:
    """Tests for applying a list of substitutions."""

    def test_left_to_right(self):
        """Later substitutions see the results of earlier ones."""
        substs = [Substitution(Var("y"), "x"), Substitution(IntLit(3), "y")]
        assert substitute_all(substs, Var("x")) == IntLit(3)

    def test_order_matters(self):
        """Reversing the list changes the result."""
        substs = [Substitution(IntLit(3), "y"), Substitution(Var("y"), "x")]
        assert substitute_all(substs, Var("x")) == Var("y")

    def test_empty(self):
        """No substitutions leaves the term alone."""
        assert substitute_all([], Var("x")) == Var("x")
