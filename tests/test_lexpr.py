import dataclasses

import pytest

# pylint: disable=redefined-builtin
from lambdaparse.lib.grammar import parse_expression
from lambdaparse.lib.lexpr import Abstraction, Application, LExpr, Variable, format


class TestFormat:
    @pytest.mark.parametrize(
        "expr, text",
        [
            (Variable("x"), "x"),
            (Abstraction("x", Variable("x")), "λ x.[x]"),
            (Application(Variable("f"), Variable("x")), "({f} {x})"),
            (
                Application(Application(Variable("f"), Variable("x")), Variable("y")),
                "({({f} {x})} {y})",
            ),
            (
                Application(Variable("f"), Application(Variable("x"), Variable("y"))),
                "({f} {({x} {y})})",
            ),
            (
                Abstraction("x", Application(Variable("y"), Variable("x"))),
                "λ x.[({y} {x})]",
            ),
            (
                Application(Abstraction("x", Variable("y")), Variable("x")),
                "({λ x.[y]} {x})",
            ),
        ],
    )
    def test_format(self, expr: LExpr, text: str) -> None:
        assert format(expr) == text

    def test_str_uses_format(self) -> None:
        expr = Abstraction("y", Abstraction("z", Variable("z")))
        assert str(expr) == format(expr) == "λ y.[λ z.[z]]"

    @pytest.mark.parametrize(
        "source, text",
        [
            ("(λx.x) t (λy.λz.z)", "({({λ x.[x]} {t})} {λ y.[λ z.[z]]})"),
            ("f x y z", "({({({f} {x})} {y})} {z})"),
            ("λx.y x", "λ x.[({y} {x})]"),
            ("λf.λx.f (f x)", "λ f.[λ x.[({f} {({f} {x})})]]"),
        ],
    )
    def test_format_parsed(self, source: str, text: str) -> None:
        assert format(parse_expression(source)) == text

    def test_format_long_application(self) -> None:
        expr: LExpr = Variable("x")
        expected = "x"
        for _ in range(4999):
            expr = Application(expr, Variable("x"))
            expected = f"({{{expected}}} {{x}})"
        assert format(expr) == expected

    def test_format_deep_abstraction(self) -> None:
        expr: LExpr = Variable("x")
        for _ in range(5000):
            expr = Abstraction("x", expr)
        assert format(expr) == "λ x.[" * 5000 + "x" + "]" * 5000

    def test_format_unknown_expression(self) -> None:
        with pytest.raises(TypeError, match="Unknown expression"):
            format(LExpr())


class TestLExpr:
    def test_structural_equality(self) -> None:
        assert Application(Variable("f"), Variable("x")) == Application(Variable("f"), Variable("x"))
        assert Application(Variable("f"), Variable("x")) != Application(Variable("x"), Variable("f"))
        assert Variable("x") != Abstraction("x", Variable("x"))

    def test_hashable(self) -> None:
        assert len({Variable("x"), Variable("x"), Abstraction("x", Variable("x"))}) == 2

    def test_immutable(self) -> None:
        expr = Abstraction("x", Variable("x"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            expr.param = "y"  # type: ignore [misc]
