"""Tests for source text reconstruction (vex.export.text)."""

import pytest

from conftest import add, call, div, mod, mul, num, paren, sub, text, var

from vex.errors import InternalInvariantError
from vex.export import to_source_text
from vex.model import BoolLiteral


class TestToSourceText:
    def test_number(self):
        assert to_source_text(num("3.50")) == "3.50"

    def test_variable(self):
        assert to_source_text(var("count")) == "count"

    def test_text_keeps_quotes(self):
        assert to_source_text(text("hello world")) == '"hello world"'

    def test_text_escapes_quote_and_backslash(self):
        assert to_source_text(text('say "hi"')) == r'"say \"hi\""'
        assert to_source_text(text('a\\b')) == r'"a\\b"'

    def test_binary_has_no_spaces(self):
        assert to_source_text(add(var("a"), mul(var("b"), num(2)))) == "a+b*2"

    def test_all_operators(self):
        expr = sub(div(num(1), num(2)), mod(num(3), num(4)))
        assert to_source_text(expr) == "1/2-3%4"

    def test_parentheses_only_where_present(self):
        assert to_source_text(mul(paren(add(num(1), num(2))), num(3))) == "(1+2)*3"

    def test_call(self):
        assert to_source_text(call("sqrt", add(var("x"), num(1)))) == "sqrt(x+1)"

    def test_call_multiple_args(self):
        assert to_source_text(call("f", num(1), var("y"))) == "f(1,y)"

    def test_call_no_args(self):
        assert to_source_text(call("g")) == "g()"

    def test_rejects_conditions(self):
        with pytest.raises(InternalInvariantError, match="BoolLiteral"):
            to_source_text(BoolLiteral(value=True))
