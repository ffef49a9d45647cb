"""Source text reconstruction for expression trees.

Rebuilds the token text of an expression the way a parse tree reports
it: tokens concatenated with no whitespace (``a+b*2``, ``sqrt(x)``).
Parentheses appear only where the tree has a ``ParenExpr``.
"""

from __future__ import annotations

from vex.errors import InternalInvariantError
from vex.model.expressions import (
    AdditiveExpr,
    CallExpr,
    MultiplicativeExpr,
    NumberLiteral,
    ParenExpr,
    TextLiteral,
    ValueExpression,
    VariableRef,
)


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def to_source_text(expr: ValueExpression) -> str:
    """Return the source text of an initializer or arithmetic expression."""
    w = TextWriter()
    w.write_expression(expr)
    return w.getvalue()


class TextWriter:
    """Walks expression models and appends token text to a buffer."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def getvalue(self) -> str:
        return "".join(self._parts)

    def write_expression(self, expr: ValueExpression) -> None:
        if isinstance(expr, NumberLiteral):
            self._parts.append(expr.value)
        elif isinstance(expr, TextLiteral):
            self._parts.append(_quote(expr.value))
        elif isinstance(expr, VariableRef):
            self._parts.append(expr.name)
        elif isinstance(expr, (AdditiveExpr, MultiplicativeExpr)):
            self.write_expression(expr.left)
            self._parts.append(expr.op.value)
            self.write_expression(expr.right)
        elif isinstance(expr, ParenExpr):
            self._parts.append("(")
            self.write_expression(expr.inner)
            self._parts.append(")")
        elif isinstance(expr, CallExpr):
            self._parts.append(expr.name)
            self._parts.append("(")
            for i, arg in enumerate(expr.args):
                if i:
                    self._parts.append(",")
                self.write_expression(arg)
            self._parts.append(")")
        else:
            raise InternalInvariantError(
                f"Cannot render expression kind: {type(expr).__name__}"
            )
