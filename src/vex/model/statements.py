"""Statement nodes for the syntax tree."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, model_validator

from .expressions import CallExpr, Condition, Expression, ValueExpression
from .source import SourceSpan, TypeTag


class AssignOp(str, Enum):
    ASSIGN = "="
    INCREMENT = "++"
    DECREMENT = "--"
    ADD = "+="
    SUB = "-="
    MUL = "*="
    DIV = "/="
    MOD = "%="

    @property
    def takes_value(self) -> bool:
        return self not in (AssignOp.INCREMENT, AssignOp.DECREMENT)


class Declarator(BaseModel):
    """``name [= initializer]`` inside a declaration.

    *span* locates the declaring identifier.
    """

    name: str
    initializer: ValueExpression | None = None
    span: SourceSpan = SourceSpan()


class Declaration(BaseModel):
    kind: Literal["declaration"] = "declaration"
    type_tag: TypeTag
    declarators: list[Declarator]
    span: SourceSpan = SourceSpan()

    @model_validator(mode="after")
    def _not_empty(self):
        if not self.declarators:
            raise ValueError("declaration requires at least one declarator")
        return self


class Assignment(BaseModel):
    kind: Literal["assignment"] = "assignment"
    target: str
    op: AssignOp = AssignOp.ASSIGN
    value: ValueExpression | None = None
    span: SourceSpan = SourceSpan()

    @model_validator(mode="after")
    def _value_matches_op(self):
        if self.op.takes_value and self.value is None:
            raise ValueError(f"'{self.op.value}' assignment requires a value")
        if not self.op.takes_value and self.value is not None:
            raise ValueError(f"'{self.op.value}' assignment takes no value")
        return self


class ExpressionStatement(BaseModel):
    """A bare arithmetic expression used as a statement."""

    kind: Literal["expression"] = "expression"
    expr: Expression
    span: SourceSpan = SourceSpan()


class IfStatement(BaseModel):
    """``if (condition) { body } [else { else_body }]``.

    *else_body* is None when there is no else branch; an empty list
    means an empty else block.
    """

    kind: Literal["if"] = "if"
    condition: Condition
    body: list[Statement] = []
    else_body: list[Statement] | None = None
    span: SourceSpan = SourceSpan()

    @property
    def has_else(self) -> bool:
        return self.else_body is not None


class ForStatement(BaseModel):
    kind: Literal["for"] = "for"
    init: Declaration | None = None
    condition: Condition | None = None
    update: Assignment | None = None
    body: list[Statement] = []
    span: SourceSpan = SourceSpan()


class WhileStatement(BaseModel):
    kind: Literal["while"] = "while"
    condition: Condition | None = None
    body: list[Statement] = []
    span: SourceSpan = SourceSpan()


class ReturnStatement(BaseModel):
    kind: Literal["return"] = "return"
    value: ValueExpression | None = None
    span: SourceSpan = SourceSpan()


class CallStatement(BaseModel):
    """Call a function as a statement."""

    kind: Literal["call_stmt"] = "call_stmt"
    call: CallExpr
    span: SourceSpan = SourceSpan()


Statement = Annotated[
    Union[
        Declaration,
        Assignment,
        ExpressionStatement,
        IfStatement,
        ForStatement,
        WhileStatement,
        ReturnStatement,
        CallStatement,
    ],
    Field(discriminator="kind"),
]

# Rebuild models with recursive Statement references.
IfStatement.model_rebuild()
ForStatement.model_rebuild()
WhileStatement.model_rebuild()
