"""Expression nodes: arithmetic values and logical conditions."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class AdditiveOp(str, Enum):
    ADD = "+"
    SUB = "-"


class MultiplicativeOp(str, Enum):
    MUL = "*"
    DIV = "/"
    MOD = "%"


class CompareOp(str, Enum):
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    EQ = "=="
    NE = "!="


class LogicalOp(str, Enum):
    AND = "&&"
    OR = "||"


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------

class NumberLiteral(BaseModel):
    """A numeric constant, kept as written (e.g. ``42``, ``3.14``)."""

    kind: Literal["number"] = "number"
    value: str


class TextLiteral(BaseModel):
    """A string constant.

    *value* is the decoded text: no surrounding quotes, escapes resolved.
    """

    kind: Literal["text"] = "text"
    value: str


class VariableRef(BaseModel):
    """Reference to a variable by name."""

    kind: Literal["variable_ref"] = "variable_ref"
    name: str


class AdditiveExpr(BaseModel):
    kind: Literal["additive"] = "additive"
    op: AdditiveOp
    left: Expression
    right: Expression


class MultiplicativeExpr(BaseModel):
    kind: Literal["multiplicative"] = "multiplicative"
    op: MultiplicativeOp
    left: Expression
    right: Expression


class ParenExpr(BaseModel):
    kind: Literal["paren"] = "paren"
    inner: Expression


class CallExpr(BaseModel):
    """Call of a named function with positional arguments."""

    kind: Literal["call"] = "call"
    name: str
    args: list[Expression] = []


Expression = Annotated[
    Union[
        NumberLiteral,
        VariableRef,
        AdditiveExpr,
        MultiplicativeExpr,
        ParenExpr,
        CallExpr,
    ],
    Field(discriminator="kind"),
]

# Right-hand side of declarators and plain assignments.
ValueExpression = Annotated[
    Union[
        NumberLiteral,
        VariableRef,
        AdditiveExpr,
        MultiplicativeExpr,
        ParenExpr,
        CallExpr,
        TextLiteral,
    ],
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------------
# Logical conditions
# ---------------------------------------------------------------------------

class Comparison(BaseModel):
    kind: Literal["comparison"] = "comparison"
    op: CompareOp
    left: Expression
    right: Expression


class ArithmeticTerm(BaseModel):
    """Bare arithmetic used as a condition: true when non-zero."""

    kind: Literal["arith_term"] = "arith_term"
    expr: Expression


class NotTerm(BaseModel):
    kind: Literal["not"] = "not"
    operand: Condition


class ParenCondition(BaseModel):
    kind: Literal["paren_condition"] = "paren_condition"
    inner: Condition


class BoolLiteral(BaseModel):
    kind: Literal["bool"] = "bool"
    value: bool


class NullLiteral(BaseModel):
    kind: Literal["null"] = "null"


class ChainLink(BaseModel):
    """One ``op term`` step following the head of a logical chain."""

    op: LogicalOp
    term: Condition


class LogicalChain(BaseModel):
    """``head op term op term ...``, combined left to right."""

    kind: Literal["chain"] = "chain"
    head: Condition
    links: list[ChainLink] = []


Condition = Annotated[
    Union[
        Comparison,
        ArithmeticTerm,
        NotTerm,
        ParenCondition,
        BoolLiteral,
        NullLiteral,
        LogicalChain,
    ],
    Field(discriminator="kind"),
]

# Rebuild models with recursive Expression/Condition references.
AdditiveExpr.model_rebuild()
MultiplicativeExpr.model_rebuild()
ParenExpr.model_rebuild()
CallExpr.model_rebuild()
Comparison.model_rebuild()
ArithmeticTerm.model_rebuild()
NotTerm.model_rebuild()
ParenCondition.model_rebuild()
ChainLink.model_rebuild()
LogicalChain.model_rebuild()
