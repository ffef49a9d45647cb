"""vex syntax tree: the input contract of the evaluator and analyzer.

Trees are produced by an external front end and consumed read-only::

    from vex.model import Program, Declaration, Declarator, NumberLiteral
"""

from .adapters import (
    build_declaration,
    build_if_statement,
    pair_initializers,
    split_if_else,
)
from .expressions import (
    AdditiveExpr,
    AdditiveOp,
    ArithmeticTerm,
    BoolLiteral,
    CallExpr,
    ChainLink,
    Comparison,
    CompareOp,
    Condition,
    Expression,
    LogicalChain,
    LogicalOp,
    MultiplicativeExpr,
    MultiplicativeOp,
    NotTerm,
    NullLiteral,
    NumberLiteral,
    ParenCondition,
    ParenExpr,
    TextLiteral,
    ValueExpression,
    VariableRef,
)
from .program import (
    ENTRY_FUNCTION_NAME,
    EntryFunction,
    FunctionDeclaration,
    GlobalDeclaration,
    Parameter,
    Program,
)
from .source import SourceSpan, TypeTag
from .statements import (
    AssignOp,
    Assignment,
    CallStatement,
    Declaration,
    Declarator,
    ExpressionStatement,
    ForStatement,
    IfStatement,
    ReturnStatement,
    Statement,
    WhileStatement,
)

__all__ = [
    "AdditiveExpr",
    "AdditiveOp",
    "ArithmeticTerm",
    "AssignOp",
    "Assignment",
    "BoolLiteral",
    "CallExpr",
    "CallStatement",
    "ChainLink",
    "Comparison",
    "CompareOp",
    "Condition",
    "Declaration",
    "Declarator",
    "ENTRY_FUNCTION_NAME",
    "EntryFunction",
    "Expression",
    "ExpressionStatement",
    "ForStatement",
    "FunctionDeclaration",
    "GlobalDeclaration",
    "IfStatement",
    "LogicalChain",
    "LogicalOp",
    "MultiplicativeExpr",
    "MultiplicativeOp",
    "NotTerm",
    "NullLiteral",
    "NumberLiteral",
    "Parameter",
    "ParenCondition",
    "ParenExpr",
    "Program",
    "ReturnStatement",
    "SourceSpan",
    "Statement",
    "TextLiteral",
    "TypeTag",
    "ValueExpression",
    "VariableRef",
    "WhileStatement",
    "build_declaration",
    "build_if_statement",
    "pair_initializers",
    "split_if_else",
]
