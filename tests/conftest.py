"""Shared test helpers for the vex test suite."""

from vex.model import (
    AdditiveExpr,
    AdditiveOp,
    Assignment,
    AssignOp,
    CallExpr,
    Comparison,
    CompareOp,
    Declaration,
    Declarator,
    EntryFunction,
    MultiplicativeExpr,
    MultiplicativeOp,
    NumberLiteral,
    ParenExpr,
    Program,
    SourceSpan,
    TextLiteral,
    TypeTag,
    VariableRef,
)


def num(value) -> NumberLiteral:
    return NumberLiteral(value=str(value))


def var(name: str) -> VariableRef:
    return VariableRef(name=name)


def text(value: str) -> TextLiteral:
    return TextLiteral(value=value)


def add(left, right) -> AdditiveExpr:
    return AdditiveExpr(op=AdditiveOp.ADD, left=left, right=right)


def sub(left, right) -> AdditiveExpr:
    return AdditiveExpr(op=AdditiveOp.SUB, left=left, right=right)


def mul(left, right) -> MultiplicativeExpr:
    return MultiplicativeExpr(op=MultiplicativeOp.MUL, left=left, right=right)


def div(left, right) -> MultiplicativeExpr:
    return MultiplicativeExpr(op=MultiplicativeOp.DIV, left=left, right=right)


def mod(left, right) -> MultiplicativeExpr:
    return MultiplicativeExpr(op=MultiplicativeOp.MOD, left=left, right=right)


def paren(inner) -> ParenExpr:
    return ParenExpr(inner=inner)


def call(name: str, *args) -> CallExpr:
    return CallExpr(name=name, args=list(args))


def cmp(op: CompareOp, left, right) -> Comparison:
    return Comparison(op=op, left=left, right=right)


def span(line: int, start: int = -1, stop: int = -1, end_line: int | None = None) -> SourceSpan:
    return SourceSpan(line=line, start=start, stop=stop, end_line=end_line)


def declare(type_tag: TypeTag, *pairs, line: int = 0) -> Declaration:
    """Build a declaration from ``(name, initializer_or_None)`` pairs."""
    return Declaration(
        type_tag=type_tag,
        declarators=[
            Declarator(name=name, initializer=init, span=span(line))
            for name, init in pairs
        ],
        span=span(line),
    )


def assign(target: str, value=None, op: AssignOp = AssignOp.ASSIGN) -> Assignment:
    return Assignment(target=target, op=op, value=value)


def make_program(stmts=None, globals_=None) -> Program:
    """Build a Program whose entry block holds *stmts*."""
    return Program(
        globals=globals_ or [],
        entry=EntryFunction(body=stmts or []),
    )
