"""Builders for front ends that only produce token-ordered flat sequences.

A parse tree that exposes an ``if``/``else`` as one statement list plus
its brace tokens, or a declaration as separate identifier and initializer
lists, is turned into the structured nodes of :mod:`vex.model` here.
Correlation is purely positional, on source character offsets.
"""

from __future__ import annotations

from collections.abc import Sequence

from .expressions import Condition, ValueExpression
from .source import SourceSpan, TypeTag
from .statements import Declaration, Declarator, IfStatement, Statement


def split_if_else(
    statements: Sequence[Statement],
    closing_braces: Sequence[SourceSpan],
) -> tuple[list[Statement], list[Statement]]:
    """Split a flat if/else statement list at the first closing brace.

    Statements starting before the stop offset of the first ``}`` go to
    the if-branch, all others to the else-branch.  A nested block inside
    the if-branch that closes first moves the split point too early;
    flat parse trees have always split this way.
    """
    if not closing_braces:
        return list(statements), []

    split_at = closing_braces[0].stop
    body: list[Statement] = []
    else_body: list[Statement] = []
    for stmt in statements:
        if stmt.span.start < split_at:
            body.append(stmt)
        else:
            else_body.append(stmt)
    return body, else_body


def build_if_statement(
    condition: Condition,
    statements: Sequence[Statement],
    closing_braces: Sequence[SourceSpan],
    *,
    has_else: bool,
    span: SourceSpan | None = None,
) -> IfStatement:
    """Build an :class:`IfStatement` from a flat statement/brace sequence."""
    if not has_else:
        return IfStatement(
            condition=condition,
            body=list(statements),
            span=span or SourceSpan(),
        )
    body, else_body = split_if_else(statements, closing_braces)
    return IfStatement(
        condition=condition,
        body=body,
        else_body=else_body,
        span=span or SourceSpan(),
    )


def pair_initializers(
    identifiers: Sequence[SourceSpan],
    initializers: Sequence[tuple[int, ValueExpression]],
) -> list[ValueExpression | None]:
    """Match initializers to declarators by source position.

    *identifiers* are the declarator name spans in source order;
    *initializers* are ``(start_offset, expression)`` pairs.  Declarator
    ``i`` receives the first initializer that starts after its identifier
    and before identifier ``i + 1``, or None.
    """
    paired: list[ValueExpression | None] = []
    for i, ident in enumerate(identifiers):
        upper = identifiers[i + 1].start if i + 1 < len(identifiers) else None
        match = None
        for start, expr in initializers:
            if start > ident.stop and (upper is None or start < upper):
                match = expr
                break
        paired.append(match)
    return paired


def build_declaration(
    type_tag: TypeTag,
    identifiers: Sequence[tuple[str, SourceSpan]],
    initializers: Sequence[tuple[int, ValueExpression]] = (),
    *,
    span: SourceSpan | None = None,
) -> Declaration:
    """Build a :class:`Declaration` from flat identifier/initializer lists."""
    values = pair_initializers([s for _, s in identifiers], initializers)
    declarators = [
        Declarator(name=name, initializer=value, span=ident_span)
        for (name, ident_span), value in zip(identifiers, values)
    ]
    return Declaration(
        type_tag=type_tag,
        declarators=declarators,
        span=span or SourceSpan(),
    )
