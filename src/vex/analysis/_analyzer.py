"""Function analyzer: static per-function reports over the syntax tree.

Two passes.  The first records each function's signature, local
variables and control structures; the second, run once every function
is recorded, flags functions whose own body calls them directly.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from vex.errors import InternalInvariantError
from vex.export import to_source_text
from vex.model.expressions import (
    AdditiveExpr,
    CallExpr,
    MultiplicativeExpr,
    ParenExpr,
    ValueExpression,
)
from vex.model.program import Program
from vex.model.source import SourceSpan, TypeTag
from vex.model.statements import (
    Assignment,
    CallStatement,
    Declaration,
    ExpressionStatement,
    ForStatement,
    IfStatement,
    ReturnStatement,
    Statement,
    WhileStatement,
)

from ._records import (
    ControlKind,
    ControlStructureInfo,
    FunctionInfo,
    LocalVariableInfo,
    ParameterInfo,
)

logger = logging.getLogger(__name__)


@dataclass
class _FunctionScan:
    """Mutable pass-one state for a single function."""

    name: str
    return_type: TypeTag
    is_entry: bool
    span: SourceSpan
    body: list[Statement]
    parameters: list[ParameterInfo] = field(default_factory=list)
    local_vars: list[LocalVariableInfo] = field(default_factory=list)
    controls: list[ControlStructureInfo] = field(default_factory=list)

    def build(self, is_recursive: bool) -> FunctionInfo:
        return FunctionInfo(
            name=self.name,
            return_type=self.return_type,
            is_entry=self.is_entry,
            is_recursive=is_recursive,
            start_line=self.span.line,
            end_line=self.span.last_line,
            parameters=tuple(self.parameters),
            locals=tuple(self.local_vars),
            control_structures=tuple(self.controls),
        )


class FunctionAnalyzer:
    """Walks a :class:`Program` and produces one :class:`FunctionInfo` per function.

    Declared functions come first in declaration order, the entry
    function last.  The analyzer holds no state between calls.
    """

    def analyze(self, program: Program) -> list[FunctionInfo]:
        scans: list[_FunctionScan] = []

        for func in program.functions:
            scan = _FunctionScan(
                name=func.name,
                return_type=func.return_type,
                is_entry=False,
                span=func.span,
                body=func.body,
                parameters=[
                    ParameterInfo(type_tag=p.type_tag, name=p.name)
                    for p in func.parameters
                ],
            )
            self._scan_body(func.body, scan)
            scans.append(scan)

        entry = program.entry
        scan = _FunctionScan(
            name=entry.name,
            return_type=entry.return_type,
            is_entry=True,
            span=entry.span,
            body=entry.body,
        )
        self._scan_body(entry.body, scan)
        scans.append(scan)

        results = []
        for scan in scans:
            recursive = self._body_calls(scan.body, scan.name)
            if recursive:
                logger.debug("Function '%s' calls itself directly", scan.name)
            logger.debug(
                "Recorded function '%s': %d parameter(s), %d local(s), %d control structure(s)",
                scan.name, len(scan.parameters), len(scan.local_vars), len(scan.controls),
            )
            results.append(scan.build(is_recursive=recursive))
        return results

    # -----------------------------------------------------------------------
    # Pass 1: locals and control structures
    # -----------------------------------------------------------------------

    def _scan_body(self, stmts: list[Statement], scan: _FunctionScan) -> None:
        for stmt in stmts:
            handler = self._SCAN_DISPATCH.get(stmt.kind)
            if handler is None:
                raise InternalInvariantError(f"Unsupported statement kind: {stmt.kind}")
            handler(self, stmt, scan)

    def _scan_declaration(self, stmt: Declaration, scan: _FunctionScan) -> None:
        for decl in stmt.declarators:
            text = to_source_text(decl.initializer) if decl.initializer is not None else ""
            scan.local_vars.append(LocalVariableInfo(
                type_tag=stmt.type_tag,
                name=decl.name,
                initializer_text=text,
                line=decl.span.line,
            ))

    def _scan_if(self, stmt: IfStatement, scan: _FunctionScan) -> None:
        kind = ControlKind.IF_ELSE if stmt.has_else else ControlKind.IF
        scan.controls.append(ControlStructureInfo(kind=kind, line=stmt.span.line))
        self._scan_body(stmt.body, scan)
        if stmt.else_body is not None:
            self._scan_body(stmt.else_body, scan)

    def _scan_for(self, stmt: ForStatement, scan: _FunctionScan) -> None:
        scan.controls.append(ControlStructureInfo(kind=ControlKind.FOR, line=stmt.span.line))
        if stmt.init is not None:
            self._scan_declaration(stmt.init, scan)
        self._scan_body(stmt.body, scan)

    def _scan_while(self, stmt: WhileStatement, scan: _FunctionScan) -> None:
        scan.controls.append(ControlStructureInfo(kind=ControlKind.WHILE, line=stmt.span.line))
        self._scan_body(stmt.body, scan)

    def _scan_nothing(self, _stmt: Statement, _scan: _FunctionScan) -> None:
        pass

    # Pass-one dispatch table
    _SCAN_DISPATCH: dict[str, Callable[[FunctionAnalyzer, Statement, _FunctionScan], None]] = {
        "declaration": _scan_declaration,
        "if": _scan_if,
        "for": _scan_for,
        "while": _scan_while,
        "assignment": _scan_nothing,
        "expression": _scan_nothing,
        "return": _scan_nothing,
        "call_stmt": _scan_nothing,
    }

    # -----------------------------------------------------------------------
    # Pass 2: direct self-call search
    # -----------------------------------------------------------------------

    def _body_calls(self, stmts: list[Statement], name: str) -> bool:
        return any(self._stmt_calls(stmt, name) for stmt in stmts)

    def _stmt_calls(self, stmt: Statement, name: str) -> bool:
        handler = self._CALL_DISPATCH.get(stmt.kind)
        if handler is None:
            raise InternalInvariantError(f"Unsupported statement kind: {stmt.kind}")
        return handler(self, stmt, name)

    def _declaration_calls(self, stmt: Declaration, name: str) -> bool:
        return any(
            d.initializer is not None and self._expr_calls(d.initializer, name)
            for d in stmt.declarators
        )

    def _assignment_calls(self, stmt: Assignment, name: str) -> bool:
        return stmt.value is not None and self._expr_calls(stmt.value, name)

    def _expression_calls(self, stmt: ExpressionStatement, name: str) -> bool:
        return self._expr_calls(stmt.expr, name)

    def _if_calls(self, stmt: IfStatement, name: str) -> bool:
        if self._body_calls(stmt.body, name):
            return True
        return stmt.else_body is not None and self._body_calls(stmt.else_body, name)

    def _loop_calls(self, stmt: ForStatement | WhileStatement, name: str) -> bool:
        return self._body_calls(stmt.body, name)

    def _return_calls(self, stmt: ReturnStatement, name: str) -> bool:
        return stmt.value is not None and self._expr_calls(stmt.value, name)

    def _call_stmt_calls(self, stmt: CallStatement, name: str) -> bool:
        return stmt.call.name == name

    # Pass-two dispatch table
    _CALL_DISPATCH: dict[str, Callable[[FunctionAnalyzer, Statement, str], bool]] = {
        "declaration": _declaration_calls,
        "assignment": _assignment_calls,
        "expression": _expression_calls,
        "if": _if_calls,
        "for": _loop_calls,
        "while": _loop_calls,
        "return": _return_calls,
        "call_stmt": _call_stmt_calls,
    }

    def _expr_calls(self, expr: ValueExpression, name: str) -> bool:
        # Call arguments are not searched; only the call target counts.
        if isinstance(expr, (AdditiveExpr, MultiplicativeExpr)):
            return self._expr_calls(expr.left, name) or self._expr_calls(expr.right, name)
        if isinstance(expr, ParenExpr):
            return self._expr_calls(expr.inner, name)
        if isinstance(expr, CallExpr):
            return expr.name == name
        return False
