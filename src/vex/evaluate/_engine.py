"""Evaluator: tree-walking interpreter for vex programs.

The ``Evaluator`` executes statements and evaluates expressions against a
single flat :class:`VariableStore` that lives for one run.  Arithmetic is
computed on floats and wrapped into :class:`Value` at statement level.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from vex.errors import (
    BuiltinArityError,
    DivideByZeroError,
    InternalInvariantError,
    UnknownBuiltinFunctionError,
)
from vex.model.expressions import (
    AdditiveExpr,
    AdditiveOp,
    ArithmeticTerm,
    BoolLiteral,
    CallExpr,
    Comparison,
    CompareOp,
    Condition,
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
from vex.model.program import Program
from vex.model.statements import (
    AssignOp,
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

from ._builtins import BUILTIN_ARITY, BUILTIN_FUNCTIONS
from ._store import Scope, StoredVariable, VariableStore
from ._values import (
    Value,
    approx_equal,
    float_remainder,
    parse_number,
    type_default,
)

logger = logging.getLogger(__name__)

DEFAULT_EPSILON = 1e-9

ArithOp = AdditiveOp | MultiplicativeOp

_COMPOUND_OPS: dict[AssignOp, ArithOp] = {
    AssignOp.ADD: AdditiveOp.ADD,
    AssignOp.SUB: AdditiveOp.SUB,
    AssignOp.MUL: MultiplicativeOp.MUL,
    AssignOp.DIV: MultiplicativeOp.DIV,
    AssignOp.MOD: MultiplicativeOp.MOD,
}


class Evaluator:
    """Tree-walking interpreter for one program run at a time.

    Parameters
    ----------
    epsilon : float
        Tolerance for ``==`` and ``!=`` comparisons; must be positive.
    """

    def __init__(self, *, epsilon: float = DEFAULT_EPSILON) -> None:
        if not epsilon > 0:
            raise ValueError(f"epsilon must be positive, got {epsilon!r}")
        self.epsilon = epsilon
        self._store = VariableStore()
        self._scope = Scope.GLOBAL

    # -----------------------------------------------------------------------
    # Public API
    # -----------------------------------------------------------------------

    def evaluate(self, program: Program) -> Value | None:
        """Run *program* and return the value of the last statement executed.

        Global variable declarations run first, then the entry block.
        Function declarations are skipped.  Errors propagate unchanged and
        leave the store as it was at the point of failure.
        """
        self._store = VariableStore()
        logger.debug(
            "Evaluating program: %d global declaration(s), %d entry statement(s)",
            len(program.globals), len(program.entry.body),
        )

        result: Value | None = None
        self._scope = Scope.GLOBAL
        for decl in program.globals:
            if isinstance(decl, Declaration):
                result = self._exec_stmt(decl)

        self._scope = Scope.MAIN
        for stmt in program.entry.body:
            result = self._exec_stmt(stmt)

        logger.debug("Evaluation finished with %d variable(s)", len(self._store))
        return result

    def variables(self) -> Mapping[str, StoredVariable]:
        """Read-only snapshot of the store after (or during) the last run."""
        return self._store.snapshot()

    # -----------------------------------------------------------------------
    # Statement dispatch
    # -----------------------------------------------------------------------

    def _exec_stmt(self, stmt: Statement) -> Value | None:
        handler = self._STMT_DISPATCH.get(stmt.kind)
        if handler is None:
            raise InternalInvariantError(f"Unsupported statement kind: {stmt.kind}")
        return handler(self, stmt)

    def _exec_body(self, stmts: list[Statement]) -> Value | None:
        result = None
        for stmt in stmts:
            result = self._exec_stmt(stmt)
        return result

    def _exec_declaration(self, stmt: Declaration) -> Value | None:
        value = None
        for decl in stmt.declarators:
            if decl.initializer is not None:
                value = self._eval_value(decl.initializer)
            else:
                value = type_default(stmt.type_tag)
            self._store.declare(decl.name, value, stmt.type_tag, self._scope)
        return value

    def _exec_assignment(self, stmt: Assignment) -> Value:
        op = stmt.op
        if op == AssignOp.ASSIGN:
            value = self._eval_value(stmt.value)
        elif op == AssignOp.INCREMENT:
            value = Value.number(self._store.get(stmt.target).as_number() + 1)
        elif op == AssignOp.DECREMENT:
            value = Value.number(self._store.get(stmt.target).as_number() - 1)
        else:
            current = self._store.get(stmt.target).as_number()
            operand = self._eval(stmt.value)
            value = Value.number(self._apply_arith(_COMPOUND_OPS[op], current, operand))
        self._store.assign(stmt.target, value, self._scope)
        return value

    def _exec_expression(self, stmt: ExpressionStatement) -> Value:
        return Value.number(self._eval(stmt.expr))

    def _exec_if(self, stmt: IfStatement) -> Value | None:
        if self._test(stmt.condition):
            return self._exec_body(stmt.body)
        if stmt.else_body is not None:
            return self._exec_body(stmt.else_body)
        return None

    def _exec_for(self, stmt: ForStatement) -> Value | None:
        if stmt.init is not None:
            self._exec_declaration(stmt.init)

        result = None
        iterations = 0
        while stmt.condition is None or self._test(stmt.condition):
            result = self._exec_body(stmt.body)
            if stmt.update is not None:
                self._exec_assignment(stmt.update)
            iterations += 1
        logger.debug("for loop exited after %d iteration(s)", iterations)
        return result

    def _exec_while(self, stmt: WhileStatement) -> Value | None:
        result = None
        iterations = 0
        while stmt.condition is None or self._test(stmt.condition):
            result = self._exec_body(stmt.body)
            iterations += 1
        logger.debug("while loop exited after %d iteration(s)", iterations)
        return result

    def _exec_return(self, stmt: ReturnStatement) -> Value | None:
        if stmt.value is None:
            return None
        return self._eval_value(stmt.value)

    def _exec_call_stmt(self, stmt: CallStatement) -> Value:
        return Value.number(self._call(stmt.call))

    # Statement dispatch table
    _STMT_DISPATCH: dict[str, Callable[[Evaluator, Statement], Value | None]] = {
        "declaration": _exec_declaration,
        "assignment": _exec_assignment,
        "expression": _exec_expression,
        "if": _exec_if,
        "for": _exec_for,
        "while": _exec_while,
        "return": _exec_return,
        "call_stmt": _exec_call_stmt,
    }

    # -----------------------------------------------------------------------
    # Arithmetic dispatch
    # -----------------------------------------------------------------------

    def _eval_value(self, expr: ValueExpression) -> Value:
        """Evaluate an initializer or assignment right-hand side."""
        if isinstance(expr, TextLiteral):
            return Value.text(expr.value)
        return Value.number(self._eval(expr))

    def _eval(self, expr: ValueExpression) -> float:
        handler = self._EXPR_DISPATCH.get(expr.kind)
        if handler is None:
            raise InternalInvariantError(f"Unsupported expression kind: {expr.kind}")
        return handler(self, expr)

    def _eval_number(self, expr: NumberLiteral) -> float:
        return parse_number(expr.value)

    def _eval_text(self, expr: TextLiteral) -> float:
        return Value.text(expr.value).as_number()

    def _eval_variable_ref(self, expr: VariableRef) -> float:
        return self._store.get(expr.name).as_number()

    def _eval_binary(self, expr: AdditiveExpr | MultiplicativeExpr) -> float:
        left = self._eval(expr.left)
        right = self._eval(expr.right)
        return self._apply_arith(expr.op, left, right)

    def _eval_paren(self, expr: ParenExpr) -> float:
        return self._eval(expr.inner)

    def _eval_call(self, expr: CallExpr) -> float:
        return self._call(expr)

    @staticmethod
    def _apply_arith(op: ArithOp, left: float, right: float) -> float:
        if op == AdditiveOp.ADD:
            return left + right
        if op == AdditiveOp.SUB:
            return left - right
        if op == MultiplicativeOp.MUL:
            return left * right
        if op == MultiplicativeOp.DIV:
            if right == 0:
                raise DivideByZeroError()
            return left / right
        if op == MultiplicativeOp.MOD:
            return float_remainder(left, right)
        raise InternalInvariantError(f"Unsupported arithmetic op: {op}")

    def _call(self, expr: CallExpr) -> float:
        func = BUILTIN_FUNCTIONS.get(expr.name)
        if func is None:
            raise UnknownBuiltinFunctionError(expr.name)
        if len(expr.args) != BUILTIN_ARITY:
            raise BuiltinArityError(expr.name, BUILTIN_ARITY, len(expr.args))
        args = [self._eval(a) for a in expr.args]
        return func(*args)

    # Expression dispatch table
    _EXPR_DISPATCH: dict[str, Callable[[Evaluator, ValueExpression], float]] = {
        "number": _eval_number,
        "text": _eval_text,
        "variable_ref": _eval_variable_ref,
        "additive": _eval_binary,
        "multiplicative": _eval_binary,
        "paren": _eval_paren,
        "call": _eval_call,
    }

    # -----------------------------------------------------------------------
    # Condition dispatch
    # -----------------------------------------------------------------------

    def _test(self, cond: Condition) -> bool:
        handler = self._COND_DISPATCH.get(cond.kind)
        if handler is None:
            raise InternalInvariantError(f"Unsupported condition kind: {cond.kind}")
        return handler(self, cond)

    def _test_comparison(self, cond: Comparison) -> bool:
        left = self._eval(cond.left)
        right = self._eval(cond.right)
        op = cond.op
        if op == CompareOp.EQ:
            return approx_equal(left, right, self.epsilon)
        if op == CompareOp.NE:
            return not approx_equal(left, right, self.epsilon)
        if op == CompareOp.LT:
            return left < right
        if op == CompareOp.LE:
            return left <= right
        if op == CompareOp.GT:
            return left > right
        if op == CompareOp.GE:
            return left >= right
        raise InternalInvariantError(f"Unsupported comparison op: {op}")

    def _test_arith_term(self, cond: ArithmeticTerm) -> bool:
        return self._eval(cond.expr) != 0

    def _test_not(self, cond: NotTerm) -> bool:
        return not self._test(cond.operand)

    def _test_paren(self, cond: ParenCondition) -> bool:
        return self._test(cond.inner)

    def _test_bool(self, cond: BoolLiteral) -> bool:
        return cond.value

    def _test_null(self, _cond: NullLiteral) -> bool:
        return False

    def _test_chain(self, cond: LogicalChain) -> bool:
        # No short-circuit: every term is evaluated, left to right.
        result = self._test(cond.head)
        for link in cond.links:
            term = self._test(link.term)
            if link.op == LogicalOp.AND:
                result = result and term
            elif link.op == LogicalOp.OR:
                result = result or term
            else:
                raise InternalInvariantError(f"Unsupported logical op: {link.op}")
        return result

    # Condition dispatch table
    _COND_DISPATCH: dict[str, Callable[[Evaluator, Condition], bool]] = {
        "comparison": _test_comparison,
        "arith_term": _test_arith_term,
        "not": _test_not,
        "paren_condition": _test_paren,
        "bool": _test_bool,
        "null": _test_null,
        "chain": _test_chain,
    }
