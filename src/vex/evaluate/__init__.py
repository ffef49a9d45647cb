"""vex evaluator: run a program tree against a flat variable store.

Entry point::

    from vex.evaluate import evaluate

    result = evaluate(program)
    assert result.value.as_number() == 14
    result.variables["x"].value
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from vex.model.program import Program

from ._builtins import BUILTIN_FUNCTIONS
from ._engine import DEFAULT_EPSILON, Evaluator
from ._store import Scope, StoredVariable, VariableStore
from ._values import Value, ValueKind


@dataclass(frozen=True)
class EvaluationResult:
    """Final value of a run plus the read-only variable snapshot."""

    value: Value | None
    variables: Mapping[str, StoredVariable]


def evaluate(program: Program, *, epsilon: float = DEFAULT_EPSILON) -> EvaluationResult:
    """Evaluate *program* in a fresh store.

    Parameters
    ----------
    program
        A well-formed ``Program`` tree.
    epsilon
        Tolerance for ``==`` / ``!=`` comparisons.  Must be positive;
        ``ValueError`` otherwise.

    Returns
    -------
    EvaluationResult
        The value of the last statement executed and the final variables.
    """
    evaluator = Evaluator(epsilon=epsilon)
    value = evaluator.evaluate(program)
    return EvaluationResult(value=value, variables=evaluator.variables())


__all__ = [
    "BUILTIN_FUNCTIONS",
    "DEFAULT_EPSILON",
    "EvaluationResult",
    "Evaluator",
    "Scope",
    "StoredVariable",
    "Value",
    "ValueKind",
    "VariableStore",
    "evaluate",
]
