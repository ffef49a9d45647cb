"""Exceptions raised by the evaluator and analyzer.

Every error is fatal to the current ``evaluate``/``analyze`` call and is
propagated to the caller unchanged.
"""

from __future__ import annotations


class VexError(Exception):
    """Base class for all vex errors."""


class EvaluationError(VexError):
    """Runtime fault during evaluation."""


class UndefinedVariableError(EvaluationError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Undefined variable: {name}")


class DivideByZeroError(EvaluationError, ZeroDivisionError):
    def __init__(self, message: str = "Division by zero"):
        super().__init__(message)


class UnknownBuiltinFunctionError(EvaluationError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown function: {name}")


class BuiltinArityError(EvaluationError):
    def __init__(self, name: str, expected: int, got: int):
        self.name = name
        self.expected = expected
        self.got = got
        super().__init__(
            f"{name}() takes exactly {expected} argument(s), got {got}"
        )


class InternalInvariantError(VexError):
    """A node of an unrecognized kind reached a dispatch point."""
