"""Built-in math functions callable from vex programs.

Domain errors follow IEEE float conventions instead of raising:
``sqrt(-1)`` and ``log(-1)`` are NaN, ``log(0)`` is -inf, ``sin``/``cos``
of an infinity are NaN.
"""

from __future__ import annotations

import math
from collections.abc import Callable


def _sqrt(x: float) -> float:
    if math.isnan(x) or x < 0:
        return math.nan
    return math.sqrt(x)


def _log(x: float) -> float:
    """Natural logarithm."""
    if math.isnan(x) or x < 0:
        return math.nan
    if x == 0:
        return -math.inf
    return math.log(x)


def _sin(x: float) -> float:
    if math.isinf(x):
        return math.nan
    return math.sin(x)


def _cos(x: float) -> float:
    if math.isinf(x):
        return math.nan
    return math.cos(x)


BUILTIN_FUNCTIONS: dict[str, Callable[[float], float]] = {
    "sqrt": _sqrt,
    "log": _log,
    "sin": _sin,
    "cos": _cos,
}

BUILTIN_ARITY = 1
