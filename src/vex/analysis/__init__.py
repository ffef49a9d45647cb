"""vex analysis: static function reports over a program tree.

Entry point::

    from vex.analysis import analyze

    for info in analyze(program):
        info.name, info.is_recursive, info.locals
"""

from __future__ import annotations

from vex.model.program import Program

from ._analyzer import FunctionAnalyzer
from ._records import (
    ControlKind,
    ControlStructureInfo,
    FunctionInfo,
    LocalVariableInfo,
    ParameterInfo,
)


def analyze(program: Program) -> list[FunctionInfo]:
    """Return one ``FunctionInfo`` per declared function, entry function last."""
    return FunctionAnalyzer().analyze(program)


__all__ = [
    "ControlKind",
    "ControlStructureInfo",
    "FunctionAnalyzer",
    "FunctionInfo",
    "LocalVariableInfo",
    "ParameterInfo",
    "analyze",
]
