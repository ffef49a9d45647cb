"""Value system for the evaluator.

Provides the tagged Number/Text value, literal parsing, type defaults and
numeric coercion used by every evaluator step.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

from vex.model.source import TypeTag


class ValueKind(str, Enum):
    NUMBER = "number"
    TEXT = "text"


# ---------------------------------------------------------------------------
# Numeric lexeme regex
# ---------------------------------------------------------------------------

_NUMERIC_RE = re.compile(
    r"^[+-]?"
    r"(?:\d+(?:\.\d*)?|\.\d+)"
    r"(?:[eE][+-]?\d+)?"
    r"$",
    re.ASCII,
)


def is_numeric_text(text: str) -> bool:
    """True if *text* (ignoring surrounding whitespace) reads as a number."""
    return _NUMERIC_RE.match(text.strip()) is not None


# ---------------------------------------------------------------------------
# Value
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Value:
    """A runtime datum: a float for NUMBER, a str for TEXT."""

    kind: ValueKind
    data: float | str

    @classmethod
    def number(cls, x: float) -> Value:
        return cls(ValueKind.NUMBER, float(x))

    @classmethod
    def text(cls, s: str) -> Value:
        return cls(ValueKind.TEXT, s)

    @property
    def is_number(self) -> bool:
        return self.kind is ValueKind.NUMBER

    def as_number(self) -> float:
        """Numeric view: numbers pass through, numeric text parses, other text is 0."""
        if self.is_number:
            return self.data
        if is_numeric_text(self.data):
            return float(self.data)
        return 0.0

    def __str__(self) -> str:
        if not self.is_number:
            return self.data
        if math.isfinite(self.data) and self.data == int(self.data):
            return str(int(self.data))
        return repr(self.data)


ZERO = Value.number(0.0)


# ---------------------------------------------------------------------------
# Literal parsing
# ---------------------------------------------------------------------------

def parse_number(text: str) -> float:
    """Parse a numeric literal as written in source."""
    return float(text)


def type_default(type_tag: TypeTag) -> Value:
    """Value of a declarator without an initializer.

    Every tag, STRING included, starts at numeric zero.
    """
    return ZERO


# ---------------------------------------------------------------------------
# Floating-point helpers
# ---------------------------------------------------------------------------

def float_remainder(left: float, right: float) -> float:
    """Truncated remainder (sign of the dividend); NaN for a zero divisor."""
    if right == 0 or math.isinf(left) or math.isnan(right):
        return math.nan
    return math.fmod(left, right)


def approx_equal(left: float, right: float, epsilon: float) -> bool:
    return abs(left - right) < epsilon
