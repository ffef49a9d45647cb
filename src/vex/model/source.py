"""Source positions and type tags shared by all tree nodes."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, model_validator


class TypeTag(str, Enum):
    """Declared type of a variable, parameter or function result.

    Every tag except STRING evaluates to the single numeric kind.
    """

    INT = "int"
    DOUBLE = "double"
    FLOAT = "float"
    STRING = "string"


class SourceSpan(BaseModel):
    """Location of a token or construct in the source text.

    *line* / *end_line* are 1-based; *start* / *stop* are inclusive
    character offsets into the source text.
    """

    line: int = 0
    end_line: int | None = None
    start: int = -1
    stop: int = -1

    @model_validator(mode="after")
    def _ordering(self):
        if self.end_line is not None and self.end_line < self.line:
            raise ValueError(
                f"end_line ({self.end_line}) must be >= line ({self.line})"
            )
        if self.stop < self.start:
            raise ValueError(
                f"stop ({self.stop}) must be >= start ({self.start})"
            )
        return self

    @property
    def last_line(self) -> int:
        return self.end_line if self.end_line is not None else self.line
