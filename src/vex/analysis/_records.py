"""Report records produced by the function analyzer.

Records are frozen once built; ``str()`` gives the compact one-line form
used in function reports.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from vex.model.source import TypeTag


class ControlKind(str, Enum):
    IF = "if"
    IF_ELSE = "if-else"
    FOR = "for"
    WHILE = "while"


class ParameterInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    type_tag: TypeTag
    name: str

    def __str__(self) -> str:
        return f"{self.type_tag.value} {self.name}"


class LocalVariableInfo(BaseModel):
    """A variable declared anywhere inside a function body.

    *initializer_text* is the initializer's source text, or ``""``.
    """

    model_config = ConfigDict(frozen=True)

    type_tag: TypeTag
    name: str
    initializer_text: str = ""
    line: int

    def __str__(self) -> str:
        if not self.initializer_text:
            return f"{self.type_tag.value} {self.name}"
        return f"{self.type_tag.value} {self.name} = {self.initializer_text}"


class ControlStructureInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ControlKind
    line: int

    def __str__(self) -> str:
        return f"<{self.kind.value}, {self.line}>"


class FunctionInfo(BaseModel):
    """Static description of one function.

    *is_recursive* only reflects direct self-calls.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    return_type: TypeTag
    is_entry: bool = False
    is_recursive: bool = False
    start_line: int
    end_line: int
    parameters: tuple[ParameterInfo, ...] = ()
    locals: tuple[LocalVariableInfo, ...] = ()
    control_structures: tuple[ControlStructureInfo, ...] = ()
