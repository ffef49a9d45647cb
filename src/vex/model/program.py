"""Top-level program container: global declarations plus the entry block."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from .source import SourceSpan, TypeTag
from .statements import Declaration, Statement

ENTRY_FUNCTION_NAME = "main"


class Parameter(BaseModel):
    type_tag: TypeTag
    name: str


class FunctionDeclaration(BaseModel):
    """A user-defined function.

    Functions are analyzed but never invoked by the evaluator.
    *span* runs from the return type token to the closing brace.
    """

    kind: Literal["function"] = "function"
    name: str
    return_type: TypeTag
    parameters: list[Parameter] = []
    body: list[Statement] = []
    span: SourceSpan = SourceSpan()


class EntryFunction(BaseModel):
    """The program's designated entry block (``int main() { ... }``)."""

    name: str = ENTRY_FUNCTION_NAME
    return_type: TypeTag = TypeTag.INT
    body: list[Statement] = []
    span: SourceSpan = SourceSpan()


GlobalDeclaration = Annotated[
    Union[Declaration, FunctionDeclaration],
    Field(discriminator="kind"),
]


class Program(BaseModel):
    globals: list[GlobalDeclaration] = []
    entry: EntryFunction = EntryFunction()

    @property
    def functions(self) -> list[FunctionDeclaration]:
        return [g for g in self.globals if isinstance(g, FunctionDeclaration)]
