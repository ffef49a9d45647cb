"""The variable store: one flat, unscoped namespace per evaluation run."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType

from vex.errors import UndefinedVariableError
from vex.model.source import TypeTag

from ._values import Value, ValueKind


class Scope(str, Enum):
    """Where a variable was created: top-level globals or the entry block."""

    GLOBAL = "global"
    MAIN = "main"


@dataclass(frozen=True)
class StoredVariable:
    value: Value
    declared_type: TypeTag | None
    scope: Scope

    @property
    def kind(self) -> ValueKind:
        return self.value.kind


class VariableStore:
    """Mapping name -> :class:`StoredVariable`.

    Declaring a name again overwrites it; there is no shadowing.
    """

    def __init__(self) -> None:
        self._vars: dict[str, StoredVariable] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._vars

    def __len__(self) -> int:
        return len(self._vars)

    def get(self, name: str) -> Value:
        entry = self._vars.get(name)
        if entry is None:
            raise UndefinedVariableError(name)
        return entry.value

    def declare(self, name: str, value: Value, type_tag: TypeTag, scope: Scope) -> None:
        self._vars[name] = StoredVariable(value, type_tag, scope)

    def assign(self, name: str, value: Value, scope: Scope) -> None:
        """Store *value*, keeping the declared type and scope of an existing entry."""
        entry = self._vars.get(name)
        if entry is None:
            self._vars[name] = StoredVariable(value, None, scope)
        else:
            self._vars[name] = replace(entry, value=value)

    def snapshot(self) -> Mapping[str, StoredVariable]:
        return MappingProxyType(dict(self._vars))
