"""Descriptors passed between the introspector, mapper and renderer."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TypeKind(enum.Enum):
    TEMPORAL = "temporal"
    SMALL_INTEGER = "small_integer"
    TEXT = "text"
    UNMAPPED = "unmapped"


@dataclass(frozen=True)
class ColumnDescriptor:
    """One physical column as reported by the database."""

    name: str
    database_type_name: str


@dataclass(frozen=True)
class MappedType:
    """Result of looking up a database type.

    For ``TypeKind.UNMAPPED`` the ``name`` is the raw database type name.
    """

    kind: TypeKind
    name: str
    required_import: str | None = None

    @property
    def unmapped(self) -> bool:
        return self.kind is TypeKind.UNMAPPED


@dataclass(frozen=True)
class FieldDescriptor:
    """One model field, bound to its source column."""

    field_name: str
    field_type: str
    source_column_name: str
    mapped_type: MappedType

    @property
    def required_import(self) -> str | None:
        return self.mapped_type.required_import


@dataclass(frozen=True)
class TableDescriptor:
    """Everything the template needs to emit one model."""

    type_name: str
    source_physical_name: str
    fields: tuple[FieldDescriptor, ...] = ()
    required_imports: tuple[str, ...] = ()
