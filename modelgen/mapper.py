"""Map raw column metadata to generation-ready descriptors.

Handles:
- Database type -> Go type lookup (datetime/timestamp, tinyint, varchar)
- Passthrough of unknown database types as an explicit UNMAPPED variant
- Required import collection, deduplicated in first-seen order
- Field and type naming via naming.py

Nothing here touches the database or the filesystem.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .errors import UnmappedTypeError
from .models import (
    ColumnDescriptor,
    FieldDescriptor,
    MappedType,
    TableDescriptor,
    TypeKind,
)
from .naming import build_type_name, identifier_case

logger = logging.getLogger(__name__)

# Go import path needed by temporal fields
TIME_IMPORT = "time"

# Case-sensitive: the driver reports information_schema DATA_TYPE in lower case
TYPE_MAP: dict[str, MappedType] = {
    "datetime": MappedType(TypeKind.TEMPORAL, "time.Time", TIME_IMPORT),
    "timestamp": MappedType(TypeKind.TEMPORAL, "time.Time", TIME_IMPORT),
    "tinyint": MappedType(TypeKind.SMALL_INTEGER, "int"),
    "varchar": MappedType(TypeKind.TEXT, "string"),
}


def map_type(database_type_name: str) -> MappedType:
    """Resolve a database type name to a Go type.

    Never fails: unknown names come back as UNMAPPED carrying the raw string.
    """
    mapped = TYPE_MAP.get(database_type_name)
    if mapped is not None:
        return mapped
    return MappedType(TypeKind.UNMAPPED, database_type_name)


def map_column(column: ColumnDescriptor, strict: bool = False) -> FieldDescriptor:
    """Map one column to a model field.

    With ``strict`` an unmapped database type raises UnmappedTypeError
    instead of being passed through.
    """
    mapped = map_type(column.database_type_name)
    if mapped.unmapped:
        if strict:
            raise UnmappedTypeError(column.name, column.database_type_name)
        logger.debug(
            "Column %s: passing through unmapped type %r",
            column.name, column.database_type_name,
        )

    return FieldDescriptor(
        field_name=identifier_case(column.name),
        field_type=mapped.name,
        source_column_name=column.name,
        mapped_type=mapped,
    )


def map_table(
    physical_name: str,
    columns: Iterable[ColumnDescriptor],
    strict: bool = False,
) -> TableDescriptor:
    """Map a table and its columns, in column order, to a TableDescriptor."""
    fields: list[FieldDescriptor] = []
    # dict keys as an insertion-ordered set
    imports: dict[str, None] = {}

    for column in columns:
        field = map_column(column, strict=strict)
        fields.append(field)
        if field.required_import:
            imports.setdefault(field.required_import, None)

    return TableDescriptor(
        type_name=build_type_name(physical_name),
        source_physical_name=physical_name,
        fields=tuple(fields),
        required_imports=tuple(imports),
    )
