"""Build Jinja2 template context from a mapped table.

Flattens a TableDescriptor into the plain dict consumed by model.go.j2.
"""

from __future__ import annotations

from typing import Any

from .models import TableDescriptor

DEFAULT_PACKAGE = "models"


def build_field(field) -> dict[str, Any]:
    return {
        "field_name": field.field_name,
        "field_type": field.field_type,
        "source_column_name": field.source_column_name,
        "unmapped": field.mapped_type.unmapped,
    }


def build_context(table: TableDescriptor, package: str = DEFAULT_PACKAGE) -> dict[str, Any]:
    """Build the full template context for one table."""
    fields = [build_field(f) for f in table.fields]
    return {
        "package": package,
        "type_name": table.type_name,
        "table_name": table.source_physical_name,
        "imports": list(table.required_imports),
        "fields": fields,
        "field_count": len(fields),
    }
