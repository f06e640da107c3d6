"""Exceptions raised by the generator.

Every error is fatal to the run; the CLI turns them into a non-zero exit.
"""

from __future__ import annotations


class ModelgenError(Exception):
    """Base exception for modelgen errors."""


class ConfigError(ModelgenError, ValueError):
    """Configuration is missing or invalid."""

    def __init__(self, message: str, missing: list[str] | None = None):
        super().__init__(message)
        self.missing = missing or []


class DatabaseConnectionError(ModelgenError):
    """The database connection could not be opened."""


class IntrospectionError(ModelgenError):
    """Column metadata for a table could not be read."""


class TableNotFoundError(IntrospectionError):
    """Table does not exist in the configured database."""

    def __init__(self, table: str, database: str):
        super().__init__(
            f"Table '{table}' not found in database '{database}'.\n\n"
            f"Suggestions:\n"
            f"1. Check table name spelling in --tables / TABLES\n"
            f"2. Check that --dbname / DB_NAME points at the right schema"
        )
        self.table = table
        self.database = database


class UnmappedTypeError(ModelgenError):
    """A column type has no mapping and strict type checking is enabled."""

    def __init__(self, column: str, database_type_name: str):
        super().__init__(
            f"Column '{column}' has unmapped database type "
            f"'{database_type_name}' (strict type checking is enabled)"
        )
        self.column = column
        self.database_type_name = database_type_name


class RenderError(ModelgenError):
    """The model template could not be loaded or rendered."""


class WriteError(ModelgenError):
    """A generated file could not be written."""
