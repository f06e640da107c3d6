"""Read column metadata from MySQL.

Columns come from information_schema in ordinal order, with DATA_TYPE as the
raw database type name (e.g. 'varchar', 'datetime', 'int').
"""

from __future__ import annotations

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from .config import GeneratorConfig
from .errors import DatabaseConnectionError, IntrospectionError, TableNotFoundError
from .models import ColumnDescriptor

logger = logging.getLogger(__name__)

DRIVER = "mysql+pymysql"

_TABLE_EXISTS_SQL = text(
    """
    SELECT COUNT(*)
    FROM information_schema.TABLES
    WHERE TABLE_SCHEMA = DATABASE() AND TABLE_NAME = :table
    """
)

_COLUMNS_SQL = text(
    """
    SELECT COLUMN_NAME, DATA_TYPE
    FROM information_schema.COLUMNS
    WHERE TABLE_SCHEMA = DATABASE() AND TABLE_NAME = :table
    ORDER BY ORDINAL_POSITION
    """
)


def build_url(config: GeneratorConfig) -> URL:
    return URL.create(
        DRIVER,
        username=config.db_user,
        password=config.db_password,
        host=config.db_host,
        port=config.db_port,
        database=config.db_name,
    )


def create_db_engine(config: GeneratorConfig) -> Engine:
    return create_engine(build_url(config))


class Introspector:
    """Read-only schema reader over a single connection.

    Usage::

        with Introspector(engine, "shop") as introspector:
            columns = introspector.get_columns("users")
    """

    def __init__(self, engine: Engine, database: str):
        self.engine = engine
        self.database = database
        self._conn: Connection | None = None

    def __enter__(self) -> "Introspector":
        self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def open(self) -> None:
        if self._conn is not None:
            return
        logger.info(
            "Connecting to %s@%s:%s/%s",
            self.engine.url.username, self.engine.url.host,
            self.engine.url.port, self.database,
        )
        try:
            self._conn = self.engine.connect()
        except SQLAlchemyError as e:
            raise DatabaseConnectionError(f"Failed to connect to database: {e}") from e

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
        self.engine.dispose()

    @property
    def conn(self) -> Connection:
        if self._conn is None:
            raise DatabaseConnectionError("Introspector is not connected")
        return self._conn

    def table_exists(self, table: str) -> bool:
        try:
            count = self.conn.execute(_TABLE_EXISTS_SQL, {"table": table}).scalar()
        except SQLAlchemyError as e:
            raise IntrospectionError(f"Failed to look up table {table}: {e}") from e
        return bool(count)

    def get_columns(self, table: str) -> list[ColumnDescriptor]:
        """Return the columns of a table in ordinal order."""
        if not self.table_exists(table):
            raise TableNotFoundError(table, self.database)

        try:
            rows = self.conn.execute(_COLUMNS_SQL, {"table": table}).all()
        except SQLAlchemyError as e:
            raise IntrospectionError(f"Failed to get columns for table {table}: {e}") from e

        columns = [ColumnDescriptor(name=row[0], database_type_name=row[1]) for row in rows]
        logger.debug("Table %s: %d columns", table, len(columns))
        return columns
