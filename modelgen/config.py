"""Resolve run configuration from flags, environment and a .env file.

Precedence: explicit flag > environment variable > default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from dotenv import load_dotenv

from .context_builder import DEFAULT_PACKAGE
from .errors import ConfigError

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3306
DEFAULT_EXTENSION = "go"

# option name -> environment variable
ENV_VARS: dict[str, str] = {
    "db_user": "DB_USER",
    "db_password": "DB_PASSWORD",
    "db_host": "DB_HOST",
    "db_port": "DB_PORT",
    "db_name": "DB_NAME",
    "tables": "TABLES",
}

_REQUIRED: dict[str, str] = {
    "db_user": "database user (--dbuser / DB_USER)",
    "db_password": "database password (--dbpassword / DB_PASSWORD)",
    "db_name": "database name (--dbname / DB_NAME)",
    "tables": "tables (--tables / TABLES)",
}


@dataclass
class GeneratorConfig:
    db_user: str
    db_password: str = field(repr=False)
    db_name: str
    tables: list[str]
    db_host: str = DEFAULT_HOST
    db_port: int = DEFAULT_PORT
    dest: Path = Path(".")
    package: str = DEFAULT_PACKAGE
    extension: str = DEFAULT_EXTENSION
    template: Path | None = None
    strict_types: bool = False


def load_env_file(path: Path | str) -> bool:
    """Load a dotenv file if it exists. Already-set variables win."""
    path = Path(path)
    if not path.is_file():
        return False
    try:
        load_dotenv(path, override=False)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error loading env file {path}: {e}") from e
    return True


def split_tables(value: str) -> list[str]:
    return [t.strip() for t in value.split(",") if t.strip()]


def _pick(options: Mapping[str, Any], env: Mapping[str, str], key: str) -> Any:
    value = options.get(key)
    if value not in (None, ""):
        return value
    env_key = ENV_VARS.get(key)
    if env_key:
        return env.get(env_key) or None
    return None


def _parse_port(value: Any) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Database port must be an integer, got {value!r}") from e
    if not 0 < port < 65536:
        raise ConfigError(f"Database port out of range: {port}")
    return port


def resolve_config(
    options: Mapping[str, Any],
    env: Mapping[str, str] | None = None,
) -> GeneratorConfig:
    """Resolve the run configuration.

    Precedence: explicit option > environment variable > default.
    """
    env = os.environ if env is None else env
    values = {key: _pick(options, env, key) for key in ENV_VARS}

    tables = values["tables"]
    if isinstance(tables, str):
        tables = split_tables(tables)
    values["tables"] = tables or None

    missing = [label for key, label in _REQUIRED.items() if not values[key]]
    if missing:
        raise ConfigError(
            "Database user, password, name, and tables are required. Missing: "
            + ", ".join(missing),
            missing=missing,
        )

    template = options.get("template")
    return GeneratorConfig(
        db_user=values["db_user"],
        db_password=values["db_password"],
        db_name=values["db_name"],
        tables=list(values["tables"]),
        db_host=values["db_host"] or DEFAULT_HOST,
        db_port=_parse_port(values["db_port"] or DEFAULT_PORT),
        dest=Path(options.get("dest") or "."),
        package=options.get("package") or DEFAULT_PACKAGE,
        extension=options.get("extension") or DEFAULT_EXTENSION,
        template=Path(template) if template else None,
        strict_types=bool(options.get("strict_types", False)),
    )
