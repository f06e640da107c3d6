"""
modelgen CLI

Generate GORM model structs from existing MySQL tables.
"""

from __future__ import annotations

import logging
import os

import click

from .codegen import Renderer, generate
from .config import load_env_file, resolve_config
from .errors import ModelgenError
from .introspect import Introspector, create_db_engine
from .logging_utils import LOG_LEVELS, configure_logging

logger = logging.getLogger(__name__)


@click.command()
@click.option("--dest", default=".", show_default=True, type=click.Path(file_okay=False), help="Destination path for generated models")
@click.option("--env", "env_file", default=".env", show_default=True, help="Path to .env file")
@click.option("--dbuser", "db_user", default="", help="Database user [env: DB_USER]")
@click.option("--dbpassword", "db_password", default="", help="Database password [env: DB_PASSWORD]")
@click.option("--dbhost", "db_host", default="", help="Database host [env: DB_HOST, default: 127.0.0.1]")
@click.option("--dbport", "db_port", default="", help="Database port [env: DB_PORT, default: 3306]")
@click.option("--dbname", "db_name", default="", help="Database name [env: DB_NAME]")
@click.option("--tables", default="", help="Comma-separated list of tables to generate models for [env: TABLES]")
@click.option("--package", default="models", show_default=True, help="Go package name for generated files")
@click.option("--template", type=click.Path(dir_okay=False), default=None, help="Alternate Jinja2 model template")
@click.option("--extension", default="go", show_default=True, help="Extension of generated files")
@click.option("--strict-types", is_flag=True, help="Fail on database types with no mapping")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None, help="Logging level [env: LOG_LEVEL, default: info]")
def cli(env_file, log_level, **options):
    """
    Generate one model file per table from live database metadata.

    Flags take precedence over environment variables, which may be
    seeded from a .env file.
    """
    try:
        loaded = load_env_file(env_file)
        configure_logging(log_level or os.environ.get("LOG_LEVEL", "info"))
        if loaded:
            logger.debug("Loaded environment from %s", env_file)

        config = resolve_config(options)
        renderer = Renderer.from_path(config.template)

        with Introspector(create_db_engine(config), config.db_name) as introspector:
            written = generate(config, introspector.get_columns, renderer)
    except ModelgenError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Generated {len(written)} model(s) in {config.dest}")


def main() -> None:
    cli()
