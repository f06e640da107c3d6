"""Tests for the modelgen command."""

import pytest
from click.testing import CliRunner

from modelgen import cli as cli_module
from modelgen.cli import cli
from modelgen.errors import DatabaseConnectionError, TableNotFoundError
from modelgen.models import ColumnDescriptor

SCHEMA = {
    "user_profiles": [
        ColumnDescriptor("id", "int"),
        ColumnDescriptor("user_id", "int"),
        ColumnDescriptor("created_at", "datetime"),
        ColumnDescriptor("bio", "varchar"),
    ],
    "categories": [ColumnDescriptor("id", "int"), ColumnDescriptor("name", "varchar")],
}


class FakeIntrospector:
    """Stands in for Introspector, serving columns from SCHEMA."""

    instances: list["FakeIntrospector"] = []

    def __init__(self, engine, database):
        self.engine = engine
        self.database = database
        self.closed = False
        FakeIntrospector.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True

    def get_columns(self, table):
        if table not in SCHEMA:
            raise TableNotFoundError(table, self.database)
        return SCHEMA[table]


@pytest.fixture
def runner(monkeypatch, tmp_path):
    for var in ("DB_USER", "DB_PASSWORD", "DB_HOST", "DB_PORT", "DB_NAME", "TABLES", "LOG_LEVEL"):
        # set first so teardown removes anything a loaded .env adds
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    FakeIntrospector.instances.clear()
    monkeypatch.setattr(cli_module, "Introspector", FakeIntrospector)
    monkeypatch.setattr(cli_module, "create_db_engine", lambda config: config)
    return CliRunner()


def base_args(tmp_path, tables="user_profiles"):
    return [
        "--env", str(tmp_path / "missing.env"),
        "--dest", str(tmp_path / "out"),
        "--dbuser", "app",
        "--dbpassword", "secret",
        "--dbname", "shop",
        "--tables", tables,
    ]


class TestCli:

    def test_generates_models(self, runner, tmp_path):
        result = runner.invoke(cli, base_args(tmp_path, "user_profiles,categories"))
        assert result.exit_code == 0, result.output
        assert "Generated 2 model(s)" in result.output

        profile = (tmp_path / "out" / "UserProfile.go").read_text()
        assert "type UserProfile struct {" in profile
        assert '\tCreatedAt time.Time `gorm:"column:created_at"`' in profile
        assert 'return "user_profiles"' in profile
        assert (tmp_path / "out" / "Category.go").exists()
        assert FakeIntrospector.instances[0].closed

    def test_missing_config(self, runner, tmp_path):
        result = runner.invoke(cli, ["--env", str(tmp_path / "missing.env")])
        assert result.exit_code == 1
        assert "required" in result.output
        assert FakeIntrospector.instances == []

    def test_env_file(self, runner, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("DB_USER=app\nDB_PASSWORD=secret\nDB_NAME=shop\nTABLES=categories\n")
        result = runner.invoke(cli, ["--env", str(env_file), "--dest", str(tmp_path)])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "Category.go").exists()
        assert FakeIntrospector.instances[0].database == "shop"

    def test_unknown_table_aborts(self, runner, tmp_path):
        result = runner.invoke(cli, base_args(tmp_path, "categories,nope,user_profiles"))
        assert result.exit_code == 1
        assert "'nope' not found" in result.output
        assert (tmp_path / "out" / "Category.go").exists()
        assert not (tmp_path / "out" / "UserProfile.go").exists()

    def test_connection_error(self, runner, tmp_path, monkeypatch):
        class Unreachable(FakeIntrospector):
            def __enter__(self):
                raise DatabaseConnectionError("Failed to connect to database: refused")

        monkeypatch.setattr(cli_module, "Introspector", Unreachable)
        result = runner.invoke(cli, base_args(tmp_path))
        assert result.exit_code == 1
        assert "Failed to connect" in result.output

    def test_strict_types(self, runner, tmp_path):
        result = runner.invoke(cli, base_args(tmp_path) + ["--strict-types"])
        assert result.exit_code == 1
        assert "unmapped database type 'int'" in result.output

    def test_package_and_extension(self, runner, tmp_path):
        args = base_args(tmp_path, "categories") + ["--package", "db", "--extension", "txt"]
        result = runner.invoke(cli, args)
        assert result.exit_code == 0, result.output
        assert (tmp_path / "out" / "Category.txt").read_text().startswith("package db\n")

    def test_invalid_log_level_option(self, runner, tmp_path):
        result = runner.invoke(cli, base_args(tmp_path) + ["--log-level", "basic_format"])
        assert result.exit_code == 2
        assert "basic_format" in result.output
        assert FakeIntrospector.instances == []

    def test_invalid_log_level_env(self, runner, tmp_path, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "basic_format")
        result = runner.invoke(cli, base_args(tmp_path))
        assert result.exit_code == 1
        assert "Invalid log level" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)
