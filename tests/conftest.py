"""Shared fixtures for modelgen tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from modelgen.config import GeneratorConfig
from modelgen.models import ColumnDescriptor


@pytest.fixture
def user_profile_columns() -> list[ColumnDescriptor]:
    return [
        ColumnDescriptor("id", "int"),
        ColumnDescriptor("user_id", "int"),
        ColumnDescriptor("created_at", "datetime"),
        ColumnDescriptor("bio", "varchar"),
    ]


@pytest.fixture
def make_config(tmp_path: Path):
    """Return a factory for GeneratorConfig writing into tmp_path."""
    def _make(**overrides) -> GeneratorConfig:
        values = {
            "db_user": "app",
            "db_password": "secret",
            "db_name": "shop",
            "tables": ["user_profiles"],
            "dest": tmp_path,
        }
        values.update(overrides)
        return GeneratorConfig(**values)
    return _make
