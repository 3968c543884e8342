"""Shared pytest fixtures for schema system tests."""

from __future__ import annotations

import pytest

from sysconf.schema.loader import SchemaLoader
from sysconf.schema.types import ScalarType, SchemaEntry
from sysconf.schema.validator import Validator


@pytest.fixture
def schema_loader() -> SchemaLoader:
    return SchemaLoader()


@pytest.fixture
def nested_schema() -> list[SchemaEntry]:
    """Schema covering two nested leaves and one top-level leaf."""
    return [
        SchemaEntry(key="hoge.fuga", type=ScalarType.FLOAT),
        SchemaEntry(key="hoge.piyo", type=ScalarType.BOOL),
        SchemaEntry(key="piyo", type=ScalarType.FLOAT),
    ]


@pytest.fixture
def nested_validator(nested_schema: list[SchemaEntry]) -> Validator:
    return Validator(nested_schema)
