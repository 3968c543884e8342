"""Shared pytest fixtures for the sysconf test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from sysconf.parser import ConfigParser


@pytest.fixture
def parser() -> ConfigParser:
    """Returns a ConfigParser with default (unbounded) settings."""
    return ConfigParser()


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Returns a helper that writes text to a file under tmp_path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
