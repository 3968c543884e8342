"""Public load/validate entry points and the file-backed SysctlLoader."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from sysconf.config import Config, ParserSettings
from sysconf.errors import ConfigNotFoundError
from sysconf.parser import ConfigParser
from sysconf.schema.loader import SchemaLoader
from sysconf.schema.types import SchemaEntry
from sysconf.schema.validator import Validator
from sysconf.tree import ConfigValue, Subtree

__all__ = ["load_config", "load_schema", "validate_and_load", "get", "SysctlLoader"]

logger = logging.getLogger(__name__)


def load_config(text: str, settings: ParserSettings | None = None) -> Subtree:
    """Parse value-config text into an unvalidated tree."""
    return ConfigParser(settings).parse(text)


def load_schema(text: str) -> list[SchemaEntry]:
    """Parse schema text into an ordered list of entries."""
    return SchemaLoader().load(text)


def validate_and_load(
    config_text: str,
    schema: Sequence[SchemaEntry],
    settings: ParserSettings | None = None,
) -> Subtree:
    """Parse ``config_text`` and validate it against ``schema``."""
    tree = load_config(config_text, settings)
    return Validator(schema).validate(tree)


def get(tree: Subtree, dotted_path: str) -> ConfigValue | None:
    """Look up a dotted path; None means not found."""
    return tree.get(dotted_path)


def _read_text(path: str | Path, encoding: str) -> str:
    file_path = Path(path)
    if not file_path.is_file():
        raise ConfigNotFoundError(config_path=str(file_path))
    return file_path.read_text(encoding=encoding)


class SysctlLoader:
    """Holds one schema and validates any number of config documents against it.

    Example::

        loader = SysctlLoader.from_file("kernel.schema")
        tree = loader.load_sysctl("kernel.conf")
    """

    def __init__(
        self,
        schema: Sequence[SchemaEntry],
        config: Config | None = None,
        settings: ParserSettings | None = None,
    ) -> None:
        self._config = config or Config()
        self._settings = settings or self._config.parser_settings()
        self._parser = ConfigParser(self._settings)
        self._validator = Validator(schema)

    @classmethod
    def from_file(cls, schema_path: str | Path, config: Config | None = None) -> SysctlLoader:
        """Build a loader from a schema file."""
        config = config or Config()
        settings = config.parser_settings()
        schema = load_schema(_read_text(schema_path, settings.encoding))
        logger.debug("Loaded schema from %s", schema_path)
        return cls(schema, config, settings=settings)

    @classmethod
    def from_text(cls, schema_text: str, config: Config | None = None) -> SysctlLoader:
        """Build a loader from schema text."""
        return cls(load_schema(schema_text), config)

    @property
    def schema(self) -> tuple[SchemaEntry, ...]:
        return self._validator.schema

    @property
    def validator(self) -> Validator:
        return self._validator

    def load_text(self, text: str) -> Subtree:
        """Parse and validate value-config text."""
        return self._validator.validate(self._parser.parse(text))

    def load_sysctl(self, path: str | Path) -> Subtree:
        """Read, parse and validate a value-config file."""
        return self.load_text(_read_text(path, self._settings.encoding))

    def load_typed(self, path: str | Path) -> dict[str, Any]:
        """Read a value-config file and return its values converted to their declared types."""
        tree = self._parser.parse(_read_text(path, self._settings.encoding))
        return self._validator.typed(tree)
