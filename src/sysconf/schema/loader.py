"""SchemaLoader: reads ``key -> type`` declarations."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sysconf.errors import MalformedLineError, UnknownTypeError
from sysconf.parser import split_lines
from sysconf.schema.types import ScalarType, SchemaEntry

__all__ = ["SchemaLoader"]

logger = logging.getLogger(__name__)

SCHEMA_DELIMITER = "->"


class SchemaLoader:
    """Builds an ordered list of SchemaEntry from schema text.

    The schema format has no comments and no ignore prefix: any bad line
    aborts the load.
    """

    def load(self, text: str) -> list[SchemaEntry]:
        return self.load_lines(split_lines(text))

    def load_lines(self, lines: Iterable[str]) -> list[SchemaEntry]:
        entries: list[SchemaEntry] = []
        seen: set[str] = set()
        for line_no, line in enumerate(lines, start=1):
            entry = self.parse_line(line, line_no)
            if entry is None:
                continue
            if entry.key in seen:
                logger.warning("Duplicate schema key '%s' on line %d", entry.key, line_no)
            seen.add(entry.key)
            entries.append(entry)
        logger.debug("Loaded %d schema entries", len(entries))
        return entries

    def parse_line(self, line: str, line_no: int = 1) -> SchemaEntry | None:
        """Parse one schema line; blank lines yield None."""
        if not line:
            return None

        key, sep, type_name = line.partition(SCHEMA_DELIMITER)
        if not sep:
            raise MalformedLineError(line_no=line_no, line=line, reason="missing '->'", source="schema")

        key = key.strip()
        type_name = type_name.strip()
        try:
            scalar_type = ScalarType(type_name)
        except ValueError as e:
            raise UnknownTypeError(type_name=type_name, line_no=line_no) from e
        return SchemaEntry(key=key, type=scalar_type)
