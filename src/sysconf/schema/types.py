"""Schema type definitions for the sysconf schema system."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

__all__ = ["ScalarType", "SchemaEntry"]

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class ScalarType(str, Enum):
    """The four leaf types a schema can declare."""

    INT = "int"
    FLOAT = "float"
    STRING = "string"
    BOOL = "bool"

    def accepts(self, raw: str) -> bool:
        """Check whether ``raw`` parses as this type."""
        try:
            self.convert(raw)
        except ValueError:
            return False
        return True

    def convert(self, raw: str) -> int | float | str | bool:
        """Convert a leaf string to its Python value. Raises ValueError."""
        if self is ScalarType.INT:
            if not _INT_PATTERN.fullmatch(raw):
                raise ValueError(f"not an integer: {raw!r}")
            value = int(raw)
            if not _INT64_MIN <= value <= _INT64_MAX:
                raise ValueError(f"integer out of 64-bit range: {raw!r}")
            return value
        if self is ScalarType.FLOAT:
            # float() tolerates surrounding whitespace, digit separators and non-ASCII digits
            if not raw.isascii() or raw != raw.strip() or "_" in raw:
                raise ValueError(f"not a float: {raw!r}")
            return float(raw)
        if self is ScalarType.BOOL:
            if raw == "true":
                return True
            if raw == "false":
                return False
            raise ValueError(f"not a bool: {raw!r}")
        return raw


@dataclass(frozen=True)
class SchemaEntry:
    """One ``key -> type`` declaration."""

    key: str
    type: ScalarType
