"""sysconf schema system -- public API.

Example usage::

    from sysconf.schema import SchemaLoader, Validator

    schema = SchemaLoader().load("net.ipv4.ip_forward -> bool\n")
    Validator(schema).validate(tree)
"""

from __future__ import annotations

from sysconf.schema.loader import SchemaLoader
from sysconf.schema.types import ScalarType, SchemaEntry
from sysconf.schema.validator import Validator

__all__ = [
    "ScalarType",
    "SchemaEntry",
    "SchemaLoader",
    "Validator",
]
