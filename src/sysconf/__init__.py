"""sysconf - sysctl-style configuration parsing with schema validation."""

from __future__ import annotations

# Tree
from sysconf.tree import ConfigValue, Leaf, Subtree

# Parsing
from sysconf.parser import ConfigParser, ErrorPolicy

# Schema
from sysconf.schema import ScalarType, SchemaEntry, SchemaLoader, Validator

# Entry points
from sysconf.loader import SysctlLoader, get, load_config, load_schema, validate_and_load

# Config
from sysconf.config import Config, ParserSettings

# Errors
from sysconf.errors import (
    ConfigLimitError,
    ConfigNotFoundError,
    ConflictingPathError,
    ErrorCodes,
    MalformedLineError,
    MissingKeyError,
    ParseError,
    SchemaError,
    SettingsError,
    SurplusKeysError,
    SysconfError,
    TypeMismatchError,
    UnknownTypeError,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    # Tree
    "Leaf",
    "Subtree",
    "ConfigValue",
    # Parsing
    "ConfigParser",
    "ErrorPolicy",
    # Schema
    "ScalarType",
    "SchemaEntry",
    "SchemaLoader",
    "Validator",
    # Entry points
    "load_config",
    "load_schema",
    "validate_and_load",
    "get",
    "SysctlLoader",
    # Config
    "Config",
    "ParserSettings",
    # Errors
    "ErrorCodes",
    "SysconfError",
    "ParseError",
    "SchemaError",
    "ValidationError",
    "MalformedLineError",
    "ConflictingPathError",
    "ConfigLimitError",
    "UnknownTypeError",
    "SurplusKeysError",
    "MissingKeyError",
    "TypeMismatchError",
    "ConfigNotFoundError",
    "SettingsError",
]
