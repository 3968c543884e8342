"""Error hierarchy for the sysconf package."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
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
    "ErrorCodes",
]


class SysconfError(Exception):
    """Base error for all sysconf errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ParseError(SysconfError):
    """Raised when a value-config document cannot be parsed."""


class SchemaError(SysconfError):
    """Raised when a schema document cannot be loaded."""


class ValidationError(SysconfError):
    """Raised when a parsed tree does not conform to its schema."""


class MalformedLineError(ParseError, SchemaError):
    """Raised when a line lacks its delimiter or has an empty or invalid key or value."""

    def __init__(self, line_no: int, line: str, reason: str, source: str = "config", **kwargs: Any) -> None:
        super().__init__(
            code="MALFORMED_LINE",
            message=f"Invalid {source} line {line_no}: {reason}: {line!r}",
            details={"line_no": line_no, "line": line, "reason": reason, "source": source},
            **kwargs,
        )

    @property
    def line_no(self) -> int:
        """1-based number of the offending line."""
        return self.details["line_no"]


class ConflictingPathError(ParseError):
    """Raised when a path is used both as a leaf and as a subtree."""

    def __init__(self, path: str, line_no: int | None = None, **kwargs: Any) -> None:
        where = f" (line {line_no})" if line_no is not None else ""
        super().__init__(
            code="CONFLICTING_PATH",
            message=f"Conflicting definition for path '{path}'{where}",
            details={"path": path, "line_no": line_no},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The dotted path at which leaf and subtree collide."""
        return self.details["path"]


class ConfigLimitError(ParseError):
    """Raised when a document exceeds a configured parser limit."""

    def __init__(self, limit: str, maximum: int, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_LIMIT_EXCEEDED",
            message=f"Document exceeds {limit} limit of {maximum}",
            details={"limit": limit, "maximum": maximum},
            **kwargs,
        )


class UnknownTypeError(SchemaError):
    """Raised when a schema line names a type other than int, float, string or bool."""

    def __init__(self, type_name: str, line_no: int | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="UNKNOWN_TYPE",
            message=f"Unknown type: {type_name!r}",
            details={"type_name": type_name, "line_no": line_no},
            **kwargs,
        )

    @property
    def type_name(self) -> str:
        return self.details["type_name"]


class SurplusKeysError(ValidationError):
    """Raised when the config contains leaves the schema does not declare."""

    def __init__(self, keys: list[str], **kwargs: Any) -> None:
        super().__init__(
            code="SURPLUS_KEYS",
            message=f"Surplus keys: {', '.join(keys)}",
            details={"keys": keys},
            **kwargs,
        )

    @property
    def keys(self) -> list[str]:
        """Sorted dotted paths not covered by the schema."""
        return self.details["keys"]


class MissingKeyError(ValidationError):
    """Raised when a schema key is absent from the config."""

    def __init__(self, key: str, segment: str | None = None, **kwargs: Any) -> None:
        message = f"Key not found: {key}"
        if segment is not None and segment != key:
            message += f" (missing segment '{segment}')"
        super().__init__(
            code="MISSING_KEY",
            message=message,
            details={"key": key, "segment": segment},
            **kwargs,
        )

    @property
    def key(self) -> str:
        return self.details["key"]


class TypeMismatchError(ValidationError):
    """Raised when a leaf value does not parse as its declared type."""

    def __init__(self, key: str, expected: str, value: str | None = None, **kwargs: Any) -> None:
        if value is None:
            message = f"Invalid value: key={key}, type={expected}"
        else:
            message = f"Invalid value: key={key}, value={value}, type={expected}"
        super().__init__(
            code="TYPE_MISMATCH",
            message=message,
            details={"key": key, "value": value, "expected": expected},
            **kwargs,
        )

    @property
    def key(self) -> str:
        return self.details["key"]

    @property
    def value(self) -> str | None:
        """The raw leaf string, or None when the key resolved to a subtree."""
        return self.details["value"]

    @property
    def expected(self) -> str:
        return self.details["expected"]


class ConfigNotFoundError(SysconfError):
    """Raised when a config or schema file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class SettingsError(SysconfError):
    """Raised when parser settings are invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="SETTINGS_INVALID", message=message, **kwargs)


class ErrorCodes:
    """All sysconf error codes as constants.

    Example:
        if error.code == ErrorCodes.SURPLUS_KEYS:
            report(error.details["keys"])
    """

    MALFORMED_LINE = "MALFORMED_LINE"
    CONFLICTING_PATH = "CONFLICTING_PATH"
    CONFIG_LIMIT_EXCEEDED = "CONFIG_LIMIT_EXCEEDED"
    UNKNOWN_TYPE = "UNKNOWN_TYPE"
    SURPLUS_KEYS = "SURPLUS_KEYS"
    MISSING_KEY = "MISSING_KEY"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    SETTINGS_INVALID = "SETTINGS_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
