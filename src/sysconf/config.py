"""Configuration loading and validation for the parser itself."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError

from sysconf.errors import ConfigNotFoundError, SettingsError

__all__ = ["Config", "ParserSettings"]


class ParserSettings(BaseModel):
    """Limits and encoding applied when reading value-config documents.

    Both limits default to ``None`` (unbounded). Set them when parsing
    untrusted input.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_depth: int | None = Field(default=None, ge=1)
    max_lines: int | None = Field(default=None, ge=1)
    encoding: str = "utf-8"


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def from_yaml(cls, path: str | Path) -> Config:
        """Load a Config from a YAML mapping file."""
        file_path = Path(path)
        if not file_path.exists():
            raise ConfigNotFoundError(config_path=str(file_path))
        try:
            data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise SettingsError(message=f"Invalid YAML in settings file: {file_path}", cause=e) from e
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise SettingsError(message=f"Settings file must be a YAML mapping: {file_path}")
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    def parser_settings(self) -> ParserSettings:
        """Build validated ParserSettings from the ``parser`` section."""
        section = self.get("parser", {}) or {}
        if not isinstance(section, dict):
            raise SettingsError(message="'parser' section must be a mapping")
        try:
            return ParserSettings.model_validate(section)
        except PydanticValidationError as e:
            raise SettingsError(message=f"Invalid parser settings: {e}", cause=e) from e
