"""Tests for schema type definitions."""

from __future__ import annotations

import math
from dataclasses import FrozenInstanceError

import pytest

from sysconf.schema.types import ScalarType, SchemaEntry


class TestScalarType:
    def test_values(self) -> None:
        assert [t.value for t in ScalarType] == ["int", "float", "string", "bool"]

    def test_lookup_is_case_sensitive(self) -> None:
        assert ScalarType("int") is ScalarType.INT
        with pytest.raises(ValueError):
            ScalarType("Int")

    def test_is_str_enum(self) -> None:
        assert ScalarType.BOOL == "bool"


class TestIntType:
    @pytest.mark.parametrize("raw", ["42", "0", "-7", "+7", "9223372036854775807", "-9223372036854775808"])
    def test_accepts(self, raw: str) -> None:
        assert ScalarType.INT.accepts(raw)

    @pytest.mark.parametrize(
        "raw",
        ["4.2", "1.0", "abc", "", " 1", "1 ", "1_000", "0x10", "9223372036854775808", "-9223372036854775809"],
    )
    def test_rejects(self, raw: str) -> None:
        assert not ScalarType.INT.accepts(raw)

    def test_convert(self) -> None:
        assert ScalarType.INT.convert("-12") == -12


class TestFloatType:
    @pytest.mark.parametrize("raw", ["4.2", "2", "-0.5", "1e10", ".5", "inf", "NaN"])
    def test_accepts(self, raw: str) -> None:
        assert ScalarType.FLOAT.accepts(raw)

    @pytest.mark.parametrize("raw", ["abc", "true", "", " 1.5", "1_0.0", "1.2.3", "\u0661", "\u0661.\u0665", "\uff11"])
    def test_rejects(self, raw: str) -> None:
        assert not ScalarType.FLOAT.accepts(raw)

    def test_convert(self) -> None:
        assert ScalarType.FLOAT.convert("2") == 2.0
        assert math.isinf(ScalarType.FLOAT.convert("inf"))


class TestBoolType:
    @pytest.mark.parametrize("raw", ["true", "false"])
    def test_accepts(self, raw: str) -> None:
        assert ScalarType.BOOL.accepts(raw)

    @pytest.mark.parametrize("raw", ["1", "0", "yes", "no", "True", "FALSE", ""])
    def test_rejects(self, raw: str) -> None:
        assert not ScalarType.BOOL.accepts(raw)

    def test_convert(self) -> None:
        assert ScalarType.BOOL.convert("true") is True
        assert ScalarType.BOOL.convert("false") is False


class TestStringType:
    @pytest.mark.parametrize("raw", ["anything", "42", "", "with spaces"])
    def test_accepts_everything(self, raw: str) -> None:
        assert ScalarType.STRING.accepts(raw)
        assert ScalarType.STRING.convert(raw) == raw


class TestSchemaEntry:
    def test_is_frozen(self) -> None:
        entry = SchemaEntry(key="a", type=ScalarType.INT)
        with pytest.raises(FrozenInstanceError):
            entry.key = "b"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert SchemaEntry("a.b", ScalarType.INT) == SchemaEntry("a.b", ScalarType.INT)
