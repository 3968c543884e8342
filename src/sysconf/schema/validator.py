"""Validator: checks a parsed ConfigTree against a schema."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from sysconf.errors import MissingKeyError, SurplusKeysError, TypeMismatchError
from sysconf.schema.types import SchemaEntry
from sysconf.tree import Leaf, Subtree, split_path

__all__ = ["Validator"]

logger = logging.getLogger(__name__)


class Validator:
    """Validates trees against a fixed, ordered schema.

    The schema is copied on construction and never mutated, so one Validator
    can check any number of documents.
    """

    def __init__(self, schema: Sequence[SchemaEntry]) -> None:
        self._schema: tuple[SchemaEntry, ...] = tuple(schema)
        self._declared: frozenset[str] = frozenset(entry.key for entry in self._schema)

    @property
    def schema(self) -> tuple[SchemaEntry, ...]:
        return self._schema

    def validate(self, tree: Subtree) -> Subtree:
        """Check ``tree`` and return it unchanged. Raises on the first failure."""
        surplus = tree.leaf_paths() - self._declared
        if surplus:
            raise SurplusKeysError(keys=sorted(surplus))

        for entry in self._schema:
            leaf = self._resolve(tree, entry)
            if not entry.type.accepts(leaf.value):
                raise TypeMismatchError(key=entry.key, expected=entry.type.value, value=leaf.value)

        logger.debug("Validated %d schema entries", len(self._schema))
        return tree

    def typed(self, tree: Subtree) -> dict[str, Any]:
        """Validate ``tree`` and return a nested dict of converted values."""
        self.validate(tree)
        result: dict[str, Any] = {}
        for entry in self._schema:
            node = result
            *parents, last = split_path(entry.key)
            for segment in parents:
                node = node.setdefault(segment, {})
            node[last] = entry.type.convert(self._resolve(tree, entry).value)
        return result

    def _resolve(self, tree: Subtree, entry: SchemaEntry) -> Leaf:
        node: Subtree = tree
        *parents, last = split_path(entry.key)
        for segment in parents:
            child = node.child(segment)
            if child is None:
                raise MissingKeyError(key=entry.key, segment=segment)
            if not isinstance(child, Subtree):
                # a leaf cannot hold the rest of the path
                raise TypeMismatchError(key=entry.key, expected=entry.type.value, value=None)
            node = child

        value = node.child(last)
        if value is None:
            raise MissingKeyError(key=entry.key)
        if not isinstance(value, Leaf):
            raise TypeMismatchError(key=entry.key, expected=entry.type.value)
        return value
