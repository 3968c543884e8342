"""ConfigTree data structure: nested subtrees with string leaves."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

from sysconf.errors import ConflictingPathError

__all__ = ["Leaf", "Subtree", "ConfigValue", "split_path", "join_path"]

PATH_SEPARATOR = "."


def split_path(path: str) -> list[str]:
    """Split a dotted path into its segments."""
    return path.split(PATH_SEPARATOR)


def join_path(segments: Sequence[str]) -> str:
    """Join segments back into a dotted path."""
    return PATH_SEPARATOR.join(segments)


@dataclass(frozen=True)
class Leaf:
    """A terminal config value, always stored as the raw string."""

    value: str


@dataclass
class Subtree:
    """An intermediate node mapping key segments to leaves or subtrees.

    The root of every parsed document is a Subtree. Children keep the order
    in which they were first inserted.
    """

    children: dict[str, ConfigValue] = field(default_factory=dict)

    def __contains__(self, segment: object) -> bool:
        return segment in self.children

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[str]:
        return iter(self.children)

    def child(self, segment: str) -> ConfigValue | None:
        """Return the direct child named ``segment``, or None."""
        return self.children.get(segment)

    def get(self, path: str) -> ConfigValue | None:
        """Resolve a dotted path.

        Returns None when any segment is missing or when the walk has to pass
        through a leaf.
        """
        node: ConfigValue = self
        for segment in split_path(path):
            if not isinstance(node, Subtree):
                return None
            next_node = node.child(segment)
            if next_node is None:
                return None
            node = next_node
        return node

    def insert(self, segments: Sequence[str], value: str) -> None:
        """Set the leaf at ``segments`` to ``value``, creating subtrees on the way.

        An existing leaf at the final segment is overwritten. A leaf on an
        intermediate segment, or a subtree at the final one, raises
        ConflictingPathError.
        """
        if not segments:
            raise ValueError("insert requires at least one segment")
        node = self
        for depth, segment in enumerate(segments[:-1]):
            next_node = node.children.setdefault(segment, Subtree())
            if isinstance(next_node, Leaf):
                raise ConflictingPathError(path=join_path(segments[: depth + 1]))
            node = next_node

        last = segments[-1]
        if isinstance(node.children.get(last), Subtree):
            raise ConflictingPathError(path=join_path(segments))
        node.children[last] = Leaf(value)

    def iter_leaves(self, prefix: str = "") -> Iterator[tuple[str, Leaf]]:
        """Yield ``(dotted_path, leaf)`` for every leaf, depth first."""
        for segment, node in self.children.items():
            path = f"{prefix}{PATH_SEPARATOR}{segment}" if prefix else segment
            if isinstance(node, Subtree):
                yield from node.iter_leaves(path)
            else:
                yield path, node

    def leaf_paths(self) -> set[str]:
        """Dotted paths of every leaf in the tree."""
        return {path for path, _ in self.iter_leaves()}

    def to_dict(self) -> dict[str, Any]:
        """Plain nested-dict copy with leaves as strings."""
        result: dict[str, Any] = {}
        for segment, node in self.children.items():
            if isinstance(node, Subtree):
                result[segment] = node.to_dict()
            else:
                result[segment] = node.value
        return result


ConfigValue = Union[Leaf, Subtree]
