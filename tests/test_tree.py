"""Tests for the ConfigTree data structure."""

from __future__ import annotations

import pytest

from sysconf.errors import ConflictingPathError
from sysconf.tree import Leaf, Subtree, join_path, split_path


def build(*entries: tuple[str, str]) -> Subtree:
    tree = Subtree()
    for key, value in entries:
        tree.insert(split_path(key), value)
    return tree


class TestPaths:
    def test_split_single_segment(self) -> None:
        assert split_path("hoge") == ["hoge"]

    def test_split_nested(self) -> None:
        assert split_path("net.ipv4.ip_forward") == ["net", "ipv4", "ip_forward"]

    def test_join(self) -> None:
        assert join_path(["a", "b", "c"]) == "a.b.c"


class TestInsert:
    def test_insert_top_level_leaf(self) -> None:
        tree = build(("hoge", "fuga"))
        assert tree.child("hoge") == Leaf("fuga")

    def test_insert_creates_intermediate_subtrees(self) -> None:
        tree = build(("a.b.c", "v"))
        a = tree.child("a")
        assert isinstance(a, Subtree)
        b = a.child("b")
        assert isinstance(b, Subtree)
        assert b.child("c") == Leaf("v")

    def test_siblings_share_subtree(self) -> None:
        tree = build(("hoge.fuga", "1"), ("hoge.piyo", "2"))
        hoge = tree.child("hoge")
        assert isinstance(hoge, Subtree)
        assert list(hoge) == ["fuga", "piyo"]

    def test_last_write_wins(self) -> None:
        tree = build(("a", "1"), ("a", "2"))
        assert tree.get("a") == Leaf("2")
        assert len(tree) == 1

    def test_leaf_as_intermediate_raises(self) -> None:
        tree = build(("a", "1"))
        with pytest.raises(ConflictingPathError) as exc_info:
            tree.insert(["a", "b"], "2")
        assert exc_info.value.path == "a"
        assert tree.get("a") == Leaf("1")

    def test_deep_leaf_as_intermediate_reports_prefix(self) -> None:
        tree = build(("a.b", "1"))
        with pytest.raises(ConflictingPathError) as exc_info:
            tree.insert(["a", "b", "c", "d"], "2")
        assert exc_info.value.path == "a.b"

    def test_subtree_cannot_become_leaf(self) -> None:
        tree = build(("a.b", "1"))
        with pytest.raises(ConflictingPathError) as exc_info:
            tree.insert(["a"], "2")
        assert exc_info.value.path == "a"
        assert isinstance(tree.get("a"), Subtree)

    def test_empty_segments_rejected(self) -> None:
        with pytest.raises(ValueError):
            Subtree().insert([], "x")


class TestGet:
    def test_get_leaf(self) -> None:
        tree = build(("a.b", "42"))
        assert tree.get("a.b") == Leaf("42")

    def test_get_subtree(self) -> None:
        tree = build(("a.b", "42"))
        node = tree.get("a")
        assert isinstance(node, Subtree)
        assert "b" in node

    def test_get_missing(self) -> None:
        tree = build(("a.b", "42"))
        assert tree.get("a.c") is None
        assert tree.get("x") is None

    def test_get_through_leaf_is_not_found(self) -> None:
        tree = build(("a", "1"))
        assert tree.get("a.b") is None


class TestWalk:
    def test_leaf_paths(self) -> None:
        tree = build(("hoge.fuga", "1"), ("hoge.piyo", "false"), ("piyo", "1.1"))
        assert tree.leaf_paths() == {"hoge.fuga", "hoge.piyo", "piyo"}

    def test_iter_leaves_is_depth_first(self) -> None:
        tree = build(("a.x", "1"), ("b", "2"), ("a.y.z", "3"))
        assert [path for path, _ in tree.iter_leaves()] == ["a.x", "a.y.z", "b"]

    def test_empty_tree_has_no_leaves(self) -> None:
        assert Subtree().leaf_paths() == set()

    def test_to_dict(self) -> None:
        tree = build(("a.b", "1"), ("c", "x"))
        assert tree.to_dict() == {"a": {"b": "1"}, "c": "x"}

    def test_structural_equality(self) -> None:
        assert build(("a.b", "1"), ("c", "2")) == build(("a.b", "1"), ("c", "2"))
        assert build(("a.b", "1")) != build(("a.b", "2"))
