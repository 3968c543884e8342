"""ConfigParser: builds a ConfigTree from sysctl-style ``key = value`` text."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

from sysconf.config import ParserSettings
from sysconf.errors import ConfigLimitError, ConflictingPathError, MalformedLineError, ParseError
from sysconf.tree import Subtree, split_path

__all__ = ["ConfigParser", "ErrorPolicy", "split_lines", "COMMENT_PREFIXES", "IGNORE_PREFIX"]

logger = logging.getLogger(__name__)

COMMENT_PREFIXES = ("#", ";")
IGNORE_PREFIX = "-"
KEY_VALUE_DELIMITER = "="


def split_lines(text: str) -> list[str]:
    """Split a document on ``\\n`` only, dropping one trailing ``\\r`` per line.

    A final newline does not produce an extra empty line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


class ErrorPolicy(str, Enum):
    """What to do with a failure on a single line."""

    PROPAGATE = "propagate"
    SUPPRESS = "suppress"


class ConfigParser:
    """Line-oriented parser for the value-config format.

    A parser holds only its settings; every call to :meth:`parse` builds a
    fresh tree.
    """

    def __init__(self, settings: ParserSettings | None = None) -> None:
        self._settings = settings or ParserSettings()

    @property
    def settings(self) -> ParserSettings:
        return self._settings

    def parse(self, text: str) -> Subtree:
        """Parse a whole document. Raises on the first non-suppressed failure."""
        return self.parse_lines(split_lines(text))

    def parse_lines(self, lines: Iterable[str]) -> Subtree:
        tree = Subtree()
        max_lines = self._settings.max_lines
        skipped = 0
        line_no = 0
        for line_no, line in enumerate(lines, start=1):
            if max_lines is not None and line_no > max_lines:
                raise ConfigLimitError(limit="max_lines", maximum=max_lines)
            if not self.parse_line(tree, line, line_no):
                skipped += 1
        logger.debug("Parsed %d lines into %d leaves (%d skipped)", line_no, len(tree.leaf_paths()), skipped)
        return tree

    def parse_line(self, tree: Subtree, line: str, line_no: int = 1) -> bool:
        """Apply one line to ``tree``.

        Returns True when the line inserted a leaf and False when it was
        skipped (blank, comment, or a suppressed failure).
        """
        if not line or line.startswith(COMMENT_PREFIXES):
            return False

        policy = ErrorPolicy.PROPAGATE
        if line.startswith(IGNORE_PREFIX):
            line = line[len(IGNORE_PREFIX) :]
            policy = ErrorPolicy.SUPPRESS

        try:
            self._insert_entry(tree, line, line_no)
        except ParseError as e:
            if policy is ErrorPolicy.PROPAGATE:
                raise
            logger.debug("Ignoring line %d: %s", line_no, e.message)
            return False
        return True

    def _insert_entry(self, tree: Subtree, line: str, line_no: int) -> None:
        key, sep, value = line.partition(KEY_VALUE_DELIMITER)
        if not sep:
            raise MalformedLineError(line_no=line_no, line=line, reason="missing '='")

        key = key.strip()
        value = value.strip()
        if not key:
            raise MalformedLineError(line_no=line_no, line=line, reason="empty key")
        if not value:
            raise MalformedLineError(line_no=line_no, line=line, reason="empty value")
        if any(ch.isspace() for ch in key):
            raise MalformedLineError(line_no=line_no, line=line, reason="whitespace in key")

        segments = split_path(key)
        max_depth = self._settings.max_depth
        if max_depth is not None and len(segments) > max_depth:
            raise MalformedLineError(
                line_no=line_no, line=line, reason=f"key deeper than {max_depth} segments"
            )

        try:
            tree.insert(segments, value)
        except ConflictingPathError as e:
            raise ConflictingPathError(path=e.path, line_no=line_no) from e
