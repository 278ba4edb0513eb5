"""Domain services for path resolution and construction.

Both services are pure string manipulation: they never touch the disk, so
they can be exercised with Unix and Windows style inputs on any platform.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import Any

StrPath = str | os.PathLike


class PathResolver:
    """Anchors relative paths at a base directory."""

    def __init__(self, base_path: StrPath, separator: str = os.sep):
        """Initialize the resolver.

        Args:
            base_path: Directory relative paths are resolved against
            separator: Separator used when joining (default: os.sep)
        """
        self._base_path = os.fspath(base_path)
        self._separator = separator

    @property
    def base_path(self) -> str:
        """Get the base directory."""
        return self._base_path

    @staticmethod
    def is_absolute(path: StrPath) -> bool:
        """Check whether a path is absolute in Unix or Windows form.

        A path is absolute when it starts with a root separator, or when its
        second character is a drive-letter colon (``C:``).
        """
        text = os.fspath(path)
        if text.startswith(("/", os.sep)):
            return True
        return text[1:2] == ":"

    def resolve(self, path: StrPath) -> str:
        """Resolve a path against the base directory.

        Args:
            path: Relative or absolute path

        Returns:
            The path unchanged if absolute, otherwise base and path joined by
            exactly one separator
        """
        text = os.fspath(path)
        if self.is_absolute(text):
            return text
        return (
            self._base_path.rstrip(self._separator)
            + self._separator
            + text.lstrip(self._separator)
        )


class PathBuilder:
    """Stateless helpers for assembling path strings."""

    @staticmethod
    def build_path(segments: Iterable[Any], separator: str = os.sep) -> str:
        """Join segments into a normalized path.

        Separators are trimmed from both ends of every segment except the
        first, which keeps its leading separator so an absolute root
        survives. Empty segments are dropped.
        """
        root = ""
        parts: list[str] = []
        for index, segment in enumerate(segments):
            text = os.fspath(segment) if isinstance(segment, os.PathLike) else str(segment)
            if index == 0:
                if text.startswith(separator) and not text.strip(separator):
                    root = separator
                    continue
                text = text.rstrip(separator)
            else:
                text = text.strip(separator)
            if text:
                parts.append(text)
        return root + separator.join(parts)

    @staticmethod
    def append_before_extension(path: StrPath, suffix: str, separator: str = os.sep) -> str:
        """Insert a suffix before the extension of the final path component.

        ``report.txt`` with ``_v2`` becomes ``report_v2.txt``; a component
        without a dot gets the suffix appended.
        """
        text = os.fspath(path)
        component_start = text.rfind(separator) + 1
        dot = text.rfind(".", component_start)
        if dot == -1:
            return text + suffix
        return text[:dot] + suffix + text[dot:]


def build_path(segments: Iterable[Any]) -> str:
    """Join path segments with the platform separator."""
    return PathBuilder.build_path(segments)


def append_before_extension(path: StrPath, suffix: str) -> str:
    """Insert ``suffix`` before the last extension of ``path``."""
    return PathBuilder.append_before_extension(path, suffix)
