"""
Summary: Map logical paths to share-relative locations and back.
Why: Callers never see the configured root while the share client always receives it.
"""

from __future__ import annotations

import posixpath

_SEPARATORS: str = "/\\"


class PathPrefixer:
    """Prepend and strip a configured root segment.

    Logical paths use forward slashes and never start with a separator.
    Share locations are the same paths with ``root/`` in front.
    """

    def __init__(self, root: str | None, separator: str = "/") -> None:
        trimmed = (root or "").replace("\\", separator).strip(_SEPARATORS)
        self._separator: str = separator
        self._prefix: str = f"{trimmed}{separator}" if trimmed else ""

    @property
    def prefix(self) -> str:
        """Return the prefix including its trailing separator, or ``""``."""

        return self._prefix

    def prefix_path(self, path: str) -> str:
        """Return the share location for a file path."""

        return self._prefix + path.lstrip(_SEPARATORS)

    def prefix_directory_path(self, path: str) -> str:
        """Return the share location for a directory path, without a trailing separator."""

        return self.prefix_path(path).rstrip(_SEPARATORS)

    def strip_prefix(self, location: str) -> str:
        """Return the logical path for a share location."""

        normalized = location.replace("\\", self._separator).lstrip(_SEPARATORS)
        if not self._prefix:
            return normalized
        if normalized.startswith(self._prefix):
            return normalized[len(self._prefix):]
        if normalized == self._prefix.rstrip(self._separator):
            return ""
        return normalized

    def strip_directory_prefix(self, location: str) -> str:
        """Return the logical path for a share directory location."""

        return self.strip_prefix(location).rstrip(_SEPARATORS)


def parent_directory(path: str) -> str:
    """Return the logical parent of ``path``; the root yields ``""``."""

    return posixpath.dirname(path.strip(_SEPARATORS))


__all__ = ["PathPrefixer", "parent_directory"]
