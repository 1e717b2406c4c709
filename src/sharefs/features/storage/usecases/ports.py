"""
Summary: Protocols and records for the share client, MIME detection and the adapter contract.
Why: Let any conforming SMB client, including in-memory doubles, drive the adapter.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, BinaryIO, Protocol, runtime_checkable

from ..domain.attributes import FileAttributes, StorageAttributes


class ShareErrorKind(Enum):
    """Distinguishable failure conditions reported by a share client."""

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    INVALID_TYPE = "invalid_type"
    UNKNOWN = "unknown"


class ShareOperationError(Exception):
    """Raised by share clients; ``kind`` tells the adapter how to react."""

    def __init__(self, location: str, kind: ShareErrorKind, message: str = "") -> None:
        detail = message or kind.value.replace("_", " ")
        super().__init__(f"{detail}: {location}")
        self.location: str = location
        self.kind: ShareErrorKind = kind


@dataclass(slots=True, frozen=True)
class FileInfo:
    """Stat result for an entry on the share, addressed by its share-relative path."""

    path: str
    is_directory: bool
    size: int | None = None
    mtime: float | None = None


@runtime_checkable
class ShareClient(Protocol):
    """Capability interface over an SMB share.

    Paths are share-relative and use forward slashes; ``""`` is the share root.
    Every method raises ``ShareOperationError`` on failure.
    """

    def stat(self, path: str) -> FileInfo:
        """Return metadata for ``path``."""
        ...

    def read(self, path: str) -> BinaryIO:
        """Open ``path`` for binary reading."""
        ...

    def write(self, path: str) -> BinaryIO:
        """Open ``path`` for binary writing, truncating existing content."""
        ...

    def delete(self, path: str) -> None:
        """Delete the file at ``path``."""
        ...

    def rmdir(self, path: str) -> None:
        """Remove the empty directory at ``path``."""
        ...

    def mkdir(self, path: str) -> None:
        """Create the directory ``path``; its parent must exist."""
        ...

    def rename(self, source: str, destination: str) -> None:
        """Rename ``source`` to ``destination``."""
        ...

    def listdir(self, path: str) -> list[FileInfo]:
        """Return the immediate children of the directory ``path``."""
        ...


@runtime_checkable
class MimeTypeDetector(Protocol):
    """Classify file content."""

    def detect(self, filename: str, contents: bytes) -> str | None:
        """Return a MIME type, or ``None`` when it cannot be determined."""
        ...


@runtime_checkable
class FilesystemAdapter(Protocol):
    """Operation contract consumed by a generic filesystem facade."""

    def file_exists(self, path: str) -> bool: ...

    def directory_exists(self, path: str) -> bool: ...

    def write(self, path: str, contents: bytes | str, config: Mapping[str, Any] | None = None) -> None: ...

    def write_stream(self, path: str, contents: BinaryIO, config: Mapping[str, Any] | None = None) -> None: ...

    def read(self, path: str) -> bytes: ...

    def read_stream(self, path: str) -> BinaryIO: ...

    def delete(self, path: str) -> None: ...

    def delete_directory(self, path: str) -> None: ...

    def create_directory(self, path: str, config: Mapping[str, Any] | None = None) -> None: ...

    def set_visibility(self, path: str, visibility: str) -> None: ...

    def visibility(self, path: str) -> FileAttributes: ...

    def mime_type(self, path: str) -> FileAttributes: ...

    def last_modified(self, path: str) -> FileAttributes: ...

    def file_size(self, path: str) -> FileAttributes: ...

    def list_contents(self, path: str, deep: bool = False) -> Iterator[StorageAttributes]: ...

    def move(self, source: str, destination: str, config: Mapping[str, Any] | None = None) -> None: ...

    def copy(self, source: str, destination: str, config: Mapping[str, Any] | None = None) -> None: ...


__all__ = [
    "FileInfo",
    "FilesystemAdapter",
    "MimeTypeDetector",
    "ShareClient",
    "ShareErrorKind",
    "ShareOperationError",
]
