"""
Summary: Attribute records describing files and directories on a share.
Why: Return transient, prefix-free metadata that does not leak SMB client types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias


@dataclass(slots=True, frozen=True)
class FileAttributes:
    """Metadata for a single file; optional fields are filled per query."""

    path: str
    file_size: int | None = None
    last_modified: int | None = None
    mime_type: str | None = None

    @property
    def type(self) -> Literal["file"]:
        return "file"

    def is_file(self) -> bool:
        return True

    def is_dir(self) -> bool:
        return False


@dataclass(slots=True, frozen=True)
class DirectoryAttributes:
    """Metadata for a directory."""

    path: str
    last_modified: int | None = None

    @property
    def type(self) -> Literal["dir"]:
        return "dir"

    def is_file(self) -> bool:
        return False

    def is_dir(self) -> bool:
        return True


StorageAttributes: TypeAlias = FileAttributes | DirectoryAttributes


__all__ = ["DirectoryAttributes", "FileAttributes", "StorageAttributes"]
