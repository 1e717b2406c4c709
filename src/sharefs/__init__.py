"""Adapter binding a generic filesystem contract to SMB network shares."""

from sharefs.features.storage import (
    DirectoryAttributes,
    FileAttributes,
    FilesystemAdapter,
    PathPrefixer,
    ShareClient,
    SmbAdapter,
)

__version__ = "0.1.0"

__all__ = [
    "DirectoryAttributes",
    "FileAttributes",
    "FilesystemAdapter",
    "PathPrefixer",
    "ShareClient",
    "SmbAdapter",
    "__version__",
]
