# Path: `src/sharefs/features/storage/__init__.py`
# Summary: Export storage feature domain, port and adapter symbols.
# Why: Provide a stable import surface for the factory and tests.

from .domain.attributes import DirectoryAttributes, FileAttributes, StorageAttributes
from .domain.errors import (
    FilesystemError,
    FilesystemOperation,
    FilesystemOperationFailed,
    MetadataType,
    UnableToCheckExistence,
    UnableToCopyFile,
    UnableToCreateDirectory,
    UnableToDeleteDirectory,
    UnableToDeleteFile,
    UnableToListContents,
    UnableToMoveFile,
    UnableToReadFile,
    UnableToRetrieveMetadata,
    UnableToRetrieveVisibility,
    UnableToSetVisibility,
    UnableToWriteFile,
    UnsupportedOperation,
)
from .domain.path_prefixer import PathPrefixer
from .usecases.ports import (
    FileInfo,
    FilesystemAdapter,
    MimeTypeDetector,
    ShareClient,
    ShareErrorKind,
    ShareOperationError,
)
from .adapters.mime_detector import GuessingMimeTypeDetector
from .adapters.smb_adapter import SmbAdapter

__all__ = [
    "DirectoryAttributes",
    "FileAttributes",
    "StorageAttributes",
    "FilesystemError",
    "FilesystemOperation",
    "FilesystemOperationFailed",
    "MetadataType",
    "UnableToCheckExistence",
    "UnableToCopyFile",
    "UnableToCreateDirectory",
    "UnableToDeleteDirectory",
    "UnableToDeleteFile",
    "UnableToListContents",
    "UnableToMoveFile",
    "UnableToReadFile",
    "UnableToRetrieveMetadata",
    "UnableToRetrieveVisibility",
    "UnableToSetVisibility",
    "UnableToWriteFile",
    "UnsupportedOperation",
    "PathPrefixer",
    "FileInfo",
    "FilesystemAdapter",
    "MimeTypeDetector",
    "ShareClient",
    "ShareErrorKind",
    "ShareOperationError",
    "GuessingMimeTypeDetector",
    "SmbAdapter",
]
