"""
Summary: Exception hierarchy raised by filesystem adapters.
Why: Give callers one failure type per operation, each carrying the logical path and cause.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar


class FilesystemOperation(StrEnum):
    """Operation tag attached to every adapter failure."""

    EXISTENCE_CHECK = "existence_check"
    WRITE = "write"
    READ = "read"
    DELETE = "delete"
    DELETE_DIRECTORY = "delete_directory"
    CREATE_DIRECTORY = "create_directory"
    LIST_CONTENTS = "list_contents"
    MOVE = "move"
    COPY = "copy"
    SET_VISIBILITY = "set_visibility"
    RETRIEVE_METADATA = "retrieve_metadata"


class MetadataType(StrEnum):
    """Kind of metadata a caller asked for."""

    METADATA = "metadata"
    MIME_TYPE = "mime_type"
    LAST_MODIFIED = "last_modified"
    FILE_SIZE = "file_size"
    VISIBILITY = "visibility"


class FilesystemError(Exception):
    """Base exception for filesystem adapter errors."""


class FilesystemOperationFailed(FilesystemError):
    """Raised when an adapter operation cannot complete.

    The originating exception, when there is one, is chained as ``__cause__``.
    """

    operation: ClassVar[FilesystemOperation]
    _summary: ClassVar[str] = "Unable to complete operation"

    def __init__(self, location: str, reason: str = "") -> None:
        self.location: str = location
        self.reason: str = reason
        super().__init__(self._compose_message())

    def _compose_message(self) -> str:
        message = f"{self._summary} at location: {self.location}."
        return f"{message} {self.reason}" if self.reason else message

    @property
    def cause(self) -> BaseException | None:
        """Return the wrapped exception, if any."""

        return self.__cause__


class UnableToCheckExistence(FilesystemOperationFailed):
    operation = FilesystemOperation.EXISTENCE_CHECK
    _summary = "Unable to check existence"


class UnableToWriteFile(FilesystemOperationFailed):
    operation = FilesystemOperation.WRITE
    _summary = "Unable to write file"


class UnableToReadFile(FilesystemOperationFailed):
    operation = FilesystemOperation.READ
    _summary = "Unable to read file"


class UnableToDeleteFile(FilesystemOperationFailed):
    operation = FilesystemOperation.DELETE
    _summary = "Unable to delete file"


class UnableToDeleteDirectory(FilesystemOperationFailed):
    operation = FilesystemOperation.DELETE_DIRECTORY
    _summary = "Unable to delete directory"


class UnableToCreateDirectory(FilesystemOperationFailed):
    operation = FilesystemOperation.CREATE_DIRECTORY
    _summary = "Unable to create directory"


class UnableToListContents(FilesystemOperationFailed):
    operation = FilesystemOperation.LIST_CONTENTS
    _summary = "Unable to list contents"


class _TransferFailed(FilesystemOperationFailed):
    """Failure of an operation that has both a source and a destination."""

    def __init__(self, source: str, destination: str, reason: str = "") -> None:
        self.source: str = source
        self.destination: str = destination
        super().__init__(source, reason)

    def _compose_message(self) -> str:
        message = f"{self._summary} from {self.source} to {self.destination}."
        return f"{message} {self.reason}" if self.reason else message


class UnableToMoveFile(_TransferFailed):
    operation = FilesystemOperation.MOVE
    _summary = "Unable to move file"


class UnableToCopyFile(_TransferFailed):
    operation = FilesystemOperation.COPY
    _summary = "Unable to copy file"


class UnableToRetrieveMetadata(FilesystemOperationFailed):
    """Raised when a metadata query (size, timestamp, MIME type) fails."""

    operation = FilesystemOperation.RETRIEVE_METADATA

    def __init__(self, location: str, metadata_type: MetadataType, reason: str = "") -> None:
        self.metadata_type: MetadataType = metadata_type
        super().__init__(location, reason)

    def _compose_message(self) -> str:
        message = (
            f"Unable to retrieve the {self.metadata_type.value} for file "
            f"at location: {self.location}."
        )
        return f"{message} {self.reason}" if self.reason else message


class UnsupportedOperation(FilesystemOperationFailed):
    """Raised for operations the SMB share has no model for."""


class UnableToSetVisibility(UnsupportedOperation):
    operation = FilesystemOperation.SET_VISIBILITY
    _summary = "Unable to set visibility"


class UnableToRetrieveVisibility(UnsupportedOperation):
    operation = FilesystemOperation.RETRIEVE_METADATA
    _summary = "Unable to retrieve the visibility for file"


__all__ = [
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
]
