"""Tests for the adapter exception hierarchy."""

from __future__ import annotations

from sharefs.features.storage import (
    FilesystemError,
    FilesystemOperation,
    FilesystemOperationFailed,
    MetadataType,
    UnableToCopyFile,
    UnableToRetrieveMetadata,
    UnableToRetrieveVisibility,
    UnableToSetVisibility,
    UnableToWriteFile,
    UnsupportedOperation,
)


def test_operation_failure_message_and_cause() -> None:
    cause = OSError("disk full")
    try:
        try:
            raise cause
        except OSError as exc:
            raise UnableToWriteFile("a/b.txt", str(exc)) from exc
    except UnableToWriteFile as error:
        assert str(error) == "Unable to write file at location: a/b.txt. disk full"
        assert error.cause is cause
        assert error.operation is FilesystemOperation.WRITE
        assert isinstance(error, FilesystemError)


def test_transfer_failures_name_both_ends() -> None:
    error = UnableToCopyFile("source.txt", "destination.txt")

    assert str(error) == "Unable to copy file from source.txt to destination.txt."
    assert error.location == "source.txt"
    assert error.destination == "destination.txt"


def test_metadata_failure_mentions_metadata_type() -> None:
    error = UnableToRetrieveMetadata("dir", MetadataType.FILE_SIZE, "Path is a directory.")

    assert str(error) == (
        "Unable to retrieve the file_size for file at location: dir. Path is a directory."
    )
    assert error.operation is FilesystemOperation.RETRIEVE_METADATA


def test_visibility_failures_are_unsupported_operations() -> None:
    assert issubclass(UnableToSetVisibility, UnsupportedOperation)
    assert issubclass(UnableToRetrieveVisibility, UnsupportedOperation)
    assert issubclass(UnsupportedOperation, FilesystemOperationFailed)
    assert UnableToSetVisibility("x").cause is None
