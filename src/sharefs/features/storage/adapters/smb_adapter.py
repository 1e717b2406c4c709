"""
Summary: Filesystem adapter translating logical path operations into share client calls.
Why: Keep prefix handling, directory recursion and error wrapping out of callers and clients.
"""

from __future__ import annotations

import shutil
from collections.abc import Iterator, Mapping
from typing import Any, BinaryIO

from sharefs.config import settings
from sharefs.platform.logging import logger

from ..domain.attributes import DirectoryAttributes, FileAttributes, StorageAttributes
from ..domain.errors import (
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
)
from ..domain.path_prefixer import PathPrefixer, parent_directory
from ..usecases.ports import (
    FileInfo,
    MimeTypeDetector,
    ShareClient,
    ShareErrorKind,
    ShareOperationError,
)
from .mime_detector import GuessingMimeTypeDetector

# Failures raised by share clients, stream handles or nested adapter calls.
_OPERATION_ERRORS = (ShareOperationError, OSError, FilesystemOperationFailed)

_VISIBILITY_UNSUPPORTED = "SMB shares do not support visibility."


def _log_failure(error: FilesystemOperationFailed) -> None:
    logger.warning(
        "%s",
        error,
        extra={
            "share_event": "share.failure",
            "operation": error.operation.value,
            "location": error.location,
            "error_message": error.reason,
        },
    )


class SmbAdapter:
    """Filesystem adapter over an SMB share.

    Args:
        share: Share client receiving prefixed, share-relative locations.
        root: Optional directory inside the share that acts as the adapter root.
        mime_type_detector: Detector consulted by :meth:`mime_type`.
    """

    def __init__(
        self,
        share: ShareClient,
        root: str | None = None,
        *,
        mime_type_detector: MimeTypeDetector | None = None,
    ) -> None:
        self._share: ShareClient = share
        self._prefixer: PathPrefixer = PathPrefixer(root)
        self._mime_type_detector: MimeTypeDetector = (
            mime_type_detector or GuessingMimeTypeDetector()
        )

    # --- Existence ----------------------------------------------------------

    def _stat_or_none(self, path: str, location: str) -> FileInfo | None:
        try:
            return self._share.stat(location)
        except ShareOperationError as exc:
            if exc.kind is ShareErrorKind.NOT_FOUND:
                return None
            error = UnableToCheckExistence(path, str(exc))
            _log_failure(error)
            raise error from exc

    def file_exists(self, path: str) -> bool:
        info = self._stat_or_none(path, self._prefixer.prefix_path(path))
        return info is not None and not info.is_directory

    def directory_exists(self, path: str) -> bool:
        location = self._prefixer.prefix_directory_path(path)
        if not location:
            return True
        info = self._stat_or_none(path, location)
        return info is not None and info.is_directory

    def has(self, path: str) -> bool:
        """Return whether ``path`` exists as either a file or a directory."""

        location = self._prefixer.prefix_directory_path(path)
        if not location:
            return True
        return self._stat_or_none(path, location) is not None

    # --- Writing ------------------------------------------------------------

    def write(
        self,
        path: str,
        contents: bytes | str,
        config: Mapping[str, Any] | None = None,
    ) -> None:
        """Write ``contents`` to ``path``, creating parent directories as needed.

        ``config`` is accepted for contract compatibility and ignored.
        """
        del config
        data = contents.encode("utf-8") if isinstance(contents, str) else contents
        try:
            self._ensure_directory(parent_directory(path))
            stream = self._share.write(self._prefixer.prefix_path(path))
            try:
                _ = stream.write(data)
            finally:
                stream.close()
        except _OPERATION_ERRORS as exc:
            error = UnableToWriteFile(path, str(exc))
            _log_failure(error)
            raise error from exc

        logger.debug(
            "Wrote %s",
            path,
            extra={"share_event": "share.write", "location": path, "size": len(data)},
        )

    def write_stream(
        self,
        path: str,
        contents: BinaryIO,
        config: Mapping[str, Any] | None = None,
    ) -> None:
        """Copy the caller's stream into ``path`` until it is exhausted.

        The caller keeps ownership of ``contents``.
        """
        del config
        try:
            self._ensure_directory(parent_directory(path))
            stream = self._share.write(self._prefixer.prefix_path(path))
            try:
                shutil.copyfileobj(contents, stream, settings.STREAM_CHUNK_SIZE)
            finally:
                stream.close()
        except _OPERATION_ERRORS as exc:
            error = UnableToWriteFile(path, str(exc))
            _log_failure(error)
            raise error from exc

        logger.debug("Wrote %s", path, extra={"share_event": "share.write", "location": path})

    # --- Reading ------------------------------------------------------------

    def read(self, path: str) -> bytes:
        try:
            stream = self._share.read(self._prefixer.prefix_path(path))
            try:
                contents = stream.read()
            finally:
                stream.close()
        except _OPERATION_ERRORS as exc:
            error = UnableToReadFile(path, str(exc))
            _log_failure(error)
            raise error from exc

        logger.debug(
            "Read %s",
            path,
            extra={"share_event": "share.read", "location": path, "size": len(contents)},
        )
        return contents

    def read_stream(self, path: str) -> BinaryIO:
        """Return an open read handle; the caller must close it."""

        try:
            return self._share.read(self._prefixer.prefix_path(path))
        except _OPERATION_ERRORS as exc:
            error = UnableToReadFile(path, str(exc))
            _log_failure(error)
            raise error from exc

    # --- Deleting -----------------------------------------------------------

    def delete(self, path: str) -> None:
        """Delete a file; a missing file is not an error."""

        try:
            self._share.delete(self._prefixer.prefix_path(path))
        except ShareOperationError as exc:
            if exc.kind is ShareErrorKind.NOT_FOUND:
                logger.debug(
                    "Nothing to delete at %s",
                    path,
                    extra={"share_event": "share.delete.missing", "location": path},
                )
                return
            error = UnableToDeleteFile(path, str(exc))
            _log_failure(error)
            raise error from exc

        logger.info("Deleted %s", path, extra={"share_event": "share.delete", "location": path})

    def delete_directory(self, path: str) -> None:
        """Delete ``path`` and everything below it.

        Files go first, then directories deepest first, so no directory is
        removed while it still has children.
        """
        if not path.strip("/\\"):
            error = UnableToDeleteDirectory(path, "Refusing to delete the adapter root.")
            _log_failure(error)
            raise error

        try:
            descendants = list(self._walk(self._prefixer.prefix_directory_path(path), deep=True))
            files = [info for info in descendants if not info.is_directory]
            directories = [info for info in descendants if info.is_directory]
            directories.sort(key=lambda info: info.path.count("/"), reverse=True)

            for info in files:
                self._share.delete(info.path)
            for info in directories:
                self._share.rmdir(info.path)
            self._share.rmdir(self._prefixer.prefix_directory_path(path))
        except _OPERATION_ERRORS as exc:
            error = UnableToDeleteDirectory(path, str(exc))
            _log_failure(error)
            raise error from exc

        logger.info(
            "Deleted directory %s",
            path,
            extra={
                "share_event": "share.directory.delete",
                "location": path,
                "count": len(descendants),
            },
        )

    # --- Directories --------------------------------------------------------

    def create_directory(self, path: str, config: Mapping[str, Any] | None = None) -> None:
        del config
        try:
            self._ensure_directory(path)
        except _OPERATION_ERRORS as exc:
            error = UnableToCreateDirectory(path, str(exc))
            _log_failure(error)
            raise error from exc

    def _is_directory(self, path: str) -> bool:
        location = self._prefixer.prefix_directory_path(path)
        if not location:
            return True
        try:
            return self._share.stat(location).is_directory
        except ShareOperationError as exc:
            if exc.kind is ShareErrorKind.NOT_FOUND:
                return False
            raise

    def _ensure_directory(self, path: str) -> None:
        """Create ``path`` and any missing ancestors, shallowest first."""

        path = path.strip("/")
        if not path or self._is_directory(path):
            return

        parent = parent_directory(path)
        if parent:
            self._ensure_directory(parent)

        try:
            self._share.mkdir(self._prefixer.prefix_directory_path(path))
        except ShareOperationError as exc:
            if exc.kind is not ShareErrorKind.ALREADY_EXISTS or not self._is_directory(path):
                raise
            logger.debug(
                "Directory %s appeared concurrently",
                path,
                extra={"share_event": "share.directory.exists", "location": path},
            )
            return

        logger.info(
            "Created directory %s",
            path,
            extra={"share_event": "share.directory.create", "location": path},
        )

    # --- Visibility ---------------------------------------------------------

    def set_visibility(self, path: str, visibility: str) -> None:
        del visibility
        raise UnableToSetVisibility(path, _VISIBILITY_UNSUPPORTED)

    def visibility(self, path: str) -> FileAttributes:
        raise UnableToRetrieveVisibility(path, _VISIBILITY_UNSUPPORTED)

    # --- Metadata -----------------------------------------------------------

    def _stat_for_metadata(self, path: str, metadata_type: MetadataType) -> FileInfo:
        try:
            return self._share.stat(self._prefixer.prefix_path(path))
        except ShareOperationError as exc:
            error = UnableToRetrieveMetadata(path, metadata_type, str(exc))
            _log_failure(error)
            raise error from exc

    def mime_type(self, path: str) -> FileAttributes:
        try:
            stream = self._share.read(self._prefixer.prefix_path(path))
            try:
                sample = stream.read(settings.MIME_SNIFF_BYTES)
            finally:
                stream.close()
        except _OPERATION_ERRORS as exc:
            error = UnableToRetrieveMetadata(path, MetadataType.MIME_TYPE, str(exc))
            _log_failure(error)
            raise error from exc

        mime_type = self._mime_type_detector.detect(path, sample)
        if mime_type is None:
            error = UnableToRetrieveMetadata(path, MetadataType.MIME_TYPE, "Unknown.")
            _log_failure(error)
            raise error

        return FileAttributes(path, mime_type=mime_type)

    def last_modified(self, path: str) -> FileAttributes:
        info = self._stat_for_metadata(path, MetadataType.LAST_MODIFIED)
        if info.mtime is None:
            error = UnableToRetrieveMetadata(
                path, MetadataType.LAST_MODIFIED, "Share returned no timestamp."
            )
            _log_failure(error)
            raise error
        return FileAttributes(path, last_modified=int(info.mtime))

    def file_size(self, path: str) -> FileAttributes:
        info = self._stat_for_metadata(path, MetadataType.FILE_SIZE)
        if info.is_directory:
            error = UnableToRetrieveMetadata(path, MetadataType.FILE_SIZE, "Path is a directory.")
            _log_failure(error)
            raise error
        return FileAttributes(path, file_size=info.size)

    def metadata(self, path: str) -> StorageAttributes:
        """Return normalised attributes for a file or directory."""

        location = self._prefixer.prefix_directory_path(path)
        try:
            info = self._share.stat(location)
        except ShareOperationError as exc:
            error = UnableToRetrieveMetadata(path, MetadataType.METADATA, str(exc))
            _log_failure(error)
            raise error from exc
        return self._normalize(info)

    # --- Listing ------------------------------------------------------------

    def _normalize(self, info: FileInfo) -> StorageAttributes:
        last_modified = int(info.mtime) if info.mtime is not None else None
        if info.is_directory:
            return DirectoryAttributes(
                self._prefixer.strip_directory_prefix(info.path),
                last_modified=last_modified,
            )
        return FileAttributes(
            self._prefixer.strip_prefix(info.path),
            file_size=info.size,
            last_modified=last_modified,
        )

    def _walk(self, location: str, deep: bool) -> Iterator[FileInfo]:
        """Yield share entries below ``location`` in depth-first pre-order."""

        for info in self._share.listdir(location):
            yield info
            if deep and info.is_directory:
                yield from self._walk(info.path, deep=True)

    def list_contents(self, path: str, deep: bool = False) -> Iterator[StorageAttributes]:
        """Lazily yield attributes of the entries below ``path``.

        With ``deep`` each directory is yielded before its own contents.
        Failures surface as ``UnableToListContents`` while iterating.
        """
        location = self._prefixer.prefix_directory_path(path)
        try:
            for info in self._walk(location, deep):
                yield self._normalize(info)
        except (ShareOperationError, OSError) as exc:
            error = UnableToListContents(path, str(exc))
            _log_failure(error)
            raise error from exc

    # --- Moving and copying -------------------------------------------------

    def move(
        self,
        source: str,
        destination: str,
        config: Mapping[str, Any] | None = None,
    ) -> None:
        del config
        try:
            self._ensure_directory(parent_directory(destination))
            self._share.rename(
                self._prefixer.prefix_path(source),
                self._prefixer.prefix_path(destination),
            )
        except _OPERATION_ERRORS as exc:
            error = UnableToMoveFile(source, destination, str(exc))
            _log_failure(error)
            raise error from exc

        logger.info(
            "Moved %s to %s",
            source,
            destination,
            extra={"share_event": "share.move", "location": source, "destination": destination},
        )

    def copy(
        self,
        source: str,
        destination: str,
        config: Mapping[str, Any] | None = None,
    ) -> None:
        try:
            stream = self.read_stream(source)
            try:
                self.write_stream(destination, stream, config)
            finally:
                stream.close()
        except _OPERATION_ERRORS as exc:
            error = UnableToCopyFile(source, destination, str(exc))
            _log_failure(error)
            raise error from exc

        logger.info(
            "Copied %s to %s",
            source,
            destination,
            extra={"share_event": "share.copy", "location": source, "destination": destination},
        )


__all__ = ["SmbAdapter"]
