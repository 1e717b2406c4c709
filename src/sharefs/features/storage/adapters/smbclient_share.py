"""
Summary: ShareClient implementation backed by the smbclient module of smbprotocol.
Why: Confine UNC path building and SMBOSError translation to one adapter.
"""

from __future__ import annotations

import errno
import posixpath
import stat as stat_module
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, BinaryIO, cast

import smbclient
from smbprotocol.exceptions import SMBException

from sharefs.config.config import CONNECTION_TIMEOUT_DEFAULT, DEFAULT_SMB_PORT
from sharefs.platform.logging import logger

from ..usecases.ports import FileInfo, ShareErrorKind, ShareOperationError

_ERRNO_KINDS: dict[int, ShareErrorKind] = {
    errno.ENOENT: ShareErrorKind.NOT_FOUND,
    errno.EEXIST: ShareErrorKind.ALREADY_EXISTS,
    errno.EISDIR: ShareErrorKind.INVALID_TYPE,
    errno.ENOTDIR: ShareErrorKind.INVALID_TYPE,
}


def to_unc_path(server: str, share: str, relative_path: str | None) -> str:
    r"""Build a UNC path such as ``\\server\share\dir\file`` for smbclient."""

    rel = (relative_path or "").strip("/").strip("\\")
    if rel:
        rel = rel.replace("/", "\\")
        return f"\\\\{server}\\{share}\\{rel}"
    return f"\\\\{server}\\{share}"


def _normalize(path: str) -> str:
    return path.replace("\\", "/").strip("/")


@contextmanager
def _translate_errors(location: str) -> Iterator[None]:
    """Re-raise smbprotocol failures as ``ShareOperationError``."""

    try:
        yield
    except OSError as exc:
        kind = _ERRNO_KINDS.get(exc.errno or 0, ShareErrorKind.UNKNOWN)
        raise ShareOperationError(location, kind, exc.strerror or str(exc)) from exc
    except SMBException as exc:
        raise ShareOperationError(location, ShareErrorKind.UNKNOWN, str(exc)) from exc


class SmbClientShare:
    """A single SMB share reached through ``smbclient``'s session cache."""

    def __init__(
        self,
        server: str,
        share: str,
        *,
        username: str | None = None,
        password: str | None = None,
        port: int = DEFAULT_SMB_PORT,
        encrypt: bool | None = None,
        connection_timeout: int = CONNECTION_TIMEOUT_DEFAULT,
    ) -> None:
        self.server: str = server
        self.share: str = share
        self._client_kwargs: dict[str, Any] = {
            "username": username,
            "password": password,
            "port": port,
            "encrypt": encrypt,
            "connection_timeout": connection_timeout,
        }

    @classmethod
    def connect(
        cls,
        server: str,
        share: str,
        *,
        username: str | None = None,
        password: str | None = None,
        domain: str | None = None,
        port: int = DEFAULT_SMB_PORT,
        encrypt: bool | None = None,
        connection_timeout: int = CONNECTION_TIMEOUT_DEFAULT,
    ) -> "SmbClientShare":
        """Register a session with the server and return a share bound to it.

        Raises:
            ShareOperationError: If the session cannot be established.
        """
        if username and domain:
            username = f"{domain}\\{username}"

        with _translate_errors(to_unc_path(server, share, None)):
            _ = smbclient.register_session(
                server,
                username=username,
                password=password,
                port=port,
                encrypt=encrypt,
                connection_timeout=connection_timeout,
            )
        logger.debug("Registered SMB session for %s:%s", server, port)

        return cls(
            server,
            share,
            username=username,
            password=password,
            port=port,
            encrypt=encrypt,
            connection_timeout=connection_timeout,
        )

    def close(self) -> None:
        """Drop the cached session for this server."""

        with _translate_errors(to_unc_path(self.server, self.share, None)):
            smbclient.delete_session(self.server, port=self._client_kwargs["port"])

    def _unc(self, path: str) -> str:
        return to_unc_path(self.server, self.share, path)

    def stat(self, path: str) -> FileInfo:
        with _translate_errors(path):
            result = smbclient.stat(self._unc(path), **self._client_kwargs)
        is_directory = stat_module.S_ISDIR(result.st_mode)
        return FileInfo(
            path=_normalize(path),
            is_directory=is_directory,
            size=None if is_directory else int(result.st_size),
            mtime=float(result.st_mtime),
        )

    def read(self, path: str) -> BinaryIO:
        with _translate_errors(path):
            handle = smbclient.open_file(self._unc(path), mode="rb", **self._client_kwargs)
        return cast(BinaryIO, handle)

    def write(self, path: str) -> BinaryIO:
        with _translate_errors(path):
            handle = smbclient.open_file(self._unc(path), mode="wb", **self._client_kwargs)
        return cast(BinaryIO, handle)

    def delete(self, path: str) -> None:
        with _translate_errors(path):
            smbclient.remove(self._unc(path), **self._client_kwargs)

    def rmdir(self, path: str) -> None:
        with _translate_errors(path):
            smbclient.rmdir(self._unc(path), **self._client_kwargs)

    def mkdir(self, path: str) -> None:
        with _translate_errors(path):
            smbclient.mkdir(self._unc(path), **self._client_kwargs)

    def rename(self, source: str, destination: str) -> None:
        with _translate_errors(source):
            smbclient.rename(self._unc(source), self._unc(destination), **self._client_kwargs)

    def listdir(self, path: str) -> list[FileInfo]:
        base = _normalize(path)
        entries: list[FileInfo] = []
        with _translate_errors(path):
            for entry in smbclient.scandir(self._unc(path), **self._client_kwargs):
                if entry.name in (".", ".."):
                    continue
                result = entry.stat()
                is_directory = entry.is_dir()
                entries.append(
                    FileInfo(
                        path=posixpath.join(base, entry.name) if base else entry.name,
                        is_directory=is_directory,
                        size=None if is_directory else int(result.st_size),
                        mtime=float(result.st_mtime),
                    )
                )
        return sorted(entries, key=lambda info: info.path)


__all__ = ["SmbClientShare", "to_unc_path"]
