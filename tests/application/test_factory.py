"""Tests for building a connected adapter from configuration."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from sharefs.application import ShareConfigurationError, create_smb_adapter
from sharefs.config.config import Config
from sharefs.features.storage import SmbAdapter


@pytest.fixture
def connect(mocker: MockerFixture) -> MagicMock:
    return mocker.patch(
        "sharefs.application.factory.SmbClientShare.connect", return_value=MagicMock()
    )


def _config(**overrides: object) -> Config:
    values: dict[str, object] = {
        "host": "fileserver",
        "share": "data",
        "username": "alice",
        "password": "from-config",
        "root": "projects",
    }
    values.update(overrides)
    return Config(**values)  # pyright: ignore[reportArgumentType]


def test_create_adapter_connects_with_configured_values(connect: MagicMock) -> None:
    adapter = create_smb_adapter(_config(domain="CORP", port=4455), env={})

    assert isinstance(adapter, SmbAdapter)
    connect.assert_called_once_with(
        "fileserver",
        "data",
        username="alice",
        password="from-config",
        domain="CORP",
        port=4455,
        encrypt=None,
        connection_timeout=60,
    )


def test_password_environment_override(connect: MagicMock) -> None:
    _ = create_smb_adapter(_config(), env={"SHAREFS_PASSWORD": "from-env"})

    assert connect.call_args.kwargs["password"] == "from-env"


def test_blank_password_override_is_ignored(connect: MagicMock) -> None:
    _ = create_smb_adapter(_config(), env={"SHAREFS_PASSWORD": "   "})

    assert connect.call_args.kwargs["password"] == "from-config"


def test_encryption_flag_is_forwarded(connect: MagicMock) -> None:
    _ = create_smb_adapter(_config(encrypt=True), env={})

    assert connect.call_args.kwargs["encrypt"] is True


@pytest.mark.parametrize("missing", ["host", "share"])
def test_missing_endpoint_is_rejected(connect: MagicMock, missing: str) -> None:
    with pytest.raises(ShareConfigurationError):
        _ = create_smb_adapter(_config(**{missing: None}), env={})

    connect.assert_not_called()


def test_log_file_enables_file_logging(
    connect: MagicMock, mocker: MockerFixture, tmp_path: Path
) -> None:
    setup = mocker.patch("sharefs.application.factory.setup_logger")
    log_file = tmp_path / "sharefs.log"

    _ = create_smb_adapter(_config(log_file=log_file), env={})

    setup.assert_called_once_with(log_file=log_file)
    connect.assert_called_once()


def test_adapter_applies_configured_root(connect: MagicMock) -> None:
    share = connect.return_value
    share.stat.return_value = MagicMock(is_directory=False)

    adapter = create_smb_adapter(_config(root="projects/archive"), env={})

    assert adapter.file_exists("2024/q1.csv")
    share.stat.assert_called_once_with("projects/archive/2024/q1.csv")
