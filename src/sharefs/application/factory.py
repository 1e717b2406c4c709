"""Where: src/sharefs/application/factory.py
What: Build a connected SmbAdapter from the persisted configuration.
Why: Keep credential lookup, session registration and logging setup out of the adapter.
Assumptions: - smbclient keeps one cached session per server/port pair.
Trade-offs: - The session is registered eagerly so bad credentials fail at build time.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from sharefs.config.config import Config
from sharefs.features.storage import MimeTypeDetector, SmbAdapter
from sharefs.features.storage.adapters.smbclient_share import SmbClientShare
from sharefs.platform.logging import logger, setup_logger

_PASSWORD_ENV = "SHAREFS_PASSWORD"


class ShareConfigurationError(ValueError):
    """Raised when the configuration does not describe a reachable share."""


def _resolve_password(config: Config, env: Mapping[str, str] | None) -> str | None:
    mapping = env if env is not None else os.environ
    override = (mapping.get(_PASSWORD_ENV) or "").strip()
    return override or config.password


def create_smb_adapter(
    config: Config | None = None,
    *,
    detector: MimeTypeDetector | None = None,
    env: Mapping[str, str] | None = None,
) -> SmbAdapter:
    """Register an SMB session and return an adapter rooted at ``config.root``.

    Args:
        config: Configuration to use. Defaults to the loaded singleton.
        detector: Optional MIME type detector override.
        env: Environment mapping consulted for ``SHAREFS_PASSWORD``.

    Returns:
        SmbAdapter: Adapter bound to the configured share.

    Raises:
        ShareConfigurationError: If ``host`` or ``share`` is missing.
        ShareOperationError: If the SMB session cannot be established.
    """
    cfg = config or Config.load()

    if not cfg.host or not cfg.share:
        raise ShareConfigurationError("Both 'host' and 'share' must be configured")

    if cfg.log_file is not None:
        _ = setup_logger(log_file=cfg.log_file)

    share = SmbClientShare.connect(
        cfg.host,
        cfg.share,
        username=cfg.username,
        password=_resolve_password(cfg, env),
        domain=cfg.domain,
        port=cfg.port,
        encrypt=cfg.encrypt or None,
        connection_timeout=cfg.connection_timeout,
    )
    logger.info("Connected to \\\\%s\\%s (root=%s)", cfg.host, cfg.share, cfg.root or "/")

    return SmbAdapter(share, cfg.root, mime_type_detector=detector)


__all__ = ["ShareConfigurationError", "create_smb_adapter"]
