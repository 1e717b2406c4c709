"""Configuration management for sharefs."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from sharefs.config.paths import default_config_path
from sharefs.platform.logging import logger

DEFAULT_SMB_PORT: int = 445
CONNECTION_TIMEOUT_DEFAULT: int = 60
MIME_SNIFF_BYTES_DEFAULT: int = 64 * 1024
STREAM_CHUNK_SIZE_DEFAULT: int = 64 * 1024


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # SMB endpoint
    host: str | None = None
    share: str | None = None
    port: int = DEFAULT_SMB_PORT

    # Credentials
    username: str | None = None
    password: str | None = None
    domain: str | None = None

    # Root segment prepended to every logical path
    root: str | None = None

    # Transport options forwarded to smbclient
    encrypt: bool = False
    connection_timeout: int = CONNECTION_TIMEOUT_DEFAULT

    # Log file path
    log_file: Path | None = _path_field()

    # I/O tuning
    mime_sniff_bytes: int = MIME_SNIFF_BYTES_DEFAULT
    stream_chunk_size: int = STREAM_CHUNK_SIZE_DEFAULT

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            content = self._render_toml(config_dict)
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(content, encoding="utf-8")
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# sharefs Configuration File")
        lines.append("")

        lines.append("# SMB server and share name")
        lines.append('# Example: host = "fileserver.local"')
        lines.append('# Example: share = "documents"')
        if config["host"]:
            lines.append(f"host = {self._format_toml_value(config['host'])}")
        if config["share"]:
            lines.append(f"share = {self._format_toml_value(config['share'])}")
        lines.append(f"port = {self._format_toml_value(config['port'])}")
        lines.append("")

        lines.append("# Credentials (optional)")
        lines.append("# SHAREFS_PASSWORD overrides the password stored here")
        for key in ("username", "password", "domain"):
            if config.get(key):
                lines.append(f"{key} = {self._format_toml_value(config[key])}")
        lines.append("")

        lines.append("# Root directory inside the share (optional)")
        lines.append("# Every path handed to the adapter is resolved below this segment")
        lines.append('# Example: root = "projects/archive"')
        if config["root"]:
            lines.append(f"root = {self._format_toml_value(config['root'])}")
        lines.append("")

        lines.append("# Transport options")
        lines.append(f"encrypt = {self._format_toml_value(config['encrypt'])}")
        lines.append(
            f"connection_timeout = {self._format_toml_value(config['connection_timeout'])}"
        )
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/sharefs.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Bytes read from a file when detecting its MIME type")
        lines.append(
            f"mime_sniff_bytes = {self._format_toml_value(config['mime_sniff_bytes'])}"
        )
        lines.append("# Chunk size used when copying streams to the share")
        lines.append(
            f"stream_chunk_size = {self._format_toml_value(config['stream_chunk_size'])}"
        )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning(
                        "Ignoring unknown configuration keys in %s: %s",
                        config_file,
                        ", ".join(unknown),
                    )
                config_dict = {key: value for key, value in config_dict.items() if key in known}

                # Empty strings mean "not configured"
                for key, value in config_dict.items():
                    if isinstance(value, str) and value.strip() == "":
                        config_dict[key] = None

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)

                cls._instance = instance
                cls._loaded_from = config_file
                return instance

            # Defaults stay in memory; only an explicit save() writes the file.
            logger.debug("No configuration at %s, using defaults", config_file)
            config = cls()
            cls._instance = config
            cls._loaded_from = None
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


# Global configuration instance
config = Config.load()


__all__ = [
    "CONNECTION_TIMEOUT_DEFAULT",
    "DEFAULT_SMB_PORT",
    "MIME_SNIFF_BYTES_DEFAULT",
    "STREAM_CHUNK_SIZE_DEFAULT",
    "Config",
    "config",
]
