"""Where: src/sharefs/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple boundary checks for speed.
"""

from __future__ import annotations

from sharefs.config.config import (
    MIME_SNIFF_BYTES_DEFAULT,
    STREAM_CHUNK_SIZE_DEFAULT,
    config as app_config,
)

# Stream sizing ----------------------------------------------------------------

# Upper bound on bytes read from a file before asking the MIME detector.
_sniff_bytes = getattr(app_config, "mime_sniff_bytes", MIME_SNIFF_BYTES_DEFAULT)
MIME_SNIFF_BYTES: int = (
    _sniff_bytes if isinstance(_sniff_bytes, int) and _sniff_bytes > 0 else MIME_SNIFF_BYTES_DEFAULT
)

_chunk_size = getattr(app_config, "stream_chunk_size", STREAM_CHUNK_SIZE_DEFAULT)
STREAM_CHUNK_SIZE: int = (
    _chunk_size if isinstance(_chunk_size, int) and _chunk_size > 0 else STREAM_CHUNK_SIZE_DEFAULT
)


__all__ = [
    "MIME_SNIFF_BYTES",
    "STREAM_CHUNK_SIZE",
]
