"""Session-wide pytest setup shared by every test package."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

# Keep the import-time configuration load away from the repository's config/ folder.
_CONFIG_DIR = Path(tempfile.mkdtemp(prefix="sharefs-tests-"))
os.environ["SHAREFS_CONFIG_PATH"] = str(_CONFIG_DIR / "config.toml")
_ = os.environ.pop("SHAREFS_PASSWORD", None)
