"""Adapter fixtures for storage tests."""

from __future__ import annotations

import pytest

from in_memory_share import InMemoryShare

from sharefs.features.storage import SmbAdapter


@pytest.fixture
def share() -> InMemoryShare:
    """Provide an empty in-memory share."""

    return InMemoryShare()


@pytest.fixture
def adapter(share: InMemoryShare) -> SmbAdapter:
    """Provide an adapter rooted at the share root."""

    return SmbAdapter(share)


@pytest.fixture
def rooted_adapter(share: InMemoryShare) -> SmbAdapter:
    """Provide an adapter whose logical root is the ``root`` directory of the share."""

    share.directories.add("root")
    return SmbAdapter(share, "root/")
