"""
Summary: Validate logical-to-share path mapping in PathPrefixer.
Why: A leaked or missing root segment would address the wrong files on the share.
"""

from __future__ import annotations

import pytest

from sharefs.features.storage import PathPrefixer
from sharefs.features.storage.domain.path_prefixer import parent_directory


@pytest.mark.parametrize("root", ["root", "root/", "/root/", "\\root\\"])
def test_prefix_is_normalized(root: str) -> None:
    prefixer = PathPrefixer(root)

    assert prefixer.prefix == "root/"
    assert prefixer.prefix_path("/docs/a.txt") == "root/docs/a.txt"


@pytest.mark.parametrize("root", [None, "", "/"])
def test_empty_root_leaves_paths_untouched(root: str | None) -> None:
    prefixer = PathPrefixer(root)

    assert prefixer.prefix == ""
    assert prefixer.prefix_path("docs/a.txt") == "docs/a.txt"
    assert prefixer.prefix_directory_path("") == ""
    assert prefixer.strip_prefix("docs/a.txt") == "docs/a.txt"


def test_directory_paths_have_no_trailing_separator() -> None:
    prefixer = PathPrefixer("projects/archive")

    assert prefixer.prefix_directory_path("") == "projects/archive"
    assert prefixer.prefix_directory_path("2024/") == "projects/archive/2024"


def test_strip_prefix_reverses_prefix_path() -> None:
    prefixer = PathPrefixer("projects/archive")

    assert prefixer.strip_prefix("projects/archive/2024/q1.csv") == "2024/q1.csv"
    assert prefixer.strip_prefix("projects\\archive\\2024\\q1.csv") == "2024/q1.csv"
    assert prefixer.strip_directory_prefix("projects/archive/2024/") == "2024"
    assert prefixer.strip_directory_prefix("projects/archive") == ""


@pytest.mark.parametrize(
    ("path", "expected"),
    [("a/b/c.txt", "a/b"), ("a.txt", ""), ("/a/b/", "a"), ("", "")],
)
def test_parent_directory(path: str, expected: str) -> None:
    assert parent_directory(path) == expected
