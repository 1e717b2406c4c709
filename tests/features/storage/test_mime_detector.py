"""Tests for the extension-then-content MIME type detector."""

from __future__ import annotations

import pytest

from sharefs.features.storage import GuessingMimeTypeDetector, MimeTypeDetector


@pytest.fixture
def detector() -> GuessingMimeTypeDetector:
    return GuessingMimeTypeDetector()


def test_detector_satisfies_protocol(detector: GuessingMimeTypeDetector) -> None:
    assert isinstance(detector, MimeTypeDetector)


@pytest.mark.parametrize(
    ("filename", "expected"),
    [("report.pdf", "application/pdf"), ("photo.png", "image/png"), ("notes.txt", "text/plain")],
)
def test_extension_wins(detector: GuessingMimeTypeDetector, filename: str, expected: str) -> None:
    assert detector.detect(filename, b"\x00binary") == expected


def test_text_without_known_extension(detector: GuessingMimeTypeDetector) -> None:
    assert detector.detect("LICENSE", "Grüße aus dem Netz".encode()) == "text/plain"


def test_truncated_multibyte_sample_still_counts_as_text(
    detector: GuessingMimeTypeDetector,
) -> None:
    sample = "naïve".encode()[:3]

    assert detector.detect("sample", sample) == "text/plain"


@pytest.mark.parametrize("contents", [b"", b"\x00\x01\x02", b"\xff\xfe\xfa\xfb"])
def test_undetermined_content_yields_none(
    detector: GuessingMimeTypeDetector, contents: bytes
) -> None:
    assert detector.detect("blob.sharefs-unknown", contents) is None


def test_custom_text_fallback() -> None:
    detector = GuessingMimeTypeDetector(text_fallback="text/x-share")

    assert detector.detect("CHANGELOG", b"v1") == "text/x-share"
