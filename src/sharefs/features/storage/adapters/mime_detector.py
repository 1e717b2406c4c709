"""
Summary: Default MIME type detector based on file extension and content sniffing.
Why: Answer MIME queries from the filename and a bounded content sample.
"""

from __future__ import annotations

import codecs
import mimetypes


class GuessingMimeTypeDetector:
    """Guess from the filename first, then fall back to a text/binary sniff.

    Empty or binary content with an unknown extension yields ``None``.
    """

    def __init__(self, *, text_fallback: str = "text/plain") -> None:
        self._text_fallback: str = text_fallback

    def detect(self, filename: str, contents: bytes) -> str | None:
        guessed, _ = mimetypes.guess_type(filename, strict=False)
        if guessed:
            return guessed
        if _looks_like_text(contents):
            return self._text_fallback
        return None


def _looks_like_text(contents: bytes) -> bool:
    """Return whether ``contents`` is non-empty, NUL-free UTF-8."""

    if not contents or b"\x00" in contents:
        return False
    # The sample may end inside a multi-byte sequence.
    decoder = codecs.getincrementaldecoder("utf-8")()
    try:
        _ = decoder.decode(contents, final=False)
    except UnicodeDecodeError:
        return False
    return True


__all__ = ["GuessingMimeTypeDetector"]
