"""Rich console handler for share operation events.

Where: platform/logging/handlers.py
What: Render ``share_event`` log records with icons, colours and compact paths.
Why: Keep adapter log calls structured while the console output stays readable.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Any, ClassVar

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class ShareEventRichHandler(RichHandler):
    """Rich handler that renders structured share events on a single line."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "share.write": ("📝", "green", "Wrote "),
        "share.read": ("📖", "blue", "Read "),
        "share.delete": ("🗑️", "red", "Deleted "),
        "share.delete.missing": ("↪️", "yellow", "Already absent "),
        "share.directory.create": ("📁", "cyan", "Created directory "),
        "share.directory.exists": ("↪️", "yellow", "Directory exists "),
        "share.directory.delete": ("🧹", "red", "Deleted directory "),
        "share.move": ("📦", "magenta", "Moved "),
        "share.copy": ("📋", "magenta", "Copied "),
        "share.failure": ("⛔", "red", "Failed "),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4
    _SEPARATORS: ClassVar[re.Pattern[str]] = re.compile(r"[\\/]+")

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs.setdefault("show_time", False)
        kwargs.setdefault("show_path", False)
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Render ``path`` with coloured separators, keeping only the last segments."""

        segments = [segment for segment in self._SEPARATORS.split(path) if segment]
        if not segments:
            return Text("/", style=Style(color="magenta"))

        truncated = len(segments) > self._PATH_SEGMENT_LIMIT
        if truncated:
            segments = segments[-self._PATH_SEGMENT_LIMIT:]

        text = Text()
        if truncated:
            _ = text.append("…/", style=Style(color="magenta"))
        for index, segment in enumerate(segments):
            if index:
                _ = text.append("/", style=Style(color="magenta"))
            _ = text.append(segment, style=Style(color="white"))
        return text

    def _render_share_event(self, record: logging.LogRecord) -> Text | None:
        """Render a structured share event, or ``None`` for plain records."""

        event = getattr(record, "share_event", None)
        if not isinstance(event, str):
            return None

        icon, color, label = self._EVENT_STYLES.get(event, ("ℹ️", "blue", ""))

        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        if label:
            _ = body.append(label)
        else:
            _ = body.append(f"{event} ")

        operation = getattr(record, "operation", None)
        if event == "share.failure" and operation:
            _ = body.append(f"{operation} ")

        location = getattr(record, "location", None)
        if location is not None:
            _ = body.append_text(self._format_path(str(location)))

        destination = getattr(record, "destination", None)
        if destination is not None:
            _ = body.append(" → ")
            _ = body.append_text(self._format_path(str(destination)))

        details: list[str] = []
        size = getattr(record, "size", None)
        if isinstance(size, int):
            details.append(f"{size} bytes")
        count = getattr(record, "count", None)
        if isinstance(count, int):
            details.append(f"{count} entries")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for share events."""

        share_text = self._render_share_event(record)
        if share_text is not None:
            return share_text

        return super().render_message(record, message)


__all__ = ["ShareEventRichHandler"]
