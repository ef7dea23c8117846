"""Rich console handler for resolver events.

Where: platform/logging/handlers.py
What: Render structured ``vite_event`` log records with icons and compact paths.
Why: Keep resolver log calls plain while the console output stays readable.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar

from typing_extensions import override
from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class AssetEventRichHandler(RichHandler):
    """Rich handler that renders resolver events with dedicated styling."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "vite.config": ("⚙️", "cyan"),
        "vite.manifest.loaded": ("📦", "magenta"),
        "vite.tags.generated": ("🏷️", "green"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _format_path(self, path: str) -> Text:
        """Render ``path`` with magenta separators, keeping only the trailing segments."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        parts = [part for part in pure_path.parts if part and part != pure_path.anchor]

        display = separator.join(parts) if parts else (pure_path.anchor or ".")
        if len(parts) > self._PATH_SEGMENT_LIMIT:
            display = "…" + separator + separator.join(parts[-self._PATH_SEGMENT_LIMIT :])
        elif pure_path.anchor and parts:
            display = pure_path.anchor.rstrip("\\/") + separator + display

        text = Text()
        for char in display:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_event_message(self, record: logging.LogRecord) -> Text | None:
        """Render records carrying a ``vite_event`` extra."""

        event = getattr(record, "vite_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        if event == "vite.config":
            _ = body.append("Config loaded")
            hot_file = getattr(record, "hot_file", None)
            if hot_file:
                _ = body.append(" hot=")
                _ = body.append_text(self._format_path(str(hot_file)))
            build_directory = getattr(record, "build_directory", None)
            if build_directory:
                _ = body.append(" build=")
                _ = body.append_text(self._format_path(str(build_directory)))
        elif event == "vite.manifest.loaded":
            _ = body.append("Manifest loaded")
            entries = getattr(record, "entries", None)
            if isinstance(entries, int):
                _ = body.append(f" [entries={entries}]")
            manifest_path = getattr(record, "manifest_path", None)
            if manifest_path:
                _ = body.append(" @ ")
                _ = body.append_text(self._format_path(str(manifest_path)))
        elif event == "vite.tags.generated":
            _ = body.append("Tags generated")
            details: list[str] = []
            mode = getattr(record, "mode", None)
            if isinstance(mode, str):
                details.append(f"mode={mode}")
            tag_count = getattr(record, "tag_count", None)
            if isinstance(tag_count, int):
                details.append(f"count={tag_count}")
            if details:
                _ = body.append(" [" + ", ".join(details) + "]")
        else:
            _ = body.append(record.getMessage())

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        event_text = self._render_event_message(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["AssetEventRichHandler"]
