"""Tests for the ``AssetEventRichHandler`` event rendering."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.text import Text

from vitetags.platform.logging import AssetEventRichHandler, setup_logger


def _make_handler() -> AssetEventRichHandler:
    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return AssetEventRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    record = logging.LogRecord(
        name="vitetags",
        level=logging.DEBUG,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_manifest_loaded_event_shows_entries_and_short_path() -> None:
    handler = _make_handler()
    record = _build_record(
        vite_event="vite.manifest.loaded",
        manifest_path="/srv/www/app/public/assets/manifest.json",
        entries=4,
    )

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert "Manifest loaded [entries=4]" in rendered.plain
    assert "…/public/assets/manifest.json" in rendered.plain


def test_tags_generated_event_lists_mode_and_count() -> None:
    handler = _make_handler()
    record = _build_record(vite_event="vite.tags.generated", mode="hot", tag_count=3)

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert "Tags generated [mode=hot, count=3]" in rendered.plain


def test_plain_records_use_default_rendering() -> None:
    handler = _make_handler()
    record = _build_record()

    rendered = handler.render_message(record, "plain message")

    assert isinstance(rendered, Text)
    assert rendered.plain == "plain message"


def test_setup_logger_replaces_handlers(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "vitetags.log"

    logger = setup_logger(log_file=log_file, console_level=logging.WARNING)
    logger = setup_logger(log_file=log_file, console_level=logging.WARNING)

    try:
        assert len(logger.handlers) == 2
        assert isinstance(logger.handlers[0], AssetEventRichHandler)
        assert log_file.parent.exists()
    finally:
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        logger.addHandler(logging.NullHandler())
