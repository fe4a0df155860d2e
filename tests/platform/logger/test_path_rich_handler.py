"""Tests for the ``PathRichHandler`` path formatting utilities."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

import pytest
from rich.console import Console
from rich.text import Text

from segpath.platform.logging import PathRichHandler, setup_logger


def _make_handler() -> PathRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return PathRichHandler(console=console)


def _build_record(msg: str = "", **extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with extras for testing."""

    record = logging.LogRecord(
        name="segpath",
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_message_appends_path_text() -> None:
    handler = _make_handler()
    record = _build_record("Classified as file:", path_text="/srv/data.csv")

    rendered = handler.render_message(record, "Classified as file:")

    assert isinstance(rendered, Text)
    assert rendered.plain == "Classified as file: /srv/data.csv"


def test_render_message_without_path_is_unchanged() -> None:
    handler = _make_handler()
    rendered = handler.render_message(_build_record("plain"), "plain")

    assert isinstance(rendered, Text)
    assert rendered.plain == "plain"


def test_render_message_truncates_long_paths_at_component_boundary() -> None:
    handler = _make_handler()
    source_path = "/home/user/" + "/".join(f"directory-{n:02d}" for n in range(10)) + "/report.txt"

    rendered = handler.render_message(_build_record(path_text=source_path), "")

    assert isinstance(rendered, Text)
    plain = rendered.plain
    assert plain.startswith("…/")
    assert plain.endswith("/directory-09/report.txt")
    assert len(plain) <= PathRichHandler.MAX_PATH_WIDTH


def test_shorten_keeps_short_paths_and_windows_separators() -> None:
    assert PathRichHandler.shorten("C:\\media\\Track.flac") == "C:\\media\\Track.flac"

    long_windows = "D:\\archive\\" + "\\".join(["segment"] * 12) + "\\Track.flac"
    shortened = PathRichHandler.shorten(long_windows)
    assert shortened.startswith("…\\")
    assert shortened.endswith("\\segment\\Track.flac")


def test_shorten_without_separators_keeps_tail() -> None:
    name = "x" * 100
    shortened = PathRichHandler.shorten(name)
    assert shortened == "…" + "x" * (PathRichHandler.MAX_PATH_WIDTH - 1)


def test_format_path_dims_separators() -> None:
    rendered = PathRichHandler.format_path("a/b")
    styles = [str(span.style) for span in rendered.spans]
    assert styles == ["bold white", "dim", "bold white"]


def test_setup_logger_adds_rotating_file_handler(tmp_path) -> None:
    log_file = tmp_path / "logs" / "segpath.log"
    logger = setup_logger(log_file=log_file, console_level=logging.ERROR)
    try:
        logger.debug("written to file")
        for handler in logger.handlers:
            handler.flush()
        assert log_file.exists()
        assert "written to file" in log_file.read_text(encoding="utf-8")
        assert isinstance(logger.handlers[0], PathRichHandler)
    finally:
        _ = setup_logger()


def test_format_path_follows_configured_separators(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("segpath.config.settings.SEPARATORS", ":")

    rendered = PathRichHandler.format_path("a:b/c")
    styles = [str(span.style) for span in rendered.spans]
    assert styles == ["bold white", "dim", "bold white", "bold white", "bold white"]
    assert PathRichHandler.separators() == ":"
