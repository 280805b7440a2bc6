"""Tests for console logging setup."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from rich.logging import RichHandler
from rich.text import Text

from mission_control.logging import (
    COMPONENT_STYLES,
    MISSION_CONTROL_THEME,
    RICH_LOGS_ENV,
    ComponentHighlighter,
    configure_logging,
    should_use_rich,
)


@pytest.fixture
def root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def highlighted(message: str) -> list[tuple[int, int, str]]:
    text = Text(message)
    ComponentHighlighter().highlight(text)
    return [(span.start, span.end, str(span.style)) for span in text.spans]


class TestComponentHighlighter:
    def test_leading_tag_is_styled(self) -> None:
        assert highlighted("[TASK] Created t1") == [(0, 6, "mission_control.task")]
        assert highlighted("[WS] Client connected") == [(0, 4, "mission_control.ws")]

    def test_error_tags(self) -> None:
        assert highlighted("[UNHANDLED ERROR] boom") == [(0, 17, "mission_control.error")]

    def test_tag_mid_message_is_left_alone(self) -> None:
        assert highlighted("moved [TASK] later") == []
        assert highlighted("[NOPE] unknown") == []

    def test_every_component_has_a_theme_style(self) -> None:
        for name in COMPONENT_STYLES:
            assert f"mission_control.{name}" in MISSION_CONTROL_THEME.styles


class TestConfigureLogging:
    @pytest.mark.parametrize("value, expected", [("1", True), ("yes", True), ("0", False), ("false", False)])
    def test_env_overrides_tty_detection(
        self, monkeypatch: pytest.MonkeyPatch, value: str, expected: bool
    ) -> None:
        monkeypatch.setenv(RICH_LOGS_ENV, value)

        assert should_use_rich() is expected

    def test_plain_handler(self, root_logger: logging.Logger, capsys: pytest.CaptureFixture[str]) -> None:
        handler = configure_logging(logging.DEBUG, force_rich=False)
        logging.getLogger("mission_control.tasks").info("[TASK] Created t1")

        assert root_logger.handlers == [handler]
        assert not isinstance(handler, RichHandler)
        assert "| INFO | mission_control.tasks | [TASK] Created t1" in capsys.readouterr().out
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_rich_handler_keeps_tags(self, root_logger: logging.Logger) -> None:
        handler = configure_logging(force_rich=True)

        assert isinstance(handler, RichHandler)
        assert isinstance(handler.highlighter, ComponentHighlighter)
        assert handler.markup is False
