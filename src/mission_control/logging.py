"""Console logging for the Mission Control server.

Log lines start with a bracketed component tag (``[TASK]``, ``[DRAG]``, ``[WS]`` ...).
On a terminal the tags are colored per component so board traffic, store
writes and socket pushes can be told apart at a glance. Anywhere else a plain
pipe-separated format is used.
"""

from __future__ import annotations

import logging
import os
import sys

from rich.console import Console
from rich.highlighter import RegexHighlighter
from rich.logging import RichHandler
from rich.theme import Theme

RICH_LOGS_ENV = "MISSION_CONTROL_RICH_LOGS"

COMPONENT_STYLES = {
    "task": "bold cyan",
    "drag": "bold magenta",
    "store": "bold blue",
    "ws": "bold green",
    "api": "bold white",
    "activity": "yellow",
    "agent": "bright_cyan",
    "cron": "bright_magenta",
    "memory": "bright_blue",
    "error": "bold red reverse",
}

MISSION_CONTROL_THEME = Theme(
    {
        "logging.level.debug": "dim",
        "logging.level.info": "green",
        "logging.level.warning": "yellow",
        "logging.level.error": "red bold",
        "logging.level.critical": "red bold reverse",
        **{f"mission_control.{name}": style for name, style in COMPONENT_STYLES.items()},
    }
)

# Libraries whose per-request chatter drowns out board events
QUIET_LOGGERS = ("httpx", "httpcore", "hpack", "uvicorn.access", "websockets")


class ComponentHighlighter(RegexHighlighter):
    """Styles the leading ``[COMPONENT]`` tag of a log message."""

    base_style = "mission_control."
    highlights = [
        *(rf"^(?P<{name}>\[{name.upper()}\])" for name in COMPONENT_STYLES if name != "error"),
        r"^(?P<error>\[(?:VALIDATION|UNHANDLED) ERROR\])",
    ]


def should_use_rich() -> bool:
    """Rich output when ``MISSION_CONTROL_RICH_LOGS`` says so, else only on a TTY."""
    forced = os.environ.get(RICH_LOGS_ENV, "").lower()
    if forced in ("1", "true", "yes"):
        return True
    if forced in ("0", "false", "no"):
        return False
    return sys.stdout.isatty()


def configure_logging(level: int = logging.INFO, force_rich: bool | None = None) -> logging.Handler:
    """Replace the root handlers with one console handler and return it."""
    use_rich = should_use_rich() if force_rich is None else force_rich

    if use_rich:
        # Tags like [TASK] are not markup, so markup stays off
        handler: logging.Handler = RichHandler(
            console=Console(theme=MISSION_CONTROL_THEME, force_terminal=True),
            highlighter=ComponentHighlighter(),
            show_path=False,
            rich_tracebacks=True,
            markup=False,
            log_time_format="[%H:%M:%S]",
        )
    else:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
