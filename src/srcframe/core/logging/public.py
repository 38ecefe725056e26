# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour support."""

from __future__ import annotations

import logging

from rich.logging import RichHandler
from rich.text import Text

from srcframe.runtime.console.manager import detect_tty, get_console_manager

ANSI = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "blue": "\033[34;1m",
    "cyan": "\033[36;1m",
    "red": "\033[31;1m",
    "green": "\033[32;1m",
    "yellow": "\033[33;1m",
}


def colorize(text: str, code: str, enable: bool) -> str:
    """Apply ANSI colour codes to ``text`` when colouring is enabled.

    Args:
        text: Message text that may be colourised.
        code: ANSI colour identifier to apply.
        enable: Flag indicating whether colour output is requested.

    Returns:
        str: Colourised text when colouring is enabled and supported; otherwise the original text.
    """

    if not enable or not detect_tty():
        return text
    return f"{ANSI.get(code, '')}{text}{ANSI['reset']}"


def configure_logging(*, verbose: bool, use_color: bool) -> None:
    """Route library log records through Rich on standard error.

    Args:
        verbose: Emit ``DEBUG`` records when ``True``, otherwise ``WARNING`` and above.
        use_color: Flag indicating whether ANSI colour support is desired.
    """

    console = get_console_manager().get(color=use_color, stderr=True)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False, show_path=False)],
        force=True,
    )


def _print_line(msg: str, *, style: str | None, use_color: bool | None = None) -> None:
    """Render ``msg`` to the console using shared styling helpers.

    Args:
        msg: Message text to print to the console.
        style: Rich style name to apply when colour output is active.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def info(msg: str, *, use_color: bool | None = None) -> None:
    """Emit an informational message."""

    _print_line(msg, style="cyan", use_color=use_color)


def ok(msg: str, *, use_color: bool | None = None) -> None:
    """Emit a success message."""

    _print_line(msg, style="green", use_color=use_color)


def warn(msg: str, *, use_color: bool | None = None) -> None:
    """Emit a warning message."""

    _print_line(msg, style="yellow", use_color=use_color)


def fail(msg: str, *, use_color: bool | None = None) -> None:
    """Emit an error message."""

    _print_line(msg, style="red", use_color=use_color)
