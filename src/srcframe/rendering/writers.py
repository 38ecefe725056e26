# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Concrete :class:`~srcframe.interfaces.writers.StyledWriter` implementations."""

from __future__ import annotations

from typing import TextIO

from rich.console import Console
from rich.text import Text


class PlainWriter:
    """Write unstyled text to a text stream, ignoring style changes."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def write(self, text: str) -> None:
        self._stream.write(text)

    def set_style(self, style: str) -> None:
        del style

    def reset(self) -> None:
        return None


class RichWriter:
    """Collect styled segments into Rich text and print completed lines.

    Output is printed line by line on ``console`` with markup and highlighting
    disabled, so source text is reproduced verbatim.
    """

    def __init__(self, console: Console) -> None:
        """Bind the writer to ``console``.

        Args:
            console: Rich console receiving the rendered lines.
        """

        self._console = console
        self._style = ""
        self._line = Text()

    def write(self, text: str) -> None:
        """Append ``text`` in the active style, printing every completed line."""

        head, *tail = text.split("\n")
        self._line.append(head, style=self._style or None)
        for segment in tail:
            self._print_line()
            self._line.append(segment, style=self._style or None)

    def set_style(self, style: str) -> None:
        self._style = style

    def reset(self) -> None:
        self._style = ""

    def flush(self) -> None:
        """Print any pending partial line without a trailing newline."""

        if self._line.plain:
            self._console.print(self._line, end="", markup=False, highlight=False, soft_wrap=True)
            self._line = Text()

    def _print_line(self) -> None:
        self._console.print(self._line, markup=False, highlight=False, soft_wrap=True)
        self._line = Text()


__all__ = ["PlainWriter", "RichWriter"]
