# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Leaf emission of display-list entries onto a styled writer."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from rich.cells import cell_len

from srcframe.config.models import RenderConfig
from srcframe.files import column_index
from srcframe.interfaces.writers import StyledWriter

from .display_list import (
    MULTI_LINE_MARKS,
    Empty,
    Entry,
    Header,
    Locus,
    Mark,
    MarkMultiBottom,
    MarkMultiLeft,
    MarkMultiTop,
    MarkMultiTopLeft,
    MarkSeverity,
    MarkSingle,
    SourceBreak,
    SourceEmpty,
    SourceLine,
    SourceNote,
    SourceStart,
)

NEWLINE: Final[str] = "\n"
_TOP_RULE_LEAD: Final[int] = 2
_TOP_RULE_TRAIL: Final[int] = 3


def strip_line_terminator(source: str) -> str:
    """Return ``source`` without its trailing ``\\n`` or ``\\r\\n``."""

    return source.removesuffix("\n").removesuffix("\r")


class Renderer:
    """Write entries to a :class:`StyledWriter` using configured glyphs and styles."""

    def __init__(self, writer: StyledWriter, config: RenderConfig) -> None:
        """Bind the renderer to ``writer`` for the duration of one render call.

        Args:
            writer: Sink receiving text and style changes.
            config: Glyph, style and tab-width configuration.
        """

        self._writer = writer
        self._config = config

    def render_all(self, entries: Iterable[Entry]) -> None:
        for entry in entries:
            self.render(entry)

    def render(self, entry: Entry) -> None:
        """Write a single entry, including its trailing newline."""

        match entry:
            case Header():
                self._render_header(entry)
            case Empty():
                self._writer.write(NEWLINE)
            case SourceStart():
                self._render_source_start(entry)
            case SourceEmpty():
                self._gutter_blank(entry.outer_padding)
                self._border(self._config.chars.source_border_left)
                self._writer.write(NEWLINE)
            case SourceBreak():
                self._gutter_blank(entry.outer_padding)
                self._border(self._config.chars.source_border_left_break)
                self._writer.write(NEWLINE)
            case SourceLine():
                self._render_source_line(entry)
            case SourceNote():
                self._render_source_note(entry)
            case _:
                raise TypeError(f"unsupported display-list entry: {entry!r}")

    # Headers -----------------------------------------------------------------

    def _render_header(self, entry: Header) -> None:
        styles = self._config.styles
        if entry.locus is not None:
            self._writer.write(f"{self._format_locus(entry.locus)}: ")
        self._styled(styles.header(entry.severity), entry.severity.value)
        if entry.code:
            self._styled(styles.header(entry.severity), f"[{entry.code}]")
        self._styled(styles.header_message, f": {entry.message}")
        self._writer.write(NEWLINE)

    def _render_source_start(self, entry: SourceStart) -> None:
        chars = self._config.chars
        self._gutter_blank(entry.outer_padding)
        self._border(chars.source_border_top_left + chars.source_border_top * _TOP_RULE_LEAD)
        self._writer.write(f" {self._format_locus(entry.locus)} ")
        self._border(chars.source_border_top * _TOP_RULE_TRAIL)
        self._writer.write(NEWLINE)

    def _render_source_note(self, entry: SourceNote) -> None:
        first, *rest = entry.message.split(NEWLINE)
        self._gutter_blank(entry.outer_padding)
        self._styled(self._config.styles.note_bullet, self._config.chars.note_bullet)
        self._writer.write(f" {first}{NEWLINE}")
        indent = " " * (entry.outer_padding + 3)
        for line in rest:
            self._writer.write(f"{indent}{line}{NEWLINE}")

    # Source lines ------------------------------------------------------------

    def _render_source_line(self, entry: SourceLine) -> None:
        styles = self._config.styles
        chars = self._config.chars
        marks = [mark for mark in entry.marks if mark is not None]
        has_left_slot = any(isinstance(mark, MULTI_LINE_MARKS) for _, mark in marks)
        source = strip_line_terminator(entry.source)

        self._styled(styles.line_number, str(entry.line_number).rjust(entry.outer_padding))
        self._writer.write(" ")
        self._border(chars.source_border_left)
        self._writer.write(" ")
        if has_left_slot:
            self._left_slot(marks)
        self._writer.write(self._expand_tabs(source))
        self._writer.write(NEWLINE)

        for severity, mark in marks:
            match mark:
                case MarkSingle():
                    self._render_single(entry.outer_padding, source, severity, mark)
                case MarkMultiTop():
                    self._render_multi_top(entry.outer_padding, source, severity, mark)
                case MarkMultiBottom():
                    self._render_multi_bottom(entry.outer_padding, source, severity, mark)
                case MarkMultiTopLeft() | MarkMultiLeft():
                    pass

    def _left_slot(self, marks: list[tuple[MarkSeverity, Mark]]) -> None:
        chars = self._config.chars
        for severity, mark in marks:
            match mark:
                case MarkMultiTopLeft():
                    self._styled(self._config.styles.label(severity), chars.multi_top_left)
                    self._writer.write(" ")
                    return
                case MarkMultiLeft() | MarkMultiBottom():
                    self._styled(self._config.styles.label(severity), chars.multi_left)
                    self._writer.write(" ")
                    return
        self._writer.write("  ")

    def _render_single(self, padding: int, source: str, severity: MarkSeverity, mark: MarkSingle) -> None:
        chars = self._config.chars
        start_width = self._width_before(source, mark.start)
        end_width = self._width_before(source, mark.end)
        caret = chars.single_primary_caret if severity is not None else chars.single_secondary_caret
        self._mark_gutter(padding)
        self._writer.write(" " * start_width)
        self._styled(self._config.styles.label(severity), caret * max(end_width - start_width, 1))
        self._label_message(severity, mark.message)
        self._writer.write(NEWLINE)

    def _render_multi_top(self, padding: int, source: str, severity: MarkSeverity, mark: MarkMultiTop) -> None:
        chars = self._config.chars
        caret = chars.multi_primary_caret_start if severity is not None else chars.multi_secondary_caret_start
        width = self._width_before(source, mark.end)
        self._mark_gutter(padding)
        self._styled(
            self._config.styles.label(severity),
            chars.multi_top_left + chars.multi_top * (width + 1) + caret,
        )
        self._writer.write(NEWLINE)

    def _render_multi_bottom(
        self,
        padding: int,
        source: str,
        severity: MarkSeverity,
        mark: MarkMultiBottom,
    ) -> None:
        chars = self._config.chars
        caret = chars.multi_primary_caret_end if severity is not None else chars.multi_secondary_caret_end
        width = self._width_before(source, mark.end)
        self._mark_gutter(padding)
        self._styled(
            self._config.styles.label(severity),
            chars.multi_bottom_left + chars.multi_bottom * width + caret,
        )
        self._label_message(severity, mark.message)
        self._writer.write(NEWLINE)

    def _label_message(self, severity: MarkSeverity, message: str) -> None:
        if message:
            self._writer.write(" ")
            self._styled(self._config.styles.label(severity), message)

    # Leaf helpers ------------------------------------------------------------

    def _mark_gutter(self, padding: int) -> None:
        self._gutter_blank(padding)
        self._border(self._config.chars.source_border_left)
        self._writer.write(" ")

    def _gutter_blank(self, padding: int) -> None:
        self._writer.write(" " * padding + " ")

    def _border(self, glyphs: str) -> None:
        self._styled(self._config.styles.source_border, glyphs)

    def _styled(self, style: str, text: str) -> None:
        self._writer.set_style(style)
        self._writer.write(text)
        self._writer.reset()

    def _expand_tabs(self, text: str) -> str:
        return text.replace("\t", " " * self._config.tab_width)

    def _width_before(self, source: str, byte_offset: int) -> int:
        """Return the display width of ``source`` preceding ``byte_offset``."""

        prefix = source[: column_index(source, 0, byte_offset)]
        return cell_len(self._expand_tabs(prefix))

    @staticmethod
    def _format_locus(locus: Locus) -> str:
        return str(locus)


__all__ = ["NEWLINE", "Renderer", "strip_line_terminator"]
