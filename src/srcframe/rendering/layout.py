# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Snippet layout engine turning diagnostics into display-list entries.

The engine decides the shape of every label without touching an output sink:

```text
error[E0001]: unexpected type in `+` application

  ┌── test:2:9 ───
  │
2 │ (+ test "")
  │         ^^ expected `Int` but found `String`
  │
  = expected type `Int`
```

Multi-line labels open with a top connector, continue down the left border and
close with a bottom connector carrying the message:

```text
4 │   fizz₁ num = case (mod num 5) (mod num 3) of
  │ ╭─────────────^
5 │ │     0 0 => "FizzBuzz"
6 │ │     _ _ => num
  │ ╰──────────────^ `case` clauses have incompatible types
```
"""

from __future__ import annotations

import logging

from srcframe.core.models import Diagnostic, Label, LabelStyle
from srcframe.interfaces.files import Files

from .display_list import (
    Empty,
    Entry,
    Header,
    Locus,
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
from .grouping import FileGroup, group_diagnostic
from .resolution import SourceText, expect_line, expect_line_index, expect_source, resolve_locus

LOGGER = logging.getLogger(__name__)


def mark_severity(diagnostic: Diagnostic, label: Label) -> MarkSeverity:
    """Return the severity used to style ``label``; ``None`` for secondary labels."""

    return diagnostic.severity if label.style is LabelStyle.PRIMARY else None


def _header(diagnostic: Diagnostic, locus: Locus | None = None) -> Header:
    return Header(
        locus=locus,
        severity=diagnostic.severity,
        code=diagnostic.code,
        message=diagnostic.message,
    )


def layout_label(
    diagnostic: Diagnostic,
    label: Label,
    files: Files,
    text: SourceText,
    outer_padding: int,
) -> list[SourceLine]:
    """Return the source lines rendering ``label``.

    Args:
        diagnostic: Diagnostic owning the label.
        label: Label to lay out.
        files: Source table answering line queries.
        text: Source of the label's file.
        outer_padding: Gutter width shared by the whole diagnostic.

    Returns:
        list[SourceLine]: One line for single-line labels, otherwise one line
        per source line spanned.

    Raises:
        ResolutionError: If the label's range cannot be resolved.
    """

    severity = mark_severity(diagnostic, label)
    start_index = expect_line_index(files, label.file_id, label.start)
    end_index = expect_line_index(files, label.file_id, label.end)
    start_line = expect_line(files, label.file_id, start_index)
    start_source = text.line(start_line)

    if start_index == end_index:
        mark = MarkSingle(
            start=label.start - start_line.start,
            end=label.end - start_line.start,
            message=label.message,
        )
        return [SourceLine(outer_padding, start_line.number, start_source, ((severity, mark),))]

    lines: list[SourceLine] = []
    mark_start = label.start - start_line.start
    prefix = start_source.encode("utf-8")[:mark_start].decode("utf-8", errors="ignore")
    top_mark = MarkMultiTopLeft() if not prefix.strip() else MarkMultiTop(end=mark_start)
    lines.append(SourceLine(outer_padding, start_line.number, start_source, ((severity, top_mark),)))

    for line_index in range(start_index + 1, end_index):
        line = expect_line(files, label.file_id, line_index)
        lines.append(SourceLine(outer_padding, line.number, text.line(line), ((severity, MarkMultiLeft()),)))

    end_line = expect_line(files, label.file_id, end_index)
    bottom_mark = MarkMultiBottom(end=label.end - end_line.start, message=label.message)
    lines.append(SourceLine(outer_padding, end_line.number, text.line(end_line), ((severity, bottom_mark),)))
    return lines


def layout_file_group(
    diagnostic: Diagnostic,
    group: FileGroup,
    files: Files,
    outer_padding: int,
) -> list[Entry]:
    """Return the snippet entries for every label of one file."""

    if not group.labels:
        return []
    first = group.labels[0]
    entries: list[Entry] = [
        SourceStart(outer_padding, resolve_locus(files, group.file_id, first.start)),
    ]
    text = SourceText(expect_source(files, group.file_id))
    for position, label in enumerate(group.labels):
        entries.append(SourceEmpty(outer_padding) if position == 0 else SourceBreak(outer_padding))
        entries.extend(layout_label(diagnostic, label, files, text, outer_padding))
    entries.append(SourceEmpty(outer_padding))
    return entries


def layout_rich(diagnostic: Diagnostic, files: Files) -> list[Entry]:
    """Return the full display list for ``diagnostic``.

    Args:
        diagnostic: Diagnostic to lay out.
        files: Source table referenced by the diagnostic's labels.

    Returns:
        list[Entry]: Header, one snippet per file in first-reference order,
        notes, and a closing blank line.

    Raises:
        ResolutionError: On the first query the source table cannot answer.
    """

    grouped = group_diagnostic(diagnostic, files)
    padding = grouped.outer_padding

    entries: list[Entry] = [_header(diagnostic)]
    if grouped:
        entries.append(Empty())
    for group in grouped.groups:
        entries.extend(layout_file_group(diagnostic, group, files, padding))
    entries.extend(SourceNote(padding, note) for note in diagnostic.notes)
    entries.append(Empty())
    LOGGER.debug("laid out %d entries for %s diagnostic", len(entries), diagnostic.severity.value)
    return entries


def layout_short(diagnostic: Diagnostic, files: Files) -> list[Entry]:
    """Return one located header per primary label.

    A diagnostic without primary labels yields a single header without locus.

    Raises:
        ResolutionError: If a primary label's start cannot be resolved.
    """

    entries: list[Entry] = [
        _header(diagnostic, resolve_locus(files, label.file_id, label.start))
        for label in diagnostic.primary_labels
    ]
    if not entries:
        entries.append(_header(diagnostic))
    return entries


__all__ = [
    "layout_file_group",
    "layout_label",
    "layout_rich",
    "layout_short",
    "mark_severity",
]
