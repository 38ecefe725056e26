# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Render-agnostic vocabulary produced by the layout engine.

A rendered diagnostic is a finite sequence of :data:`Entry` values. Source
lines carry :data:`Mark` values describing the connector shape of each label;
mark columns are byte offsets relative to the start of the line.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from srcframe.core.severity import Severity

# ``None`` marks a secondary label, rendered with a neutral style.
MarkSeverity: TypeAlias = Severity | None


@dataclass(frozen=True, slots=True)
class Locus:
    """A display-ready source position."""

    origin: str
    line_number: int
    column_number: int

    def __str__(self) -> str:
        return f"{self.origin}:{self.line_number}:{self.column_number}"


@dataclass(frozen=True, slots=True)
class MarkSingle:
    """Underline ``[start, end)`` of a single line and attach ``message``."""

    start: int
    end: int
    message: str


@dataclass(frozen=True, slots=True)
class MarkMultiTopLeft:
    """Open a multi-line connector flush with the left border."""


@dataclass(frozen=True, slots=True)
class MarkMultiTop:
    """Open a multi-line connector by underlining the prefix ``[0, end)``."""

    end: int


@dataclass(frozen=True, slots=True)
class MarkMultiLeft:
    """Continue a multi-line connector down the left border."""


@dataclass(frozen=True, slots=True)
class MarkMultiBottom:
    """Close a multi-line connector at ``end`` and attach ``message``."""

    end: int
    message: str


Mark: TypeAlias = MarkSingle | MarkMultiTopLeft | MarkMultiTop | MarkMultiLeft | MarkMultiBottom
LineMark: TypeAlias = tuple[MarkSeverity, Mark] | None

MULTI_LINE_MARKS = (MarkMultiTopLeft, MarkMultiTop, MarkMultiLeft, MarkMultiBottom)


@dataclass(frozen=True, slots=True)
class Header:
    """``severity[code]: message``, optionally prefixed by a locus."""

    locus: Locus | None
    severity: Severity
    code: str | None
    message: str


@dataclass(frozen=True, slots=True)
class Empty:
    """A blank line."""


@dataclass(frozen=True, slots=True)
class SourceStart:
    """Top border of a snippet, naming the locus of its first label."""

    outer_padding: int
    locus: Locus


@dataclass(frozen=True, slots=True)
class SourceBreak:
    """Broken left border separating non-contiguous regions of one file."""

    outer_padding: int


@dataclass(frozen=True, slots=True)
class SourceEmpty:
    """Left border with no source text."""

    outer_padding: int


@dataclass(frozen=True, slots=True)
class SourceLine:
    """A numbered source line followed by its marks."""

    outer_padding: int
    line_number: int
    source: str
    marks: tuple[LineMark, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class SourceNote:
    """A free-text note attached below the snippets."""

    outer_padding: int
    message: str


Entry: TypeAlias = Header | Empty | SourceStart | SourceBreak | SourceEmpty | SourceLine | SourceNote


__all__ = [
    "MULTI_LINE_MARKS",
    "Empty",
    "Entry",
    "Header",
    "LineMark",
    "Locus",
    "Mark",
    "MarkMultiBottom",
    "MarkMultiLeft",
    "MarkMultiTop",
    "MarkMultiTopLeft",
    "MarkSeverity",
    "MarkSingle",
    "SourceBreak",
    "SourceEmpty",
    "SourceLine",
    "SourceNote",
    "SourceStart",
]
