# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Snippet layout, leaf emission and writers for rendered diagnostics."""

from .display_list import (
    Empty,
    Entry,
    Header,
    Locus,
    Mark,
    MarkMultiBottom,
    MarkMultiLeft,
    MarkMultiTop,
    MarkMultiTopLeft,
    MarkSingle,
    SourceBreak,
    SourceEmpty,
    SourceLine,
    SourceNote,
    SourceStart,
)
from .emit import render, render_short
from .grouping import FileGroup, LabelGroups, count_digits, group_diagnostic, group_labels, outer_padding
from .layout import layout_rich, layout_short
from .renderer import Renderer
from .writers import PlainWriter, RichWriter

__all__ = [
    "Empty",
    "Entry",
    "FileGroup",
    "Header",
    "LabelGroups",
    "Locus",
    "Mark",
    "MarkMultiBottom",
    "MarkMultiLeft",
    "MarkMultiTop",
    "MarkMultiTopLeft",
    "MarkSingle",
    "PlainWriter",
    "Renderer",
    "RichWriter",
    "SourceBreak",
    "SourceEmpty",
    "SourceLine",
    "SourceNote",
    "SourceStart",
    "count_digits",
    "group_diagnostic",
    "group_labels",
    "layout_rich",
    "layout_short",
    "outer_padding",
    "render",
    "render_short",
]
