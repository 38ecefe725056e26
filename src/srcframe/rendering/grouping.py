# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Group a diagnostic's labels per file and size the line-number gutter."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from srcframe.core.models import Diagnostic, FileId, Label
from srcframe.interfaces.files import Files

from .resolution import line_at

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FileGroup:
    """Labels targeting one file, sorted by ``(start, end)``."""

    file_id: FileId
    labels: tuple[Label, ...]


@dataclass(frozen=True, slots=True)
class LabelGroups:
    """Per-file label groups plus the gutter width shared by all snippets."""

    groups: tuple[FileGroup, ...]
    outer_padding: int

    def __bool__(self) -> bool:
        return bool(self.groups)


def count_digits(value: int) -> int:
    """Return the number of decimal digits in ``value`` (``0`` for zero)."""

    return len(str(value)) if value > 0 else 0


def group_labels(labels: Iterable[Label]) -> tuple[FileGroup, ...]:
    """Partition ``labels`` by file and order each partition.

    Files appear in the order their first label was encountered. Within a file,
    labels are sorted by start offset with the end offset breaking ties, so
    equal starts read shortest first.

    Args:
        labels: Labels in insertion order.

    Returns:
        tuple[FileGroup, ...]: One group per referenced file.
    """

    by_file: dict[FileId, list[Label]] = {}
    for label in labels:
        by_file.setdefault(label.file_id, []).append(label)
    return tuple(
        FileGroup(file_id=file_id, labels=tuple(sorted(grouped, key=lambda label: label.sort_key)))
        for file_id, grouped in by_file.items()
    )


def outer_padding(labels: Sequence[Label], files: Files) -> int:
    """Return the digit count of the largest line number any label reaches.

    Raises:
        ResolutionError: If a label's end offset cannot be resolved.
    """

    widest = 0
    for label in labels:
        end_line = line_at(files, label.file_id, label.end)
        widest = max(widest, count_digits(end_line.number))
    return widest


def group_diagnostic(diagnostic: Diagnostic, files: Files) -> LabelGroups:
    """Group the labels of ``diagnostic`` and compute the shared gutter width."""

    groups = group_labels(diagnostic.labels)
    padding = outer_padding(diagnostic.labels, files)
    LOGGER.debug(
        "grouped %d label(s) into %d file group(s); outer padding %d",
        len(diagnostic.labels),
        len(groups),
        padding,
    )
    return LabelGroups(groups=groups, outer_padding=padding)


__all__ = [
    "FileGroup",
    "LabelGroups",
    "count_digits",
    "group_diagnostic",
    "group_labels",
    "outer_padding",
]
