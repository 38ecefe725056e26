# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Source table queries that abort rendering when they cannot be answered."""

from __future__ import annotations

from srcframe.core.models import FileId
from srcframe.files import Line, ResolutionError, column_number
from srcframe.interfaces.files import Files

from .display_list import Locus


def expect_origin(files: Files, file_id: FileId) -> str:
    origin = files.origin(file_id)
    if origin is None:
        raise ResolutionError("origin", file_id)
    return str(origin)


def expect_source(files: Files, file_id: FileId) -> str:
    source = files.source(file_id)
    if source is None:
        raise ResolutionError("source", file_id)
    return source


def expect_line_index(files: Files, file_id: FileId, byte_index: int) -> int:
    line_index = files.line_index(file_id, byte_index)
    if line_index is None:
        raise ResolutionError("line_index", file_id, byte_index)
    return line_index


def expect_line(files: Files, file_id: FileId, line_index: int) -> Line:
    line = files.line(file_id, line_index)
    if line is None:
        raise ResolutionError("line", file_id, line_index)
    return line


def line_at(files: Files, file_id: FileId, byte_index: int) -> Line:
    """Return the line containing ``byte_index``."""

    return expect_line(files, file_id, expect_line_index(files, file_id, byte_index))


class SourceText:
    """UTF-8 view over one file's source, sliced by byte ranges."""

    __slots__ = ("_encoded",)

    def __init__(self, source: str) -> None:
        self._encoded = source.encode("utf-8")

    def line(self, line: Line) -> str:
        """Return the text of ``line`` including its terminator."""

        return self._encoded[line.start : line.end].decode("utf-8")


def resolve_locus(files: Files, file_id: FileId, byte_index: int) -> Locus:
    """Return the origin, line number and column number of ``byte_index``.

    Args:
        files: Source table answering the queries.
        file_id: File containing ``byte_index``.
        byte_index: Byte offset to resolve.

    Returns:
        Locus: Display-ready position.

    Raises:
        ResolutionError: If the source table cannot answer a query.
    """

    origin = expect_origin(files, file_id)
    line = line_at(files, file_id, byte_index)
    line_source = SourceText(expect_source(files, file_id)).line(line)
    return Locus(
        origin=origin,
        line_number=line.number,
        column_number=column_number(line_source, line.start, byte_index),
    )


__all__ = [
    "SourceText",
    "expect_line",
    "expect_line_index",
    "expect_origin",
    "expect_source",
    "line_at",
    "resolve_locus",
]
