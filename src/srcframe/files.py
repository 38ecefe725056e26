# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Source file support: byte offsets resolved to lines and Unicode columns.

All offsets handled here are UTF-8 byte offsets into the file source. Lines
are half-open byte ranges ``[start, end)`` that include their terminator, and
every file has a virtual line start at ``len(source)`` so the final line is
well-defined even without a trailing newline.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Final

from srcframe.core.models import FileId

_NEWLINE: Final[bytes] = b"\n"


class ResolutionError(LookupError):
    """Raised when a source table cannot answer a query required for rendering."""

    def __init__(self, query: str, file_id: FileId, value: int | None = None) -> None:
        """Describe the failed ``query`` against ``file_id``.

        Args:
            query: Name of the unanswered query (``origin``, ``line_index``...).
            file_id: Identifier of the file the query targeted.
            value: Byte offset or line index passed to the query, if any.
        """

        self.query = query
        self.file_id = file_id
        self.value = value
        detail = f" at {value}" if value is not None else ""
        super().__init__(f"cannot resolve {query}{detail} in file {file_id!r}")


@dataclass(frozen=True, slots=True)
class Line:
    """A line within a source file, addressed by its 0-based ``index``."""

    index: int
    start: int
    end: int

    @property
    def number(self) -> int:
        """Return the 1-based line number shown to users."""

        return self.index + 1

    @property
    def range(self) -> range:
        """Return the byte offsets covered by the line."""

        return range(self.start, self.end)

    def column_number(self, line_source: str, byte_index: int) -> int:
        """Return the 1-based column of ``byte_index`` within ``line_source``."""

        return column_number(line_source, self.start, byte_index)


def line_starts(source: str) -> Iterator[int]:
    """Yield the byte offset at which each line of ``source`` starts.

    Args:
        source: File contents.

    Yields:
        int: ``0`` followed by the offset one past every ``\\n``.
    """

    encoded = source.encode("utf-8")
    yield 0
    position = encoded.find(_NEWLINE)
    while position != -1:
        yield position + 1
        position = encoded.find(_NEWLINE, position + 1)


def column_index(line_source: str, line_start: int, byte_index: int) -> int:
    """Return the number of characters in ``line_source`` before ``byte_index``.

    Args:
        line_source: Text of the line, starting at byte ``line_start``.
        line_start: Byte offset of the line within its file.
        byte_index: Byte offset within the file.

    Returns:
        int: ``0`` when ``byte_index`` precedes the line, the full character
        count when it is at or past the line's end, and otherwise the count of
        characters starting before it. An offset that falls inside a
        multi-byte character is attributed to that character.
    """

    relative = byte_index - line_start
    if relative < 0:
        return 0
    encoded = line_source.encode("utf-8")
    if relative >= len(encoded):
        return len(line_source)

    count = 0
    offset = 0
    for char in line_source:
        if offset >= relative:
            break
        count += 1
        offset += len(char.encode("utf-8"))
    if offset == relative:
        return count
    # ``relative`` is not on a character boundary.
    return count - 1


def column_number(line_source: str, line_start: int, byte_index: int) -> int:
    """Return the 1-based column number at ``byte_index`` (see :func:`column_index`)."""

    return column_index(line_source, line_start, byte_index) + 1


class SimpleFile:
    """A single source file with precomputed line starts.

    Suitable for tests and small tools; larger systems usually provide their
    own :class:`~srcframe.interfaces.files.Files` implementation.
    """

    def __init__(self, origin: str, source: str) -> None:
        """Store ``source`` under the displayable ``origin``.

        Args:
            origin: Human readable file identifier such as a path.
            source: Full file contents.
        """

        self._origin = origin
        self._source = source
        self._encoded = source.encode("utf-8")
        self._line_starts = list(line_starts(source))

    @property
    def name(self) -> str:
        return self._origin

    @property
    def contents(self) -> str:
        return self._source

    @property
    def line_starts(self) -> list[int]:
        return list(self._line_starts)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_start(self, line_index: int) -> int | None:
        """Return the byte offset where ``line_index`` starts.

        ``line_index`` equal to the line count maps to the end of the source.
        """

        if line_index < 0 or line_index > len(self._line_starts):
            return None
        if line_index == len(self._line_starts):
            return len(self._encoded)
        return self._line_starts[line_index]

    def line_range(self, line_index: int) -> range | None:
        start = self.line_start(line_index)
        end = self.line_start(line_index + 1)
        if start is None or end is None:
            return None
        return range(start, end)

    def resolve_line_index(self, byte_index: int) -> int | None:
        """Return the index of the line whose range contains ``byte_index``.

        An exact match on a line start selects that line; any other offset
        selects the preceding line. ``len(source)`` maps to the final line and
        offsets outside ``[0, len(source)]`` cannot be resolved.
        """

        if byte_index < 0 or byte_index > len(self._encoded):
            return None
        return bisect_right(self._line_starts, byte_index) - 1

    def resolve_line(self, line_index: int) -> Line | None:
        line_range = self.line_range(line_index)
        if line_range is None:
            return None
        return Line(index=line_index, start=line_range.start, end=line_range.stop)

    def line_source(self, line: Line) -> str:
        """Return the text of ``line`` including its terminator."""

        return self._encoded[line.start : line.end].decode("utf-8")

    # ``Files`` protocol; a single file answers for any identifier.

    def origin(self, file_id: FileId) -> str | None:
        del file_id
        return self._origin

    def source(self, file_id: FileId) -> str | None:
        del file_id
        return self._source

    def line_index(self, file_id: FileId, byte_index: int) -> int | None:
        del file_id
        return self.resolve_line_index(byte_index)

    def line(self, file_id: FileId, line_index: int) -> Line | None:
        del file_id
        return self.resolve_line(line_index)

    def __repr__(self) -> str:
        return f"SimpleFile(origin={self._origin!r}, lines={self.line_count})"


class SimpleFiles:
    """A database of source files addressed by integer identifiers."""

    def __init__(self) -> None:
        self._files: list[SimpleFile] = []

    def add(self, origin: str, source: str) -> int:
        """Add a file and return the identifier used to refer to it.

        Args:
            origin: Human readable file identifier.
            source: Full file contents.

        Returns:
            int: Identifier of the newly added file.
        """

        self._files.append(SimpleFile(origin, source))
        return len(self._files) - 1

    def get(self, file_id: FileId) -> SimpleFile | None:
        if not isinstance(file_id, int) or not 0 <= file_id < len(self._files):
            return None
        return self._files[file_id]

    def origin(self, file_id: FileId) -> str | None:
        file = self.get(file_id)
        return file.name if file is not None else None

    def source(self, file_id: FileId) -> str | None:
        file = self.get(file_id)
        return file.contents if file is not None else None

    def line_index(self, file_id: FileId, byte_index: int) -> int | None:
        file = self.get(file_id)
        return file.resolve_line_index(byte_index) if file is not None else None

    def line(self, file_id: FileId, line_index: int) -> Line | None:
        file = self.get(file_id)
        return file.resolve_line(line_index) if file is not None else None

    def __len__(self) -> int:
        return len(self._files)


__all__ = [
    "Line",
    "ResolutionError",
    "SimpleFile",
    "SimpleFiles",
    "column_index",
    "column_number",
    "line_starts",
]
