# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for byte offset to line and column resolution."""

from __future__ import annotations

import pytest

from srcframe.files import Line, SimpleFile, SimpleFiles, column_index, column_number, line_starts

TEST_SOURCE = "foo\nbar\r\n\nbaz"


def test_line_starts_follow_newlines() -> None:
    assert list(line_starts(TEST_SOURCE)) == [0, 4, 9, 10]


def test_line_starts_count_utf8_bytes() -> None:
    assert list(line_starts("é\nx")) == [0, 3]


def test_line_sources_keep_terminators() -> None:
    file = SimpleFile("test", TEST_SOURCE)

    sources = [file.line_source(file.resolve_line(index)) for index in range(4)]

    assert sources == ["foo\n", "bar\r\n", "\n", "baz"]


def test_every_offset_resolves_to_the_line_containing_it() -> None:
    file = SimpleFile("test", TEST_SOURCE)
    size = len(TEST_SOURCE.encode("utf-8"))

    for offset in range(size):
        line = file.line(0, file.line_index(0, offset))
        assert line is not None
        assert line.start <= offset < line.end


def test_end_of_source_maps_to_final_line() -> None:
    file = SimpleFile("test", TEST_SOURCE)

    assert file.line_index(0, len(TEST_SOURCE)) == 3


def test_offset_on_line_start_belongs_to_that_line() -> None:
    file = SimpleFile("test", "foo\nbar\n")

    assert file.line_index(0, 3) == 0
    assert file.line_index(0, 4) == 1
    # A trailing newline opens an empty final line.
    assert file.line_index(0, 8) == 2
    assert file.line(0, 2) == Line(index=2, start=8, end=8)


def test_out_of_range_queries_are_unanswered() -> None:
    file = SimpleFile("test", "foo\nbar\n")

    assert file.line_index(0, 9) is None
    assert file.line_index(0, -1) is None
    assert file.line(0, 3) is None


def test_line_number_is_one_based() -> None:
    file = SimpleFile("test", "a\nb\n")

    line = file.line(0, 1)

    assert line is not None
    assert line.number == 2
    assert line.range == range(2, 4)


@pytest.mark.parametrize(
    ("byte_index", "expected"),
    [
        (0, 0),
        (2, 0),
        (3, 0),
        (6, 1),
        (10, 2),
        (13, 3),
        (20, 3),
    ],
)
def test_column_index_counts_unicode_scalars(byte_index: int, expected: int) -> None:
    assert column_index("🗻∈🌏", 2, byte_index) == expected


def test_column_index_is_monotonic_within_a_line() -> None:
    source = "a🗻b∈c"
    columns = [column_index(source, 0, offset) for offset in range(len(source.encode("utf-8")) + 1)]

    assert columns[0] == 0
    assert columns == sorted(columns)


def test_column_number_is_one_based() -> None:
    assert column_number("🗻∈🌏", 2, 2) == 1
    assert column_number("🗻∈🌏", 2, 6) == 2
    assert column_number("🗻∈🌏", 2, 13) == 4


def test_simple_files_assigns_sequential_ids() -> None:
    files = SimpleFiles()

    first = files.add("a.txt", "a\n")
    second = files.add("b.txt", "b\n")

    assert (first, second) == (0, 1)
    assert len(files) == 2
    assert files.origin(second) == "b.txt"
    assert files.source(first) == "a\n"
    assert files.line_index(second, 1) == 0


def test_simple_files_unknown_id_is_unanswered() -> None:
    files = SimpleFiles()
    files.add("a.txt", "a\n")

    assert files.origin(3) is None
    assert files.source("a.txt") is None
    assert files.line_index(3, 0) is None
    assert files.line(3, 0) is None


def test_simple_file_exposes_line_table() -> None:
    file = SimpleFile("notes.txt", "é\nx")

    assert file.name == "notes.txt"
    assert file.contents == "é\nx"
    assert file.line_starts == [0, 3]
    assert file.line_count == 2
    assert file.line_start(2) == 4
    assert file.line_range(1) == range(3, 4)
    assert file.line_range(2) is None


def test_line_column_number_uses_its_start() -> None:
    file = SimpleFile("test", "ab\n🗻c\n")
    line = file.resolve_line(1)

    assert line is not None
    assert line.column_number(file.line_source(line), 7) == 2
