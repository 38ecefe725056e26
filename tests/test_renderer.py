# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Golden-text tests for rendered diagnostics."""

from __future__ import annotations

import io
import textwrap

import pytest
from rich.console import Console

from srcframe.config import Chars, RenderConfig
from srcframe.core.models import Diagnostic, Label
from srcframe.files import ResolutionError, SimpleFiles
from srcframe.rendering import Empty, PlainWriter, Renderer, RichWriter, render


def _expected(text: str) -> str:
    return textwrap.dedent(text).lstrip("\n")


@pytest.fixture
def bar_files() -> tuple[SimpleFiles, int]:
    files = SimpleFiles()
    return files, files.add("test.txt", "foo\nbar\n")


def test_single_line_snippet(render_text, bar_files) -> None:
    files, file_id = bar_files
    diagnostic = Diagnostic.error().with_code("E0001").with_message("bad bar").with_labels(
        [Label.primary(file_id, 4, 7).with_message("oops")],
    )

    assert render_text(diagnostic, files) == _expected(
        """
        error[E0001]: bad bar

          ┌── test.txt:2:1 ───
          │
        2 │ bar
          │ ^^^ oops
          │

        """,
    )


def test_short_form(render_short_text, bar_files) -> None:
    files, file_id = bar_files
    diagnostic = Diagnostic.error().with_code("E0001").with_message("bad bar").with_labels(
        [Label.primary(file_id, 4, 7), Label.primary(file_id, 1, 2)],
    )

    assert render_short_text(diagnostic, files) == (
        "test.txt:2:1: error[E0001]: bad bar\ntest.txt:1:2: error[E0001]: bad bar\n"
    )


def test_multi_line_label_with_prefix(render_text) -> None:
    files = SimpleFiles()
    file_id = files.add("test.txt", "let x = {\n    a,\n    b\n};\n")
    diagnostic = Diagnostic.error().with_message("bad block").with_labels(
        [Label.primary(file_id, 8, 24).with_message("block")],
    )

    assert render_text(diagnostic, files) == _expected(
        """
        error: bad block

          ┌── test.txt:1:9 ───
          │
        1 │   let x = {
          │ ╭─────────^
        2 │ │     a,
        3 │ │     b
        4 │ │ };
          │ ╰─^ block
          │

        """,
    )


def test_multi_line_label_after_indentation(render_text) -> None:
    files = SimpleFiles()
    file_id = files.add("test.txt", "fn f() {\n    if a {\n        b\n    }\n}\n")
    diagnostic = Diagnostic.warning().with_message("nested").with_labels(
        [Label.primary(file_id, 13, 35).with_message("this branch")],
    )

    assert render_text(diagnostic, files) == _expected(
        """
        warning: nested

          ┌── test.txt:2:5 ───
          │
        2 │ ╭     if a {
        3 │ │         b
        4 │ │     }
          │ ╰─────^ this branch
          │

        """,
    )


def test_secondary_labels_and_notes(render_text) -> None:
    files = SimpleFiles()
    file_id = files.add("test.txt", "one\ntwo\nthree\n")
    diagnostic = (
        Diagnostic.error()
        .with_message("mismatch")
        .with_labels([Label.primary(file_id, 8, 13).with_message("used here"), Label.secondary(file_id, 0, 3)])
        .with_notes(["expected type `Int`\n   found type `String`"])
    )

    assert render_text(diagnostic, files) == _expected(
        """
        error: mismatch

          ┌── test.txt:1:1 ───
          │
        1 │ one
          │ ---
          ·
        3 │ three
          │ ^^^^^ used here
          │
          = expected type `Int`
               found type `String`

        """,
    )


def test_gutter_width_is_shared_across_files(render_text) -> None:
    files = SimpleFiles()
    near = files.add("near.txt", "x\n")
    far = files.add("far.txt", "".join(f"{n}\n" for n in range(1, 12)))
    diagnostic = Diagnostic.note().with_message("twice").with_labels(
        [Label.primary(near, 0, 1), Label.secondary(far, 21, 23)],
    )

    assert render_text(diagnostic, files) == _expected(
        """
        note: twice

           ┌── near.txt:1:1 ───
           │
         1 │ x
           │ ^
           │
           ┌── far.txt:11:1 ───
           │
        11 │ 11
           │ --
           │

        """,
    )


def test_diagnostic_without_labels(render_text) -> None:
    diagnostic = Diagnostic.bug().with_message("internal failure").with_notes(["please report this"])

    assert render_text(diagnostic, SimpleFiles()) == "bug: internal failure\n = please report this\n\n"


def test_empty_range_draws_one_caret(render_text, bar_files) -> None:
    files, file_id = bar_files
    diagnostic = Diagnostic.error().with_labels([Label.primary(file_id, 5, 5).with_message("here")])

    assert "  │  ^ here\n" in render_text(diagnostic, files)


def test_tabs_expand_to_configured_width(render_text) -> None:
    files = SimpleFiles()
    file_id = files.add("tabs.txt", "\tx = 1\n")
    diagnostic = Diagnostic.error().with_labels([Label.primary(file_id, 1, 2)])

    output = render_text(diagnostic, files, RenderConfig(tab_width=2))

    assert "1 │   x = 1\n" in output
    assert "  │   ^\n" in output


def test_wide_characters_shift_carets_by_cell_width(render_text) -> None:
    files = SimpleFiles()
    file_id = files.add("wide.txt", "日本語 = 1\n")
    diagnostic = Diagnostic.error().with_labels([Label.primary(file_id, 12, 13)])

    output = render_text(diagnostic, files)

    assert "┌── wide.txt:1:7 ───" in output
    assert "  │ " + " " * 9 + "^\n" in output


def test_ascii_glyphs(render_text) -> None:
    files = SimpleFiles()
    file_id = files.add("test.txt", "let x = {\n};\n")
    diagnostic = Diagnostic.error().with_message("ascii").with_labels([Label.primary(file_id, 8, 11)])

    output = render_text(diagnostic, files, RenderConfig(chars=Chars.ascii()))

    assert output == _expected(
        """
        error: ascii

          --- test.txt:1:9 ---
          |
        1 |   let x = {
          | /---------^
        2 | | };
          | \\-^
          |

        """,
    )


def test_resolution_failure_writes_nothing() -> None:
    buffer = io.StringIO()
    diagnostic = Diagnostic.error().with_message("lost").with_labels([Label.primary(4, 0, 1)])

    with pytest.raises(ResolutionError):
        render(diagnostic, SimpleFiles(), PlainWriter(buffer))

    assert buffer.getvalue() == ""


def test_writer_failures_propagate(bar_files) -> None:
    class ClosedWriter:
        def write(self, text: str) -> None:
            raise OSError("stream closed")

        def set_style(self, style: str) -> None:
            pass

        def reset(self) -> None:
            pass

    files, file_id = bar_files

    with pytest.raises(OSError, match="stream closed"):
        render(Diagnostic.error().with_labels([Label.primary(file_id, 0, 1)]), files, ClosedWriter())


def test_rendering_is_deterministic(render_text, bar_files) -> None:
    files, file_id = bar_files
    diagnostic = Diagnostic.error().with_labels([Label.primary(file_id, 0, 5), Label.secondary(file_id, 1, 2)])

    assert render_text(diagnostic, files) == render_text(diagnostic, files)


def test_style_changes_wrap_styled_segments(bar_files) -> None:
    calls: list[tuple[str, str]] = []

    class RecordingWriter:
        def write(self, text: str) -> None:
            calls.append(("write", text))

        def set_style(self, style: str) -> None:
            calls.append(("style", style))

        def reset(self) -> None:
            calls.append(("reset", ""))

    files, file_id = bar_files
    config = RenderConfig()
    render(Diagnostic.error().with_message("x").with_labels([Label.primary(file_id, 0, 1)]), files, RecordingWriter())

    assert calls[:3] == [("style", config.styles.header_error), ("write", "error"), ("reset", "")]
    assert ("style", config.styles.primary_label_error) in calls


def test_unknown_entries_are_rejected() -> None:
    renderer = Renderer(PlainWriter(io.StringIO()), RenderConfig())

    renderer.render(Empty())
    with pytest.raises(TypeError, match="unsupported display-list entry"):
        renderer.render(object())  # type: ignore[arg-type]


def test_rich_writer_matches_plain_output(render_text, bar_files) -> None:
    files, file_id = bar_files
    diagnostic = Diagnostic.error().with_message("bad bar").with_labels(
        [Label.primary(file_id, 4, 7).with_message("oops")],
    )
    buffer = io.StringIO()
    console = Console(file=buffer, color_system=None, force_terminal=False, width=200)
    writer = RichWriter(console)

    render(diagnostic, files, writer)
    writer.flush()

    assert buffer.getvalue() == render_text(diagnostic, files)


def test_rich_writer_emits_ansi_styles(bar_files) -> None:
    files, file_id = bar_files
    buffer = io.StringIO()
    console = Console(file=buffer, color_system="standard", force_terminal=True, width=200)
    writer = RichWriter(console)

    render(Diagnostic.error().with_labels([Label.primary(file_id, 0, 3)]), files, writer)
    writer.flush()

    assert "\x1b[" in buffer.getvalue()
    assert "foo" in buffer.getvalue()
