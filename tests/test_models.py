# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for diagnostic, label and severity models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from srcframe.core.models import Diagnostic, Label, LabelStyle
from srcframe.core.severity import Severity, max_severity


def test_label_builders_set_style() -> None:
    primary = Label.primary("a", 1, 3).with_message("here")
    secondary = Label.secondary("a", 4, 4)

    assert primary.style is LabelStyle.PRIMARY
    assert primary.message == "here"
    assert primary.byte_range == range(1, 3)
    assert secondary.style is LabelStyle.SECONDARY
    assert secondary.message == ""


@pytest.mark.parametrize(("start", "end"), [(3, 1), (-1, 2)])
def test_label_rejects_invalid_ranges(start: int, end: int) -> None:
    with pytest.raises(ValidationError):
        Label.primary(0, start, end)


def test_label_is_immutable() -> None:
    label = Label.primary(0, 0, 1)

    with pytest.raises(ValidationError):
        label.start = 2  # type: ignore[misc]


def test_diagnostic_builders_accumulate() -> None:
    diagnostic = (
        Diagnostic.warning()
        .with_code("W001")
        .with_message("unused variable")
        .with_labels([Label.primary(0, 4, 5)])
        .with_labels([Label.secondary(0, 0, 3)])
        .with_notes(["consider removing it"])
    )

    assert diagnostic.severity is Severity.WARNING
    assert diagnostic.code == "W001"
    assert [label.style for label in diagnostic.labels] == [LabelStyle.PRIMARY, LabelStyle.SECONDARY]
    assert diagnostic.notes == ("consider removing it",)
    assert diagnostic.primary_labels == (Label.primary(0, 4, 5),)


def test_diagnostic_builders_return_copies() -> None:
    base = Diagnostic.error()

    base.with_message("changed")

    assert base.message == ""


@pytest.mark.parametrize(
    ("factory", "severity"),
    [
        (Diagnostic.bug, Severity.BUG),
        (Diagnostic.error, Severity.ERROR),
        (Diagnostic.warning, Severity.WARNING),
        (Diagnostic.note, Severity.NOTE),
        (Diagnostic.help, Severity.HELP),
    ],
)
def test_severity_factories(factory, severity: Severity) -> None:
    assert factory().severity is severity


def test_severity_ordering() -> None:
    assert Severity.BUG.rank > Severity.ERROR.rank > Severity.WARNING.rank
    assert Severity.WARNING.rank > Severity.NOTE.rank > Severity.HELP.rank
    assert Severity.ERROR.at_least(Severity.WARNING)
    assert not Severity.NOTE.at_least(Severity.ERROR)
    assert max_severity([Severity.NOTE, Severity.ERROR, Severity.HELP]) is Severity.ERROR
    assert max_severity([]) is None


def test_severity_parse_is_case_insensitive() -> None:
    assert Severity.parse("Warning") is Severity.WARNING
    with pytest.raises(ValueError, match="invalid severity"):
        Severity.parse("fatal")
