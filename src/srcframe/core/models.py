# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core diagnostic data models shared across the srcframe package."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field, model_validator

from srcframe.core.severity import Severity

FileId: TypeAlias = int | str


class LabelStyle(str, Enum):
    """Distinguish the label that explains a diagnostic from supporting context."""

    PRIMARY = "primary"
    SECONDARY = "secondary"


class Label(BaseModel):
    """Anchor a diagnostic to the half-open byte range ``[start, end)`` of a file."""

    model_config = ConfigDict(frozen=True)

    file_id: FileId
    start: int
    end: int
    style: LabelStyle = LabelStyle.PRIMARY
    message: str = ""

    @model_validator(mode="after")
    def _check_range(self) -> Label:
        """Reject negative or inverted byte ranges.

        Returns:
            Label: The validated label.

        Raises:
            ValueError: If ``start`` is negative or greater than ``end``.
        """

        if self.start < 0:
            raise ValueError(f"label start must not be negative (got {self.start})")
        if self.start > self.end:
            raise ValueError(f"label start {self.start} is greater than end {self.end}")
        return self

    @classmethod
    def primary(cls, file_id: FileId, start: int, end: int) -> Label:
        """Return a primary label covering ``[start, end)`` in ``file_id``."""

        return cls(file_id=file_id, start=start, end=end, style=LabelStyle.PRIMARY)

    @classmethod
    def secondary(cls, file_id: FileId, start: int, end: int) -> Label:
        """Return a secondary label covering ``[start, end)`` in ``file_id``."""

        return cls(file_id=file_id, start=start, end=end, style=LabelStyle.SECONDARY)

    def with_message(self, message: str) -> Label:
        """Return a copy of the label carrying ``message``."""

        return self.model_copy(update={"message": message})

    @property
    def byte_range(self) -> range:
        """Return the covered byte offsets as a :class:`range`."""

        return range(self.start, self.end)

    @property
    def sort_key(self) -> tuple[int, int]:
        """Return the key ordering labels left to right, shorter first."""

        return (self.start, self.end)


class Diagnostic(BaseModel):
    """Represent one reported issue together with its source-anchored labels."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    code: str | None = None
    message: str = ""
    labels: tuple[Label, ...] = Field(default_factory=tuple)
    notes: tuple[str, ...] = Field(default_factory=tuple)

    @classmethod
    def new(cls, severity: Severity) -> Diagnostic:
        """Return an empty diagnostic with the given ``severity``."""

        return cls(severity=severity)

    @classmethod
    def bug(cls) -> Diagnostic:
        return cls.new(Severity.BUG)

    @classmethod
    def error(cls) -> Diagnostic:
        return cls.new(Severity.ERROR)

    @classmethod
    def warning(cls) -> Diagnostic:
        return cls.new(Severity.WARNING)

    @classmethod
    def note(cls) -> Diagnostic:
        return cls.new(Severity.NOTE)

    @classmethod
    def help(cls) -> Diagnostic:
        return cls.new(Severity.HELP)

    def with_code(self, code: str) -> Diagnostic:
        """Return a copy of the diagnostic carrying ``code``."""

        return self.model_copy(update={"code": code})

    def with_message(self, message: str) -> Diagnostic:
        """Return a copy of the diagnostic carrying ``message``."""

        return self.model_copy(update={"message": message})

    def with_labels(self, labels: Iterable[Label]) -> Diagnostic:
        """Return a copy with ``labels`` appended after the existing labels."""

        return self.model_copy(update={"labels": (*self.labels, *labels)})

    def with_notes(self, notes: Iterable[str]) -> Diagnostic:
        """Return a copy with ``notes`` appended after the existing notes."""

        return self.model_copy(update={"notes": (*self.notes, *notes)})

    @property
    def primary_labels(self) -> tuple[Label, ...]:
        """Return primary labels in insertion order."""

        return tuple(label for label in self.labels if label.style is LabelStyle.PRIMARY)


__all__ = ["Diagnostic", "FileId", "Label", "LabelStyle"]
