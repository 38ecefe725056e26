# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity levels attached to diagnostics, from most to least severe."""

    BUG = "bug"
    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"
    HELP = "help"

    @property
    def rank(self) -> int:
        """Return the ordering rank where larger values are more severe.

        Returns:
            int: Rank used to compare severities.
        """

        return _SEVERITY_RANKS[self]

    def at_least(self, other: Severity) -> bool:
        """Return ``True`` when this severity is as severe as ``other`` or more.

        Args:
            other: Threshold severity.

        Returns:
            bool: ``True`` when ``self`` ranks at or above ``other``.
        """

        return self.rank >= other.rank

    @classmethod
    def parse(cls, value: str) -> Severity:
        """Parse a case-insensitive severity name.

        Args:
            value: Textual severity such as ``"Error"`` or ``"warning"``.

        Returns:
            Severity: Matching severity member.

        Raises:
            ValueError: If ``value`` does not name a known severity.
        """

        normalized = value.strip().lower()
        try:
            return cls(normalized)
        except ValueError as exc:
            known = ", ".join(member.value for member in cls)
            raise ValueError(f"invalid severity level '{value}': expected one of {known}") from exc


def max_severity(severities: Iterable[Severity]) -> Severity | None:
    """Return the most severe entry in ``severities`` or ``None`` when empty."""

    return max(severities, key=lambda severity: severity.rank, default=None)


_SEVERITY_RANKS: Final[dict[Severity, int]] = {
    Severity.HELP: 0,
    Severity.NOTE: 1,
    Severity.WARNING: 2,
    Severity.ERROR: 3,
    Severity.BUG: 4,
}


__all__ = ["Severity", "max_severity"]
