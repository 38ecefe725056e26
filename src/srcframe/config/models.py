# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models controlling how diagnostics are rendered."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator
from rich.errors import StyleSyntaxError
from rich.style import Style

from srcframe.core.severity import Severity


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class Styles(BaseModel):
    """Rich style definitions applied to each rendering role."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    header_bug: str = "bold bright_red"
    header_error: str = "bold bright_red"
    header_warning: str = "bold bright_yellow"
    header_note: str = "bold bright_green"
    header_help: str = "bold bright_cyan"
    header_message: str = "bold bright_white"

    primary_label_bug: str = "bright_red"
    primary_label_error: str = "bright_red"
    primary_label_warning: str = "bright_yellow"
    primary_label_note: str = "bright_green"
    primary_label_help: str = "bright_cyan"
    secondary_label: str = "bright_blue"

    line_number: str = "bright_blue"
    source_border: str = "bright_blue"
    note_bullet: str = "bright_blue"

    @field_validator("*")
    @classmethod
    def _check_style(cls, value: str) -> str:
        """Reject style definitions Rich cannot parse.

        Args:
            value: Candidate Rich style definition.

        Returns:
            str: The unchanged style definition.

        Raises:
            ValueError: If Rich rejects the definition.
        """

        if not value:
            return value
        try:
            Style.parse(value)
        except StyleSyntaxError as exc:
            raise ValueError(f"invalid style definition {value!r}: {exc}") from exc
        return value

    def header(self, severity: Severity) -> str:
        """Return the header style for ``severity``."""

        return str(getattr(self, f"header_{severity.value}"))

    def label(self, severity: Severity | None) -> str:
        """Return the underline style for a label rendered at ``severity``.

        ``None`` designates a secondary label.
        """

        if severity is None:
            return self.secondary_label
        return str(getattr(self, f"primary_label_{severity.value}"))


class Chars(BaseModel):
    """Glyphs used to draw borders, carets and connectors."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    source_border_top_left: str = "┌"
    source_border_top: str = "─"
    source_border_left: str = "│"
    source_border_left_break: str = "·"

    note_bullet: str = "="

    single_primary_caret: str = "^"
    single_secondary_caret: str = "-"

    multi_primary_caret_start: str = "^"
    multi_primary_caret_end: str = "^"
    multi_secondary_caret_start: str = "'"
    multi_secondary_caret_end: str = "'"
    multi_top_left: str = "╭"
    multi_top: str = "─"
    multi_bottom_left: str = "╰"
    multi_bottom: str = "─"
    multi_left: str = "│"

    @field_validator("*")
    @classmethod
    def _check_glyph(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(f"glyphs must be a single character (got {value!r})")
        return value

    @classmethod
    def ascii(cls) -> Chars:
        """Return a glyph set restricted to ASCII characters."""

        return cls.model_validate(_ASCII_CHARS)


class RenderConfig(BaseModel):
    """Top-level rendering configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    styles: Styles = Field(default_factory=Styles)
    chars: Chars = Field(default_factory=Chars)
    tab_width: int = Field(default=4, ge=1)


_ASCII_CHARS: Final[dict[str, str]] = {
    "source_border_top_left": "-",
    "source_border_top": "-",
    "source_border_left": "|",
    "source_border_left_break": ".",
    "multi_top_left": "/",
    "multi_top": "-",
    "multi_bottom_left": "\\",
    "multi_bottom": "-",
    "multi_left": "|",
}


__all__ = ["Chars", "ConfigError", "RenderConfig", "Styles"]
