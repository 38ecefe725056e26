# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load diagnostics and their source files from JSON documents."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .core.models import Diagnostic, Label, LabelStyle
from .core.severity import Severity
from .files import SimpleFiles

LOGGER = logging.getLogger(__name__)


class DiagnosticsLoadError(ValueError):
    """Raised when a diagnostics document is malformed or references unreadable files."""


class LabelRecord(BaseModel):
    """Label as written in a diagnostics document, addressing files by path."""

    model_config = ConfigDict(extra="forbid")

    file: str
    start: int
    end: int
    style: LabelStyle = LabelStyle.PRIMARY
    message: str = ""


class DiagnosticRecord(BaseModel):
    """Diagnostic as written in a diagnostics document."""

    model_config = ConfigDict(extra="forbid")

    severity: Severity
    code: str | None = None
    message: str = ""
    labels: list[LabelRecord] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)


class DiagnosticsDocument(BaseModel):
    """Top-level diagnostics document with optional inline file sources."""

    model_config = ConfigDict(extra="forbid")

    diagnostics: list[DiagnosticRecord] = Field(default_factory=list)
    files: dict[str, str] = Field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class LoadedDiagnostics:
    """Diagnostics paired with the source table their labels reference."""

    diagnostics: tuple[Diagnostic, ...]
    files: SimpleFiles


def parse_document(payload: Mapping[str, Any]) -> DiagnosticsDocument:
    """Validate ``payload`` against the diagnostics document schema.

    Raises:
        DiagnosticsLoadError: If validation fails.
    """

    try:
        return DiagnosticsDocument.model_validate(payload)
    except ValidationError as exc:
        raise DiagnosticsLoadError(f"invalid diagnostics document: {exc}") from exc


def build_diagnostics(document: DiagnosticsDocument, root: Path) -> LoadedDiagnostics:
    """Resolve file references in ``document`` into a :class:`SimpleFiles` table.

    Inline sources from ``document.files`` take precedence; other paths are
    read as UTF-8 relative to ``root``. Each file is added once, in order of
    first reference.

    Args:
        document: Validated diagnostics document.
        root: Directory against which relative paths are resolved.

    Returns:
        LoadedDiagnostics: Diagnostics whose labels carry integer file ids.

    Raises:
        DiagnosticsLoadError: If a referenced file cannot be read.
    """

    files = SimpleFiles()
    file_ids: dict[str, int] = {}

    def file_id_for(path: str) -> int:
        if path not in file_ids:
            file_ids[path] = files.add(path, _read_source(document, path, root))
        return file_ids[path]

    diagnostics = tuple(
        Diagnostic(
            severity=record.severity,
            code=record.code,
            message=record.message,
            labels=tuple(
                Label(
                    file_id=file_id_for(label.file),
                    start=label.start,
                    end=label.end,
                    style=label.style,
                    message=label.message,
                )
                for label in record.labels
            ),
            notes=tuple(record.notes),
        )
        for record in document.diagnostics
    )
    LOGGER.debug("loaded %d diagnostic(s) across %d file(s)", len(diagnostics), len(files))
    return LoadedDiagnostics(diagnostics=diagnostics, files=files)


def load_diagnostics(path: Path, *, root: Path | None = None) -> LoadedDiagnostics:
    """Read a JSON diagnostics document and the sources it references.

    Args:
        path: Location of the JSON document.
        root: Base directory for label paths; defaults to the document's directory.

    Returns:
        LoadedDiagnostics: Diagnostics ready to render.

    Raises:
        DiagnosticsLoadError: If the document or a referenced file is unusable.
    """

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise DiagnosticsLoadError(f"cannot read diagnostics from {path}: {exc}") from exc
    if not isinstance(payload, Mapping):
        raise DiagnosticsLoadError(f"diagnostics document {path} must be a JSON object")
    try:
        return build_diagnostics(parse_document(payload), root or path.parent)
    except ValidationError as exc:
        raise DiagnosticsLoadError(f"invalid label in {path}: {exc}") from exc


def _read_source(document: DiagnosticsDocument, path: str, root: Path) -> str:
    if path in document.files:
        return document.files[path]
    candidate = Path(path)
    resolved = candidate if candidate.is_absolute() else root / candidate
    try:
        return resolved.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DiagnosticsLoadError(f"cannot read source file {resolved}: {exc}") from exc


__all__ = [
    "DiagnosticRecord",
    "DiagnosticsDocument",
    "DiagnosticsLoadError",
    "LabelRecord",
    "LoadedDiagnostics",
    "build_diagnostics",
    "load_diagnostics",
    "parse_document",
]
