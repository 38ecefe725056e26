# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render compiler-style diagnostics as annotated source snippets."""

from __future__ import annotations

from importlib import metadata

from .config import Chars, ConfigError, RenderConfig, Styles, load_render_config
from .core.models import Diagnostic, Label, LabelStyle
from .core.severity import Severity
from .files import Line, ResolutionError, SimpleFile, SimpleFiles, column_index, column_number, line_starts
from .rendering import PlainWriter, RichWriter, render, render_short

__all__ = [
    "Chars",
    "ConfigError",
    "Diagnostic",
    "Label",
    "LabelStyle",
    "Line",
    "PlainWriter",
    "RenderConfig",
    "ResolutionError",
    "RichWriter",
    "Severity",
    "SimpleFile",
    "SimpleFiles",
    "Styles",
    "__version__",
    "column_index",
    "column_number",
    "line_starts",
    "load_render_config",
    "render",
    "render_short",
]

try:
    __version__ = metadata.version("srcframe")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
