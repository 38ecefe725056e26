# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import io
from collections.abc import Callable

import pytest

from srcframe.config import RenderConfig
from srcframe.core.models import Diagnostic
from srcframe.interfaces.files import Files
from srcframe.rendering import PlainWriter, render, render_short

RenderText = Callable[[Diagnostic, Files], str]


@pytest.fixture
def render_text() -> RenderText:
    """Return a helper rendering a diagnostic to plain text."""

    def _render(diagnostic: Diagnostic, files: Files, config: RenderConfig | None = None) -> str:
        buffer = io.StringIO()
        render(diagnostic, files, PlainWriter(buffer), config)
        return buffer.getvalue()

    return _render


@pytest.fixture
def render_short_text() -> RenderText:
    """Return a helper rendering a diagnostic in short form to plain text."""

    def _render(diagnostic: Diagnostic, files: Files) -> str:
        buffer = io.StringIO()
        render_short(diagnostic, files, PlainWriter(buffer))
        return buffer.getvalue()

    return _render
