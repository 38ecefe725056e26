# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Entry points rendering diagnostics onto a styled writer."""

from __future__ import annotations

from srcframe.config.models import RenderConfig
from srcframe.core.models import Diagnostic
from srcframe.interfaces.files import Files
from srcframe.interfaces.writers import StyledWriter

from .layout import layout_rich, layout_short
from .renderer import Renderer


def render(
    diagnostic: Diagnostic,
    files: Files,
    writer: StyledWriter,
    config: RenderConfig | None = None,
) -> None:
    """Render ``diagnostic`` with annotated source snippets.

    The complete display list is computed before anything is written, so a
    :class:`~srcframe.files.ResolutionError` never leaves partial output.
    Errors raised by ``writer`` propagate unchanged and may follow partial
    output.

    Args:
        diagnostic: Diagnostic to render.
        files: Source table referenced by the diagnostic's labels.
        writer: Sink receiving the rendered text.
        config: Rendering configuration; defaults apply when omitted.

    Raises:
        ResolutionError: If ``files`` cannot answer a required query.
    """

    entries = layout_rich(diagnostic, files)
    Renderer(writer, config or RenderConfig()).render_all(entries)


def render_short(
    diagnostic: Diagnostic,
    files: Files,
    writer: StyledWriter,
    config: RenderConfig | None = None,
) -> None:
    """Render ``diagnostic`` as one located header per primary label.

    Args:
        diagnostic: Diagnostic to render.
        files: Source table referenced by the diagnostic's labels.
        writer: Sink receiving the rendered text.
        config: Rendering configuration; defaults apply when omitted.

    Raises:
        ResolutionError: If ``files`` cannot answer a required query.
    """

    entries = layout_short(diagnostic, files)
    Renderer(writer, config or RenderConfig()).render_all(entries)


__all__ = ["render", "render_short"]
