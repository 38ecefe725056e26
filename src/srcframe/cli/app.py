# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .render import register_render_commands

app = typer.Typer(
    name="srcframe",
    help="Render compiler-style diagnostics as annotated source snippets.",
    add_completion=False,
    no_args_is_help=True,
)
register_render_commands(app)


def main() -> None:
    """Run the CLI application."""

    app()


__all__ = ["app", "main"]
