# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI commands rendering diagnostics documents to the terminal."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Final

import typer

from ..config import Chars, ConfigError, RenderConfig, load_render_config
from ..core.logging import configure_logging, fail, ok, warn
from ..core.severity import Severity
from ..files import ResolutionError
from ..rendering import RichWriter, render, render_short
from ..runtime.console.manager import get_console_manager
from ..serialization import DiagnosticsLoadError, LoadedDiagnostics, load_diagnostics

EXIT_FAILED_CHECK: Final[int] = 1
EXIT_USAGE_ERROR: Final[int] = 2

LOGGER = logging.getLogger(__name__)

DiagnosticsArg = Annotated[
    Path,
    typer.Argument(metavar="DIAGNOSTICS", help="JSON document listing diagnostics to render."),
]
RootOpt = Annotated[
    Path | None,
    typer.Option("--root", "-r", help="Directory label paths are relative to (defaults to the document's)."),
]
ShortOpt = Annotated[bool, typer.Option("--short", help="Print one located header per primary label.")]
ConfigOpt = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="TOML file or pyproject.toml holding [tool.srcframe] settings."),
]
ColorOpt = Annotated[bool, typer.Option("--color/--no-color", help="Toggle ANSI colour output.")]
AsciiOpt = Annotated[bool, typer.Option("--ascii", help="Draw borders with ASCII characters only.")]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Log layout decisions to stderr.")]


@dataclass(slots=True, frozen=True)
class RenderOptions:
    """Options shared by the ``render`` and ``check`` commands."""

    diagnostics: Path
    root: Path | None
    short: bool
    config: Path | None
    color: bool
    ascii: bool


def _build_config(options: RenderOptions) -> RenderConfig:
    config = load_render_config(options.config)
    if options.ascii:
        config = config.model_copy(update={"chars": Chars.ascii()})
    return config


def _render_document(options: RenderOptions) -> LoadedDiagnostics:
    """Render every diagnostic of the document named in ``options``.

    Raises:
        typer.Exit: With :data:`EXIT_USAGE_ERROR` when input cannot be used.
    """

    try:
        config = _build_config(options)
        loaded = load_diagnostics(options.diagnostics, root=options.root)
        console = get_console_manager().get(color=options.color)
        writer = RichWriter(console)
        emit = render_short if options.short else render
        for diagnostic in loaded.diagnostics:
            emit(diagnostic, loaded.files, writer, config)
        writer.flush()
    except (ConfigError, DiagnosticsLoadError, ResolutionError, OSError) as exc:
        fail(f"srcframe: {exc}", use_color=options.color)
        raise typer.Exit(code=EXIT_USAGE_ERROR) from exc
    if not loaded.diagnostics:
        warn(f"no diagnostics found in {options.diagnostics}", use_color=options.color)
    LOGGER.debug("rendered %d diagnostic(s) from %s", len(loaded.diagnostics), options.diagnostics)
    return loaded


def render_command(
    diagnostics: DiagnosticsArg,
    root: RootOpt = None,
    short: ShortOpt = False,
    config: ConfigOpt = None,
    color: ColorOpt = True,
    ascii_only: AsciiOpt = False,
    verbose: VerboseOpt = False,
) -> None:
    """Render the diagnostics in DIAGNOSTICS with annotated source snippets."""

    configure_logging(verbose=verbose, use_color=color)
    _render_document(
        RenderOptions(
            diagnostics=diagnostics,
            root=root,
            short=short,
            config=config,
            color=color,
            ascii=ascii_only,
        ),
    )


def check_command(
    diagnostics: DiagnosticsArg,
    root: RootOpt = None,
    short: ShortOpt = False,
    config: ConfigOpt = None,
    color: ColorOpt = True,
    ascii_only: AsciiOpt = False,
    verbose: VerboseOpt = False,
    fail_on: Annotated[
        str,
        typer.Option("--fail-on", help="Lowest severity that fails the check (bug, error, warning, note, help)."),
    ] = Severity.ERROR.value,
) -> None:
    """Render DIAGNOSTICS and exit non-zero when any reaches --fail-on."""

    try:
        threshold = Severity.parse(fail_on)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--fail-on") from exc
    configure_logging(verbose=verbose, use_color=color)
    loaded = _render_document(
        RenderOptions(
            diagnostics=diagnostics,
            root=root,
            short=short,
            config=config,
            color=color,
            ascii=ascii_only,
        ),
    )
    failing = [diag for diag in loaded.diagnostics if diag.severity.at_least(threshold)]
    if failing:
        fail(f"{len(failing)} diagnostic(s) at or above {threshold.value}", use_color=color)
        raise typer.Exit(code=EXIT_FAILED_CHECK)
    ok(f"no diagnostics at or above {threshold.value}", use_color=color)


def register_render_commands(app: typer.Typer) -> None:
    """Attach the rendering commands to ``app``."""

    app.command("render")(render_command)
    app.command("check")(check_command)


__all__ = [
    "EXIT_FAILED_CHECK",
    "EXIT_USAGE_ERROR",
    "RenderOptions",
    "check_command",
    "register_render_commands",
    "render_command",
]
