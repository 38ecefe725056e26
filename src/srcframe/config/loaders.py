# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Load :class:`RenderConfig` instances from TOML documents."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from .models import ConfigError, RenderConfig

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "srcframe"

LOGGER = logging.getLogger(__name__)


def read_config_document(path: Path) -> Mapping[str, Any]:
    """Return the raw configuration table stored at ``path``.

    ``pyproject.toml`` files contribute their ``[tool.srcframe]`` table; any
    other file is read as a standalone TOML document. Missing files yield an
    empty mapping.

    Args:
        path: Location of the TOML document.

    Returns:
        Mapping[str, Any]: Configuration table ready for validation.

    Raises:
        ConfigError: If the document cannot be read or parsed.
    """

    if not path.exists():
        LOGGER.debug("configuration file %s not found; using defaults", path)
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"cannot read configuration at {path}: {exc}") from exc
    if path.name != PYPROJECT_FILENAME:
        return data
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"[{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return section


def build_render_config(data: Mapping[str, Any]) -> RenderConfig:
    """Validate ``data`` on top of the built-in defaults.

    Args:
        data: Partial configuration mapping.

    Returns:
        RenderConfig: Configuration with unspecified options defaulted.

    Raises:
        ConfigError: If ``data`` contains unknown keys or invalid values.
    """

    try:
        return RenderConfig.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def load_render_config(path: Path | None) -> RenderConfig:
    """Return the configuration stored at ``path`` or defaults when absent."""

    if path is None:
        return RenderConfig()
    return build_render_config(read_config_document(path))


__all__ = [
    "PYPROJECT_SECTION_KEY",
    "build_render_config",
    "load_render_config",
    "read_config_document",
]
