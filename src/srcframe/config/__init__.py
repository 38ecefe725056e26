# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rendering configuration models and loaders."""

from __future__ import annotations

from .loaders import build_render_config, load_render_config, read_config_document
from .models import Chars, ConfigError, RenderConfig, Styles

__all__ = [
    "Chars",
    "ConfigError",
    "RenderConfig",
    "Styles",
    "build_render_config",
    "load_render_config",
    "read_config_document",
]
