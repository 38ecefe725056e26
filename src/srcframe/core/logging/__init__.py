# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""User-facing console logging helpers."""

from __future__ import annotations

from .public import colorize, configure_logging, fail, info, ok, warn

__all__ = [
    "colorize",
    "configure_logging",
    "fail",
    "info",
    "ok",
    "warn",
]
