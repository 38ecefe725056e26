# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocols describing the collaborators consumed by the renderer."""

from __future__ import annotations

from .files import Files
from .writers import StyledWriter

__all__ = ["Files", "StyledWriter"]
