# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core diagnostic models and severities."""

from __future__ import annotations

from .models import Diagnostic, FileId, Label, LabelStyle
from .severity import Severity, max_severity

__all__ = ["Diagnostic", "FileId", "Label", "LabelStyle", "Severity", "max_severity"]
