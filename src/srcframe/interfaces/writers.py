# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Output sink protocol receiving rendered diagnostics."""

# pylint: disable=too-few-public-methods

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class StyledWriter(Protocol):
    """Accept sequential text writes interleaved with style changes."""

    def write(self, text: str) -> None:
        """Append ``text`` using the currently active style."""

        raise NotImplementedError

    def set_style(self, style: str) -> None:
        """Activate the Rich style definition ``style`` for subsequent writes."""

        raise NotImplementedError

    def reset(self) -> None:
        """Return to the default, unstyled output."""

        raise NotImplementedError


__all__ = ["StyledWriter"]
