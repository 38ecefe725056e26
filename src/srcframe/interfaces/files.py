# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Source table protocol consumed by the snippet layout engine."""

# pylint: disable=too-few-public-methods

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from srcframe.core.models import FileId
    from srcframe.files import Line


@runtime_checkable
class Files(Protocol):
    """Map file identifiers to origins, sources and byte-addressed lines.

    Every query returns ``None`` when it cannot be answered. Answers must stay
    stable for the duration of a render call.
    """

    def origin(self, file_id: FileId) -> str | None:
        """Return the displayable name of ``file_id``."""

        raise NotImplementedError

    def source(self, file_id: FileId) -> str | None:
        """Return the full contents of ``file_id``."""

        raise NotImplementedError

    def line_index(self, file_id: FileId, byte_index: int) -> int | None:
        """Return the 0-based index of the line containing ``byte_index``."""

        raise NotImplementedError

    def line(self, file_id: FileId, line_index: int) -> Line | None:
        """Return the line at the 0-based ``line_index``."""

        raise NotImplementedError


__all__ = ["Files"]
