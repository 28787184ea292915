"""Strict check failure."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fmtcheck.domain.exceptions.base import FmtCheckError

if TYPE_CHECKING:
    from fmtcheck.domain.model.source_file import SourceFile

STRICT_FAILURE_MESSAGE = "Some files have formatting errors."


class StrictCheckError(FmtCheckError):
    """Files need attention in strict mode.

    Raised by strict_check() after the report was emitted.
    The message is fixed; details live in the report.

    Attributes:
        needs_attention: Changed and errored files, in outcome order
    """

    def __init__(self, needs_attention: tuple[SourceFile, ...]) -> None:
        if not needs_attention:
            raise ValueError("StrictCheckError requires at least one file")

        self.needs_attention = needs_attention
        super().__init__(STRICT_FAILURE_MESSAGE)
