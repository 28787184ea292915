"""Filesystem exceptions.

All are fatal to a run: they indicate an environment problem,
not a formatting problem.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fmtcheck.domain.exceptions.base import FmtCheckError

if TYPE_CHECKING:
    from pathlib import Path


class DiscoveryError(FmtCheckError):
    """Root or subdirectory could not be listed.

    Attributes:
        path: Directory that failed
        reason: Why listing failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Cannot scan {path}: {reason}")


class ReadError(FmtCheckError):
    """Discovered file could not be read.

    Attributes:
        path: File that failed
        reason: Why reading failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")


class WriteError(FmtCheckError):
    """Formatted text could not be written back.

    Attributes:
        path: File that failed
        reason: Why writing failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write {path}: {reason}")
