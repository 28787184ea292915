"""Reporter port: RunResult → text."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from fmtcheck.domain.model.run_result import RunResult


class ReporterProtocol(Protocol):
    """Anything that renders a run result for a human or a machine.

    Reporters never write to stdout themselves; modes hand them the
    result and the CLI prints what they return. An empty string means
    there is nothing to show.
    """

    def report(self, result: RunResult) -> str: ...
