"""Report rendering: outcomes → RunResult → summary lines.

Pure functions, no I/O.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fmtcheck.domain.model.format_outcome import OutcomeStatus
from fmtcheck.domain.model.run_result import RunResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fmtcheck.domain.model.format_outcome import FormatOutcome


def render(outcomes: Iterable[FormatOutcome]) -> RunResult:
    """Aggregate outcomes into a RunResult, keeping their order.

    Raises:
        ValueError: If a file appears in more than one outcome
    """
    return RunResult(outcomes=tuple(outcomes))


def summarize(result: RunResult, *, applied: bool = False) -> tuple[str, ...]:
    """One line per file needing attention, in outcome order.

    Uses display paths. Parse errors carry the formatter's message.

    Args:
        result: Run result
        applied: Changes were written (write mode). Changed files are
            then reported as "formatted" instead of "changed".

    Returns:
        Summary lines, empty when nothing needs attention
    """
    changed_label = "formatted" if applied else "changed"
    lines: list[str] = []

    for outcome in result.outcomes:
        match outcome.status:
            case OutcomeStatus.CHANGED:
                lines.append(f"{changed_label}: {outcome.source.display_path}")
            case OutcomeStatus.PARSE_ERROR:
                lines.append(f"error: {outcome.source.display_path}: {outcome.message}")
            case OutcomeStatus.UNCHANGED:
                pass

    return tuple(lines)
