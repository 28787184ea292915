"""Plain text reporter.

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from fmtcheck.application.reporters.render import summarize

if TYPE_CHECKING:
    from fmtcheck.domain.model.format_outcome import FormatOutcome
    from fmtcheck.domain.model.run_result import RunResult

FIX_HINT = 'Some files contain formatting errors; please run "fmtcheck format" to fix.'


class PlainTextReporter:
    """Plain text reporter.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, *, applied: bool = False, show_diff: bool = False) -> None:
        """Initialize reporter.

        Args:
            applied: Result comes from write mode
            show_diff: Append a unified diff for every changed file
        """
        self._applied = applied
        self._show_diff = show_diff

    def report(self, result: RunResult) -> str:
        """Format run result as plain text.

        Empty string when nothing needs attention.
        """
        lines = summarize(result, applied=self._applied)
        if not lines:
            return ""

        out: list[str] = []
        if not self._applied:
            out.append(FIX_HINT)
            out.append("")
            out.append("Files with errors:")
            out.extend(f"\t{line}" for line in lines)
        else:
            out.extend(lines)

        if self._show_diff:
            for outcome in result.changed:
                out.extend(_diff_lines(outcome))

        return "\n".join(out) + "\n"


def _diff_lines(outcome: FormatOutcome) -> list[str]:
    """Unified diff of one CHANGED outcome, one entry per line."""
    name = outcome.source.display_path
    diff = difflib.unified_diff(
        outcome.original_text.splitlines(keepends=True),
        (outcome.formatted_text or "").splitlines(keepends=True),
        fromfile=f"a/{name}",
        tofile=f"b/{name}",
    )
    return [line.rstrip("\r\n") for line in diff]
