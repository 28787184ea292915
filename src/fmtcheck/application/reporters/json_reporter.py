"""JSON reporter: RunResult → JSON string."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fmtcheck.domain.model.format_outcome import FormatOutcome
    from fmtcheck.domain.model.run_result import RunResult


class JsonReporter:
    """JSON reporter: outputs machine-readable JSON.

    Schema:
        files: number of files checked
        passed: true when nothing needs attention
        applied: changes were written
        changed: display paths of changed files
        errors: [{"path", "message"}] for parse errors
    """

    def __init__(self, *, applied: bool = False, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            applied: Result comes from write mode
            indent: JSON indentation. None for compact output.
        """
        self._applied = applied
        self._indent = indent

    def report(self, result: RunResult) -> str:
        data = {
            "files": result.file_count,
            "passed": result.passed,
            "applied": self._applied,
            "changed": [o.source.display_path for o in result.changed],
            "errors": [_error_to_dict(o) for o in result.errors],
        }
        return json.dumps(data, indent=self._indent)


def _error_to_dict(outcome: FormatOutcome) -> dict[str, object]:
    """Convert PARSE_ERROR outcome to dict."""
    return {
        "path": outcome.source.display_path,
        "message": outcome.message,
    }
