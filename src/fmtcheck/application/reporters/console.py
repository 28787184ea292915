"""Console reporter: RunResult → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text

from fmtcheck.domain.model.format_outcome import OutcomeStatus

if TYPE_CHECKING:
    from fmtcheck.domain.model.run_result import RunResult

_STATUS_STYLE = {
    OutcomeStatus.CHANGED: "yellow",
    OutcomeStatus.PARSE_ERROR: "bold red",
}


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        color: Emit ANSI styles. False gives plain text (tests, pipes).
        width: Console width in columns.
        show_summary: Print the "N file(s) checked" line.
    """

    color: bool = True
    width: int = 120
    show_summary: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs a rich table of files needing attention.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None, *, applied: bool = False) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
            applied: Result comes from write mode
        """
        self._config = config or ConsoleConfig()
        self._applied = applied

    def report(self, result: RunResult) -> str:
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            highlight=False,
            width=self._config.width,
        )

        if not result.passed:
            self._render_table(console, result)

        if self._config.show_summary:
            self._render_summary(console, result)

        return output.getvalue()

    def _render_table(self, console: Console, result: RunResult) -> None:
        """Render one row per file needing attention."""
        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("File", style="cyan")
        table.add_column("Status")
        table.add_column("Message", style="dim")

        changed_label = "formatted" if self._applied else "changed"
        for outcome in result.outcomes:
            if not outcome.needs_attention:
                continue
            label = changed_label if outcome.status is OutcomeStatus.CHANGED else "error"
            table.add_row(
                Text(outcome.source.display_path),
                Text(label, style=_STATUS_STYLE[outcome.status]),
                Text(outcome.message or ""),
            )

        console.print(table)

    def _render_summary(self, console: Console, result: RunResult) -> None:
        """Render one-line totals."""
        summary = Text(f"{result.file_count} file(s) checked, ")
        if result.passed:
            summary.append("all formatted", style="green")
        else:
            summary.append(
                f"{len(result.changed)} {'formatted' if self._applied else 'changed'}, "
                f"{len(result.errors)} error(s)",
                style="red",
            )
        console.print(summary)
