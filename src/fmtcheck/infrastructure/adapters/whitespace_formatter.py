"""Whitespace formatter adapter.

Language-agnostic formatter: trailing whitespace and file endings only.
Never raises ParseFailure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fmtcheck.domain.exceptions.configuration import ConfigurationError
from fmtcheck.domain.ports.formatter import FormatterPort

if TYPE_CHECKING:
    from fmtcheck.domain.model.configuration import FormatConfiguration


class WhitespaceFormatter(FormatterPort):
    """Strip trailing whitespace, normalise the file ending.

    Preferences:
        final_newline (bool, default True): end non-empty files with exactly one newline
        tab_width (int | None, default None): expand leading tabs to this width

    Line endings are normalised to "\\n".
    """

    name = "whitespace"
    default_include = ("*.md", "*.py", "*.rst", "*.toml", "*.txt", "*.yaml", "*.yml")

    def format(self, text: str, config: FormatConfiguration) -> str:
        final_newline = config.preferences.get("final_newline", True)
        tab_width = config.preferences.get("tab_width")

        if not isinstance(final_newline, bool):
            raise ConfigurationError(f"final_newline must be a bool, got {final_newline!r}")
        if tab_width is not None and (
            isinstance(tab_width, bool) or not isinstance(tab_width, int) or tab_width < 1
        ):
            raise ConfigurationError(f"tab_width must be a positive int, got {tab_width!r}")

        lines = [_format_line(line, tab_width) for line in text.split("\n")]
        result = "\n".join(lines)

        if final_newline:
            result = result.rstrip("\n")
            if result:
                result += "\n"

        return result


def _format_line(line: str, tab_width: int | None) -> str:
    line = line.rstrip()
    if tab_width is None:
        return line
    body = line.lstrip(" \t")
    indent = line[: len(line) - len(body)]
    return indent.expandtabs(tab_width) + body
