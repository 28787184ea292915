"""Parse failure raised by formatters."""

from fmtcheck.domain.exceptions.base import FmtCheckError


class ParseFailure(FmtCheckError):
    """Formatter could not parse the source text.

    Raised by FormatterPort implementations. The pipeline turns it into
    a PARSE_ERROR outcome, it never aborts a run.

    Attributes:
        reason: Formatter's message (must not be empty)
    """

    def __init__(self, reason: str) -> None:
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.reason = reason
        super().__init__(reason)
