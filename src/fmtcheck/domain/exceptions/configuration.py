"""Configuration exceptions."""

from fmtcheck.domain.exceptions.base import FmtCheckError


class ConfigurationError(FmtCheckError):
    """Invalid configuration.

    Raised for malformed config files, unknown formatter names and
    preferences the formatter rejects.

    Attributes:
        reason: Why configuration is invalid (must not be empty)
    """

    def __init__(self, reason: str) -> None:
        if not reason:
            raise ValueError("reason must not be empty")

        self.reason = reason
        super().__init__(f"Invalid configuration: {reason}")
