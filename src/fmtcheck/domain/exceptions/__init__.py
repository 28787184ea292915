"""Domain exceptions."""

from fmtcheck.domain.exceptions.base import FmtCheckError
from fmtcheck.domain.exceptions.configuration import ConfigurationError
from fmtcheck.domain.exceptions.filesystem import DiscoveryError, ReadError, WriteError
from fmtcheck.domain.exceptions.parsing import ParseFailure
from fmtcheck.domain.exceptions.strict import StrictCheckError

__all__ = [
    "FmtCheckError",
    "ConfigurationError",
    "DiscoveryError",
    "ReadError",
    "ParseFailure",
    "StrictCheckError",
    "WriteError",
]
