"""Reporters for format run results.

render() and summarize() are the pure core; reporters build on them.
All reporters return str, the caller decides the destination.
"""

from fmtcheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from fmtcheck.application.reporters.json_reporter import JsonReporter
from fmtcheck.application.reporters.plain_text import PlainTextReporter
from fmtcheck.application.reporters.render import render, summarize

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "JsonReporter",
    "PlainTextReporter",
    "render",
    "summarize",
]
