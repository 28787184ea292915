"""Typer-based CLI: format, check, check --strict.

Exit codes:
    0  success (format always, check always, check --strict when clean)
    1  check --strict found files needing attention
    2  fatal error (discovery, read or configuration)
"""

import dataclasses
import logging
from collections.abc import Callable
from enum import StrEnum
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler

from fmtcheck.application.reporters import ConsoleConfig, ConsoleReporter, JsonReporter, PlainTextReporter
from fmtcheck.application.services import FormatPipeline, check, strict_check, write
from fmtcheck.domain.exceptions import FmtCheckError, StrictCheckError
from fmtcheck.domain.model.configuration import FormatConfiguration
from fmtcheck.domain.model.run_result import RunResult
from fmtcheck.domain.ports.reporter import ReporterProtocol
from fmtcheck.infrastructure.adapters import default_registry
from fmtcheck.infrastructure.config_loader import DEFAULT_CONFIG_FILE, load_configuration

logger = logging.getLogger(__name__)

EXIT_STRICT_FAILURE = 1
EXIT_FATAL = 2

app = typer.Typer(
    name="fmtcheck",
    help="Verify and apply source formatting.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


class OutputFormat(StrEnum):
    TEXT = "text"
    RICH = "rich"
    JSON = "json"


RootsArg = Annotated[
    list[Path] | None,
    typer.Argument(help="Root directories to scan. Default: config roots, else current directory.", show_default=False),
]
IncludeOpt = Annotated[
    list[str] | None,
    typer.Option("--include", "-i", help="Glob a file must match (repeatable). Default: formatter's sources."),
]
ExcludeOpt = Annotated[
    list[str] | None,
    typer.Option("--exclude", "-e", help="Glob that drops a file (repeatable)."),
]
FormatterOpt = Annotated[str | None, typer.Option("--formatter", help="Formatter name (black, whitespace, ...).")]
LanguageVersionOpt = Annotated[
    str | None, typer.Option("--language-version", help="Language version hint passed to the formatter.")
]
ConfigOpt = Annotated[
    Path | None, typer.Option("--config", help=f"Config file with [tool.fmtcheck]. Default: ./{DEFAULT_CONFIG_FILE}.")
]
JobsOpt = Annotated[int, typer.Option("--jobs", "-j", min=1, help="Files formatted in parallel.")]
OutputOpt = Annotated[OutputFormat, typer.Option("--output", "-o", help="Report format.")]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Log progress to stderr.")]


@dataclasses.dataclass(frozen=True, slots=True)
class _Session:
    pipeline: FormatPipeline
    roots: tuple[Path, ...]
    config: FormatConfiguration


@app.command("format")
def format_command(
    roots: RootsArg = None,
    include: IncludeOpt = None,
    exclude: ExcludeOpt = None,
    formatter: FormatterOpt = None,
    language_version: LanguageVersionOpt = None,
    config_file: ConfigOpt = None,
    jobs: JobsOpt = 1,
    output: OutputOpt = OutputFormat.TEXT,
    verbose: VerboseOpt = False,
) -> None:
    """Format all source files, rewriting those that change."""
    _configure_logging(verbose)
    try:
        session = _open_session(roots, include, exclude, formatter, language_version, config_file, jobs)
        reporter = _make_reporter(output, applied=True, show_diff=False)
        write(session.pipeline, session.roots, session.config, emit=_emitter(reporter))
    except FmtCheckError as e:
        _fail(e)


@app.command("check")
def check_command(
    roots: RootsArg = None,
    strict: Annotated[bool, typer.Option("--strict", help="Exit 1 when any file needs attention.")] = False,
    diff: Annotated[bool, typer.Option("--diff", help="Show a unified diff per changed file (text output).")] = False,
    include: IncludeOpt = None,
    exclude: ExcludeOpt = None,
    formatter: FormatterOpt = None,
    language_version: LanguageVersionOpt = None,
    config_file: ConfigOpt = None,
    jobs: JobsOpt = 1,
    output: OutputOpt = OutputFormat.TEXT,
    verbose: VerboseOpt = False,
) -> None:
    """Report misformatted files without writing them."""
    _configure_logging(verbose)
    try:
        session = _open_session(roots, include, exclude, formatter, language_version, config_file, jobs)
        reporter = _make_reporter(output, applied=False, show_diff=diff)
        run = strict_check if strict else check
        run(session.pipeline, session.roots, session.config, emit=_emitter(reporter))
    except StrictCheckError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(EXIT_STRICT_FAILURE) from e
    except FmtCheckError as e:
        _fail(e)


def _open_session(
    roots: list[Path] | None,
    include: list[str] | None,
    exclude: list[str] | None,
    formatter: str | None,
    language_version: str | None,
    config_file: Path | None,
    jobs: int,
) -> _Session:
    """Load config file, apply CLI overrides, resolve formatter.

    Raises:
        ConfigurationError: Bad config file or unknown formatter
    """
    if config_file is not None:
        loaded = load_configuration(config_file, required=True)
    else:
        loaded = load_configuration(Path(DEFAULT_CONFIG_FILE))

    overrides: dict[str, object] = {}
    if include:
        overrides["include"] = tuple(include)
    if exclude:
        overrides["exclude"] = tuple(exclude)
    if formatter:
        overrides["formatter"] = formatter
    if language_version:
        overrides["language_version"] = language_version
    config = dataclasses.replace(loaded.config, **overrides)

    chosen_roots = tuple(roots) if roots else loaded.roots or (Path("."),)
    registry = default_registry()
    pipeline = FormatPipeline(registry.get(config.formatter), max_workers=jobs)

    logger.debug("Formatter %s, roots %s", config.formatter, ", ".join(map(str, chosen_roots)))
    return _Session(pipeline=pipeline, roots=chosen_roots, config=config)


def _make_reporter(output: OutputFormat, *, applied: bool, show_diff: bool) -> ReporterProtocol:
    match output:
        case OutputFormat.JSON:
            return JsonReporter(applied=applied)
        case OutputFormat.RICH:
            return ConsoleReporter(ConsoleConfig(color=Console().is_terminal), applied=applied)
        case _:
            return PlainTextReporter(applied=applied, show_diff=show_diff)


def _emitter(reporter: ReporterProtocol) -> Callable[[RunResult], None]:
    def _emit(result: RunResult) -> None:
        text = reporter.report(result)
        if text:
            typer.echo(text, nl=not text.endswith("\n"))

    return _emit


def _fail(error: FmtCheckError) -> NoReturn:
    typer.echo(f"error: {error}", err=True)
    raise typer.Exit(EXIT_FATAL) from error


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_time=False, show_path=False)],
        force=True,
    )


def main() -> None:
    app()
