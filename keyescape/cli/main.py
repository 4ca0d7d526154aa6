"""Command line interface for keyescape."""

from enum import Enum
import logging
from typing import Annotated

import typer

from .. import __version__ as version_string
from .utils.logger import setup_cli_logging


class OutputFormat(str, Enum):
    """Output format for the command line interface."""

    TEXT = "text"
    CSV = "csv"
    TSV = "tsv"
    JSON = "json"


class CliState:
    """State for the command line interface."""

    def __init__(self) -> None:
        """Initialize the CLI state with default values."""
        self.compatibility_mode: bool = True
        self.escape_ws: bool = False
        self.format: OutputFormat = OutputFormat.TEXT
        self.key_suffix: str = ""
        self.quiet: bool = False


# Get logger
logger = logging.getLogger(__name__)

# state container instance
state: CliState = CliState()

#########################
#### Global Commands ####
#########################

# Define the Typer app
app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    pretty_exceptions_show_locals=False,  # keys may hold user data
)


def entrypoint() -> None:
    """Entry point for the CLI application.

    Exceptions are caught and logged, with behavior depending on the log level.
    If the log level is DEBUG, the exception is raised to show the traceback.
    SystemExit() is a sibling of Exception and is not caught here, allowing it to propagate normally.
    """
    try:
        app()
    except Exception as ex:
        # Log the exception as critical since the application will not continue
        logger.critical(str(ex))

        # If the log level is DEBUG, raise the exception to show the traceback
        if logger.getEffectiveLevel() <= logging.DEBUG:
            raise

        # Otherwise, exit with an error code
        raise SystemExit(1) from ex


@app.callback(invoke_without_command=True)
def global_options(
    escape_ws: Annotated[
        bool,
        typer.Option(
            "--escape-ws",
            help="Escape newline, tab, etc. in CSV and TSV output values",
            rich_help_panel="Global Options",
        ),
    ] = state.escape_ws,
    format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format",
            rich_help_panel="Global Options",
            show_default=True,
            case_sensitive=False,
        ),
    ] = state.format,
    key_suffix: Annotated[
        str,
        typer.Option(
            "--suffix",
            envvar="KEYESCAPE_KEY_SUFFIX",
            help="Suffix appended to every escaped key before truncation",
            rich_help_panel="Global Options",
        ),
    ] = state.key_suffix,
    no_truncate: Annotated[
        bool,
        typer.Option(
            "--no-truncate",
            help="Keep ids longer than 255 characters instead of truncating them",
            rich_help_panel="Global Options",
        ),
    ] = not state.compatibility_mode,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress all stderr output except critical/fatal failures",
            rich_help_panel="Global Options",
        ),
    ] = state.quiet,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            count=True,
            show_default=False,
            metavar="",
            help="Increase stderr output verbosity (can be repeated for higher levels)",
            rich_help_panel="Global Options",
        ),
    ] = 0,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit",
            rich_help_panel="Global Options",
        ),
    ] = False,
) -> None:
    """keyescape - Convert keys into document ids safe for the storage backend."""
    global state
    state.compatibility_mode = not no_truncate
    state.escape_ws = escape_ws
    state.format = format
    state.key_suffix = key_suffix
    state.quiet = quiet

    # Determine log level with precedence:
    # 1. quiet flag
    # 2. verbose count
    # 3. env var KEYESCAPE_LOG_LEVEL
    # 4. default level (ERROR)
    if quiet:
        log_level: int | None = logging.CRITICAL
    else:
        log_level = {
            0: None,  # env var or default
            1: logging.WARNING,  # -v
            2: logging.INFO,  # -vv
            3: logging.DEBUG,  # -vvv
        }.get(min(verbose, 3), None)

    setup_cli_logging(log_level=log_level)

    if version:
        typer.echo(f"keyescape {version_string}")
        # quick exit with no error
        raise typer.Exit()
