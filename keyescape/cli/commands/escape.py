"""Key commands for the keyescape CLI."""

import sys
from typing import Annotated, Optional

import typer
from typer import Typer

from ...core import describe_key
from ...exceptions import InvalidKeyError
from ...key_info import KeyInfo
from ...utils.logger import get_logger
from ..main import state
from ..utils.formatters import format_records

# Get logger for key commands
logger = get_logger(__name__)

KeysArgument = Annotated[
    Optional[list[str]],
    typer.Argument(
        help="Keys to process. Reads one key per line from stdin when omitted.",
        show_default=False,
    ),
]


def register_escape_commands(app: Typer) -> None:
    """Register key commands with the main app."""
    app.command(name="escape")(escape_keys)
    app.command(name="check")(check_keys)


def _read_keys(keys: list[str] | None) -> list[str]:
    """Return keys from arguments, or non-empty stdin lines when there are none.

    Only newlines separate keys; other line break characters stay part of a key.
    """
    if keys:
        return keys
    logger.info("Reading keys from stdin")
    return [line for line in sys.stdin.read().split("\n") if line]


def _describe_all(keys: list[str], key_suffix: str) -> list[KeyInfo]:
    """Escape every key with the given suffix, exiting on the first invalid one."""
    records = []
    for key in keys:
        try:
            records.append(describe_key(key, key_suffix, state.compatibility_mode))
        except InvalidKeyError as e:
            logger.error(f"Cannot escape key {key!r}: {e}")
            raise typer.Exit(code=1) from e
    logger.debug(f"Escaped {len(records)} keys")
    return records


def escape_keys(keys: KeysArgument = None) -> None:
    """Escape keys into storage-safe document ids."""
    records = _describe_all(_read_keys(keys), state.key_suffix)
    if not records:
        logger.warning("No keys given.")
        raise typer.Exit(code=1)

    for record in records:
        if record.was_truncated:
            logger.info(f"Truncated key {record.key[:32]!r}... to {record.length} characters")

    typer.echo(format_records(records, state.format, state.escape_ws))


def check_keys(keys: KeysArgument = None) -> None:
    """Check keys are already storage-safe, ignoring --suffix; list those that are not."""
    records = _describe_all(_read_keys(keys), key_suffix="")
    if not records:
        logger.warning("No keys given.")
        raise typer.Exit(code=1)

    unsafe = [record for record in records if not record.is_safe]
    if not unsafe:
        logger.info(f"All {len(records)} keys are storage-safe.")
        raise typer.Exit(code=0)

    logger.info(f"{len(unsafe)} of {len(records)} keys need escaping.")
    typer.echo(format_records(unsafe, state.format, state.escape_ws))
    raise typer.Exit(code=1)
