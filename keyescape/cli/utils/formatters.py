"""Output formatting utilities."""

from collections.abc import Sequence
import csv
from io import StringIO
import json
from typing import Any

from ..main import OutputFormat


def escape_whitespace(text: str) -> str:
    r"""Escape whitespace characters in a string.

    Replaces newlines, tabs, carriage returns, form feeds, vertical tabs, and backslashes
    with their `\` escaped representation for use in CSV/TSV values.

    Args:
        text: The input string to escape whitespace characters.

    Returns:
        The input string with whitespace characters escaped.
    """
    replacements = [
        ("\\", "\\\\"),  # Must escape backslashes first
        ("\n", "\\n"),
        ("\r", "\\r"),
        ("\t", "\\t"),
        ("\f", "\\f"),
        ("\v", "\\v"),
    ]

    for char, replacement in replacements:
        text = text.replace(char, replacement)
    return text


def _delimited(records: Sequence[Any], fmt: OutputFormat, escape_ws: bool) -> str:
    """Write records as CSV or TSV with a header row taken from the first record."""
    field_names = list(records[0].to_dict())

    output = StringIO()
    writer = csv.DictWriter(
        f=output,
        fieldnames=field_names,
        extrasaction="ignore",
        dialect="unix" if fmt == OutputFormat.CSV else "excel-tab",
        lineterminator="\n",
    )
    writer.writeheader()

    for record in records:
        row = record.to_dict()
        if escape_ws:
            row = {k: escape_whitespace(v) if isinstance(v, str) else v for k, v in row.items()}
        writer.writerow(row)

    # typer.echo adds the final newline
    return output.getvalue().removesuffix("\n")


def format_records(records: Sequence[Any], fmt: OutputFormat, escape_ws: bool = False) -> str:
    """Format records according to the specified output format.

    Args:
        records: Sequence of record objects with a to_dict method
        fmt: Output format to use
        escape_ws: Whether to escape whitespace in CSV and TSV output

    Returns:
        Formatted string
    """
    if not records:
        return ""

    if fmt == OutputFormat.TEXT:
        return "\n\n".join(str(record) for record in records)
    elif fmt in (OutputFormat.CSV, OutputFormat.TSV):
        return _delimited(records, fmt, escape_ws)
    elif fmt == OutputFormat.JSON:
        return json.dumps([record.to_dict() for record in records], indent=2, sort_keys=True)
    else:
        raise ValueError(f"Unsupported output format: {fmt}")
