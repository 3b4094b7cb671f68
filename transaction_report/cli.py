"""CLI for the ``transaction_report`` package.

Usage::

    transaction-report path/to/transactions.csv [--format text|json] [--log-level LEVEL]

The command validates its single positional argument (present, existing file,
``.csv`` extension), loads a local ``.env`` with ``python-dotenv``, configures
logging, and prints the report to stdout. Skipped-row warnings go to stderr
through the package logger. Exit status is ``0`` on success (including "no
valid transactions") and ``1`` on any argument, configuration, or read error.
"""

from __future__ import annotations

import sys
from os import PathLike
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from typer.models import ArgumentInfo

from .api import report_from_csv
from .config import ReaderConfig
from .errors import ArgumentError, ReadError
from .logging_setup import configure_logging
from .report import OutputFormat

USAGE = "Usage: transaction-report path/to/file.csv"


def _print_error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


def validate_csv_path(value: str | PathLike[str] | None) -> Path:
    """Check the positional argument and return it as a ``Path``.

    Raises :class:`ArgumentError` when no path was given, the path does not
    exist or is not a regular file, or its extension is not ``.csv``
    (case-insensitive).
    """

    if value is None or str(value).strip() == "":
        raise ArgumentError("You must provide the path to a CSV file")
    p = Path(value)
    if not p.exists():
        raise ArgumentError(f"File {p} does not exist")
    if not p.is_file():
        raise ArgumentError(f"{p} is not a file")
    if p.suffix.lower() != ".csv":
        raise ArgumentError("The file must have a .csv extension")
    return p


def cmd_report(
    csv_path: str | PathLike[str] | None,
    *,
    output_format: OutputFormat = OutputFormat.TEXT,
    log_level: str | None = None,
) -> int:
    """Print the transaction report for ``csv_path`` and return an exit status."""

    # Existing environment wins over .env values.
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    try:
        configure_logging(log_level)
    except ValueError as e:
        _print_error(str(e))
        return 1

    try:
        path = validate_csv_path(csv_path)
    except ArgumentError as e:
        _print_error(str(e))
        if csv_path is None:
            print(USAGE, file=sys.stderr)
        return 1

    try:
        config = ReaderConfig.from_env()
    except ValueError as e:
        _print_error(f"Invalid configuration: {e}")
        return 1

    try:
        text = report_from_csv(path, config=config, output_format=output_format)
    except ReadError as e:
        _print_error(f"Failed to process the file: {e}")
        return 1
    except Exception as e:  # noqa: BLE001
        _print_error(f"Unexpected failure processing '{path}': {e}")
        return 1

    print(text)
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    add_completion=False,
    help=(
        "Summarize a CSV of bank transactions: final balance, largest "
        "transaction, and per-type counts and totals."
    ),
)

# Module-level argument object to satisfy ruff B008 (no calls in parameter
# defaults). Optional so a missing path is reported as exit status 1.
CSV_PATH_ARGUMENT: ArgumentInfo = typer.Argument(
    help="Path to the CSV file (columns: id, tipo, monto).",
    show_default=False,
)


@app.command()
def report(
    csv_path: Annotated[Path | None, CSV_PATH_ARGUMENT] = None,
    *,
    output_format: OutputFormat = typer.Option(
        OutputFormat.TEXT, "--format", "-f", case_sensitive=False, help="Report format."
    ),
    log_level: str | None = typer.Option(
        None,
        help="Log level (DEBUG, INFO, WARNING, ...). Falls back to TRANSACTION_REPORT_LOG_LEVEL.",
    ),
) -> None:
    """Print the transaction report for CSV_PATH."""

    raise typer.Exit(cmd_report(csv_path, output_format=output_format, log_level=log_level))


if __name__ == "__main__":  # pragma: no cover - exercised via console script
    app()
