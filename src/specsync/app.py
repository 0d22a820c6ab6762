"""Typer application and CLI entry point for specsync.

``specsync`` takes no required arguments: invoked bare it fetches the
production OpenAPI document, merges the embedded SDK code samples, and
writes ``api-reference/openapi.json``. The optional flags exist for
previewing (``--dry-run``), CI drift detection (``--check``), and
pointing a run at another server or file.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs a SIGINT handler and turns unexpected
exceptions into a generic failure exit.

See Also:
    :mod:`specsync.sync`: The pipeline invoked by :func:`sync_command`.
    :mod:`specsync.output`: Output formatting initialised here.
"""

from __future__ import annotations

import signal
import sys
from typing import Any, Optional

import typer

from specsync import __version__
from specsync.exit_codes import EXIT_GENERIC_FAILURE, EXIT_INTERRUPTED


app = typer.Typer(
    name="specsync",
    help="Sync the published OpenAPI spec and merge SDK code samples.",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"specsync {__version__}")
        raise typer.Exit()


@app.command()
def sync_command(
    url: Optional[str] = typer.Option(
        None, "--url", help="OpenAPI document URL (default: production)."
    ),
    output_path: Optional[str] = typer.Option(
        None, "--output", "-o", help="Destination file (default: api-reference/openapi.json)."
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Print the merged spec to stdout instead of writing it."
    ),
    check: bool = typer.Option(
        False, "--check", help="Fail if the destination file is out of date. Never writes."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Fetch the OpenAPI spec, merge SDK code samples, and save it.

    Example::

        specsync
        specsync --check
        specsync --dry-run --url https://staging.example.com/api/openapi.json
    """
    from specsync.config import resolve_config
    from specsync.exceptions import SpecsyncError
    from specsync.models import SyncStatus
    from specsync.output import OutputManager, error, info, set_output, success, warning
    from specsync.sync import run_sync

    set_output(OutputManager(no_color=no_color, quiet=quiet, verbose=verbose))

    if dry_run and check:
        error("--dry-run and --check cannot be used together")
        raise typer.Exit(code=2)

    try:
        config = resolve_config(cli_url=url, cli_output=output_path)
        info("Syncing OpenAPI specification...")
        result = run_sync(config, dry_run=dry_run, check=check)
    except SpecsyncError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    if not result.enriched:
        warning("No operations matched the embedded code samples")

    if result.status == SyncStatus.UP_TO_DATE:
        success(f"{result.output} is up to date")
    elif result.status == SyncStatus.WRITTEN:
        success("OpenAPI sync complete!")


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """CLI entry point invoked by the ``specsync`` console script.

    Known failures are reported by :func:`sync_command` itself and exit
    with their mapped code. Anything else reaching this function is a bug:
    it is reported on stderr with a generic failure exit.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as exc:
        from specsync.output import error

        error(f"Unexpected error: {type(exc).__name__}: {exc}")
        sys.exit(EXIT_GENERIC_FAILURE)
