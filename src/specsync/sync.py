"""The fetch -> merge -> write pipeline.

:func:`run_sync` is the single operation behind the ``specsync`` command.
Each stage either succeeds or raises a
:class:`~specsync.exceptions.SpecsyncError` subclass, so a failed fetch
always stops the run before the destination file is touched.
"""

from __future__ import annotations

from pathlib import Path

from specsync.exceptions import OutOfDateError
from specsync.fetcher import fetch_document
from specsync.merger import apply_code_samples
from specsync.models import SyncConfig, SyncResult, SyncStatus
from specsync.output import debug, print_document
from specsync.samples import SDK_EXAMPLES, ExampleTable
from specsync.writer import render_document, write_document


def run_sync(
    config: SyncConfig,
    *,
    table: ExampleTable = SDK_EXAMPLES,
    dry_run: bool = False,
    check: bool = False,
) -> SyncResult:
    """Fetch the published spec, merge the code samples, and persist it.

    Args:
        config: Resolved run settings.
        table: Code sample table to merge.
        dry_run: Print the merged document to stdout instead of writing it.
        check: Compare the merged document with the file on disk instead of
            writing it.

    Returns:
        A :class:`~specsync.models.SyncResult` describing the run.

    Raises:
        FetchError: If the document cannot be retrieved.
        ParseError: If the document is not a JSON/YAML object.
        WriteError: If the destination cannot be written.
        OutOfDateError: In check mode, if the file on disk is stale.
    """
    document = fetch_document(config.url, timeout=config.timeout)
    enriched = apply_code_samples(document, table, config.samples_field)
    debug(f"Enriched {len(enriched)} operation(s)")

    result = SyncResult(
        status=SyncStatus.WRITTEN,
        output=config.output,
        enriched=enriched,
        document=document,
    )

    if check:
        _check_up_to_date(document, config.output)
        result.status = SyncStatus.UP_TO_DATE
    elif dry_run:
        print_document(render_document(document))
        result.status = SyncStatus.PRINTED
    else:
        write_document(document, config.output)

    return result


def _check_up_to_date(document: dict, output: Path) -> None:
    """Raise :class:`OutOfDateError` unless *output* already holds *document*."""
    expected = render_document(document)
    try:
        current = output.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise OutOfDateError(f"{output} does not exist; run specsync to create it") from None
    except OSError as exc:
        raise OutOfDateError(f"Cannot read {output}: {exc}") from exc

    if current != expected:
        raise OutOfDateError(f"{output} is out of date; run specsync to update it")
