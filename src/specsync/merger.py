"""Inject embedded code samples into a raw OpenAPI document.

**Merge rule:** for every ``(path, method)`` in the sample table whose
operation exists in ``document["paths"]``, the operation's samples field
(``x-codeSamples`` by default) is set to the table's samples, replacing
whatever was there. Every other key of the operation is left alone.

Paths and operations that the document does not define are skipped
without error; the merger never creates them. Running the merge twice
gives the same document as running it once.
"""

from __future__ import annotations

import logging
from typing import Any

from specsync.models import DEFAULT_SAMPLES_FIELD
from specsync.output import info, success
from specsync.samples import SDK_EXAMPLES, ExampleTable

logger = logging.getLogger(__name__)


def merge_code_samples(
    document: dict[str, Any],
    table: ExampleTable = SDK_EXAMPLES,
    field: str = DEFAULT_SAMPLES_FIELD,
) -> dict[str, Any]:
    """Merge *table* into *document* in place and return *document*.

    Args:
        document: Raw OpenAPI document (mutated in place).
        table: Sample table keyed by path, then lower-case method.
        field: Operation key that receives the samples.

    Returns:
        The same *document* object, for chaining.
    """
    apply_code_samples(document, table, field)
    return document


def apply_code_samples(
    document: dict[str, Any],
    table: ExampleTable = SDK_EXAMPLES,
    field: str = DEFAULT_SAMPLES_FIELD,
) -> list[tuple[str, str]]:
    """Merge *table* into *document* in place and report what changed.

    Each enriched operation gets its own list of fresh dicts, so editing
    the document afterwards never touches the table.

    Args:
        document: Raw OpenAPI document (mutated in place).
        table: Sample table keyed by path, then lower-case method.
        field: Operation key that receives the samples.

    Returns:
        ``(METHOD, path)`` pairs of the operations that received samples,
        in table order.
    """
    info(f"Merging SDK examples into {field}...")

    paths = document.get("paths")
    if not isinstance(paths, dict):
        logger.debug("Document has no 'paths' mapping; nothing to merge")
        return []

    enriched: list[tuple[str, str]] = []

    for path, methods in table.items():
        path_item = paths.get(path)
        if not isinstance(path_item, dict):
            logger.debug("Skipping %s: path not in document", path)
            continue

        for method, samples in methods.items():
            operation = path_item.get(method)
            if not isinstance(operation, dict):
                logger.debug("Skipping %s %s: operation not in document", method.upper(), path)
                continue

            operation[field] = [sample.to_document() for sample in samples]
            enriched.append((method.upper(), path))
            success(f"Added {field} to {method.upper()} {path}")

    return enriched
