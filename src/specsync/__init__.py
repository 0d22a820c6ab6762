"""specsync -- Keep a local OpenAPI document in sync with production.

This package fetches the published OpenAPI specification, injects curated
SDK usage examples (the ``x-codeSamples`` vendor extension) into selected
operations, and writes the merged document to the docs tree so that the
API reference renders per-language snippets.

Typical workflow::

    specsync                  # fetch, merge, write api-reference/openapi.json
    specsync --check          # fail if the committed file is stale

Modules:
    app: Typer application and console-script entry point.
    sync: The fetch -> merge -> write pipeline.
    fetcher: HTTP retrieval and parsing of the remote document.
    merger: Injection of code samples into operations.
    writer: Atomic, pretty-printed JSON persistence.
    samples: The embedded, immutable code sample table.
    models: Pydantic models shared across the package.
    config: Precedence resolution for the sync settings.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric process exit codes.
    output: stdout/stderr formatting with Rich support.
"""

__version__ = "0.1.0"
