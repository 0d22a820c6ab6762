"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~specsync.exceptions.SpecsyncError` subclass.
CI jobs can inspect the exit code to tell a network outage from a stale
docs tree without parsing stderr.

Example::

    $ specsync --check
    $ echo $?
    6   # EXIT_OUT_OF_DATE -- the committed document differs from production
"""

EXIT_SUCCESS = 0
"""The sync completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments or configuration."""

EXIT_FETCH_ERROR = 3
"""The remote document could not be retrieved (transport failure or non-2xx status)."""

EXIT_PARSE_ERROR = 4
"""The remote document was retrieved but is not a valid JSON/YAML object."""

EXIT_WRITE_ERROR = 5
"""The merged document could not be written to its destination."""

EXIT_OUT_OF_DATE = 6
"""``--check`` found that the file on disk differs from the merged document."""

EXIT_INTERRUPTED = 130
"""The run was cancelled with Ctrl-C."""
