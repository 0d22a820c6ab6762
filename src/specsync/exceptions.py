"""Exception hierarchy for specsync.

All exceptions inherit from :class:`SpecsyncError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`specsync.exit_codes`.
The top-level error handler in :func:`specsync.app.main` catches
``SpecsyncError`` and exits with the appropriate code.

Subclass hierarchy::

    SpecsyncError (exit 1)
    +-- ExampleTableError  (exit 1)
    +-- ConfigError        (exit 2)
    +-- FetchError         (exit 3)
    +-- ParseError         (exit 4)
    +-- WriteError         (exit 5)
    +-- OutOfDateError     (exit 6)
"""

from specsync.exit_codes import (
    EXIT_FETCH_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_OUT_OF_DATE,
    EXIT_PARSE_ERROR,
    EXIT_WRITE_ERROR,
)


class SpecsyncError(Exception):
    """Base exception for all specsync errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`specsync.exit_codes`. The entry point catches
    this exception type and calls ``sys.exit(exc.exit_code)``.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ExampleTableError(SpecsyncError):
    """Raised when the embedded code sample table is malformed (e.g. a duplicate key)."""

    exit_code = EXIT_GENERIC_FAILURE


class ConfigError(SpecsyncError):
    """Raised for invalid settings (bad URL, empty output path)."""

    exit_code = EXIT_INVALID_USAGE


class FetchError(SpecsyncError):
    """Raised on transport failures (DNS, connection refused, timeout) or a non-2xx response."""

    exit_code = EXIT_FETCH_ERROR


class ParseError(SpecsyncError):
    """Raised when the response body is not a JSON/YAML object."""

    exit_code = EXIT_PARSE_ERROR


class WriteError(SpecsyncError):
    """Raised when the destination cannot be written (permissions, missing directory, disk full)."""

    exit_code = EXIT_WRITE_ERROR


class OutOfDateError(SpecsyncError):
    """Raised by ``--check`` when the file on disk differs from the merged document."""

    exit_code = EXIT_OUT_OF_DATE
