"""Shared test fixtures for specsync.

Provides reusable fixtures for building OpenAPI documents, faking HTTP
responses, isolating the environment, and running the CLI. These fixtures
are automatically discovered by pytest and available to all test modules
without explicit imports.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Iterator

import httpx
import pytest

from specsync.output import OutputManager, reset_output, set_output


SPEC_URL = "https://api.example.com/api/openapi.json"


# ---------------------------------------------------------------------------
# Auto-reset global state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> Iterator[None]:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time. When CliRunner or capsys redirects those streams and the
    test finishes, the cached references become stale. Resetting forces a
    fresh manager to be created on next use.
    """
    yield
    reset_output()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear SPECSYNC_* variables and force plain (uncoloured) diagnostics."""
    for var in ["SPECSYNC_URL", "SPECSYNC_OUTPUT"]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("NO_COLOR", "1")


# ---------------------------------------------------------------------------
# Document fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def emitkit_spec() -> dict[str, Any]:
    """A trimmed copy of the production document with both sampled operations."""
    return {
        "openapi": "3.1.0",
        "info": {"title": "EmitKit API", "version": "1.0.0"},
        "servers": [{"url": "https://api.emitkit.com"}],
        "paths": {
            "/v1/events": {
                "post": {
                    "operationId": "createEvent",
                    "summary": "Create an event",
                    "tags": ["Events"],
                    "responses": {"201": {"description": "Created"}},
                },
            },
            "/v1/identify": {
                "post": {
                    "operationId": "identifyUser",
                    "summary": "Identify a user",
                    "tags": ["Users"],
                    "responses": {"200": {"description": "OK"}},
                },
            },
            "/v1/channels": {
                "get": {
                    "operationId": "listChannels",
                    "summary": "List channels",
                    "responses": {"200": {"description": "OK"}},
                },
            },
        },
        "components": {"schemas": {}},
    }


# ---------------------------------------------------------------------------
# HTTP fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_response() -> Callable[..., httpx.Response]:
    """Factory for real :class:`httpx.Response` objects bound to a request.

    ``raise_for_status`` needs the request attached, so every response is
    created against ``GET SPEC_URL``.
    """

    def _make(
        status_code: int = 200,
        json_body: Any = None,
        text: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        kwargs: dict[str, Any] = {}
        if json_body is not None:
            kwargs["json"] = json_body
        elif text is not None:
            kwargs["text"] = text
        return httpx.Response(
            status_code=status_code,
            headers=headers,
            request=httpx.Request("GET", SPEC_URL),
            **kwargs,
        )

    return _make


# ---------------------------------------------------------------------------
# Filesystem fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def docs_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change into *tmp_path* and create the default ``api-reference/`` directory.

    Returns:
        The ``api-reference`` directory.
    """
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "api-reference"
    target.mkdir()
    return target


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def quiet_output() -> Iterator[OutputManager]:
    """Install a quiet OutputManager for tests that don't care about output."""
    output = OutputManager(no_color=True, quiet=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
