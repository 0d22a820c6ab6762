"""Fetch the published OpenAPI document over HTTP(S).

This module handles all network I/O of a sync run: a single ``GET`` to the
configured URL, followed by parsing the body into a Python dictionary.
JSON is expected; YAML is accepted when the server labels the response as
such.

Failures are reported with two distinct exceptions so that callers and CI
logs can tell an outage from a broken document:

* :class:`~specsync.exceptions.FetchError` -- DNS, connection, or timeout
  failures, and any non-2xx status.
* :class:`~specsync.exceptions.ParseError` -- the body is empty, malformed,
  or not an object.

There is no retry. A failed fetch ends the run before anything is written.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
import yaml

from specsync.exceptions import FetchError, ParseError
from specsync.models import DEFAULT_TIMEOUT
from specsync.output import debug, info, success


class _DocumentLoader(yaml.SafeLoader):
    """SafeLoader that leaves unquoted dates and timestamps as strings."""


_DocumentLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag != "tag:yaml.org,2002:timestamp"
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _reject_constant(name: str) -> Any:
    raise ParseError(f"Invalid JSON in OpenAPI spec: {name} is not allowed")


def fetch_document(url: str, timeout: float = DEFAULT_TIMEOUT) -> dict[str, Any]:
    """Fetch and parse the OpenAPI document at *url*.

    Args:
        url: Absolute HTTP(S) URL of the document.
        timeout: Request timeout in seconds.

    Returns:
        The parsed document as a dictionary.

    Raises:
        FetchError: If the request fails or the server returns a non-2xx
            status.
        ParseError: If the body cannot be parsed into an object.
    """
    info(f"Fetching OpenAPI spec from: {url}")

    try:
        response = httpx.get(url, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise FetchError(
            f"Failed to fetch OpenAPI spec: HTTP {exc.response.status_code} from {url}"
        ) from exc
    except httpx.RequestError as exc:
        raise FetchError(f"Failed to fetch OpenAPI spec from {url}: {exc}") from exc

    content_type = response.headers.get("content-type", "")
    debug(f"HTTP {response.status_code} ({content_type or 'no content-type'}), {len(response.content)} bytes")

    hint = ""
    if "yaml" in content_type or "yml" in content_type:
        hint = "yaml"

    document = parse_document(response.text, hint=hint)
    success("Fetched OpenAPI spec")
    return document


def parse_document(content: str, hint: str = "") -> dict[str, Any]:
    """Parse a response body as a JSON (or YAML) object.

    JSON is tried first unless *hint* is ``"yaml"``. YAML is only attempted
    when hinted, because a plain-text error page is valid YAML and would
    otherwise parse into a scalar with a confusing message. Unquoted YAML
    dates stay strings. ``NaN`` and ``Infinity`` are rejected, as is any
    other value that has no JSON form.

    Args:
        content: The raw response text.
        hint: Optional format hint (``"yaml"``).

    Returns:
        The parsed dictionary.

    Raises:
        ParseError: If the content is empty, malformed, or not an object.
    """
    if not content.strip():
        raise ParseError("OpenAPI spec response body is empty")

    if hint == "yaml":
        try:
            result = yaml.load(content, Loader=_DocumentLoader)
        except yaml.YAMLError as exc:
            raise ParseError(f"Invalid YAML in OpenAPI spec: {exc}") from exc
    else:
        try:
            result = json.loads(content, parse_constant=_reject_constant)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Invalid JSON in OpenAPI spec: {exc}") from exc

    if not isinstance(result, dict):
        raise ParseError(
            f"OpenAPI spec must be an object (got {type(result).__name__})"
        )

    # YAML can still yield values with no JSON form (.nan, !!binary, !!set).
    try:
        json.dumps(result, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"OpenAPI spec contains a value JSON cannot represent: {exc}") from exc
    return result
