"""Canonical Pydantic models shared across all specsync modules.

The models fall into two groups:

**Sample models** -- the statically defined content injected into the
fetched document: :class:`HTTPMethod` and :class:`CodeSample`.

**Run models** -- settings and outcome of a single sync run:
:class:`SyncConfig` and :class:`SyncResult`.

All models use Pydantic v2. :class:`CodeSample` is frozen so that the
embedded sample table cannot be mutated after import.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_SPEC_URL = "https://api.emitkit.com/api/openapi.json"
DEFAULT_OUTPUT_PATH = Path("api-reference") / "openapi.json"
DEFAULT_SAMPLES_FIELD = "x-codeSamples"
DEFAULT_TIMEOUT = 30.0


# --- Sample Models ---


class HTTPMethod(str, enum.Enum):
    """HTTP methods recognised by OpenAPI 3.x path-item objects.

    Keys of the sample table must be one of these values; anything else
    (``parameters``, ``servers``, ``x-*`` extensions) is not an operation.
    """

    GET = "get"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"
    HEAD = "head"
    OPTIONS = "options"
    TRACE = "trace"


class CodeSample(BaseModel):
    """A single SDK usage snippet attached to an operation.

    Serialised into the OpenAPI document as one item of the
    ``x-codeSamples`` array, the shape read by Redoc and Mintlify::

        {"lang": "bash", "label": "cURL", "source": "curl -X POST ..."}

    Example::

        CodeSample(lang="bash", label="cURL", source="curl https://...")
    """

    model_config = ConfigDict(frozen=True)

    lang: str = Field(description="Syntax-highlighting language, e.g. javascript or bash")
    label: str = Field(description="Tab label shown by the docs renderer")
    source: str = Field(description="Snippet source text")

    def to_document(self) -> dict[str, str]:
        """Return a fresh plain dict suitable for embedding in the document."""
        return self.model_dump()


# --- Run Models ---


class SyncConfig(BaseModel):
    """Effective settings for one sync run.

    Built by :func:`~specsync.config.resolve_config` from CLI flags,
    environment variables, and the defaults declared here.
    """

    url: str = Field(default=DEFAULT_SPEC_URL, description="URL of the published OpenAPI document")
    output: Path = Field(default=DEFAULT_OUTPUT_PATH, description="Destination file for the merged document")
    samples_field: str = Field(
        default=DEFAULT_SAMPLES_FIELD, description="Operation key that receives the samples"
    )
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="HTTP timeout in seconds")

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"must be an absolute http(s) URL, got {value!r}")
        return value

    @field_validator("output")
    @classmethod
    def _check_output(cls, value: Path) -> Path:
        if not str(value).strip() or str(value) == ".":
            raise ValueError("output path must not be empty")
        return value


class SyncStatus(str, enum.Enum):
    """What the pipeline did with the merged document."""

    WRITTEN = "written"
    PRINTED = "printed"
    UP_TO_DATE = "up_to_date"


@dataclass
class SyncResult:
    """Outcome of :func:`~specsync.sync.run_sync`.

    Attributes:
        status: Whether the document was written, printed (dry run), or
            verified as current (check mode).
        output: Destination path the run targeted.
        enriched: ``(METHOD, path)`` pairs that received code samples.
        document: The merged document.
    """

    status: SyncStatus
    output: Path
    enriched: list[tuple[str, str]] = field(default_factory=list)
    document: dict[str, Any] = field(default_factory=dict)
