"""Settings resolution for a sync run.

specsync has no configuration file: the defaults declared on
:class:`~specsync.models.SyncConfig` describe the production setup, and
two environment variables plus matching CLI flags exist for pointing a
run at a staging server or a scratch output file.

Precedence (high to low):
    1. CLI flags (``--url``, ``--output``)
    2. Environment variables (``SPECSYNC_URL``, ``SPECSYNC_OUTPUT``)
    3. Defaults
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from specsync.exceptions import ConfigError
from specsync.models import SyncConfig

ENV_URL = "SPECSYNC_URL"
ENV_OUTPUT = "SPECSYNC_OUTPUT"


def resolve_config(
    cli_url: Optional[str] = None,
    cli_output: Optional[str] = None,
) -> SyncConfig:
    """Resolve the effective :class:`~specsync.models.SyncConfig`.

    Args:
        cli_url: ``--url`` flag value, if given.
        cli_output: ``--output`` flag value, if given.

    Returns:
        The validated settings.

    Raises:
        ConfigError: If a resolved value fails validation.
    """
    overrides: dict[str, Any] = {}

    # 2. Environment variables
    env_url = os.environ.get(ENV_URL)
    if env_url:
        overrides["url"] = env_url
    env_output = os.environ.get(ENV_OUTPUT)
    if env_output:
        overrides["output"] = Path(env_output)

    # 1. CLI flags (highest precedence)
    if cli_url is not None:
        overrides["url"] = cli_url
    if cli_output is not None:
        overrides["output"] = Path(cli_output)

    try:
        return SyncConfig.model_validate(overrides)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise ConfigError(f"Invalid configuration: {details}") from exc
