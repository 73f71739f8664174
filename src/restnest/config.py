"""Configuration resolution for the bundled HTTP transport.

The resource node engine never reads configuration; this module only
builds the :class:`~restnest.models.TransportConfig` handed to
:class:`~restnest.transport.http.HttpTransport` and the root path handed
to :func:`~restnest.init`.

* **Project config** -- an optional ``restnest.json`` in the working
  directory (or an explicit file) holding any
  :class:`~restnest.models.TransportConfig` field. See
  :func:`load_project_config`.
* **Environment** -- ``RESTNEST_BASE_URL``, ``RESTNEST_ROOT_PATH`` and
  ``RESTNEST_TIMEOUT``.
* **Precedence resolution** -- :func:`resolve_config` merges explicit
  arguments, environment variables, the project file and defaults.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from restnest.exceptions import ConfigError
from restnest.models import TransportConfig

_PROJECT_CONFIG_FILENAME = "restnest.json"

ENV_BASE_URL = "RESTNEST_BASE_URL"
ENV_ROOT_PATH = "RESTNEST_ROOT_PATH"
ENV_TIMEOUT = "RESTNEST_TIMEOUT"


# --- Project-local config ---


def load_project_config(path: Union[str, Path, None] = None) -> Optional[dict[str, Any]]:
    """Load project-local configuration.

    Args:
        path: Explicit config file. Defaults to ``./restnest.json``.

    Returns:
        The parsed JSON object, or ``None`` if the default file does not
        exist.

    Raises:
        ConfigError: If the file contains invalid JSON or is not a JSON
            object, or if an explicitly given *path* does not exist.
    """
    explicit = path is not None
    config_path = Path(path).expanduser() if explicit else Path.cwd() / _PROJECT_CONFIG_FILENAME

    if not config_path.is_file():
        if explicit:
            raise ConfigError(f"Config file not found: {config_path}")
        return None

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid project config at {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Project config at {config_path} must be a JSON object")
    return data


# --- Precedence resolution ---


def resolve_config(
    base_url: Optional[str] = None,
    root_path: Optional[str] = None,
    config_file: Union[str, Path, None] = None,
) -> TransportConfig:
    """Resolve the transport config with full precedence chain.

    Precedence (high to low):
        1. Explicit arguments (``base_url``, ``root_path``)
        2. Environment variables (``RESTNEST_BASE_URL``,
           ``RESTNEST_ROOT_PATH``, ``RESTNEST_TIMEOUT``)
        3. Project config (``./restnest.json`` or *config_file*)
        4. Defaults

    Raises:
        ConfigError: If the merged values fail validation.
    """
    # 4 + 3. Defaults, then the project file
    values: dict[str, Any] = dict(load_project_config(config_file) or {})

    # 2. Environment variables
    env_base_url = os.environ.get(ENV_BASE_URL)
    if env_base_url:
        values["base_url"] = env_base_url
    env_root_path = os.environ.get(ENV_ROOT_PATH)
    if env_root_path:
        values["root_path"] = env_root_path
    env_timeout = os.environ.get(ENV_TIMEOUT)
    if env_timeout:
        values["timeout"] = env_timeout

    # 1. Explicit arguments (highest precedence)
    if base_url is not None:
        values["base_url"] = base_url
    if root_path is not None:
        values["root_path"] = root_path

    try:
        return TransportConfig.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
