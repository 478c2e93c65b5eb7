"""Read ircformat settings from a YAML file, with a .env beside it."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from ircformat.config.schema import KNOWN_KEYS, validate_settings
from ircformat.core.errors import IrcFormatConfigurationError


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and check a settings file.

    A missing file or a document that is not a mapping yields ``{}``.
    Unknown keys are logged and kept. Malformed YAML and bad values raise
    IrcFormatConfigurationError carrying the file path.
    """
    path = Path(path)
    if not path.exists():
        logger.warning("Config file not found: {}", path)
        return {}

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        logger.error("Failed to parse config {}: {}", path, exc)
        raise IrcFormatConfigurationError(
            f"Config file is not valid YAML: {path}",
            code="invalid_yaml",
            path=path,
        ) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning(
            "Config file {} holds a {}, expected a mapping; ignoring it",
            path,
            type(data).__name__,
        )
        return {}

    unknown = sorted(str(k) for k in data if k not in KNOWN_KEYS)
    if unknown:
        logger.warning("Unknown settings in {}: {}", path, ", ".join(unknown))

    validate_settings(data, path=path)
    return data


def load_config_with_env(path: str | Path) -> dict[str, Any]:
    """Load ``.env`` (next to the config file, else the usual search) then the file.

    Values already in the process env are not overwritten.
    """
    from dotenv import load_dotenv

    env_file = Path(path).parent / ".env"
    if env_file.is_file():
        logger.debug("Loading env overrides from {}", env_file)
        load_dotenv(env_file)
    else:
        load_dotenv()
    return load_config(path)
