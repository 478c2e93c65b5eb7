"""Config schema and accessor."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from loguru import logger

from ircformat.core.errors import IrcFormatConfigurationError

OUTPUT_FORMATS = ("html", "irc", "text")

BOOL_KEYS = ("inline", "compress", "strip_colors", "strip_styles", "escape_html")
KNOWN_KEYS = ("output_format", *BOOL_KEYS)

# Env keys that override config (loaded once per reload)
_ENV_OVERRIDE_KEYS = (
    "IRCFORMAT_OUTPUT_FORMAT",
    "IRCFORMAT_ESCAPE_HTML",
    "IRCFORMAT_INLINE",
)


def _load_env_overrides() -> dict[str, str]:
    return {k: os.environ.get(k, "") for k in _ENV_OVERRIDE_KEYS}


def _parse_bool_env(val: str) -> bool | None:
    """Parse env string to bool; None if not a recognized bool."""
    v = val.lower()
    if v in ("1", "true", "yes"):
        return True
    if v in ("0", "false", "no"):
        return False
    return None


def validate_settings(data: dict[str, Any], *, path: str | Path | None = None) -> None:
    """Check file-level values; raise IrcFormatConfigurationError on the first bad one."""
    fmt = data.get("output_format")
    if fmt is not None and str(fmt).lower() not in OUTPUT_FORMATS:
        raise IrcFormatConfigurationError(
            f"output_format must be one of {', '.join(OUTPUT_FORMATS)}",
            code="invalid_output_format",
            details={"value": fmt},
            path=path,
        )
    for key in BOOL_KEYS:
        val = data.get(key)
        if val is not None and not isinstance(val, bool):
            raise IrcFormatConfigurationError(
                f"{key} must be a boolean",
                code="invalid_bool",
                details={"key": key, "type": type(val).__name__},
                path=path,
            )


class Config:
    """Config accessor with attribute-style access for nested keys."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data = data or {}
        self._env: dict[str, str] = _load_env_overrides()

    def reload(self, data: dict[str, Any], *, validate: bool = True) -> None:
        """Replace config data and re-read env overrides."""
        self._data = data or {}
        self._env = _load_env_overrides()
        if validate:
            self._validate()
        logger.debug("Config reloaded: output_format={}", self.output_format)

    def _validate(self) -> None:
        """Raise IrcFormatConfigurationError on unusable values."""
        validate_settings(self._data)
        if self.output_format not in OUTPUT_FORMATS:
            raise IrcFormatConfigurationError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}",
                code="invalid_output_format",
                details={"value": self.output_format, "key": "IRCFORMAT_OUTPUT_FORMAT"},
            )
        for key in ("IRCFORMAT_ESCAPE_HTML", "IRCFORMAT_INLINE"):
            val = self._env.get(key, "")
            if val and _parse_bool_env(val) is None:
                raise IrcFormatConfigurationError(
                    f"{key} must be a boolean",
                    code="invalid_bool_env",
                    details={"key": key, "value": val},
                )

    @property
    def raw(self) -> dict[str, Any]:
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Get value by dot-separated path."""
        parts = key.split(".")
        obj: Any = self._data
        for part in parts:
            if isinstance(obj, dict) and part in obj:
                obj = obj[part]
            else:
                return default
        return obj

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __contains__(self, key: str) -> bool:
        return key in self._data

    @property
    def output_format(self) -> str:
        env_val = self._env.get("IRCFORMAT_OUTPUT_FORMAT", "")
        if env_val:
            return env_val.lower()
        return str(self._data.get("output_format", "html")).lower()

    @property
    def inline(self) -> bool:
        parsed = _parse_bool_env(self._env.get("IRCFORMAT_INLINE", ""))
        if parsed is not None:
            return parsed
        return bool(self._data.get("inline", False))

    @property
    def compress(self) -> bool:
        return bool(self._data.get("compress", True))

    @property
    def strip_colors(self) -> bool:
        return bool(self._data.get("strip_colors", False))

    @property
    def strip_styles(self) -> bool:
        return bool(self._data.get("strip_styles", False))

    @property
    def escape_html(self) -> bool:
        parsed = _parse_bool_env(self._env.get("IRCFORMAT_ESCAPE_HTML", ""))
        if parsed is not None:
            return parsed
        return bool(self._data.get("escape_html", False))


# Global config instance (set by __main__)
cfg: Config = Config({})
