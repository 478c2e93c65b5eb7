"""ircformat exceptions.

Parsing and rendering never raise; these cover config files, env overrides
and the output-format choice.
"""

from __future__ import annotations

from pathlib import Path


class IrcFormatError(Exception):
    """Base for ircformat errors. ``code`` is a stable machine-readable tag."""

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: dict[str, object] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = dict(details or {})

    def __str__(self) -> str:
        message = super().__str__()
        return f"{message} [{self.code}]" if self.code else message


class IrcFormatConfigurationError(IrcFormatError):
    """A config value (file or env) is unusable.

    When the value came from a file, ``path`` is set and also recorded in
    ``details["path"]``.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: dict[str, object] | None = None,
        path: str | Path | None = None,
    ) -> None:
        super().__init__(message, code=code, details=details)
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            self.details["path"] = str(self.path)
