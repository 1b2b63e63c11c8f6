"""Domain exception hierarchy.

Each exception maps to a specific process exit code at the interface layer.
Inner layers raise these; the outermost error-handler translates them.
"""

from __future__ import annotations


class NerfError(Exception):
    """Base exception for the entire application."""


# ── Configuration ───────────────────────────────────────────────────────────


class ConfigError(NerfError):
    """The runtime configuration is unusable."""


class ConfigMissingError(ConfigError):
    """A required environment variable is not set."""


class ConfigInvalidError(ConfigError):
    """A configuration value is present but cannot be parsed or is out of range."""


# ── Prompt template ─────────────────────────────────────────────────────────


class PromptFileError(NerfError):
    """The prompt template file could not be read."""


# ── Completion endpoint errors ──────────────────────────────────────────────


class NetworkError(NerfError):
    """The request never produced an HTTP response."""


class ApiError(NerfError):
    """The endpoint answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(NerfError):
    """The response body is not JSON or lacks ``choices[0].message.content``."""


# ── Clipboard ───────────────────────────────────────────────────────────────


class ClipboardError(NerfError):
    """The clipboard process could not be started or exited non-zero."""
