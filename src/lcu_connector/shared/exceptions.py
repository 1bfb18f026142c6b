"""Hierarchical exception types for the League client connector."""

from __future__ import annotations


class LcuConnectorError(Exception):
    """Base exception for all connector errors."""


# ── Discovery ──────────────────────────────────────────────────


class DiscoveryError(LcuConnectorError):
    """Installation directory could not be discovered."""


class UnsupportedPlatformError(DiscoveryError):
    """Host OS has no process source."""


class ProcessSpawnError(DiscoveryError):
    """Process listing command could not start or exited abnormally."""


class MissingOutputError(DiscoveryError):
    """Process listing command returned no readable stdout handle."""


class OutputDecodeError(DiscoveryError):
    """Process listing output is not valid UTF-8."""


class InstallPathNotFoundError(DiscoveryError):
    """No ``--install-directory`` argument in the process listing."""


# ── Lockfile ───────────────────────────────────────────────────


class LockfileError(LcuConnectorError):
    """Lockfile could not be turned into a connection descriptor."""


class UnrepresentablePathError(LockfileError):
    """Lockfile path cannot be expressed as text."""


class LockfileReadError(LockfileError):
    """Lockfile is missing, unreadable or not valid text."""


class LockfileParseError(LockfileError):
    """Lockfile content does not have the expected fields."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field
