"""Lockfile parsing into a ``ConnectionDescriptor``."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from lcu_connector.discovery.locator import PathLocator
from lcu_connector.shared.exceptions import LockfileParseError, LockfileReadError, UnrepresentablePathError
from lcu_connector.shared.models import U32_MAX, ConnectionDescriptor

logger = logging.getLogger(__name__)

# Protocol constants of the client's local API
LOCKFILE_NAME = "lockfile"
USERNAME = "riot"
ADDRESS = "127.0.0.1"

LOCKFILE_DELIMITER = ":"
LOCKFILE_FIELDS = ("process", "pid", "port", "password", "protocol")

_UNSIGNED_RE = re.compile(r"\+?[0-9]+", re.ASCII)


def parse_lockfile_text(contents: str) -> ConnectionDescriptor:
    """Parse ``process:pid:port:password:protocol`` into a descriptor.

    Segments past the fifth are ignored; the file never escapes colons, so a
    password containing one is cut at that colon.

    Args:
        contents: Lockfile contents; one trailing line break is tolerated.

    Returns:
        A fully populated ``ConnectionDescriptor``.

    Raises:
        LockfileParseError: If fewer than five fields are present, or pid/port
            is not an unsigned 32-bit integer (``field`` names which).
    """
    line = contents.removesuffix("\n").removesuffix("\r")
    pieces = line.split(LOCKFILE_DELIMITER)
    if len(pieces) < len(LOCKFILE_FIELDS):
        raise LockfileParseError(f"expected {len(LOCKFILE_FIELDS)} lockfile fields, got {len(pieces)}")
    if len(pieces) > len(LOCKFILE_FIELDS):
        logger.debug("ignoring %d extra lockfile segment(s)", len(pieces) - len(LOCKFILE_FIELDS))

    process, pid_raw, port_raw, password, protocol = pieces[: len(LOCKFILE_FIELDS)]
    pid = _parse_unsigned(pid_raw, "pid")
    port = _parse_unsigned(port_raw, "port")
    if port == 0:
        raise LockfileParseError("port must be greater than zero", field="port")

    return ConnectionDescriptor.create(
        process=process,
        pid=pid,
        port=port,
        password=password,
        protocol=protocol,
        username=USERNAME,
        address=ADDRESS,
    )


class LockfileParser:
    """Reads the lockfile of the running League client.

    The client rewrites its lockfile on every launch; call ``resolve()`` again
    after a restart to get fresh credentials.
    """

    def __init__(self, locator: PathLocator | None = None) -> None:
        self._locator = locator or PathLocator()

    def resolve(self) -> ConnectionDescriptor:
        """Locate the client, then read and parse its lockfile.

        Raises:
            DiscoveryError: Any discovery failure, unchanged.
            UnrepresentablePathError: If the lockfile path is not valid text.
            LockfileReadError: If the lockfile cannot be read.
            LockfileParseError: If the lockfile content is malformed.
        """
        install_dir = self._locator.locate()
        return self.parse_file(Path(install_dir) / LOCKFILE_NAME)

    def parse_file(self, path: str | os.PathLike[str]) -> ConnectionDescriptor:
        """Read and parse a lockfile at a known path.

        Raises:
            UnrepresentablePathError: If the path is not valid text.
            LockfileReadError: If the file is missing or unreadable.
            LockfileParseError: If the content is malformed.
        """
        lockfile = _path_as_text(path)

        try:
            contents = Path(lockfile).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise LockfileReadError(f"unable to read lockfile {lockfile}: {exc}") from exc

        descriptor = parse_lockfile_text(contents)
        logger.info(
            "lockfile parsed: %s pid=%d port=%d",
            descriptor.process,
            descriptor.pid,
            descriptor.port,
        )
        return descriptor


def _path_as_text(path: str | os.PathLike[str]) -> str:
    text = os.fspath(path)
    if not text:
        raise UnrepresentablePathError("lockfile path is empty")
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise UnrepresentablePathError(f"lockfile path is not valid text: {text!r}") from exc
    return text


def _parse_unsigned(raw: str, field: str) -> int:
    if not _UNSIGNED_RE.fullmatch(raw):
        raise LockfileParseError(f"unable to parse {field} as a number: {raw!r}", field=field)
    value = int(raw)
    if value > U32_MAX:
        raise LockfileParseError(f"{field} out of range: {raw!r}", field=field)
    return value
