"""Installation directory discovery from the client's command line."""

from __future__ import annotations

import logging
import re

from lcu_connector.config import Settings
from lcu_connector.discovery.interfaces import ProcessSource
from lcu_connector.discovery.sources import source_for_platform
from lcu_connector.shared.exceptions import InstallPathNotFoundError

logger = logging.getLogger(__name__)

# Directory-shaped value on a single line. A dot only counts when a name
# character follows it (``League of Legends.app``), so a trailing ellipsis is left out.
_INSTALL_DIR_RE = re.compile(
    r"--install-directory=(?P<dir>(?:[A-Za-z0-9 \t:/\\]|\.(?=[A-Za-z0-9]))+)",
    re.ASCII,
)


def extract_install_path(raw_text: str) -> str:
    """Extract the ``--install-directory`` value from raw process text.

    Args:
        raw_text: Process command lines as printed by the platform tools.

    Returns:
        The installation directory with surrounding whitespace trimmed.

    Raises:
        InstallPathNotFoundError: If the argument is absent or blank.
    """
    match = _INSTALL_DIR_RE.search(raw_text)
    if match is None:
        raise InstallPathNotFoundError("no installation path found for the League client")

    path = match.group("dir").strip()
    if not path:
        raise InstallPathNotFoundError("installation path argument is blank")
    return path


class PathLocator:
    """Finds the League client installation directory.

    The client must be running: the directory is read from its command line.
    Nothing is cached, so every ``locate()`` re-inspects the process table.
    """

    def __init__(
        self,
        source: ProcessSource | None = None,
        *,
        platform: str | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._source = source
        self._platform = platform
        self._settings = settings

    def locate(self) -> str:
        """Return the absolute installation directory of the running client.

        Raises:
            UnsupportedPlatformError: If no process source exists for the OS.
            ProcessSpawnError: If a process listing command failed.
            MissingOutputError: If a command's stdout was unavailable.
            OutputDecodeError: If the process listing is not valid UTF-8.
            InstallPathNotFoundError: If the client's command line has no
                installation directory (usually: client not running).
        """
        source = self._source or source_for_platform(self._platform, self._settings)
        raw_text = source.locate_raw_process_text()
        path = extract_install_path(raw_text)
        logger.info("league client install directory: %s", path)
        return path
