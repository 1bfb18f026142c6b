"""Process table inspection via platform command-line tools."""

from __future__ import annotations

import logging
import subprocess
import sys

from lcu_connector.config import Settings, get_settings
from lcu_connector.discovery.interfaces import ProcessSource
from lcu_connector.shared.exceptions import (
    MissingOutputError,
    OutputDecodeError,
    ProcessSpawnError,
    UnsupportedPlatformError,
)

logger = logging.getLogger(__name__)

# grep exits with 1 when no line matched
_GREP_NO_MATCH = 1


class WmicProcessSource:
    """Windows process source backed by ``WMIC``.

    Implements the ``ProcessSource`` protocol.
    """

    def __init__(self, *, client_process: str = "LeagueClientUx", wmic_bin: str = "WMIC") -> None:
        self._client_process = client_process
        self._wmic_bin = wmic_bin

    def locate_raw_process_text(self) -> str:
        cmd = [
            self._wmic_bin,
            "PROCESS",
            "WHERE",
            f"name='{self._client_process}.exe'",
            "GET",
            "commandline",
        ]
        logger.debug("running %s", " ".join(cmd))

        try:
            proc = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, check=False)
        except OSError as exc:
            raise ProcessSpawnError(f"could not run {self._wmic_bin}: {exc}") from exc

        if proc.returncode != 0:
            err_msg = _decode_stderr(proc.stderr)
            raise ProcessSpawnError(f"{self._wmic_bin} failed (rc={proc.returncode}): {err_msg}")
        if proc.stdout is None:
            raise MissingOutputError(f"{self._wmic_bin} returned no stdout")

        return _decode(proc.stdout, self._wmic_bin)


class PsGrepProcessSource:
    """macOS process source: ``ps x -o args`` piped into ``grep``.

    Implements the ``ProcessSource`` protocol.
    """

    def __init__(
        self,
        *,
        client_process: str = "LeagueClientUx",
        ps_bin: str = "ps",
        grep_bin: str = "grep",
    ) -> None:
        self._client_process = client_process
        self._ps_bin = ps_bin
        self._grep_bin = grep_bin

    def locate_raw_process_text(self) -> str:
        ps_cmd = [self._ps_bin, "x", "-o", "args"]
        grep_cmd = [self._grep_bin, self._client_process]
        logger.debug("running %s | %s", " ".join(ps_cmd), " ".join(grep_cmd))

        try:
            ps = subprocess.Popen(ps_cmd, stdout=subprocess.PIPE)
        except OSError as exc:
            raise ProcessSpawnError(f"could not run {self._ps_bin}: {exc}") from exc

        with ps:
            if ps.stdout is None:
                raise MissingOutputError(f"{self._ps_bin} returned no stdout")

            try:
                grep = subprocess.Popen(
                    grep_cmd,
                    stdin=ps.stdout,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.PIPE,
                )
            except OSError as exc:
                raise ProcessSpawnError(f"could not run {self._grep_bin}: {exc}") from exc

            # grep owns the read end now; ps gets SIGPIPE if grep exits early
            ps.stdout.close()
            stdout, stderr = grep.communicate()
            ps_rc = ps.wait()

        if ps_rc != 0:
            raise ProcessSpawnError(f"{self._ps_bin} failed (rc={ps_rc})")
        if grep.returncode not in (0, _GREP_NO_MATCH):
            err_msg = _decode_stderr(stderr)
            raise ProcessSpawnError(f"{self._grep_bin} failed (rc={grep.returncode}): {err_msg}")
        if stdout is None:
            raise MissingOutputError(f"{self._grep_bin} returned no stdout")

        return _decode(stdout, self._grep_bin)


def source_for_platform(platform: str | None = None, settings: Settings | None = None) -> ProcessSource:
    """Select the process source for the host OS.

    Args:
        platform: ``sys.platform`` style identifier, defaults to the host's.
        settings: Discovery settings, defaults to ``get_settings()``.

    Returns:
        A ``ProcessSource`` for Windows or macOS.

    Raises:
        UnsupportedPlatformError: For any other platform.
    """
    platform = sys.platform if platform is None else platform

    if platform == "win32":
        settings = settings or get_settings()
        return WmicProcessSource(client_process=settings.client_process, wmic_bin=settings.wmic_bin)
    if platform == "darwin":
        settings = settings or get_settings()
        return PsGrepProcessSource(
            client_process=settings.client_process,
            ps_bin=settings.ps_bin,
            grep_bin=settings.grep_bin,
        )

    raise UnsupportedPlatformError(f"unsupported platform: {platform}")


def _decode(raw: bytes, command: str) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise OutputDecodeError(f"{command} output is not valid UTF-8: {exc}") from exc


def _decode_stderr(raw: bytes | None) -> str:
    return raw.decode(errors="replace").strip()[-500:] if raw else "unknown error"
