"""Protocol interfaces for installation-directory discovery."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProcessSource(Protocol):
    """Protocol for a platform-specific view of the process table."""

    def locate_raw_process_text(self) -> str:
        """Return process command lines that mention the client process.

        Returns:
            Raw decoded output of the platform's process listing command(s).

        Raises:
            ProcessSpawnError: If a command could not run or failed.
            MissingOutputError: If a command's stdout was unavailable.
            OutputDecodeError: If the output is not valid UTF-8.
        """
        ...
