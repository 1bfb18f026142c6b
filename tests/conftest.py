"""Shared pytest fixtures for the lcu-connector test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from lcu_connector.config import Settings
from lcu_connector.shared.models import ConnectionDescriptor

SAMPLE_LOCKFILE = "LeagueClientUx:1234:54835:C0DWT6VDJ2H50HFJ2BESh:https"


class FakeProcessSource:
    """In-memory ``ProcessSource`` returning canned process text."""

    def __init__(self, raw_text: str = "", *, error: Exception | None = None) -> None:
        self.raw_text = raw_text
        self.error = error
        self.calls = 0

    def locate_raw_process_text(self) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.raw_text


@pytest.fixture()
def make_source() -> type[FakeProcessSource]:
    """Factory for canned process sources."""
    return FakeProcessSource


class FakeLocator:
    """Stands in for ``PathLocator`` with a fixed directory."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = str(directory)

    def locate(self) -> str:
        return self.directory


@pytest.fixture()
def make_locator() -> type[FakeLocator]:
    return FakeLocator


@pytest.fixture()
def settings() -> Settings:
    """Return a Settings instance with test defaults."""
    return Settings(
        client_process="LeagueClientUx",
        wmic_bin="WMIC",
        ps_bin="ps",
        grep_bin="grep",
    )


@pytest.fixture()
def lockfile_text() -> str:
    return SAMPLE_LOCKFILE


@pytest.fixture()
def install_dir(tmp_path: Path, lockfile_text: str) -> Path:
    """A fake installation directory containing a lockfile."""
    (tmp_path / "lockfile").write_text(lockfile_text, encoding="utf-8")
    return tmp_path


@pytest.fixture()
def sample_descriptor() -> ConnectionDescriptor:
    return ConnectionDescriptor.create(
        process="LeagueClientUx",
        pid=1234,
        port=54835,
        password="C0DWT6VDJ2H50HFJ2BESh",
        protocol="https",
    )
