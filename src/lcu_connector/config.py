"""Centralised configuration via Pydantic Settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Discovery configuration loaded from environment variables.

    Every field has a working default; nothing has to be configured.
    """

    model_config = {"env_prefix": "LCU_", "frozen": True}

    # Target process (without the Windows ``.exe`` suffix)
    client_process: str = "LeagueClientUx"

    # Windows
    wmic_bin: str = "WMIC"

    # macOS
    ps_bin: str = "ps"
    grep_bin: str = "grep"


def get_settings() -> Settings:
    """Factory — allows overriding in tests."""
    return Settings()
