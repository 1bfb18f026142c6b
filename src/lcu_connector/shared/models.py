"""Frozen Pydantic models for the League client local API."""

from __future__ import annotations

import base64

from pydantic import BaseModel, Field

U32_MAX = 2**32 - 1


def basic_auth_token(username: str, password: str) -> str:
    """Return the Base64 ``username:password`` token used for Basic auth."""
    return base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")


class ConnectionDescriptor(BaseModel):
    """Connection details read from the client's lockfile.

    Becomes stale as soon as the client restarts and rewrites the lockfile.
    """

    model_config = {"frozen": True}

    process: str
    pid: int = Field(ge=0, le=U32_MAX)
    port: int = Field(gt=0, le=U32_MAX)
    password: str = Field(repr=False)
    protocol: str
    username: str
    address: str
    b64_auth: str = Field(repr=False)

    @classmethod
    def create(
        cls,
        *,
        process: str,
        pid: int,
        port: int,
        password: str,
        protocol: str,
        username: str = "riot",
        address: str = "127.0.0.1",
    ) -> ConnectionDescriptor:
        """Build a descriptor, deriving ``b64_auth`` from the credentials."""
        return cls(
            process=process,
            pid=pid,
            port=port,
            password=password,
            protocol=protocol,
            username=username,
            address=address,
            b64_auth=basic_auth_token(username, password),
        )

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.address}:{self.port}"

    @property
    def authorization(self) -> str:
        """Value for the ``Authorization`` header."""
        return f"Basic {self.b64_auth}"
