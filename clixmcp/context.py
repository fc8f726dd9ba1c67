"""Request context threaded through tool handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clixmcp.config.schema import Config


@dataclass(slots=True, frozen=True)
class ServerContext:
    """Authentication and client identity for one server session."""

    api_key: str
    api_base_url: str
    user_id: str | None = None
    client_id: str | None = None

    @classmethod
    def from_config(cls, config: "Config") -> "ServerContext":
        return cls(
            api_key=config.api_key,
            api_base_url=config.api_base_url,
            user_id=config.user_id,
            client_id=config.client_id,
        )
