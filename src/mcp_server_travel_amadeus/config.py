"""
Configuration for the Amadeus MCP server.

Credentials are read from the environment when the Amadeus client is first
needed, not at import time, so the server can start (and list its tools)
before credentials are in place.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_HOSTNAME = "production"
DEFAULT_LOG_LEVEL = "INFO"


class ConfigurationError(ValueError):
    """Raised when required Amadeus credentials are missing."""


@dataclass(frozen=True)
class AmadeusSettings:
    client_id: str
    client_secret: str
    hostname: str = DEFAULT_HOSTNAME

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AmadeusSettings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from, defaults to os.environ

        Returns:
            AmadeusSettings with credentials and deployment target

        Raises:
            ConfigurationError: If AMADEUS_CLIENT_ID or AMADEUS_CLIENT_SECRET is unset
        """
        if environ is None:
            environ = os.environ

        client_id = environ.get("AMADEUS_CLIENT_ID")
        client_secret = environ.get("AMADEUS_CLIENT_SECRET")
        hostname = environ.get("AMADEUS_HOSTNAME") or DEFAULT_HOSTNAME

        if not client_id or not client_secret:
            raise ConfigurationError(
                "AMADEUS_CLIENT_ID and AMADEUS_CLIENT_SECRET environment variables are required"
            )

        return cls(client_id=client_id, client_secret=client_secret, hostname=hostname)

    def masked_client_id(self) -> str:
        return f"{self.client_id[:8]}..."


def get_log_level(environ: Optional[Mapping[str, str]] = None) -> str:
    """Logging level for the server itself (AMADEUS_MCP_LOG_LEVEL, default INFO)."""
    if environ is None:
        environ = os.environ
    return (environ.get("AMADEUS_MCP_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
