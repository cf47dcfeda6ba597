"""
Process-wide Amadeus SDK client.

The client is built on first use from the environment and then held for the
lifetime of the process. It is never replaced or torn down; token refresh and
retries are handled inside the SDK.
"""

import logging
import threading
from typing import Callable, Optional

from amadeus import Client

from .config import AmadeusSettings
from .logs import log_info

SettingsLoader = Callable[[], AmadeusSettings]


class AmadeusClientProvider:
    """Lazily constructs a single `amadeus.Client` behind a lock."""

    def __init__(self, settings_loader: Optional[SettingsLoader] = None):
        self._settings_loader = settings_loader or AmadeusSettings.from_env
        self._lock = threading.Lock()
        self._client: Optional[Client] = None

    def get(self) -> Client:
        """
        Return the shared client, building it on the first call.

        Raises:
            ConfigurationError: If credentials are missing. Nothing is cached
                in that case, so a later call can succeed once they are set.
        """
        client = self._client
        if client is not None:
            return client

        with self._lock:
            if self._client is None:
                settings = self._settings_loader()
                self._client = Client(
                    client_id=settings.client_id,
                    client_secret=settings.client_secret,
                    hostname=settings.hostname,
                    logger=logging.getLogger("amadeus"),
                )
                log_info(
                    "Client",
                    f"Amadeus client created (hostname={settings.hostname}, "
                    f"client_id={settings.masked_client_id()})",
                )
            return self._client
