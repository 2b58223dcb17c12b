"""Configuration for the LI.FI API client."""

import os
from dataclasses import dataclass

from bridgelens.constants import LIFI_BASE_URL


@dataclass(frozen=True)
class ClientConfig:
    """Connection, retry and cache settings for LiFiClient.

    Attributes:
        base_url: API root (default: https://li.quest/v1)
        api_key: Optional LI.FI API key, sent as ``x-lifi-api-key``
        timeout: Per-request timeout in seconds (default: 30)
        max_retries: Total attempts for retryable failures (default: 3)
        initial_retry_delay: First backoff delay in seconds (default: 1)
        max_retry_delay: Backoff ceiling in seconds (default: 10)
        cache_enabled: Cache successful responses in memory (default: True)
        cache_ttl: Status cache lifetime in seconds; routes use half (default: 30)
        cache_max_entries: Cache size cap; the oldest entry is evicted first (default: 1000)
    """

    base_url: str = LIFI_BASE_URL
    api_key: str | None = None
    timeout: float = 30.0
    max_retries: int = 3
    initial_retry_delay: float = 1.0
    max_retry_delay: float = 10.0
    cache_enabled: bool = True
    cache_ttl: float = 30.0
    cache_max_entries: int = 1000

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build a config from environment variables.

        - LIFI_BASE_URL: API root
        - LIFI_API_KEY: API key
        - LIFI_TIMEOUT: Request timeout in seconds
        """
        return cls(
            base_url=os.environ.get("LIFI_BASE_URL", LIFI_BASE_URL),
            api_key=os.environ.get("LIFI_API_KEY") or None,
            timeout=float(os.environ.get("LIFI_TIMEOUT", "30")),
        )


# Default configuration instance
DEFAULT_CLIENT_CONFIG = ClientConfig()
