"""LI.FI API client.

Usage:
    from bridgelens.client import LiFiClient, ClientConfig

    client = LiFiClient(ClientConfig.from_env())
    status = await client.get_status("0x...")
    routes = await client.get_routes(request)
"""

from bridgelens.client.config import DEFAULT_CLIENT_CONFIG, ClientConfig
from bridgelens.client.errors import LiFiApiError, MalformedResponseError, is_retryable_status
from bridgelens.client.lifi import LiFiClient

__all__ = [
    "ClientConfig",
    "DEFAULT_CLIENT_CONFIG",
    "LiFiApiError",
    "LiFiClient",
    "MalformedResponseError",
    "is_retryable_status",
]
