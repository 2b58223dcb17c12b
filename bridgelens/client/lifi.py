"""Async client for the LI.FI REST API.

Wraps ``httpx.AsyncClient`` with:
- exponential backoff with jitter for retryable failures
- an in-memory TTL cache for successful responses
- schema validation of responses into bridgelens models
"""

from __future__ import annotations

import asyncio
import json
import random
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

import httpx
import structlog
from pydantic import ValidationError

from bridgelens.client.config import DEFAULT_CLIENT_CONFIG, ClientConfig
from bridgelens.client.errors import LiFiApiError, MalformedResponseError, is_retryable_status
from bridgelens.constants import LIFI_API_KEY_HEADER
from bridgelens.models.route import Route, RoutesRequest, RoutesResponse
from bridgelens.models.status import StatusResponse

logger = structlog.get_logger()

STATUS_PATH = "/status"
ROUTES_PATH = "/advanced/routes"


@dataclass
class _CacheEntry:
    value: Any
    expires_at: float


def parse_retry_after(value: str | None) -> float | None:
    """Parse a ``Retry-After`` header given in seconds."""
    if not value:
        return None
    try:
        return float(int(value))
    except ValueError:
        return None


class LiFiClient:
    """Client for the LI.FI status and routing endpoints.

    Satisfies :class:`bridgelens.analysis.RoutingClient`.

    Args:
        config: Connection, retry and cache settings. Uses DEFAULT_CLIENT_CONFIG if not provided.
        transport: Optional httpx transport (tests pass ``httpx.MockTransport``).
        sleep: Coroutine used to wait between retries. Defaults to asyncio.sleep.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Callable[[float], Awaitable[None]] | None = None,
    ) -> None:
        self.config = config or DEFAULT_CLIENT_CONFIG
        self._transport = transport
        self._sleep = sleep or asyncio.sleep
        self._cache: dict[str, _CacheEntry] = {}

    async def get_status(
        self,
        tx_hash: str,
        from_chain: str | None = None,
        to_chain: str | None = None,
        bridge: str | None = None,
    ) -> StatusResponse:
        """Fetch the status of a cross-chain transfer.

        Raises:
            LiFiApiError: If the API returns an error after retries
            MalformedResponseError: If the response does not match the schema
        """
        params = {"txHash": tx_hash}
        if from_chain:
            params["fromChain"] = from_chain
        if to_chain:
            params["toChain"] = to_chain
        if bridge:
            params["bridge"] = bridge

        cache_key = self._cache_key("status", params)
        cached = self._get_cached(cache_key)
        if cached is not None:
            return cached

        data = await self._request_with_retry("GET", STATUS_PATH, params=params)
        status = self._parse_status(data)

        self._set_cached(cache_key, status, self.config.cache_ttl)
        return status

    async def get_routes(self, request: RoutesRequest) -> list[Route]:
        """Fetch candidate routes for a transfer.

        Routes are cached for half the status TTL since prices move quickly.

        Raises:
            LiFiApiError: If the API returns an error after retries
            MalformedResponseError: If the response does not match the schema
        """
        payload = request.to_payload()
        cache_key = self._cache_key("routes", payload)
        cached = self._get_cached(cache_key)
        if cached is not None:
            return cached

        data = await self._request_with_retry("POST", ROUTES_PATH, json_body=payload)
        routes = self._parse_routes(data)

        self._set_cached(cache_key, routes, self.config.cache_ttl / 2)
        return routes

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _http_client(self) -> httpx.AsyncClient:
        headers = {"Content-Type": "application/json"}
        if self.config.api_key:
            headers[LIFI_API_KEY_HEADER] = self.config.api_key
        return httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            headers=headers,
            transport=self._transport,
        )

    async def _request_with_retry(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> Any:
        attempt = 1
        while True:
            try:
                return await self._request(method, path, params=params, json_body=json_body)
            except LiFiApiError as e:
                if not e.is_retryable or attempt >= self.config.max_retries:
                    raise
                delay = self._retry_delay(attempt, e.retry_after)
                logger.info(
                    "lifi_request_retry",
                    path=path,
                    attempt=attempt,
                    delay=round(delay, 3),
                    code=e.code,
                    status=e.status,
                )
                await self._sleep(delay)
                attempt += 1

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> Any:
        async with self._http_client() as http:
            try:
                response = await http.request(method, path, params=params, json=json_body)
            except httpx.TimeoutException as e:
                raise LiFiApiError(
                    code="TIMEOUT",
                    message=f"Request to {path} timed out",
                    is_retryable=True,
                ) from e
            except httpx.TransportError as e:
                raise LiFiApiError(
                    code="NETWORK_ERROR",
                    message=str(e) or type(e).__name__,
                    is_retryable=True,
                ) from e

        if response.is_error:
            raise self._api_error(response)

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Response from {path} is not JSON") from e

    def _retry_delay(self, attempt: int, retry_after: float | None) -> float:
        """Exponential backoff with 10% jitter, capped at max_retry_delay."""
        base = retry_after if retry_after is not None else self.config.initial_retry_delay
        delay = min(base * 2 ** (attempt - 1), self.config.max_retry_delay)
        return delay + random.random() * delay * 0.1

    @staticmethod
    def _api_error(response: httpx.Response) -> LiFiApiError:
        body: Any = {}
        try:
            body = response.json()
        except ValueError:
            pass
        if not isinstance(body, dict):
            body = {}

        error_block = body.get("error") if isinstance(body.get("error"), dict) else {}
        code = error_block.get("code") or body.get("code") or response.status_code
        message = (
            error_block.get("message") or body.get("message") or response.reason_phrase or "Error"
        )
        return LiFiApiError(
            code=str(code),
            message=str(message),
            status=response.status_code,
            is_retryable=is_retryable_status(response.status_code),
            retry_after=parse_retry_after(response.headers.get("retry-after")),
        )

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_status(data: Any) -> StatusResponse:
        if not isinstance(data, dict):
            raise MalformedResponseError("Invalid status response format")
        if "status" not in data or "sending" not in data:
            raise MalformedResponseError("Missing required fields in status response")
        try:
            return StatusResponse.model_validate(data)
        except ValidationError as e:
            raise MalformedResponseError(f"Invalid status response: {e}") from e

    @staticmethod
    def _parse_routes(data: Any) -> list[Route]:
        if not isinstance(data, dict):
            raise MalformedResponseError("Invalid routes response format")
        if not isinstance(data.get("routes"), list):
            raise MalformedResponseError("Routes response must contain routes array")
        try:
            return RoutesResponse.model_validate(data).routes
        except ValidationError as e:
            raise MalformedResponseError(f"Invalid routes response: {e}") from e

    # ------------------------------------------------------------------
    # Cache
    # ------------------------------------------------------------------

    @staticmethod
    def _cache_key(operation: str, params: dict[str, Any]) -> str:
        return f"{operation}:{json.dumps(params, sort_keys=True)}"

    def _get_cached(self, key: str) -> Any | None:
        if not self.config.cache_enabled:
            return None
        entry = self._cache.get(key)
        if entry is None:
            return None
        if time.monotonic() > entry.expires_at:
            del self._cache[key]
            return None
        logger.debug("lifi_cache_hit", key=key[:64])
        return entry.value

    def _set_cached(self, key: str, value: Any, ttl: float) -> None:
        if not self.config.cache_enabled:
            return
        self.clear_expired_cache()
        self._cache.pop(key, None)
        # Dicts keep insertion order, so the first key is the oldest entry
        while self._cache and len(self._cache) >= self.config.cache_max_entries:
            del self._cache[next(iter(self._cache))]
        self._cache[key] = _CacheEntry(value=value, expires_at=time.monotonic() + ttl)

    def clear_expired_cache(self) -> int:
        """Drop expired cache entries, returning how many were removed."""
        now = time.monotonic()
        expired = [key for key, entry in self._cache.items() if now > entry.expires_at]
        for key in expired:
            del self._cache[key]
        return len(expired)

    def clear_cache(self) -> None:
        """Drop all cached responses."""
        self._cache.clear()

    @property
    def cache_size(self) -> int:
        return len(self._cache)
