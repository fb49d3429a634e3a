# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Async HTTP client for a rosbridge-style service bridge.

Implements ``ProtocolServiceCaller`` over HTTP. Each call is POSTed to
``{base_url}/call_service`` as a rosbridge ``call_service`` operation:

    {"op": "call_service", "id": "...", "service": "/robot/get_parameters",
     "args": {"names": ["max_speed"]}}

and the bridge answers with a ``service_response`` operation:

    {"op": "service_response", "id": "...", "result": true,
     "values": {"values": [...]}}

``result: false`` means the remote service itself failed; ``values`` then
holds the error text.

This client lives in omniparams.clients (not inside nodes/) so node
handlers never import transport libraries directly. Handlers receive a
caller via dependency injection.

Example:
    ```python
    from omniparams.clients import ServiceBridgeClient
    from omniparams.models import ModelServiceBridgeConfig

    config = ModelServiceBridgeConfig(base_url="http://localhost:9091")
    async with ServiceBridgeClient(config) as client:
        response = await client.call_service("/rosapi/nodes", {})
        print(response["nodes"])
    ```
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import httpx

from omniparams.models.model_service_bridge_config import ModelServiceBridgeConfig
from omniparams.protocols import (
    ServiceCallError,
    ServiceConnectionError,
    ServiceResponseError,
    ServiceTimeoutError,
)

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)

# HTTP status code boundaries for error classification
_HTTP_CLIENT_ERROR_MIN = 400
_HTTP_CLIENT_ERROR_MAX = 500  # Exclusive (4xx range)


class ServiceBridgeClient:
    """Async client that relays service calls through an HTTP service bridge.

    Maintains a persistent httpx.AsyncClient for connection reuse. Supports
    both context manager and manual lifecycle management.

    Example (manual lifecycle):
        ```python
        client = ServiceBridgeClient(config)
        await client.connect()
        try:
            await client.call_service("/robot/list_parameters", {})
        finally:
            await client.close()
        ```
    """

    def __init__(
        self,
        config: ModelServiceBridgeConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._connected = False

    @property
    def config(self) -> ModelServiceBridgeConfig:
        """Return the client configuration."""
        return self._config

    @property
    def is_connected(self) -> bool:
        """True if the connection pool is active."""
        return self._connected and self._client is not None

    @property
    def call_url(self) -> str:
        """Full URL for the /call_service endpoint."""
        base = self._config.base_url.rstrip("/")
        return f"{base}/call_service"

    async def connect(self) -> None:
        """Open the connection pool. Safe to call multiple times (idempotent)."""
        if self._connected:
            return
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(self._config.timeout_seconds),
            limits=httpx.Limits(max_keepalive_connections=2, max_connections=4),
            transport=self._transport,
        )
        self._connected = True
        logger.debug("ServiceBridgeClient connected to %s", self._config.base_url)

    async def close(self) -> None:
        """Close the connection pool. Safe to call multiple times (idempotent)."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        self._connected = False
        logger.debug("ServiceBridgeClient connection closed")

    async def __aenter__(self) -> ServiceBridgeClient:
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def call_service(
        self,
        service: str,
        args: dict[str, Any],
    ) -> dict[str, Any]:
        """Call a remote service through the bridge.

        Retries on transport failures and timeouts with exponential
        backoff. Does NOT retry on client errors (4xx) or on a failure
        reported by the remote service.

        Args:
            service: Fully qualified service name.
            args: Request payload.

        Returns:
            The service response payload.

        Raises:
            ServiceResponseError: If the bridge answers 4xx/5xx or the remote
                service reports failure.
            ServiceConnectionError: If the connection or transport fails after
                all retries.
            ServiceTimeoutError: If the call times out after all retries.
        """
        if not self._connected:
            await self.connect()

        last_exception: ServiceCallError | None = None

        for attempt in range(self._config.max_retries + 1):
            try:
                return await self._execute_call(service, args)

            except httpx.TimeoutException as exc:
                last_exception = ServiceTimeoutError(
                    f"Call to {service} timed out after "
                    f"{self._config.timeout_seconds}s: {exc}"
                )
                logger.warning(
                    "Service call timeout (attempt %d/%d): %s",
                    attempt + 1,
                    self._config.max_retries + 1,
                    service,
                )

            except httpx.ConnectError as exc:
                last_exception = ServiceConnectionError(
                    f"Connection failed to {self._config.base_url}: {exc}"
                )
                logger.warning(
                    "Service bridge connection error (attempt %d/%d): %s",
                    attempt + 1,
                    self._config.max_retries + 1,
                    exc,
                )

            except httpx.HTTPStatusError as exc:
                # Do not retry on client errors (4xx)
                if (
                    _HTTP_CLIENT_ERROR_MIN
                    <= exc.response.status_code
                    < _HTTP_CLIENT_ERROR_MAX
                ):
                    raise ServiceResponseError(
                        f"Service bridge client error: "
                        f"{exc.response.status_code} - {exc.response.text}"
                    ) from exc
                last_exception = ServiceResponseError(
                    f"Service bridge error: {exc.response.status_code}"
                )
                logger.warning(
                    "Service bridge server error (attempt %d/%d): %s",
                    attempt + 1,
                    self._config.max_retries + 1,
                    exc,
                )

            except httpx.TransportError as exc:
                # ReadError, WriteError, RemoteProtocolError, ProxyError, ...
                last_exception = ServiceConnectionError(
                    f"Transport error talking to {self._config.base_url}: {exc}"
                )
                logger.warning(
                    "Service bridge transport error (attempt %d/%d): %s",
                    attempt + 1,
                    self._config.max_retries + 1,
                    exc,
                )

            # Exponential backoff (skip on final attempt)
            if attempt < self._config.max_retries:
                delay = self._config.retry_base_delay * (2**attempt)
                logger.debug("Retrying in %.2fs...", delay)
                await asyncio.sleep(delay)

        if last_exception is not None:
            raise last_exception

        raise ServiceCallError("Unexpected error: no exception captured")

    async def _execute_call(
        self,
        service: str,
        args: dict[str, Any],
    ) -> dict[str, Any]:
        """Send one call_service operation and unwrap the service_response."""
        if self._client is None:
            raise ServiceCallError("Client is not connected")

        request_id = f"call_service:{service}:{uuid4().hex[:8]}"
        response = await self._client.post(
            self.call_url,
            json={
                "op": "call_service",
                "id": request_id,
                "service": service,
                "args": args,
            },
        )
        response.raise_for_status()

        try:
            data = response.json()
        except ValueError as exc:
            raise ServiceResponseError(
                f"Service bridge returned non-JSON response for {service}"
            ) from exc

        if not isinstance(data, dict) or data.get("op") != "service_response":
            raise ServiceResponseError(
                f"Unexpected response format from service bridge: {type(data)}"
            )

        values = data.get("values")
        if data.get("result") is not True:
            raise ServiceResponseError(str(values) if values else f"{service} failed")

        if values is None:
            return {}
        if not isinstance(values, dict):
            raise ServiceResponseError(
                f"Expected object for service response values, got {type(values)}"
            )
        return values


__all__ = [
    "ServiceBridgeClient",
    "ServiceCallError",
    "ServiceConnectionError",
    "ServiceResponseError",
    "ServiceTimeoutError",
]
