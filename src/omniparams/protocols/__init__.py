"""Shared protocol definitions for omniparams handlers.

Handlers never import transport libraries directly. They receive an
implementation of ``ProtocolServiceCaller`` by dependency injection, which
keeps the sync logic testable with in-memory callers.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


class ServiceCallError(Exception):
    """Base exception for remote service call failures."""


class ServiceConnectionError(ServiceCallError):
    """Raised when the remote service cannot be reached."""


class ServiceTimeoutError(ServiceCallError):
    """Raised when a service call times out."""


class ServiceResponseError(ServiceCallError):
    """Raised when the transport or the remote service reports a failure."""


@runtime_checkable
class ProtocolServiceCaller(Protocol):
    """Call-by-name request/response facility used to reach remote nodes.

    Implementations resolve with the service's response payload or raise
    ``ServiceCallError`` (or a subclass) with a human-readable message.
    """

    # any-ok: service payloads are arbitrary JSON objects
    async def call_service(
        self,
        service: str,
        args: dict[str, Any],
    ) -> dict[str, Any]:
        """Invoke ``service`` with ``args`` and return the response payload.

        Args:
            service: Fully qualified service name, e.g. ``/robot/get_parameters``.
            args: Request payload.

        Returns:
            The decoded response payload.

        Raises:
            ServiceCallError: If the call fails for any reason.
        """
        ...


__all__ = [
    "ProtocolServiceCaller",
    "ServiceCallError",
    "ServiceConnectionError",
    "ServiceResponseError",
    "ServiceTimeoutError",
]
