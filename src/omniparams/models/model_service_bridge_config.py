# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Configuration model for the service bridge HTTP client."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ModelServiceBridgeConfig(BaseModel):
    """Configuration for ``ServiceBridgeClient``.

    Attributes:
        base_url: Base URL of the service bridge (from OMNIPARAMS_BRIDGE_URL).
        timeout_seconds: HTTP request timeout in seconds.
        max_retries: Maximum number of retry attempts per call.
        retry_base_delay: Base delay in seconds for exponential backoff.
    """

    model_config = {"frozen": True, "extra": "ignore"}

    base_url: str = Field(description="Base URL of the service bridge.")
    timeout_seconds: float = Field(
        default=10.0,
        gt=0.0,
        description="HTTP request timeout in seconds.",
    )
    max_retries: int = Field(
        default=2,
        ge=0,
        description="Maximum number of retry attempts per call.",
    )
    retry_base_delay: float = Field(
        default=0.25,
        ge=0.0,
        description="Base delay in seconds for exponential backoff.",
    )


__all__ = ["ModelServiceBridgeConfig"]
