# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Settings for the parameter sync effect, loaded from the environment."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from omniparams.constants import DEFAULT_NODES_SERVICE
from omniparams.enums.enum_coercion_mode import EnumCoercionMode
from omniparams.models.model_service_bridge_config import ModelServiceBridgeConfig


class ParameterSyncSettings(BaseSettings):
    """Pydantic Settings for parameter sync, loaded from OMNIPARAMS_* variables.

    Environment variables:
        OMNIPARAMS_BRIDGE_URL: Service bridge base URL (default http://localhost:9091)
        OMNIPARAMS_NODES_SERVICE: Node enumeration service (default /rosapi/nodes)
        OMNIPARAMS_TIMEOUT_SECONDS: Per-call timeout (default 10.0)
        OMNIPARAMS_MAX_RETRIES: Retries on connect/timeout errors (default 2)
        OMNIPARAMS_RETRY_BASE_DELAY: Backoff base delay (default 0.25)
        OMNIPARAMS_COERCION_MODE: strict | lenient (default strict)
    """

    model_config = SettingsConfigDict(
        env_prefix="OMNIPARAMS_",
        extra="ignore",
    )

    bridge_url: str = Field(
        default="http://localhost:9091",
        description="Base URL of the service bridge.",
    )
    nodes_service: str = Field(
        default=DEFAULT_NODES_SERVICE,
        description="Service that enumerates nodes.",
    )
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
    coercion_mode: EnumCoercionMode = Field(
        default=EnumCoercionMode.STRICT,
        description="How edit text is coerced into typed values.",
    )

    def to_bridge_config(self) -> ModelServiceBridgeConfig:
        """Convert settings to a frozen ModelServiceBridgeConfig instance."""
        return ModelServiceBridgeConfig(
            base_url=self.bridge_url,
            timeout_seconds=self.timeout_seconds,
            max_retries=self.max_retries,
            retry_base_delay=self.retry_base_delay,
        )


__all__ = ["ParameterSyncSettings"]
