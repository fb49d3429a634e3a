"""
Pytest configuration and fixtures for omniparams tests.

Shared test fixtures for the unit tests under tests/. Node-specific
fixtures live in each node's node_tests/conftest.py.
"""

from typing import Any

import pytest

from omniparams.enums import EnumParameterType
from omniparams.models import ModelParameterValue

# =========================================================================
# Environment isolation
# =========================================================================


@pytest.fixture(autouse=True)
def _clear_omniparams_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep OMNIPARAMS_* variables from the developer shell out of tests."""
    for name in (
        "OMNIPARAMS_BRIDGE_URL",
        "OMNIPARAMS_NODES_SERVICE",
        "OMNIPARAMS_TIMEOUT_SECONDS",
        "OMNIPARAMS_MAX_RETRIES",
        "OMNIPARAMS_RETRY_BASE_DELAY",
        "OMNIPARAMS_COERCION_MODE",
    ):
        monkeypatch.delenv(name, raising=False)


# =========================================================================
# Sample values
# =========================================================================


@pytest.fixture
def full_wire_double() -> dict[str, Any]:
    """A DOUBLE value as relayed by a service bridge: every field present."""
    return {
        "type": 3,
        "bool_value": False,
        "integer_value": 0,
        "double_value": 5.0,
        "string_value": "",
        "byte_array_value": [],
        "bool_array_value": [],
        "integer_array_value": [],
        "double_array_value": [],
        "string_array_value": [],
    }


@pytest.fixture
def string_array_value() -> ModelParameterValue:
    return ModelParameterValue.of(EnumParameterType.STRING_ARRAY, ("a", "b", "c"))
