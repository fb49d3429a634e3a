"""
Unit tests for shared enums.

Tests enum definitions, wire tags and derived properties.
"""

import pytest

from omniparams.enums import (
    PAYLOAD_FIELDS,
    EnumCoercionMode,
    EnumParameterType,
    EnumSyncState,
    EnumSyncStatus,
)

pytestmark = pytest.mark.unit


def test_parameter_type_wire_tags():
    """Tags match rcl_interfaces/msg/ParameterType."""
    assert EnumParameterType.BOOL == 1
    assert EnumParameterType.INTEGER == 2
    assert EnumParameterType.DOUBLE == 3
    assert EnumParameterType.STRING == 4
    assert EnumParameterType.BYTE_ARRAY == 5
    assert EnumParameterType.BOOL_ARRAY == 6
    assert EnumParameterType.INTEGER_ARRAY == 7
    assert EnumParameterType.DOUBLE_ARRAY == 8
    assert EnumParameterType.STRING_ARRAY == 9


@pytest.mark.parametrize("tag", [0, 10, -1, 255])
def test_from_tag_unrecognized(tag):
    """Unrecognized tags map to None instead of raising."""
    assert EnumParameterType.from_tag(tag) is None


def test_from_tag_recognized():
    assert EnumParameterType.from_tag(8) is EnumParameterType.DOUBLE_ARRAY


def test_payload_fields():
    """Each kind has its own payload field, in tag order."""
    assert PAYLOAD_FIELDS == tuple(t.payload_field for t in EnumParameterType)
    assert EnumParameterType.BYTE_ARRAY.payload_field == "byte_array_value"
    assert EnumParameterType.STRING.payload_field == "string_value"


def test_is_array():
    scalars = [t for t in EnumParameterType if not t.is_array]
    assert scalars == [
        EnumParameterType.BOOL,
        EnumParameterType.INTEGER,
        EnumParameterType.DOUBLE,
        EnumParameterType.STRING,
    ]


def test_type_names():
    assert EnumParameterType.BOOL.type_name == "boolean"
    assert EnumParameterType.INTEGER_ARRAY.type_name == "integer_array"


def test_coercion_mode_values():
    assert EnumCoercionMode("strict") is EnumCoercionMode.STRICT
    assert EnumCoercionMode("lenient") is EnumCoercionMode.LENIENT


def test_sync_status_is_string_enum():
    """Statuses serialize as plain strings in result models."""
    assert EnumSyncStatus.SUCCESS == "success"
    assert EnumSyncStatus.PROTOCOL_ERROR.value == "protocol_error"


def test_sync_states():
    assert [s.name for s in EnumSyncState] == [
        "IDLE",
        "NODES_LISTED",
        "PARAMETERS_LOADED",
        "COMMITTING",
    ]
