# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Parameter type tags for the ParameterValue wire union.

Tag values match ``rcl_interfaces/msg/ParameterType``. Tag 0
(PARAMETER_NOT_SET) and anything above 9 are not valid edit targets.
"""

from __future__ import annotations

from enum import IntEnum


class EnumParameterType(IntEnum):
    """Discriminator for ``ModelParameterValue``.

    Attributes:
        BOOL: Scalar boolean (``bool_value``).
        INTEGER: Scalar signed 64-bit integer (``integer_value``).
        DOUBLE: Scalar 64-bit float (``double_value``).
        STRING: Scalar text (``string_value``).
        BYTE_ARRAY: Sequence of bytes (``byte_array_value``).
        BOOL_ARRAY: Sequence of booleans (``bool_array_value``).
        INTEGER_ARRAY: Sequence of integers (``integer_array_value``).
        DOUBLE_ARRAY: Sequence of floats (``double_array_value``).
        STRING_ARRAY: Sequence of text (``string_array_value``).
    """

    BOOL = 1
    INTEGER = 2
    DOUBLE = 3
    STRING = 4
    BYTE_ARRAY = 5
    BOOL_ARRAY = 6
    INTEGER_ARRAY = 7
    DOUBLE_ARRAY = 8
    STRING_ARRAY = 9

    @property
    def payload_field(self) -> str:
        """Name of the wire field that carries the payload for this tag."""
        return _PAYLOAD_FIELDS[self]

    @property
    def type_name(self) -> str:
        """Human-readable type name shown in the parameter table."""
        return _TYPE_NAMES[self]

    @property
    def is_array(self) -> bool:
        return self >= EnumParameterType.BYTE_ARRAY

    @classmethod
    def from_tag(cls, tag: int) -> EnumParameterType | None:
        """Return the enum member for a raw wire tag, or None if unrecognized."""
        try:
            return cls(tag)
        except ValueError:
            return None


_PAYLOAD_FIELDS: dict[EnumParameterType, str] = {
    EnumParameterType.BOOL: "bool_value",
    EnumParameterType.INTEGER: "integer_value",
    EnumParameterType.DOUBLE: "double_value",
    EnumParameterType.STRING: "string_value",
    EnumParameterType.BYTE_ARRAY: "byte_array_value",
    EnumParameterType.BOOL_ARRAY: "bool_array_value",
    EnumParameterType.INTEGER_ARRAY: "integer_array_value",
    EnumParameterType.DOUBLE_ARRAY: "double_array_value",
    EnumParameterType.STRING_ARRAY: "string_array_value",
}

_TYPE_NAMES: dict[EnumParameterType, str] = {
    EnumParameterType.BOOL: "boolean",
    EnumParameterType.INTEGER: "integer",
    EnumParameterType.DOUBLE: "double",
    EnumParameterType.STRING: "string",
    EnumParameterType.BYTE_ARRAY: "byte_array",
    EnumParameterType.BOOL_ARRAY: "boolean_array",
    EnumParameterType.INTEGER_ARRAY: "integer_array",
    EnumParameterType.DOUBLE_ARRAY: "double_array",
    EnumParameterType.STRING_ARRAY: "string_array",
}

PAYLOAD_FIELDS: tuple[str, ...] = tuple(_PAYLOAD_FIELDS.values())


__all__ = ["PAYLOAD_FIELDS", "EnumParameterType"]
