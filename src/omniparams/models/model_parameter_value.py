# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ParameterValue tagged union model.

The wire form (``rcl_interfaces/msg/ParameterValue`` as relayed by a service
bridge) always carries every payload field, with defaults for the inactive
ones. On validation the inactive fields are dropped so that exactly one
payload field is populated for a valid tag, and none for an unrecognized
tag. An inactive field holding a non-default value is an invariant
violation and fails validation.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from omniparams.enums.enum_parameter_type import PAYLOAD_FIELDS, EnumParameterType

ByteValue = Annotated[int, Field(ge=0, le=255)]

# Values the wire uses for payload fields that are not active.
_WIRE_DEFAULTS: tuple[Any, ...] = (None, False, 0, 0.0, "", (), [])

_EMPTY_PAYLOADS: dict[EnumParameterType, Any] = {
    EnumParameterType.BOOL: False,
    EnumParameterType.INTEGER: 0,
    EnumParameterType.DOUBLE: 0.0,
    EnumParameterType.STRING: "",
    EnumParameterType.BYTE_ARRAY: (),
    EnumParameterType.BOOL_ARRAY: (),
    EnumParameterType.INTEGER_ARRAY: (),
    EnumParameterType.DOUBLE_ARRAY: (),
    EnumParameterType.STRING_ARRAY: (),
}


def _is_wire_default(value: Any) -> bool:
    # bool is an int subclass; compare by type as well so True != 1 here.
    return any(type(value) is type(d) and value == d for d in _WIRE_DEFAULTS)


class ModelParameterValue(BaseModel):
    """A typed parameter value: exactly one payload field matches ``type``.

    Attributes:
        type: Raw wire tag. Values outside 1..9 are kept so the value can be
            displayed as invalid rather than rejected.
        bool_value: Payload for BOOL.
        integer_value: Payload for INTEGER.
        double_value: Payload for DOUBLE.
        string_value: Payload for STRING.
        byte_array_value: Payload for BYTE_ARRAY (each element 0..255).
        bool_array_value: Payload for BOOL_ARRAY.
        integer_array_value: Payload for INTEGER_ARRAY.
        double_array_value: Payload for DOUBLE_ARRAY.
        string_array_value: Payload for STRING_ARRAY.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: int = Field(description="Raw ParameterType tag.")
    bool_value: bool | None = None
    integer_value: int | None = None
    double_value: float | None = None
    string_value: str | None = None
    byte_array_value: tuple[ByteValue, ...] | None = None
    bool_array_value: tuple[bool, ...] | None = None
    integer_array_value: tuple[int, ...] | None = None
    double_array_value: tuple[float, ...] | None = None
    string_array_value: tuple[str, ...] | None = None

    @model_validator(mode="before")
    @classmethod
    def _keep_active_payload(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        tag = data.get("type")
        parameter_type = (
            EnumParameterType.from_tag(tag) if isinstance(tag, int) else None
        )
        active = parameter_type.payload_field if parameter_type else None

        cleaned: dict[str, Any] = {"type": int(tag) if isinstance(tag, int) else tag}
        for field_name in PAYLOAD_FIELDS:
            if field_name not in data:
                continue
            value = data[field_name]
            if field_name == active:
                cleaned[field_name] = value
            elif not _is_wire_default(value):
                raise ValueError(
                    f"payload field {field_name!r} is populated but type tag is {tag!r}"
                )
        if parameter_type is not None and cleaned.get(active) is None:
            cleaned[active] = _EMPTY_PAYLOADS[parameter_type]
        return cleaned

    @classmethod
    def of(cls, parameter_type: EnumParameterType, payload: Any) -> ModelParameterValue:
        """Build a value of the given kind from a native payload."""
        return cls.model_validate(
            {"type": int(parameter_type), parameter_type.payload_field: payload}
        )

    @property
    def parameter_type(self) -> EnumParameterType | None:
        """The recognized kind, or None for an invalid tag."""
        return EnumParameterType.from_tag(self.type)

    @property
    def is_valid(self) -> bool:
        return self.parameter_type is not None

    @property
    def payload(self) -> Any:
        """The active payload, or None when the tag is invalid."""
        parameter_type = self.parameter_type
        if parameter_type is None:
            return None
        return getattr(self, parameter_type.payload_field)

    def to_wire(self) -> dict[str, Any]:
        """Return the request form: the tag plus only the active field."""
        wire: dict[str, Any] = {"type": self.type}
        parameter_type = self.parameter_type
        if parameter_type is not None:
            payload = self.payload
            wire[parameter_type.payload_field] = (
                list(payload) if isinstance(payload, tuple) else payload
            )
        return wire


__all__ = ["ModelParameterValue"]
