# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handler for ValueCodecCompute: ParameterValue <-> editable text.

Display (total, never raises):
    BOOL            true / false
    INTEGER         123
    DOUBLE          5.0, Infinity, NaN
    STRING          passthrough
    *_ARRAY         [e0,e1,...]  (comma-joined, no spaces)
    invalid tag     "error, invalid type..."
    absent value    "undefined"

Encode (the current value fixes the target kind):
    ""              -> None (no edit; never transmitted)
    BOOL            trimmed, case-insensitive "true" -> True
    INTEGER/DOUBLE  unary-plus style numeric coercion
    STRING          passthrough, no trimming
    BYTE_ARRAY      "[1,2,255]" or "0x0102ff"
    *_ARRAY         whitespace stripped, optional [ ], split on ","

Coercion modes:
    LENIENT  legacy behavior: bad numbers become 0, bad booleans become False.
    STRICT   malformed literals raise ParameterCoercionError.

Byte arrays are validated in both modes.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from typing import Any

from omniparams.constants import (
    BYTE_MAX,
    DISPLAY_INVALID_TYPE,
    DISPLAY_UNDEFINED,
    INT64_MAX,
    INT64_MIN,
    TYPE_NAME_INVALID,
    TYPE_NAME_UNDEFINED,
)
from omniparams.enums.enum_coercion_mode import EnumCoercionMode
from omniparams.enums.enum_parameter_type import EnumParameterType
from omniparams.models.model_parameter_value import ModelParameterValue
from omniparams.nodes.node_value_codec_compute.handlers.exceptions import (
    ParameterCoercionError,
)

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

_WHITESPACE = re.compile(r"\s+")
_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")
_DIGITS = re.compile(r"[0-9]+")
_DECIMAL_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_PREFIXED_INT = re.compile(r"0([xXoObB])([0-9a-fA-F]+)")
_INFINITY = re.compile(r"([+-]?)Infinity")
_HEX_BYTES = re.compile(r"0[xX]((?:[0-9a-fA-F]{2})*)")

_PREFIX_BASES = {"x": 16, "o": 8, "b": 2}

_BOOL_LITERALS = {"true": True, "false": False}


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------


def _format_double(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return repr(value)


def _format_scalar(parameter_type: EnumParameterType, value: Any) -> str:
    if parameter_type in (EnumParameterType.BOOL, EnumParameterType.BOOL_ARRAY):
        return "true" if value else "false"
    if parameter_type in (EnumParameterType.DOUBLE, EnumParameterType.DOUBLE_ARRAY):
        return _format_double(float(value))
    return str(value)


def decode_for_display(value: ModelParameterValue | None) -> str:
    """Render a parameter value as human-editable text.

    Never raises. Arrays render as ``[e0,e1,...]`` using the scalar rule
    of their element kind.

    Args:
        value: The value to render, or None when the value is absent.

    Returns:
        Display text, ``"undefined"`` for None, or the invalid-type sentinel
        for an unrecognized tag.
    """
    if value is None:
        return DISPLAY_UNDEFINED

    parameter_type = value.parameter_type
    if parameter_type is None:
        return DISPLAY_INVALID_TYPE

    payload = value.payload
    if parameter_type.is_array:
        elements = (_format_scalar(parameter_type, item) for item in payload)
        return f"[{','.join(elements)}]"
    return _format_scalar(parameter_type, payload)


def parameter_type_name(value: ModelParameterValue | None) -> str:
    """Return the type column text for a value (e.g. ``"double_array"``)."""
    if value is None:
        return TYPE_NAME_UNDEFINED
    parameter_type = value.parameter_type
    if parameter_type is None:
        return TYPE_NAME_INVALID
    return parameter_type.type_name


# ---------------------------------------------------------------------------
# Scalar coercion
# ---------------------------------------------------------------------------


def _lenient_number(text: str) -> int | float:
    """Unary-plus style coercion: invalid text yields 0.

    Integer literals (decimal or 0x/0o/0b prefixed) are returned as exact
    ints so 64-bit values do not lose precision through float.
    """
    stripped = text.strip()
    if not stripped:
        return 0
    if _DECIMAL_INT.fullmatch(stripped):
        return int(stripped)
    if _DECIMAL_NUMBER.fullmatch(stripped):
        return float(stripped)
    prefixed = _PREFIXED_INT.fullmatch(stripped)
    if prefixed:
        try:
            return int(prefixed.group(2), _PREFIX_BASES[prefixed.group(1).lower()])
        except ValueError:
            return 0
    infinity = _INFINITY.fullmatch(stripped)
    if infinity:
        return -math.inf if infinity.group(1) == "-" else math.inf
    return 0


def _to_bool(text: str, mode: EnumCoercionMode) -> bool:
    normalized = text.strip().lower()
    if mode is EnumCoercionMode.STRICT and normalized not in _BOOL_LITERALS:
        raise ParameterCoercionError(
            f"Expected 'true' or 'false', got {text!r}", text=text
        )
    return normalized == "true"


def _to_int(text: str, mode: EnumCoercionMode) -> int:
    if mode is EnumCoercionMode.STRICT:
        stripped = text.strip()
        if not _DECIMAL_INT.fullmatch(stripped):
            raise ParameterCoercionError(f"Expected an integer, got {text!r}", text=text)
        result = int(stripped)
        if not INT64_MIN <= result <= INT64_MAX:
            raise ParameterCoercionError(
                f"Integer {text!r} is outside the signed 64-bit range", text=text
            )
        return result

    number = _lenient_number(text)
    if isinstance(number, float):
        if not math.isfinite(number):
            return 0
        number = int(number)
    if not INT64_MIN <= number <= INT64_MAX:
        return 0
    return number


def _to_float(text: str, mode: EnumCoercionMode) -> float:
    if mode is EnumCoercionMode.STRICT:
        stripped = text.strip()
        # float() also accepts digit separators; parameter files do not.
        if "_" in stripped:
            raise ParameterCoercionError(f"Expected a number, got {text!r}", text=text)
        try:
            return float(stripped)
        except ValueError as exc:
            raise ParameterCoercionError(
                f"Expected a number, got {text!r}", text=text
            ) from exc

    number = _lenient_number(text)
    try:
        return float(number)
    except OverflowError:
        return math.inf


def _to_str(text: str, mode: EnumCoercionMode) -> str:
    return text


# ---------------------------------------------------------------------------
# Array coercion
# ---------------------------------------------------------------------------


def _array_body(text: str) -> str:
    """Strip all whitespace, then one optional leading '[' and trailing ']'."""
    body = _WHITESPACE.sub("", text)
    if body.startswith("["):
        body = body[1:]
    if body.endswith("]"):
        body = body[:-1]
    return body


def _split_array(text: str) -> list[str]:
    body = _array_body(text)
    if not body:
        return []
    return body.split(",")


def _to_bytes(text: str) -> tuple[int, ...]:
    compact = _WHITESPACE.sub("", text)
    hex_match = _HEX_BYTES.fullmatch(compact)
    if hex_match:
        return tuple(bytes.fromhex(hex_match.group(1)))
    if compact.lower().startswith("0x"):
        raise ParameterCoercionError(
            f"Hex byte text must have an even number of hex digits, got {text!r}",
            text=text,
        )

    result: list[int] = []
    for element in _split_array(compact):
        if not _DIGITS.fullmatch(element) or int(element) > BYTE_MAX:
            raise ParameterCoercionError(
                f"Byte values must be integers in 0..{BYTE_MAX}, got {element!r}",
                text=text,
            )
        result.append(int(element))
    return tuple(result)


_SCALAR_COERCERS: dict[EnumParameterType, Callable[[str, EnumCoercionMode], Any]] = {
    EnumParameterType.BOOL: _to_bool,
    EnumParameterType.INTEGER: _to_int,
    EnumParameterType.DOUBLE: _to_float,
    EnumParameterType.STRING: _to_str,
}

_ELEMENT_COERCERS: dict[EnumParameterType, Callable[[str, EnumCoercionMode], Any]] = {
    EnumParameterType.BOOL_ARRAY: _to_bool,
    EnumParameterType.INTEGER_ARRAY: _to_int,
    EnumParameterType.DOUBLE_ARRAY: _to_float,
    EnumParameterType.STRING_ARRAY: _to_str,
}


# ---------------------------------------------------------------------------
# Encode
# ---------------------------------------------------------------------------


def encode_from_text(
    current: ModelParameterValue,
    text: str,
    mode: EnumCoercionMode = EnumCoercionMode.LENIENT,
) -> ModelParameterValue | None:
    """Build a new value of the same kind as ``current`` from edit text.

    Args:
        current: The parameter's current value; its tag fixes the result kind.
        text: Raw text typed by the operator or read from a parameter file.
        mode: LENIENT keeps the legacy silent coercions, STRICT validates.

    Returns:
        The new value, or None when ``text`` is empty. None is the no-op
        marker and must not be transmitted.

    Raises:
        ParameterCoercionError: If ``current`` has an unrecognized tag, if
            byte array text is malformed, or (STRICT only) if the text is
            not a valid literal of the target kind.
    """
    if text == "":
        return None

    parameter_type = current.parameter_type
    if parameter_type is None:
        raise ParameterCoercionError(
            f"Cannot edit a value with unrecognized type tag {current.type}",
            text=text,
        )

    if parameter_type is EnumParameterType.BYTE_ARRAY:
        return ModelParameterValue.of(parameter_type, _to_bytes(text))

    scalar = _SCALAR_COERCERS.get(parameter_type)
    if scalar is not None:
        return ModelParameterValue.of(parameter_type, scalar(text, mode))

    element = _ELEMENT_COERCERS[parameter_type]
    payload = tuple(element(item, mode) for item in _split_array(text))
    return ModelParameterValue.of(parameter_type, payload)


__all__ = [
    "decode_for_display",
    "encode_from_text",
    "parameter_type_name",
]
