# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Text-to-value coercion mode for the value codec."""

from __future__ import annotations

from enum import StrEnum


class EnumCoercionMode(StrEnum):
    """How ``encode_from_text`` treats text that does not parse cleanly.

    Attributes:
        LENIENT: Legacy panel behavior. Non-numeric text becomes 0 and any
            boolean text other than "true" becomes False. Never raises for
            scalar or numeric/boolean array kinds.
        STRICT: Validating behavior. Text that is not a well-formed literal
            of the target type raises ``ParameterCoercionError``.
    """

    LENIENT = "lenient"
    STRICT = "strict"


__all__ = ["EnumCoercionMode"]
