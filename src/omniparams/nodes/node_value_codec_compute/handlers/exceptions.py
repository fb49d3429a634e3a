"""Domain-specific exceptions for the value codec."""

from __future__ import annotations


class ParameterCoercionError(ValueError):
    """Raised when edit text cannot be converted to the target parameter kind.

    Examples:
        - Non-numeric text for an INTEGER parameter in strict mode
        - Byte array elements outside 0..255 (any mode)
        - Editing a value whose type tag is not recognized
    """

    def __init__(self, message: str, *, text: str | None = None) -> None:
        super().__init__(message)
        self.text = text


__all__ = ["ParameterCoercionError"]
