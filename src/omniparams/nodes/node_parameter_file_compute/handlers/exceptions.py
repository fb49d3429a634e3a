"""Domain-specific exceptions for parameter file parsing."""

from __future__ import annotations


class ParameterFileParseError(ValueError):
    """Raised when a parameter file line fits neither accepted form.

    Examples:
        - A ``- item`` line with no preceding ``name:`` block header
        - A line with no ``:`` separator
        - An assignment or block header with an empty name
        - A nested ``ros__parameters:`` section after the header

    Attributes:
        line_number: 1-based line number in the original document.
        line: The offending line after whitespace normalization.
    """

    def __init__(self, message: str, *, line_number: int, line: str) -> None:
        super().__init__(f"line {line_number}: {message}: {line!r}")
        self.line_number = line_number
        self.line = line


__all__ = ["ParameterFileParseError"]
