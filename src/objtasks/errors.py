"""Base error types shared across objtasks."""
from __future__ import annotations


class ObjtasksError(Exception):
    """Base error for all objtasks errors."""


class ParseError(ObjtasksError):
    """Raised when JSON or selector text cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(message)
