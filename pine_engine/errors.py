"""
Error types raised by the Pine engine.

Grammar violations and configuration violations are fatal for the call that
hits them: no partial tree is ever returned.
"""

from typing import Optional


class EngineError(ValueError):
    """Base class for all errors raised by the engine."""


class ParseError(EngineError):
    """Raised when markup or stylesheet text violates the grammar."""

    def __init__(self, message: str, position: Optional[int] = None):
        """
        Initialize a parse error.

        Args:
            message: Description of the violation
            position: Offset into the scanned text where it was detected
        """
        self.position = position
        if position is not None:
            message = f"{message} (at offset {position})"
        super().__init__(message)


class EndOfInputError(ParseError):
    """Raised when the input ends where more text was required."""


class LayoutError(EngineError):
    """Raised when a styled tree cannot be turned into a layout tree."""
