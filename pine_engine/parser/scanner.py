"""
Character scanner shared by the markup and stylesheet parsers.
"""

from typing import Callable

from ..errors import EndOfInputError, ParseError


class Scanner:
    """
    Forward-only cursor over a fixed source string.

    The position is a code-point offset and never decreases. Callers that
    need more than one character of lookahead use ``starts_with``.
    """

    def __init__(self, source: str):
        """
        Initialize a scanner.

        Args:
            source: The text to scan
        """
        self.source = source
        self.position = 0

    def at_end(self) -> bool:
        """Check whether all input has been consumed."""
        return self.position >= len(self.source)

    def peek(self) -> str:
        """
        Get the next character without consuming it.

        Returns:
            The next character

        Raises:
            EndOfInputError: If the scanner is at the end of input
        """
        if self.at_end():
            raise EndOfInputError("Unexpected end of input", self.position)
        return self.source[self.position]

    def consume(self) -> str:
        """
        Consume and return the next character.

        Raises:
            EndOfInputError: If the scanner is at the end of input
        """
        char = self.peek()
        self.position += 1
        return char

    def consume_while(self, predicate: Callable[[str], bool]) -> str:
        """
        Consume characters while they satisfy a predicate.

        Args:
            predicate: Test applied to each upcoming character

        Returns:
            The consumed text, possibly empty
        """
        start = self.position
        end = len(self.source)
        while self.position < end and predicate(self.source[self.position]):
            self.position += 1
        return self.source[start:self.position]

    def consume_whitespace(self) -> str:
        """Consume and return a run of whitespace."""
        return self.consume_while(str.isspace)

    def consume_until(self, literal: str) -> str:
        """
        Consume everything up to (not including) the next occurrence of a literal.

        Args:
            literal: The terminator to stop in front of

        Returns:
            The consumed text

        Raises:
            EndOfInputError: If the literal never appears
        """
        index = self.source.find(literal, self.position)
        if index < 0:
            self.position = len(self.source)
            raise EndOfInputError(f"Expected {literal!r} before end of input", self.position)
        text = self.source[self.position:index]
        self.position = index
        return text

    def starts_with(self, literal: str) -> bool:
        """Check whether the remaining input starts with a literal."""
        return self.source.startswith(literal, self.position)

    def expect(self, literal: str) -> None:
        """
        Consume an exact literal.

        Args:
            literal: The text that must come next

        Raises:
            ParseError: If the upcoming text differs
            EndOfInputError: If the input ends first
        """
        for expected in literal:
            position = self.position
            found = self.consume()
            if found != expected:
                raise ParseError(f"Expected {expected!r} but found {found!r}", position)
