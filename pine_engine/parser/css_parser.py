"""
Stylesheet parser.

Parses the small subset of CSS the engine understands into a Stylesheet:
simple selectors, and declarations whose values are lengths, hex colors or
keywords. Any grammar violation raises ParseError; no partial stylesheet is
produced.
"""

import logging
import string
from typing import List, Tuple

from ..css import (Color, Declaration, Keyword, Length, Rule, SimpleSelector,
                   Stylesheet, Unit, Value)
from ..errors import ParseError
from .scanner import Scanner

logger = logging.getLogger(__name__)

IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + '-_')
HEX_DIGITS = frozenset(string.hexdigits)
NUMBER_CHARS = frozenset(string.digits + '.')


def is_identifier_char(char: str) -> bool:
    """Check whether a character may appear in an identifier."""
    return char in IDENTIFIER_CHARS


class CSSParser:
    """
    Recursive-descent parser for stylesheets.

    Each parser owns a single scanner and is used for a single source text.
    """

    def __init__(self, source: str):
        """
        Initialize the CSS parser.

        Args:
            source: Stylesheet text to parse
        """
        self.scanner = Scanner(source)

    def parse(self) -> Stylesheet:
        """
        Parse the whole source into a stylesheet.

        Returns:
            The parsed stylesheet

        Raises:
            ParseError: If the source is malformed
        """
        return Stylesheet(self.parse_rules())

    def parse_rules(self) -> List[Rule]:
        """Parse rules until the end of input."""
        rules = []
        while True:
            self.skip_whitespace_and_comments()
            if self.scanner.at_end():
                break
            rules.append(self.parse_rule())
        return rules

    def parse_rule(self) -> Rule:
        """Parse a selector list and its declaration block."""
        selectors = self.parse_selectors()
        declarations = self.parse_declarations()
        return Rule(selectors, declarations)

    def skip_whitespace_and_comments(self) -> None:
        """Skip any run of whitespace and /* ... */ comments."""
        self.scanner.consume_whitespace()
        while self.scanner.starts_with('/*'):
            self.scanner.expect('/*')
            self.scanner.consume_until('*/')
            self.scanner.expect('*/')
            self.scanner.consume_whitespace()

    def parse_identifier(self) -> str:
        """
        Parse a non-empty identifier.

        Raises:
            ParseError: If no identifier character comes next
        """
        position = self.scanner.position
        identifier = self.scanner.consume_while(is_identifier_char)
        if not identifier:
            found = 'end of input' if self.scanner.at_end() else repr(self.scanner.peek())
            raise ParseError(f"Expected identifier but found {found}", position)
        return identifier

    def parse_selectors(self) -> List[SimpleSelector]:
        """
        Parse a comma-separated selector list up to the opening brace.

        The list is returned sorted by descending specificity.
        """
        selectors = []
        while True:
            selectors.append(self.parse_simple_selector())
            self.skip_whitespace_and_comments()

            position = self.scanner.position
            char = self.scanner.peek()
            if char == ',':
                self.scanner.consume()
                self.skip_whitespace_and_comments()
            elif char == '{':
                break
            else:
                raise ParseError(f"Unexpected character {char!r} in selector list", position)

        selectors.sort(key=lambda selector: selector.specificity(), reverse=True)
        return selectors

    def parse_simple_selector(self) -> SimpleSelector:
        """Parse one simple selector such as ``div#main.note`` or ``*``."""
        selector = SimpleSelector()

        while not self.scanner.at_end():
            char = self.scanner.peek()
            if char == '#':
                self.scanner.consume()
                selector.id = self.parse_identifier()
            elif char == '.':
                self.scanner.consume()
                selector.classes.append(self.parse_identifier())
            elif char == '*':
                self.scanner.consume()
            elif is_identifier_char(char):
                selector.tag_name = self.parse_identifier()
            else:
                break

        return selector

    def parse_declarations(self) -> List[Declaration]:
        """Parse a ``{ ... }`` declaration block."""
        self.scanner.expect('{')

        declarations = []
        while True:
            self.skip_whitespace_and_comments()
            if self.scanner.peek() == '}':
                self.scanner.consume()
                break
            declarations.append(self.parse_declaration())

        return declarations

    def parse_declaration(self) -> Declaration:
        """Parse a single ``name: value;`` declaration."""
        name = self.parse_identifier()

        self.skip_whitespace_and_comments()
        self.scanner.expect(':')
        self.skip_whitespace_and_comments()

        value = self.parse_value()

        self.skip_whitespace_and_comments()
        self.scanner.expect(';')

        return Declaration(name, value)

    def parse_value(self) -> Value:
        """Parse a length, a hex color or a keyword."""
        char = self.scanner.peek()
        if char in string.digits:
            return self.parse_length()
        elif char == '#':
            return self.parse_color()
        else:
            return Keyword(self.parse_identifier())

    def parse_length(self) -> Length:
        """Parse a number followed by a unit, e.g. ``23.5%``."""
        value = self.parse_float()
        unit, suffix = self.parse_unit()
        return Length(value, unit, suffix)

    def parse_float(self) -> float:
        """
        Parse the numeric part of a length.

        Raises:
            ParseError: If the digits and dots do not form a number
        """
        position = self.scanner.position
        text = self.scanner.consume_while(lambda char: char in NUMBER_CHARS)
        try:
            return float(text)
        except ValueError:
            raise ParseError(f"Invalid number {text!r}", position) from None

    def parse_unit(self) -> Tuple[Unit, str]:
        """
        Parse a unit suffix.

        Returns:
            The unit, or Unit.UNKNOWN for an unrecognised suffix, and the suffix as written
        """
        suffix = self.scanner.consume_while(
            lambda char: not char.isspace() and char not in ';}/')
        unit = Unit.from_suffix(suffix)
        if unit is Unit.UNKNOWN:
            logger.debug(f"Unknown length unit {suffix!r}")
        return unit, suffix

    def parse_color(self) -> Color:
        """Parse a ``#rrggbb`` color; alpha is always 255."""
        self.scanner.expect('#')
        return Color(self.parse_hex_pair(), self.parse_hex_pair(), self.parse_hex_pair(), 255)

    def parse_hex_pair(self) -> int:
        """
        Parse two hexadecimal digits.

        Raises:
            ParseError: If either character is not a hex digit
        """
        position = self.scanner.position
        pair = self.scanner.consume() + self.scanner.consume()
        if not all(char in HEX_DIGITS for char in pair):
            raise ParseError(f"Invalid hex color component {pair!r}", position)
        return int(pair, 16)


def parse_stylesheet(source: str) -> Stylesheet:
    """
    Parse stylesheet text.

    Args:
        source: The stylesheet text

    Returns:
        The parsed stylesheet

    Raises:
        ParseError: If the text is malformed
    """
    stylesheet = CSSParser(source).parse()
    logger.debug(f"Parsed stylesheet with {len(stylesheet.rules)} rules")
    return stylesheet
