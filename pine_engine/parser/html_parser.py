"""
Markup parser.

A parser for a small, strict subset of HTML: elements with
quoted attributes, text and comments. Every element needs an explicit closing
tag; nothing is auto-closed or repaired. The bodies of ``<style>`` elements
are handed to the stylesheet parser and collected on the Document.
"""

import logging
import string
from typing import Dict, List, Tuple

from ..css import Stylesheet
from ..dom import Comment, Document, Element, Node, Text
from ..errors import ParseError
from .css_parser import parse_stylesheet
from .scanner import Scanner

logger = logging.getLogger(__name__)

TAG_NAME_CHARS = frozenset(string.ascii_letters + string.digits)
ATTRIBUTE_NAME_CHARS = TAG_NAME_CHARS | frozenset('-_')
QUOTE_CHARS = ('"', "'")


class HTMLParser:
    """
    Stack-based parser for markup.

    Each parser owns a single scanner and is used for a single source text.
    """

    def __init__(self, source: str):
        """
        Initialize the HTML parser.

        Args:
            source: Markup text to parse
        """
        self.scanner = Scanner(source)
        self.stylesheets: List[Stylesheet] = []

    def parse(self) -> Document:
        """
        Parse the whole source into a document.

        Returns:
            The Document, carrying the harvested stylesheets

        Raises:
            ParseError: If the source is malformed
        """
        nodes = self.parse_nodes()
        if not self.scanner.at_end():
            raise ParseError("Unexpected closing tag at top level", self.scanner.position)
        return Document(nodes, self.stylesheets)

    def parse_nodes(self) -> List[Node]:
        """
        Parse sibling nodes up to an unmatched closing tag or the end of input.

        Open elements are kept on an explicit stack rather than the call
        stack, so nesting depth is bounded only by available memory.

        Raises:
            ParseError: If a closing tag does not match its opening tag
            EndOfInputError: If the input ends inside an open element
        """
        nodes: List[Node] = []
        open_elements: List[Tuple[str, Dict[str, str], List[Node]]] = []
        siblings = nodes

        while True:
            self.scanner.consume_whitespace()
            if self.scanner.at_end():
                if open_elements:
                    # Reports the missing closing tag as an end-of-input error.
                    self.scanner.expect('</')
                break

            if self.scanner.starts_with('</'):
                if not open_elements:
                    break
                tag_name, attributes, children = open_elements.pop()
                self.parse_closing_tag(tag_name)
                siblings = open_elements[-1][2] if open_elements else nodes
                siblings.append(Element(tag_name, attributes, children))
            elif self._at_style_element():
                self.stylesheets.append(self.parse_style_element())
            elif self.scanner.starts_with('<!--'):
                siblings.append(self.parse_comment())
            elif self.scanner.peek() == '<':
                tag_name, attributes = self.parse_start_tag()
                siblings = []
                open_elements.append((tag_name, attributes, siblings))
            else:
                siblings.append(self.parse_text())

        return nodes

    def parse_text(self) -> Text:
        """Parse a text run up to the next '<'."""
        return Text(self.scanner.consume_while(lambda char: char != '<'))

    def parse_comment(self) -> Comment:
        """Parse a ``<!-- ... -->`` comment."""
        self.scanner.expect('<!--')
        data = self.scanner.consume_until('-->')
        self.scanner.expect('-->')
        return Comment(data)

    def parse_start_tag(self) -> Tuple[str, Dict[str, str]]:
        """Parse ``<name attr="value" ...>`` and return the name and attributes."""
        self.scanner.expect('<')
        tag_name = self.parse_tag_name()
        attributes = self.parse_attributes()
        self.scanner.expect('>')
        return tag_name, attributes

    def parse_closing_tag(self, tag_name: str) -> None:
        """
        Parse the closing tag of an open element.

        Args:
            tag_name: Name of the element being closed

        Raises:
            ParseError: If the closing tag names a different element
        """
        self.scanner.expect('</')
        position = self.scanner.position
        closing_name = self.scanner.consume_while(lambda char: char in TAG_NAME_CHARS)
        if closing_name != tag_name:
            raise ParseError(f"Closing tag </{closing_name}> does not match <{tag_name}>", position)
        self.scanner.expect('>')

    def parse_tag_name(self) -> str:
        """
        Parse a non-empty tag name made of ASCII letters and digits.

        Raises:
            ParseError: If no tag name comes next
        """
        return self._parse_name(TAG_NAME_CHARS, "tag name")

    def parse_attributes(self) -> Dict[str, str]:
        """Parse attributes up to the '>' that ends the start tag."""
        attributes = {}
        while True:
            self.scanner.consume_whitespace()
            if self.scanner.peek() == '>':
                break
            name, value = self.parse_attribute()
            attributes[name] = value
        return attributes

    def parse_attribute(self) -> Tuple[str, str]:
        """Parse a single ``name="value"`` pair."""
        name = self._parse_name(ATTRIBUTE_NAME_CHARS, "attribute name")
        self.scanner.expect('=')
        value = self.parse_attribute_value()
        return name, value

    def parse_attribute_value(self) -> str:
        """
        Parse a quoted attribute value.

        Raises:
            ParseError: If the value is not quoted
        """
        position = self.scanner.position
        open_quote = self.scanner.consume()
        if open_quote not in QUOTE_CHARS:
            raise ParseError(f"Expected quoted attribute value but found {open_quote!r}", position)
        value = self.scanner.consume_while(lambda char: char != open_quote)
        self.scanner.expect(open_quote)
        return value

    def parse_style_element(self) -> Stylesheet:
        """
        Parse a ``<style>`` element and return its body as a stylesheet.

        The body is taken verbatim up to the literal ``</style>``.
        """
        self.scanner.expect('<style')
        # Attributes such as type="text/css" are accepted and ignored.
        self.parse_attributes()
        self.scanner.expect('>')

        source = self.scanner.consume_until('</style>')
        self.scanner.expect('</style>')

        stylesheet = parse_stylesheet(source)
        logger.debug(f"Harvested stylesheet #{len(self.stylesheets) + 1} "
                     f"with {len(stylesheet.rules)} rules")
        return stylesheet

    def _at_style_element(self) -> bool:
        """Check whether a <style> start tag comes next."""
        if not self.scanner.starts_with('<style'):
            return False
        after = self.scanner.position + len('<style')
        source = self.scanner.source
        return after < len(source) and (source[after] == '>' or source[after].isspace())

    def _parse_name(self, allowed: frozenset, what: str) -> str:
        position = self.scanner.position
        name = self.scanner.consume_while(lambda char: char in allowed)
        if not name:
            found = 'end of input' if self.scanner.at_end() else repr(self.scanner.peek())
            raise ParseError(f"Expected {what} but found {found}", position)
        return name


def parse_document(source: str) -> Document:
    """
    Parse markup text.

    Args:
        source: The markup text

    Returns:
        The Document; stylesheets from <style> elements are on ``Document.stylesheets``

    Raises:
        ParseError: If the text is malformed
    """
    document = HTMLParser(source).parse()
    logger.debug(f"Parsed document with {len(document.child_nodes)} top-level nodes "
                 f"and {len(document.stylesheets)} stylesheets")
    return document
