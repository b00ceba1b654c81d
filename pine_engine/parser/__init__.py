"""
Parsers for the Pine engine.
This package turns markup and stylesheet text into document trees and stylesheets.
"""

from .scanner import Scanner
from .css_parser import CSSParser, parse_stylesheet
from .html_parser import HTMLParser, parse_document

__all__ = [
    'Scanner', 'CSSParser', 'parse_stylesheet', 'HTMLParser', 'parse_document'
]
