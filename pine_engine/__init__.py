"""
Pine Engine - a minimal document-rendering front end in Python.

Turns markup and stylesheet text into a tree of layout boxes.
"""

from pine_engine.core import RenderEngine
from pine_engine.errors import EngineError, ParseError, EndOfInputError, LayoutError
from pine_engine.parser import parse_document, parse_stylesheet
from pine_engine.style import build_styled_tree
from pine_engine.layout import build_layout_tree

# Package information
__version__ = "0.1.0"
__author__ = "Pine Engine Team"
__description__ = "A minimal document-rendering front end in Python"

__all__ = [
    'RenderEngine',
    'EngineError', 'ParseError', 'EndOfInputError', 'LayoutError',
    'parse_document', 'parse_stylesheet', 'build_styled_tree', 'build_layout_tree',
]
