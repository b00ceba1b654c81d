"""
Core engine implementation.

This module provides the RenderEngine class that runs markup through the
whole pipeline: parsing, style resolution and layout-tree construction.
"""

import logging
from typing import Optional

from pine_engine.css import Stylesheet
from pine_engine.dom import Document
from pine_engine.layout import LayoutBox, build_layout_tree
from pine_engine.parser import parse_document, parse_stylesheet
from pine_engine.style import StyledNode, build_styled_tree
from pine_engine.utils.config import Config
from pine_engine.utils.logging import PerformanceLogger

logger = logging.getLogger(__name__)


class RenderEngine:
    """
    Runs markup through the parse, style and layout stages.

    The results of the most recent ``load_html`` call are kept on the engine.
    Each stage produces a new tree; a failing stage raises and leaves the
    results of the previous call untouched.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the engine.

        Args:
            config: Configuration to read engine settings from
        """
        self.config = config
        self.performance = PerformanceLogger(logger, "RenderEngine")

        self.document: Optional[Document] = None
        self.stylesheet: Optional[Stylesheet] = None
        self.styled_tree: Optional[StyledNode] = None
        self.layout_tree: Optional[LayoutBox] = None

        logger.debug("Render engine initialized")

    def load_css(self, source: str) -> Stylesheet:
        """
        Parse stylesheet text.

        Args:
            source: The stylesheet text

        Returns:
            The parsed stylesheet
        """
        self.performance.start("parse_stylesheet")
        stylesheet = parse_stylesheet(source)
        self.performance.end("parse_stylesheet")
        return stylesheet

    def load_html(self, source: str, stylesheet: Optional[Stylesheet] = None) -> LayoutBox:
        """
        Run markup through the whole pipeline.

        Args:
            source: The markup text
            stylesheet: Stylesheet to apply instead of one harvested from <style>

        Returns:
            The root layout box

        Raises:
            ParseError: If the markup or an embedded stylesheet is malformed
            LayoutError: If the root node has display: none
        """
        self.performance.start("parse_document")
        document = parse_document(source)
        self.performance.end("parse_document")

        if stylesheet is None:
            stylesheet = self.select_stylesheet(document)

        self.performance.start("build_styled_tree")
        styled_tree = build_styled_tree(document, stylesheet)
        self.performance.end("build_styled_tree")

        self.performance.start("build_layout_tree")
        layout_tree = build_layout_tree(styled_tree)
        self.performance.end("build_layout_tree")

        self.document = document
        self.stylesheet = stylesheet
        self.styled_tree = styled_tree
        self.layout_tree = layout_tree

        logger.info(f"Rendered document with {len(document.stylesheets)} embedded stylesheets "
                    f"and {len(stylesheet.rules)} active rules")
        return layout_tree

    def select_stylesheet(self, document: Document) -> Stylesheet:
        """
        Pick the harvested stylesheet to apply to a document.

        The index comes from the ``engine.stylesheet_index`` setting. An
        empty stylesheet is used when the document has no stylesheet at that
        index.

        Args:
            document: The parsed document

        Returns:
            The stylesheet to apply
        """
        index = self.config.get_int("engine.stylesheet_index", 0) if self.config else 0
        if 0 <= index < len(document.stylesheets):
            return document.stylesheets[index]

        if document.stylesheets:
            logger.warning(f"No stylesheet at index {index}; "
                           f"document has {len(document.stylesheets)}")
        return Stylesheet()
