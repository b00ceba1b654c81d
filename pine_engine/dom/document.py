"""
Document implementation for the document tree.
"""

from typing import List, Optional

from ..css.stylesheet import Stylesheet
from .element import Element
from .node import Node, NodeType


class Document(Node):
    """
    Root of a parsed document.

    Besides the top-level nodes, a document carries the stylesheets that were
    harvested from ``<style>`` elements, in the order they appeared.
    """

    def __init__(self,
                 child_nodes: Optional[List[Node]] = None,
                 stylesheets: Optional[List[Stylesheet]] = None):
        """
        Initialize a document.

        Args:
            child_nodes: Top-level nodes, in document order
            stylesheets: Stylesheets harvested while parsing
        """
        super().__init__(NodeType.DOCUMENT_NODE, child_nodes)

        self.node_name = "#document"
        self.stylesheets: List[Stylesheet] = list(stylesheets) if stylesheets else []

    @property
    def document_element(self) -> Optional[Element]:
        """Get the first top-level element, usually <html>."""
        children = self.children
        return children[0] if children else None

    def get_elements_by_tag_name(self, tag_name: str) -> List[Element]:
        """
        Get all elements with the given tag name, in document order.

        Args:
            tag_name: The tag name to look for (exact match)

        Returns:
            The matching elements
        """
        return [node for node in self.iter_tree()
                if node.node_type == NodeType.ELEMENT_NODE and node.tag_name == tag_name]

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        """
        Get the first element with the given id.

        Args:
            element_id: The id to look for

        Returns:
            The element, or None if no element has that id
        """
        for node in self.iter_tree():
            if node.node_type == NodeType.ELEMENT_NODE and node.id == element_id:
                return node
        return None
