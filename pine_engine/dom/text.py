"""
Text node implementation for the document tree.
"""

from typing import Tuple

from .node import Node, NodeType


class Text(Node):
    """
    Text node implementation for the document tree.

    Text is stored exactly as it appeared in the markup; entities are not
    decoded.
    """

    def __init__(self, data: str):
        """
        Initialize a text node.

        Args:
            data: The text content
        """
        super().__init__(NodeType.TEXT_NODE)

        if data is None:
            data = ""

        self.node_name = "#text"
        self.node_value = data
        self.data = data

    def _markup(self) -> Tuple[str, str]:
        return self.data, ""

    def __repr__(self):
        return f"<Text {self.data!r}>"
