"""
Comment node implementation for the document tree.
"""

from typing import Tuple

from .node import Node, NodeType


class Comment(Node):
    """Comment node implementation for the document tree."""

    def __init__(self, data: str):
        """
        Initialize a comment node.

        Args:
            data: The comment text, without the delimiters
        """
        super().__init__(NodeType.COMMENT_NODE)

        if data is None:
            data = ""

        self.node_name = "#comment"
        self.node_value = data
        self.data = data

    def _markup(self) -> Tuple[str, str]:
        return f"<!--{self.data}-->", ""

    def __repr__(self):
        return f"<Comment {self.data!r}>"
