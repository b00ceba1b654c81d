"""
Node implementation for the document tree.
This module implements the base Node shared by all document tree node types.
"""

from enum import IntEnum
from typing import Iterator, List, Optional, Tuple, Union


class NodeType(IntEnum):
    """Node types that can appear in a document tree."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3
    COMMENT_NODE = 8
    DOCUMENT_NODE = 9


class Node:
    """
    Base Node implementation for the document tree.

    A node owns its children outright. There are no parent or sibling
    references, so a finished tree can be shared freely between the styled
    tree and layout tree built from it.
    """

    def __init__(self, node_type: NodeType, child_nodes: Optional[List['Node']] = None):
        """
        Initialize a new Node.

        Args:
            node_type: The type of this node
            child_nodes: Children of this node, in document order
        """
        self.node_type = node_type
        self.child_nodes: List['Node'] = list(child_nodes) if child_nodes else []
        self.node_name: str = "#node"
        self.node_value: Optional[str] = None

    @property
    def children(self) -> List['Element']:
        """Get a list of child elements."""
        return [child for child in self.child_nodes if child.node_type == NodeType.ELEMENT_NODE]

    def has_child_nodes(self) -> bool:
        """Check if this node has any child nodes."""
        return len(self.child_nodes) > 0

    def iter_tree(self) -> Iterator['Node']:
        """Iterate over this node and all its descendants in document order."""
        pending: List['Node'] = [self]
        while pending:
            node = pending.pop()
            yield node
            pending.extend(reversed(node.child_nodes))

    @property
    def inner_html(self) -> str:
        """Get the markup for the children of this node."""
        return "".join(child.outer_html for child in self.child_nodes)

    @property
    def outer_html(self) -> str:
        """Get the markup for this node, including the node itself."""
        parts: List[str] = []
        pending: List[Union['Node', str]] = [self]
        while pending:
            item = pending.pop()
            if isinstance(item, str):
                parts.append(item)
                continue
            start_markup, end_markup = item._markup()
            parts.append(start_markup)
            pending.append(end_markup)
            pending.extend(reversed(item.child_nodes))
        return "".join(parts)

    def _markup(self) -> Tuple[str, str]:
        """Get the markup written before and after this node's children."""
        return "", ""

    def is_equal_node(self, other: 'Node') -> bool:
        """
        Check if this node is structurally equal to another node.

        Args:
            other: The node to compare with

        Returns:
            True if the nodes are equal, False otherwise
        """
        pending = [(self, other)]
        while pending:
            mine, theirs = pending.pop()
            if not mine._is_same_node_data(theirs):
                return False
            pending.extend(zip(mine.child_nodes, theirs.child_nodes))
        return True

    def _is_same_node_data(self, other: 'Node') -> bool:
        """Compare everything except the children themselves."""
        return (isinstance(other, Node)
                and self.node_type == other.node_type
                and self.node_name == other.node_name
                and self.node_value == other.node_value
                and len(self.child_nodes) == len(other.child_nodes))

    @property
    def text_content(self) -> str:
        """Get the concatenated text of this node and its descendants."""
        return "".join(node.node_value or "" for node in self.iter_tree()
                       if node.node_type == NodeType.TEXT_NODE)

    def __repr__(self):
        return f"<{type(self).__name__} {self.node_name}>"
