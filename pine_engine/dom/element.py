"""
Element implementation for the document tree.
"""

from typing import Dict, List, Optional, Set, Tuple

from .node import Node, NodeType


class Element(Node):
    """
    Element node implementation for the document tree.

    Tag names and attribute names are kept exactly as written; matching
    against them is case-sensitive.
    """

    def __init__(self,
                 tag_name: str,
                 attributes: Optional[Dict[str, str]] = None,
                 child_nodes: Optional[List[Node]] = None):
        """
        Initialize a new Element.

        Args:
            tag_name: Name of the element tag (e.g., "div", "span")
            attributes: Attribute names mapped to their values
            child_nodes: Children of this element, in document order
        """
        super().__init__(NodeType.ELEMENT_NODE, child_nodes)

        self.tag_name = tag_name
        self.node_name = tag_name
        self.attributes: Dict[str, str] = dict(attributes) if attributes else {}

    @property
    def id(self) -> Optional[str]:
        """Get the id attribute of the element, or None if it has none."""
        return self.attributes.get('id')

    @property
    def class_list(self) -> Set[str]:
        """Get the set of classes applied to this element."""
        class_attr = self.attributes.get('class')
        if not class_attr:
            return set()
        return set(class_attr.split())

    def get_attribute(self, name: str) -> Optional[str]:
        """
        Get the value of an attribute.

        Args:
            name: The attribute name

        Returns:
            The attribute value, or None if the attribute is absent
        """
        return self.attributes.get(name)

    def has_attribute(self, name: str) -> bool:
        """Check whether the element carries an attribute."""
        return name in self.attributes

    def format_attributes(self) -> str:
        """
        Format attributes for markup output.

        Each value is wrapped in double quotes, or in single quotes when the
        value itself contains a double quote.

        Returns:
            The attributes, each preceded by a space
        """
        parts = []
        for name, value in self.attributes.items():
            quote = "'" if '"' in value else '"'
            parts.append(f" {name}={quote}{value}{quote}")
        return "".join(parts)

    def _markup(self) -> Tuple[str, str]:
        return f"<{self.tag_name}{self.format_attributes()}>", f"</{self.tag_name}>"

    def _is_same_node_data(self, other: Node) -> bool:
        return super()._is_same_node_data(other) and self.attributes == other.attributes
