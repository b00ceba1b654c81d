"""
Styled tree nodes.
"""

from enum import Enum
from typing import Dict, List, Optional

from ..css import Keyword, Value
from ..dom import Node

PropertyMap = Dict[str, Value]


class DisplayType(Enum):
    """Values of the CSS display property understood by the layout builder."""
    BLOCK = "block"
    INLINE = "inline"
    NONE = "none"


class StyledNode:
    """
    A document node paired with the property values that apply to it.

    ``node`` is the document node itself, not a copy; the styled tree is
    only valid for as long as the document tree is left unchanged.
    """

    def __init__(self,
                 node: Node,
                 specified_values: Optional[PropertyMap] = None,
                 children: Optional[List['StyledNode']] = None):
        self.node = node
        self.specified_values: PropertyMap = specified_values if specified_values is not None else {}
        self.children: List['StyledNode'] = children if children is not None else []

    def value(self, name: str) -> Optional[Value]:
        """
        Get the specified value of a property.

        Args:
            name: The property name

        Returns:
            The value, or None if no rule set the property
        """
        return self.specified_values.get(name)

    def display(self) -> DisplayType:
        """Get the display type; anything other than block or none is inline."""
        value = self.value('display')
        if isinstance(value, Keyword):
            if value.name == 'block':
                return DisplayType.BLOCK
            if value.name == 'none':
                return DisplayType.NONE
        return DisplayType.INLINE

    def __repr__(self):
        return f"<StyledNode {self.node.node_name} ({len(self.specified_values)} properties)>"
