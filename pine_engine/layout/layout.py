"""
Layout tree construction.

Turns a styled tree into a tree of block, inline and anonymous boxes. Inline
children of a block box are grouped into anonymous block boxes; consecutive
inline children share one anonymous box. Nodes with ``display: none`` are
dropped together with their descendants.
"""

import logging
from enum import Enum
from typing import List, Optional

from ..errors import LayoutError
from ..style import DisplayType, StyledNode
from .box_metrics import BoxMetrics

logger = logging.getLogger(__name__)


class BoxType(Enum):
    """Kinds of layout box."""
    BLOCK_NODE = "block"
    INLINE_NODE = "inline"
    ANONYMOUS_BLOCK = "anonymous"


class LayoutBox:
    """
    Layout box for a styled node.

    Anonymous boxes have no styled node.
    """

    def __init__(self, box_type: BoxType, styled_node: Optional[StyledNode] = None):
        """
        Initialize a layout box.

        Args:
            box_type: The kind of box
            styled_node: The styled node this box was generated for
        """
        self.box_type = box_type
        self.styled_node = styled_node
        self.dimensions = BoxMetrics()
        self.children: List['LayoutBox'] = []

    def add_child(self, child: 'LayoutBox') -> None:
        """
        Add a child layout box.

        Args:
            child: The child layout box to add
        """
        self.children.append(child)

    def get_inline_container(self) -> 'LayoutBox':
        """
        Get the box that new inline children should be added to.

        Inline and anonymous boxes hold inline children themselves. A block
        box reuses its trailing anonymous box, creating one if the last child
        is anything else.
        """
        if self.box_type in (BoxType.INLINE_NODE, BoxType.ANONYMOUS_BLOCK):
            return self

        if not self.children or self.children[-1].box_type != BoxType.ANONYMOUS_BLOCK:
            self.add_child(LayoutBox(BoxType.ANONYMOUS_BLOCK))
        return self.children[-1]

    def __repr__(self):
        if self.styled_node is None:
            return f"<LayoutBox {self.box_type.name}>"
        return f"<LayoutBox {self.box_type.name} {self.styled_node.node.node_name}>"


def build_layout_tree(styled_node: StyledNode) -> LayoutBox:
    """
    Build the layout tree for a styled tree.

    Args:
        styled_node: The root of the styled tree

    Returns:
        The root layout box

    Raises:
        LayoutError: If the root has ``display: none``
    """
    display = styled_node.display()
    if display == DisplayType.NONE:
        raise LayoutError(f"Root node {styled_node.node.node_name} has display: none")
    return _build_box(styled_node, display)


def _build_box(styled_node: StyledNode, display: DisplayType) -> LayoutBox:
    root = _new_box(styled_node, display)
    pending = [root]
    while pending:
        box = pending.pop()
        for child in box.styled_node.children:
            child_display = child.display()
            if child_display == DisplayType.NONE:
                logger.debug(f"Skipping {child.node.node_name} subtree with display: none")
                continue

            child_box = _new_box(child, child_display)
            if child_display == DisplayType.BLOCK:
                box.add_child(child_box)
            else:
                box.get_inline_container().add_child(child_box)
            pending.append(child_box)

    return root


def _new_box(styled_node: StyledNode, display: DisplayType) -> LayoutBox:
    if display == DisplayType.BLOCK:
        return LayoutBox(BoxType.BLOCK_NODE, styled_node)
    return LayoutBox(BoxType.INLINE_NODE, styled_node)
