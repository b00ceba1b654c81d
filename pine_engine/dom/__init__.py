"""
Document tree for the Pine engine.
This package provides the node types produced by the markup parser.
"""

from .node import Node, NodeType
from .element import Element
from .text import Text
from .comment import Comment
from .document import Document

__all__ = [
    'Node', 'NodeType', 'Element', 'Text', 'Comment', 'Document'
]
