"""
Debug printers for the engine's trees.

Every printer returns an indented, multi-line string and uses only the
public traversal of the tree it prints. Trees are walked with an explicit
stack, so arbitrarily deep documents can be printed.
"""

from typing import Callable, List, Sequence, Tuple, TypeVar

from ..css import Stylesheet
from ..dom import Node, NodeType
from ..layout import LayoutBox
from ..style import StyledNode

DEFAULT_INDENT_WIDTH = 2

T = TypeVar('T')


def describe_node(node: Node) -> str:
    """
    Get a one-line description of a document node.

    Args:
        node: The node to describe

    Returns:
        e.g. ``<div id="main">``, ``#text 'Hello'`` or ``<!-- note -->``
    """
    if node.node_type == NodeType.ELEMENT_NODE:
        return f"<{node.tag_name}{node.format_attributes()}>"
    elif node.node_type == NodeType.TEXT_NODE:
        return f"#text {node.data!r}"
    elif node.node_type == NodeType.COMMENT_NODE:
        return f"<!--{node.data}-->"
    elif node.node_type == NodeType.DOCUMENT_NODE:
        count = len(node.stylesheets)
        return f"#document ({count} stylesheet{'' if count == 1 else 's'})"
    return node.node_name


def _format_tree(root: T, describe: Callable[[T], str], children: Callable[[T], Sequence[T]],
                 indent_level: int, indent_width: int) -> str:
    lines: List[str] = []
    pending: List[Tuple[T, int]] = [(root, indent_level)]
    while pending:
        current, level = pending.pop()
        lines.append(" " * (level * indent_width) + describe(current))
        pending.extend((child, level + 1) for child in reversed(children(current)))
    return "\n".join(lines)


def format_dom(node: Node, indent_level: int = 0, indent_width: int = DEFAULT_INDENT_WIDTH) -> str:
    """
    Format a document tree, one node per line.

    Args:
        node: Root of the tree to print
        indent_level: Indentation level of the root
        indent_width: Spaces per indentation level

    Returns:
        The formatted tree
    """
    return _format_tree(node, describe_node, lambda current: current.child_nodes,
                        indent_level, indent_width)


def format_stylesheet(stylesheet: Stylesheet, indent_width: int = DEFAULT_INDENT_WIDTH) -> str:
    """
    Format a stylesheet as CSS text, one declaration per line.

    Args:
        stylesheet: The stylesheet to print
        indent_width: Spaces before each declaration

    Returns:
        The formatted stylesheet
    """
    indent = " " * indent_width
    lines: List[str] = []
    for rule in stylesheet.rules:
        selectors = ", ".join(str(selector) for selector in rule.selectors)
        lines.append(f"{selectors} {{")
        for declaration in rule.declarations:
            lines.append(f"{indent}{declaration}")
        lines.append("}")
    return "\n".join(lines)


def _describe_styled_node(styled_node: StyledNode) -> str:
    line = describe_node(styled_node.node)
    if styled_node.specified_values:
        values = "; ".join(f"{name}: {value}" for name, value in styled_node.specified_values.items())
        line += f" {{{values}}}"
    return line


def format_styled_tree(styled_node: StyledNode, indent_level: int = 0,
                       indent_width: int = DEFAULT_INDENT_WIDTH) -> str:
    """
    Format a styled tree, listing each node's specified values.

    Args:
        styled_node: Root of the styled tree
        indent_level: Indentation level of the root
        indent_width: Spaces per indentation level

    Returns:
        The formatted tree
    """
    return _format_tree(styled_node, _describe_styled_node, lambda current: current.children,
                        indent_level, indent_width)


def _describe_layout_box(layout_box: LayoutBox) -> str:
    if layout_box.styled_node is None:
        return layout_box.box_type.name
    return f"{layout_box.box_type.name} {describe_node(layout_box.styled_node.node)}"


def format_layout_tree(layout_box: LayoutBox, indent_level: int = 0,
                       indent_width: int = DEFAULT_INDENT_WIDTH) -> str:
    """
    Format a layout tree, one box per line.

    Args:
        layout_box: Root of the layout tree
        indent_level: Indentation level of the root
        indent_width: Spaces per indentation level

    Returns:
        The formatted tree
    """
    return _format_tree(layout_box, _describe_layout_box, lambda current: current.children,
                        indent_level, indent_width)
