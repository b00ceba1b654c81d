"""
Style resolution: matching rules to elements and cascading their declarations.
"""

from typing import List, Tuple

from ..css import Rule, Specificity, Stylesheet
from ..dom import Element, Node, NodeType
from .styled_node import PropertyMap, StyledNode

MatchedRule = Tuple[Specificity, Rule]


def matching_rules(element: Element, stylesheet: Stylesheet) -> List[MatchedRule]:
    """
    Find the rules that apply to an element, ordered for the cascade.

    The specificity of a matched rule is that of its first matching selector.
    Rules are sorted ascending by that specificity; the sort is stable, so
    equally specific rules keep their stylesheet order.

    Args:
        element: The element to style
        stylesheet: The stylesheet to match against

    Returns:
        (specificity, rule) pairs, least specific first
    """
    rules = stylesheet.matching_rules(element)
    rules.sort(key=lambda matched: matched[0])
    return rules


def specified_values(element: Element, stylesheet: Stylesheet) -> PropertyMap:
    """
    Cascade the declarations of every matching rule into a property map.

    More specific rules are applied later and so win; within a rule, later
    declarations win over earlier ones.

    Args:
        element: The element to style
        stylesheet: The stylesheet to apply

    Returns:
        Property names mapped to their values
    """
    values: PropertyMap = {}
    for _, rule in matching_rules(element, stylesheet):
        for declaration in rule.declarations:
            values[declaration.name] = declaration.value
    return values


def build_styled_tree(root: Node, stylesheet: Stylesheet) -> StyledNode:
    """
    Build a styled tree mirroring a document tree.

    Every document node gets exactly one styled node; only elements receive
    property values. The tree is walked with an explicit stack, so deeply
    nested documents are handled.

    Args:
        root: The document (or any node within it) to style
        stylesheet: The single stylesheet to apply

    Returns:
        The styled node for ``root``
    """
    styled_root = _style_node(root, stylesheet)
    pending = [styled_root]
    while pending:
        styled = pending.pop()
        for child in styled.node.child_nodes:
            styled_child = _style_node(child, stylesheet)
            styled.children.append(styled_child)
            pending.append(styled_child)
    return styled_root


def _style_node(node: Node, stylesheet: Stylesheet) -> StyledNode:
    if node.node_type == NodeType.ELEMENT_NODE:
        return StyledNode(node, specified_values(node, stylesheet))
    return StyledNode(node)
