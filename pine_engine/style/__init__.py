"""
Style resolution for the Pine engine.
This package matches stylesheet rules to elements and builds the styled tree.
"""

from .styled_node import DisplayType, PropertyMap, StyledNode
from .resolver import MatchedRule, build_styled_tree, matching_rules, specified_values

__all__ = [
    'DisplayType', 'PropertyMap', 'StyledNode',
    'MatchedRule', 'build_styled_tree', 'matching_rules', 'specified_values'
]
