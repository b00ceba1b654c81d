"""
CSS data model for the Pine engine.
This package holds stylesheet values, selectors and rules.
"""

from .values import Unit, Value, Keyword, Length, Color
from .selector import SimpleSelector, Specificity, matches_selector
from .stylesheet import Declaration, Rule, Stylesheet

__all__ = [
    'Unit', 'Value', 'Keyword', 'Length', 'Color',
    'SimpleSelector', 'Specificity', 'matches_selector',
    'Declaration', 'Rule', 'Stylesheet',
]
