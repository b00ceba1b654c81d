"""
Stylesheet, rule and declaration containers.
"""

from typing import List, Optional, Tuple

from .selector import SimpleSelector, Specificity, matches_selector
from .values import Value


class Declaration:
    """A single ``name: value`` pair."""

    def __init__(self, name: str, value: Value):
        self.name = name
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, Declaration):
            return NotImplemented
        return self.name == other.name and self.value == other.value

    def __str__(self):
        return f"{self.name}: {self.value};"

    def __repr__(self):
        return f"Declaration({self.name!r}, {self.value!r})"


class Rule:
    """
    A selector list with its declaration block.

    The parser hands over ``selectors`` sorted by descending specificity, so
    the first selector that matches an element is also the most specific one
    that does.
    """

    def __init__(self, selectors: List[SimpleSelector], declarations: List[Declaration]):
        self.selectors = selectors
        self.declarations = declarations

    def match(self, element: 'Element') -> Optional[Specificity]:
        """
        Match this rule against an element.

        Args:
            element: The element to check

        Returns:
            Specificity of the first matching selector, or None if no selector matches
        """
        for selector in self.selectors:
            if matches_selector(selector, element):
                return selector.specificity()
        return None

    def __repr__(self):
        selectors = ", ".join(str(selector) for selector in self.selectors)
        return f"Rule({selectors!r}, {len(self.declarations)} declarations)"


class Stylesheet:
    """An ordered list of rules."""

    def __init__(self, rules: Optional[List[Rule]] = None):
        self.rules: List[Rule] = rules if rules is not None else []

    def matching_rules(self, element: 'Element') -> List[Tuple[Specificity, Rule]]:
        """
        Collect the rules that match an element, in stylesheet order.

        Args:
            element: The element to check

        Returns:
            (specificity, rule) pairs for every matching rule
        """
        matched = []
        for rule in self.rules:
            specificity = rule.match(element)
            if specificity is not None:
                matched.append((specificity, rule))
        return matched

    def __len__(self):
        return len(self.rules)

    def __iter__(self):
        return iter(self.rules)

    def __repr__(self):
        return f"Stylesheet({len(self.rules)} rules)"
