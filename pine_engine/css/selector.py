"""
CSS selectors and selector matching.

Only simple selectors are supported: an optional tag name (or ``*``), an
optional id and any number of classes. Combinators, attribute selectors and
pseudo-classes are not.
"""

from typing import List, Optional, Tuple

# (id, class, tag)
Specificity = Tuple[int, int, int]


class SimpleSelector:
    """
    A selector such as ``div#main.note``.
    """

    def __init__(self,
                 tag_name: Optional[str] = None,
                 id: Optional[str] = None,
                 classes: Optional[List[str]] = None):
        """
        Initialize a simple selector.

        Args:
            tag_name: Required tag name, or None for any element
            id: Required id, or None
            classes: Classes the element must carry
        """
        self.tag_name = tag_name
        self.id = id
        self.classes: List[str] = list(classes) if classes else []

    def specificity(self) -> Specificity:
        """Get the (id, class, tag) specificity of this selector."""
        return (
            1 if self.id is not None else 0,
            len(self.classes),
            1 if self.tag_name is not None else 0,
        )

    def __eq__(self, other):
        if not isinstance(other, SimpleSelector):
            return NotImplemented
        return (self.tag_name == other.tag_name and self.id == other.id
                and sorted(self.classes) == sorted(other.classes))

    def __str__(self):
        text = self.tag_name or ""
        if self.id is not None:
            text += f"#{self.id}"
        text += "".join(f".{cls}" for cls in self.classes)
        return text or "*"

    def __repr__(self):
        return f"SimpleSelector({str(self)!r}, specificity={self.specificity()})"


def matches_selector(selector: SimpleSelector, element: 'Element') -> bool:
    """
    Check if an element matches a selector.

    Args:
        selector: The selector to check
        element: The element to match against

    Returns:
        True if the element matches the selector, False otherwise
    """
    if selector.tag_name is not None and selector.tag_name != element.tag_name:
        return False

    if selector.id is not None and selector.id != element.id:
        return False

    if selector.classes:
        element_classes = element.class_list
        if any(cls not in element_classes for cls in selector.classes):
            return False

    return True
