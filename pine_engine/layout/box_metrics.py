"""
Box model records for layout boxes.

The layout-tree builder does not solve geometry, so every field stays at
zero; the records give a later layout pass somewhere to write its results.
"""


class Rect:
    """A positioned rectangle."""

    def __init__(self, x: float = 0.0, y: float = 0.0, width: float = 0.0, height: float = 0.0):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def __repr__(self):
        return f"Rect(x={self.x}, y={self.y}, width={self.width}, height={self.height})"


class EdgeSizes:
    """Widths of the four edges of a padding, border or margin area."""

    def __init__(self, left: float = 0.0, right: float = 0.0, top: float = 0.0, bottom: float = 0.0):
        self.left = left
        self.right = right
        self.top = top
        self.bottom = bottom

    def __repr__(self):
        return f"EdgeSizes(left={self.left}, right={self.right}, top={self.top}, bottom={self.bottom})"


class BoxMetrics:
    """
    Represents the CSS box model metrics for a layout box.

    Includes the content rectangle plus padding, border and margin edges.
    """

    def __init__(self):
        self.content = Rect()
        self.padding = EdgeSizes()
        self.border = EdgeSizes()
        self.margin = EdgeSizes()

    @property
    def padding_box_width(self) -> float:
        """Get the width of the padding box."""
        return self.content.width + self.padding.left + self.padding.right

    @property
    def border_box_width(self) -> float:
        """Get the width of the border box."""
        return self.padding_box_width + self.border.left + self.border.right

    @property
    def margin_box_width(self) -> float:
        """Get the width of the margin box."""
        return self.border_box_width + self.margin.left + self.margin.right

    def __repr__(self):
        return (f"BoxMetrics(content={self.content!r}, padding={self.padding!r}, "
                f"border={self.border!r}, margin={self.margin!r})")
