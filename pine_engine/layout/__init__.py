"""
Layout tree for the Pine engine.
This package partitions a styled tree into block, inline and anonymous boxes.
"""

from .box_metrics import BoxMetrics, EdgeSizes, Rect
from .layout import BoxType, LayoutBox, build_layout_tree

__all__ = [
    'BoxMetrics', 'EdgeSizes', 'Rect', 'BoxType', 'LayoutBox', 'build_layout_tree'
]
