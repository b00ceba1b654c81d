"""
Utility modules for the engine.
"""

from pine_engine.utils.config import Config
from pine_engine.utils.logging import setup_logging, log_exception, PerformanceLogger
from pine_engine.utils.pretty_print import (describe_node, format_dom, format_layout_tree,
                                            format_styled_tree, format_stylesheet)

__all__ = [
    'Config',
    'setup_logging',
    'log_exception',
    'PerformanceLogger',
    'describe_node',
    'format_dom',
    'format_stylesheet',
    'format_styled_tree',
    'format_layout_tree',
]
