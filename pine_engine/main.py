#!/usr/bin/env python3
"""
Pine Engine - Command-line entry point

Renders a markup file and prints one of the engine's trees.
"""

import argparse
import logging
import sys
from typing import List, Optional

from pine_engine import __version__
from pine_engine.core import RenderEngine
from pine_engine.errors import EngineError
from pine_engine.utils.config import Config
from pine_engine.utils.logging import log_exception, setup_logging
from pine_engine.utils.pretty_print import (format_dom, format_layout_tree,
                                            format_styled_tree, format_stylesheet)

TREE_CHOICES = ("dom", "css", "style", "layout")

EXIT_OK = 0
EXIT_RENDER_ERROR = 1
EXIT_IO_ERROR = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Pine Engine - render markup into a layout tree")

    parser.add_argument("html_file", help="Markup file to render")
    parser.add_argument("--css", dest="css_file", default=None,
                        help="Stylesheet file to apply instead of the embedded <style> sheets")
    parser.add_argument("--tree", choices=TREE_CHOICES, default=None,
                        help="Tree to print (default from config, normally 'layout')")
    parser.add_argument("--config", default=None, help="Path to a JSON config file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"Pine Engine {__version__}")

    return parser.parse_args(argv)


def read_file(path: str) -> str:
    """Read a UTF-8 text file."""
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def format_tree(engine: RenderEngine, tree: str, indent_width: int) -> str:
    """
    Format one of the trees produced by the last render.

    Args:
        engine: Engine that has rendered a document
        tree: One of TREE_CHOICES
        indent_width: Spaces per indentation level

    Returns:
        The formatted tree
    """
    if tree == "dom":
        return format_dom(engine.document, indent_width=indent_width)
    elif tree == "css":
        return format_stylesheet(engine.stylesheet, indent_width=indent_width)
    elif tree == "style":
        return format_styled_tree(engine.styled_tree, indent_width=indent_width)
    elif tree == "layout":
        return format_layout_tree(engine.layout_tree, indent_width=indent_width)
    raise ValueError(f"Unknown tree: {tree}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command-line driver."""
    args = parse_args(argv)

    config = Config(args.config)
    console_level = "DEBUG" if args.debug else config.get("logging.console_level", "WARNING")
    logger = setup_logging(log_file=config.get("logging.log_file"), console_level=console_level)
    if args.debug:
        logger.setLevel(logging.DEBUG)
        for handler in logger.handlers:
            handler.setLevel(logging.DEBUG)

    try:
        html_source = read_file(args.html_file)
        css_source = read_file(args.css_file) if args.css_file else None
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read input: {e}")
        return EXIT_IO_ERROR

    engine = RenderEngine(config)
    try:
        stylesheet = engine.load_css(css_source) if css_source is not None else None
        engine.load_html(html_source, stylesheet)
    except EngineError as e:
        log_exception(logger, e, "Rendering failed")
        return EXIT_RENDER_ERROR

    tree = args.tree or config.get("output.default_tree", "layout")
    if tree not in TREE_CHOICES:
        logger.warning(f"Unknown default tree {tree!r} in config, printing layout tree")
        tree = "layout"

    print(format_tree(engine, tree, config.get_int("output.indent_width", 2)))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
