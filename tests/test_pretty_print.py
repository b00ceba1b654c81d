"""Tests for pine_engine.utils.pretty_print: debug tree printers."""

from pine_engine.dom import Comment, Element, Text
from pine_engine.layout import build_layout_tree
from pine_engine.parser import parse_document, parse_stylesheet
from pine_engine.style import build_styled_tree
from pine_engine.utils.pretty_print import (describe_node, format_dom, format_layout_tree,
                                            format_styled_tree, format_stylesheet)


class TestDescribeNode:
    def test_element(self):
        assert describe_node(Element('div', {'id': 'main'})) == '<div id="main">'

    def test_text(self):
        assert describe_node(Text('hi')) == "#text 'hi'"

    def test_comment(self):
        assert describe_node(Comment(' c ')) == '<!-- c -->'

    def test_attribute_value_containing_double_quote(self):
        element = parse_document('<a title=\'say "hi"\'></a>').document_element
        assert describe_node(element) == '<a title=\'say "hi"\'>'

    def test_document(self):
        document = parse_document("<style>p { display: block; }</style>")
        assert describe_node(document) == '#document (1 stylesheet)'


class TestFormatDom:
    def test_indentation(self):
        document = parse_document('<div id="a"><p>x</p><!-- c --></div>')
        assert format_dom(document) == "\n".join([
            "#document (0 stylesheets)",
            '  <div id="a">',
            "    <p>",
            "      #text 'x'",
            "    <!-- c -->",
        ])

    def test_indent_level_and_width(self):
        output = format_dom(Element('p', {}, [Text('x')]), indent_level=1, indent_width=4)
        assert output == "    <p>\n        #text 'x'"

    def test_element_only_structure_round_trip(self):
        source = '<html><body class="c"><div><span></span></div><p id="x"></p></body></html>'
        first = parse_document(source)
        second = parse_document(first.outer_html)
        assert format_dom(first) == format_dom(second)


class TestFormatStylesheet:
    def test_rules_and_declarations(self):
        stylesheet = parse_stylesheet("h1, .foo { color: #000000; font-size: 1.5em; } div { width: 500px; }")
        assert format_stylesheet(stylesheet) == "\n".join([
            ".foo, h1 {",
            "  color: #000000;",
            "  font-size: 1.5em;",
            "}",
            "div {",
            "  width: 500px;",
            "}",
        ])

    def test_empty(self):
        assert format_stylesheet(parse_stylesheet("")) == ""

    def test_lengths_print_back_as_written(self):
        output = format_stylesheet(parse_stylesheet("p { width: 1234567px; margin: 10vw; }"))
        assert output == "p {\n  width: 1234567px;\n  margin: 10vw;\n}"
        assert format_stylesheet(parse_stylesheet(output)) == output


class TestFormatStyledTree:
    def test_lists_values(self):
        document = parse_document('<p class="a">x</p>')
        styled = build_styled_tree(document, parse_stylesheet(".a { display: block; color: #ff0000; }"))
        assert format_styled_tree(styled) == "\n".join([
            "#document (0 stylesheets)",
            '  <p class="a"> {display: block; color: #ff0000}',
            "    #text 'x'",
        ])


class TestFormatLayoutTree:
    def test_box_types(self):
        document = parse_document('<div><span>a</span><p>b</p></div>')
        stylesheet = parse_stylesheet("div, p { display: block; }")
        layout = build_layout_tree(build_styled_tree(document.document_element, stylesheet))
        assert format_layout_tree(layout) == "\n".join([
            "BLOCK_NODE <div>",
            "  ANONYMOUS_BLOCK",
            "    INLINE_NODE <span>",
            "      INLINE_NODE #text 'a'",
            "  BLOCK_NODE <p>",
            "    ANONYMOUS_BLOCK",
            "      INLINE_NODE #text 'b'",
        ])


class TestDeepTrees:
    def test_deeply_nested_document(self):
        depth = 3000
        document = parse_document("<div>" * depth + "</div>" * depth)
        styled = build_styled_tree(document, parse_stylesheet("div { display: block; }"))
        layout = build_layout_tree(styled)

        dom_lines = format_dom(document, indent_width=1).splitlines()
        assert len(dom_lines) == depth + 1
        assert dom_lines[-1] == " " * depth + "<div>"
        assert len(format_styled_tree(styled).splitlines()) == depth + 1
        assert format_layout_tree(layout, indent_width=0).splitlines()[-1] == "BLOCK_NODE <div>"
