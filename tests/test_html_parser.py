"""Tests for pine_engine.parser.html_parser: the markup parser."""

import pytest

from pine_engine.css import Color, Keyword
from pine_engine.dom import Comment, Document, Element, NodeType, Text
from pine_engine.errors import EndOfInputError, ParseError
from pine_engine.parser import parse_document

SAMPLE_HTML = """<html>
    <style>
      .foo { color: #ff0000; }
    </style>
    <body>
        <!-- A comment -->
        <h1>Title</h1>
        <div id="main" class="test">
            <p>Hello <em>world</em>!</p>
        </div>
    </body>
</html>"""


def _only_element(node):
    elements = node.children
    assert len(elements) == 1
    return elements[0]


class TestParseDocument:
    def test_returns_document(self):
        document = parse_document(SAMPLE_HTML)
        assert isinstance(document, Document)
        assert document.node_type == NodeType.DOCUMENT_NODE

    def test_top_level_element(self):
        document = parse_document(SAMPLE_HTML)
        assert document.document_element.tag_name == 'html'

    def test_empty_source(self):
        document = parse_document("")
        assert document.child_nodes == []
        assert document.stylesheets == []

    def test_style_element_is_not_a_child(self):
        document = parse_document(SAMPLE_HTML)
        html = document.document_element
        assert [child.tag_name for child in html.children] == ['body']

    def test_comment_node(self):
        document = parse_document(SAMPLE_HTML)
        body = _only_element(document.document_element)
        comment = body.child_nodes[0]
        assert isinstance(comment, Comment)
        assert comment.data == " A comment "

    def test_text_keeps_trailing_whitespace(self):
        document = parse_document("<p>Hello <em>world</em>!</p>")
        paragraph = document.document_element
        assert [type(child) for child in paragraph.child_nodes] == [Text, Element, Text]
        assert paragraph.child_nodes[0].data == "Hello "
        assert paragraph.child_nodes[2].data == "!"

    def test_whitespace_between_elements_is_dropped(self):
        document = parse_document("<ul>\n  <li>a</li>\n  <li>b</li>\n</ul>")
        assert len(document.document_element.child_nodes) == 2

    def test_attributes(self):
        document = parse_document(SAMPLE_HTML)
        div = document.get_element_by_id('main')
        assert div.attributes == {'id': 'main', 'class': 'test'}

    def test_single_quoted_attribute_may_contain_double_quote(self):
        document = parse_document("<a title='say \"hi\"'></a>")
        assert document.document_element.get_attribute('title') == 'say "hi"'

    def test_duplicate_attribute_last_wins(self):
        document = parse_document('<a x="1" x="2"></a>')
        assert document.document_element.attributes == {'x': '2'}

    def test_attribute_names_are_case_sensitive(self):
        document = parse_document('<a X="1" x="2"></a>')
        assert document.document_element.attributes == {'X': '1', 'x': '2'}

    def test_hyphenated_attribute_name(self):
        document = parse_document('<div data-role="nav"></div>')
        assert document.document_element.get_attribute('data-role') == 'nav'

    def test_text_is_not_entity_decoded(self):
        document = parse_document("<p>a &amp; b</p>")
        assert document.document_element.child_nodes[0].data == "a &amp; b"

    def test_several_top_level_nodes(self):
        document = parse_document("<!-- c --><a></a>text")
        assert [child.node_type for child in document.child_nodes] == [
            NodeType.COMMENT_NODE, NodeType.ELEMENT_NODE, NodeType.TEXT_NODE
        ]

    def test_unicode_text(self):
        document = parse_document("<p>naïve 漢字</p>")
        assert document.document_element.text_content == "naïve 漢字"


class TestStylesheetHarvesting:
    def test_single_embedded_stylesheet(self):
        document = parse_document(
            '<html><style>.a{color:#ff0000;}</style><body class="a">x</body></html>')
        assert len(document.stylesheets) == 1

        stylesheet = document.stylesheets[0]
        assert len(stylesheet.rules) == 1
        rule = stylesheet.rules[0]
        assert rule.selectors[0].classes == ['a']
        assert rule.declarations[0].value == Color(255, 0, 0)

        body = document.get_elements_by_tag_name('body')[0]
        assert document.get_elements_by_tag_name('style') == []
        assert rule.match(body) == (0, 1, 0)

    def test_multiple_stylesheets_in_order(self):
        document = parse_document(
            "<html><style>a { display: block; }</style>"
            "<body><style>b { display: none; }</style></body></html>")
        assert len(document.stylesheets) == 2
        assert document.stylesheets[0].rules[0].declarations[0].value == Keyword('block')
        assert document.stylesheets[1].rules[0].declarations[0].value == Keyword('none')

    def test_style_body_is_verbatim(self):
        document = parse_document("<style>p { content: x; } /* <b> */</style>")
        assert document.child_nodes == []
        assert len(document.stylesheets[0].rules) == 1

    def test_style_attributes_are_ignored(self):
        document = parse_document('<style type="text/css">p { display: block; }</style>')
        assert len(document.stylesheets) == 1

    def test_tag_starting_with_style_is_an_element(self):
        document = parse_document("<styles>x</styles>")
        assert document.document_element.tag_name == 'styles'
        assert document.stylesheets == []

    def test_malformed_embedded_stylesheet_is_fatal(self):
        with pytest.raises(ParseError):
            parse_document("<html><style>p { color red; }</style></html>")


class TestMalformedMarkup:
    def test_mismatched_close_tag(self):
        with pytest.raises(ParseError):
            parse_document("<div><span></div>")

    def test_close_tag_is_case_sensitive(self):
        with pytest.raises(ParseError):
            parse_document("<div></DIV>")

    def test_missing_close_tag(self):
        with pytest.raises(EndOfInputError):
            parse_document("<div><p>text</p>")

    def test_unterminated_comment(self):
        with pytest.raises(EndOfInputError):
            parse_document("<div><!-- never closed</div>")

    def test_unterminated_style(self):
        with pytest.raises(EndOfInputError):
            parse_document("<style>p { display: block; }")

    def test_unquoted_attribute(self):
        with pytest.raises(ParseError):
            parse_document("<div id=main></div>")

    def test_mismatched_quotes(self):
        with pytest.raises(EndOfInputError):
            parse_document("<div id=\"main'></div>")

    def test_stray_close_tag_at_top_level(self):
        with pytest.raises(ParseError):
            parse_document("<a></a></b>")

    def test_missing_tag_name(self):
        with pytest.raises(ParseError):
            parse_document("< div></div>")


class TestDeepNesting:
    def test_deeply_nested_elements(self):
        depth = 5000
        document = parse_document("<div>" * depth + "x" + "</div>" * depth)

        node = document
        for _ in range(depth):
            assert len(node.child_nodes) == 1
            node = node.child_nodes[0]
            assert node.tag_name == 'div'
        assert node.text_content == 'x'

    def test_mismatch_deep_inside_nesting(self):
        depth = 2000
        with pytest.raises(ParseError):
            parse_document("<div>" * depth + "</span>" + "</div>" * depth)

    def test_unclosed_deep_nesting(self):
        with pytest.raises(EndOfInputError):
            parse_document("<div>" * 2000)
