"""
Unit tests for the XML tree builder.

Covers nesting, void-tag handling, tolerated mismatches and the recursive
CSS parse of style elements.
"""

import pytest
from treelens.config import VOID_TAGS
from treelens.parsing.xml.tree import XmlNodeType, XmlTreeNode, parse_xml


class TestBuildXmlTree:
    def test_nesting_and_attributes(self):
        root = parse_xml('<a x="1" x="2"><b>text</b></a>')

        assert root.type == XmlNodeType.ROOT
        (a,) = root.children
        assert a.tag == "a"
        assert a.attrs == {"x": "2"}
        (b,) = a.children
        assert b.children == ["text"]

    def test_style_text_is_replaced_by_css_rules(self):
        root = parse_xml("<style>.a{color:red;}</style>")
        style = root.children[0]

        assert len(style.children) == 1
        rule = style.children[0]
        assert isinstance(rule, XmlTreeNode)
        assert rule.type == XmlNodeType.CSS_RULE
        assert rule.tag == ".a"
        (prop,) = rule.children
        assert prop.type == XmlNodeType.CSS_PROP
        assert prop.tag == "color"
        assert prop.css_value == "red"

    def test_style_match_is_case_insensitive(self):
        root = parse_xml("<STYLE>p{margin:0}</STYLE>")
        assert root.children[0].children[0].type == XmlNodeType.CSS_RULE

    @pytest.mark.parametrize("tag", sorted(VOID_TAGS))
    @pytest.mark.parametrize("template", ["<div><{tag}><p>x</p></div>", "<div><{tag}/><p>x</p></div>"])
    def test_void_tags_never_become_parents(self, tag, template):
        root = parse_xml(template.format(tag=tag))
        div = root.children[0]

        assert [c.tag for c in div.children] == [tag, "p"]
        assert div.children[0].children == []

    def test_void_tags_case_insensitive(self):
        root = parse_xml("<BR><span/>")
        assert [c.tag for c in root.children] == ["BR", "span"]

    def test_mismatched_close_is_ignored(self):
        root = parse_xml("<a><b></a>text")
        a = root.children[0]
        b = a.children[0]

        assert a.children == [b]
        assert b.children == ["text"]

    def test_close_without_open_is_ignored(self):
        root = parse_xml("</x><a/>")
        assert [c.tag for c in root.children] == ["a"]

    def test_comments_are_dropped(self):
        root = parse_xml("<a><!-- note --></a>")
        assert root.children[0].children == []

    def test_cdata_is_kept_raw(self):
        root = parse_xml("<a><![CDATA[x<y]]></a>")
        assert root.children[0].children == ["<![CDATA[x<y]]>"]

    def test_unclosed_elements_stay_open(self):
        root = parse_xml("<html><body><p>one")
        html = root.children[0]
        assert html.children[0].children[0].children == ["one"]
