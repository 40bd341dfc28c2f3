"""
Unit tests for the graph builders.

Verifies structural ids, labels, values and widths for JSON, XML and CSS
documents.
"""

from treelens.core.types import Language, NodeKind, is_ancestor_id
from treelens.graph.builder import (
    build_css_graph,
    build_graph,
    build_json_graph,
    build_xml_graph,
    stringify_scalar,
    truncate_label,
)
from treelens.parsing.css.parser import parse_css
from treelens.parsing.xml.tree import parse_xml


class TestJsonGraph:
    def test_object_and_array(self):
        root = build_json_graph({"a": 1, "b": [True, None]})

        assert root.id == "ROOT"
        assert root.label == "ROOT"
        assert root.kind == NodeKind.OBJECT
        assert root.value is None

        a, b = root.children
        assert (a.id, a.label, a.kind, a.value) == ("ROOT|a", "a", NodeKind.VALUE, "1")
        assert b.kind == NodeKind.ARRAY
        assert [c.id for c in b.children] == ["ROOT|b|0", "ROOT|b|1"]
        assert b.children[0].value == "true"

    def test_null_has_no_value(self):
        node = build_json_graph({"x": None}).children[0]

        assert node.kind == NodeKind.VALUE
        assert node.value is None
        assert node.label == "x"

    def test_width_uses_truncated_display(self):
        node = build_json_graph({"k": "x" * 30}).children[0]

        # "k: " + 20 chars + "..."
        assert node.width == 26 * 8 + 40
        assert node.value == "x" * 30

    def test_minimum_width(self):
        assert build_json_graph({}).width == 80

    def test_ids_are_unique(self):
        root = build_json_graph({"a": [{"b": 1}, {"b": 2}], "c": {"a": []}})
        ids = [n.id for n in root.walk()]
        assert len(ids) == len(set(ids))

    def test_separator_inside_key_is_escaped(self):
        root = build_json_graph({"a|b": 1, "a": {"b": 2}})
        ids = [n.id for n in root.walk()]

        assert ids == ["ROOT", "ROOT|a\\|b", "ROOT|a", "ROOT|a|b"]
        assert not is_ancestor_id("ROOT|a", "ROOT|a\\|b")

    def test_escape_character_inside_key(self):
        root = build_json_graph({"a\\": {"b": 1}, "a\\|b": 2})
        ids = [n.id for n in root.walk()]
        assert len(ids) == len(set(ids))


class TestScalars:
    def test_stringify(self):
        assert stringify_scalar(False) == "false"
        assert stringify_scalar(2.0) == "2"
        assert stringify_scalar(1.5) == "1.5"
        assert stringify_scalar("s") == "s"

    def test_truncate(self):
        assert truncate_label("short") == "short"
        assert truncate_label("y" * 21) == "y" * 20 + "..."


class TestXmlGraph:
    def test_attributes_text_and_children(self):
        root = build_xml_graph(parse_xml('<a id="1">hi<b/></a>'))

        (a,) = root.children
        assert a.id == "ROOT|a#0"
        assert [c.id for c in a.children] == ["ROOT|a#0|@id", "ROOT|a#0|txt0", "ROOT|a#0|b#1"]

        attr, text, b = a.children
        assert (attr.label, attr.value, attr.kind) == ("@id", "1", NodeKind.VALUE)
        assert (text.label, text.value, text.full_value) == ("#text", "hi", "hi")
        assert b.label == "b"
        assert b.children == []

    def test_long_text_is_truncated_for_display(self):
        root = build_xml_graph(parse_xml("<p>" + "y" * 30 + "</p>"))
        text = root.children[0].children[0]

        assert text.value == "y" * 20 + "..."
        assert text.full_value == "y" * 30

    def test_style_rules(self):
        root = build_xml_graph(parse_xml("<style>.a{color:red}</style>"))
        rule = root.children[0].children[0]

        assert rule.id == "ROOT|style#0|.a#0"
        assert rule.label == ".a"
        (prop,) = rule.children
        assert prop.id == "ROOT|style#0|.a#0|prop-0"
        assert (prop.label, prop.value) == ("color", "red")

    def test_tag_and_index_do_not_run_together(self):
        root = build_xml_graph(parse_xml("<r><a1/>" + "<x/>" * 9 + "<a/></r>"))
        ids = [n.id for n in root.walk()]

        assert len(ids) == len(set(ids))
        r = root.children[0]
        assert r.children[0].id == "ROOT|r#0|a1#0"
        assert r.children[-1].id == "ROOT|r#0|a#10"

    def test_marker_inside_tag_is_escaped(self):
        root = build_xml_graph(parse_xml("<r><a#1/><a/></r>"))
        ids = [c.id for c in root.children[0].children]
        assert ids == ["ROOT|r#0|a\\#1#0", "ROOT|r#0|a#1"]


class TestCssGraph:
    def test_stylesheet(self):
        root = build_css_graph(parse_css(".a{color:red;margin:0}.b{}"))

        assert root.label == "StyleSheet"
        assert root.width == 100
        assert [r.id for r in root.children] == ["ROOT|rule0", "ROOT|rule1"]
        assert [p.id for p in root.children[0].children] == ["ROOT|rule0|color", "ROOT|rule0|margin"]
        assert root.children[1].children == []

    def test_repeated_property_gets_unique_id(self):
        root = build_css_graph(parse_css(".a{color:red;color:blue}"))
        props = root.children[0].children

        assert [p.id for p in props] == ["ROOT|rule0|color", "ROOT|rule0|color~1"]
        assert [p.value for p in props] == ["red", "blue"]

    def test_literal_repeat_marker_does_not_collide(self):
        root = build_css_graph(parse_css(".a{color:red;color~1:x;color:blue}"))
        ids = [p.id for p in root.children[0].children]

        assert ids == ["ROOT|rule0|color", "ROOT|rule0|color\\~1", "ROOT|rule0|color~2"]


class TestBuildGraph:
    def test_json(self):
        root = build_graph('{"a": 1}', Language.JSON)
        assert root is not None
        assert root.children[0].id == "ROOT|a"

    def test_blank_content(self):
        assert build_graph("   ", Language.JSON) is None

    def test_invalid_json(self):
        assert build_graph("{nope", Language.JSON) is None

    def test_unstructured_languages(self):
        assert build_graph("var a = 1;", Language.JAVASCRIPT) is None
        assert build_graph("words", Language.TEXT) is None

    def test_deep_nesting_does_not_raise(self):
        deep = "[" * 10000 + "]" * 10000
        root = build_graph(deep, Language.JSON)
        assert root is None or root.id == "ROOT"
