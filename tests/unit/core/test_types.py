"""Unit tests for the shared types."""

from treelens.core.types import (
    CopyMode,
    FormatOptions,
    GraphNode,
    Language,
    MatchType,
    SearchMatch,
    is_ancestor_id,
)


class TestFormatOptions:
    def test_defaults(self):
        opts = FormatOptions()

        assert opts.indent_size == 4
        assert opts.indent == "    "
        assert opts.preserve_newlines is True
        assert opts.xml_space_before_slash is True
        assert opts.graph_copy_mode == CopyMode.VALUE

    def test_unsupported_indent_falls_back(self):
        assert FormatOptions(indent_size=3).indent_size == 4
        assert FormatOptions(indent_size="x").indent_size == 4
        assert FormatOptions(indent_size="2").indent_size == 2

    def test_copy_mode_is_tolerant(self):
        assert FormatOptions(graph_copy_mode="KEY").graph_copy_mode == CopyMode.KEY
        assert FormatOptions(graph_copy_mode="bogus").graph_copy_mode == CopyMode.VALUE

    def test_from_mapping_drops_bad_entries_only(self):
        opts = FormatOptions.from_mapping({
            "indent_size": 2,
            "xml_sort_attributes": "not-a-bool",
            "unknown": 1,
        })

        assert opts.indent_size == 2
        assert opts.xml_sort_attributes is False

    def test_from_mapping_none(self):
        assert FormatOptions.from_mapping(None) == FormatOptions()


class TestGraphNode:
    def test_identity_is_the_id(self):
        a = GraphNode(id="ROOT|a", label="a")
        b = GraphNode(id="ROOT|a", label="other", x=5)

        assert a == b
        assert len({a, b}) == 1

    def test_walk_and_find(self):
        leaf = GraphNode(id="ROOT|a|b", label="b")
        root = GraphNode(id="ROOT", label="ROOT", children=[GraphNode(id="ROOT|a", label="a", children=[leaf])])

        assert [n.id for n in root.walk()] == ["ROOT", "ROOT|a", "ROOT|a|b"]
        assert root.find("ROOT|a|b") is leaf
        assert root.find("ROOT|x") is None

    def test_position_excludes_children(self):
        root = GraphNode(id="ROOT", label="ROOT", children=[GraphNode(id="ROOT|a", label="a")])
        position = root.position()

        assert "children" not in position
        assert position["id"] == "ROOT"
        assert position["height"] == 30


class TestHelpers:
    def test_is_ancestor_id(self):
        assert is_ancestor_id("ROOT", "ROOT|a")
        assert is_ancestor_id("ROOT|a", "ROOT|a|b")
        assert not is_ancestor_id("ROOT|a", "ROOT|ab")
        assert not is_ancestor_id("ROOT|a", "ROOT|a")

    def test_graph_capable_languages(self):
        assert [lang for lang in Language if lang.is_graph_capable] == [
            Language.JSON,
            Language.XML,
            Language.CSS,
        ]

    def test_search_match_constructors(self):
        assert SearchMatch.node("ROOT|a").type == MatchType.NODE
        text = SearchMatch.text(1, 4)
        assert (text.type, text.start, text.end, text.node_id) == (MatchType.TEXT, 1, 4, None)
