"""
Graph Model Builders.

Turn a parsed JSON value, XML tree or CSS root into one uniform positional
graph. Ids are structural paths (``ROOT|a|0``, ``ROOT|html#0``) so collapse
and selection state survive a rebuild as long as the structure is unchanged.
"""

import logging
from typing import Any, Set

from ..config import (
    ID_ESCAPE,
    ID_SEPARATOR,
    INDEX_MARK,
    LABEL_TRUNCATE,
    REPEAT_MARK,
    ROOT_ID,
    STYLESHEET_WIDTH,
    measure_text,
)
from ..core.types import GraphNode, Language, NodeKind
from ..parsing.css.parser import CssRoot
from ..parsing.engine import ParserEngine, create_default_engine
from ..parsing.xml.tree import XmlNodeType, XmlTreeNode

logger = logging.getLogger(__name__)

STYLESHEET_LABEL = "StyleSheet"
TEXT_LABEL = "#text"


def escape_key(key: str, reserved: str = ID_SEPARATOR) -> str:
    """Backslash-escape the escape character and every reserved character."""
    escaped = key.replace(ID_ESCAPE, ID_ESCAPE * 2)
    for char in reserved:
        escaped = escaped.replace(char, ID_ESCAPE + char)
    return escaped


def join_id(parent_id: str, segment: str) -> str:
    """Append an already-escaped segment."""
    return f"{parent_id}{ID_SEPARATOR}{segment}"


def child_id(parent_id: str, key: str) -> str:
    return join_id(parent_id, escape_key(key))


def indexed_id(parent_id: str, name: str, index: int) -> str:
    """Id of a positional child, ``name#index``."""
    return join_id(parent_id, f"{escape_key(name, ID_SEPARATOR + INDEX_MARK)}{INDEX_MARK}{index}")


def truncate_label(text: str, limit: int = LABEL_TRUNCATE) -> str:
    return text[:limit] + "..." if len(text) > limit else text


def stringify_scalar(value: Any) -> str:
    """Render a JSON scalar the way it reads in JSON source (true, 1.5, ...)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def _leaf(node_id: str, label: str, value: str, width_text: str) -> GraphNode:
    return GraphNode(
        id=node_id,
        label=label,
        kind=NodeKind.VALUE,
        value=value,
        width=measure_text(width_text),
    )


# --- JSON ---

def build_json_graph(data: Any, key: str = ROOT_ID, node_id: str = ROOT_ID) -> GraphNode:
    """
    Build the graph of a parsed JSON value.

    Arrays use their indices as keys. Scalars get a stringified ``value``;
    ``null`` has no value and shows its key only.
    """
    is_array = isinstance(data, list)
    is_object = isinstance(data, dict)

    if is_array:
        kind = NodeKind.ARRAY
    elif is_object:
        kind = NodeKind.OBJECT
    else:
        kind = NodeKind.VALUE

    value = None
    display = key
    if not (is_array or is_object) and data is not None:
        value = stringify_scalar(data)
        display = f"{key}: {truncate_label(value)}"

    node = GraphNode(id=node_id, label=key, kind=kind, value=value, width=measure_text(display))

    if is_object:
        items = data.items()
    elif is_array:
        items = ((str(idx), item) for idx, item in enumerate(data))
    else:
        items = ()

    for child_key, child in items:
        node.children.append(build_json_graph(child, child_key, child_id(node_id, child_key)))
    return node


# --- XML ---

def _build_css_rule_node(rule: XmlTreeNode, path: str) -> GraphNode:
    node = GraphNode(id=path, label=rule.tag, width=measure_text(rule.tag))
    for idx, child in enumerate(rule.children):
        if isinstance(child, XmlTreeNode) and child.type == XmlNodeType.CSS_PROP:
            value = child.css_value or ""
            node.children.append(_leaf(
                child_id(path, f"prop-{idx}"),
                child.tag,
                value,
                f"{child.tag}: {value}",
            ))
    return node


def build_xml_graph(tree: XmlTreeNode, path: str = ROOT_ID) -> GraphNode:
    """
    Build the graph of an XML tree.

    Attributes become ``@name`` leaves ahead of the element's children,
    non-blank text becomes ``#text`` leaves, and css-rule nodes produced for
    ``style`` elements become containers of their declarations.
    """
    if tree.type == XmlNodeType.CSS_RULE:
        return _build_css_rule_node(tree, path)

    node = GraphNode(id=path, label=tree.tag, width=measure_text(tree.tag))

    for name, value in tree.attrs.items():
        label = f"@{name}"
        node.children.append(_leaf(child_id(path, label), label, value, f"{label}: {value}"))

    for idx, child in enumerate(tree.children):
        if isinstance(child, str):
            text = child.strip()
            if not text:
                continue
            leaf = _leaf(child_id(path, f"txt{idx}"), TEXT_LABEL, truncate_label(text), f"{TEXT_LABEL}: {text}")
            leaf.full_value = text
            node.children.append(leaf)
        else:
            node.children.append(build_xml_graph(child, indexed_id(path, child.tag, idx)))

    return node


# --- CSS ---

def _property_segment(prop: str, index: int, seen: Set[str]) -> str:
    """First use of a property keeps it bare; repeats get ``~index`` appended."""
    segment = escape_key(prop, ID_SEPARATOR + REPEAT_MARK)
    if segment in seen:
        return f"{segment}{REPEAT_MARK}{index}"
    seen.add(segment)
    return segment


def build_css_graph(tree: CssRoot, path: str = ROOT_ID) -> GraphNode:
    """Build a StyleSheet root with one container per rule and one leaf per declaration."""
    root = GraphNode(id=path, label=STYLESHEET_LABEL, width=STYLESHEET_WIDTH)

    for idx, rule in enumerate(tree.rules):
        rule_id = child_id(path, f"rule{idx}")
        rule_node = GraphNode(id=rule_id, label=rule.selector, width=measure_text(rule.selector))
        seen: Set[str] = set()
        for p_idx, decl in enumerate(rule.properties):
            rule_node.children.append(_leaf(
                join_id(rule_id, _property_segment(decl.prop, p_idx, seen)),
                decl.prop,
                decl.val,
                f"{decl.prop}: {decl.val}",
            ))
        root.children.append(rule_node)

    return root


GRAPH_BUILDERS = {
    Language.JSON: build_json_graph,
    Language.XML: build_xml_graph,
    Language.CSS: build_css_graph,
}

_default_engine: ParserEngine | None = None


def _engine() -> ParserEngine:
    global _default_engine
    if _default_engine is None:
        _default_engine = create_default_engine()
    return _default_engine


def build_graph(content: str, language: Language | str, engine: ParserEngine | None = None) -> GraphNode | None:
    """
    Build the positional graph for formatted content.

    Returns None when the content is blank, cannot be parsed, or its
    language has no structured form.
    """
    if not content.strip():
        return None

    result = (engine or _engine()).parse(content, language)
    if result.is_err():
        logger.debug(f"No graph for {language}: {result.error.message}")
        return None

    document = result.unwrap()
    builder = GRAPH_BUILDERS.get(document.language)
    if builder is None:
        return None
    try:
        return builder(document.value)
    except RecursionError:
        logger.debug(f"{language} document too deeply nested for a graph")
        return None
