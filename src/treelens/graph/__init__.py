"""Positional graph: builders, layout engine and copy payloads."""

from .builder import build_css_graph, build_graph, build_json_graph, build_xml_graph
from .clipboard import copy_text
from .layout import center_on, fit_view, layout_graph, visible_edges

__all__ = [
    "build_css_graph",
    "build_graph",
    "build_json_graph",
    "build_xml_graph",
    "center_on",
    "copy_text",
    "fit_view",
    "layout_graph",
    "visible_edges",
]
