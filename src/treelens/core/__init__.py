"""Core types, result type and per-document session state."""

from .result import Err, Ok, Result
from .types import (
    CopyMode,
    FormatOptions,
    GraphEdge,
    GraphNode,
    Language,
    MatchType,
    NodeKind,
    SearchMatch,
    ViewTransform,
    is_ancestor_id,
)

__all__ = [
    "CopyMode",
    "Err",
    "FormatOptions",
    "GraphEdge",
    "GraphNode",
    "Language",
    "MatchType",
    "NodeKind",
    "Ok",
    "Result",
    "SearchMatch",
    "ViewTransform",
    "is_ancestor_id",
]
