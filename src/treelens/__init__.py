"""
treelens - Pretty-printing and tree views for JSON, XML/HTML and CSS.

treelens takes free-form text, guesses its language, re-indents it, and
turns structured content into a collapsible tree laid out in 2-D.

Key Components:
- parsing: Language detection, XML tokenizer/tree builder, CSS parser
- formatting: Per-language re-indenters
- graph: Positional graph builders and the layout engine
- analysis: Structural and text search
- core: Shared types and the per-document session

Usage:
    from treelens import DocumentSession

    session = DocumentSession()
    session.set_content('{"k": [1, 2]}')
    print(session.output)
    for node in session.visible_nodes:
        print(node.id, node.x, node.y)
"""

__version__ = "0.1.0"

from .core.session import DocumentSession
from .core.types import (
    CopyMode, FormatOptions, GraphEdge, GraphNode,
    Language, NodeKind, SearchMatch, ViewTransform,
)

__all__ = [
    "__version__",
    "CopyMode",
    "DocumentSession",
    "FormatOptions",
    "GraphEdge",
    "GraphNode",
    "Language",
    "NodeKind",
    "SearchMatch",
    "ViewTransform",
]
