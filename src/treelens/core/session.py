"""
Per-document session state.

A DocumentSession owns everything that outlives a single operation for one
open document: the formatted text, the positional graph, the collapse set,
the selection and the search cursor. Nothing here is shared between
sessions; callers serializing access per session is enough.
"""

import logging
from typing import List, Set, Tuple

from ..analysis.search import SearchCursor, search_document
from ..formatting.beautify import format_document
from ..graph.builder import build_graph
from ..graph.clipboard import copy_text
from ..graph.layout import center_on, fit_view, layout_graph, visible_edges
from ..parsing.detect import detect_language
from .types import (
    CopyMode,
    FormatOptions,
    GraphEdge,
    GraphNode,
    Language,
    MatchType,
    SearchMatch,
    ViewTransform,
    is_ancestor_id,
)

logger = logging.getLogger(__name__)


class DocumentSession:
    """
    State of one open document.

    Content changes rebuild everything and clear the collapse set, since old
    ids may no longer mean the same node. Option changes re-format and
    rebuild the graph but keep the collapse set.
    """

    def __init__(self, options: FormatOptions | None = None):
        self.options = options or FormatOptions()
        self.content = ""
        self.language = Language.TEXT
        self.output = ""
        self.root: GraphNode | None = None
        self.collapsed: Set[str] = set()
        self.selected_id: str | None = None
        self.search_term = ""
        self.cursor = SearchCursor()
        self._visible: List[GraphNode] = []

    # --- Content & options ---

    def set_content(self, content: str, language: Language | str | None = None) -> None:
        """Load new content, detecting its language unless one is given."""
        self.content = content
        try:
            self.language = Language(language) if language else detect_language(content)
        except ValueError:
            logger.debug(f"Unknown language {language!r}, detecting instead")
            self.language = detect_language(content)
        self.collapsed = set()
        self.selected_id = None
        self._rebuild()

    def update_options(self, options: FormatOptions) -> None:
        self.options = options
        self._rebuild()

    def _rebuild(self) -> None:
        self.output = format_document(self.content, self.language, self.options)
        self.root = build_graph(self.output, self.language) if self.language.is_graph_capable else None
        logger.debug(f"Rebuilt {self.language} session (graph={'yes' if self.root else 'no'})")
        self.relayout()
        if self.search_term:
            self.search(self.search_term)
        else:
            self.cursor = SearchCursor()

    # --- Layout ---

    def relayout(self) -> List[GraphNode]:
        self._visible = layout_graph(self.root, self.collapsed) if self.root else []
        return self._visible

    @property
    def visible_nodes(self) -> List[GraphNode]:
        return list(self._visible)

    @property
    def edges(self) -> List[GraphEdge]:
        return visible_edges(self._visible, self.collapsed)

    def toggle_collapse(self, node_id: str) -> bool:
        """Flip a node's collapsed state; returns True if it is now collapsed."""
        if node_id in self.collapsed:
            self.collapsed.discard(node_id)
        else:
            self.collapsed.add(node_id)
        self.relayout()
        return node_id in self.collapsed

    def expand_all(self) -> None:
        self.collapsed.clear()
        self.relayout()

    def reveal(self, node_id: str) -> None:
        """Expand every collapsed ancestor of a node so it becomes visible."""
        hidden_by = {cid for cid in self.collapsed if is_ancestor_id(cid, node_id)}
        if hidden_by:
            self.collapsed -= hidden_by
            self.relayout()

    def move_node(self, node_id: str, dx: float, dy: float) -> GraphNode | None:
        """Drag a visible node. The next layout pass overrides the move."""
        for node in self._visible:
            if node.id == node_id:
                node.x += dx
                node.y += dy
                return node
        return None

    def fit(self, viewport_width: float, viewport_height: float) -> ViewTransform:
        return fit_view(self._visible, viewport_width, viewport_height)

    def center_on(self, node_id: str, viewport_width: float, viewport_height: float, scale: float = 1.0) -> ViewTransform | None:
        for node in self._visible:
            if node.id == node_id:
                return center_on(node, viewport_width, viewport_height, scale)
        return None

    # --- Selection, copy & search ---

    def select(self, node_id: str | None) -> None:
        self.selected_id = node_id
        if node_id:
            self.reveal(node_id)

    def copy(self, node_id: str, mode: CopyMode | None = None) -> Tuple[str, CopyMode] | None:
        node = self.root.find(node_id) if self.root else None
        if node is None:
            return None
        return copy_text(node, mode or self.options.graph_copy_mode)

    def search(self, term: str) -> List[SearchMatch]:
        """Run a search over the formatted output and select the first hit."""
        self.search_term = term
        self.cursor = SearchCursor(search_document(self.output, self.language, term) if term else [])
        if not term:
            self.selected_id = None
        self._apply(self.cursor.current)
        return self.cursor.matches

    def next_match(self) -> SearchMatch | None:
        return self._apply(self.cursor.next())

    def previous_match(self) -> SearchMatch | None:
        return self._apply(self.cursor.previous())

    def _apply(self, match: SearchMatch | None) -> SearchMatch | None:
        if match is not None and match.type == MatchType.NODE:
            self.select(match.node_id)
        return match
