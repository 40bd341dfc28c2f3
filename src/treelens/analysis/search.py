"""
Search Index.

JSON documents are searched structurally: a match is the graph id of a node
whose key, or whose scalar value, contains the term. Everything else is
searched as text, returning half-open character ranges in the formatted
output. Matching is case-insensitive throughout.
"""

import logging
import re
from typing import Any, List, Sequence

from ..config import ROOT_ID
from ..core.types import Language, SearchMatch
from ..graph.builder import child_id, stringify_scalar
from ..parsing.base import load_json

logger = logging.getLogger(__name__)


def search_json(data: Any, term: str, path: str = ROOT_ID, key: str | None = None) -> List[str]:
    """
    Paths of nodes matching ``term`` by key or by scalar value.

    A node matched by its key is not tested again by value, so each path
    appears at most once. The root has no key. Paths are built with the graph
    builder's ``child_id``, so every match is a graph node id.
    """
    if not term:
        return []
    needle = term.lower()
    matches: List[str] = []

    is_container = isinstance(data, (dict, list))
    if key is not None and needle in key.lower():
        matches.append(path)
    elif not is_container and needle in _scalar_text(data).lower():
        matches.append(path)

    if isinstance(data, dict):
        for k, child in data.items():
            matches.extend(search_json(child, term, child_id(path, k), k))
    elif isinstance(data, list):
        for idx, child in enumerate(data):
            matches.extend(search_json(child, term, child_id(path, str(idx)), str(idx)))
    return matches


def _scalar_text(value: Any) -> str:
    return "null" if value is None else stringify_scalar(value)


def search_text(content: str, term: str) -> List[SearchMatch]:
    """Every case-insensitive occurrence of the literal term, left to right."""
    if not term or not content:
        return []
    pattern = re.compile(re.escape(term), re.IGNORECASE)
    return [SearchMatch.text(m.start(), m.end()) for m in pattern.finditer(content)]


def search_document(content: str, language: Language | str, term: str) -> List[SearchMatch]:
    """
    Search formatted output.

    JSON is searched structurally; if the text no longer parses (for
    instance after a manual edit) it falls back to text search.
    """
    if not term:
        return []
    if language == Language.JSON:
        try:
            data = load_json(content or "{}")
        except (ValueError, RecursionError) as e:
            logger.debug(f"JSON search falling back to text search: {e}")
        else:
            return [SearchMatch.node(path) for path in search_json(data, term)]
    return search_text(content, term)


class SearchCursor:
    """Ordered matches with a wrapping current position."""

    def __init__(self, matches: Sequence[SearchMatch] = ()):
        self.matches: List[SearchMatch] = list(matches)
        self.index = 0

    @property
    def current(self) -> SearchMatch | None:
        if not self.matches:
            return None
        return self.matches[self.index]

    def next(self) -> SearchMatch | None:
        if not self.matches:
            return None
        self.index = (self.index + 1) % len(self.matches)
        return self.current

    def previous(self) -> SearchMatch | None:
        if not self.matches:
            return None
        self.index = (self.index - 1) % len(self.matches)
        return self.current
