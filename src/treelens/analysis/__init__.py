"""Search over parsed JSON structure or formatted text."""

from .search import SearchCursor, search_document, search_json, search_text

__all__ = ["SearchCursor", "search_document", "search_json", "search_text"]
