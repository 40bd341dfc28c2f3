"""Language detection and the JSON/XML/CSS parsers."""

from .base import DocumentParser, ParsedDocument, ParseError, load_json
from .detect import detect_language
from .engine import ParserEngine, ParserRegistry, create_default_engine

__all__ = [
    "DocumentParser",
    "ParseError",
    "ParsedDocument",
    "ParserEngine",
    "ParserRegistry",
    "create_default_engine",
    "detect_language",
    "load_json",
]
