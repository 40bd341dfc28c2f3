"""
Parser Engine for treelens.

Dispatches a document to the parser registered for its language and returns
a Result instead of raising.
"""

import logging
from typing import Dict, List

from ..core.result import Err, Result
from ..core.types import Language
from .base import CssParser, DocumentParser, JsonParser, ParsedDocument, ParseError, XmlParser

logger = logging.getLogger(__name__)


class ParserRegistry:
    """Registry of document parsers keyed by language."""

    def __init__(self):
        self._parsers: Dict[Language, DocumentParser] = {}

    def register(self, parser: DocumentParser) -> None:
        self._parsers[parser.language] = parser

    def get(self, language: Language) -> DocumentParser | None:
        return self._parsers.get(language)

    @property
    def languages(self) -> List[Language]:
        return list(self._parsers)


class ParserEngine:
    """
    Central entry point for parsing.
    Returns Result objects instead of raising exceptions.
    """

    def __init__(self):
        self._registry = ParserRegistry()

    @property
    def registry(self) -> ParserRegistry:
        return self._registry

    def register(self, parser: DocumentParser) -> None:
        self._registry.register(parser)

    def parse(self, content: str, language: Language | str) -> Result[ParsedDocument, ParseError]:
        """
        Parse content as the given language.

        Returns Ok(ParsedDocument) or Err(ParseError); languages without a
        registered parser are reported as unsupported.
        """
        try:
            language = Language(language)
        except ValueError:
            return Err(ParseError(str(language), "Unknown language", error_type="unsupported"))

        parser = self._registry.get(language)
        if parser is None:
            logger.debug(f"No structured parser for {language}")
            return Err(ParseError(str(language), "Language has no structured form", error_type="unsupported"))
        return parser.parse_full(content)


def create_default_engine() -> ParserEngine:
    """Engine with the JSON, XML and CSS parsers registered."""
    engine = ParserEngine()
    engine.register(JsonParser())
    engine.register(XmlParser())
    engine.register(CssParser())
    return engine
