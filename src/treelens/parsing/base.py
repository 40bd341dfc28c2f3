"""
Base Parser Infrastructure.

Each structured language gets a DocumentParser. ``parse`` may raise on
content it cannot represent; ``parse_full`` wraps it into a Result so that
nothing crosses the core boundary as an exception.
"""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from ..core.result import Err, Ok, Result
from ..core.types import Language
from .css.parser import parse_css
from .xml.tree import parse_xml

logger = logging.getLogger(__name__)


@dataclass
class ParseError:
    """Represents a non-fatal failure to parse a document."""

    language: str
    message: str
    error_type: str = "general"
    recoverable: bool = True


@dataclass
class ParsedDocument:
    """
    Parsed form of a document.

    ``value`` is a plain JSON value, an XmlTreeNode root or a CssRoot
    depending on ``language``.
    """

    language: Language
    value: Any


class DocumentParser(ABC):
    """
    Abstract Base Class for all document parsers.
    """

    def __init__(self):
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    @abstractmethod
    def language(self) -> Language:
        pass

    @abstractmethod
    def parse(self, content: str) -> Any:
        pass

    def parse_full(self, content: str) -> Result[ParsedDocument, ParseError]:
        """Parse and wrap the outcome, turning any failure into Err."""
        try:
            return Ok(ParsedDocument(self.language, self.parse(content)))
        except Exception as e:
            self._logger.debug(f"{self.language} parse failed: {e}")
            return Err(ParseError(
                language=str(self.language),
                message=str(e),
                error_type=type(e).__name__,
            ))


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON literal: {name}")


def load_json(content: str) -> Any:
    """Strict JSON load: NaN and Infinity literals are rejected."""
    return json.loads(content, parse_constant=_reject_constant)


class JsonParser(DocumentParser):
    @property
    def language(self) -> Language:
        return Language.JSON

    def parse(self, content: str) -> Any:
        return load_json(content)


class XmlParser(DocumentParser):
    @property
    def language(self) -> Language:
        return Language.XML

    def parse(self, content: str) -> Any:
        return parse_xml(content)


class CssParser(DocumentParser):
    @property
    def language(self) -> Language:
        return Language.CSS

    def parse(self, content: str) -> Any:
        return parse_css(content)
