"""
Core type definitions for treelens.

Shared vocabulary between the parsers, the graph builders, the layout engine
and the CLI: language tags, formatting options, positional graph nodes and
search matches.
"""

import logging
from enum import StrEnum
from typing import Any, Iterator, List, Mapping

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError, field_validator

from ..config import ID_SEPARATOR, ROW_HEIGHT

logger = logging.getLogger(__name__)

ALLOWED_INDENT_SIZES = (2, 4, 8)
DEFAULT_INDENT_SIZE = 4


class Language(StrEnum):
    """Content languages recognized by the detector."""
    JSON = "json"
    XML = "xml"
    CSS = "css"
    JAVASCRIPT = "javascript"
    TEXT = "text"

    @property
    def is_graph_capable(self) -> bool:
        """Only structured languages can be turned into a positional graph."""
        return self in (Language.JSON, Language.XML, Language.CSS)


class NodeKind(StrEnum):
    """Shape of a positional graph node."""
    OBJECT = "object"
    ARRAY = "array"
    VALUE = "value"


class CopyMode(StrEnum):
    """What a double-click copy on a graph node puts on the clipboard."""
    VALUE = "value"
    KEY = "key"


class MatchType(StrEnum):
    NODE = "node"
    TEXT = "text"


class FormatOptions(BaseModel):
    """
    User-tunable formatting and graph options.

    Unrecognized values never fail: they fall back to the defaults below.
    """
    indent_size: int = DEFAULT_INDENT_SIZE
    preserve_newlines: bool = True
    space_before_anon_func: bool = False
    keep_array_indentation: bool = False
    xml_sort_attributes: bool = False
    xml_space_before_slash: bool = True
    graph_copy_mode: CopyMode = CopyMode.VALUE

    model_config = ConfigDict(extra="ignore")

    @field_validator("indent_size", mode="before")
    @classmethod
    def _indent_fallback(cls, value: Any) -> int:
        try:
            size = int(value)
        except (TypeError, ValueError):
            size = -1
        if size not in ALLOWED_INDENT_SIZES:
            logger.debug(f"Unsupported indent_size {value!r}, using {DEFAULT_INDENT_SIZE}")
            return DEFAULT_INDENT_SIZE
        return size

    @field_validator("graph_copy_mode", mode="before")
    @classmethod
    def _copy_mode_fallback(cls, value: Any) -> CopyMode:
        try:
            return CopyMode(str(value).lower())
        except ValueError:
            logger.debug(f"Unsupported graph_copy_mode {value!r}, using value")
            return CopyMode.VALUE

    @property
    def indent(self) -> str:
        return " " * self.indent_size

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "FormatOptions":
        """
        Tolerant constructor: keys that are unknown or carry a value of the
        wrong type are dropped one by one, so one bad entry never discards
        the rest of the settings.
        """
        accepted = {}
        for key, value in (data or {}).items():
            if key not in cls.model_fields:
                continue
            try:
                cls.model_validate({key: value})
            except ValidationError:
                logger.debug(f"Ignoring invalid option {key}={value!r}")
                continue
            accepted[key] = value
        return cls.model_validate(accepted)


class GraphNode(BaseModel):
    """
    Node of the positional graph.

    The structure (id, label, value, children) is fixed at build time; only
    x/y and the cached subtree height change afterwards.
    """
    id: str
    label: str
    kind: NodeKind = NodeKind.OBJECT
    value: str | None = None
    # Untruncated text for leaves whose value is shortened for display
    full_value: str | None = None
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = ROW_HEIGHT
    children: List["GraphNode"] = Field(default_factory=list)

    _subtree_height: float = PrivateAttr(default=0.0)

    model_config = ConfigDict(frozen=False, extra="ignore")

    @property
    def subtree_height(self) -> float:
        return self._subtree_height

    def walk(self) -> Iterator["GraphNode"]:
        """Depth-first, pre-order traversal of the full (not just visible) tree."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def find(self, node_id: str) -> "GraphNode | None":
        for node in self.walk():
            if node.id == node_id:
                return node
        return None

    def position(self) -> dict:
        """Geometry only, without children (what a renderer needs per node)."""
        return self.model_dump(exclude={"children"})

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if isinstance(other, GraphNode):
            return self.id == other.id
        return False


class GraphEdge(BaseModel):
    """Drawn connection between a visible parent and a visible child."""
    source_id: str
    target_id: str
    path: str


class ViewTransform(BaseModel):
    """Pan/zoom transform: screen = logical * k + (x, y)."""
    x: float
    y: float
    k: float = 1.0

    model_config = ConfigDict(frozen=True)


class SearchMatch(BaseModel):
    """Either a structural node id (JSON) or a half-open text range."""
    type: MatchType
    node_id: str | None = None
    start: int | None = None
    end: int | None = None

    @classmethod
    def node(cls, node_id: str) -> "SearchMatch":
        return cls(type=MatchType.NODE, node_id=node_id)

    @classmethod
    def text(cls, start: int, end: int) -> "SearchMatch":
        return cls(type=MatchType.TEXT, start=start, end=end)


def is_ancestor_id(ancestor_id: str, node_id: str) -> bool:
    """True if ``node_id`` lies strictly below ``ancestor_id``."""
    return node_id.startswith(ancestor_id + ID_SEPARATOR)
