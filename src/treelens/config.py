"""
Global Configuration and Layout Defaults.

This module centralizes the constants shared by the parsers, formatters and
the layout engine, plus the loader for the optional ``treelens.toml`` file.
"""

import logging
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, FrozenSet

if TYPE_CHECKING:
    from .core.types import FormatOptions

logger = logging.getLogger(__name__)

# --- Graph Identity ---
# Structural ids are ROOT|key|key...; descendants always extend their
# ancestor's id with the separator.
ID_SEPARATOR = "|"
ROOT_ID = "ROOT"
# Keys are backslash-escaped so a separator or marker inside a key cannot
# collide with another path. Positional segments are name#index, repeated
# CSS properties are prop~index.
ID_ESCAPE = "\\"
INDEX_MARK = "#"
REPEAT_MARK = "~"

# --- Node Geometry ---
ROW_HEIGHT = 30
CHAR_WIDTH = 8
NODE_PAD_X = 20
MIN_NODE_WIDTH = 80
STYLESHEET_WIDTH = 100

# Labels longer than this are shown truncated with an ellipsis
LABEL_TRUNCATE = 20

# --- Layout ---
LEVEL_GAP = 80
ROW_PADDING = 10
LAYOUT_ORIGIN = (50.0, 50.0)
EDGE_CURVE_OFFSET = 50

# --- Viewport ---
FIT_MARGIN = 100
FIT_FALLBACK_EXTENT = 100
DEFAULT_TRANSFORM = (20.0, 20.0, 1.0)

# --- XML Formatting ---
# Text shorter than this is kept on the same line as its open/close tags
INLINE_TEXT_LIMIT = 60

# HTML elements that never take a closing tag
VOID_TAGS: FrozenSet[str] = frozenset({
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
})

# --- Config Files ---
CONFIG_FILENAME = "treelens.toml"
PYPROJECT_FILENAME = "pyproject.toml"


def is_void_tag(name: str | None) -> bool:
    """Check if a tag name is an HTML void element (case-insensitive)."""
    return (name or "").lower() in VOID_TAGS


def measure_text(text: str) -> int:
    """Width in layout units of a node showing ``text``."""
    return max(MIN_NODE_WIDTH, len(text) * CHAR_WIDTH + NODE_PAD_X * 2)


def find_config_table(directory: Path) -> Dict[str, Any]:
    """
    Locate the ``[format]`` settings for a directory.

    Looks for ``treelens.toml`` first, then ``[tool.treelens]`` inside
    ``pyproject.toml``. A missing or malformed file yields an empty table.

    Args:
        directory: Directory to search (not recursive).

    Returns:
        The raw format table, possibly empty.
    """
    candidates = [
        (directory / CONFIG_FILENAME, ()),
        (directory / PYPROJECT_FILENAME, ("tool", "treelens")),
    ]
    for path, prefix in candidates:
        if not path.is_file():
            continue
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.debug(f"Ignoring unreadable config {path}: {e}")
            continue

        for key in prefix:
            data = data.get(key, {})
            if not isinstance(data, dict):
                data = {}
                break
        if not data:
            continue

        table = data.get("format", {})
        if isinstance(table, dict):
            logger.debug(f"Loaded format settings from {path}")
            return table
    return {}


def load_format_options(directory: Path | None = None, **overrides: Any) -> "FormatOptions":
    """
    Build FormatOptions from the config file, then apply overrides.

    Overrides whose value is None are treated as "not given".
    """
    from .core.types import FormatOptions

    table = find_config_table(directory or Path.cwd())
    merged = {**table, **{k: v for k, v in overrides.items() if v is not None}}
    return FormatOptions.from_mapping(merged)
