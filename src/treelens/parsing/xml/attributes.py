"""
Attribute Parser.

Extracts ``name``, ``name=value``, ``name="value"`` and ``name='value'``
pairs from the raw attribute substring of a tag. Fragments that do not look
like an attribute are skipped silently.
"""

import re
from typing import Dict, List, NamedTuple

ATTRIBUTE_RE = re.compile(
    r"""([a-zA-Z0-9_\-:.]+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s>]+)))?"""
)


class RawAttribute(NamedTuple):
    """An attribute as written in the source, for re-serialization."""
    key: str
    text: str


def parse_attributes(attr_str: str | None) -> Dict[str, str]:
    """
    Parse an attribute substring into a name -> value map.

    Missing values become the empty string; later duplicates win.
    """
    attrs: Dict[str, str] = {}
    for match in ATTRIBUTE_RE.finditer(attr_str or ""):
        name, double, single, bare = match.groups()
        attrs[name] = double or single or bare or ""
    return attrs


def split_attributes(attr_str: str | None) -> List[RawAttribute]:
    """Every attribute match in order, keeping its exact source text."""
    return [
        RawAttribute(match.group(1), match.group(0))
        for match in ATTRIBUTE_RE.finditer(attr_str or "")
    ]
