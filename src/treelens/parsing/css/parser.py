"""
CSS Parser.

Splits a stylesheet into rule blocks of ``selector { prop: value; ... }``.
Best-effort: comments are removed, the text is cut at every ``}`` and each
block is cut at its first ``{``.

Known limitation: a ``;`` inside ``url(...)`` or a data URI splits the
declaration at that point. Callers rely on these split points, so it is
kept as is.
"""

import re
from dataclasses import dataclass, field
from typing import List, NamedTuple

COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/")


class CssDeclaration(NamedTuple):
    prop: str
    val: str


@dataclass
class CssRule:
    """One rule block. Selector and property names are kept verbatim (trimmed)."""
    selector: str
    properties: List[CssDeclaration] = field(default_factory=list)


@dataclass
class CssRoot:
    rules: List[CssRule] = field(default_factory=list)


def _split_declaration(buffer: str) -> CssDeclaration | None:
    """Cut ``prop: value`` at the first colon; None if there is no property."""
    colon = buffer.find(":")
    if colon <= 0:
        return None
    return CssDeclaration(buffer[:colon].strip(), buffer[colon + 1:].strip())


def parse_declarations(body: str) -> List[CssDeclaration]:
    """
    Parse a declaration body, flushing at every ``;``.

    A trailing declaration without its final ``;`` is still collected.
    """
    declarations: List[CssDeclaration] = []
    buffer = []
    for char in body:
        if char == ";":
            text = "".join(buffer)
            if text.strip():
                declaration = _split_declaration(text)
                if declaration:
                    declarations.append(declaration)
            buffer = []
        else:
            buffer.append(char)

    rest = "".join(buffer)
    if rest.strip():
        declaration = _split_declaration(rest)
        if declaration:
            declarations.append(declaration)
    return declarations


def parse_css(css: str) -> CssRoot:
    """
    Parse a stylesheet into its rules.

    Args:
        css: Stylesheet text, possibly malformed.

    Returns:
        CssRoot with rules in source order. Never raises.
    """
    root = CssRoot()
    clean = COMMENT_RE.sub("", css)

    # The piece after the last "}" was never closed, so it is not a rule
    blocks = clean.split("}")[:-1]
    for block in blocks:
        if not block.strip():
            continue
        parts = block.split("{")
        if len(parts) < 2:
            continue

        selector = parts[0].strip()
        if not selector:
            continue
        root.rules.append(CssRule(selector, parse_declarations(parts[1].strip())))
    return root
