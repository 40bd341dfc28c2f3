"""
XML/HTML formatter.

Replays the token stream with a depth counter. An element whose only content
is a short text run (or nothing at all) stays on one line:

    <title>Hello</title>
    <div></div>

Void elements and self-closing tags never change the depth.
"""

from typing import List

from ..config import INLINE_TEXT_LIMIT, is_void_tag
from ..core.types import FormatOptions
from ..parsing.xml.attributes import split_attributes
from ..parsing.xml.tokenizer import TokenType, XmlToken, tokenize_xml

VERBATIM_TYPES = (
    TokenType.TEXT,
    TokenType.COMMENT,
    TokenType.CDATA,
    TokenType.PROCESSING_INSTRUCTION,
    TokenType.DOCTYPE,
)


def render_attributes(attr_str: str | None, sort: bool) -> str:
    """Attributes as written, single-space separated, with a leading space."""
    attrs = split_attributes(attr_str)
    if not attrs:
        return ""
    if sort:
        attrs.sort(key=lambda a: a.key.lower())
    return " " + " ".join(a.text for a in attrs)


def _is_inline_text(token: XmlToken | None) -> bool:
    return (
        token is not None
        and token.type == TokenType.TEXT
        and len(token.content) < INLINE_TEXT_LIMIT
    )


def _closes(token: XmlToken | None, name: str | None) -> bool:
    return token is not None and token.type == TokenType.CLOSE and token.name == name


def format_xml(xml: str, options: FormatOptions) -> str:
    indent = options.indent
    slash = " />" if options.xml_space_before_slash else "/>"
    tokens = tokenize_xml(xml)
    lines: List[str] = []
    depth = 0

    def add_line(content: str, level: int):
        lines.append(indent * level + content)

    i = 0
    while i < len(tokens):
        token = tokens[i]
        following = tokens[i + 1] if i + 1 < len(tokens) else None
        after = tokens[i + 2] if i + 2 < len(tokens) else None

        if token.type == TokenType.OPEN:
            open_tag = f"<{token.name}{render_attributes(token.attrs, options.xml_sort_attributes)}>"
            if is_void_tag(token.name):
                add_line(open_tag, depth)
            elif _is_inline_text(following) and _closes(after, token.name):
                add_line(open_tag + following.content + after.content, depth)
                i += 2
            elif _closes(following, token.name):
                add_line(open_tag + following.content, depth)
                i += 1
            else:
                add_line(open_tag, depth)
                depth += 1

        elif token.type == TokenType.CLOSE:
            # A stray </br> has nothing to close
            if not is_void_tag(token.name):
                depth = max(0, depth - 1)
                add_line(token.content, depth)

        elif token.type == TokenType.SELF_CLOSING:
            attrs = render_attributes(token.attrs, options.xml_sort_attributes)
            add_line(f"<{token.name}{attrs}{slash}", depth)

        elif token.type in VERBATIM_TYPES:
            add_line(token.content, depth)

        i += 1

    return "\n".join(lines).strip()
