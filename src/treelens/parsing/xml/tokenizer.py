"""
XML/HTML Tokenizer.

A single left-to-right scan that turns markup into a flat list of tokens.
The scan is total: unterminated comments, CDATA sections, processing
instructions and tags simply run to the end of the input.

Every token records its half-open source span, and ``content`` is always
``source[start:end]``. Text runs are whitespace-trimmed, so the only source
characters not covered by a token are whitespace.
"""

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import List

CLOSE_NAME_RE = re.compile(r"^</\s*([^\s>]+)")
OPEN_NAME_RE = re.compile(r"^<\s*([^\s/>]+)")
SELF_CLOSING_RE = re.compile(r"/\s*>$")

UNKNOWN_TAG = "unknown"


class TokenType(StrEnum):
    OPEN = "open"
    CLOSE = "close"
    SELF_CLOSING = "self"
    TEXT = "text"
    COMMENT = "comment"
    CDATA = "cdata"
    PROCESSING_INSTRUCTION = "pi"
    DOCTYPE = "doctype"


@dataclass(frozen=True)
class XmlToken:
    """One lexical unit of markup. Never mutated after creation."""
    type: TokenType
    content: str
    start: int
    end: int
    name: str | None = None
    # Raw, unparsed attribute substring (open and self-closing tags only)
    attrs: str | None = None


def _text_token(source: str, start: int, end: int) -> XmlToken | None:
    """Trimmed text token for source[start:end], or None if it is blank."""
    chunk = source[start:end]
    stripped = chunk.strip()
    if not stripped:
        return None
    lead = len(chunk) - len(chunk.lstrip())
    begin = start + lead
    return XmlToken(TokenType.TEXT, stripped, begin, begin + len(stripped))


def _terminated(source: str, start: int, terminator: str) -> int:
    """End offset just past ``terminator``, or the input length if missing."""
    found = source.find(terminator, start)
    return found + len(terminator) if found != -1 else len(source)


def _find_tag_end(source: str, start: int) -> int:
    """Index of the ``>`` closing a tag, skipping quoted attribute values."""
    in_quote = None
    for i in range(start, len(source)):
        c = source[i]
        if in_quote:
            if c == in_quote:
                in_quote = None
        elif c in "\"'":
            in_quote = c
        elif c == ">":
            return i
    return -1


def tokenize_xml(source: str) -> List[XmlToken]:
    """
    Tokenize markup.

    Args:
        source: Arbitrary text, presumptively XML or HTML.

    Returns:
        Tokens in source order.
    """
    tokens: List[XmlToken] = []
    pos = 0
    length = len(source)

    while pos < length:
        lt = source.find("<", pos)
        if lt == -1:
            text = _text_token(source, pos, length)
            if text:
                tokens.append(text)
            break
        if lt > pos:
            text = _text_token(source, pos, lt)
            if text:
                tokens.append(text)

        if source.startswith("<!--", lt):
            end = _terminated(source, lt, "-->")
            tokens.append(XmlToken(TokenType.COMMENT, source[lt:end], lt, end))
            pos = end
            continue

        if source.startswith("<![CDATA[", lt):
            end = _terminated(source, lt, "]]>")
            tokens.append(XmlToken(TokenType.CDATA, source[lt:end], lt, end))
            pos = end
            continue

        if source.startswith("<?", lt):
            end = _terminated(source, lt, "?>")
            tokens.append(XmlToken(TokenType.PROCESSING_INSTRUCTION, source[lt:end], lt, end))
            pos = end
            continue

        if source.startswith("<!", lt):
            end = _terminated(source, lt, ">")
            tokens.append(XmlToken(TokenType.DOCTYPE, source[lt:end], lt, end))
            pos = end
            continue

        if source.startswith("</", lt):
            end = _terminated(source, lt, ">")
            raw = source[lt:end]
            match = CLOSE_NAME_RE.match(raw)
            tokens.append(XmlToken(
                TokenType.CLOSE,
                raw,
                lt,
                end,
                name=match.group(1) if match else "",
            ))
            pos = end
            continue

        gt = _find_tag_end(source, lt + 1)
        if gt == -1:
            # Unterminated tag: keep the rest verbatim as text
            tokens.append(XmlToken(TokenType.TEXT, source[lt:], lt, length))
            break

        raw = source[lt:gt + 1]
        is_self = bool(SELF_CLOSING_RE.search(raw))
        match = OPEN_NAME_RE.match(raw)
        attrs = ""
        if match:
            attr_start = match.end()
            attr_end = raw.rfind("/") if is_self else len(raw) - 1
            if attr_end > attr_start:
                attrs = raw[attr_start:attr_end]
        tokens.append(XmlToken(
            TokenType.SELF_CLOSING if is_self else TokenType.OPEN,
            raw,
            lt,
            gt + 1,
            name=match.group(1) if match else UNKNOWN_TAG,
            attrs=attrs,
        ))
        pos = gt + 1

    return tokens
