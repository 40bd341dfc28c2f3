"""
Language Detection.

Cheap structural heuristics, no tokenization. The order of the checks is
significant: a stylesheet without a colon falls through to javascript, and
anything opening with ``<`` is treated as markup.
"""

from ..core.types import Language


def detect_language(content: str) -> Language:
    """
    Classify raw text as json, xml, css, javascript or text.

    Args:
        content: Raw, untrusted input.

    Returns:
        The detected Language. Total over all strings.
    """
    trimmed = content.strip()
    if not trimmed:
        return Language.TEXT
    if trimmed[0] in "{[" and trimmed[-1] in "}]":
        return Language.JSON
    if trimmed.startswith("<"):
        return Language.XML
    if "{" in trimmed and ":" in trimmed and ";" in trimmed:
        return Language.CSS
    return Language.JAVASCRIPT
