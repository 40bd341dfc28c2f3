"""
Formatting dispatcher.

``format_document`` never raises: a formatter failure degrades to returning
the original content unchanged.
"""

import logging
from typing import Callable, Dict

from ..core.types import FormatOptions, Language
from .css_format import format_css
from .js_format import format_js
from .json_format import format_json
from .xml_format import format_xml

logger = logging.getLogger(__name__)

Formatter = Callable[[str, FormatOptions], str]

FORMATTERS: Dict[Language, Formatter] = {
    Language.JSON: format_json,
    Language.XML: format_xml,
    Language.CSS: format_css,
    Language.JAVASCRIPT: format_js,
}


def format_document(content: str, language: Language | str, options: FormatOptions | None = None) -> str:
    """
    Re-indent content according to its language.

    Args:
        content: Raw text.
        language: Detected (or user-chosen) language tag.
        options: Formatting options; defaults apply when omitted.

    Returns:
        The formatted text, the empty string for blank input, or the
        original content when the language has no formatter or formatting
        fails.
    """
    if not content.strip():
        return ""
    options = options or FormatOptions()

    try:
        formatter = FORMATTERS.get(Language(language))
    except ValueError:
        formatter = None
    if formatter is None:
        return content

    try:
        return formatter(content, options)
    except Exception as e:
        logger.debug(f"{language} formatter failed, returning input unchanged: {e}")
        return content
