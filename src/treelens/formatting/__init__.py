"""Per-language pretty-printers and the ``format_document`` dispatcher."""

from .beautify import FORMATTERS, format_document
from .css_format import format_css
from .js_format import format_js
from .json_format import format_json
from .xml_format import format_xml, render_attributes

__all__ = [
    "FORMATTERS",
    "format_css",
    "format_document",
    "format_js",
    "format_json",
    "format_xml",
    "render_attributes",
]
