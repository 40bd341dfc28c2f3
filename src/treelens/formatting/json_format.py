"""JSON formatter: parse, then re-serialize with the configured indent."""

import json

from ..core.types import FormatOptions
from ..parsing.base import load_json


def format_json(content: str, options: FormatOptions) -> str:
    """
    Pretty-print JSON. Raises on invalid input; the dispatcher turns that
    into "return the input unchanged".
    """
    return json.dumps(load_json(content), indent=options.indent_size, ensure_ascii=False)
