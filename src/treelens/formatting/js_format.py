"""
JavaScript formatter.

A naive re-indenter, not a parser. It tracks only simple same-line string
quotes; brackets and separators inside regex literals or template strings
are reflowed like code.
"""

import re

from ..core.types import FormatOptions

ANON_FUNC_RE = re.compile(r"function\s*\(")
ANON_FUNC_SPACED_RE = re.compile(r"function\s+\(")
BLANK_LINE_RE = re.compile(r"^\s*\n", re.MULTILINE)

OPENERS = "{["
CLOSERS = "}]"
SEPARATORS = ";,"


def normalize_anonymous_functions(source: str, space_before: bool) -> str:
    if space_before:
        return ANON_FUNC_RE.sub("function (", source)
    return ANON_FUNC_SPACED_RE.sub("function(", source)


def format_js(js: str, options: FormatOptions) -> str:
    indent = options.indent
    source = normalize_anonymous_functions(js, options.space_before_anon_func)

    out = []
    depth = 0
    in_string = False
    quote = ""
    # Source whitespace right after an emitted line break is replaced by our indent
    skip_space = False

    for i, char in enumerate(source):
        if char in "\"'" and (i == 0 or source[i - 1] != "\\"):
            if not in_string:
                in_string = True
                quote = char
            elif char == quote:
                in_string = False

        if not in_string:
            if skip_space and char.isspace():
                continue
            if char in OPENERS:
                depth += 1
                out.append(char + "\n" + indent * depth)
                skip_space = True
                continue
            if char in CLOSERS:
                depth = max(0, depth - 1)
                out.append("\n" + indent * depth + char)
                skip_space = False
                continue
            if char in SEPARATORS:
                out.append(char + "\n" + indent * depth)
                skip_space = True
                continue

        skip_space = False
        out.append(char)

    return BLANK_LINE_RE.sub("", "".join(out)).rstrip()
