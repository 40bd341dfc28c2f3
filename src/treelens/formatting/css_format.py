"""
CSS formatter.

Character-stream re-indentation after collapsing all whitespace runs:
``{`` opens an indented block, ``;`` ends a line, ``}`` closes the block on
its own line. Nothing is parsed, so malformed input still comes out
indented.
"""

import re

from ..core.types import FormatOptions

WHITESPACE_RE = re.compile(r"\s+")


def format_css(css: str, options: FormatOptions) -> str:
    indent = options.indent
    out = []
    depth = 0
    line_start = False

    def newline():
        out.append("\n" + indent * depth)

    def trim():
        # Drop the pending indentation (and spaces) before a structural char
        while out and not out[-1].strip():
            out.pop()
        if out:
            out[-1] = out[-1].rstrip()

    for char in WHITESPACE_RE.sub(" ", css).strip():
        if char == "{":
            trim()
            out.append(" {")
            depth += 1
            newline()
            line_start = True
        elif char == "}":
            trim()
            depth = max(0, depth - 1)
            newline()
            out.append("}")
            newline()
            line_start = True
        elif char == ";":
            trim()
            out.append(";")
            newline()
            line_start = True
        elif char == " " and line_start:
            continue
        else:
            out.append(char)
            line_start = False

    return "".join(out).strip()
