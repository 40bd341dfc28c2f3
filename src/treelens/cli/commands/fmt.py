"""
Format Command - Re-indent a document.

Never fails on malformed content: if the formatter cannot handle it, the
input is echoed back unchanged.
"""

import logging
from pathlib import Path

import click

from ..utils import LANGUAGE_CHOICE, echo_success, load_document, resolve_options
from ...formatting.beautify import format_document

logger = logging.getLogger(__name__)


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option("--indent", "indent_size", type=click.Choice(["2", "4", "8"]), help="Indent width (default 4)")
@click.option("--language", "-l", type=LANGUAGE_CHOICE, help="Skip detection and use this language")
@click.option("--sort-attributes/--no-sort-attributes", "xml_sort_attributes", default=None,
              help="Sort XML attributes case-insensitively")
@click.option("--space-before-slash/--no-space-before-slash", "xml_space_before_slash", default=None,
              help="Write self-closing tags as <x /> instead of <x/>")
@click.option("--space-before-anon-func/--no-space-before-anon-func", "space_before_anon_func", default=None,
              help="Write 'function (' instead of 'function('")
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Write to a file instead of stdout")
def format_command(
    source: str,
    indent_size: str | None,
    language: str | None,
    xml_sort_attributes: bool | None,
    xml_space_before_slash: bool | None,
    space_before_anon_func: bool | None,
    output: str | None,
):
    """
    Pretty-print SOURCE (use - for stdin).
    """
    content, lang = load_document(source, language)
    options = resolve_options(
        indent_size=int(indent_size) if indent_size else None,
        xml_sort_attributes=xml_sort_attributes,
        xml_space_before_slash=xml_space_before_slash,
        space_before_anon_func=space_before_anon_func,
    )
    result = format_document(content, lang, options)
    logger.debug(f"Formatted {len(content)} chars of {lang}")

    if output:
        Path(output).write_text(result + "\n", encoding="utf-8")
        echo_success(f"Wrote {lang} output to {output}")
    else:
        click.echo(result)
