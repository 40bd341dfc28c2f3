"""
Search Command - Find a term in a formatted document.
"""

import json

import click

from ..utils import LANGUAGE_CHOICE, echo_info, load_document, resolve_options
from ...analysis.search import search_document
from ...core.types import MatchType
from ...formatting.beautify import format_document


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.argument("term")
@click.option("--language", "-l", type=LANGUAGE_CHOICE, help="Skip detection and use this language")
@click.option("--json", "as_json", is_flag=True, help="Output matches as JSON")
def search(source: str, term: str, language: str | None, as_json: bool):
    """
    Search SOURCE for TERM (case-insensitive).

    JSON documents report the ids of matching nodes; other content reports
    start:end offsets in the formatted text.
    """
    content, lang = load_document(source, language)
    output = format_document(content, lang, resolve_options())
    matches = search_document(output, lang, term)

    if as_json:
        click.echo(json.dumps({
            "meta": {"status": "success"},
            "data": [m.model_dump(exclude_none=True, mode="json") for m in matches],
        }, indent=2))
        return

    if not matches:
        echo_info(f"No matches for '{term}'")
        return

    for match in matches:
        if match.type == MatchType.NODE:
            click.echo(match.node_id)
        else:
            click.echo(f"{match.start}:{match.end}")
