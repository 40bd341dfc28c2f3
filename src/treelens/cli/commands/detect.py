"""
Detect Command - Print the detected language of a document.
"""

import click

from ..utils import read_input
from ...parsing.detect import detect_language


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
def detect(source: str):
    """
    Print the language tag (json, xml, css, javascript or text) for SOURCE.
    """
    click.echo(detect_language(read_input(source)).value)
