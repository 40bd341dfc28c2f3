"""
Graph Command - Lay out the structure graph.

Prints node positions as a table, or a JSON envelope for renderers and
editor integrations.
"""

import json
from typing import List, Tuple

import click
from pydantic import BaseModel, Field
from rich.console import Console
from rich.table import Table

from ..utils import LANGUAGE_CHOICE, echo_warning, load_document, resolve_options
from ...core.session import DocumentSession
from ...core.types import GraphEdge, ViewTransform

console = Console()


# --- API Models ---
class GraphResponse(BaseModel):
    """
    Structured response for the graph command.
    """
    language: str
    nodes: List[dict] = Field(default_factory=list)
    edges: List[GraphEdge] = Field(default_factory=list)
    transform: ViewTransform | None = None


def parse_viewport(ctx, param, value: str | None) -> Tuple[float, float] | None:
    if value is None:
        return None
    try:
        width, height = value.lower().split("x")
        return float(width), float(height)
    except ValueError:
        raise click.BadParameter("expected WIDTHxHEIGHT, e.g. 1200x800")


def _envelope(status: str, **payload) -> str:
    return json.dumps({"meta": {"status": status}, **payload}, indent=2)


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option("--language", "-l", type=LANGUAGE_CHOICE, help="Skip detection and use this language")
@click.option("--collapse", "-c", multiple=True, help="Node id to collapse (repeatable)")
@click.option("--fit", "viewport", callback=parse_viewport, help="Also compute the fit transform for WIDTHxHEIGHT")
@click.option("--json", "json_mode", is_flag=True, help="Output layout as JSON to stdout")
def graph(
    source: str,
    language: str | None,
    collapse: Tuple[str, ...],
    viewport: Tuple[float, float] | None,
    json_mode: bool,
):
    """
    Compute node positions for SOURCE.
    """
    content, lang = load_document(source, language)
    session = DocumentSession(resolve_options())
    session.set_content(content, lang)

    if session.root is None:
        if json_mode:
            click.echo(_envelope("error", error={"message": f"Graph view not supported for {lang}"}))
        else:
            echo_warning(f"Graph view is not supported for this content ({lang}).")
        return

    session.collapsed.update(collapse)
    nodes = session.relayout()
    transform = session.fit(*viewport) if viewport else None

    if json_mode:
        response = GraphResponse(
            language=lang.value,
            nodes=[node.position() for node in nodes],
            edges=session.edges,
            transform=transform,
        )
        click.echo(_envelope("success", data=response.model_dump(mode="json")))
        return

    table = Table(title=f"{lang.value} layout ({len(nodes)} visible nodes)")
    table.add_column("id", style="cyan")
    table.add_column("label")
    table.add_column("value", style="green")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("width", justify="right")
    for node in nodes:
        table.add_row(
            node.id,
            node.label,
            node.value or "",
            f"{node.x:g}",
            f"{node.y:g}",
            f"{node.width:g}",
        )
    console.print(table)
    if transform:
        console.print(f"fit: translate({transform.x:g}, {transform.y:g}) scale({transform.k:g})")
