"""
Tree Command - Print the structure graph as a tree.
"""

from typing import AbstractSet, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from ..utils import LANGUAGE_CHOICE, echo_warning, load_document, resolve_options
from ...core.session import DocumentSession
from ...core.types import GraphNode, NodeKind

console = Console()


def node_markup(node: GraphNode) -> str:
    label = escape(node.label)
    if node.kind == NodeKind.VALUE:
        if node.value is None:
            return f"[green]{label}[/green]"
        return f"[green]{label}[/green]: [cyan]{escape(node.value)}[/cyan]"
    return f"[bold blue]{label}[/bold blue]"


def render_tree(root: GraphNode, collapsed: AbstractSet[str]) -> Tree:
    """Rich tree of the graph; collapsed nodes show a count instead of children."""

    tree = Tree(node_markup(root))
    stack = [(tree, root)]
    while stack:
        branch, node = stack.pop()
        if node.id in collapsed and node.children:
            branch.add(f"[dim]… {len(node.children)} hidden[/dim]")
            continue
        # Branches are added in order; only the descent is deferred
        pending = [(branch.add(node_markup(child)), child) for child in node.children]
        stack.extend(reversed(pending))
    return tree


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option("--language", "-l", type=LANGUAGE_CHOICE, help="Skip detection and use this language")
@click.option("--collapse", "-c", multiple=True, help="Node id to collapse (repeatable)")
def tree(source: str, language: str | None, collapse: Tuple[str, ...]):
    """
    Show the structure of SOURCE as a collapsible tree.
    """
    content, lang = load_document(source, language)
    session = DocumentSession(resolve_options())
    session.set_content(content, lang)

    if session.root is None:
        echo_warning(f"Tree view is not supported for this content ({lang}).")
        return

    session.collapsed.update(collapse)
    console.print(render_tree(session.root, session.collapsed))
