"""
treelens CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import logging

import click

from .commands import detect, fmt, graph, search, tree


@click.group()
@click.version_option(package_name="treelens")
@click.option("-v", "--verbose", is_flag=True, help="Log parser and formatter fallbacks")
def main(verbose: bool):
    """treelens: pretty-print and explore JSON, XML/HTML and CSS.

    \b
    Quick Start:
      treelens format data.json --indent 2
      treelens tree page.html
      treelens graph styles.css --json
      treelens search data.json user
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(message)s",
            datefmt="[%X]"
        )


# Register commands
main.add_command(detect.detect)
main.add_command(fmt.format_command, name="format")
main.add_command(tree.tree)
main.add_command(graph.graph)
main.add_command(search.search)

if __name__ == "__main__":
    main()
