"""
CLI Utilities - Shared helper functions for command line operations.

Formatted printing, input loading and option resolution used by every
command.
"""

import sys
from pathlib import Path
from typing import Any, Tuple

import click

from ..config import load_format_options
from ..core.types import FormatOptions, Language
from ..parsing.detect import detect_language

LANGUAGE_CHOICE = click.Choice([lang.value for lang in Language])


def echo_success(message: str) -> None:
    """Green checkmark line on stdout."""
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """Red cross line on stderr."""
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    click.echo(click.style(f"   {message}", dim=True))


def read_input(source: str) -> str:
    """
    Read a document from a file path, or from stdin when ``source`` is "-".

    Exits with status 1 if the file cannot be read as UTF-8 text.
    """
    if source == "-":
        return click.get_text_stream("stdin").read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        echo_error(f"Cannot read {source}: {e}")
        sys.exit(1)


def resolve_language(content: str, override: str | None) -> Language:
    return Language(override) if override else detect_language(content)


def load_document(source: str, language: str | None) -> Tuple[str, Language]:
    content = read_input(source)
    return content, resolve_language(content, language)


def resolve_options(**overrides: Any) -> FormatOptions:
    """Options from treelens.toml / pyproject.toml in the cwd, then CLI flags."""
    return load_format_options(Path.cwd(), **overrides)
