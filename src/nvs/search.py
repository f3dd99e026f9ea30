"""Navaid lookup by code, ICAO airport code or name."""

from collections.abc import Callable, Sequence

import click

from .display import format_navaid
from .models import Navaid
from .options import SearchOptions


def normalize_term(term: str) -> str:
    """Normalize a search term; cached codes and names are upper case."""
    return term.upper()


def matches(term: str, navaid: Navaid, fuzzy: bool = False) -> bool:
    """
    Check if a navaid matches a normalized search term.

    A navaid matches when its code or ICAO airport code equals the term, or,
    in fuzzy mode, when the term appears anywhere in its name.
    """
    if navaid.code == term:
        return True
    if navaid.icao is not None and navaid.icao == term:
        return True
    return fuzzy and term in navaid.name


def find_matches(
    cache: Sequence[Navaid], term: str, options: SearchOptions
) -> list[Navaid]:
    """Find all navaids matching a search term, in cache order."""
    term = normalize_term(term)
    return [navaid for navaid in cache if matches(term, navaid, options.fuzzy)]


def find(
    cache: Sequence[Navaid],
    term: str,
    options: SearchOptions,
    echo: Callable[[str], None] = click.echo,
) -> int:
    """
    Find navaids and print a description of each.

    Args:
        cache: Loaded navaids
        term: Search term as entered by the user (any case)
        options: Search options (fuzzy matching and display settings)
        echo: Output function for formatted lines

    Returns:
        Number of navaids that matched
    """
    found = find_matches(cache, term, options)
    for navaid in found:
        echo(format_navaid(navaid, options))
    return len(found)
