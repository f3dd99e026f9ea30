"""Shared command implementations for CLI and interactive modes."""

from collections.abc import Sequence

import click

from .display import print_spacer
from .models import Navaid
from .options import SearchOptions
from .search import find


def print_banner(options: SearchOptions) -> None:
    """Describe the active type filters and bounds before searching."""
    if options.quiet:
        return

    printed = False
    restrictions = options.describe_restrictions()
    if restrictions:
        click.echo(restrictions)
        printed = True
    if options.bounds is not None:
        click.echo(f"Using bounds {options.bounds.describe()}")
        printed = True

    if printed and options.spacers:
        print_spacer()


def do_search(
    cache: Sequence[Navaid], terms: Sequence[str], options: SearchOptions
) -> int:
    """Search the cache for each term and print the results.

    Args:
        cache: Loaded navaids
        terms: Search terms (codes, ICAO codes or, in fuzzy mode, names)
        options: Search options

    Returns:
        Total number of matches over all terms
    """
    total = 0
    for term in terms:
        count = find(cache, term, options)
        if count == 0 and not options.quiet:
            click.echo(f"{term} not found")
        if options.spacers:
            print_spacer()
        total += count
    return total
