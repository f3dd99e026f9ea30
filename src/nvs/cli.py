"""CLI interface for nvs navaid searches."""

import logging

import click

from .cache import create_cache
from .commands import do_search, print_banner
from .config import FG_ROOT_ENV
from .errors import BoundsError, NavDataError
from .interactive import interactive_mode
from .models import Bounds
from .options import SearchOptions


def _parse_bounds(ctx, param, value: str | None) -> Bounds | None:
    if value is None:
        return None
    try:
        return Bounds.parse(value)
    except BoundsError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from None


def _stdin_is_terminal() -> bool:
    return click.get_text_stream("stdin").isatty()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("items", nargs=-1)
@click.option(
    "--all", "-a", "all_types", is_flag=True,
    help="Search for all navaid types, including DME",
)
@click.option(
    "--bounds", "-b", callback=_parse_bounds, metavar="<bounds>",
    help="Bounded by [t],[r],[b],[l] (wildcard '*')",
)
@click.option("--coordinates", "-c", is_flag=True, help="Show coordinates")
@click.option("--fuzzy", "-f", is_flag=True, help="Search names as well as codes")
@click.option("--morse", "-m", is_flag=True, help="Show Morse code for each navaid")
@click.option("--quiet", "-q", is_flag=True, help="Don't display additional messages")
@click.option("--spacers", "-s", is_flag=True, help="Add spacer lines between results")
@click.option("--dme", "-d", is_flag=True, help="Search for DMEs, including standalone")
@click.option("--ils", "-i", is_flag=True, help="Search for ILS/LOC")
@click.option("--ndb", "-n", is_flag=True, help="Search for NDBs")
@click.option("--vor", "-v", is_flag=True, help="Search for VOR/VORTAC")
@click.option(
    "--fg-root",
    envvar=FG_ROOT_ENV,
    type=click.Path(file_okay=False),
    help=f"FlightGear root directory (default: ${FG_ROOT_ENV})",
)
@click.option("--verbose", is_flag=True, help="Log loading details to stderr")
@click.version_option(package_name="nvs")
def main(
    items: tuple[str, ...],
    all_types: bool,
    bounds: Bounds | None,
    coordinates: bool,
    fuzzy: bool,
    morse: bool,
    quiet: bool,
    spacers: bool,
    dme: bool,
    ils: bool,
    ndb: bool,
    vor: bool,
    fg_root: str | None,
    verbose: bool,
):
    """nvs - Search FlightGear navigation data for navaids.

    Searches navaid codes and ICAO airport codes for each ITEM. Run
    without ITEMS at a terminal to enter interactive mode.

    Examples:

        nvs OKJ                  - Find navaids with code OKJ

        nvs -c -m BNN            - Show coordinates and Morse code

        nvs -i EGLL              - ILS/LOC serving Heathrow

        nvs -f -b 60,2,50,-2 LONDON - Names containing LONDON in a box
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if not items and not _stdin_is_terminal():
        ctx = click.get_current_context()
        click.echo(ctx.get_usage(), err=True)
        ctx.exit(1)

    options = SearchOptions(
        ndb=ndb,
        vor=vor,
        ils=ils,
        dme=dme,
        fuzzy=fuzzy,
        coordinates=coordinates,
        morse=morse,
        quiet=quiet,
        spacers=spacers,
        bounds=bounds,
    )
    if all_types:
        options = options.with_all_restrictions()
    options = options.with_default_restrictions()

    print_banner(options)

    try:
        cache = create_cache(options, fg_root)
    except NavDataError as e:
        raise click.ClickException(str(e)) from e

    if not items:
        interactive_mode(cache, options)
        return

    do_search(cache, items, options)


if __name__ == "__main__":
    main()
