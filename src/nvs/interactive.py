"""Interactive search loop over a loaded navaid cache."""

from collections.abc import Sequence

import click
from prompt_toolkit import PromptSession

from .commands import do_search
from .input import HELP_COMMAND, QUIT_ALIASES, create_prompt_session, prompt_with_history
from .models import Navaid
from .options import SearchOptions

INTERACTIVE_HELP = [
    "Enter one or more navaid codes, ICAO airport codes or names:",
    "  <code> [<code> ...]       - Search codes (e.g., OKJ BNN)",
    "  <icao>                    - Navaids at an airport (e.g., EGLL)",
    "  <name>                    - Search names (only with --fuzzy)",
    "Tab completes codes; Up/Down and Ctrl+R recall earlier searches.",
    "Other commands:",
    "  help                      - Show this help",
    "  quit|exit|q               - Leave interactive mode",
]


def print_interactive_help() -> None:
    for line in INTERACTIVE_HELP:
        click.echo(line)


def interactive_mode(
    cache: Sequence[Navaid],
    options: SearchOptions,
    session: PromptSession | None = None,
) -> None:
    """Repeatedly prompt for search terms until the user quits."""
    if session is None:
        session = create_prompt_session(cache)

    if not options.quiet:
        click.echo(f"Loaded {len(cache)} navaids. Type 'help' for commands.")

    while True:
        line = prompt_with_history(session)
        if line is None:
            break

        line = line.strip()
        if not line:
            continue
        if line.lower() in QUIT_ALIASES:
            break
        if line.lower() == HELP_COMMAND:
            print_interactive_help()
            continue

        do_search(cache, line.split(), options)
