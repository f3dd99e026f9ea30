"""Display and formatting functions for navaid search results."""

import click

from .config import SPACER_CHAR, SPACER_LENGTH
from .models import Coordinate, Navaid, NavaidType
from .morse import to_morse
from .options import SearchOptions


def format_coordinate(coordinate: Coordinate, options: SearchOptions) -> str:
    """Format a coordinate as "(051.4775N, 000.4614W)".

    Returns an empty string unless coordinates are enabled.
    """
    if not options.coordinates:
        return ""
    ns = "N" if coordinate.lat >= 0 else "S"
    ew = "E" if coordinate.lon >= 0 else "W"
    return f"({abs(coordinate.lat):08.4f}{ns}, {abs(coordinate.lon):08.4f}{ew})"


def format_morse(navaid: Navaid, options: SearchOptions) -> str:
    """Morse suffix for a navaid, empty when disabled or untranslatable."""
    if not options.morse:
        return ""
    return to_morse(navaid.code) or ""


def _format_head(navaid: Navaid, options: SearchOptions) -> str:
    """Fields shared by every layout: type, code, position and radio data."""
    return (
        f"{navaid.type.label} {navaid.code:<4} "
        f"{format_coordinate(navaid.coordinate, options)} "
        f"{navaid.frequency:6.2f} {navaid.range:3d}nm {navaid.elevation:5d}ft"
    )


def format_common(navaid: Navaid, options: SearchOptions) -> str:
    """Layout used by NDBs, VORs and DMEs not paired with an ILS."""
    return (
        f"{_format_head(navaid, options)} {navaid.name} "
        f"{format_morse(navaid, options)}"
    ).rstrip()


def format_loc(navaid: Navaid, options: SearchOptions) -> str:
    """Layout for an ILS/LOC, adding airport, runway and true bearing."""
    return (
        f"{_format_head(navaid, options)} {navaid.icao}-{navaid.runway:<3} "
        f"{navaid.bearing:03.0f}° {navaid.name} "
        f"{format_morse(navaid, options)}"
    ).rstrip()


def format_dme(navaid: Navaid, options: SearchOptions) -> str:
    """Layout for a DME, adding airport and runway when paired with an ILS."""
    if not navaid.has_runway:
        return format_common(navaid, options)
    return (
        f"{_format_head(navaid, options)} {navaid.icao}-{navaid.runway:<3} "
        f"{navaid.name} {format_morse(navaid, options)}"
    ).rstrip()


def format_navaid(navaid: Navaid, options: SearchOptions) -> str:
    """Format a navaid as a single line of search output."""
    if navaid.type in (NavaidType.ILS, NavaidType.LOC):
        return format_loc(navaid, options)
    if navaid.type in (NavaidType.DME, NavaidType.SDM):
        return format_dme(navaid, options)
    return format_common(navaid, options)


def print_spacer() -> None:
    """Print a separator line between result groups."""
    click.echo(SPACER_CHAR * SPACER_LENGTH)
