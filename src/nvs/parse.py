"""Parser for navaid lines in the FlightGear 810 navigation data format.

Each data line holds whitespace-delimited fields followed by a free-text
name running to the end of the line:

    type lat lon elevation frequency range extra code [icao runway] name...

- type: numeric NavaidType code (2=NDB, 3=VOR, 4=ILS, 5=LOC, 12=DME, ...)
- frequency: kHz for NDBs, hundredths of MHz for everything else
- extra: unused (NDB), magnetic variation (VOR), true bearing (ILS/LOC)
  or bias (DME)
- icao/runway: only present for ILS/LOC and for DMEs paired with an ILS
"""

import re
from collections.abc import Callable

from .config import DME_ILS_MARKER, FIELD_MAX
from .errors import NavDataFormatError
from .models import DECIMAL, IGNORED_TYPES, INTEGER, Bounds, Coordinate, Navaid, NavaidType
from .options import SearchOptions

_TYPE_CODE = re.compile(r"\s*([+-]?[0-9]+)")

# Fixed fields before the name: type, lat, lon, elevation, frequency, range,
# extra and code, optionally followed by icao and runway
SHORT_FIELDS = 8
LONG_FIELDS = 10


def in_bounds(coordinate: Coordinate, bounds: Bounds | None) -> bool:
    """Check whether a coordinate passes the optional bounds filter."""
    if bounds is None:
        return True
    return bounds.contains(coordinate)


def read_type(line: str) -> NavaidType:
    """
    Read the leading navaid type code of a data line.

    Raises:
        NavDataFormatError: If no code can be read or the code is unknown.
    """
    match = _TYPE_CODE.match(line)
    if not match:
        raise NavDataFormatError(f"Missing navaid type in data line: {line}")

    code = int(match.group(1))
    try:
        navaid_type = NavaidType(code)
    except ValueError:
        navaid_type = NavaidType.NIL
    if navaid_type is NavaidType.NIL:
        raise NavDataFormatError(f"Unexpected navaid type {code} in data file")
    return navaid_type


def _split_fields(line: str, count: int) -> tuple[list[str], str]:
    """Split a line into its fixed fields and the trailing name."""
    parts = line.split(None, count)
    if len(parts) < count:
        raise NavDataFormatError(
            f"Expected {count} fields, found {len(parts)}: {line}"
        )
    name = parts[count].strip() if len(parts) > count else ""
    return parts[:count], name


def _number(
    value: str, field: str, pattern: re.Pattern, convert: Callable[[str], float | int]
):
    if not pattern.fullmatch(value):
        raise NavDataFormatError(f"Malformed {field} field: {value}")
    return convert(value)


def _build(
    navaid_type: NavaidType,
    fields: list[str],
    name: str,
    scale: float,
    with_runway: bool,
) -> Navaid:
    """Build a navaid from split fields, dividing the frequency by scale."""
    return Navaid(
        type=navaid_type,
        coordinate=Coordinate(
            lat=_number(fields[1], "latitude", DECIMAL, float),
            lon=_number(fields[2], "longitude", DECIMAL, float),
        ),
        elevation=_number(fields[3], "elevation", INTEGER, int),
        frequency=_number(fields[4], "frequency", DECIMAL, float) / scale,
        range=_number(fields[5], "range", INTEGER, int),
        extra=_number(fields[6], "type-specific", DECIMAL, float),
        code=fields[7][:FIELD_MAX],
        icao=fields[8][:FIELD_MAX] if with_runway else None,
        runway=fields[9][:FIELD_MAX] if with_runway else None,
        name=name,
    )


def parse_ndb(line: str) -> Navaid:
    fields, name = _split_fields(line, SHORT_FIELDS)
    return _build(NavaidType.NDB, fields, name, scale=1, with_runway=False)


def parse_vor(line: str) -> Navaid:
    fields, name = _split_fields(line, SHORT_FIELDS)
    return _build(NavaidType.VOR, fields, name, scale=100, with_runway=False)


def parse_loc(line: str, navaid_type: NavaidType) -> Navaid:
    """Parse an ILS or LOC line, which always carries an airport and runway."""
    fields, name = _split_fields(line, LONG_FIELDS)
    return _build(navaid_type, fields, name, scale=100, with_runway=True)


def parse_dme(line: str, navaid_type: NavaidType) -> Navaid:
    """Parse a DME or standalone DME line.

    A DME paired with an ILS has "DME-ILS" in its name and lists the
    airport and runway of the ILS after its code.
    """
    with_runway = DME_ILS_MARKER in line
    count = LONG_FIELDS if with_runway else SHORT_FIELDS
    fields, name = _split_fields(line, count)
    return _build(navaid_type, fields, name, scale=100, with_runway=with_runway)


def parse_line(line: str, options: SearchOptions) -> Navaid | None:
    """
    Parse a preprocessed 810 data line into a navaid.

    Args:
        line: Data line, already stripped of its line ending and upper-cased.
        options: Search options; the type filters and bounds are applied here.

    Returns:
        The navaid, or None if its type is disabled, it is a marker or
        glideslope record, or it lies outside the bounds.

    Raises:
        NavDataFormatError: If the type code is unknown or a field of an
            enabled type is missing or malformed.
    """
    navaid_type = read_type(line)

    if navaid_type in IGNORED_TYPES:
        return None

    if navaid_type is NavaidType.NDB:
        if not options.ndb:
            return None
        navaid = parse_ndb(line)
    elif navaid_type is NavaidType.VOR:
        if not options.vor:
            return None
        navaid = parse_vor(line)
    elif navaid_type in (NavaidType.ILS, NavaidType.LOC):
        if not options.ils:
            return None
        navaid = parse_loc(line, navaid_type)
    elif navaid_type in (NavaidType.DME, NavaidType.SDM):
        if not options.dme:
            return None
        navaid = parse_dme(line, navaid_type)
    else:
        raise NavDataFormatError(f"Unexpected navaid type {int(navaid_type)} in data file")

    if not in_bounds(navaid.coordinate, options.bounds):
        return None
    return navaid
