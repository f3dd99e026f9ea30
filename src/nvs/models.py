"""Navaid record model: types, coordinates and search bounds."""

import re
from dataclasses import dataclass
from enum import IntEnum

from .errors import BoundsError

BOUNDS_WILDCARD = "*"

# Plain decimal numbers as written in the data file and on the command line
INTEGER = re.compile(r"[+-]?[0-9]+")
DECIMAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


class NavaidType(IntEnum):
    """Navaid type codes as they appear at the start of an 810 data line."""

    NIL = 0  # Not valid or unassigned
    NDB = 2  # Non-Directional Beacon
    VOR = 3  # VOR and VORTAC
    ILS = 4  # ILS localizer
    LOC = 5  # Localizer
    GS = 6  # Glideslope
    OM = 7  # Outer Marker
    MM = 8  # Middle Marker
    IM = 9  # Inner Marker
    DME = 12  # DME component of VOR or ILS
    SDM = 13  # Standalone or NDB DME
    EOD = 99  # End of data marker

    @property
    def label(self) -> str:
        """Short label used when printing a navaid of this type."""
        if self is NavaidType.SDM:
            return "DME"
        return self.name


# Recognized types that never produce a record
IGNORED_TYPES = frozenset(
    {NavaidType.GS, NavaidType.OM, NavaidType.MM, NavaidType.IM, NavaidType.EOD}
)


@dataclass(frozen=True)
class Coordinate:
    """Latitude/longitude in decimal degrees."""

    lat: float
    lon: float


@dataclass(frozen=True)
class Bounds:
    """Rectangular search area, from the south-west to the north-east corner."""

    min: Coordinate
    max: Coordinate

    @classmethod
    def world(cls) -> "Bounds":
        return cls(min=Coordinate(-90.0, -180.0), max=Coordinate(90.0, 180.0))

    @classmethod
    def parse(cls, text: str) -> "Bounds":
        """
        Parse bounds from a "top,right,bottom,left" specification.

        Any element may be left empty or start with "*" to keep the world
        default for that edge, e.g. "60,2,50,-2", "60,,50," or "*,*,50,*".
        Empty elements after the fourth are ignored.

        Raises:
            BoundsError: If an element is not a number, there are more than
                four elements, or the resulting area is invalid.
        """
        world = cls.world()
        edges = [world.max.lat, world.max.lon, world.min.lat, world.min.lon]

        tokens = [token.strip() for token in text.split(",")]
        if any(tokens[len(edges):]):
            raise BoundsError(f"Too many elements in bounds: {text}")

        for i, token in enumerate(tokens[: len(edges)]):
            if not token or token.startswith(BOUNDS_WILDCARD):
                continue
            if not DECIMAL.fullmatch(token):
                raise BoundsError(f"Invalid token in bounds: {token}")
            edges[i] = float(token)

        top, right, bottom, left = edges
        bounds = cls(min=Coordinate(bottom, left), max=Coordinate(top, right))
        if not bounds.is_valid():
            raise BoundsError(f"Invalid bounds: {bounds.describe()}")
        return bounds

    def is_valid(self) -> bool:
        """Check the corners are ordered and lie on the globe."""
        return (
            self.max.lat <= 90.0
            and self.min.lat >= -90.0
            and self.max.lon <= 180.0
            and self.min.lon >= -180.0
            and self.max.lat > self.min.lat
            and self.max.lon > self.min.lon
        )

    def contains(self, coordinate: Coordinate) -> bool:
        """Check whether a coordinate lies inside or on the edge of the area."""
        return (
            self.min.lat <= coordinate.lat <= self.max.lat
            and self.min.lon <= coordinate.lon <= self.max.lon
        )

    def describe(self) -> str:
        return (
            f"top={self.max.lat:.2f}, right={self.max.lon:.2f}, "
            f"bottom={self.min.lat:.2f}, left={self.min.lon:.2f}"
        )


@dataclass(frozen=True)
class Navaid:
    """
    A single navigation aid loaded from the data file.

    The meaning of `extra` depends on `type`: magnetic variation for a VOR,
    true bearing for an ILS/LOC, bias for a DME and unused for an NDB. Use
    the `variation`, `bearing` and `bias` accessors rather than `extra`.
    """

    type: NavaidType
    coordinate: Coordinate
    elevation: int  # feet
    range: int  # nautical miles
    frequency: float  # kHz for NDB, MHz otherwise
    extra: float
    code: str
    name: str
    icao: str | None = None
    runway: str | None = None

    @property
    def variation(self) -> float | None:
        """Magnetic variation of a VOR."""
        return self.extra if self.type is NavaidType.VOR else None

    @property
    def bearing(self) -> float | None:
        """True bearing of an ILS/LOC."""
        if self.type in (NavaidType.ILS, NavaidType.LOC):
            return self.extra
        return None

    @property
    def bias(self) -> float | None:
        """Bias of a DME."""
        if self.type in (NavaidType.DME, NavaidType.SDM):
            return self.extra
        return None

    @property
    def has_runway(self) -> bool:
        return self.icao is not None and self.runway is not None
