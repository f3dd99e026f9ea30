"""Pytest configuration and fixtures for all tests."""

import gzip

import pytest

from nvs.cache import build_cache
from nvs.options import SearchOptions

NAV_LINES = [
    "",
    "810 Version - data cycle 2013.10, build 20131335",
    "2  51.48857222 -000.97672222      0   361  25    0.000 OKJ  OCKHAM NDB",
    "3  51.30413889 -000.44700000    230 11580 130    2.000 OCK  Ockham VOR-DME",
    "4  51.46475000 -000.43400000     80 10990  18   89.675 ILL  EGLL 09L ILS-cat-III",
    "5  45.50000000  009.25000000    500 10830  18  180.000 LSX  LIMF 36  LOC",
    "",
    "6  51.46475000 -000.43400000     80 10990  10 300089.675 ILL  EGLL 09L GS",
    "7  51.46500000 -000.50000000      0     0   0   89.675 ---- EGLL 09L OM",
    "12 51.46475000 -000.43400000     80 10990  18    0.000 ILL  EGLL 09L DME-ILS",
    "12 51.30413889 -000.44700000    230 11580 130    0.000 OCK  OCKHAM VOR-DME",
    "13 -33.94000000  151.17000000    21 11240  40    0.000 SY   SYDNEY DME",
    "99",
]

ALL_TYPES = SearchOptions(ndb=True, vor=True, ils=True, dme=True)


def write_navdata(root, lines) -> None:
    """Write lines as a gzip-compressed nav.dat under a FlightGear root."""
    path = root / "Navaids" / "nav.dat.gz"
    path.parent.mkdir(parents=True, exist_ok=True)
    with gzip.open(path, "wt", encoding="latin-1") as f:
        for line in lines:
            f.write(line + "\n")


@pytest.fixture
def all_types():
    return ALL_TYPES


@pytest.fixture
def nav_lines():
    return list(NAV_LINES)


@pytest.fixture
def navdata_writer():
    return write_navdata


@pytest.fixture
def fg_root(tmp_path):
    """A FlightGear root containing the sample navigation data."""
    write_navdata(tmp_path, NAV_LINES)
    return tmp_path


@pytest.fixture
def full_cache():
    """Every navaid of the sample data, all types enabled."""
    return build_cache(NAV_LINES, ALL_TYPES)
