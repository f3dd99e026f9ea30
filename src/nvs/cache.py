"""In-memory navaid cache built from FlightGear navigation data.

The navigation data ships with FlightGear as a gzip-compressed text file
under $FG_ROOT. The first non-blank line holds the format version; every
following non-blank line describes one navaid (see nvs.parse).

The cache is a plain list of navaids in file order. It is built once per
run, filtered by the search options while loading, and only read afterwards.
"""

import gzip
import logging
import os
import re
import zlib
from collections.abc import Iterable
from pathlib import Path

from nvs.config import FG_ROOT_ENV, NAVDATA_ENCODING, NAVDATA_RELPATH, SUPPORTED_VERSION
from nvs.errors import (
    NavDataConfigError,
    NavDataEmptyError,
    NavDataFormatError,
    NavDataIOError,
    NavDataVersionError,
)
from nvs.models import Navaid
from nvs.options import SearchOptions
from nvs.parse import parse_line

logger = logging.getLogger(__name__)

_VERSION = re.compile(r"\s*([+-]?[0-9]+)")


# --- Data File Location ---


def get_navdata_path(fg_root: str | os.PathLike | None = None) -> Path:
    """Get the path of the compressed navigation data file.

    Args:
        fg_root: FlightGear root directory. Defaults to $FG_ROOT.

    Returns:
        Path to Navaids/nav.dat.gz under the FlightGear root

    Raises:
        NavDataConfigError: If no root was given and $FG_ROOT is not set.
    """
    if fg_root is None:
        fg_root = os.environ.get(FG_ROOT_ENV)
    if not fg_root:
        raise NavDataConfigError(f"Missing environment variable {FG_ROOT_ENV}")
    return Path(fg_root) / NAVDATA_RELPATH


# --- Line Handling ---


def preprocess(raw: str) -> str:
    """Strip the line ending and upper-case a raw data line.

    Upper-casing canonicalizes codes for matching and leaves numbers alone.
    """
    return raw.rstrip("\r\n").upper()


def check_version(header: str) -> int:
    """Check the version of the navigation data is supported.

    Args:
        header: The first non-blank line of the data file

    Returns:
        The version number

    Raises:
        NavDataFormatError: If the header does not start with a number.
        NavDataVersionError: If the version is not supported.
    """
    match = _VERSION.match(header)
    if not match:
        raise NavDataFormatError(f"Malformed navigation data header:\n{header}")

    version = int(match.group(1))
    if version != SUPPORTED_VERSION:
        raise NavDataVersionError(f"Unsupported navigation data version {version}")
    return version


# --- Cache Construction ---


def build_cache(lines: Iterable[str], options: SearchOptions) -> list[Navaid]:
    """Build a navaid cache from raw data lines.

    Args:
        lines: Raw lines of the navigation data file, header included
        options: Search options deciding which navaids are kept

    Returns:
        Navaids in file order (never empty)

    Raises:
        NavDataFormatError: If the header or a data line is malformed.
        NavDataEmptyError: If no navaid was kept.
    """
    cache: list[Navaid] = []
    have_header = False
    line_number = 0

    for line_number, raw in enumerate(lines, start=1):
        line = preprocess(raw)
        if not line:
            continue

        try:
            if not have_header:
                version = check_version(line)
                have_header = True
                logger.debug("Navigation data version %d", version)
                continue

            navaid = parse_line(line, options)
        except NavDataFormatError as e:
            if e.line_number is None:
                e.line_number = line_number
            raise

        if navaid is not None:
            cache.append(navaid)

    if not cache:
        raise NavDataEmptyError("Did not find any navigation data in data file")

    logger.debug("Loaded %d navaids from %d lines", len(cache), line_number)
    return cache


def load_cache(path: Path, options: SearchOptions) -> list[Navaid]:
    """Load a navaid cache from a gzip-compressed data file.

    Args:
        path: Path to the compressed navigation data
        options: Search options deciding which navaids are kept

    Returns:
        Navaids in file order (never empty)

    Raises:
        NavDataIOError: If the file cannot be opened or read.
        NavDataFormatError: If the data is malformed.
        NavDataEmptyError: If no navaid was kept.
    """
    logger.debug("Reading navigation data from %s", path)

    try:
        f = gzip.open(path, "rt", encoding=NAVDATA_ENCODING)
    except OSError:
        raise NavDataIOError(f"Failed to open {path}") from None

    with f:
        try:
            return build_cache(f, options)
        except (gzip.BadGzipFile, EOFError, zlib.error) as e:
            raise NavDataIOError(
                f"Problems reading {path}: {e}", decompression=True
            ) from e
        except OSError as e:
            raise NavDataIOError(
                f"Problems reading {path}: {e.strerror or e}"
            ) from e


def create_cache(
    options: SearchOptions, fg_root: str | os.PathLike | None = None
) -> list[Navaid]:
    """Create the navaid cache from the FlightGear installation.

    Args:
        options: Search options deciding which navaids are kept
        fg_root: FlightGear root directory. Defaults to $FG_ROOT.

    Returns:
        Navaids in file order (never empty)
    """
    return load_cache(get_navdata_path(fg_root), options)
