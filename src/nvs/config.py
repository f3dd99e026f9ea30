"""Centralized configuration for nvs."""

from pathlib import Path

# =============================================================================
# Navigation Data
# =============================================================================
FG_ROOT_ENV = "FG_ROOT"
NAVDATA_RELPATH = Path("Navaids") / "nav.dat.gz"
NAVDATA_ENCODING = "latin-1"
SUPPORTED_VERSION = 810

# Widest code/ICAO/runway field kept from a data line
FIELD_MAX = 7

# DME records carrying this text belong to an ILS and list its airport/runway
DME_ILS_MARKER = "DME-ILS"

# =============================================================================
# Output
# =============================================================================
SPACER_CHAR = "-"
SPACER_LENGTH = 1

# =============================================================================
# Interactive Mode
# =============================================================================
HISTORY_FILE = Path.home() / ".nvs" / "history"
PROMPT = "nvs> "
