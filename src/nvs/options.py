"""Search options shared by the loader, parser and lookup."""

from dataclasses import dataclass, replace

from .models import Bounds


@dataclass(frozen=True)
class SearchOptions:
    """
    Immutable search configuration, built once at startup.

    The four type filters decide which navaids are kept while loading; the
    remaining fields control matching and presentation.
    """

    ndb: bool = False
    vor: bool = False
    ils: bool = False
    dme: bool = False
    fuzzy: bool = False
    coordinates: bool = False
    morse: bool = False
    quiet: bool = False
    spacers: bool = False
    bounds: Bounds | None = None

    def all_restrictions(self) -> bool:
        """True when every navaid type is being searched."""
        return self.ndb and self.vor and self.ils and self.dme

    def any_restriction(self) -> bool:
        """True when at least one navaid type was explicitly requested."""
        return self.ndb or self.vor or self.ils or self.dme

    def with_all_restrictions(self) -> "SearchOptions":
        return replace(self, ndb=True, vor=True, ils=True, dme=True)

    def with_default_restrictions(self) -> "SearchOptions":
        """Fall back to NDB, VOR and ILS when no type was requested."""
        if self.any_restriction():
            return self
        return replace(self, ndb=True, vor=True, ils=True, dme=False)

    def describe_restrictions(self, prefix: str = "Searching for") -> str | None:
        """Describe the active type filters, e.g. "Searching for NDB VOR".

        Returns:
            The description, or None when searching everything by code only.
        """
        if self.all_restrictions() and not self.fuzzy:
            return None

        parts = [prefix]
        if self.dme:
            parts.append("DME")
        if self.ils:
            parts.append("ILS")
        if self.ndb:
            parts.append("NDB")
        if self.vor:
            parts.append("VOR")
        if self.fuzzy:
            parts.append("(including names)")
        return " ".join(parts)
