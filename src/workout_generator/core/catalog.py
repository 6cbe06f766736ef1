"""
Catalog provider interface.

The generator reads exercises through two calls: the base catalog view
and a per-id secondary lookup (equipment, level, compound flag).  Any
object with these two methods can be passed to generate_workout().
"""

from typing import Protocol, Sequence

from .models import CatalogRow, SecondaryAttributes


class CatalogProvider(Protocol):
    """
    Read-only source of exercise catalog data.

    Either method may raise; the merger turns failures into an empty
    catalog or unknown secondary attributes.
    """

    def fetch_catalog(self) -> list[CatalogRow]:
        """Return the base catalog rows in catalog order."""
        ...

    def fetch_secondary_attributes(self, ids: list[str]) -> list[SecondaryAttributes]:
        """Return secondary attributes for the given exercise ids."""
        ...


class InMemoryCatalogProvider:
    """Catalog provider over rows already held in memory."""

    def __init__(
        self,
        rows: Sequence[CatalogRow],
        secondary: Sequence[SecondaryAttributes] = (),
    ):
        self.rows = list(rows)
        self.secondary = list(secondary)

    def fetch_catalog(self) -> list[CatalogRow]:
        return list(self.rows)

    def fetch_secondary_attributes(self, ids: list[str]) -> list[SecondaryAttributes]:
        wanted = set(ids)
        return [attrs for attrs in self.secondary if attrs.id in wanted]
