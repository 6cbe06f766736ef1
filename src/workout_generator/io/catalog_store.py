"""
File-backed exercise catalog.

Reads a YAML (``.yaml``/``.yml``) or JSON catalog document with a top-level
``exercises`` list.  Each entry carries the base columns (id, name, type,
popularity, primary_muscle) and the secondary columns (equipment, level,
is_compound) in one mapping; the store splits them so it can serve the
two-call CatalogProvider interface.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from ..core.config import CATALOG_ROW_LIMIT
from ..core.models import CatalogRow, SecondaryAttributes
from .serializers import (
    ValidationError,
    dict_to_catalog_row,
    dict_to_secondary_attributes,
)

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when a catalog file cannot be read or parsed."""

    pass


def get_bundled_catalog_path() -> Path:
    """Return the path of the sample catalog shipped with the package."""
    # catalog_store.py lives at src/workout_generator/io/catalog_store.py
    return Path(__file__).parent.parent / "data" / "catalog.yaml"


class FileCatalogProvider:
    """
    Catalog provider over a local YAML/JSON file.

    The file is re-read on every call so edits are picked up without
    restarting; nothing is cached between generations.
    """

    def __init__(self, path: str | Path, limit: int = CATALOG_ROW_LIMIT):
        """
        Initialize the catalog store.

        Args:
            path: Path to the catalog document
            limit: Maximum number of base rows returned by fetch_catalog()
        """
        self.path = Path(path)
        self.limit = limit

    def exists(self) -> bool:
        """Check if the catalog file exists."""
        return self.path.is_file()

    def _load_entries(self) -> list[dict[str, Any]]:
        """
        Read the raw ``exercises`` list.

        Raises:
            CatalogError: If the file is missing or not a valid document
        """
        if not self.exists():
            raise CatalogError(f"Catalog file not found: {self.path}")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                if self.path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise CatalogError(f"Cannot read catalog {self.path}: {e}") from e

        if data is None:
            return []
        if isinstance(data, list):
            entries = data
        elif isinstance(data, dict):
            entries = data.get("exercises") or []
        else:
            raise CatalogError(f"Catalog {self.path} must be a mapping or a list")

        if not isinstance(entries, list):
            raise CatalogError(f"Catalog {self.path}: 'exercises' must be a list")
        return entries

    def fetch_catalog(self) -> list[CatalogRow]:
        """
        Return base catalog rows, at most ``limit`` of them.

        Raises:
            CatalogError: If the file cannot be read
            ValidationError: If an entry is malformed
        """
        entries = self._load_entries()
        rows: list[CatalogRow] = []
        for i, entry in enumerate(entries[: self.limit], 1):
            try:
                rows.append(dict_to_catalog_row(entry))
            except ValidationError as e:
                raise ValidationError(f"{self.path} entry {i}: {e}") from e
        if len(entries) > self.limit:
            logger.info(
                "Catalog %s has %d entries; reading the first %d",
                self.path,
                len(entries),
                self.limit,
            )
        return rows

    def fetch_secondary_attributes(self, ids: list[str]) -> list[SecondaryAttributes]:
        """
        Return secondary attributes for the given ids.

        Raises:
            CatalogError: If the file cannot be read
            ValidationError: If an entry is malformed
        """
        wanted = set(ids)
        result: list[SecondaryAttributes] = []
        for i, entry in enumerate(self._load_entries(), 1):
            try:
                attrs = dict_to_secondary_attributes(entry)
            except ValidationError as e:
                raise ValidationError(f"{self.path} entry {i}: {e}") from e
            if attrs.id in wanted:
                result.append(attrs)
        return result
