# Copyright 2026 UCDF Contributors
# SPDX-License-Identifier: Apache-2.0

"""YAML catalog of named UCDF data sources.

A catalog file lists sources by name::

    sources:
      - name: users
        ucdf: "t=file.csv;c.path=/data/users.csv;a=r"
        description: Exported user table
"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ucdf.errors import ParseError
from ucdf.model.document import UCDF
from ucdf.parser.parser import parse
from ucdf.serializer import serialize

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

CATALOG_FILE_NAME = ".ucdf-catalog.yaml"


class CatalogError(Exception):
    """Raised when a catalog cannot be read, written, or is invalid."""


class CatalogEntry(BaseModel):
    """A named data source in a catalog."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    ucdf: str
    description: str | None = None


class Catalog(BaseModel):
    """Top-level catalog model."""

    model_config = ConfigDict(extra="forbid")

    sources: list[CatalogEntry] = Field(default_factory=list)

    def names(self) -> list[str]:
        """Return the source names in file order."""
        return [entry.name for entry in self.sources]

    def get(self, name: str) -> UCDF:
        """Parse and return the source called *name*.

        Raises:
            CatalogError: If there is no such source or its UCDF string is invalid.
        """
        for entry in self.sources:
            if entry.name == name:
                return _parse_entry(entry)
        raise CatalogError(f"No source named '{name}' in catalog")

    def add(self, name: str, document: UCDF, description: str | None = None) -> None:
        """Add or replace the source called *name*, stored in canonical form."""
        entry = CatalogEntry(name=name, ucdf=serialize(document), description=description)
        self.sources = [e for e in self.sources if e.name != name] + [entry]


def load_catalog(path: Path) -> Catalog:
    """Load and validate a catalog file.

    Every entry's UCDF string is parsed so that invalid sources are reported
    at load time. An empty file is treated as an empty catalog.

    Args:
        path: Path to the catalog YAML file.

    Returns:
        A validated Catalog instance.

    Raises:
        CatalogError: If the file cannot be read, contains invalid YAML, does
            not conform to the catalog schema, repeats a name, or holds an
            invalid UCDF string.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise CatalogError(f"Catalog file not found: {path}") from None
    except OSError as exc:
        raise CatalogError(f"Cannot read catalog '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise CatalogError(f"Invalid YAML in catalog '{path}': {exc}") from exc

    if data is None:
        data = {}

    try:
        catalog = Catalog.model_validate(data)
    except ValidationError as exc:
        raise CatalogError(f"Invalid catalog '{path}': {exc}") from exc

    seen: set[str] = set()
    for entry in catalog.sources:
        if entry.name in seen:
            raise CatalogError(f"{path}: duplicate source name '{entry.name}'")
        seen.add(entry.name)
        _parse_entry(entry)

    logger.debug("Loaded %d source(s) from catalog %s", len(catalog.sources), path)
    return catalog


def save_catalog(catalog: Catalog, path: Path) -> None:
    """Write a catalog to disk with sources sorted by name.

    Raises:
        CatalogError: If the file cannot be written.
    """
    data = catalog.model_dump(exclude_none=True)
    data["sources"].sort(key=lambda x: x["name"])
    try:
        path.write_text(yaml.safe_dump(data, default_flow_style=False, sort_keys=False), encoding="utf-8")
    except OSError as exc:
        raise CatalogError(f"Cannot write catalog '{path}': {exc}") from exc


# ################
# Implementation
# ################


def _parse_entry(entry: CatalogEntry) -> UCDF:
    try:
        return parse(entry.ucdf)
    except ParseError as exc:
        raise CatalogError(f"Source '{entry.name}': {exc}") from exc
