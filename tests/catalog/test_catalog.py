# Copyright 2026 UCDF Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the YAML source catalog."""

from pathlib import Path

import pytest
import yaml

from ucdf.catalog import CATALOG_FILE_NAME, Catalog, CatalogEntry, CatalogError, load_catalog, save_catalog
from ucdf.model.document import UCDF
from ucdf.model.types import AccessMode

# ###############
# Helpers
# ###############


def _write_catalog(tmp_path: Path, content: str) -> Path:
    """Write a catalog file and return its path."""
    path = tmp_path / CATALOG_FILE_NAME
    path.write_text(content, encoding="utf-8")
    return path


# ###############
# Loading
# ###############


def test_load_catalog(tmp_path: Path) -> None:
    """Sources are loaded in file order and parse on access."""
    content = """\
sources:
  - name: users
    ucdf: "t=file.csv;c.path=/data/users.csv;a=r"
    description: Exported user table
  - name: orders
    ucdf: "t=db.postgresql;c.host=db.prod;c.db=sales"
"""
    catalog = load_catalog(_write_catalog(tmp_path, content))

    assert catalog.names() == ["users", "orders"]
    assert catalog.sources[0].description == "Exported user table"
    users = catalog.get("users")
    assert users.get_connection("path") == "/data/users.csv"
    assert users.access == AccessMode.READ


def test_empty_file_is_empty_catalog(tmp_path: Path) -> None:
    catalog = load_catalog(_write_catalog(tmp_path, ""))
    assert catalog.sources == []


def test_escaped_value_in_yaml(tmp_path: Path) -> None:
    """YAML single quotes keep UCDF backslash escapes intact."""
    content = "sources:\n  - name: odd\n    ucdf: 't=file;c.path=/a\\;b'\n"
    catalog = load_catalog(_write_catalog(tmp_path, content))
    assert catalog.get("odd").get_connection("path") == "/a;b"


# ###############
# Errors
# ###############


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(CatalogError, match="not found"):
        load_catalog(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(CatalogError, match="Invalid YAML"):
        load_catalog(_write_catalog(tmp_path, "sources: [unclosed\n"))


def test_schema_violation(tmp_path: Path) -> None:
    with pytest.raises(CatalogError, match="Invalid catalog"):
        load_catalog(_write_catalog(tmp_path, "sources:\n  - name: x\n"))


def test_unknown_top_level_key(tmp_path: Path) -> None:
    with pytest.raises(CatalogError):
        load_catalog(_write_catalog(tmp_path, "sources: []\nextra: 1\n"))


def test_duplicate_names(tmp_path: Path) -> None:
    content = """\
sources:
  - name: a
    ucdf: "t=x"
  - name: a
    ucdf: "t=y"
"""
    with pytest.raises(CatalogError, match="duplicate source name 'a'"):
        load_catalog(_write_catalog(tmp_path, content))


def test_invalid_ucdf_reported_at_load(tmp_path: Path) -> None:
    content = 'sources:\n  - name: broken\n    ucdf: "c.path=/x"\n'
    with pytest.raises(CatalogError, match="Source 'broken'"):
        load_catalog(_write_catalog(tmp_path, content))


def test_unknown_source_name() -> None:
    with pytest.raises(CatalogError, match="No source named 'nope'"):
        Catalog().get("nope")


# ###############
# Saving
# ###############


def test_add_stores_canonical_form() -> None:
    catalog = Catalog()
    catalog.add("users", UCDF.with_source_type("file.csv").with_access_mode(AccessMode.READ))
    assert catalog.sources == [CatalogEntry(name="users", ucdf="t=file.csv;a=r")]


def test_add_replaces_existing_entry() -> None:
    catalog = Catalog()
    catalog.add("a", UCDF.with_source_type("x"))
    catalog.add("a", UCDF.with_source_type("y"), description="second")
    assert catalog.names() == ["a"]
    assert catalog.get("a").source_type.category == "y"


def test_save_and_reload(tmp_path: Path) -> None:
    catalog = Catalog()
    catalog.add("zeta", UCDF.with_source_type("file").with_connection("path", "/a;b"))
    catalog.add("alpha", UCDF.with_source_type("db.mysql"), description="Primary DB")
    path = tmp_path / CATALOG_FILE_NAME

    save_catalog(catalog, path)
    reloaded = load_catalog(path)

    assert reloaded.names() == ["alpha", "zeta"]
    assert reloaded.get("zeta").get_connection("path") == "/a;b"
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert "description" not in raw["sources"][1]


def test_save_to_unwritable_path(tmp_path: Path) -> None:
    with pytest.raises(CatalogError, match="Cannot write"):
        save_catalog(Catalog(), tmp_path / "missing-dir" / CATALOG_FILE_NAME)
