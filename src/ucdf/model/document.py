# Copyright 2026 UCDF Contributors
# SPDX-License-Identifier: Apache-2.0

"""The UCDF document: aggregate root of the data model and its fluent builder."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from ucdf.model.structure import format_endpoints, format_fields, parse_endpoints, parse_fields
from ucdf.model.types import AccessMode, Endpoint, Field, SourceType

# ###############
# Public Interface
# ###############

FIELDS_KEY = "fields"
ENDPOINTS_KEY = "endpoints"
FORMAT_KEY = "format"


class UCDF(BaseModel):
    """A single data source description.

    Documents are immutable values. The ``with_*`` methods return a new
    document with copied mappings and leave the receiver untouched, so a
    partially built document can safely serve as the base of several others::

        base = UCDF.with_source_type("db.postgresql").with_connection("host", "db.prod")
        reader = base.with_access_mode(AccessMode.READ)
        writer = base.with_access_mode(AccessMode.READ_WRITE)

    Attributes:
        source_type: What kind of source is described. Always present.
        connection: Connection parameters from ``c.<key>`` sections.
        structure: Raw structure descriptors from ``s.<key>`` sections.
        access: Access mode from the ``a`` section; None when unspecified.
        metadata: Free-form metadata from ``m.<key>`` sections.

    All three mappings preserve insertion order, which fixes their order in
    the canonical text form. Equality and hashing compare them as sets of
    pairs. Every derived document owns fresh copies of the mappings, so
    editing one in place never reaches the document it was built from.
    """

    model_config = ConfigDict(frozen=True)

    source_type: SourceType
    connection: dict[str, str] = _Field(default_factory=dict)
    structure: dict[str, str] = _Field(default_factory=dict)
    access: AccessMode | None = None
    metadata: dict[str, str] = _Field(default_factory=dict)

    # ------------------------------------------------------------------
    # Builder
    # ------------------------------------------------------------------

    @classmethod
    def with_source_type(cls, source_type: SourceType | str) -> UCDF:
        """Start a new document for the given source type.

        A string is split on its first dot, e.g. ``"file.csv"``.
        """
        if isinstance(source_type, str):
            source_type = SourceType.parse(source_type)
        return cls(source_type=source_type)

    def with_connection(self, key: str, value: str) -> UCDF:
        """Return a copy with connection parameter *key* set to *value*."""
        return self._updated("connection", key, value)

    def with_structure(self, key: str, value: str) -> UCDF:
        """Return a copy with structure descriptor *key* set to *value*."""
        return self._updated("structure", key, value)

    def with_fields(self, fields: Iterable[Field]) -> UCDF:
        """Return a copy whose ``fields`` descriptor lists *fields*."""
        return self.with_structure(FIELDS_KEY, format_fields(fields))

    def with_endpoints(self, endpoints: Iterable[Endpoint]) -> UCDF:
        """Return a copy whose ``endpoints`` descriptor lists *endpoints*."""
        return self.with_structure(ENDPOINTS_KEY, format_endpoints(endpoints))

    def with_format(self, data_format: str) -> UCDF:
        """Return a copy with the ``format`` descriptor set (e.g. ``json``)."""
        return self.with_structure(FORMAT_KEY, data_format)

    def with_access_mode(self, mode: AccessMode) -> UCDF:
        """Return a copy with the given access mode."""
        return self._derive(access=mode)

    def with_metadata(self, key: str, value: str) -> UCDF:
        """Return a copy with metadata entry *key* set to *value*."""
        return self._updated("metadata", key, value)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_connection(self, key: str, default: str | None = None) -> str | None:
        return self.connection.get(key, default)

    def get_structure(self, key: str, default: str | None = None) -> str | None:
        return self.structure.get(key, default)

    def get_metadata(self, key: str, default: str | None = None) -> str | None:
        return self.metadata.get(key, default)

    def fields(self) -> list[Field]:
        """Parse the ``fields`` descriptor; empty when the document has none.

        Raises:
            StructureFormatError: If the descriptor is malformed.
        """
        return parse_fields(self.structure.get(FIELDS_KEY, ""))

    def endpoints(self) -> list[Endpoint]:
        """Parse the ``endpoints`` descriptor; empty when the document has none.

        Raises:
            StructureFormatError: If the descriptor is malformed.
        """
        return parse_endpoints(self.structure.get(ENDPOINTS_KEY, ""))

    # ------------------------------------------------------------------
    # Text form
    # ------------------------------------------------------------------

    def to_ucdf(self) -> str:
        """Return the canonical UCDF text for this document."""
        from ucdf.serializer import serialize

        return serialize(self)

    def __str__(self) -> str:
        return self.to_ucdf()

    def __hash__(self) -> int:
        return hash(
            (
                self.source_type,
                frozenset(self.connection.items()),
                frozenset(self.structure.items()),
                self.access,
                frozenset(self.metadata.items()),
            )
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _updated(self, attribute: str, key: str, value: str) -> UCDF:
        mapping: dict[str, str] = dict(getattr(self, attribute))
        mapping[key] = value
        return self._derive(**{attribute: mapping})

    def _derive(self, **update: Any) -> UCDF:
        for attribute in _MAPPINGS:
            update.setdefault(attribute, dict(getattr(self, attribute)))
        return self.model_copy(update=update)


_MAPPINGS = ("connection", "structure", "metadata")
