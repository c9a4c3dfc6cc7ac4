# Copyright 2026 UCDF Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sub-grammars for the ``fields`` and ``endpoints`` structure descriptors.

Structure values are stored on the document as raw strings. These helpers
convert between those strings and lists of Field / Endpoint values::

    fields    := field ("," field)*
    field     := name ":" type (":" extra)?
    endpoints := endpoint ("," endpoint)*
    endpoint  := path ":" method
"""

from collections.abc import Iterable

from ucdf.errors import StructureFormatError
from ucdf.model.types import Endpoint, Field

# ###############
# Public Interface
# ###############


def parse_fields(text: str) -> list[Field]:
    """Parse a ``fields`` descriptor such as ``id:int,name:str:64``.

    An empty descriptor yields an empty list. The extra part of an entry may
    itself contain colons (``created:datetime:%Y-%m-%d %H:%M``).

    Raises:
        StructureFormatError: If an entry lacks a name or a type.
    """
    fields: list[Field] = []
    for entry in _entries(text):
        parts = entry.split(":", 2)
        if len(parts) < 2 or not parts[0] or not parts[1]:
            raise StructureFormatError("Invalid field entry (expected name:type[:extra])", entry)
        extra = parts[2] if len(parts) == 3 else None
        fields.append(Field(name=parts[0], type=parts[1], extra=extra))
    return fields


def format_fields(fields: Iterable[Field]) -> str:
    """Render fields as a comma-joined ``name:type[:extra]`` descriptor."""
    return ",".join(str(f) for f in fields)


def parse_endpoints(text: str) -> list[Endpoint]:
    """Parse an ``endpoints`` descriptor such as ``/users:GET,/users:POST``.

    Each entry is split on its last colon so that paths may contain colons.

    Raises:
        StructureFormatError: If an entry lacks a path or a method.
    """
    endpoints: list[Endpoint] = []
    for entry in _entries(text):
        path, sep, method = entry.rpartition(":")
        if not sep or not path or not method:
            raise StructureFormatError("Invalid endpoint entry (expected path:method)", entry)
        endpoints.append(Endpoint(path=path, method=method))
    return endpoints


def format_endpoints(endpoints: Iterable[Endpoint]) -> str:
    """Render endpoints as a comma-joined ``path:method`` descriptor."""
    return ",".join(str(e) for e in endpoints)


# ################
# Implementation
# ################


def _entries(text: str) -> list[str]:
    if not text:
        return []
    return text.split(",")
