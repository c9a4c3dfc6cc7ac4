# Copyright 2026 UCDF Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of UCDF documents to canonical text, and JSON export/import.

The canonical form always lists sections in the same order regardless of the
order they were parsed in::

    t=... ; c.* (insertion order) ; s.* (insertion order) ; a=... ; m.* (insertion order)

so that ``parse(serialize(doc)) == doc`` and serializing twice is stable.
"""

from __future__ import annotations

from collections.abc import Iterator

from ucdf.model.document import UCDF
from ucdf.parser.sections import SectionKind
from ucdf.parser.tokenizer import KEY_VALUE_SEPARATOR, SECTION_SEPARATOR, escape

# ###############
# Public Interface
# ###############


def serialize(document: UCDF) -> str:
    """Render a document as a canonical UCDF line.

    Keys and values are escaped. If the last section ends in whitespace a
    terminating ``;`` is appended, since parsing trims the line.

    Raises:
        ValueError: If the document bypassed validation and has an empty or
            dotted category, or an empty mapping key.
    """
    _check_serializable(document)
    line = SECTION_SEPARATOR.join(_sections(document))
    if line[-1:].isspace():
        line += SECTION_SEPARATOR
    return line


def to_json(document: UCDF, indent: int | None = None) -> str:
    """Export a document as JSON."""
    return document.model_dump_json(indent=indent)


def from_json(data: str) -> UCDF:
    """Import a document from JSON produced by :func:`to_json`.

    Raises:
        pydantic.ValidationError: If the JSON does not describe a valid document.
    """
    return UCDF.model_validate_json(data)


# ################
# Implementation
# ################


def _sections(document: UCDF) -> Iterator[str]:
    yield _section(SectionKind.TYPE.value, str(document.source_type))
    yield from _prefixed(SectionKind.CONNECTION, document.connection)
    yield from _prefixed(SectionKind.STRUCTURE, document.structure)
    if document.access is not None:
        yield _section(SectionKind.ACCESS.value, document.access.value)
    yield from _prefixed(SectionKind.METADATA, document.metadata)


def _prefixed(kind: SectionKind, mapping: dict[str, str]) -> Iterator[str]:
    for key, value in mapping.items():
        yield _section(f"{kind.value}.{key}", value)


def _section(key: str, value: str) -> str:
    return f"{escape(key)}{KEY_VALUE_SEPARATOR}{escape(value)}"


def _check_serializable(document: UCDF) -> None:
    category = document.source_type.category
    if not category or "." in category:
        raise ValueError(f"Source type category must be non-empty and contain no dot: {category!r}")
    for kind, mapping in (
        (SectionKind.CONNECTION, document.connection),
        (SectionKind.STRUCTURE, document.structure),
        (SectionKind.METADATA, document.metadata),
    ):
        if "" in mapping:
            raise ValueError(f"Empty key in {kind.name.lower()} section")
