# Copyright 2026 UCDF Contributors
# SPDX-License-Identifier: Apache-2.0

"""UCDF: a compact single-line notation for describing data sources.

Example::

    >>> import ucdf
    >>> doc = ucdf.parse("t=file.csv;c.path=/data/users.csv;s.fields=id:int,name:str;a=r")
    >>> doc.source_type.subtype
    'csv'
    >>> ucdf.serialize(doc.with_metadata("owner", "data-eng"))
    't=file.csv;c.path=/data/users.csv;s.fields=id:int,name:str;a=r;m.owner=data-eng'
"""

from ucdf.errors import (
    DuplicateSectionError,
    InvalidAccessModeError,
    InvalidSourceTypeError,
    MalformedSectionError,
    MissingSourceTypeError,
    ParseError,
    StructureFormatError,
    UnknownSectionError,
)
from ucdf.model import (
    UCDF,
    AccessMode,
    DataType,
    Endpoint,
    Field,
    SourceType,
    format_endpoints,
    format_fields,
    parse_endpoints,
    parse_fields,
)
from ucdf.parser import parse
from ucdf.serializer import from_json, serialize, to_json

__all__ = [
    # Core operations
    "parse",
    "serialize",
    "to_json",
    "from_json",
    # Data model
    "UCDF",
    "SourceType",
    "AccessMode",
    "Field",
    "Endpoint",
    "DataType",
    "parse_fields",
    "format_fields",
    "parse_endpoints",
    "format_endpoints",
    # Errors
    "ParseError",
    "MalformedSectionError",
    "UnknownSectionError",
    "DuplicateSectionError",
    "MissingSourceTypeError",
    "InvalidSourceTypeError",
    "InvalidAccessModeError",
    "StructureFormatError",
]
