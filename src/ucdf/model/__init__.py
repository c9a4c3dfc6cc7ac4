# Copyright 2026 UCDF Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for UCDF documents (source types, access modes, schema elements)."""

from ucdf.model.document import UCDF
from ucdf.model.structure import format_endpoints, format_fields, parse_endpoints, parse_fields
from ucdf.model.types import AccessMode, DataType, Endpoint, Field, SourceType

__all__ = [
    # Value types
    "AccessMode",
    "DataType",
    "SourceType",
    "Field",
    "Endpoint",
    # Structure descriptors
    "parse_fields",
    "format_fields",
    "parse_endpoints",
    "format_endpoints",
    # Document
    "UCDF",
]
