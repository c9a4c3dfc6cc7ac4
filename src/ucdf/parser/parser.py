# Copyright 2026 UCDF Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser for UCDF lines.

Folds the tokenized and classified sections into a UCDF document, stopping at
the first violation.
"""

import logging

from ucdf.errors import (
    DuplicateSectionError,
    InvalidAccessModeError,
    InvalidSourceTypeError,
    MissingSourceTypeError,
)
from ucdf.model.document import UCDF
from ucdf.model.types import AccessMode, SourceType
from ucdf.parser.sections import SectionKind, classify
from ucdf.parser.tokenizer import RawSection, tokenize

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def parse(text: str) -> UCDF:
    """Parse a UCDF line into a document.

    Sections may appear in any order. Repeated ``c.``, ``s.`` and ``m.`` keys
    overwrite earlier values; a repeated ``t`` or ``a`` section is an error.

    Args:
        text: A single UCDF line, e.g. ``t=file.csv;c.path=/data/users.csv;a=r``.

    Returns:
        The parsed UCDF document.

    Raises:
        MalformedSectionError: If a section has no unescaped ``=``.
        UnknownSectionError: If a section key has no recognized prefix.
        DuplicateSectionError: If ``t`` or ``a`` appears more than once.
        InvalidSourceTypeError: If the ``t`` value has an empty category.
        InvalidAccessModeError: If the ``a`` value is not ``r``, ``w`` or ``rw``.
        MissingSourceTypeError: If there is no ``t`` section.
    """
    sections = tokenize(text)
    document = _Parser(sections).parse()
    logger.debug("Parsed UCDF document of type %s from %d section(s)", document.source_type, len(sections))
    return document


# ################
# Implementation
# ################


class _Parser:
    """Accumulates classified sections into the parts of a document."""

    def __init__(self, sections: list[RawSection]) -> None:
        self._sections = sections
        self._source_type: SourceType | None = None
        self._access: AccessMode | None = None
        self._seen_access = False
        self._mappings: dict[SectionKind, dict[str, str]] = {
            SectionKind.CONNECTION: {},
            SectionKind.STRUCTURE: {},
            SectionKind.METADATA: {},
        }

    def parse(self) -> UCDF:
        for section in self._sections:
            kind, residual = classify(section.key, section.index)
            if kind is SectionKind.TYPE:
                self._parse_type(section)
            elif kind is SectionKind.ACCESS:
                self._parse_access(section)
            else:
                self._mappings[kind][residual] = section.value

        if self._source_type is None:
            raise MissingSourceTypeError()

        return UCDF(
            source_type=self._source_type,
            connection=self._mappings[SectionKind.CONNECTION],
            structure=self._mappings[SectionKind.STRUCTURE],
            access=self._access,
            metadata=self._mappings[SectionKind.METADATA],
        )

    def _parse_type(self, section: RawSection) -> None:
        if self._source_type is not None:
            raise DuplicateSectionError(section.key, section.index)
        try:
            self._source_type = SourceType.parse(section.value)
        except InvalidSourceTypeError:
            raise InvalidSourceTypeError(section.value, section.index) from None

    def _parse_access(self, section: RawSection) -> None:
        if self._seen_access:
            raise DuplicateSectionError(section.key, section.index)
        self._seen_access = True
        try:
            self._access = AccessMode.parse(section.value)
        except InvalidAccessModeError:
            raise InvalidAccessModeError(section.value, section.index) from None
