# Copyright 2026 UCDF Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tokenizer for UCDF lines.

Splits a line into raw key/value sections, honouring the backslash escapes
``\\;``, ``\\=`` and ``\\\\``.
"""

from dataclasses import dataclass

from ucdf.errors import MalformedSectionError

# ###############
# Public Interface
# ###############

SECTION_SEPARATOR = ";"
KEY_VALUE_SEPARATOR = "="
ESCAPE = "\\"


@dataclass(frozen=True)
class RawSection:
    """One ``key=value`` section with escapes already decoded.

    Attributes:
        key: The decoded key, e.g. ``c.path``.
        value: The decoded value; may contain ``=`` and ``;``.
        index: 1-based position of the section within the line, counting
            empty sections.
    """

    key: str
    value: str
    index: int


def tokenize(text: str) -> list[RawSection]:
    """Split a UCDF line into its non-empty sections.

    Whitespace around the whole line is trimmed; whitespace inside keys and
    values is kept. Empty sections (``;;`` or a leading/trailing ``;``) are
    skipped. Each section is split on its first unescaped ``=`` only.

    Args:
        text: A single UCDF line.

    Returns:
        The sections in input order.

    Raises:
        MalformedSectionError: If a non-empty section has no unescaped ``=``.
    """
    return _Tokenizer(text.strip()).tokenize()


def escape(text: str) -> str:
    """Escape the delimiter and escape characters so *text* survives tokenizing."""
    return text.translate(_ESCAPE_TABLE)


# ################
# Implementation
# ################

_ESCAPABLE = frozenset({SECTION_SEPARATOR, KEY_VALUE_SEPARATOR, ESCAPE})

_ESCAPE_TABLE = str.maketrans({ch: ESCAPE + ch for ch in _ESCAPABLE})


class _Tokenizer:
    """Internal single-pass scanner over one UCDF line."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._index = 0

    def tokenize(self) -> list[RawSection]:
        """Scan all sections, consuming the separators between them."""
        sections: list[RawSection] = []
        while True:
            self._index += 1
            section = self._scan_section()
            if section is not None:
                sections.append(section)
            if self._at_end():
                return sections
            self._advance()  # ;

    # ------------------------------------------------------------------
    # Character access helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _current(self) -> str:
        return self._source[self._pos]

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        return ch

    # ------------------------------------------------------------------
    # Section scanning
    # ------------------------------------------------------------------

    def _scan_section(self) -> RawSection | None:
        """Scan up to the next unescaped ``;`` or end of input.

        Returns None for an empty section.
        """
        start = self._pos
        key_chars: list[str] = []
        value_chars: list[str] | None = None
        target = key_chars

        while not self._at_end() and self._current() != SECTION_SEPARATOR:
            ch = self._advance()
            if ch == ESCAPE:
                target.extend(self._scan_escape())
            elif ch == KEY_VALUE_SEPARATOR and value_chars is None:
                value_chars = []
                target = value_chars
            else:
                target.append(ch)

        raw = self._source[start : self._pos]
        if not raw:
            return None
        if value_chars is None:
            raise MalformedSectionError(raw, self._index)
        return RawSection("".join(key_chars), "".join(value_chars), self._index)

    def _scan_escape(self) -> str:
        """Decode the character after a backslash.

        Unknown escapes and a trailing lone backslash are kept verbatim.
        """
        if self._at_end():
            return ESCAPE
        ch = self._advance()
        if ch in _ESCAPABLE:
            return ch
        return ESCAPE + ch
