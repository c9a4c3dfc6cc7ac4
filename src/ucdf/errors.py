# Copyright 2026 UCDF Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exception types raised while parsing UCDF text and its structure descriptors."""

# ###############
# Public Interface
# ###############


class ParseError(Exception):
    """Base class for all errors raised while parsing a UCDF line.

    Attributes:
        section: 1-based position of the offending section, or None when the
            error concerns the document as a whole.
    """

    def __init__(self, message: str, section: int | None = None) -> None:
        if section is None:
            super().__init__(message)
        else:
            super().__init__(f"Section {section}: {message}")
        self.section = section


class MalformedSectionError(ParseError):
    """Raised when a section has no unescaped ``=`` separating key and value."""

    def __init__(self, text: str, section: int | None = None) -> None:
        super().__init__(f"Malformed section (expected key=value): {text!r}", section)
        self.text = text


class UnknownSectionError(ParseError):
    """Raised when a section key has no recognized prefix."""

    def __init__(self, key: str, section: int | None = None) -> None:
        super().__init__(f"Unknown section key: {key!r}", section)
        self.key = key


class DuplicateSectionError(ParseError):
    """Raised when a single-valued section (``t`` or ``a``) appears twice."""

    def __init__(self, key: str, section: int | None = None) -> None:
        super().__init__(f"Duplicate section: {key!r}", section)
        self.key = key


class MissingSourceTypeError(ParseError):
    """Raised when a document has no ``t`` section."""

    def __init__(self) -> None:
        super().__init__("Missing required type section (t=...)")


class InvalidSourceTypeError(ParseError):
    """Raised when the ``t`` value has an empty category."""

    def __init__(self, value: str, section: int | None = None) -> None:
        super().__init__(f"Invalid source type: {value!r}", section)
        self.value = value


class InvalidAccessModeError(ParseError):
    """Raised when the ``a`` value is not one of ``r``, ``w`` or ``rw``."""

    def __init__(self, value: str, section: int | None = None) -> None:
        super().__init__(f"Invalid access mode: {value!r} (expected 'r', 'w' or 'rw')", section)
        self.value = value


class StructureFormatError(Exception):
    """Raised when a ``fields`` or ``endpoints`` entry does not match its sub-grammar.

    Attributes:
        entry: The offending comma-separated entry.
    """

    def __init__(self, message: str, entry: str) -> None:
        super().__init__(f"{message}: {entry!r}")
        self.entry = entry
