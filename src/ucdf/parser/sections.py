# Copyright 2026 UCDF Contributors
# SPDX-License-Identifier: Apache-2.0

"""Classification of section keys into section kinds."""

import enum

from ucdf.errors import UnknownSectionError

# ###############
# Public Interface
# ###############


class SectionKind(enum.Enum):
    """The five kinds of UCDF section, keyed by their prefix."""

    TYPE = "t"
    CONNECTION = "c"
    STRUCTURE = "s"
    ACCESS = "a"
    METADATA = "m"


def classify(key: str, section: int | None = None) -> tuple[SectionKind, str]:
    """Map a raw section key to its kind and residual key.

    ``t`` and ``a`` stand alone and have an empty residual. ``c.``, ``s.``
    and ``m.`` must be followed by a non-empty residual key, which may itself
    contain dots (``c.auth.token`` has residual ``auth.token``).

    Args:
        key: The decoded section key.
        section: 1-based section position, used for error reporting.

    Returns:
        A ``(kind, residual)`` pair.

    Raises:
        UnknownSectionError: If the key has no recognized shape.
    """
    kind = _STANDALONE_KEYS.get(key)
    if kind is not None:
        return kind, ""

    prefix, dot, residual = key.partition(".")
    kind = _PREFIXED_KEYS.get(prefix)
    if kind is None or not dot or not residual:
        raise UnknownSectionError(key, section)
    return kind, residual


# ################
# Implementation
# ################

_STANDALONE_KEYS: dict[str, SectionKind] = {
    "t": SectionKind.TYPE,
    "a": SectionKind.ACCESS,
}

_PREFIXED_KEYS: dict[str, SectionKind] = {
    "c": SectionKind.CONNECTION,
    "s": SectionKind.STRUCTURE,
    "m": SectionKind.METADATA,
}
