# Copyright 2026 UCDF Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tokenizer, section classifier, and parser for UCDF lines."""

from ucdf.parser.parser import parse
from ucdf.parser.sections import SectionKind, classify
from ucdf.parser.tokenizer import RawSection, escape, tokenize

__all__ = [
    "parse",
    "tokenize",
    "escape",
    "RawSection",
    "classify",
    "SectionKind",
]
