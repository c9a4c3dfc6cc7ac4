# Copyright 2026 UCDF Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the UCDF command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from ucdf.catalog import CatalogError, load_catalog
from ucdf.errors import ParseError, StructureFormatError
from ucdf.model.document import UCDF
from ucdf.model.types import AccessMode
from ucdf.parser.parser import parse
from ucdf.serializer import serialize, to_json

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the UCDF CLI."""
    parser = argparse.ArgumentParser(
        prog="ucdf",
        description="UCDF - describe data sources in a single line",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # parse subcommand
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse a UCDF string and display its components",
        description="Parse a UCDF string and display its components. Secret values are masked.",
    )
    parse_parser.add_argument("text", help="The UCDF string")
    parse_parser.add_argument("--json", action="store_true", help="Print the parsed document as JSON")

    # validate subcommand
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a UCDF string",
        description="Check that a UCDF string parses, without displaying it.",
    )
    validate_parser.add_argument("text", help="The UCDF string")

    # format subcommand
    format_parser = subparsers.add_parser(
        "format",
        help="Print the canonical form of a UCDF string",
        description="Parse a UCDF string and print it in canonical section order.",
    )
    format_parser.add_argument("text", help="The UCDF string")

    # convert subcommand
    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert between UCDF and other formats",
        description=(
            "Convert between UCDF and JDBC, MongoDB or HTTP URLs. Supported pairs: "
            "jdbc->ucdf, mongodb->ucdf, url->ucdf, ucdf->jdbc, ucdf->url."
        ),
    )
    convert_parser.add_argument("source_format", choices=_FORMATS, metavar="FROM", help="Input format")
    convert_parser.add_argument("target_format", choices=_FORMATS, metavar="TO", help="Output format")
    convert_parser.add_argument("input", help="The value to convert")

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Print a sample UCDF string",
        description="Print a sample UCDF string for a common kind of data source.",
    )
    generate_parser.add_argument("kind", help="Kind of source (csv, parquet, postgresql, mysql, mongodb, ...)")

    # catalog subcommand
    catalog_parser = subparsers.add_parser(
        "catalog",
        help="List or show sources in a catalog file",
        description="List the sources of a YAML catalog, or print one source in canonical form.",
    )
    catalog_parser.add_argument("path", help="Path to the catalog file")
    catalog_parser.add_argument("name", nargs="?", help="Source to print (default: list all sources)")

    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_FORMATS = ["ucdf", "jdbc", "mongodb", "url"]

_SECRET_MARKERS = ("password", "token", "secret")

_ACCESS_LABELS: dict[AccessMode, str] = {
    AccessMode.READ: "Read-only (r)",
    AccessMode.WRITE: "Write-only (w)",
    AccessMode.READ_WRITE: "Read-write (rw)",
}


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    logger.debug("Running command %r", args.command)
    if args.command == "parse":
        return _cmd_parse(args)
    if args.command == "validate":
        return _cmd_validate(args)
    if args.command == "format":
        return _cmd_format(args)
    if args.command == "convert":
        return _cmd_convert(args)
    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "catalog":
        return _cmd_catalog(args)
    return 0


def _cmd_parse(args: argparse.Namespace) -> int:
    """Handle the parse subcommand."""
    try:
        document = parse(args.text)
    except ParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(to_json(document, indent=2))
        return 0

    try:
        _print_document(document)
    except StructureFormatError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    """Handle the validate subcommand."""
    try:
        parse(args.text)
    except ParseError as exc:
        print(f"Invalid UCDF string: {exc}", file=sys.stderr)
        return 1
    print("Valid UCDF string")
    return 0


def _cmd_format(args: argparse.Namespace) -> int:
    """Handle the format subcommand."""
    try:
        document = parse(args.text)
    except ParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(serialize(document))
    return 0


def _cmd_convert(args: argparse.Namespace) -> int:
    """Handle the convert subcommand."""
    from ucdf.convert import (
        ConversionError,
        from_jdbc_url,
        from_mongodb_uri,
        from_url,
        to_connection_url,
        to_jdbc_url,
        to_request_url,
    )

    pair = (args.source_format, args.target_format)
    try:
        if pair == ("jdbc", "ucdf"):
            print(serialize(from_jdbc_url(args.input)))
        elif pair == ("mongodb", "ucdf"):
            print(serialize(from_mongodb_uri(args.input)))
        elif pair == ("url", "ucdf"):
            print(serialize(from_url(args.input)))
        elif pair == ("ucdf", "jdbc"):
            print(to_jdbc_url(parse(args.input)))
        elif pair == ("ucdf", "url"):
            document = parse(args.input)
            if document.source_type.category == "db":
                print(to_connection_url(document))
            else:
                print(to_request_url(document))
        else:
            print(
                f"Error: unsupported conversion from '{args.source_format}' to '{args.target_format}'.",
                file=sys.stderr,
            )
            return 1
    except (ParseError, ConversionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    from ucdf.samples import ALIASES, SAMPLES, sample

    try:
        document = sample(args.kind)
    except KeyError:
        available = ", ".join(sorted([*SAMPLES, *ALIASES]))
        print(f"Error: unknown source kind '{args.kind}'. Available kinds: {available}", file=sys.stderr)
        return 1
    print(serialize(document))
    return 0


def _cmd_catalog(args: argparse.Namespace) -> int:
    """Handle the catalog subcommand."""
    path = Path(args.path)
    try:
        catalog = load_catalog(path)
        if args.name is None:
            for entry in catalog.sources:
                if entry.description:
                    print(f"{entry.name}: {entry.description}")
                else:
                    print(entry.name)
            return 0
        print(serialize(catalog.get(args.name)))
    except CatalogError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def _print_document(document: UCDF) -> None:
    """Print a human-readable breakdown of a document."""
    print("Source Type:")
    print(f"  Category: {document.source_type.category}")
    if document.source_type.subtype is not None:
        print(f"  Subtype: {document.source_type.subtype}")

    if document.connection:
        print("\nConnection Parameters:")
        for key, value in document.connection.items():
            print(f"  {key}: {_mask(key, value)}")

    if document.structure:
        print("\nStructure:")
        for key, value in document.structure.items():
            if key == "fields":
                print("  Fields:")
                for f in document.fields():
                    extra = f" ({f.extra})" if f.extra is not None else ""
                    print(f"    {f.name}: {f.type}{extra}")
            elif key == "endpoints":
                print("  Endpoints:")
                for endpoint in document.endpoints():
                    print(f"    {endpoint.method} {endpoint.path}")
            else:
                print(f"  {key}: {value}")

    if document.access is not None:
        print("\nAccess Mode:")
        print(f"  {_ACCESS_LABELS[document.access]}")

    if document.metadata:
        print("\nMetadata:")
        for key, value in document.metadata.items():
            print(f"  {key}: {value}")


def _mask(key: str, value: str) -> str:
    if any(marker in key.lower() for marker in _SECRET_MARKERS):
        return "*" * len(value)
    return value
