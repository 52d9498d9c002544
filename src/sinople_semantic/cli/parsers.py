"""Argument parser configuration for the sinople-semantic CLI."""

import argparse

from .. import __version__

EXPORT_FORMATS = {
    "turtle": "turtle",
    "ttl": "turtle",
    "nt": "nt",
    "ntriples": "nt",
    "n3": "n3",
    "xml": "xml",
    "rdf": "xml",
    "jsonld": "json-ld",
    "json-ld": "json-ld",
}


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("files", nargs="+", help="Turtle files to load, in order")
    parser.add_argument("--config", help="Path to a JSON configuration file")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write logs to this file")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the top-level parser with one sub-command per query."""
    parser = argparse.ArgumentParser(
        prog="sinople-semantic",
        description="Load Turtle documents and query Constructs, Entanglements and Characters.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command")

    _add_common_arguments(subparsers.add_parser("count", help="Print the number of loaded triples"))
    _add_common_arguments(subparsers.add_parser("constructs", help="List Constructs as JSON"))
    _add_common_arguments(subparsers.add_parser("entanglements", help="List Entanglements as JSON"))
    _add_common_arguments(subparsers.add_parser("characters", help="List Characters as JSON"))
    _add_common_arguments(subparsers.add_parser("graph", help="Print the network graph as JSON"))

    relationships = subparsers.add_parser("relationships", help="List IRIs related to a Construct")
    relationships.add_argument("construct_id", help="IRI of the Construct")
    _add_common_arguments(relationships)

    validate = subparsers.add_parser("validate", help="Report problems in the loaded data")
    _add_common_arguments(validate)
    validate.add_argument("--json", action="store_true", help="Print the report as JSON")

    export = subparsers.add_parser("export", help="Write the loaded triples in an RDF format")
    _add_common_arguments(export)
    export.add_argument(
        "--format",
        default="turtle",
        choices=sorted(EXPORT_FORMATS),
        help="Output serialization (default: turtle)",
    )
    export.add_argument("--output", "-o", help="Write to this file instead of stdout")

    return parser
