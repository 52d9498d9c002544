"""
Command line interface.

Usage:
    sinople-semantic constructs ontology.ttl
    sinople-semantic relationships https://example.org/time ontology.ttl
    sinople-semantic graph ontology.ttl extra.ttl
    sinople-semantic export --format nt ontology.ttl -o ontology.nt
"""

from typing import List, Optional

from .commands import COMMAND_MAP, BaseCommand
from .parsers import create_argument_parser

__all__ = ["main", "create_argument_parser", "COMMAND_MAP", "BaseCommand"]


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, dispatch to the command class and return its exit code."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    command = COMMAND_MAP[args.command](config_path=getattr(args, "config", None))
    return command.execute(args)
