"""
CLI command implementations.

Each command loads the given Turtle files into a fresh SemanticProcessor,
runs one operation and prints the result. Exit codes: 0 on success, 1 on
input errors or invalid data.
"""

import argparse
import json
import logging
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

from tqdm import tqdm

from ..boundary import serialize_record, serialize_records
from ..exceptions import ConfigError, SerializationError
from ..processor import SemanticProcessor
from .helpers import read_turtle_file, resolve_config, setup_logging
from .parsers import EXPORT_FORMATS

logger = logging.getLogger(__name__)


def print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


class BaseCommand(ABC):
    """Shared loading and error reporting for all commands."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path

    def execute(self, args: argparse.Namespace) -> int:
        setup_logging(getattr(args, "log_level", "WARNING"), getattr(args, "log_file", None))
        try:
            processor = SemanticProcessor(resolve_config(self.config_path))
        except (ConfigError, FileNotFoundError) as e:
            print(f"✗ Configuration error: {e}", file=sys.stderr)
            return 1

        if not self.load_files(processor, args.files):
            return 1

        try:
            return self.run(processor, args)
        except SerializationError as e:
            logger.error(f"Serialization failed: {e}")
            print(f"✗ Internal error: {e}", file=sys.stderr)
            return 1

    def load_files(self, processor: SemanticProcessor, files: list) -> bool:
        """Load every file in order; report the first failure and return False."""
        progress = tqdm(files, desc="Loading Turtle", unit="file", disable=len(files) < 2, file=sys.stderr)
        for path in progress:
            try:
                processor.load_turtle(read_turtle_file(path), base_iri=Path(path).resolve().as_uri())
            except FileNotFoundError as e:
                print(f"✗ {e}", file=sys.stderr)
                return False
            except (ValueError, MemoryError) as e:
                # ParseError is a ValueError
                print(f"✗ {path}: {e}", file=sys.stderr)
                return False
        return True

    @abstractmethod
    def run(self, processor: SemanticProcessor, args: argparse.Namespace) -> int:
        """Run the command against the loaded processor."""


class CountCommand(BaseCommand):
    def run(self, processor: SemanticProcessor, args: argparse.Namespace) -> int:
        print(processor.triple_count())
        return 0


class ConstructsCommand(BaseCommand):
    def run(self, processor: SemanticProcessor, args: argparse.Namespace) -> int:
        print_json(serialize_records(processor.query_constructs()))
        return 0


class EntanglementsCommand(BaseCommand):
    def run(self, processor: SemanticProcessor, args: argparse.Namespace) -> int:
        print_json(serialize_records(processor.query_entanglements()))
        return 0


class CharactersCommand(BaseCommand):
    def run(self, processor: SemanticProcessor, args: argparse.Namespace) -> int:
        print_json(serialize_records(processor.query_characters()))
        return 0


class RelationshipsCommand(BaseCommand):
    def run(self, processor: SemanticProcessor, args: argparse.Namespace) -> int:
        print_json(processor.find_relationships(args.construct_id))
        return 0


class GraphCommand(BaseCommand):
    def run(self, processor: SemanticProcessor, args: argparse.Namespace) -> int:
        print_json(serialize_record(processor.generate_network_graph()))
        return 0


class ValidateCommand(BaseCommand):
    """Report data problems; exits 1 when errors were found."""

    def run(self, processor: SemanticProcessor, args: argparse.Namespace) -> int:
        result = processor.validate(source_path=", ".join(args.files))
        if args.json:
            print(result.to_json())
        else:
            print(result.get_summary())
        return 0 if result.is_valid else 1


class ExportCommand(BaseCommand):
    def run(self, processor: SemanticProcessor, args: argparse.Namespace) -> int:
        rdf_format = EXPORT_FORMATS[args.format]
        if rdf_format == "turtle":
            output = processor.export_turtle()
        else:
            # rdflib serializers have set semantics: duplicate triples are written once
            output = processor.to_graph().serialize(format=rdf_format)

        if args.output:
            Path(args.output).write_text(output, encoding="utf-8")
            print(f"✓ Wrote {processor.triple_count()} triples to {args.output}", file=sys.stderr)
        else:
            sys.stdout.write(output)
        return 0


COMMAND_MAP = {
    "count": CountCommand,
    "constructs": ConstructsCommand,
    "entanglements": EntanglementsCommand,
    "characters": CharactersCommand,
    "relationships": RelationshipsCommand,
    "graph": GraphCommand,
    "validate": ValidateCommand,
    "export": ExportCommand,
}
