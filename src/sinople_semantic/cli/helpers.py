"""
CLI helper utilities.

This module provides shared utilities for CLI commands including:
- Logging setup
- Configuration loading
- Reading Turtle files
"""

import logging
import os
import sys
import tempfile
from pathlib import Path
from typing import Literal, Optional

from ..config import ProcessorConfig, get_default_config_path, load_config

# Type alias for log levels
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: LogLevel = "WARNING", log_file: Optional[str] = None) -> Optional[str]:
    """
    Configure root logging for the CLI.

    Console output goes to stderr so that JSON written to stdout stays
    parseable. If the requested log file cannot be created, the system temp
    directory and then the home directory are tried.

    Args:
        level: Log level name.
        log_file: Optional log file path.

    Returns:
        The log file actually used, or None when logging to the console only.
    """
    log_level = getattr(logging, str(level).upper(), logging.WARNING)
    handlers = [logging.StreamHandler(sys.stderr)]
    actual_log_file = None

    if log_file:
        log_filename = os.path.basename(log_file) or "sinople_semantic.log"
        fallback_locations = [
            log_file,
            os.path.join(tempfile.gettempdir(), log_filename),
            os.path.join(Path.home(), log_filename),
        ]
        for candidate in fallback_locations:
            try:
                log_dir = os.path.dirname(candidate)
                if log_dir:
                    os.makedirs(log_dir, exist_ok=True)
                handlers.append(logging.FileHandler(candidate, encoding="utf-8"))
                actual_log_file = candidate
                if candidate != log_file:
                    print(f"Note: Using fallback log file: {candidate}", file=sys.stderr)
                break
            except OSError as e:
                print(f"  Could not create log at {candidate}: {e}", file=sys.stderr)

        if actual_log_file is None:
            print("Warning: Could not write log file to any location, logging to console only",
                  file=sys.stderr)

    logging.basicConfig(level=log_level, format=LOG_FORMAT, handlers=handlers, force=True)
    if actual_log_file:
        logging.getLogger(__name__).info(f"Logging to: {actual_log_file}")
    return actual_log_file


def resolve_config(config_path: Optional[str] = None) -> ProcessorConfig:
    """
    Load the processor configuration for a CLI run.

    An explicit ``--config`` wins over the SINOPLE_CONFIG environment
    variable; with neither, defaults are used.
    """
    path = config_path or get_default_config_path()
    if not path:
        return ProcessorConfig()
    return load_config(path)


def read_turtle_file(path: str) -> str:
    """
    Read a Turtle file as UTF-8.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the path is a directory or the file is not UTF-8.
    """
    file_path = Path(path).expanduser()
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    if file_path.is_dir():
        raise ValueError(f"'{path}' is a directory, expected a Turtle file")
    try:
        return file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ValueError(f"File is not valid UTF-8: {path} ({e})")
