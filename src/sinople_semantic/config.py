"""
Configuration for the semantic processor.

Settings come from a JSON object, either passed in directly or read from a
config file:

    {
        "ontology_namespace": "https://sinople.org/ontology#",
        "default_language": "en",
        "default_relationship_type": "related",
        "max_content_mb": 50,
        "force_large_content": false,
        "prefixes": {"ex": "https://example.org/"}
    }
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_ONTOLOGY_NAMESPACE = "https://sinople.org/ontology#"

# Environment variable naming the default config file for the CLI
CONFIG_ENV_VAR = "SINOPLE_CONFIG"


class MemoryLimits:
    """Limits applied by the pre-flight memory check."""
    MIN_AVAILABLE_MEMORY_MB = 128
    MAX_SAFE_CONTENT_MB = 50
    # Parsed triples plus indices take roughly this multiple of the source text
    MEMORY_MULTIPLIER = 6.0
    LOAD_FACTOR = 0.7


@dataclass
class ProcessorConfig:
    """
    Settings shared by the parser, query engine and exporters.

    Attributes:
        ontology_namespace: Namespace IRI of the ``sn:`` vocabulary.
        default_language: Language reported for glosses without a language tag.
        default_relationship_type: Relationship type used when an
            Entanglement has no ``sn:relationshipType``.
        max_content_mb: Largest Turtle document accepted without forcing.
        force_large_content: Skip the size limit of the memory pre-flight check.
        prefixes: Extra prefix declarations used when exporting Turtle.
    """
    ontology_namespace: str = DEFAULT_ONTOLOGY_NAMESPACE
    default_language: str = "en"
    default_relationship_type: str = "related"
    max_content_mb: float = MemoryLimits.MAX_SAFE_CONTENT_MB
    force_large_content: bool = False
    prefixes: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.ontology_namespace or not isinstance(self.ontology_namespace, str):
            raise ConfigError("ontology_namespace must be a non-empty string")
        if self.ontology_namespace[-1] not in "#/":
            raise ConfigError(
                f"ontology_namespace must end with '#' or '/', got '{self.ontology_namespace}'"
            )
        if not self.default_language:
            raise ConfigError("default_language cannot be empty")
        if self.max_content_mb <= 0:
            raise ConfigError(f"max_content_mb must be positive, got {self.max_content_mb}")
        if not isinstance(self.prefixes, dict):
            raise ConfigError(f"prefixes must be a JSON object, got {type(self.prefixes).__name__}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProcessorConfig":
        """Build a config from a dictionary, ignoring unknown keys with a warning."""
        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown configuration keys: {', '.join(unknown)}")
        try:
            return cls(**{key: value for key, value in data.items() if key in known})
        except TypeError as e:
            raise ConfigError(f"Invalid configuration: {e}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ontology_namespace": self.ontology_namespace,
            "default_language": self.default_language,
            "default_relationship_type": self.default_relationship_type,
            "max_content_mb": self.max_content_mb,
            "force_large_content": self.force_large_content,
            "prefixes": dict(self.prefixes),
        }


def load_config(config_path: Union[str, Path]) -> ProcessorConfig:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to a ``.json`` file containing a JSON object.

    Returns:
        The parsed ProcessorConfig.

    Raises:
        ConfigError: If the path is empty, not JSON, or holds invalid settings.
        FileNotFoundError: If the file does not exist.
    """
    if not config_path:
        raise ConfigError("config_path cannot be empty")

    path = Path(config_path)
    if path.suffix.lower() != ".json":
        raise ConfigError(f"Configuration file must have a .json extension: {path}")
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in configuration file {path} at line {e.lineno}, column {e.colno}: {e.msg}"
        )
    except UnicodeDecodeError as e:
        raise ConfigError(f"File encoding error in {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file must contain a JSON object, got {type(data).__name__}")

    logger.debug(f"Loaded configuration from {path}")
    return ProcessorConfig.from_dict(data)


def get_default_config_path() -> Optional[str]:
    """Return the config file named by the SINOPLE_CONFIG environment variable, if any."""
    return os.environ.get(CONFIG_ENV_VAR) or None
