"""
Host boundary adapter.

Maps engine records to plain dictionaries and lists, and turns failures
into explicit result values so that nothing raised inside the engine takes
down the host. Error kinds are "parse" for bad input, "serialization" for
records with no boundary shape, "resource" for loads refused by the memory
check and "internal" for anything else. The adapter holds no business logic.

Usage:
    handle = create()
    result = load_turtle(handle, ttl_text)
    if not result.ok:
        log(result.error.kind, result.error.message)
    graph = generate_network_graph(handle).value
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from .config import ProcessorConfig
from .exceptions import ParseError, SerializationError
from .processor import SemanticProcessor

logger = logging.getLogger(__name__)

PARSE_ERROR = "parse"
SERIALIZATION_ERROR = "serialization"
RESOURCE_ERROR = "resource"
INTERNAL_ERROR = "internal"

_PLAIN_SCALARS = (str, int, float, bool, type(None))


@dataclass(frozen=True)
class BoundaryError:
    kind: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"kind": self.kind, "message": self.message}


@dataclass(frozen=True)
class BoundaryResult:
    """Outcome of a boundary call: a value when ``ok``, otherwise an error."""
    ok: bool
    value: Any = None
    error: Optional[BoundaryError] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "value": self.value,
            "error": self.error.to_dict() if self.error else None,
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


def _check_plain(value: Any, path: str) -> None:
    if isinstance(value, _PLAIN_SCALARS):
        return
    if isinstance(value, list):
        for index, item in enumerate(value):
            _check_plain(item, f"{path}[{index}]")
        return
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise SerializationError(f"Non-string key {key!r} at {path}")
            _check_plain(item, f"{path}.{key}")
        return
    raise SerializationError(f"Value of type {type(value).__name__} at {path} has no boundary representation")


def serialize_record(record: Any) -> Dict[str, Any]:
    """
    Convert one engine record to its boundary dictionary.

    Raises:
        SerializationError: If the record cannot be represented.
    """
    to_dict = getattr(record, "to_dict", None)
    if to_dict is None:
        raise SerializationError(f"{type(record).__name__} is not a boundary record")
    try:
        data = to_dict()
    except (AttributeError, TypeError, ValueError) as e:
        raise SerializationError(f"Could not serialize {type(record).__name__}: {e}")
    _check_plain(data, type(record).__name__)
    return data


def serialize_records(records: List[Any]) -> List[Dict[str, Any]]:
    return [serialize_record(record) for record in records]


def _call(operation: str, func: Callable[[], Any]) -> BoundaryResult:
    try:
        return BoundaryResult(ok=True, value=func())
    except ParseError as e:
        return BoundaryResult(ok=False, error=BoundaryError(PARSE_ERROR, str(e)))
    except SerializationError as e:
        logger.error(f"{operation}: serialization failed: {e}")
        return BoundaryResult(ok=False, error=BoundaryError(SERIALIZATION_ERROR, str(e)))
    except MemoryError as e:
        return BoundaryResult(ok=False, error=BoundaryError(RESOURCE_ERROR, str(e)))
    except Exception as e:
        logger.exception(f"{operation}: unexpected failure")
        return BoundaryResult(ok=False, error=BoundaryError(INTERNAL_ERROR, f"{type(e).__name__}: {e}"))


# ----------------------------------------------------------------------
# Host-facing operations
# ----------------------------------------------------------------------

def create(config: Optional[ProcessorConfig] = None) -> SemanticProcessor:
    """Create an engine handle with an empty store."""
    return SemanticProcessor(config)


def load_turtle(handle: SemanticProcessor, text: str) -> BoundaryResult:
    """Load a Turtle document; on a parse error the store keeps its previous triples."""
    def run() -> None:
        handle.load_turtle(text)

    return _call("load_turtle", run)


def query_constructs(handle: SemanticProcessor) -> BoundaryResult:
    return _call("query_constructs", lambda: serialize_records(handle.query_constructs()))


def query_entanglements(handle: SemanticProcessor) -> BoundaryResult:
    return _call("query_entanglements", lambda: serialize_records(handle.query_entanglements()))


def find_relationships(handle: SemanticProcessor, construct_id: str) -> BoundaryResult:
    def run() -> List[str]:
        related = handle.find_relationships(construct_id)
        _check_plain(related, "relationships")
        return list(related)

    return _call("find_relationships", run)


def query_characters(handle: SemanticProcessor) -> BoundaryResult:
    return _call("query_characters", lambda: serialize_records(handle.query_characters()))


def generate_network_graph(handle: SemanticProcessor) -> BoundaryResult:
    return _call("generate_network_graph", lambda: serialize_record(handle.generate_network_graph()))


def triple_count(handle: SemanticProcessor) -> int:
    return handle.triple_count()


def clear(handle: SemanticProcessor) -> None:
    handle.clear()
