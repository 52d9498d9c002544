"""
Domain records derived from the triple store.

Records are plain dataclasses. ``to_dict`` produces the camelCase shape
that templates and visualization scripts bind to.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Gloss:
    """A short annotation attached to a Construct."""
    id: str
    text: str
    language: str
    position: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "language": self.language,
            "position": self.position,
        }


@dataclass(frozen=True)
class Construct:
    """An entity typed ``sn:Construct``."""
    id: str
    label: str
    description: Optional[str] = None
    glosses: List[Gloss] = field(default_factory=list)
    relationships: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "description": self.description,
            "glosses": [g.to_dict() for g in self.glosses],
            "relationships": list(self.relationships),
        }


@dataclass(frozen=True)
class Entanglement:
    """A relationship between a source and a target Construct."""
    id: str
    label: str
    source: str
    target: str
    relationship_type: str
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "source": self.source,
            "target": self.target,
            "relationshipType": self.relationship_type,
            "description": self.description,
        }


@dataclass(frozen=True)
class Character:
    """An entity typed ``sn:Character`` and the Constructs it is linked to."""
    id: str
    name: str
    description: Optional[str] = None
    constructs: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "constructs": list(self.constructs),
        }


@dataclass(frozen=True)
class GraphNode:
    id: str
    label: str
    node_type: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "label": self.label, "nodeType": self.node_type}


@dataclass(frozen=True)
class GraphEdge:
    source: str
    target: str
    label: str

    def to_dict(self) -> Dict[str, Any]:
        return {"source": self.source, "target": self.target, "label": self.label}


@dataclass(frozen=True)
class NetworkGraph:
    """Node/edge projection of the store for visualization."""
    nodes: List[GraphNode] = field(default_factory=list)
    edges: List[GraphEdge] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }
