from typing import List, Dict, Any
from dataclasses import dataclass, field
from enum import Enum


class FileKind(Enum):
    """File kind enumeration."""
    CODE = "file"
    IMAGE = "image"
    LOG = "log"
    METRIC = "metric"
    ISSUE = "issue"


@dataclass(frozen=True)
class FileEntry:
    """A file contributed to one graph build, addressed by its virtual path."""
    id: str
    kind: FileKind
    content: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "kind": self.kind.value,
            "size": len(self.content),
        }


@dataclass
class GraphNode:
    """Represents a file node in the dependency graph."""
    id: str
    kind: FileKind
    val: int = 1

    @property
    def name(self) -> str:
        return self.id

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.kind.value,
            "val": self.val,
        }


@dataclass
class GraphEdge:
    """Represents an import edge: source imports target."""
    source: str
    target: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "source": self.source,
            "target": self.target,
        }


@dataclass
class DependencyGraph:
    """Represents a built dependency graph."""
    nodes: List[GraphNode] = field(default_factory=list)
    edges: List[GraphEdge] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def node_ids(self) -> List[str]:
        return [node.id for node in self.nodes]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
            "metadata": self.metadata,
        }

    def to_force_graph(self) -> Dict[str, Any]:
        """Convert to the node/link shape read by force-directed layouts."""
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "links": [edge.to_dict() for edge in self.edges],
        }
