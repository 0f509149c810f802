from typing import List, Dict, Any, Optional

from ..types import DependencyGraph, FileKind, GraphEdge


def filter_graph(graph: DependencyGraph, kind: Optional[FileKind] = None,
                 search: str = "") -> DependencyGraph:
    """Keep nodes matching ``kind`` and ``search``, and the edges between them."""
    needle = search.lower()
    nodes = [
        node for node in graph.nodes
        if (kind is None or node.kind is kind) and needle in node.name.lower()
    ]

    node_ids = {node.id for node in nodes}
    edges = [
        edge for edge in graph.edges
        if edge.source in node_ids and edge.target in node_ids
    ]

    metadata = dict(graph.metadata)
    metadata["filter"] = {"kind": kind.value if kind else None, "search": search}

    return DependencyGraph(nodes=nodes, edges=edges, metadata=metadata)


def _related_edges(graph: DependencyGraph, node_id: str) -> List[GraphEdge]:
    return [
        edge for edge in graph.edges
        if edge.source == node_id or edge.target == node_id
    ]


def neighbors(graph: DependencyGraph, node_id: str) -> List[str]:
    """Ids joined to ``node_id`` by an edge in either direction, in first-seen order."""
    related = []
    seen = {node_id}
    for edge in _related_edges(graph, node_id):
        other = edge.target if edge.source == node_id else edge.source
        if other not in seen:
            seen.add(other)
            related.append(other)
    return related


def is_connected(graph: DependencyGraph, a: str, b: str) -> bool:
    if a == b:
        return True
    return any(
        (edge.source == a and edge.target == b) or (edge.source == b and edge.target == a)
        for edge in graph.edges
    )


def get_graph_stats(graph: DependencyGraph) -> Dict[str, Any]:
    """Get graph statistics."""
    stats = {}

    # Count nodes by kind
    node_counts = {}
    for node in graph.nodes:
        node_counts[node.kind.value] = node_counts.get(node.kind.value, 0) + 1
    stats["nodes"] = node_counts
    stats["edges"] = len(graph.edges)

    return stats


def get_node_details(graph: DependencyGraph, node_id: str) -> Optional[Dict[str, Any]]:
    """Get detailed information about a specific node."""
    by_id = {node.id: node for node in graph.nodes}
    if node_id not in by_id:
        return None

    return {
        "node": by_id[node_id].to_dict(),
        "related_edges": [edge.to_dict() for edge in _related_edges(graph, node_id)],
        "related_nodes": [by_id[other].to_dict() for other in neighbors(graph, node_id)],
    }
