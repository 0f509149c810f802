"""
Builds a file-level dependency graph from in-memory files.
"""
from typing import Iterable, List, Optional

from ..extractor.import_extractor import ImportExtractor
from ..resolver.path_resolver import VirtualNamespace, resolve_import
from ..types import DependencyGraph, FileEntry, FileKind, GraphEdge, GraphNode
from ..utils.logger import app_logger


class GraphBuilder:
    """Extracts imports from code files and links them to the files they name."""

    def __init__(self, extractor: Optional[ImportExtractor] = None):
        self.logger = app_logger.bind(component="graph_builder")
        self.extractor = extractor or ImportExtractor()

    def build(self, files: Iterable[FileEntry]) -> DependencyGraph:
        """
        Build the dependency graph for one set of files.

        Returns a graph with one node per file, in input order, and one edge
        per resolved import, in file order then extraction order.
        """
        files = list(files)
        nodes = [GraphNode(id=f.id, kind=f.kind) for f in files]
        known = VirtualNamespace(f.id for f in files)

        edges: List[GraphEdge] = []
        unresolved = 0

        for file in files:
            if file.kind is not FileKind.CODE:
                continue

            for raw_import in self.extractor.extract(file.content, file.id):
                target = resolve_import(file.id, raw_import, known)
                if target is None:
                    unresolved += 1
                    self.logger.debug(f"Unresolved import '{raw_import}' in {file.id}")
                    continue
                edges.append(GraphEdge(source=file.id, target=target))

        self.logger.info(
            f"Built dependency graph: {len(nodes)} nodes, {len(edges)} edges, {unresolved} unresolved imports"
        )

        return DependencyGraph(
            nodes=nodes,
            edges=edges,
            metadata={
                "file_count": len(nodes),
                "edge_count": len(edges),
                "unresolved_count": unresolved,
            },
        )


def build_dependency_graph(files: Iterable[FileEntry]) -> DependencyGraph:
    """Build the dependency graph for ``files``."""
    return GraphBuilder().build(files)
