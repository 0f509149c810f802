#!/usr/bin/env python3
"""
Dependency Graph Builder - CLI Entry Point

Scans a directory, links source files by the imports they declare and
prints the resulting dependency graph as JSON.
"""

import argparse
import json
import sys

from depgraph.config import settings
from depgraph.graph.graph_builder import build_dependency_graph
from depgraph.graph.graph_view import filter_graph, get_graph_stats
from depgraph.scanner.local_codebase_scanner import LocalCodebaseScanner
from depgraph.types import FileKind
from depgraph.utils.logger import app_logger, setup_logging


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Build a file-level dependency graph")
    parser.add_argument("root", nargs="?", default=".", help="Directory to scan (default: current directory)")
    parser.add_argument("-o", "--output", default=None, help="Output file (default: stdout)")
    parser.add_argument("--format", choices=["graph", "force"], default="graph",
                        help="graph: nodes/edges/metadata, force: nodes/links for force layouts")
    parser.add_argument("--kind", choices=[k.value for k in FileKind], default=None,
                        help="Only keep nodes of this kind")
    parser.add_argument("--search", default="", help="Only keep nodes whose name contains this text")
    parser.add_argument("--log-level", default=settings.log_level, help="Log level")
    return parser.parse_args(args)


def main(argv=None):
    """Main entry point for the CLI."""
    args = parse_args(argv)
    setup_logging(args.log_level, settings.log_file)

    try:
        files = LocalCodebaseScanner(args.root).scan_directory()
        graph = build_dependency_graph(files)

        if args.kind or args.search:
            kind = FileKind(args.kind) if args.kind else None
            graph = filter_graph(graph, kind=kind, search=args.search)

        app_logger.info(f"Graph stats: {get_graph_stats(graph)}")

        payload = graph.to_force_graph() if args.format == "force" else graph.to_dict()
        text = json.dumps(payload, indent=2, ensure_ascii=False)

        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(text + "\n")
            app_logger.info(f"Wrote graph to {args.output}")
        else:
            print(text)

    except KeyboardInterrupt:
        app_logger.info("Interrupted")
        return 130
    except Exception as e:
        app_logger.error(f"Error building graph: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
