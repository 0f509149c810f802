import pytest
from pathlib import Path
import sys

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from depgraph.graph.graph_builder import build_dependency_graph
from depgraph.scanner.local_codebase_scanner import LocalCodebaseScanner, classify_file
from depgraph.types import FileKind


class TestClassifyFile:
    """Test kind classification by file name."""

    @pytest.mark.parametrize("name,kind", [
        ("src/app.ts", FileKind.CODE),
        ("src/App.TSX", FileKind.CODE),
        ("tool.py", FileKind.CODE),
        ("README.md", FileKind.CODE),
        ("logo.PNG", FileKind.IMAGE),
        ("diagram.svg", FileKind.IMAGE),
        ("server.log", FileKind.LOG),
        ("latency.csv", FileKind.METRIC),
        ("cpu.metrics.json", FileKind.METRIC),
        ("bug-42.issue", FileKind.ISSUE),
        ("issue_123.md", FileKind.ISSUE),
        ("archive.zip", None),
        ("Makefile", None),
    ])
    def test_classify(self, name, kind):
        assert classify_file(name) is kind


class TestLocalCodebaseScanner:
    """Test loading a directory into file entries."""

    def test_scan_directory(self, temp_codebase: Path):
        entries = LocalCodebaseScanner(str(temp_codebase)).scan_directory()
        ids = [e.id for e in entries]

        assert ids == [
            "latency.csv",
            "screenshot.png",
            "server.log",
            "src/a.ts",
            "src/b.ts",
            "tools/run.py",
        ]

    def test_ignored_directories_skipped(self, temp_codebase: Path):
        entries = LocalCodebaseScanner(str(temp_codebase)).scan_directory()
        assert not any(e.id.startswith("node_modules") for e in entries)

    def test_content_and_kinds(self, temp_codebase: Path):
        entries = {e.id: e for e in LocalCodebaseScanner(str(temp_codebase)).scan_directory()}

        assert entries["src/b.ts"].content == "export const b = 1;\n"
        assert entries["src/b.ts"].kind is FileKind.CODE
        assert entries["screenshot.png"].kind is FileKind.IMAGE
        assert entries["screenshot.png"].content == ""
        assert entries["server.log"].kind is FileKind.LOG
        assert entries["latency.csv"].kind is FileKind.METRIC

    def test_large_files_skipped(self, temp_codebase: Path):
        scanner = LocalCodebaseScanner(str(temp_codebase))
        scanner.max_file_size = 5

        ids = [e.id for e in scanner.scan_directory()]
        assert "src/b.ts" not in ids

    def test_missing_root(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            LocalCodebaseScanner(str(tmp_path / "nope")).scan_directory()

    def test_scan_then_build(self, temp_codebase: Path):
        entries = LocalCodebaseScanner(str(temp_codebase)).scan_directory()
        graph = build_dependency_graph(entries)

        assert [(e.source, e.target) for e in graph.edges] == [("src/a.ts", "src/b.ts")]
        assert len(graph.nodes) == len(entries)
