import pytest
import tempfile
from pathlib import Path
from typing import Generator, List
import sys

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from depgraph.extractor.import_extractor import ImportExtractor
from depgraph.types import FileEntry, FileKind
from depgraph.utils.logger import app_logger


@pytest.fixture
def extractor() -> ImportExtractor:
    """Create import extractor for testing."""
    return ImportExtractor()


@pytest.fixture
def log_messages() -> Generator[List[str], None, None]:
    """Capture loguru records emitted during a test."""
    messages: List[str] = []
    handler_id = app_logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")

    yield messages

    app_logger.remove(handler_id)


@pytest.fixture
def sample_files() -> List[FileEntry]:
    """A small mixed project: TS, JS, Python and non-code files."""
    return [
        FileEntry(
            id="src/index.ts",
            kind=FileKind.CODE,
            content="""
import { App } from "./App";
import "./styles/global";
export * from "./utils";
import React from "react";
""",
        ),
        FileEntry(
            id="src/App.tsx",
            kind=FileKind.CODE,
            content="""
import Button from "@/components/Button";
const lazy = () => import("./pages/Home");

export function App() {
    return <Button label="hi" />;
}
""",
        ),
        FileEntry(
            id="src/components/Button.tsx",
            kind=FileKind.CODE,
            content="export default function Button() { return null; }\n",
        ),
        FileEntry(
            id="src/utils/index.ts",
            kind=FileKind.CODE,
            content="const helpers = require('../lib/helpers');\nexport const x = 1;\n",
        ),
        FileEntry(
            id="src/lib/helpers.js",
            kind=FileKind.CODE,
            content="module.exports = {};\n",
        ),
        FileEntry(
            id="src/pages/Home.jsx",
            kind=FileKind.CODE,
            content="export default () => <div />;\n",
        ),
        FileEntry(
            id="scripts/report.py",
            kind=FileKind.CODE,
            content="from os import path\nimport json\n",
        ),
        FileEntry(
            id="assets/logo.png",
            kind=FileKind.IMAGE,
            content='import x from "./src/index"',
        ),
        FileEntry(
            id="logs/app.log",
            kind=FileKind.LOG,
            content="2024-01-01 INFO started\n",
        ),
    ]


@pytest.fixture
def temp_codebase() -> Generator[Path, None, None]:
    """Create temporary codebase for testing."""
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)

        (temp_path / "src").mkdir()
        (temp_path / "src" / "a.ts").write_text('import { b } from "./b";\n')
        (temp_path / "src" / "b.ts").write_text("export const b = 1;\n")
        (temp_path / "tools").mkdir()
        (temp_path / "tools" / "run.py").write_text("import sys\n")
        (temp_path / "screenshot.png").write_bytes(b"\x89PNG\r\n\x1a\n")
        (temp_path / "server.log").write_text("started\n")
        (temp_path / "latency.csv").write_text("t,ms\n1,20\n")
        (temp_path / "Makefile.unknownext").write_text("all:\n")

        ignored = temp_path / "node_modules" / "lib"
        ignored.mkdir(parents=True)
        (ignored / "index.js").write_text("module.exports = 1;\n")

        yield temp_path
