import os
from pathlib import Path
from typing import List, Optional, Iterator
from concurrent.futures import ThreadPoolExecutor

from ..config import settings
from ..types import FileEntry, FileKind
from ..utils.logger import app_logger


CODE_EXTENSIONS = {
    '.py', '.js', '.jsx', '.ts', '.tsx', '.mjs', '.cjs', '.java', '.cpp', '.c', '.h',
    '.go', '.rs', '.sh', '.rb', '.php', '.swift', '.kt', '.scala', '.dart', '.vue',
    '.html', '.css', '.scss', '.json', '.yaml', '.yml', '.toml', '.md', '.txt', '.sql',
}

IMAGE_EXTENSIONS = {'.png', '.jpg', '.jpeg', '.gif', '.svg', '.webp', '.bmp', '.ico'}

LOG_EXTENSIONS = {'.log'}

METRIC_EXTENSIONS = {'.csv', '.tsv', '.prom'}

ISSUE_EXTENSIONS = {'.issue'}


def classify_file(path: str) -> Optional[FileKind]:
    """Determine the file kind from its name; None for files the graph ignores."""
    name = Path(path).name.lower()
    ext = Path(name).suffix

    if ext in IMAGE_EXTENSIONS:
        return FileKind.IMAGE
    if ext in LOG_EXTENSIONS:
        return FileKind.LOG
    if ext in METRIC_EXTENSIONS or name.endswith('.metrics.json'):
        return FileKind.METRIC
    if ext in ISSUE_EXTENSIONS or (name.startswith('issue') and ext in ('.md', '.txt', '.json')):
        return FileKind.ISSUE
    if ext in CODE_EXTENSIONS:
        return FileKind.CODE
    return None


class LocalCodebaseScanner:
    """Loads a local directory as a set of file entries."""

    def __init__(self, root_path: Optional[str] = None):
        if root_path is None:
            self.root_path = Path.cwd().resolve()
        else:
            self.root_path = Path(root_path).resolve()

        self.ignored_dirs = set(settings.ignored_dirs_list)
        self.max_file_size = settings.max_file_size_bytes
        self.logger = app_logger.bind(component="scanner")

    def scan_directory(self, max_workers: int = 4) -> List[FileEntry]:
        """Scan directory and return file entries with their content loaded."""
        if not self.root_path.is_dir():
            raise FileNotFoundError(f"Not a directory: {self.root_path}")

        self.logger.info(f"Scanning directory: {self.root_path}")

        candidates = list(self._walk_directory())
        self.logger.info(f"Found {len(candidates)} files to load")

        # map() keeps walk order, so graph edges stay deterministic
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            entries = list(executor.map(lambda c: self._create_entry(*c), candidates))

        loaded = [entry for entry in entries if entry is not None]
        self.logger.info(f"Successfully loaded {len(loaded)} files")
        return loaded

    def _walk_directory(self) -> Iterator[tuple]:
        """Walk through directory and yield (path, kind) pairs in sorted order."""
        for root, dirs, files in os.walk(self.root_path):
            # Remove ignored directories
            dirs[:] = sorted(d for d in dirs if d not in self.ignored_dirs)

            for file_name in sorted(files):
                file_path = Path(root) / file_name
                kind = classify_file(file_name)
                if kind is not None and self._should_include_file(file_path):
                    yield file_path, kind

    def _should_include_file(self, file_path: Path) -> bool:
        """Check if file should be included in scan."""
        try:
            if file_path.stat().st_size > self.max_file_size:
                self.logger.warning(f"Skipping large file: {file_path}")
                return False
        except OSError:
            return False

        return True

    def _create_entry(self, file_path: Path, kind: FileKind) -> Optional[FileEntry]:
        """Create FileEntry object from file path."""
        file_id = file_path.relative_to(self.root_path).as_posix()

        if kind is FileKind.IMAGE:
            return FileEntry(id=file_id, kind=kind)

        content = self.load_file_content(file_path)
        if content is None:
            return None
        return FileEntry(id=file_id, kind=kind, content=content)

    def load_file_content(self, file_path: Path) -> Optional[str]:
        """Load content of a file."""
        try:
            with open(file_path, 'r', encoding='utf-8', errors='ignore') as f:
                return f.read()
        except OSError as e:
            self.logger.error(f"Error loading file {file_path}: {e}")
            return None
