"""
Import path resolution against a virtual file namespace.

Imports are matched against the ids of the files in one graph build, never
against a real filesystem. Three strategies are tried in order and the first
hit wins:

1. relative paths (``./x``, ``../x``) folded against the importing file's
   directory, probing a fixed list of extensions and index files;
2. an exact match of the import string;
3. a basename suffix match against extension-less ids. Root aliases
   (``@/``, ``~/``) are matched without their marker, so
   ``@/components/Button`` reaches ``src/components/Button.tsx``. Ties go to
   the earliest file in input order.
"""

import re
from typing import Iterable, Iterator, List, Optional


RELATIVE_PROBE_SUFFIXES = ("", ".ts", ".tsx", ".js", ".jsx", "/index.ts", "/index.tsx")

ALIAS_PREFIXES = ("@/", "~/")

_EXTENSION_PATTERN = re.compile(r"\.[^/.]+\Z")


class VirtualNamespace:
    """Immutable, insertion-ordered set of known file ids."""

    __slots__ = ("_ids", "_lookup")

    def __init__(self, ids: Iterable[str]):
        self._ids = tuple(dict.fromkeys(ids))
        self._lookup = frozenset(self._ids)

    def __contains__(self, file_id: object) -> bool:
        return file_id in self._lookup

    def __iter__(self) -> Iterator[str]:
        return iter(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __repr__(self) -> str:
        return f"VirtualNamespace({len(self._ids)} files)"


def strip_extension(file_id: str) -> str:
    """Drop the trailing ``.ext`` of the last path segment, if any."""
    return _EXTENSION_PATTERN.sub("", file_id, count=1)


def normalize_relative(source_id: str, import_path: str) -> str:
    """Fold a relative import against the directory of ``source_id``."""
    segments: List[str] = source_id.split("/")[:-1]

    for part in import_path.split("/"):
        if part == ".":
            continue
        if part == "..":
            if segments:
                segments.pop()
        else:
            segments.append(part)

    return "/".join(segments)


def resolve_relative(source_id: str, import_path: str, known: VirtualNamespace) -> Optional[str]:
    base = normalize_relative(source_id, import_path)
    for suffix in RELATIVE_PROBE_SUFFIXES:
        candidate = base + suffix
        if candidate in known:
            return candidate
    return None


def _alias_remainder(import_path: str) -> Optional[str]:
    for prefix in ALIAS_PREFIXES:
        if import_path.startswith(prefix):
            return import_path[len(prefix):] or None
    return None


def resolve_by_basename(import_path: str, known: VirtualNamespace) -> Optional[str]:
    import_base = import_path.split("/")[-1]
    if not import_base:
        return None

    for file_id in known:
        stripped = strip_extension(file_id)
        if stripped.endswith(import_path) or stripped.endswith("/" + import_path):
            return file_id

    # "@/x/y" is rooted at some source directory: match whole segments only
    remainder = _alias_remainder(import_path)
    if remainder:
        for file_id in known:
            stripped = strip_extension(file_id)
            if stripped == remainder or stripped.endswith("/" + remainder):
                return file_id
    return None


def resolve_import(source_id: str, import_path: str, known: VirtualNamespace) -> Optional[str]:
    """
    Resolve a raw import string to a known file id.

    Args:
        source_id: Id of the importing file
        import_path: Import string as written in the source
        known: Ids of every file in the current build

    Returns:
        The target file id, or None when no strategy matches
    """
    if import_path.startswith("."):
        target = resolve_relative(source_id, import_path, known)
        if target is not None:
            return target

    if import_path in known:
        return import_path

    return resolve_by_basename(import_path, known)
