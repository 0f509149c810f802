import re
from dataclasses import dataclass, field
from typing import List, Dict, Optional

import tree_sitter_javascript
import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from ..utils.logger import app_logger


C_FAMILY_SUFFIXES = (".ts", ".tsx", ".js", ".jsx")
PYTHON_SUFFIX = ".py"

SUFFIX_TO_GRAMMAR = {
    ".ts": "typescript",
    ".tsx": "tsx",
    ".js": "javascript",
    ".jsx": "javascript",
}

PYTHON_FROM_PATTERN = re.compile(r"from\s+(\S+)\s+import")
PYTHON_IMPORT_PATTERN = re.compile(r"^import\s+(\S+)", re.MULTILINE)
GENERIC_IMPORT_PATTERN = re.compile(
    r"""import\s+[\s\S]*?from\s+['"]([^'"]+)['"]|import\s+['"]([^'"]+)['"]"""
)


@dataclass
class StructuredParse:
    """Outcome of a syntax-tree extraction: either imports or a recoverable error."""
    imports: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def extract_python_imports(content: str) -> List[str]:
    """Extract Python module names: every ``from X import`` first, then every ``import X``."""
    imports = [m.group(1) for m in PYTHON_FROM_PATTERN.finditer(content)]
    imports.extend(m.group(1) for m in PYTHON_IMPORT_PATTERN.finditer(content))
    return imports


def extract_with_regex(content: str) -> List[str]:
    """Extract ``import ... from '<path>'`` and ``import '<path>'`` literals anywhere in text."""
    return [m.group(1) or m.group(2) for m in GENERIC_IMPORT_PATTERN.finditer(content)]


SIMPLE_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f", "v": "\v", "0": "\0"}

# Ancestors under which `import("x")` denotes a type, not a module load
TYPE_CONTEXTS = {
    "type_annotation",
    "type_query",
    "type_alias_declaration",
    "interface_declaration",
    "type_arguments",
    "type_parameters",
}


def _decode_escape(sequence: str) -> str:
    body = sequence[1:]
    if body.startswith("u{"):
        return chr(int(body[2:-1], 16))
    if body[0] in "ux" and len(body) > 1:
        return chr(int(body[1:], 16))
    if body[0] in "\r\n\u2028\u2029":
        return ""
    return SIMPLE_ESCAPES.get(body, body)


def _string_value(node: Node) -> str:
    """Cooked value of a string literal, with escape sequences decoded."""
    parts = []
    for child in node.children:
        text = child.text.decode("utf-8", errors="replace")
        if child.type == "escape_sequence":
            parts.append(_decode_escape(text))
        elif child.is_named:
            parts.append(text)
    return "".join(parts)


def _is_type_context(node: Node) -> bool:
    return node.type in TYPE_CONTEXTS or node.type.endswith("_type")


def _first_argument(arguments: Optional[Node]) -> Optional[Node]:
    if arguments is None or arguments.type != "arguments":
        return None
    for child in arguments.named_children:
        if child.type != "comment":
            return child
    return None


def _module_specifier(node: Node, in_type: bool = False) -> Optional[str]:
    """Return the module specifier a node introduces, if it is an import-like construct."""
    if node.type in ("import_statement", "export_statement"):
        source = node.child_by_field_name("source")
        if source is not None and source.type == "string":
            return _string_value(source)
    elif node.type == "call_expression":
        callee = node.child_by_field_name("function")
        if callee is None:
            return None
        is_require = callee.type == "identifier" and callee.text == b"require"
        is_dynamic_import = callee.type == "import" and not in_type
        if is_require or is_dynamic_import:
            argument = _first_argument(node.child_by_field_name("arguments"))
            if argument is not None and argument.type == "string":
                return _string_value(argument)
    return None


class ImportExtractor:
    """Per-language import extraction for JS/TS and Python sources."""

    def __init__(self):
        self.logger = app_logger.bind(component="import_extractor")
        self.languages: Dict[str, Language] = {}
        self._initialize_languages()

    def _initialize_languages(self):
        """Load tree-sitter grammars for the C-family suffixes."""
        loaders = {
            "typescript": tree_sitter_typescript.language_typescript,
            "tsx": tree_sitter_typescript.language_tsx,
            "javascript": tree_sitter_javascript.language,
        }

        for name, loader in loaders.items():
            try:
                self.languages[name] = Language(loader())
                self.logger.debug(f"Loaded {name} grammar")
            except Exception as e:
                self.logger.warning(f"Failed to load {name} grammar: {e}")

    def extract(self, content: str, file_name: str) -> List[str]:
        """Extract raw import strings from a file, choosing the variant by suffix."""
        if file_name.endswith(C_FAMILY_SUFFIXES):
            return self.extract_c_family(content, file_name)
        if file_name.endswith(PYTHON_SUFFIX):
            return extract_python_imports(content)
        return []

    def extract_c_family(self, content: str, file_name: str) -> List[str]:
        """Extract JS/TS imports from the syntax tree, degrading to regex on failure."""
        result = self._parse_structured(content, file_name)
        if result.ok:
            return result.imports

        self.logger.warning(f"AST parsing failed for {file_name}, falling back to regex: {result.error}")
        return extract_with_regex(content)

    def _grammar_for(self, file_name: str) -> Language:
        for suffix, grammar in SUFFIX_TO_GRAMMAR.items():
            if file_name.endswith(suffix):
                language = self.languages.get(grammar)
                if language is None:
                    raise LookupError(f"{grammar} grammar is not loaded")
                return language
        raise LookupError(f"No grammar for {file_name}")

    def _parse_structured(self, content: str, file_name: str) -> StructuredParse:
        try:
            parser = Parser(self._grammar_for(file_name))
            tree = parser.parse(bytes(content, "utf8"))
            return StructuredParse(imports=self._collect_specifiers(tree.root_node))
        except Exception as e:
            return StructuredParse(error=f"{type(e).__name__}: {e}")

    def _collect_specifiers(self, root: Node) -> List[str]:
        """Pre-order walk over the whole tree collecting module specifiers."""
        imports = []
        stack = [(root, False)]
        while stack:
            node, in_type = stack.pop()
            specifier = _module_specifier(node, in_type)
            if specifier is not None:
                imports.append(specifier)
            child_in_type = in_type or _is_type_context(node)
            stack.extend((child, child_in_type) for child in reversed(node.children))
        return imports


def extract_imports(content: str, file_name: str) -> List[str]:
    """Extract raw import strings from one file's content."""
    return ImportExtractor().extract(content, file_name)
