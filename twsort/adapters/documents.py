"""
Language documents and extension → grammar selection.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Type, Union

from tree_sitter import Language

from ..errors import UnsupportedFileError
from .tree_sitter_support import TreeSitterDocument


class JavaScriptDocument(TreeSitterDocument):
    """JavaScript; the grammar includes JSX."""

    def get_language(self) -> Language:
        import tree_sitter_javascript as tsjs
        return Language(tsjs.language())


class TypeScriptDocument(TreeSitterDocument):

    def get_language(self) -> Language:
        import tree_sitter_typescript as tsts
        # TS and TSX have two different grammars in one package
        if self.ext == "tsx":
            return Language(tsts.language_tsx())
        return Language(tsts.language_typescript())


_DOCUMENT_BY_EXT: Dict[str, Type[TreeSitterDocument]] = {
    "js": JavaScriptDocument,
    "jsx": JavaScriptDocument,
    "mjs": JavaScriptDocument,
    "cjs": JavaScriptDocument,
    "ts": TypeScriptDocument,
    "mts": TypeScriptDocument,
    "cts": TypeScriptDocument,
    "tsx": TypeScriptDocument,
}


def normalize_ext(path_or_ext: Union[str, Path]) -> str:
    """'.TSX', 'tsx', Path('a/b.tsx') → 'tsx'."""
    if isinstance(path_or_ext, Path):
        return path_or_ext.suffix.lstrip(".").lower()
    return path_or_ext.lstrip(".").lower()


def supported_extensions() -> list[str]:
    return sorted(f".{ext}" for ext in _DOCUMENT_BY_EXT)


def document_for(path_or_ext: Union[str, Path], text: str) -> TreeSitterDocument:
    """
    Parse text with the grammar matching the extension.

    Raises:
        UnsupportedFileError: No grammar for the extension
    """
    ext = normalize_ext(path_or_ext)
    doc_cls = _DOCUMENT_BY_EXT.get(ext)
    if doc_cls is None:
        raise UnsupportedFileError(f"Unsupported file type: {path_or_ext!s} (supported: {', '.join(supported_extensions())})")
    return doc_cls(text, ext)


__all__ = [
    "JavaScriptDocument",
    "TypeScriptDocument",
    "document_for",
    "normalize_ext",
    "supported_extensions",
]
