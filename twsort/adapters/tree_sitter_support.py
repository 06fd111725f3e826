"""
Tree-sitter parsed source document.
Subclasses pick the grammar; traversal and offset helpers are shared.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional

from tree_sitter import Language, Node, Parser, Tree


class TreeSitterDocument(ABC):
    """
    Source text together with its syntax tree.

    Tree-sitter reports UTF-8 byte offsets; edits are applied to the str,
    so byte offsets are converted with byte_to_char_position.
    """

    def __init__(self, text: str, ext: str):
        self.text = text
        self.ext = ext
        self._text_bytes = text.encode("utf-8")
        self.tree: Tree = Parser(self.get_language()).parse(self._text_bytes)

    @abstractmethod
    def get_language(self) -> Language:
        """Grammar for this document's extension."""
        pass

    @property
    def root_node(self) -> Node:
        return self.tree.root_node

    def walk_tree(self, start_node: Optional[Node] = None) -> Iterator[Node]:
        """
        Yield nodes in document order (parents before children).
        """
        cursor = (start_node or self.root_node).walk()
        while True:
            yield cursor.node
            if cursor.goto_first_child():
                continue
            while not cursor.goto_next_sibling():
                if not cursor.goto_parent():
                    return

    def get_node_text(self, node: Node) -> str:
        return self.get_byte_text(node.start_byte, node.end_byte)

    def get_byte_text(self, start_byte: int, end_byte: int) -> str:
        return self._text_bytes[start_byte:end_byte].decode("utf-8")

    def has_error(self) -> bool:
        return self.root_node.has_error

    def get_errors(self) -> List[Node]:
        """ERROR and missing nodes, in document order."""
        return [n for n in self.walk_tree() if n.type == "ERROR" or n.is_missing]

    def byte_to_char_position(self, byte_pos: int) -> int:
        """
        Character offset of a byte offset.
        An offset inside a multi-byte character maps to the start of that character.
        """
        if byte_pos <= 0:
            return 0
        if byte_pos >= len(self._text_bytes):
            return len(self.text)
        return len(self._text_bytes[:byte_pos].decode("utf-8", errors="ignore"))

    @staticmethod
    def get_line_number(node: Node) -> int:
        """1-based line of the node start."""
        return node.start_point[0] + 1
