"""
Tree-sitter host: documents, template structures and the class-site traversal.
"""

from .context import FormatContext
from .documents import document_for, supported_extensions
from .printer import LiteralEdit, TailwindPrinter
from .range_edits import RangeEditor
from .templates import template_structure_for

__all__ = [
    "FormatContext",
    "LiteralEdit",
    "RangeEditor",
    "TailwindPrinter",
    "document_for",
    "supported_extensions",
    "template_structure_for",
]
