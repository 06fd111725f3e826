"""
Class-list splitting core: classification, fragment positions, boundary
splitting and string-literal handling.
"""

from .classifier import Callee, is_tailwind_attribute, is_tailwind_call
from .position import FragmentPosition, Span, TemplateKind, TemplateStructure, resolve_position
from .registry import ClassRegistry
from .splitter import ASCII_WHITESPACE, FragmentSplit, split_fragment, write_template_fragment
from .string_literal import write_string_literal
from .tokens import OutputToken, SortableClassRef, TokenStream, VerbatimText

__all__ = [
    "Callee",
    "is_tailwind_attribute",
    "is_tailwind_call",
    "FragmentPosition",
    "Span",
    "TemplateKind",
    "TemplateStructure",
    "resolve_position",
    "ClassRegistry",
    "ASCII_WHITESPACE",
    "FragmentSplit",
    "split_fragment",
    "write_template_fragment",
    "write_string_literal",
    "OutputToken",
    "SortableClassRef",
    "TokenStream",
    "VerbatimText",
]
