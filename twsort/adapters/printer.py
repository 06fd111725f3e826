"""
Tree traversal that turns class-bearing literals into token streams.

Sites:
- JSX attributes named `class`, `className` or listed in `tailwind_attributes`
- calls (and tagged templates) of functions listed in `tailwind_functions`

Inside a site, string literals, template literals, conditional branches,
logical and `+` operands, parentheses and array elements are followed;
anything else is left alone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Set, Tuple

from tree_sitter import Node

from ..tailwind.classifier import Callee, is_tailwind_attribute, is_tailwind_call
from ..tailwind.position import FragmentPosition, Span, TemplateStructure, resolve_position
from ..tailwind.splitter import is_ascii_whitespace, write_template_fragment
from ..tailwind.string_literal import write_string_literal
from ..tailwind.tokens import TokenStream
from .context import FormatContext
from .templates import interpolations, template_structure_for

logger = logging.getLogger(__name__)

_LOGICAL_OPERATORS = {"&&", "||", "??"}


@dataclass
class LiteralEdit:
    """Token stream replacing the source bytes [start_byte, end_byte)."""
    start_byte: int
    end_byte: int
    tokens: TokenStream
    kind: str  # "string" | "template_fragment"


def callee_of(node: Node, name: str = "") -> Callee:
    """Classify the `function` part of a call_expression (name: source text of identifiers)."""
    if node.type == "identifier":
        return Callee("identifier", name)
    if node.type == "member_expression":
        return Callee("member")
    if node.type == "subscript_expression":
        return Callee("computed")
    return Callee("other")


class Adjacency(NamedTuple):
    """
    What touches a class expression's value when it is used.

    joined_*: other text is glued on that side (string concatenation, or
    template text without whitespace next to a `${...}`).
    spaced_*: template text ending / starting with whitespace is on that side.
    """
    joined_before: bool = False
    joined_after: bool = False
    spaced_before: bool = False
    spaced_after: bool = False

    def shift(self, position: FragmentPosition) -> FragmentPosition:
        """Glued neighbours act as extra interpolations around the template."""
        before = int(self.joined_before)
        return FragmentPosition(position.position + before, position.expr_count + before + int(self.joined_after))


ISOLATED = Adjacency()


def interpolation_adjacency(text_before: str, text_after: str, index: int, expr_count: int) -> Adjacency:
    """
    Neighbours of the `index`-th interpolation of a template.

    An empty fragment at the template edge touches nothing; an empty fragment
    between two interpolations glues them together.
    """
    spaced_before = text_before != "" and is_ascii_whitespace(text_before[-1])
    spaced_after = text_after != "" and is_ascii_whitespace(text_after[0])
    return Adjacency(
        joined_before=not spaced_before and (text_before != "" or index > 0),
        joined_after=not spaced_after and (text_after != "" or index + 1 < expr_count),
        spaced_before=spaced_before,
        spaced_after=spaced_after,
    )


def string_body(node: Node) -> Tuple[int, int]:
    """Byte range of a string literal without its quotes."""
    children = node.children
    if len(children) >= 2 and children[0].type in ('"', "'") and children[-1].type == children[0].type:
        return children[0].end_byte, children[-1].start_byte
    return node.start_byte + 1, max(node.start_byte + 1, node.end_byte - 1)


class TailwindPrinter:
    """
    Collects literal edits for one document.

    Class lists are registered in traversal order; the edits only hold
    references into the context's registry.
    """

    def __init__(self, ctx: FormatContext):
        self.ctx = ctx
        self.doc = ctx.doc
        self._edits: List[LiteralEdit] = []
        self._seen: Set[Tuple[int, int]] = set()

    def collect(self) -> List[LiteralEdit]:
        for node in self.doc.walk_tree():
            if node.type == "jsx_attribute":
                self._visit_attribute(node)
            elif node.type == "call_expression":
                self._visit_call(node)
        return list(self._edits)

    # ---- sites ----

    def _visit_attribute(self, node: Node) -> None:
        children = node.children
        if not children or children[0].type != "property_identifier":
            # namespaced names (xlink:href) are never class attributes
            return

        name = self.doc.get_node_text(children[0])
        if not is_tailwind_attribute(name, self.ctx.cfg):
            return

        value = self._attribute_value(children)
        if value is None:
            return

        logger.debug("%s:%d: class attribute %s", self.ctx.label, self.doc.get_line_number(node), name)
        self.ctx.metrics.mark_site("attribute")

        if value.type == "string":
            self._string_literal(value, direct=True)
        elif value.type == "jsx_expression":
            for expr in value.named_children:
                self._class_expression(expr)

    @staticmethod
    def _attribute_value(children: List[Node]) -> Optional[Node]:
        for i, child in enumerate(children):
            if child.type == "=" and i + 1 < len(children):
                return children[i + 1]
        return None

    def _visit_call(self, node: Node) -> None:
        function = node.child_by_field_name("function")
        if function is None or not is_tailwind_call(callee_of(function, self.doc.get_node_text(function)), self.ctx.cfg):
            return

        arguments = node.child_by_field_name("arguments")
        if arguments is None:
            return

        logger.debug("%s:%d: class function call %s", self.ctx.label, self.doc.get_line_number(node),
                     self.doc.get_node_text(function))
        self.ctx.metrics.mark_site("call")

        if arguments.type == "template_string":
            # tagged template: tw`...`
            self._template_literal(arguments)
            return

        for arg in arguments.named_children:
            self._class_expression(arg)

    # ---- expressions ----

    def _class_expression(self, node: Node, adjacency: Adjacency = ISOLATED) -> None:
        node_type = node.type
        if node_type == "string":
            self._string_literal(node, direct=False, adjacency=adjacency)
        elif node_type == "template_string":
            self._template_literal(node, adjacency)
        elif node_type == "parenthesized_expression":
            for child in node.named_children:
                self._class_expression(child, adjacency)
        elif node_type == "array":
            for child in node.named_children:
                self._class_expression(child)
        elif node_type == "ternary_expression":
            for field_name in ("consequence", "alternative"):
                branch = node.child_by_field_name(field_name)
                if branch is not None:
                    self._class_expression(branch, adjacency)
        elif node_type == "binary_expression":
            operator = node.child_by_field_name("operator")
            if operator is None:
                return
            left = node.child_by_field_name("left")
            right = node.child_by_field_name("right")
            if operator.type in _LOGICAL_OPERATORS:
                for operand in (left, right):
                    if operand is not None:
                        self._class_expression(operand, adjacency)
            elif operator.type == "+":
                # each operand is glued to the other side of the concatenation
                if left is not None:
                    self._class_expression(left, adjacency._replace(joined_after=True, spaced_after=False))
                if right is not None:
                    self._class_expression(right, adjacency._replace(joined_before=True, spaced_before=False))

    # ---- literals ----

    def _claim(self, start_byte: int, end_byte: int) -> bool:
        key = (start_byte, end_byte)
        if key in self._seen:
            return False
        self._seen.add(key)
        return True

    def _string_literal(self, node: Node, *, direct: bool, adjacency: Adjacency = ISOLATED) -> None:
        start, end = string_body(node)
        if not self._claim(start, end):
            return

        # with preserve_whitespace the literal's own spacing is never dropped
        collapse = not self.ctx.cfg.tailwind_preserve_whitespace
        out = TokenStream()
        write_string_literal(
            self.doc.get_byte_text(start, end),
            is_direct_attribute_value=direct,
            registry=self.ctx.registry,
            out=out,
            collapse_leading=collapse and adjacency.spaced_before,
            collapse_trailing=collapse and adjacency.spaced_after,
        )
        self._edits.append(LiteralEdit(start, end, out, "string"))
        self.ctx.metrics.increment("tailwind.literals.string")

    def _template_literal(self, node: Node, adjacency: Adjacency = ISOLATED) -> None:
        structure = template_structure_for(node)
        if structure is None:
            logger.debug("%s:%d: skipping malformed template", self.ctx.label, self.doc.get_line_number(node))
            return

        texts = [self.doc.get_byte_text(span.start, span.end) for span in structure.fragments]

        for span in structure.fragments:
            self._template_fragment(span, structure, adjacency)

        for index, exprs in enumerate(interpolations(node)):
            inner = interpolation_adjacency(texts[index], texts[index + 1], index, structure.expr_count)
            for expr in exprs:
                self._class_expression(expr, inner)

    def _template_fragment(self, span: Span, structure: TemplateStructure, adjacency: Adjacency) -> None:
        if not self._claim(span.start, span.end):
            return

        out = TokenStream()
        write_template_fragment(
            self.doc.get_byte_text(span.start, span.end),
            adjacency.shift(resolve_position(span, structure)),
            preserve_whitespace=self.ctx.cfg.tailwind_preserve_whitespace,
            registry=self.ctx.registry,
            out=out,
        )
        self._edits.append(LiteralEdit(span.start, span.end, out, "template_fragment"))
        self.ctx.metrics.increment("tailwind.literals.template_fragment")


__all__ = [
    "Adjacency",
    "ISOLATED",
    "LiteralEdit",
    "TailwindPrinter",
    "callee_of",
    "interpolation_adjacency",
    "string_body",
]
