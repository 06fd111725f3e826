"""
Template structures from tree-sitter nodes.

Tree-sitter does not emit a node per raw fragment: an empty fragment between
two substitutions has no node and escape sequences split one fragment into
several children. Fragments are therefore rebuilt as the byte ranges between
the backticks and the `${...}` children.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from tree_sitter import Node

from ..tailwind.position import Span, TemplateKind, TemplateStructure

# parent node type → (kind, interpolation child type)
_TEMPLATE_NODES: Dict[str, tuple[TemplateKind, str]] = {
    "template_string": (TemplateKind.TEMPLATE_LITERAL, "template_substitution"),
    "template_literal_type": (TemplateKind.TEMPLATE_LITERAL_TYPE, "template_type"),
}


def template_structure_for(node: Node) -> Optional[TemplateStructure]:
    """
    Build the fragment layout of a template node.

    Returns:
        TemplateStructure with expr_count + 1 fragments (byte spans),
        or None for any other node type
    """
    entry = _TEMPLATE_NODES.get(node.type)
    if entry is None:
        return None
    kind, interpolation_type = entry

    children = node.children
    if len(children) < 2 or children[0].type != "`" or children[-1].type != "`":
        # Error-recovered template without both backticks
        return None

    fragments: List[Span] = []
    cursor = children[0].end_byte
    expr_count = 0
    for child in children[1:-1]:
        if child.type == interpolation_type:
            fragments.append(Span(cursor, child.start_byte))
            cursor = child.end_byte
            expr_count += 1
    fragments.append(Span(cursor, children[-1].start_byte))

    return TemplateStructure(kind, tuple(fragments), expr_count)


def interpolations(node: Node) -> List[List[Node]]:
    """
    Expression (or type) nodes inside each `${...}` part of a template node,
    one list per interpolation in source order (comments excluded).
    """
    entry = _TEMPLATE_NODES.get(node.type)
    if entry is None:
        return []
    _, interpolation_type = entry
    return [
        [n for n in child.named_children if n.type != "comment"]
        for child in node.children
        if child.type == interpolation_type
    ]


__all__ = ["template_structure_for", "interpolations"]
