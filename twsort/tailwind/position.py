"""
Position of a literal fragment inside its template structure.

Template literals (`` `a ${x} b` ``) and TypeScript template literal types
share one shape: an ordered list of raw text fragments interleaved with
expressions (or types). A fragment's place in that list decides whether its
edges touch an interpolation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Tuple

logger = logging.getLogger(__name__)


class TemplateKind(Enum):
    TEMPLATE_LITERAL = "template_literal"
    TEMPLATE_LITERAL_TYPE = "template_literal_type"


@dataclass(frozen=True)
class Span:
    """Half-open source range [start, end)."""
    start: int
    end: int


@dataclass(frozen=True)
class TemplateStructure:
    """
    Template-bearing parent of a fragment.

    A structure with N fragments holds N-1 or N interpolated expressions.
    """
    kind: TemplateKind
    fragments: Tuple[Span, ...]
    expr_count: int


class FragmentPosition(NamedTuple):
    position: int
    expr_count: int

    @property
    def is_first(self) -> bool:
        return self.position == 0

    @property
    def is_last(self) -> bool:
        return self.position >= self.expr_count


SOLE_FRAGMENT = FragmentPosition(0, 0)


def resolve_position(fragment: Span, parent: Optional[TemplateStructure]) -> FragmentPosition:
    """
    Find the fragment's ordinal among its siblings.

    Unknown parents and unmatched spans resolve to the first-and-only
    position, so callers always get a usable answer.
    """
    if parent is None:
        return SOLE_FRAGMENT

    for index, span in enumerate(parent.fragments):
        if span == fragment:
            return FragmentPosition(index, parent.expr_count)

    logger.debug("Fragment %s not found in %s parent", fragment, parent.kind.value)
    return SOLE_FRAGMENT


__all__ = [
    "TemplateKind",
    "Span",
    "TemplateStructure",
    "FragmentPosition",
    "SOLE_FRAGMENT",
    "resolve_position",
]
