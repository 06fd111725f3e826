"""
Decides which attributes and calls carry utility-class lists.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Protocol, Sequence

DEFAULT_CLASS_ATTRIBUTES = ("class", "className")

CalleeKind = Literal["identifier", "member", "computed", "other"]


class ClassSiteOptions(Protocol):
    """Options consulted by the classifier (see TwsortCfg)."""
    tailwind_attributes: Optional[Sequence[str]]
    tailwind_functions: Optional[Sequence[str]]


@dataclass(frozen=True)
class Callee:
    """Resolved callee of a call expression."""
    kind: CalleeKind
    name: str = ""


def is_tailwind_attribute(attr_name: str, options: ClassSiteOptions) -> bool:
    """
    Check if an attribute is a class attribute.

    `class` and `className` always match; other names only when listed in
    `tailwind_attributes`. Comparison is exact and case-sensitive.
    """
    if attr_name in DEFAULT_CLASS_ATTRIBUTES:
        return True

    custom = options.tailwind_attributes
    if not custom:
        return False
    return any(name == attr_name for name in custom)


def is_tailwind_call(callee: Callee, options: ClassSiteOptions) -> bool:
    """
    Check if a call targets a class helper function (e.g. `clsx`, `cn`, `tw`).

    Only bare identifiers qualify; `utils.cn(...)` or `fns["cn"](...)` never do.
    """
    functions = options.tailwind_functions
    if not functions:
        return False

    if callee.kind != "identifier":
        return False

    return any(name == callee.name for name in functions)


__all__ = [
    "DEFAULT_CLASS_ATTRIBUTES",
    "Callee",
    "CalleeKind",
    "ClassSiteOptions",
    "is_tailwind_attribute",
    "is_tailwind_call",
]
