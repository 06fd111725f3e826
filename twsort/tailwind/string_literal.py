"""
Class lists held in plain string literals.
"""

from __future__ import annotations

from .registry import ClassRegistry
from .splitter import ASCII_WHITESPACE
from .tokens import TokenStream


def write_string_literal(
    content: str,
    *,
    is_direct_attribute_value: bool,
    registry: ClassRegistry,
    out: TokenStream,
    collapse_leading: bool = False,
    collapse_trailing: bool = False,
) -> None:
    """
    Emit tokens for a string literal body (without quotes).

    A direct attribute value (`className="..."`) is registered as a whole; the
    sorter owns its whitespace. A nested literal (`cn(" a b ")`,
    `className={"a b"}`) keeps its outer whitespace verbatim because the sorter
    would otherwise trim it.

    Inside a template interpolation the neighbouring template text may already
    separate the classes; collapse_leading / collapse_trailing then drop the
    literal's own whitespace on that side.
    """
    if is_direct_attribute_value:
        out.class_ref(registry.add(content))
        return

    trimmed = content.strip(ASCII_WHITESPACE)
    if not trimmed:
        out.text(content)
        return

    leading = content[:len(content) - len(content.lstrip(ASCII_WHITESPACE))]
    trailing = content[len(content.rstrip(ASCII_WHITESPACE)):]

    if not collapse_leading:
        out.text(leading)
    out.class_ref(registry.add(trimmed))
    if not collapse_trailing:
        out.text(trailing)


__all__ = ["write_string_literal"]
