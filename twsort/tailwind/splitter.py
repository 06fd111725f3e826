"""
Boundary-aware splitting of template literal fragments.

A class that touches an interpolation with no whitespace in between
(`` `p-4${x}` `` or `` `${x}flex` ``) belongs to that expression and must stay
where it is. Only the region between such glued classes is handed to the
class sorter; whitespace runs bordering it are normalized to single spaces.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .position import FragmentPosition
from .registry import ClassRegistry
from .tokens import TokenStream

ASCII_WHITESPACE = " \t\n\x0c\r"


def is_ascii_whitespace(ch: str) -> bool:
    return ch != "" and ch in ASCII_WHITESPACE


def _find_first_whitespace(text: str) -> Optional[int]:
    for i, ch in enumerate(text):
        if ch in ASCII_WHITESPACE:
            return i
    return None


def _find_last_whitespace(text: str) -> Optional[int]:
    for i in range(len(text) - 1, -1, -1):
        if text[i] in ASCII_WHITESPACE:
            return i
    return None


@dataclass(frozen=True)
class FragmentSplit:
    """prefix + sortable + suffix == original fragment text."""
    prefix: str
    sortable: str
    suffix: str


def split_fragment(text: str, position: FragmentPosition) -> FragmentSplit:
    """
    Partition a fragment into ignored prefix, sortable middle and ignored suffix.

    Args:
        text: Raw fragment text
        position: Fragment position inside its template

    Returns:
        FragmentSplit
    """
    ignore_first = not position.is_first and not (text and is_ascii_whitespace(text[0]))
    ignore_last = not position.is_last and not (text and is_ascii_whitespace(text[-1]))

    first_ws = _find_first_whitespace(text) if ignore_first else None
    last_ws = _find_last_whitespace(text) if ignore_last else None

    # No whitespace at all: the whole fragment is one class glued to an expression
    if ignore_first and first_ws is None:
        return FragmentSplit(text, "", "")
    if ignore_last and last_ws is None:
        return FragmentSplit("", "", text)

    if first_ws is not None and last_ws is not None and first_ws < last_ws:
        return FragmentSplit(text[:first_ws], text[first_ws:last_ws + 1], text[last_ws + 1:])
    if first_ws is not None:
        # A single whitespace position cannot anchor both sides.
        return FragmentSplit(text[:first_ws], text[first_ws:], "")
    if last_ws is not None:
        return FragmentSplit("", text[:last_ws + 1], text[last_ws + 1:])
    return FragmentSplit("", text, "")


def write_template_fragment(
    text: str,
    position: FragmentPosition,
    *,
    preserve_whitespace: bool,
    registry: ClassRegistry,
    out: TokenStream,
) -> FragmentSplit:
    """
    Emit tokens for one template fragment.

    With preserve_whitespace the whole fragment is registered as is and the
    sorter keeps its whitespace. Otherwise the fragment is split at its
    boundaries, the trimmed middle is registered and bordering whitespace
    collapses to single spaces.

    Returns:
        The split that was applied (whole text as sortable for the fast path)
    """
    if preserve_whitespace:
        out.class_ref(registry.add(text))
        return FragmentSplit("", text, "")

    split = split_fragment(text, position)

    # Prefix: class glued to the previous expression
    out.text(split.prefix)

    trimmed = split.sortable.strip(ASCII_WHITESPACE)
    if not trimmed:
        if split.sortable:
            out.text(" ")
    else:
        if not position.is_first or split.prefix:
            out.text(" ")

        out.class_ref(registry.add(trimmed))

        if not position.is_last or split.suffix:
            out.text(" ")

    # Suffix: class glued to the next expression
    out.text(split.suffix)

    return split


__all__ = [
    "ASCII_WHITESPACE",
    "is_ascii_whitespace",
    "FragmentSplit",
    "split_fragment",
    "write_template_fragment",
]
