"""
Replacement of character ranges in a source text.

Offsets always refer to the original text; overlapping replacements are
resolved when they are added, so applying them is a single pass.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class TextRange:
    """Half-open character range [start_char, end_char)."""
    start_char: int
    end_char: int

    def __post_init__(self):
        if self.start_char > self.end_char:
            raise ValueError(f"Invalid range: start_char ({self.start_char}) > end_char ({self.end_char})")

    @property
    def length(self) -> int:
        return self.end_char - self.start_char

    def overlaps(self, other: TextRange) -> bool:
        return self.start_char < other.end_char and other.start_char < self.end_char


@dataclass(frozen=True)
class Edit:
    range: TextRange
    replacement: str
    type: Optional[str]  # counted per type in the statistics


class RangeEditor:
    """
    Collects replacements against one text and applies them together.
    """

    def __init__(self, original_text: str):
        self.original_text = original_text
        self.edits: List[Edit] = []

    def add_replacement(self, start_char: int, end_char: int, replacement: str, edit_type: Optional[str] = None) -> bool:
        """
        Register a replacement of [start_char, end_char).

        Overlapping replacements: the wider one wins, on a tie the one
        added first stays.

        Returns:
            False if the replacement was dropped in favour of an existing one
        """
        new = Edit(TextRange(start_char, end_char), replacement, edit_type)
        clashing = [e for e in self.edits if new.range.overlaps(e.range)]
        if any(e.range.length >= new.range.length for e in clashing):
            return False
        self.edits = [e for e in self.edits if e not in clashing]
        self.edits.append(new)
        return True

    def validate_edits(self) -> List[str]:
        errors = []
        size = len(self.original_text)
        for i, edit in enumerate(self.edits):
            if edit.range.start_char < 0:
                errors.append(f"Edit {i}: start_char ({edit.range.start_char}) is negative")
            if edit.range.end_char > size:
                errors.append(f"Edit {i}: end_char ({edit.range.end_char}) exceeds text length ({size})")
        return errors

    def apply_edits(self) -> Tuple[str, Dict[str, Any]]:
        """
        Build the edited text.

        Returns:
            (new_text, {"edits_applied": n, "edit_types": {type: count}})

        Raises:
            ValueError: An edit lies outside the text
        """
        errors = self.validate_edits()
        if errors:
            raise ValueError(f"Edit validation failed: {'; '.join(errors)}")

        edit_types: Dict[str, int] = {}
        parts: List[str] = []
        cursor = 0
        for edit in sorted(self.edits, key=lambda e: e.range.start_char):
            parts.append(self.original_text[cursor:edit.range.start_char])
            parts.append(edit.replacement)
            cursor = edit.range.end_char
            if edit.type:
                edit_types[edit.type] = edit_types.get(edit.type, 0) + 1
        parts.append(self.original_text[cursor:])

        return "".join(parts), {"edits_applied": len(self.edits), "edit_types": edit_types}
