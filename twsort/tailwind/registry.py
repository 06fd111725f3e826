"""
Per-pass registry of class lists awaiting reordering.
"""

from __future__ import annotations

from typing import Iterator, List


class ClassRegistry:
    """
    Append-only store of raw class-list strings.

    Identifiers are assigned in registration order starting at 0 and are never
    reused. Registering the same text twice yields two identifiers: every
    occurrence is sorted and reinserted at its own position.
    """

    def __init__(self) -> None:
        self._entries: List[str] = []

    def add(self, text: str) -> int:
        self._entries.append(text)
        return len(self._entries) - 1

    def entries(self) -> List[str]:
        """Snapshot of registered strings, index == identifier."""
        return list(self._entries)

    def __getitem__(self, index: int) -> str:
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"ClassRegistry({len(self._entries)} entries)"


__all__ = ["ClassRegistry"]
