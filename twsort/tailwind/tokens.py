"""
Output tokens produced while walking class-bearing literals.

A literal body is rewritten as an ordered stream of verbatim text runs and
references to registered class lists. References are resolved only when the
whole file has been walked and every registered class list has been sorted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Union


@dataclass(frozen=True)
class VerbatimText:
    """Text appended to the output unchanged."""
    text: str


@dataclass(frozen=True)
class SortableClassRef:
    """Placeholder for a registered class list (see ClassRegistry)."""
    index: int


OutputToken = Union[VerbatimText, SortableClassRef]


class TokenStream:
    """Ordered token buffer for one literal body."""

    def __init__(self) -> None:
        self._tokens: List[OutputToken] = []

    def text(self, value: str) -> None:
        """Append verbatim text. Empty strings are dropped."""
        if value:
            self._tokens.append(VerbatimText(value))

    def class_ref(self, index: int) -> None:
        self._tokens.append(SortableClassRef(index))

    @property
    def tokens(self) -> List[OutputToken]:
        return list(self._tokens)

    def render(self, resolved: Sequence[str]) -> str:
        """
        Join tokens into final text.

        Args:
            resolved: Final text of every registered class list, by index

        Returns:
            Rendered literal body
        """
        parts: List[str] = []
        for tok in self._tokens:
            if isinstance(tok, VerbatimText):
                parts.append(tok.text)
            else:
                parts.append(resolved[tok.index])
        return "".join(parts)

    def __iter__(self) -> Iterator[OutputToken]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"TokenStream({self._tokens!r})"


__all__ = ["VerbatimText", "SortableClassRef", "OutputToken", "TokenStream"]
