"""
Lazy counters for one formatting pass.
"""

from __future__ import annotations

from typing import Any, Dict, Union


class MetricsCollector:
    """
    Lazy metrics collector: counters are created on first increment.
    """

    def __init__(self):
        self._metrics: Dict[str, Any] = {}

    def increment(self, key: str, value: Union[int, float] = 1) -> None:
        """
        Lazy increment, creates the key if missing.

        Args:
            key: Metric key (e.g. "tailwind.sites.attribute")
            value: Amount to add (default 1)
        """
        current = self._metrics.get(key, 0)
        if isinstance(current, (int, float)) and isinstance(value, (int, float)):
            self._metrics[key] = current + value
        else:
            self._metrics[key] = value

    def set(self, key: str, value: Any) -> None:
        self._metrics[key] = value

    def get(self, key: str, default: Any = 0) -> Any:
        return self._metrics.get(key, default)

    def mark_site(self, site_kind: str) -> None:
        """Count a class-bearing site ("attribute" or "call")."""
        self.increment(f"tailwind.sites.{site_kind}")

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._metrics)

    def __repr__(self) -> str:
        return f"MetricsCollector({self._metrics})"
