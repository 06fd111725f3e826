"""
Formatting context for one file pass.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..config.model import TwsortCfg
from ..tailwind.registry import ClassRegistry
from .metrics import MetricsCollector
from .tree_sitter_support import TreeSitterDocument


class FormatContext:
    """
    Owns the parsed document and the class registry of a single pass.

    A registry is never shared between files: identifiers are only
    meaningful for the pass that created them.
    """

    def __init__(
        self,
        doc: TreeSitterDocument,
        cfg: TwsortCfg,
        file_path: Optional[Path] = None,
    ):
        self.doc = doc
        self.cfg = cfg
        self.file_path = file_path
        self.registry = ClassRegistry()
        self.metrics = MetricsCollector()

    @property
    def label(self) -> str:
        return str(self.file_path) if self.file_path else f"<{self.doc.ext}>"
