"""
Configuration model.

Options are flat at the root of `twsort.yaml`, the way Prettier plugins read
them; camelCase spellings (`tailwindAttributes`, …) are accepted as aliases.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional

DEFAULT_EXTENSIONS = [".js", ".jsx", ".mjs", ".cjs", ".ts", ".mts", ".cts", ".tsx"]
DEFAULT_EXCLUDE = ["node_modules/", "dist/", "build/", ".git/"]

# camelCase option name → field name
OPTION_ALIASES: Dict[str, str] = {
    "tailwindAttributes": "tailwind_attributes",
    "tailwindFunctions": "tailwind_functions",
    "tailwindPreserveWhitespace": "tailwind_preserve_whitespace",
    "tailwindPreserveDuplicates": "tailwind_preserve_duplicates",
}


@dataclass
class TwsortCfg:
    # extra attribute names besides `class`/`className`
    tailwind_attributes: Optional[List[str]] = None
    # bare function names whose arguments are class lists (clsx, cn, tw, ...)
    tailwind_functions: Optional[List[str]] = None
    # register template fragments whole and keep whitespace around sorted classes
    tailwind_preserve_whitespace: bool = False
    tailwind_preserve_duplicates: bool = False
    # built-in policy name ("preserve", "alphabetical") or "module:callable"
    order: str = "preserve"
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    # gitignore-style patterns skipped during directory expansion
    exclude: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE))

    def with_overrides(self, **overrides) -> TwsortCfg:
        """Copy with non-None overrides applied (CLI flags win over file values)."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


__all__ = ["TwsortCfg", "OPTION_ALIASES", "DEFAULT_EXTENSIONS", "DEFAULT_EXCLUDE"]
