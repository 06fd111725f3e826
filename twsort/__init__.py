"""
twsort: class-list ordering for JavaScript and TypeScript sources.
"""

from .config import TwsortCfg, load_config
from .engine import FormatResult, format_file, format_text
from .errors import TwsortUserError
from .sorting import ClassListSorter

__all__ = [
    "ClassListSorter",
    "FormatResult",
    "TwsortCfg",
    "TwsortUserError",
    "format_file",
    "format_text",
    "load_config",
]
