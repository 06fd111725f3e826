"""
Class-list ordering.

The ordering policy itself is pluggable: a callable that receives the classes
of one list and returns them in the desired order. The sorter around it owns
whitespace and duplicate handling and guarantees that a failing policy never
loses or invents a class.
"""

from __future__ import annotations

import importlib
import logging
import re
from collections import Counter
from typing import Callable, Dict, List, Sequence

from .config.typed import ConfigError
from .tailwind.splitter import ASCII_WHITESPACE

logger = logging.getLogger(__name__)

ClassOrder = Callable[[List[str]], List[str]]

_WS_SPLIT = re.compile(f"([{re.escape(ASCII_WHITESPACE)}]+)")


class SortingError(Exception):
    """Ordering policy returned something other than a permutation of its input."""
    pass


def preserve_order(classes: List[str]) -> List[str]:
    return list(classes)


def alphabetical_order(classes: List[str]) -> List[str]:
    return sorted(classes)


BUILTIN_ORDERS: Dict[str, ClassOrder] = {
    "preserve": preserve_order,
    "alphabetical": alphabetical_order,
}


def load_order(name: str) -> ClassOrder:
    """
    Resolve an ordering policy by built-in name or "package.module:callable".
    """
    order = BUILTIN_ORDERS.get(name)
    if order is not None:
        return order

    if ":" not in name:
        known = ", ".join(sorted(BUILTIN_ORDERS))
        raise ConfigError(f"unknown order {name!r} (built-in: {known}; or 'module:callable')", ("order",))

    module_name, attr = name.split(":", 1)
    try:
        mod = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"cannot import order module {module_name!r}: {e}", ("order",)) from e

    fn = getattr(mod, attr, None)
    if fn is None or not callable(fn):
        raise ConfigError(f"{module_name}.{attr} is not a callable", ("order",))
    return fn


class ClassListSorter:
    """
    Sorts whitespace-separated class lists with an ordering policy.
    """

    def __init__(
        self,
        order: ClassOrder = preserve_order,
        *,
        preserve_whitespace: bool = False,
        preserve_duplicates: bool = False,
    ):
        self.order = order
        self.preserve_whitespace = preserve_whitespace
        self.preserve_duplicates = preserve_duplicates

    def sort_class_list(self, class_str: str) -> str:
        """
        Sort one class list.

        Whitespace-only input is returned unchanged. Without preserve_whitespace
        the result is trimmed and single-space separated.

        Raises:
            SortingError: If the policy drops or invents classes
        """
        if not class_str.strip(ASCII_WHITESPACE):
            return class_str

        parts = _WS_SPLIT.split(class_str)
        classes = parts[0::2]
        whitespace = parts[1::2]

        prefix = suffix = ""
        if classes[0] == "":
            classes.pop(0)
            prefix = whitespace.pop(0)
        if classes[-1] == "":
            classes.pop()
            suffix = whitespace.pop()

        if not self.preserve_whitespace:
            prefix = suffix = ""
            whitespace = [" "] * len(whitespace)

        if not self.preserve_duplicates:
            classes = list(dict.fromkeys(classes))
            whitespace = whitespace[:max(len(classes) - 1, 0)]

        ordered = list(self.order(list(classes)))
        if Counter(ordered) != Counter(classes):
            raise SortingError(f"order {getattr(self.order, '__name__', self.order)!r} "
                               f"is not a permutation of {classes!r}: {ordered!r}")

        out = [prefix]
        for i, cls in enumerate(ordered):
            out.append(cls)
            if i < len(whitespace):
                out.append(whitespace[i])
        out.append(suffix)
        return "".join(out)

    def sort_all(self, class_lists: Sequence[str]) -> List[str]:
        """
        Sort every registered class list.

        Returns a list of the same length and order; an entry whose sorting
        fails keeps its original text.
        """
        result: List[str] = []
        for class_str in class_lists:
            try:
                result.append(self.sort_class_list(class_str))
            except Exception as e:
                logger.warning("Failed to sort class list %r: %s", class_str, e)
                result.append(class_str)
        return result


def sorter_from_cfg(cfg) -> ClassListSorter:
    """Sorter configured from TwsortCfg."""
    return ClassListSorter(
        load_order(cfg.order),
        preserve_whitespace=cfg.tailwind_preserve_whitespace,
        preserve_duplicates=cfg.tailwind_preserve_duplicates,
    )


__all__ = [
    "ClassOrder",
    "SortingError",
    "BUILTIN_ORDERS",
    "preserve_order",
    "alphabetical_order",
    "load_order",
    "ClassListSorter",
    "sorter_from_cfg",
]
