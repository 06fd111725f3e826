import json
import os
import subprocess
import sys
from pathlib import Path
from typing import Optional

import pytest

from twsort.config import TwsortCfg
from twsort.engine import format_text
from twsort.sorting import ClassListSorter, alphabetical_order
from twsort.tailwind import ClassRegistry, TokenStream, VerbatimText, SortableClassRef

REPO_ROOT = Path(__file__).resolve().parent.parent


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def run_cli(root: Path, *args: str, stdin: Optional[str] = None) -> subprocess.CompletedProcess:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(REPO_ROOT), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "twsort.cli", *args],
        cwd=root, env=env, capture_output=True, text=True, encoding="utf-8", input=stdin,
    )


def jload(s: str):
    return json.loads(s)


def fmt(text: str, ext: str = "tsx", **options) -> str:
    """
    Format with alphabetical ordering so reordering is visible in assertions.
    Options are TwsortCfg fields.
    """
    cfg = TwsortCfg(**options)
    sorter = ClassListSorter(
        alphabetical_order,
        preserve_whitespace=cfg.tailwind_preserve_whitespace,
        preserve_duplicates=cfg.tailwind_preserve_duplicates,
    )
    return format_text(text, ext, cfg, sorter).text


def emitted(out: TokenStream, registry: ClassRegistry) -> list:
    """Tokens as ("text", s) / ("class", registered string) pairs."""
    result = []
    for tok in out:
        if isinstance(tok, VerbatimText):
            result.append(("text", tok.text))
        else:
            assert isinstance(tok, SortableClassRef)
            result.append(("class", registry[tok.index]))
    return result


@pytest.fixture
def registry() -> ClassRegistry:
    return ClassRegistry()


@pytest.fixture
def out() -> TokenStream:
    return TokenStream()


__all__ = ["write", "run_cli", "jload", "fmt", "emitted"]
