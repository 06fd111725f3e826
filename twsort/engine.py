"""
Formatting pipeline for one source text:
parse → collect literal token streams → sort registered class lists in one
batch → render and replace literal bodies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from .adapters.context import FormatContext
from .adapters.documents import document_for, normalize_ext
from .adapters.printer import TailwindPrinter
from .adapters.range_edits import RangeEditor
from .config.model import TwsortCfg
from .sorting import ClassListSorter, sorter_from_cfg

logger = logging.getLogger(__name__)


@dataclass
class FormatResult:
    text: str
    changed: bool
    classes: int = 0  # registered class lists
    literals_changed: int = 0
    metrics: Dict[str, Any] = field(default_factory=dict)
    skipped: Optional[str] = None  # reason the text was left untouched
    path: Optional[Path] = None


def format_text(
    text: str,
    ext: str,
    cfg: Optional[TwsortCfg] = None,
    sorter: Optional[ClassListSorter] = None,
    *,
    file_path: Optional[Path] = None,
) -> FormatResult:
    """
    Reorder class lists in source text.

    Args:
        text: Source text
        ext: File extension selecting the grammar ("tsx", ".js", ...)
        cfg: Configuration (defaults when None)
        sorter: Class-list sorter (built from cfg when None)
        file_path: Used for log messages and the result only

    Returns:
        FormatResult; documents with syntax errors come back unchanged
    """
    cfg = cfg or TwsortCfg()
    sorter = sorter or sorter_from_cfg(cfg)

    doc = document_for(normalize_ext(ext), text)
    ctx = FormatContext(doc, cfg, file_path)

    if doc.has_error():
        errors = doc.get_errors()
        where = f" at line {doc.get_line_number(errors[0])}" if errors else ""
        logger.warning("%s: syntax error%s, left unchanged", ctx.label, where)
        return FormatResult(text, False, skipped="syntax-error", path=file_path)

    edits = TailwindPrinter(ctx).collect()
    resolved = sorter.sort_all(ctx.registry.entries())

    editor = RangeEditor(text)
    literals_changed = 0
    for edit in edits:
        original = doc.get_byte_text(edit.start_byte, edit.end_byte)
        rendered = edit.tokens.render(resolved)
        if rendered == original:
            continue
        if editor.add_replacement(
            doc.byte_to_char_position(edit.start_byte),
            doc.byte_to_char_position(edit.end_byte),
            rendered,
            edit.kind,
        ):
            literals_changed += 1

    new_text, stats = editor.apply_edits()
    ctx.metrics.set("tailwind.classes.registered", len(ctx.registry))
    ctx.metrics.set("tailwind.literals.changed", literals_changed)
    for kind, count in stats["edit_types"].items():
        ctx.metrics.set(f"tailwind.changed.{kind}", count)

    logger.debug("%s: %d class lists, %d literals changed", ctx.label, len(ctx.registry), literals_changed)

    return FormatResult(
        text=new_text,
        changed=new_text != text,
        classes=len(ctx.registry),
        literals_changed=literals_changed,
        metrics=ctx.metrics.to_dict(),
        path=file_path,
    )


def format_file(
    path: Path,
    cfg: Optional[TwsortCfg] = None,
    sorter: Optional[ClassListSorter] = None,
    *,
    write: bool = False,
) -> FormatResult:
    """
    Format a file; with write=True changed content is saved back.
    """
    # bytes keep CRLF line endings intact
    text = path.read_bytes().decode("utf-8")
    result = format_text(text, path.suffix, cfg, sorter, file_path=path)
    if write and result.changed:
        path.write_bytes(result.text.encode("utf-8"))
        logger.info("Formatted %s", path)
    return result


__all__ = ["FormatResult", "format_text", "format_file"]
