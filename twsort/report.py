"""
JSON report models for `twsort report`.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .engine import FormatResult


class _Model(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FileReport(_Model):
    path: str
    changed: bool
    classes: int = 0
    literals_changed: int = 0
    skipped: Optional[str] = None
    metrics: Dict[str, Any] = Field(default_factory=dict)


class RunReport(_Model):
    version: str
    files: List[FileReport] = Field(default_factory=list)


def file_report(result: FormatResult, label: str) -> FileReport:
    return FileReport(
        path=label,
        changed=result.changed,
        classes=result.classes,
        literals_changed=result.literals_changed,
        skipped=result.skipped,
        metrics=result.metrics,
    )


def dumps(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2) + "\n"


__all__ = ["FileReport", "RunReport", "file_report", "dumps"]
