from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .config import TwsortCfg, load_config
from .engine import FormatResult, format_file, format_text
from .errors import TwsortUserError
from .files import SourceFinder
from .report import RunReport, dumps, file_report
from .sorting import sorter_from_cfg
from .version import tool_version

logger = logging.getLogger("twsort")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose or os.environ.get("TWSORT_DEBUG") else logging.WARNING
    logger.setLevel(level)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="twsort",
        description="Reorder utility-class lists in JavaScript/TypeScript sources",
        add_help=True,
    )
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {tool_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Options shared by format/report
    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("paths", nargs="+", metavar="PATH", help="files or directories ('-' reads stdin)")
        sp.add_argument("--config", type=Path, help="path to twsort.yaml (default: search upward from cwd)")
        sp.add_argument(
            "--attribute",
            action="append",
            metavar="NAME",
            help="extra class attribute besides class/className (repeatable)",
        )
        sp.add_argument(
            "--function",
            action="append",
            metavar="NAME",
            help="function whose arguments are class lists, e.g. clsx (repeatable)",
        )
        sp.add_argument(
            "--preserve-whitespace",
            action="store_true",
            default=None,
            help="keep whitespace around and between classes",
        )
        sp.add_argument(
            "--preserve-duplicates",
            action="store_true",
            default=None,
            help="keep repeated classes",
        )
        sp.add_argument("--order", help="'preserve', 'alphabetical' or 'module:callable'")
        sp.add_argument("--stdin-filepath", metavar="PATH", help="file name used to pick the grammar for stdin")
        sp.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")

    sp_format = sub.add_parser("format", help="format files (prints result for a single file)")
    add_common(sp_format)
    sp_format.add_argument("--write", action="store_true", help="rewrite files in place")
    sp_format.add_argument("--check", action="store_true", help="list files that would change, exit 1 if any")

    sp_report = sub.add_parser("report", help="JSON report per file")
    add_common(sp_report)

    return p


def _cfg(ns: argparse.Namespace) -> TwsortCfg:
    cfg = load_config(ns.config, start=Path.cwd())
    return cfg.with_overrides(
        tailwind_attributes=ns.attribute,
        tailwind_functions=ns.function,
        tailwind_preserve_whitespace=ns.preserve_whitespace,
        tailwind_preserve_duplicates=ns.preserve_duplicates,
        order=ns.order,
    )


def _format_stdin(ns: argparse.Namespace, cfg: TwsortCfg) -> FormatResult:
    if not ns.stdin_filepath:
        raise TwsortUserError("--stdin-filepath is required when reading from stdin")
    stdin_path = Path(ns.stdin_filepath)
    return format_text(sys.stdin.read(), stdin_path.suffix, cfg, file_path=stdin_path)


def _collect(ns: argparse.Namespace, cfg: TwsortCfg) -> List[Path]:
    finder = SourceFinder(cfg.extensions, cfg.exclude)
    return list(finder.iter_files(Path(p) for p in ns.paths))


def _run_format(ns: argparse.Namespace, cfg: TwsortCfg) -> int:
    if ns.paths == ["-"]:
        result = _format_stdin(ns, cfg)
        if ns.check:
            return 1 if result.changed else 0
        sys.stdout.write(result.text)
        return 0

    files = _collect(ns, cfg)
    if not (ns.write or ns.check):
        if len(files) != 1:
            raise TwsortUserError("printing to stdout needs exactly one file; use --write or --check")
        sys.stdout.write(format_file(files[0], cfg).text)
        return 0

    sorter = sorter_from_cfg(cfg)
    changed = 0
    for path in files:
        result = format_file(path, cfg, sorter, write=ns.write and not ns.check)
        if result.changed:
            changed += 1
            if ns.check:
                sys.stdout.write(f"{path}\n")

    if ns.check and changed:
        sys.stderr.write(f"{changed} file(s) would be reformatted\n")
        return 1
    return 0


def _run_report(ns: argparse.Namespace, cfg: TwsortCfg) -> int:
    report = RunReport(version=tool_version())
    if ns.paths == ["-"]:
        report.files.append(file_report(_format_stdin(ns, cfg), ns.stdin_filepath))
    else:
        sorter = sorter_from_cfg(cfg)
        for path in _collect(ns, cfg):
            report.files.append(file_report(format_file(path, cfg, sorter), path.as_posix()))
    sys.stdout.write(dumps(report.model_dump(mode="json", by_alias=True)))
    return 0


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns.verbose)

    try:
        cfg = _cfg(ns)
        if ns.cmd == "format":
            return _run_format(ns, cfg)
        if ns.cmd == "report":
            return _run_report(ns, cfg)
    except TwsortUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2
    except ValueError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
