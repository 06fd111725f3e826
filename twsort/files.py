"""
Expansion of CLI paths into source files.

Directories are walked recursively. Files are kept when their extension is
configured, they match no `exclude` pattern and no `.gitignore` rule between
the walk root and the file ignores them. Explicitly named files are always
kept.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern

from .errors import TwsortUserError

logger = logging.getLogger(__name__)


class GitIgnoreService:
    """
    Checks paths against .gitignore files found under a root.

    Each .gitignore applies to its directory and subdirectories, with patterns
    matched relative to its location. Specs are loaded lazily and cached.
    """

    def __init__(self, root: Path):
        self.root = root.resolve()
        # directory relative to root ("" for root) → spec or None
        self._specs: Dict[str, Optional[PathSpec]] = {}

    @staticmethod
    def _read_gitignore_file(path: Path) -> List[str]:
        try:
            content = path.read_text(encoding="utf-8", errors="ignore")
        except OSError as e:
            logger.warning("Failed to read %s: %s", path, e)
            return []
        patterns = []
        for line in content.splitlines():
            line = line.strip()
            if line and not line.startswith("#"):
                patterns.append(line)
        return patterns

    def _get_spec_for_dir(self, rel_dir: str) -> Optional[PathSpec]:
        if rel_dir in self._specs:
            return self._specs[rel_dir]

        gitignore_path = (self.root / rel_dir / ".gitignore") if rel_dir else (self.root / ".gitignore")
        spec: Optional[PathSpec] = None
        if gitignore_path.is_file():
            patterns = self._read_gitignore_file(gitignore_path)
            if patterns:
                spec = PathSpec.from_lines(GitWildMatchPattern, patterns)
        self._specs[rel_dir] = spec
        return spec

    def is_ignored(self, rel_path: str) -> bool:
        """
        Check a root-relative POSIX path (directories end with "/").
        """
        parts = rel_path.strip("/").split("/")
        suffix = "/" if rel_path.endswith("/") else ""
        ignored = False

        for i in range(len(parts)):
            dir_path = "/".join(parts[:i])
            spec = self._get_spec_for_dir(dir_path)
            if spec is None:
                continue
            # the deepest .gitignore with a matching rule decides; "!" rules un-ignore
            result = spec.check_file("/".join(parts[i:]) + suffix)
            if result.include is not None:
                ignored = result.include

        return ignored


class SourceFinder:
    def __init__(self, extensions: Iterable[str], exclude: Iterable[str] = (), use_gitignore: bool = True):
        self.extensions = {e.lower() if e.startswith(".") else f".{e.lower()}" for e in extensions}
        self.exclude = PathSpec.from_lines(GitWildMatchPattern, list(exclude))
        self.use_gitignore = use_gitignore

    def _wanted(self, path: Path) -> bool:
        return path.suffix.lower() in self.extensions

    def iter_files(self, paths: Iterable[Path]) -> Iterator[Path]:
        """
        Yield source files for the given files and directories, each once.

        Raises:
            TwsortUserError: A path does not exist
        """
        seen = set()
        for path in paths:
            if path.is_file():
                candidates: Iterable[Path] = [path]
            elif path.is_dir():
                candidates = self._walk(path)
            else:
                raise TwsortUserError(f"Path not found: {path}")

            for file_path in candidates:
                key = file_path.resolve()
                if key not in seen:
                    seen.add(key)
                    yield file_path

    def _walk(self, root: Path) -> Iterator[Path]:
        gitignore = GitIgnoreService(root) if self.use_gitignore else None

        for dirpath, dirnames, filenames in os.walk(root):
            rel_dir = Path(dirpath).relative_to(root).as_posix()
            rel_dir = "" if rel_dir == "." else rel_dir

            kept_dirs = []
            for name in sorted(dirnames):
                rel = f"{rel_dir}/{name}/" if rel_dir else f"{name}/"
                if self.exclude.match_file(rel) or (gitignore and gitignore.is_ignored(rel)):
                    logger.debug("Skipping directory %s", rel)
                    continue
                kept_dirs.append(name)
            dirnames[:] = kept_dirs

            for name in sorted(filenames):
                file_path = Path(dirpath) / name
                if not self._wanted(file_path):
                    continue
                rel = f"{rel_dir}/{name}" if rel_dir else name
                if self.exclude.match_file(rel) or (gitignore and gitignore.is_ignored(rel)):
                    continue
                yield file_path


__all__ = ["GitIgnoreService", "SourceFinder"]
