"""Pattern resolution: glob patterns to an ordered list of files.

Patterns are expanded in the order given. Matches within one pattern are
sorted by their relative path (code-point order, not locale-aware) so the
result never depends on directory-listing order. Every pattern is
relative to the project root and may not reach outside it.
"""

from __future__ import annotations

import glob
import logging
import os
from collections.abc import Iterable
from pathlib import Path, PurePosixPath

from assetforge.core.errors import (
    InvalidPatternError,
    NoFilesMatchedError,
    PatternEscapeError,
)

logger = logging.getLogger(__name__)


def validate_pattern(pattern: str) -> None:
    """Reject malformed glob syntax and patterns that escape the root.

    Raises
    ------
    InvalidPatternError
        Empty pattern, NUL byte, unterminated ``[`` class, or ``**``
        used inside a path component.
    PatternEscapeError
        Absolute pattern, home-relative pattern, or ``..`` traversal
        that climbs above the root.
    """
    if not pattern or not pattern.strip():
        raise InvalidPatternError(pattern, "empty pattern")
    if "\x00" in pattern:
        raise InvalidPatternError(pattern, "contains a NUL byte")

    normalized = pattern.replace("\\", "/")
    if os.path.isabs(pattern) or normalized.startswith("/") or normalized.startswith("~"):
        raise PatternEscapeError(pattern, "absolute patterns are not allowed")

    depth = 0
    for part in PurePosixPath(normalized).parts:
        if "**" in part and part != "**":
            raise InvalidPatternError(pattern, "'**' can only be an entire path component")
        _check_brackets(pattern, part)
        if part == "..":
            depth -= 1
            if depth < 0:
                raise PatternEscapeError(pattern, "'..' escapes the project root")
        elif part not in ("", "."):
            depth += 1


def _check_brackets(pattern: str, part: str) -> None:
    i = 0
    while i < len(part):
        if part[i] == "[":
            j = i + 1
            if j < len(part) and part[j] in "!^":
                j += 1
            if j < len(part) and part[j] == "]":
                j += 1
            end = part.find("]", j)
            if end == -1:
                raise InvalidPatternError(pattern, "unterminated character class '['")
            i = end
        i += 1


class PatternResolver:
    """Expands glob patterns beneath a fixed project root.

    Parameters
    ----------
    root:
        Directory all patterns are relative to. Matches whose real path
        (after following symlinks) lies outside it are rejected.
    """

    def __init__(self, root: Path | str) -> None:
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, patterns: Iterable[str]) -> list[Path]:
        """Expand ``patterns`` in order; no deduplication across patterns."""
        files: list[Path] = []
        for pattern in patterns:
            files.extend(self.expand(pattern))
        return files

    def expand(self, pattern: str) -> list[Path]:
        """Expand a single pattern into sorted, absolute file paths."""
        validate_pattern(pattern)
        try:
            matches = glob.glob(pattern, root_dir=self._root, recursive=True)
        except (OSError, ValueError) as exc:
            raise InvalidPatternError(pattern, str(exc)) from exc

        files: list[Path] = []
        for rel in sorted(matches):
            path = Path(os.path.normpath(self._root / rel))
            if not path.is_file():
                continue
            if not path.resolve().is_relative_to(self._root):
                raise PatternEscapeError(pattern, f"{rel} resolves outside the project root")
            files.append(path)

        if not files:
            raise NoFilesMatchedError(pattern)
        logger.debug("Pattern %r matched %d file(s)", pattern, len(files))
        return files
