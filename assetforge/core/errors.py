"""Error taxonomy for the asset pipeline.

Every failure surfaces as a typed ``AssetForgeError`` carrying the path,
pattern, or bundle name needed to diagnose it. Nothing is retried here;
transient I/O failures are the caller's to retry.
"""

from __future__ import annotations

from pathlib import Path


class AssetForgeError(RuntimeError):
    """Base class for every error raised by assetforge."""


class ConfigError(AssetForgeError):
    """Raised when a bundle configuration file is unreadable or malformed."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Invalid bundle configuration {self.path}: {reason}")


# ----------------------------------------------------------------------
# Pattern resolution
# ----------------------------------------------------------------------


class PatternError(AssetForgeError):
    """Raised when a file pattern cannot be resolved."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Pattern {pattern!r}: {reason}")


class InvalidPatternError(PatternError):
    """Raised for malformed glob syntax."""


class PatternEscapeError(PatternError):
    """Raised when a pattern reaches outside the project root."""


class NoFilesMatchedError(PatternError):
    """Raised when a pattern resolves to zero files."""

    def __init__(self, pattern: str) -> None:
        super().__init__(pattern, "matched no files")


# ----------------------------------------------------------------------
# Compilation
# ----------------------------------------------------------------------


class ReadError(AssetForgeError):
    """Raised when a source file cannot be read."""

    def __init__(self, path: Path | str, bundle: str | None = None) -> None:
        self.path = Path(path)
        self.bundle = bundle
        where = f" for bundle {bundle!r}" if bundle else ""
        super().__init__(f"Cannot read {self.path}{where}")


class MinifyError(AssetForgeError):
    """Raised when the minifier rejects content."""

    def __init__(self, message: str, *, bundle: str | None = None, path: Path | str | None = None) -> None:
        self.message = message
        self.bundle = bundle
        self.path = Path(path) if path is not None else None
        context = []
        if bundle:
            context.append(f"bundle {bundle!r}")
        if self.path is not None:
            context.append(f"file {self.path}")
        prefix = f"{', '.join(context)}: " if context else ""
        super().__init__(f"Minification failed: {prefix}{message}")


class UnsupportedTypeError(AssetForgeError):
    """Raised when a file type other than css or js is requested."""

    def __init__(self, file_type: object) -> None:
        self.file_type = file_type
        super().__init__(f"Unsupported file type {file_type!r} (expected 'css' or 'js')")


# ----------------------------------------------------------------------
# Filesystem
# ----------------------------------------------------------------------


class FilesystemError(AssetForgeError):
    """Raised when a filesystem operation fails; always names the path."""

    action = "access"

    def __init__(self, path: Path | str, detail: str = "") -> None:
        self.path = Path(path)
        self.detail = detail
        suffix = f": {detail}" if detail else ""
        super().__init__(f"Cannot {self.action} {self.path}{suffix}")


class DirCreateError(FilesystemError):
    action = "create directory"


class WriteError(FilesystemError):
    action = "write"


class ListError(FilesystemError):
    action = "list directory"


class StatError(FilesystemError):
    action = "stat"


class DeleteError(FilesystemError):
    """Aggregate of per-file delete failures from a retention sweep.

    ``deleted`` counts the files that were removed before and after the
    failures; ``failures`` maps each path that could not be removed to the
    underlying ``OSError``.
    """

    action = "delete stale artifacts in"

    def __init__(self, directory: Path | str, failures: dict[Path, OSError], deleted: int) -> None:
        self.failures = failures
        self.deleted = deleted
        names = ", ".join(sorted(p.name for p in failures))
        super().__init__(
            directory,
            f"{len(failures)} file(s) failed ({names}); {deleted} deleted",
        )
