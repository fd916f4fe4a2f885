"""Default minifier: rjsmin for JavaScript, rcssmin for CSS.

Any callable matching :class:`Minifier` can be passed to the compiler
and versioner instead. It must be deterministic for artifact names to
be reproducible.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import rcssmin
import rjsmin

from assetforge.core.errors import MinifyError
from assetforge.models.artifacts import FileKind


@runtime_checkable
class Minifier(Protocol):
    """``(content, kind) -> minified bytes``; raises MinifyError on rejection."""

    def __call__(self, content: bytes, kind: FileKind) -> bytes: ...


def minify(content: bytes, kind: FileKind) -> bytes:
    """Minify UTF-8 ``content`` according to ``kind``."""
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MinifyError(f"content is not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc

    try:
        if kind is FileKind.JS:
            result = rjsmin.jsmin(text)
        elif kind is FileKind.CSS:
            result = rcssmin.cssmin(text)
        else:
            raise MinifyError(f"no minifier for {kind!r}")
    except MinifyError:
        raise
    except (ValueError, TypeError) as exc:
        raise MinifyError(str(exc)) from exc

    return result.encode("utf-8")
