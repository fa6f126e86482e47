"""Unified diffs between original and formatted file contents."""

from __future__ import annotations

import difflib
import os
from datetime import datetime, timezone

_NO_NEWLINE = "\\ No newline at end of file\n"


def _timestamp() -> str:
    return datetime.now(timezone.utc).astimezone().strftime("%Y-%m-%d %H:%M:%S.%f %z")


def unified_diff(original: bytes, formatted: bytes, filename: str) -> bytes:
    """Return a unified diff of ``original`` against ``formatted``.

    The original side is labelled ``<filename>.orig`` and the new side
    ``<filename>``, always with forward slashes. An empty result means the
    inputs are the same.
    """
    before = original.decode("utf-8", "surrogateescape").splitlines(keepends=True)
    after = formatted.decode("utf-8", "surrogateescape").splitlines(keepends=True)
    name = filename.replace(os.sep, "/")
    stamp = _timestamp()
    parts = []
    for line in difflib.unified_diff(
        before,
        after,
        fromfile=name + ".orig",
        tofile=name,
        fromfiledate=stamp,
        tofiledate=stamp,
        lineterm="\n",
    ):
        if line.endswith("\n"):
            parts.append(line)
        else:
            parts.append(line + "\n")
            parts.append(_NO_NEWLINE)
    return "".join(parts).encode("utf-8", "surrogateescape")