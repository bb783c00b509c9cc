"""Canonical, platform-neutral path strings for build logic."""

from __future__ import annotations

import os


def unixify_path(path: str) -> str:
    """Return *path* with forward slashes, no colons and a leading slash.

    The steps run in a fixed order: backslashes become ``/``, every ``:`` is
    dropped (so ``C:`` becomes ``C``), then ``/`` is prepended if missing.
    No other characters are touched and the filesystem is never consulted.
    """
    unixified = path.replace("\\", "/").replace(":", "")
    if not unixified.startswith("/"):
        unixified = f"/{unixified}"
    return unixified


def unixify(path: os.PathLike[str] | str) -> str:
    """Unixify *path* regardless of whether it is a string or Path."""
    return unixify_path(os.fspath(path))


def same_path(left: os.PathLike[str] | str, right: os.PathLike[str] | str) -> bool:
    """Return ``True`` when *left* and *right* share a canonical form."""
    return unixify(left) == unixify(right)


__all__ = ["same_path", "unixify", "unixify_path"]
