"""Host operating-system detection shared across buildhost modules.

Build logic asks one question of the host: is it a Windows-family system?
The answer drives behaviour such as executable suffixes, never the canonical
path representation (see :mod:`buildhost.paths`).
"""

from __future__ import annotations

import dataclasses as dc
import logging
import os
import platform
import typing as t

logger = logging.getLogger(__name__)

# Test suites set this override to emulate alternative hosts (for example
# Windows) without needing to spawn a different OS.
OS_NAME_OVERRIDE_ENV: t.Final[str] = "BUILDHOST_OS_NAME_OVERRIDE"

# Returned whenever the host OS name is missing or unreadable.
DEFAULT_IS_WINDOWS: t.Final[bool] = False

_WINDOWS_TOKEN: t.Final[str] = "windows"
_WINDOWS_EXECUTABLE_SUFFIX: t.Final[str] = ".exe"

_PYTEST_REQUIRED_MESSAGE: t.Final[str] = (
    "pytest is required to skip tests on non-Windows hosts."
)


class _Unset:
    """Sentinel type marking an omitted ``os_name`` argument."""

    def __repr__(self) -> str:
        return "<live host>"


_LIVE: t.Final = _Unset()


def host_os_name() -> str | None:
    """Return the reported host OS name, or ``None`` when unavailable."""
    if override := os.getenv(OS_NAME_OVERRIDE_ENV):
        logger.debug("Using host OS override %r", override)
        return override

    try:
        name = platform.system()
    except OSError:
        logger.debug("Failed to read host OS name", exc_info=True)
        return None
    return name or None


def _resolve(os_name: str | None | _Unset) -> str | None:
    if isinstance(os_name, _Unset):
        return host_os_name()
    return os_name


def is_windows_host(os_name: str | None | _Unset = _LIVE) -> bool:
    """Return ``True`` when *os_name* (default: the live host) is Windows-family.

    A missing or empty name is treated as non-Windows rather than reported
    as an error.
    """
    name = _resolve(os_name)
    if not name:
        return DEFAULT_IS_WINDOWS
    return _WINDOWS_TOKEN in name.lower()


def executable_suffix(os_name: str | None | _Unset = _LIVE) -> str:
    """Return the native executable suffix for *os_name*."""
    return _WINDOWS_EXECUTABLE_SUFFIX if is_windows_host(os_name) else ""


def executable_name(name: str, os_name: str | None | _Unset = _LIVE) -> str:
    """Return *name* with the native executable suffix appended once."""
    suffix = executable_suffix(os_name)
    if not suffix or name.lower().endswith(suffix):
        return name
    return f"{name}{suffix}"


@dc.dataclass(frozen=True, slots=True)
class HostInfo:
    """Snapshot of the host identity passed explicitly to build logic."""

    os_name: str | None

    @classmethod
    def current(cls) -> HostInfo:
        """Capture the live host identity."""
        return cls(os_name=host_os_name())

    @property
    def is_windows(self) -> bool:
        return is_windows_host(self.os_name)

    @property
    def executable_suffix(self) -> str:
        return executable_suffix(self.os_name)


def skip_unless_windows_host(
    *, reason: str | None = None, os_name: str | None | _Unset = _LIVE
) -> None:
    """Skip the current pytest test unless *os_name* is Windows-family."""
    if is_windows_host(os_name):
        return

    skip_reason = reason or "requires a Windows host"

    try:
        import pytest
    except ModuleNotFoundError as exc:  # pragma: no cover - pytest is a test dep
        raise RuntimeError(_PYTEST_REQUIRED_MESSAGE) from exc

    pytest.skip(skip_reason)


__all__ = [
    "DEFAULT_IS_WINDOWS",
    "OS_NAME_OVERRIDE_ENV",
    "HostInfo",
    "executable_name",
    "executable_suffix",
    "host_os_name",
    "is_windows_host",
    "skip_unless_windows_host",
]
