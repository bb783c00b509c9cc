"""Pytest plugin for emulating alternative build hosts."""

from __future__ import annotations

import logging
import typing as t

import pytest

from .platform import OS_NAME_OVERRIDE_ENV, HostInfo, is_windows_host

logger = logging.getLogger(__name__)

_WINDOWS_HOST_MARKER: t.Final[str] = "windows_host"


class SetOsName(t.Protocol):
    """Callable returned by the ``fake_host`` fixture."""

    def __call__(self, name: str | None) -> HostInfo: ...


def pytest_configure(config: pytest.Config) -> None:
    """Register plugin-specific markers."""
    config.addinivalue_line(
        "markers",
        f"{_WINDOWS_HOST_MARKER}: skip the test unless the host is Windows-family.",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip tests marked ``windows_host`` on other hosts."""
    del config
    if is_windows_host():
        return
    skip = pytest.mark.skip(reason="requires a Windows host")
    for item in items:
        if _WINDOWS_HOST_MARKER in item.keywords:
            item.add_marker(skip)


@pytest.fixture
def fake_host(monkeypatch: pytest.MonkeyPatch) -> SetOsName:
    """Return a callable that pretends the host reports *name*.

    Passing ``None`` removes the override so the live host is visible again.
    """

    def set_os_name(name: str | None) -> HostInfo:
        if name is None:
            monkeypatch.delenv(OS_NAME_OVERRIDE_ENV, raising=False)
        else:
            logger.debug("Faking host OS name %r", name)
            monkeypatch.setenv(OS_NAME_OVERRIDE_ENV, name)
        return HostInfo.current()

    return set_os_name
