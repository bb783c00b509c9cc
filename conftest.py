"""Global test configuration and shared fixtures."""

from __future__ import annotations

import typing as t

import pytest

from buildhost.platform import OS_NAME_OVERRIDE_ENV

pytest_plugins = ("buildhost.pytest_plugin",)


@pytest.fixture(autouse=True)
def clear_host_override(
    monkeypatch: pytest.MonkeyPatch,
) -> t.Generator[None, None, None]:
    """Ensure an override leaked from the outer shell never reaches tests."""
    monkeypatch.delenv(OS_NAME_OVERRIDE_ENV, raising=False)
    yield
