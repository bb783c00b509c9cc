"""Host detection and canonical path helpers for build tooling.

Two leaves with no dependency on each other: :mod:`buildhost.platform`
classifies the host as Windows-family or not, and :mod:`buildhost.paths`
rewrites any path string into a forward-slash, colon-free, rooted form.
"""

from __future__ import annotations

from .paths import same_path, unixify, unixify_path
from .platform import (
    DEFAULT_IS_WINDOWS,
    OS_NAME_OVERRIDE_ENV,
    HostInfo,
    executable_name,
    executable_suffix,
    host_os_name,
    is_windows_host,
    skip_unless_windows_host,
)

__all__ = [
    "DEFAULT_IS_WINDOWS",
    "OS_NAME_OVERRIDE_ENV",
    "HostInfo",
    "executable_name",
    "executable_suffix",
    "host_os_name",
    "is_windows_host",
    "same_path",
    "skip_unless_windows_host",
    "unixify",
    "unixify_path",
]
