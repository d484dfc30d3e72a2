"""Environment module — host and interpreter facts shown in the report.

The harness never reads these facts; they are collected once after the
run and passed straight to the Reporter.
"""

from __future__ import annotations

import os
import platform
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

_UNLIMITED = "unlimited"
_UNAVAILABLE = "n/a"


def interface_mode(environ: Mapping[str, str]) -> str:
    """Return ``"cgi"`` when launched by a web server, ``"cli"`` otherwise."""
    return "cgi" if environ.get("GATEWAY_INTERFACE") else "cli"


def _soft_limit(name: str) -> int | None:
    """Return the soft resource limit *name*, or None when unlimited.

    Raises LookupError when the platform has no such limit.
    """
    if sys.platform == "win32":
        raise LookupError(name)
    import resource

    limit_id = getattr(resource, name, None)
    if limit_id is None:
        raise LookupError(name)
    soft, _hard = resource.getrlimit(limit_id)
    if soft == resource.RLIM_INFINITY:
        return None
    return soft


def memory_limit() -> str:
    """Address-space limit of this process, e.g. ``"512M"`` or ``"unlimited"``."""
    try:
        soft = _soft_limit("RLIMIT_AS")
    except LookupError:
        return _UNAVAILABLE
    if soft is None:
        return _UNLIMITED
    for unit, size in (("G", 1024**3), ("M", 1024**2), ("K", 1024)):
        if soft >= size and soft % size == 0:
            return f"{soft // size}{unit}"
    return str(soft)


def time_limit() -> str:
    """CPU-time limit of this process in seconds, e.g. ``"30s"``."""
    try:
        soft = _soft_limit("RLIMIT_CPU")
    except LookupError:
        return _UNAVAILABLE
    if soft is None:
        return _UNLIMITED
    return f"{soft}s"


def _on_off(flag: bool) -> str:
    return "On" if flag else "Off"


def gil_enabled() -> bool:
    """True unless running a free-threaded build with the GIL disabled."""
    probe = getattr(sys, "_is_gil_enabled", None)
    return True if probe is None else bool(probe())


def jit_enabled() -> bool:
    """True when the experimental JIT compiler is active."""
    jit = getattr(sys, "_jit", None)
    if jit is None:
        return False
    return bool(jit.is_enabled())


def collect_environment_facts(*, environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Gather the ordered label -> value facts for the "System Info" section."""
    env = os.environ if environ is None else environ
    return {
        "Python": platform.python_version(),
        "Implementation": platform.python_implementation(),
        "OS": f"{platform.system()} {platform.release()} ({platform.machine()})",
        "Interface": interface_mode(env),
        "Server": env.get("SERVER_SOFTWARE", "CLI"),
        "Mem Limit": memory_limit(),
        "Time Limit": time_limit(),
        "GIL": _on_off(gil_enabled()),
        "JIT": _on_off(jit_enabled()),
    }
