from __future__ import annotations

from typing import Optional

from ..system import System


def git_config_get(system: System, key: str) -> Optional[str]:
    """Return the global value of key, or None when unset."""
    r = system.query(["git", "config", "--global", key])
    if not r.ok:
        return None
    value = r.stdout.strip()
    return value or None


def git_config_set(system: System, key: str, value: str) -> None:
    system.run(["git", "config", "--global", key, value])
