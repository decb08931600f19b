from __future__ import annotations

import logging

from .command import CommandError
from ..system import System
from .env import PATHS

logger = logging.getLogger(__name__)


def plugin_list(system: System) -> set[str]:
    r = system.query(["asdf", "plugin", "list"])
    # asdf exits non-zero when no plugin is installed yet.
    if not r.ok:
        return set()
    return {line.strip() for line in r.stdout.splitlines() if line.strip()}


def plugin_add(system: System, plugin: str) -> None:
    system.run(["asdf", "plugin", "add", plugin])


def resolve_version(system: System, plugin: str, version: str) -> str:
    """Turn "latest" into a concrete version number."""
    if version != "latest":
        return version
    r = system.query(["asdf", "latest", plugin])
    if not r.ok or not r.stdout.strip():
        if system.dry_run:
            # Plugin not added yet in a dry run; nothing to resolve against.
            return version
        raise CommandError(r)
    return r.stdout.strip().splitlines()[-1].strip()


def has_version(system: System, plugin: str, version: str) -> bool:
    return system.query(["asdf", "list", plugin, version]).ok


def install_version(system: System, plugin: str, version: str) -> None:
    system.run(["asdf", "install", plugin, version], interactive=True)


def global_version(system: System, plugin: str) -> str | None:
    """Version pinned for plugin in ~/.tool-versions, if any."""
    p = system.expand(PATHS.tool_versions)
    if not p.exists():
        return None
    for line in p.read_text(encoding="utf-8").splitlines():
        parts = line.split("#", 1)[0].split()
        if len(parts) >= 2 and parts[0] == plugin:
            return parts[1]
    return None


def set_global(system: System, plugin: str, version: str) -> None:
    # asdf 0.16+ writes the home pin with "set --home"; "global" is gone.
    system.run(["asdf", "set", "--home", plugin, version])
