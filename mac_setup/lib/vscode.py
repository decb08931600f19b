from __future__ import annotations

from .command import NOT_FOUND_RETURNCODE, CommandError
from ..system import System


def list_extensions(system: System) -> set[str]:
    """Installed extension ids, lower-cased (VS Code ids are case-insensitive).

    Without a ``code`` binary nothing is installed; the install command then
    reports the missing binary itself.
    """
    r = system.query(["code", "--list-extensions"])
    if r.ok:
        return {line.strip().lower() for line in r.stdout.splitlines() if line.strip()}
    if r.returncode == NOT_FOUND_RETURNCODE or system.dry_run:
        return set()
    raise CommandError(r)


def install_extension(system: System, extension_id: str) -> None:
    system.run(["code", "--install-extension", extension_id])
