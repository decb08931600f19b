"""Append marker-guarded blocks to the user's shell profile.

Each block starts with a unique marker comment. Before appending we search
the file for that marker, so running the setup again never duplicates a
block. The profile is then sourced in a child shell and the PATH it ends up
with is copied into this process, so tools the block puts on PATH are
reachable by later steps. A failing ``source`` means the profile is broken.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .system import System

logger = logging.getLogger(__name__)


class ProfileWriteError(RuntimeError):
    pass


class ProfileReloadError(RuntimeError):
    pass


@dataclass(frozen=True)
class ProfileBlock:
    marker: str
    body: str

    def render(self) -> str:
        body = self.body.strip("\n")
        if body:
            return f"\n{self.marker}\n{body}\n"
        return f"\n{self.marker}\n"


def _shell_for(path: Path) -> str:
    if path.name in {".bashrc", ".bash_profile", ".profile"}:
        return "bash"
    return "zsh"


class ProfileAppender:
    def __init__(self, path: Path, system: System, *, strict_reload: bool = False):
        self.path = path
        self.system = system
        self.strict_reload = strict_reload

    def read(self) -> str:
        if not self.path.is_file():
            return ""
        return self.path.read_text(encoding="utf-8", errors="replace")

    def contains(self, marker: str) -> bool:
        return marker in self.read()

    def ensure_block(self, block: ProfileBlock) -> bool:
        """Append block unless its marker is already there. Returns True if appended."""

        if self.contains(block.marker):
            logger.debug("Marker already present in %s: %s", self.path, block.marker)
            return False

        try:
            self.system.append_text(self.path, block.render())
        except OSError as e:
            raise ProfileWriteError(f"Cannot write {self.path}: {e}") from e

        logger.info("🔧 Added %s to %s", block.marker.lstrip("# ").strip(" -"), self.path)
        self.reload()
        return True

    def reload(self) -> None:
        """Source the profile and adopt the PATH it leaves behind.

        Later steps (``code``, ``asdf``) are found through PATH entries the
        profile adds, so the new PATH is applied to this process.
        """
        shell = _shell_for(self.path)
        # Path goes in as $1, never spliced into the script.
        r = self.system.query([shell, "-c", 'source "$1" && printenv PATH', shell, str(self.path)])
        if r.ok:
            lines = r.stdout.strip().splitlines()
            if lines and lines[-1].strip():
                self.system.set_path(lines[-1].strip())
            return
        msg = f"Failed to source {self.path} ({shell} exited {r.returncode})"
        if self.strict_reload:
            raise ProfileReloadError(msg)
        logger.warning("⚠️  %s; open a new terminal to pick up the changes.", msg)
