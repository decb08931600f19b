from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Sequence

from .lib.command import CmdResult, run_cmd

logger = logging.getLogger(__name__)


@dataclass
class System:
    """Everything a step may touch outside the process.

    Steps never call subprocess, input() or os.environ themselves; they go
    through this object so a test can hand them a fake.

    - query(): read-only probes ("is it installed?"). Always executed, even in
      dry-run, and never raise on a non-zero exit.
    - run(): mutating commands. Skipped in dry-run, raise CommandError on
      failure.
    """

    home: Path = field(default_factory=lambda: Path(os.path.expanduser("~")))
    dry_run: bool = False
    prompt: Callable[[str], str] = input

    def query(self, argv: Sequence[str]) -> CmdResult:
        return run_cmd(argv, check=False)

    def run(self, argv: Sequence[str], *, interactive: bool = False) -> CmdResult:
        return run_cmd(argv, capture=not interactive, dry_run=self.dry_run)

    def which(self, name: str) -> Optional[str]:
        return shutil.which(name)

    def set_path(self, value: str) -> None:
        """Replace this process's PATH; child commands and which() see it."""
        if value != os.environ.get("PATH"):
            logger.debug("PATH updated from profile: %s", value)
        os.environ["PATH"] = value

    def is_executable(self, path: str) -> bool:
        return os.path.isfile(path) and os.access(path, os.X_OK)

    def expand(self, path: str | Path) -> Path:
        p = str(path)
        if p == "~" or p.startswith("~/"):
            return self.home / p[2:]
        return Path(p)

    def ask(self, question: str) -> str:
        return self.prompt(question).strip()

    def make_dirs(self, path: Path) -> None:
        if self.dry_run:
            logger.info("Would create directory %s", path)
            return
        path.mkdir(parents=True, exist_ok=True)

    def append_text(self, path: Path, text: str) -> None:
        if self.dry_run:
            logger.info("Would append %d bytes to %s", len(text), path)
            return
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as f:
            f.write(text)
