from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass
from typing import Sequence

logger = logging.getLogger(__name__)

# Exit status a shell reports for a command that cannot be found.
NOT_FOUND_RETURNCODE = 127


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandError(RuntimeError):
    """A command exited with a non-zero status."""

    def __init__(self, result: CmdResult):
        self.result = result
        msg = f"Command failed ({result.returncode}): {fmt_argv(result.argv)}"
        if result.stderr.strip():
            msg += f"\n{result.stderr.strip()}"
        super().__init__(msg)


def fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def run_cmd(
    argv: Sequence[str],
    *,
    check: bool = True,
    capture: bool = True,
    dry_run: bool = False,
) -> CmdResult:
    """Run a command with consistent logging.

    - Always logs the command.
    - A missing executable is reported as return code 127, like a shell does.
    - capture=False lets the command talk to the terminal directly (installers
      that prompt for a password or confirmation).
    - dry_run logs but does not execute.
    """

    argv_list = list(argv)
    logger.info("CMD %s", fmt_argv(argv_list))

    if dry_run:
        return CmdResult(argv=argv_list, returncode=0, stdout="", stderr="")

    pipe = subprocess.PIPE if capture else None
    try:
        p = subprocess.run(
            argv_list,
            text=True,
            stdout=pipe,
            stderr=pipe,
        )
    except FileNotFoundError:
        logger.debug("Executable not found: %s", argv_list[0])
        result = CmdResult(
            argv=argv_list,
            returncode=NOT_FOUND_RETURNCODE,
            stdout="",
            stderr=f"{argv_list[0]}: command not found",
        )
    else:
        result = CmdResult(
            argv=argv_list,
            returncode=p.returncode,
            stdout=p.stdout or "",
            stderr=p.stderr or "",
        )

    if result.stdout:
        logger.debug("STDOUT %s", result.stdout.strip())
    if result.stderr:
        logger.debug("STDERR %s", result.stderr.strip())

    if check and not result.ok:
        raise CommandError(result)

    return result
