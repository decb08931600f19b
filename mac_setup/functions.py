"""Terminal helper functions for the shell profile.

Adds a block of small zsh helpers (take, up, cdb, findd, findf, cls) plus
``list_terminal_functions`` to the profile. Runs on its own as
``mac-setup-functions`` and as the last step of ``mac-setup``.
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional

from .lib.env import PATHS
from .logging_utils import DEFAULT_LOG_PATH, configure_logging
from .pipeline import PipelineResult, StepFailedError, run_pipeline
from .profile import ProfileAppender, ProfileBlock
from .steps import ProfileBlockStep
from .system import System

logger = logging.getLogger(__name__)


TERMINAL_FUNCTIONS_MARKER = "# --- Useful Terminal Functions ---"

# (name, description, usage)
FUNCTION_TABLE = [
    ("take", "Create a directory and move into it", "take my_directory"),
    ("up", "Go up multiple directory levels", "up 2"),
    ("cdb", "Return to the previous directory", "cdb"),
    ("findd", "Find directories by name", "findd project"),
    ("findf", "Find files by name", "findf main.py"),
    ("cls", "Clear the terminal screen", "cls"),
]

_FUNCTIONS = r'''
function take() {
    mkdir -p "$1" && cd "$1"
}

function up() {
    local count=${1:-1}
    local path=""
    for ((i=0; i<count; i++)); do
        path+="../"
    done
    cd "$path" || echo "❌ Failed to go up $count directories."
}

function cdb() {
    cd - || echo "❌ Failed to return to previous directory."
}

function findd() {
    find . -type d -name "*$1*"
}

function findf() {
    find . -type f -name "*$1*"
}

function cls() {
    clear
}
'''


def format_function_table(*, ansi: bool = False) -> list[str]:
    width = max(len(name) for name, _, _ in FUNCTION_TABLE) + 1
    bold, reset = (r"\033[1m", r"\033[0m") if ansi else ("", "")
    lines = []
    for i, (name, desc, usage) in enumerate(FUNCTION_TABLE, start=1):
        lines.append(f"{bold}{i}. {name}{reset}{' ' * (width - len(name))}- {desc}: {usage}")
    return lines


def terminal_functions_block() -> ProfileBlock:
    echo_lines = "\n".join(f'    echo "{line}"' for line in format_function_table(ansi=True))
    lister = (
        "function list_terminal_functions() {\n"
        '    echo -e "\\n📜 \\033[1mList of Configured Terminal Functions:\\033[0m"\n'
        f"{echo_lines}\n"
        "}\n"
    )
    return ProfileBlock(marker=TERMINAL_FUNCTIONS_MARKER, body=_FUNCTIONS.strip("\n") + "\n\n" + lister)


def terminal_functions_step(appender: ProfileAppender) -> ProfileBlockStep:
    return ProfileBlockStep(
        step_id="profile:terminal-functions",
        name="Add terminal functions",
        block=terminal_functions_block(),
        appender=appender,
    )


def run(
    *,
    profile_path: str = PATHS.profile_default,
    log_path: str = DEFAULT_LOG_PATH,
    dry_run: bool = False,
    strict_reload: bool = False,
    system: Optional[System] = None,
) -> PipelineResult:
    configure_logging(log_path=log_path)

    system = system or System(dry_run=dry_run)
    appender = ProfileAppender(system.expand(profile_path), system, strict_reload=strict_reload)

    result = run_pipeline(steps=[terminal_functions_step(appender)], system=system)
    logger.info("🎉 Terminal functions setup completed successfully!")
    return result


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="mac-setup-functions")
    p.add_argument("--profile", default=PATHS.profile_default, help="Shell profile to update")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to setup log")
    p.add_argument("--dry-run", action="store_true")
    p.add_argument("--strict-reload", action="store_true", help="Fail if the profile cannot be sourced")
    p.add_argument("--list", action="store_true", help="Print the helper functions and exit")

    args = p.parse_args(argv)

    if args.list:
        print("📜 List of Configured Terminal Functions:")
        for line in format_function_table():
            print(line)
        return 0

    try:
        run(
            profile_path=args.profile,
            log_path=args.log,
            dry_run=bool(args.dry_run),
            strict_reload=bool(args.strict_reload),
        )
    except StepFailedError as e:
        logger.error("❌ Error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
