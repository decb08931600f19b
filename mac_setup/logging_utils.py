from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from .lib.env import PATHS

DEFAULT_LOG_PATH = PATHS.log_default


def configure_logging(
    log_path: str = DEFAULT_LOG_PATH,
    level: int = logging.INFO,
    also_console: bool = True,
) -> str:
    """Configure logging.

    Every notice and every external command goes to the log file with a
    timestamp. The console only shows the bare notice text, so the operator
    sees the same one-line progress messages the setup has always printed.

    If the requested log file cannot be opened (no ~/Library/Logs on a
    freshly imaged account, a read-only home) the log lands in
    ./mac-setup.log instead, and the returned path says so.

    Returns the actual file path being used.
    """

    logger = logging.getLogger()
    logger.setLevel(min(level, logging.DEBUG))

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(logger, "_mac_setup_configured", False):
        return getattr(logger, "_mac_setup_log_path", log_path)

    requested = os.path.expanduser(log_path)
    chosen_path = requested
    handlers: list[logging.Handler] = []

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    file_handler: Optional[logging.Handler] = None
    try:
        Path(os.path.dirname(requested) or ".").mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(requested)
    except OSError:
        # Fall back to a writable location.
        chosen_path = str(Path.cwd() / "mac-setup.log")
        file_handler = logging.FileHandler(chosen_path)
    file_handler.setFormatter(fmt)
    file_handler.setLevel(logging.DEBUG)
    handlers.append(file_handler)

    if also_console:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(logging.Formatter("%(message)s"))
        console.setLevel(level)
        # Command echo and output stay in the file.
        console.addFilter(lambda record: not record.name.startswith("mac_setup.lib.command"))
        handlers.append(console)

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, "_mac_setup_configured", True)
    setattr(logger, "_mac_setup_log_path", chosen_path)

    logging.getLogger(__name__).debug(
        "Logging initialized (requested=%s, actual=%s)", requested, chosen_path
    )
    return chosen_path
