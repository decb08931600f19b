from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Paths:
    profile_default: str = "~/.zshrc"
    projects_default: str = "~/Projects"
    config_default: str = "~/.config/mac-setup/config.yaml"
    log_default: str = "~/Library/Logs/mac-setup.log"
    tool_versions: str = "~/.tool-versions"
    brew_prefixes: tuple[str, ...] = ("/opt/homebrew/bin", "/usr/local/bin")


PATHS = Paths()

HOMEBREW_INSTALL_URL = "https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh"
