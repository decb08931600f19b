from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from .lib.env import PATHS

logger = logging.getLogger(__name__)


DEFAULT_FORMULAE = ["git", "bitwarden", "docker"]

DEFAULT_CASKS = ["visual-studio-code", "firefox", "google-chrome"]

DEFAULT_VSCODE_EXTENSIONS = [
    # Python
    "ms-python.python",
    "ms-python.vscode-pylance",
    "ms-python.black-formatter",
    "ms-python.isort",
    "batisteo.vscode-django",
    # JavaScript/React
    "dbaeumer.vscode-eslint",
    "esbenp.prettier-vscode",
    "dsznajder.es7-react-js-snippets",
    "xabikos.javascriptsnippets",
    # Docker
    "ms-azuretools.vscode-docker",
    "ms-vscode-remote.remote-containers",
    # Git
    "eamodio.gitlens",
    "mhutchie.git-graph",
    "github.vscode-pull-request-github",
    # General
    "ritwickdey.liveserver",
    "gruntfuggly.todo-tree",
    "streetsidesoftware.code-spell-checker",
]

DEFAULT_BREW_PATH_LINE = 'export PATH="/opt/homebrew/bin:$PATH"'


def _str_list(raw: Mapping[str, Any], key: str, default: List[str]) -> List[str]:
    if key not in raw or raw[key] is None:
        return list(default)
    value = raw[key]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"config.{key} must be a list of strings")
    return [v.strip() for v in value if v.strip()]


@dataclass(frozen=True)
class SetupConfig:
    raw: Dict[str, Any] = field(default_factory=dict)
    env: Mapping[str, str] = field(default_factory=lambda: dict(os.environ))

    @property
    def profile_path(self) -> str:
        return str(self.raw.get("profile") or PATHS.profile_default)

    @property
    def projects_dir(self) -> str:
        return str(self.raw.get("projects_dir") or PATHS.projects_default)

    @property
    def brew_path_line(self) -> str:
        return str(self.raw.get("brew_path_line") or DEFAULT_BREW_PATH_LINE)

    @property
    def formulae(self) -> List[str]:
        return _str_list(self.raw, "formulae", DEFAULT_FORMULAE)

    @property
    def casks(self) -> List[str]:
        return _str_list(self.raw, "casks", DEFAULT_CASKS)

    @property
    def vscode_extensions(self) -> List[str]:
        return _str_list(self.raw, "vscode_extensions", DEFAULT_VSCODE_EXTENSIONS)

    @property
    def runtimes(self) -> Dict[str, str]:
        value = self.raw.get("runtimes") or {}
        if not isinstance(value, dict):
            raise ValueError("config.runtimes must be a mapping of plugin -> version")
        out: Dict[str, str] = {}
        for plugin, version in value.items():
            # Unquoted 3.10 is the float 3.1 by the time we see it.
            if not isinstance(version, str) or not version.strip():
                raise ValueError(
                    f"config.runtimes.{plugin} must be a quoted version string "
                    f"(quote it in the YAML, e.g. {plugin}: \"3.10\")"
                )
            out[str(plugin)] = version.strip()
        return out

    @property
    def git_name(self) -> Optional[str]:
        return self._git("name")

    @property
    def git_email(self) -> Optional[str]:
        return self._git("email")

    @property
    def strict_reload(self) -> bool:
        return bool(self.raw.get("strict_reload", False))

    def _git(self, key: str) -> Optional[str]:
        git = self.raw.get("git") or {}
        if not isinstance(git, dict):
            raise ValueError("config.git must be a mapping")
        value = git.get(key) or self.env.get(f"MAC_SETUP_GIT_{key.upper()}") or ""
        return str(value).strip() or None


def load_setup_config(path: Optional[str] = None, *, env: Optional[Mapping[str, str]] = None) -> SetupConfig:
    """Load the YAML config.

    With no explicit path the default location is used when it exists and
    built-in defaults otherwise. An explicit path must exist.
    """

    env = dict(os.environ) if env is None else dict(env)

    if path is None:
        p = Path(os.path.expanduser(PATHS.config_default))
        if not p.exists():
            logger.debug("No config at %s; using defaults", p)
            return SetupConfig(raw={}, env=env)
    else:
        p = Path(os.path.expanduser(path))
        if not p.exists():
            raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("config must be YAML")

    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{p} must contain a mapping/object")

    logger.debug("Loaded config from %s", p)
    return SetupConfig(raw=raw, env=env)
