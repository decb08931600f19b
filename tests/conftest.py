"""Shared pytest fixtures."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional, Sequence

import pytest

from mac_setup.lib.command import CmdResult, CommandError, NOT_FOUND_RETURNCODE
from mac_setup.system import System

BREW = "/opt/homebrew/bin/brew"


def _result(argv: Sequence[str], returncode: int = 0, stdout: str = "", stderr: str = "") -> CmdResult:
    return CmdResult(argv=list(argv), returncode=returncode, stdout=stdout, stderr=stderr)


class FakeMachine(System):
    """A pretend Mac: answers brew/git/code/asdf queries from in-memory state.

    Mutating commands are recorded in ``commands`` and update the state, so a
    second run sees what the first one installed. Filesystem writes go to the
    real ``home`` (a tmp_path).
    """

    def __init__(self, home: Path, *, answers: Iterable[str] = (), brew: Optional[str] = BREW):
        super().__init__(home=home, dry_run=False, prompt=self._answer)
        self.brew = brew
        self.formulae: set[str] = set()
        self.casks: set[str] = set()
        self.extensions: set[str] = set()
        self.git_config: dict[str, str] = {}
        self.plugins: set[str] = set()
        self.versions: set[tuple[str, str]] = set()
        self.latest: dict[str, str] = {}
        self.source_ok = True
        self.profile_path_env = "/usr/bin:/bin"
        self.path_updates: list[str] = []
        self.failing: set[tuple[str, ...]] = set()
        self.commands: list[list[str]] = []
        self.queries: list[list[str]] = []
        self.answers = list(answers)
        self.prompts: list[str] = []

    def _answer(self, question: str) -> str:
        self.prompts.append(question)
        return self.answers.pop(0)

    def set_path(self, value: str) -> None:
        self.path_updates.append(value)

    def which(self, name: str) -> Optional[str]:
        if name == "brew":
            return self.brew
        return None

    def is_executable(self, path: str) -> bool:
        return False

    def query(self, argv: Sequence[str]) -> CmdResult:
        argv = list(argv)
        self.queries.append(argv)
        tool = os.path.basename(argv[0])

        if argv[0] == "brew":
            return _result(argv, NOT_FOUND_RETURNCODE, stderr="brew: command not found")
        if tool == "brew" and argv[1] == "list":
            if argv[2] == "--cask":
                return _result(argv, 0 if argv[3] in self.casks else 1)
            return _result(argv, 0 if argv[2] in self.formulae else 1)
        if tool == "git" and argv[1:3] == ["config", "--global"]:
            value = self.git_config.get(argv[3])
            return _result(argv, 0, stdout=value + "\n") if value else _result(argv, 1)
        if tool == "code" and argv[1] == "--list-extensions":
            return _result(argv, 0, stdout="".join(f"{e}\n" for e in sorted(self.extensions)))
        if tool == "asdf":
            if argv[1:3] == ["plugin", "list"]:
                if not self.plugins:
                    return _result(argv, 1, stderr="No plugins installed")
                return _result(argv, 0, stdout="\n".join(sorted(self.plugins)) + "\n")
            if argv[1] == "latest":
                v = self.latest.get(argv[2])
                return _result(argv, 0, stdout=v + "\n") if v else _result(argv, 1)
            if argv[1] == "list":
                return _result(argv, 0 if (argv[2], argv[3]) in self.versions else 1)
        if tool in {"zsh", "bash"} and argv[1] == "-c":
            if not self.source_ok:
                return _result(argv, 1)
            return _result(argv, 0, stdout=self.profile_path_env + "\n")
        raise AssertionError(f"Unexpected query: {argv}")

    def run(self, argv: Sequence[str], *, interactive: bool = False) -> CmdResult:
        argv = list(argv)
        self.commands.append(argv)
        if tuple(argv) in self.failing:
            raise CommandError(_result(argv, 1, stderr="boom"))

        tool = os.path.basename(argv[0])
        if argv[0] == "brew":
            raise CommandError(_result(argv, NOT_FOUND_RETURNCODE, stderr="brew: command not found"))
        if tool == "curl":
            return _result(argv, 0, stdout="#!/bin/bash\necho installing homebrew\n")
        if argv[:2] == ["/bin/bash", "-c"]:
            self.brew = BREW
        elif tool == "brew" and argv[1] == "install":
            if argv[2] == "--cask":
                self.casks.add(argv[3])
            else:
                self.formulae.add(argv[2])
        elif tool == "git" and argv[1:3] == ["config", "--global"]:
            self.git_config[argv[3]] = argv[4]
        elif tool == "code" and argv[1] == "--install-extension":
            self.extensions.add(argv[2].lower())
        elif tool == "asdf":
            if argv[1:3] == ["plugin", "add"]:
                self.plugins.add(argv[3])
            elif argv[1] == "install":
                self.versions.add((argv[2], argv[3]))
            elif argv[1:3] == ["set", "--home"]:
                plugin, version = argv[3], argv[4]
                tool_versions = self.home / ".tool-versions"
                lines = [
                    line
                    for line in (tool_versions.read_text().splitlines() if tool_versions.exists() else [])
                    if not line.startswith(plugin + " ")
                ]
                lines.append(f"{plugin} {version}")
                tool_versions.write_text("\n".join(lines) + "\n")
        else:
            raise AssertionError(f"Unexpected command: {argv}")
        return _result(argv)


@pytest.fixture
def home(tmp_path: Path, monkeypatch) -> Path:
    h = tmp_path / "home"
    h.mkdir()
    monkeypatch.setenv("HOME", str(h))
    monkeypatch.delenv("MAC_SETUP_GIT_NAME", raising=False)
    monkeypatch.delenv("MAC_SETUP_GIT_EMAIL", raising=False)
    return h


@pytest.fixture
def machine(home: Path) -> FakeMachine:
    return FakeMachine(home)


@pytest.fixture(autouse=True)
def _no_log_files(monkeypatch):
    # Entry points configure root logging with a file handler; keep tests hermetic.
    monkeypatch.setattr("mac_setup.main.configure_logging", lambda **kwargs: "")
    monkeypatch.setattr("mac_setup.functions.configure_logging", lambda **kwargs: "")
