from __future__ import annotations

import pytest

from mac_setup.config import DEFAULT_VSCODE_EXTENSIONS, SetupConfig, load_setup_config


def test_defaults_when_no_config_file(home) -> None:
    cfg = load_setup_config(env={})

    assert cfg.profile_path == "~/.zshrc"
    assert cfg.projects_dir == "~/Projects"
    assert cfg.formulae == ["git", "bitwarden", "docker"]
    assert cfg.casks == ["visual-studio-code", "firefox", "google-chrome"]
    assert cfg.vscode_extensions == DEFAULT_VSCODE_EXTENSIONS
    assert len(cfg.vscode_extensions) == 17
    assert cfg.runtimes == {}
    assert cfg.git_name is None
    assert cfg.strict_reload is False


def test_default_location_is_read(home) -> None:
    p = home / ".config" / "mac-setup" / "config.yaml"
    p.parent.mkdir(parents=True)
    p.write_text("casks: [iterm2]\n")

    assert load_setup_config(env={}).casks == ["iterm2"]


def test_yaml_values(tmp_path) -> None:
    p = tmp_path / "setup.yaml"
    p.write_text(
        "profile: ~/.bashrc\n"
        "formulae: [git, jq]\n"
        "runtimes:\n"
        "  python: \"3.12\"\n"
        "  nodejs: latest\n"
        "git:\n"
        "  name: Jane Doe\n"
        "strict_reload: true\n"
    )

    cfg = load_setup_config(str(p), env={"MAC_SETUP_GIT_EMAIL": "jane@example.com"})

    assert cfg.profile_path == "~/.bashrc"
    assert cfg.formulae == ["git", "jq"]
    assert cfg.runtimes == {"python": "3.12", "nodejs": "latest"}
    assert cfg.git_name == "Jane Doe"
    assert cfg.git_email == "jane@example.com"
    assert cfg.strict_reload is True


def test_explicit_missing_path_is_an_error(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_setup_config(str(tmp_path / "nope.yaml"))


def test_config_must_be_yaml(tmp_path) -> None:
    p = tmp_path / "setup.json"
    p.write_text("{}")
    with pytest.raises(ValueError, match="YAML"):
        load_setup_config(str(p))


def test_config_must_be_a_mapping(tmp_path) -> None:
    p = tmp_path / "setup.yaml"
    p.write_text("- git\n- docker\n")
    with pytest.raises(ValueError, match="mapping"):
        load_setup_config(str(p))


def test_bad_list_type() -> None:
    with pytest.raises(ValueError, match="casks"):
        SetupConfig(raw={"casks": "firefox"}, env={}).casks


def test_unquoted_runtime_version_is_rejected(tmp_path) -> None:
    p = tmp_path / "setup.yaml"
    p.write_text("runtimes:\n  python: 3.10\n")

    with pytest.raises(ValueError, match="quote"):
        load_setup_config(str(p), env={}).runtimes
