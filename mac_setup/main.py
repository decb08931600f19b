from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import yaml

from .config import SetupConfig, load_setup_config
from .functions import terminal_functions_step
from .identity import ConfiguredIdentitySource, PromptIdentitySource
from .logging_utils import DEFAULT_LOG_PATH, configure_logging
from .pipeline import PipelineResult, Step, StepFailedError, run_pipeline
from .profile import ProfileAppender, ProfileBlock
from .steps import (
    AsdfGlobalStep,
    AsdfInstallStep,
    AsdfPluginStep,
    BrewCaskStep,
    BrewFormulaStep,
    CreateDirectoryStep,
    GitIdentityStep,
    InstallHomebrewStep,
    ProfileBlockStep,
    VSCodeExtensionStep,
)
from .system import System

logger = logging.getLogger(__name__)


BREW_PATH_MARKER = "# --- Homebrew PATH ---"
ASDF_MARKER = "# --- asdf ---"
ASDF_SHIMS_LINE = 'export PATH="${ASDF_DATA_DIR:-$HOME/.asdf}/shims:$PATH"'


def build_steps(cfg: SetupConfig, system: System, *, interactive: bool = True) -> List[Step]:
    appender = ProfileAppender(system.expand(cfg.profile_path), system, strict_reload=cfg.strict_reload)
    fallback = PromptIdentitySource(system) if interactive else None

    steps: List[Step] = [
        InstallHomebrewStep(),
        ProfileBlockStep(
            "profile:brew-path",
            "Update PATH",
            ProfileBlock(marker=BREW_PATH_MARKER, body=cfg.brew_path_line),
            appender,
        ),
    ]
    steps += [BrewFormulaStep(name) for name in cfg.formulae]
    steps.append(GitIdentityStep(ConfiguredIdentitySource(cfg.git_name, cfg.git_email, fallback)))
    steps += [BrewCaskStep(app) for app in cfg.casks]
    steps += [VSCodeExtensionStep(ext) for ext in cfg.vscode_extensions]

    runtimes = cfg.runtimes
    if runtimes:
        if "asdf" not in cfg.formulae:
            steps.append(BrewFormulaStep("asdf"))
        steps.append(
            ProfileBlockStep(
                "profile:asdf",
                "Add asdf shims to PATH",
                ProfileBlock(marker=ASDF_MARKER, body=ASDF_SHIMS_LINE),
                appender,
            )
        )
        for plugin, version in runtimes.items():
            steps += [
                AsdfPluginStep(plugin),
                AsdfInstallStep(plugin, version),
                AsdfGlobalStep(plugin, version),
            ]

    steps.append(CreateDirectoryStep(cfg.projects_dir))
    steps.append(terminal_functions_step(appender))
    return steps


def _load_config(config_path: Optional[str], profile_path: Optional[str]) -> SetupConfig:
    cfg = load_setup_config(config_path)
    if profile_path:
        cfg = SetupConfig(raw={**cfg.raw, "profile": profile_path}, env=cfg.env)
    return cfg


def run(
    *,
    config_path: Optional[str] = None,
    log_path: str = DEFAULT_LOG_PATH,
    profile_path: Optional[str] = None,
    dry_run: bool = False,
    interactive: bool = True,
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
    system: Optional[System] = None,
) -> PipelineResult:
    """Run the whole workstation setup."""

    configure_logging(log_path=log_path)

    cfg = _load_config(config_path, profile_path)

    system = system or System(dry_run=dry_run)
    steps = build_steps(cfg, system, interactive=interactive)

    logger.info("🚀 Starting your Mac setup...")
    result = run_pipeline(steps=steps, system=system, start_at=start_at, stop_after=stop_after)
    logger.debug("Ran %s; skipped %s", result.ran_steps, result.skipped_steps)
    logger.info("🎉 Setup completed successfully. Enjoy your Mac!")
    return result


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="mac-setup")
    p.add_argument("--config", default=None, help="Path to setup config (yaml)")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to setup log")
    p.add_argument("--profile", default=None, help="Shell profile to update (default ~/.zshrc)")
    p.add_argument("--dry-run", action="store_true", help="Check everything, change nothing")
    p.add_argument("--non-interactive", action="store_true", help="Never prompt; fail instead")
    p.add_argument("--start-at", default=None, help="Start at step_id (e.g. cask:firefox)")
    p.add_argument("--stop-after", default=None, help="Stop after step_id")
    p.add_argument("--list-steps", action="store_true", help="Print the step ids and exit")

    args = p.parse_args(argv)

    try:
        if args.list_steps:
            cfg = _load_config(args.config, args.profile)
            for step in build_steps(cfg, System(dry_run=True), interactive=False):
                print(f"{step.step_id:45} {step.name}")
            return 0

        run(
            config_path=args.config,
            log_path=args.log,
            profile_path=args.profile,
            dry_run=bool(args.dry_run),
            interactive=not args.non_interactive,
            start_at=args.start_at,
            stop_after=args.stop_after,
        )
    except StepFailedError as e:
        logger.error("❌ Error: %s", e)
        return 1
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        logger.error("❌ Error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
