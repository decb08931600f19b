from .base import BaseStep
from .directory import CreateDirectoryStep
from .git_identity import GitIdentityStep
from .homebrew import BrewCaskStep, BrewFormulaStep, InstallHomebrewStep
from .profile_block import ProfileBlockStep
from .runtimes import AsdfGlobalStep, AsdfInstallStep, AsdfPluginStep
from .vscode import VSCodeExtensionStep

__all__ = [
    "BaseStep",
    "InstallHomebrewStep",
    "ProfileBlockStep",
    "BrewFormulaStep",
    "BrewCaskStep",
    "GitIdentityStep",
    "VSCodeExtensionStep",
    "AsdfPluginStep",
    "AsdfInstallStep",
    "AsdfGlobalStep",
    "CreateDirectoryStep",
]
