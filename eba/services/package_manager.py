"""JavaScript package manager selection and command shapes.

The manager is chosen from the lock file in the package root. Each manager
knows how to install, how to run a package.json script, and how to execute
a locally installed binary.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

__all__ = ["PackageManager", "DEFAULT_FALLBACK", "detect_package_manager"]


class PackageManager(Enum):
    """Supported package managers, in lock-file priority order."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"

    def __str__(self) -> str:
        return self.value

    @property
    def lock_file(self) -> str:
        match self:
            case PackageManager.NPM:
                return "package-lock.json"
            case PackageManager.YARN:
                return "yarn.lock"
            case PackageManager.PNPM:
                return "pnpm-lock.yaml"

    @property
    def supports_if_present(self) -> bool:
        """Whether `run` accepts --if-present to skip undefined scripts.

        Yarn has no such flag (yarnpkg/yarn#6894); callers must check the
        manifest themselves.
        """
        match self:
            case PackageManager.NPM | PackageManager.PNPM:
                return True
            case PackageManager.YARN:
                return False

    @property
    def exec_prefix(self) -> list[str]:
        """Prefix for running a binary from node_modules without installing it."""
        match self:
            case PackageManager.NPM:
                return ["npx", "--no-install"]
            case PackageManager.YARN:
                return ["yarn", "run"]
            case PackageManager.PNPM:
                return ["pnpx", "--no-install"]

    def install_command(self) -> list[str]:
        return [self.value, "install"]

    def run_script_command(self, script: str) -> list[str]:
        if self.supports_if_present:
            return [self.value, "run", "--if-present", script]
        return [self.value, "run", script]


DEFAULT_FALLBACK = PackageManager.YARN


def detect_package_manager(
    package_root: Path,
    fallback: PackageManager | None = DEFAULT_FALLBACK,
) -> PackageManager | None:
    """Pick the manager whose lock file exists in package_root.

    When several lock files exist the first in enum order wins
    (npm, then yarn, then pnpm). Without any lock file, fallback is
    returned; None means no manager could be determined.
    """
    for manager in PackageManager:
        if (package_root / manager.lock_file).exists():
            return manager
    return fallback
