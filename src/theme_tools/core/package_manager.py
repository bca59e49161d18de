import logging
from collections.abc import Sequence
from enum import Enum
from pathlib import Path

from theme_tools.core.conventions import LINTER
from theme_tools.core.ports.runner import CommandRunner
from theme_tools.errors import CommandNotFoundError

logger = logging.getLogger(__name__)


class PackageManagerChoice(str, Enum):
    PNPM = "pnpm"
    NPX = "npx"

    def exec_command(self, tool: str, args: Sequence[str]) -> list[str]:
        if self is PackageManagerChoice.PNPM:
            return ["pnpm", "exec", tool, *args]
        return ["npx", tool, *args]

    def install_dev_command(self, package_spec: str) -> str:
        if self is PackageManagerChoice.PNPM:
            return f"pnpm add -D {package_spec}"
        return f"npm install -D {package_spec}"

    def run_script_command(self, script: str) -> str:
        if self is PackageManagerChoice.PNPM:
            return f"pnpm run {script}"
        return f"npm run {script}"


def detect_package_manager(runner: CommandRunner, project_dir: Path) -> PackageManagerChoice:
    """Probe ``pnpm --version``; anything but a clean exit falls back to npx."""
    try:
        result = runner.run(["pnpm", "--version"], cwd=project_dir, capture=True)
    except CommandNotFoundError:
        logger.debug("pnpm not found, falling back to npx")
        return PackageManagerChoice.NPX
    if not result.ok:
        logger.debug("pnpm --version exited with %d, falling back to npx", result.returncode)
        return PackageManagerChoice.NPX
    return PackageManagerChoice.PNPM


def build_lint_command(choice: PackageManagerChoice, targets: Sequence[str], extra_args: Sequence[str]) -> list[str]:
    return choice.exec_command(LINTER, [*targets, *extra_args])
