import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from theme_tools.core.layout import LintTargets, resolve_lint_targets
from theme_tools.core.package_manager import PackageManagerChoice, build_lint_command, detect_package_manager
from theme_tools.core.ports.runner import CommandRunner
from theme_tools.core.prerequisites import format_prerequisite_diagnostic, inspect_prerequisites
from theme_tools.errors import MissingPrerequisitesError

logger = logging.getLogger(__name__)

FIX_FLAG = "--fix"


@dataclass(frozen=True)
class LintRun:
    targets: LintTargets
    package_manager: PackageManagerChoice
    command: list[str]
    exit_code: int
    fixed: bool

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


def _exit_status(returncode: int) -> int:
    # A child killed by signal N reports -N; shells report that as 128 + N.
    return 128 - returncode if returncode < 0 else returncode


def success_message(fixed: bool) -> str:
    if fixed:
        return "✓ CSS/SCSS linting complete! All issues fixed automatically."
    return "✓ CSS/SCSS linting passed! No issues found."


def run_lint(project_dir: Path, extra_args: Sequence[str], runner: CommandRunner) -> LintRun:
    """Lint the theme in ``project_dir`` with Stylelint.

    Raises ``LayoutNotDetectedError`` or ``MissingPrerequisitesError`` before the
    linter is started; Stylelint's own exit code is returned on the result.
    """
    package_manager = detect_package_manager(runner, project_dir)
    targets = resolve_lint_targets(project_dir)
    logger.info("Detected %s layout, linting %s", targets.layout.value, ", ".join(targets.patterns))

    if targets.needs_scss_plugin:
        state = inspect_prerequisites(project_dir)
        if not state.satisfied:
            raise MissingPrerequisitesError(state, format_prerequisite_diagnostic(state, package_manager))

    command = build_lint_command(package_manager, targets.patterns, extra_args)
    result = runner.run(command, cwd=project_dir)
    return LintRun(
        targets=targets,
        package_manager=package_manager,
        command=command,
        exit_code=_exit_status(result.returncode),
        fixed=FIX_FLAG in extra_args,
    )
