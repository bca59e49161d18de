"""SCSS linting prerequisite checks.

Every read in this module is best-effort: a manifest or Stylelint config that
cannot be read or parsed counts as "not installed" / "not configured" so the
user gets the consolidated diagnostic instead of a traceback.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from theme_tools.core.conventions import (
    PACKAGE_JSON,
    SCSS_PLUGIN,
    SCSS_PLUGIN_SPEC,
    SCSS_SYNTAX_PACKAGE,
    SCSS_SYNTAX_SPEC,
    STYLELINT_CONFIG,
)
from theme_tools.core.package_manager import PackageManagerChoice
from theme_tools.models import SCSS_SYNTAX, LintConfig

logger = logging.getLogger(__name__)

EXAMPLE_STYLELINT_CONFIG: dict[str, Any] = {
    "extends": ["stylelint-config-recommended"],
    "plugins": [SCSS_PLUGIN, "stylelint-no-unsupported-browser-features"],
    "rules": {
        "at-rule-no-unknown": [
            True,
            {
                "ignoreAtRules": [
                    "use",
                    "import",
                    "mixin",
                    "include",
                    "function",
                    "if",
                    "else",
                    "each",
                    "for",
                    "while",
                    "extend",
                ]
            },
        ]
    },
    "overrides": [{"files": ["**/*.scss"], "customSyntax": SCSS_SYNTAX}],
}


@dataclass(frozen=True)
class LintPrerequisiteState:
    plugin_installed: bool
    syntax_adapter_installed: bool
    plugin_configured: bool
    custom_syntax_configured: bool

    @property
    def satisfied(self) -> bool:
        return (
            self.plugin_installed
            and self.syntax_adapter_installed
            and self.plugin_configured
            and self.custom_syntax_configured
        )

    @property
    def configuration_complete(self) -> bool:
        return self.plugin_configured and self.custom_syntax_configured


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def _declared_dependencies(project_dir: Path) -> set[str]:
    try:
        manifest = _read_json(project_dir / PACKAGE_JSON)
    except (OSError, ValueError) as exc:
        logger.debug("Could not read %s: %s", PACKAGE_JSON, exc)
        return set()
    if not isinstance(manifest, dict):
        return set()
    names: set[str] = set()
    for key in ("dependencies", "devDependencies"):
        section = manifest.get(key)
        if isinstance(section, dict):
            names.update(section)
    return names


def load_lint_config(project_dir: Path) -> LintConfig | None:
    config_path = project_dir / STYLELINT_CONFIG
    if not config_path.exists():
        return None
    try:
        return LintConfig.model_validate(_read_json(config_path))
    except (OSError, ValueError, ValidationError) as exc:
        logger.debug("Could not read %s: %s", STYLELINT_CONFIG, exc)
        return None


def inspect_prerequisites(project_dir: Path) -> LintPrerequisiteState:
    dependencies = _declared_dependencies(project_dir)
    config = load_lint_config(project_dir)
    return LintPrerequisiteState(
        plugin_installed=SCSS_PLUGIN in dependencies,
        syntax_adapter_installed=SCSS_SYNTAX_PACKAGE in dependencies,
        plugin_configured=config is not None and config.has_plugin(SCSS_PLUGIN),
        custom_syntax_configured=config is not None and config.has_scss_syntax(),
    )


def format_prerequisite_diagnostic(state: LintPrerequisiteState, package_manager: PackageManagerChoice) -> str:
    lines = ["", "⚠ SCSS files detected, but SCSS linting is not properly set up.", ""]

    if not state.plugin_installed:
        lines.append(f"Missing: {SCSS_PLUGIN} package")
        lines.append(f"  Install it: {package_manager.install_dev_command(SCSS_PLUGIN_SPEC)}")
        lines.append("")

    if not state.syntax_adapter_installed:
        lines.append(f"Missing: {SCSS_SYNTAX_PACKAGE} package (required for SCSS syntax parsing)")
        lines.append(f"  Install it: {package_manager.install_dev_command(SCSS_SYNTAX_SPEC)}")
        lines.append("")

    if not state.configuration_complete:
        lines.append(f"Missing: SCSS configuration in {STYLELINT_CONFIG}")
        if not state.plugin_configured:
            lines.append(f'  Add "{SCSS_PLUGIN}" to the "plugins" array')
        if not state.custom_syntax_configured:
            lines.append(f'  Add "customSyntax": "{SCSS_SYNTAX}" in an "overrides" section')
        lines.append("")

    lines.append(f"Example {STYLELINT_CONFIG} configuration:")
    lines.append(json.dumps(EXAMPLE_STYLELINT_CONFIG, indent=2))
    lines.append("")
    lines.append(f"After installing and configuring, run: {package_manager.run_script_command('lint')}")
    return "\n".join(lines)
