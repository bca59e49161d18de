from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from theme_tools.core.conventions import FLAT_STYLESHEET, SCSS_GLOB, SCSS_SOURCE_DIR
from theme_tools.errors import LayoutNotDetectedError


class ThemeLayout(str, Enum):
    FLAT_CSS = "flat-css"
    PREPROCESSOR_SOURCE = "preprocessor-source"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class LintTargets:
    layout: ThemeLayout
    patterns: tuple[str, ...]

    @property
    def needs_scss_plugin(self) -> bool:
        return self.layout is ThemeLayout.PREPROCESSOR_SOURCE


def detect_layout(project_dir: Path) -> ThemeLayout:
    if project_dir.joinpath(*SCSS_SOURCE_DIR).is_dir():
        return ThemeLayout.PREPROCESSOR_SOURCE
    if (project_dir / FLAT_STYLESHEET).exists():
        return ThemeLayout.FLAT_CSS
    return ThemeLayout.UNKNOWN


def resolve_lint_targets(project_dir: Path) -> LintTargets:
    """Return the file patterns to lint, SCSS sources before the compiled stylesheet."""
    layout = detect_layout(project_dir)
    if layout is ThemeLayout.PREPROCESSOR_SOURCE:
        patterns = [SCSS_GLOB]
        if (project_dir / FLAT_STYLESHEET).exists():
            patterns.append(FLAT_STYLESHEET)
        return LintTargets(layout, tuple(patterns))
    if layout is ThemeLayout.FLAT_CSS:
        return LintTargets(layout, (FLAT_STYLESHEET,))
    scss_dir = "/".join(SCSS_SOURCE_DIR)
    raise LayoutNotDetectedError(f"No {FLAT_STYLESHEET} or {scss_dir}/ directory found in {project_dir}")
