from enum import Enum
from pathlib import Path

from theme_tools.core.conventions import LINT_WRAPPER_PATH

TEMPLATE_REVISION = 2
_TEMPLATE_NAME = "lint-wrapper.mjs"


class WrapperStatus(str, Enum):
    MISSING = "missing"
    CURRENT = "current"
    UPGRADED = "upgraded"


def reference_wrapper() -> str:
    template_path = Path(__file__).parent.parent / "templates" / _TEMPLATE_NAME
    if not template_path.exists():
        raise FileNotFoundError(f"Template file not found: {template_path}")
    return template_path.read_text(encoding="utf-8")


def wrapper_path(project_dir: Path) -> Path:
    return project_dir.joinpath(*LINT_WRAPPER_PATH)


def is_current(text: str) -> bool:
    """True when ``text`` is a Stylelint wrapper with pnpm/npx detection."""
    mentions_stylelint = "Stylelint" in text or "stylelint" in text
    detects_package_manager = "usePnpm" in text and "execSync" in text
    return mentions_stylelint and detects_package_manager


def upgrade_wrapper(project_dir: Path, dry_run: bool = False) -> WrapperStatus:
    """Replace a stale lint wrapper with the reference template.

    The whole file is overwritten; local edits to a stale wrapper are lost.
    """
    path = wrapper_path(project_dir)
    if not path.exists():
        return WrapperStatus.MISSING
    # Decode leniently; only the marker tokens decide whether it is current.
    if is_current(path.read_text(encoding="utf-8", errors="replace")):
        return WrapperStatus.CURRENT
    if not dry_run:
        path.write_text(reference_wrapper(), encoding="utf-8")
    return WrapperStatus.UPGRADED
