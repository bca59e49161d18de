"""Shared fixtures and helpers for tests."""

import json
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest

from theme_tools.core.ports.runner import CommandResult
from theme_tools.errors import CommandNotFoundError

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# FakeRunner: records commands instead of spawning them
# ---------------------------------------------------------------------------


class FakeRunner:
    """CommandRunner double.

    ``pnpm_available`` controls the ``pnpm --version`` probe and ``lint_exit``
    the exit code returned for every other command.
    """

    def __init__(self, pnpm_available: bool = True, lint_exit: int = 0, missing: Sequence[str] = ()) -> None:
        self.pnpm_available = pnpm_available
        self.lint_exit = lint_exit
        self.missing = set(missing)
        self.calls: list[tuple[list[str], Path, bool]] = []

    def run(self, args: Sequence[str], cwd: Path, capture: bool = False) -> CommandResult:
        self.calls.append((list(args), cwd, capture))
        if args[0] in self.missing:
            raise CommandNotFoundError(args[0])
        if list(args) == ["pnpm", "--version"]:
            if self.pnpm_available:
                return CommandResult(returncode=0, stdout="10.20.0\n", stderr="")
            return CommandResult(returncode=1, stdout="", stderr="not installed")
        return CommandResult(returncode=self.lint_exit)

    @property
    def lint_calls(self) -> list[list[str]]:
        return [args for args, _, _ in self.calls if args != ["pnpm", "--version"]]


# ---------------------------------------------------------------------------
# Theme project fixtures
# ---------------------------------------------------------------------------

SCSS_READY_MANIFEST: dict[str, Any] = {
    "name": "theme",
    "devDependencies": {"stylelint": "^16.0.0", "stylelint-scss": "^5.0.0", "postcss-scss": "^4.0.0"},
}

SCSS_READY_CONFIG: dict[str, Any] = {
    "plugins": ["stylelint-scss"],
    "overrides": [{"files": ["**/*.scss"], "customSyntax": "postcss-scss"}],
}


def write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent="\t") + "\n", encoding="utf-8")


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def make_theme(tmp_path: Path) -> Callable[..., Path]:
    """Build a theme directory with the requested layout."""

    def _make(
        flat: bool = False,
        scss: bool = False,
        manifest: dict[str, Any] | None = None,
        config: dict[str, Any] | None = None,
    ) -> Path:
        if flat:
            (tmp_path / "theme.css").write_text("body { color: red; }\n", encoding="utf-8")
        if scss:
            scss_dir = tmp_path / "src" / "scss"
            scss_dir.mkdir(parents=True)
            (scss_dir / "main.scss").write_text("$c: red;\nbody { color: $c; }\n", encoding="utf-8")
        if manifest is not None:
            write_json(tmp_path / "package.json", manifest)
        if config is not None:
            write_json(tmp_path / ".stylelintrc.json", config)
        return tmp_path

    return _make


@pytest.fixture
def scss_ready_theme(make_theme: Callable[..., Path]) -> Path:
    return make_theme(scss=True, manifest=SCSS_READY_MANIFEST, config=SCSS_READY_CONFIG)
