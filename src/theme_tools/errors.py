"""Exception hierarchy shared by the lint wrapper and the upgrader."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from theme_tools.core.prerequisites import LintPrerequisiteState


class ThemeToolsError(Exception):
    """Base class for every error the CLI reports as a user-facing failure."""


class LayoutNotDetectedError(ThemeToolsError):
    """Neither ``theme.css`` nor ``src/scss/`` exists in the project."""


class MissingPrerequisitesError(ThemeToolsError):
    def __init__(self, state: LintPrerequisiteState, diagnostic: str) -> None:
        super().__init__(diagnostic)
        self.state = state
        self.diagnostic = diagnostic


class ManifestNotFoundError(ThemeToolsError, FileNotFoundError):
    pass


class ManifestParseError(ThemeToolsError, ValueError):
    pass


class CommandNotFoundError(ThemeToolsError):
    def __init__(self, command: str) -> None:
        super().__init__(f"Command not found: {command}")
        self.command = command
