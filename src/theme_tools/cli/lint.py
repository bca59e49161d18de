"""Stylelint wrapper command."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from theme_tools.core.conventions import FLAT_STYLESHEET
from theme_tools.core.lint import run_lint, success_message
from theme_tools.core.ports.runner import CommandRunner
from theme_tools.errors import CommandNotFoundError, LayoutNotDetectedError, MissingPrerequisitesError
from theme_tools.log import configure_logging

LINT_CONTEXT_SETTINGS = {
    "allow_extra_args": True,
    "ignore_unknown_options": True,
    "help_option_names": ["-h", "--help"],
}

console = Console()
err_console = Console(stderr=True)


def _get_runner() -> CommandRunner:
    from theme_tools.runner.subprocess_runner import SubprocessRunner

    return SubprocessRunner()


def lint(
    ctx: typer.Context,
    project_dir: Annotated[
        Path, typer.Option("--project-dir", help="Theme directory to lint.", exists=True, file_okay=False)
    ] = Path("."),
) -> None:
    """Lint theme.css or src/scss/ with Stylelint. Extra flags such as --fix are forwarded."""
    extra_args = list(ctx.args)
    try:
        run = run_lint(project_dir.resolve(), extra_args, _get_runner())
    except LayoutNotDetectedError:
        err_console.print(f"[red]Error:[/red] No {FLAT_STYLESHEET} or src/scss/ directory found.")
        err_console.print("Expected either:")
        err_console.print(f"  - Simple CSS theme: {FLAT_STYLESHEET} in root")
        err_console.print("  - Complex theme: src/scss/ directory with SCSS files")
        raise typer.Exit(1) from None
    except MissingPrerequisitesError as exc:
        err_console.print(exc.diagnostic, markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(1) from None
    except CommandNotFoundError as exc:
        err_console.print(f"[red]Error:[/red] could not start '{exc.command}'.")
        err_console.print("Install Node.js (for npx) or pnpm: https://pnpm.io/installation")
        raise typer.Exit(127) from None

    if not run.succeeded:
        # Stylelint has already printed its diagnostics.
        raise typer.Exit(run.exit_code)
    console.print(f"\n[green]{success_message(run.fixed)}[/green]\n")


lint_app = typer.Typer(help="Lint a theme with Stylelint.", add_completion=False)
lint_app.command(context_settings=LINT_CONTEXT_SETTINGS)(lint)


def main() -> None:
    configure_logging()
    lint_app()
