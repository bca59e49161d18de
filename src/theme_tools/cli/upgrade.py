"""Theme upgrade command."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from theme_tools.core.conventions import NPM_LOCKFILE
from theme_tools.core.upgrade import UpgradeReport, upgrade_project
from theme_tools.core.wrapper import WrapperStatus
from theme_tools.errors import ThemeToolsError
from theme_tools.log import configure_logging

console = Console()
err_console = Console(stderr=True)


def _render_report(report: UpgradeReport) -> None:
    console.print("Step 1: Checking package manager...\n")
    if report.origin.needs_conversion:
        console.print("📦 Detected npm-based project. Converting to pnpm...\n")
    else:
        console.print("[green]✓[/green] Project is already configured for pnpm.\n")

    console.print("Step 2: Upgrading package.json...\n")
    if report.manifest_up_to_date:
        console.print("[green]✓[/green] package.json already up to date.\n")
    else:
        if report.dry_run:
            console.print("[yellow]package.json would be upgraded (dry run):[/yellow]")
        else:
            console.print("[green]✅ package.json upgraded![/green]")
        for change in report.manifest_changes:
            console.print(f"   ✓ {change}", markup=False)
        console.print()

    console.print("Step 3: Upgrading lint-wrapper.mjs...\n")
    if report.wrapper_status is WrapperStatus.CURRENT:
        console.print("[green]✓[/green] lint-wrapper.mjs already uses flexible Stylelint detection.\n")
    elif report.wrapper_status is WrapperStatus.UPGRADED:
        if report.dry_run:
            console.print("[yellow]lint-wrapper.mjs would be replaced (dry run).[/yellow]\n")
        else:
            console.print("[green]✅ lint-wrapper.mjs upgraded![/green]")
            console.print("   Now uses flexible pnpm/npx detection (no npm warnings)\n")
    else:
        console.print("ℹ lint-wrapper.mjs not found (skipping)\n")

    if report.origin.has_npm_lockfile:
        console.print(f"[yellow]⚠ Note: {NPM_LOCKFILE} detected[/yellow]")
        console.print(f"   Consider removing it: rm {NPM_LOCKFILE}\n")

    console.print("[green]✅ Upgrade complete![/green]\n")
    console.print("💡 Next steps:")
    console.print("   1. Review the changes")
    console.print("   2. Run: pnpm install (to update dependencies)")
    console.print("   3. Run: pnpm lint (to verify linting works)")
    console.print()


def upgrade(
    project_dir: Annotated[Path, typer.Argument(help="Theme directory to upgrade.", file_okay=False)] = Path("."),
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Report changes without writing files.")] = False,
) -> None:
    """Upgrade a theme's package.json and lint wrapper to the current template."""
    target = project_dir.resolve()
    console.print(f"\n🚀 Upgrading theme: {target}\n", markup=False, soft_wrap=True)
    try:
        report = upgrade_project(target, dry_run=dry_run)
    except (ThemeToolsError, OSError) as exc:
        err_console.print(f"❌ Error: {exc}", markup=False, soft_wrap=True)
        raise typer.Exit(1) from None
    _render_report(report)


upgrade_app = typer.Typer(help="Upgrade a theme to the current template.", add_completion=False)
upgrade_app.command(context_settings={"help_option_names": ["-h", "--help"]})(upgrade)


def main() -> None:
    configure_logging()
    upgrade_app()
