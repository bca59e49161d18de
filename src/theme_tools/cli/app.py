from typing import Annotated

import typer

from theme_tools.cli.lint import LINT_CONTEXT_SETTINGS, lint
from theme_tools.cli.upgrade import upgrade
from theme_tools.log import configure_logging

app = typer.Typer(
    name="theme-tools",
    help="Theme tools: lint and upgrade CSS/SCSS theme projects.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("lint", context_settings=LINT_CONTEXT_SETTINGS)(lint)
app.command("upgrade")(upgrade)


@app.callback()
def _configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr.")] = False,
) -> None:
    configure_logging("DEBUG" if verbose else None)


def main() -> None:
    app()
