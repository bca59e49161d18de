import logging
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

from theme_tools.core.ports.runner import CommandResult
from theme_tools.errors import CommandNotFoundError

logger = logging.getLogger(__name__)


class SubprocessRunner:
    """Run external commands with :mod:`subprocess`.

    Implements the ``CommandRunner`` protocol. Executables are resolved with
    :func:`shutil.which` so ``.cmd`` shims on Windows work without a shell.
    """

    def run(self, args: Sequence[str], cwd: Path, capture: bool = False) -> CommandResult:
        if not args:
            raise ValueError("Cannot run an empty command.")
        executable = shutil.which(args[0])
        if executable is None:
            raise CommandNotFoundError(args[0])

        logger.debug("Running %s in %s", " ".join(args), cwd)
        try:
            result = subprocess.run(
                [executable, *args[1:]],
                cwd=cwd,
                check=False,
                capture_output=capture,
                text=True,
            )
        except OSError as exc:
            raise CommandNotFoundError(args[0]) from exc

        logger.debug("%s exited with %d", args[0], result.returncode)
        return CommandResult(returncode=result.returncode, stdout=result.stdout, stderr=result.stderr)
