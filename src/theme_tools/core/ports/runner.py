from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class CommandResult:
    returncode: int
    stdout: str | None = None
    stderr: str | None = None

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner(Protocol):
    def run(self, args: Sequence[str], cwd: Path, capture: bool = False) -> CommandResult:
        """Run ``args`` in ``cwd``.

        With ``capture`` the child's output is collected on the result, otherwise
        it inherits this process's streams. Raises ``CommandNotFoundError`` when
        the executable cannot be started.
        """
        ...
