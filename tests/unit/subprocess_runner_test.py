"""Tests for the subprocess-backed command runner."""

from pathlib import Path
from unittest.mock import patch

import pytest

from theme_tools.errors import CommandNotFoundError
from theme_tools.runner.subprocess_runner import SubprocessRunner


class TestSubprocessRunner:
    def test_missing_executable_raises(self, tmp_path: Path) -> None:
        with patch("theme_tools.runner.subprocess_runner.shutil.which", return_value=None):
            with pytest.raises(CommandNotFoundError) as excinfo:
                SubprocessRunner().run(["pnpm", "--version"], cwd=tmp_path)
        assert excinfo.value.command == "pnpm"

    def test_runs_resolved_executable(self, tmp_path: Path) -> None:
        with (
            patch("theme_tools.runner.subprocess_runner.shutil.which", return_value="/usr/bin/pnpm"),
            patch("theme_tools.runner.subprocess_runner.subprocess.run") as mock_run,
        ):
            mock_run.return_value.returncode = 0
            mock_run.return_value.stdout = "10.20.0\n"
            mock_run.return_value.stderr = ""
            result = SubprocessRunner().run(["pnpm", "--version"], cwd=tmp_path, capture=True)

        assert result.ok is True
        assert result.stdout == "10.20.0\n"
        args, kwargs = mock_run.call_args
        assert args[0] == ["/usr/bin/pnpm", "--version"]
        assert kwargs["cwd"] == tmp_path
        assert kwargs["capture_output"] is True

    def test_inherits_streams_by_default(self, tmp_path: Path) -> None:
        with (
            patch("theme_tools.runner.subprocess_runner.shutil.which", return_value="/usr/bin/npx"),
            patch("theme_tools.runner.subprocess_runner.subprocess.run") as mock_run,
        ):
            mock_run.return_value.returncode = 3
            mock_run.return_value.stdout = None
            mock_run.return_value.stderr = None
            result = SubprocessRunner().run(["npx", "stylelint", "theme.css"], cwd=tmp_path)

        assert result.returncode == 3
        assert mock_run.call_args.kwargs["capture_output"] is False

    def test_spawn_oserror_raises_command_not_found(self, tmp_path: Path) -> None:
        with (
            patch("theme_tools.runner.subprocess_runner.shutil.which", return_value="/usr/bin/npx"),
            patch("theme_tools.runner.subprocess_runner.subprocess.run", side_effect=PermissionError("denied")),
        ):
            with pytest.raises(CommandNotFoundError):
                SubprocessRunner().run(["npx", "stylelint"], cwd=tmp_path)

    def test_empty_command_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            SubprocessRunner().run([], cwd=tmp_path)
